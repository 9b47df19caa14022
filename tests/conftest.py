"""
Pytest configuration and shared fixtures.

Tests run against an in-memory SQLite database; the app's get_db
dependency is overridden so every request gets a session on it.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import taskboard.models  # noqa: F401  (registers tables on Base.metadata)
from taskboard.db.base import Base
from taskboard.db.session import get_db
from taskboard.main import app


# Test credentials
TEST_PASSWORD = "password123"
ALICE_EMAIL = "alice@example.com"
BOB_EMAIL = "bob@example.com"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "db: uses the in-memory database")


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    """A session for service and repository level tests."""
    async with session_maker() as session:
        yield session


@pytest.fixture
async def http(session_maker):
    """An HTTP client talking to the app in-process."""
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def auth_headers(http, email: str, password: str = TEST_PASSWORD, name: str = None) -> dict:
    """Register `email` and return Authorization headers for it."""
    response = await http.post("/auth/register", json={"email": email, "password": password, "name": name})
    assert response.status_code == 201, response.text
    response = await http.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    token = response.json()["data"]["accessToken"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def alice(http):
    return await auth_headers(http, ALICE_EMAIL, name="Alice")


@pytest.fixture
async def bob(http):
    return await auth_headers(http, BOB_EMAIL, name="Bob")


async def create_project(http, headers, **fields) -> dict:
    fields.setdefault("name", "Launch")
    response = await http.post("/projects", json=fields, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def create_task(http, headers, project_id: str, **fields) -> dict:
    fields.setdefault("title", "Design")
    response = await http.post(f"/projects/{project_id}/tasks", json=fields, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]
