"""HTTP tests for registration, login and session endpoints."""

from datetime import timedelta

import pytest

from conftest import TEST_PASSWORD, auth_headers
from taskboard.core.security import create_access_token, decode_token, hash_password, verify_password

pytestmark = pytest.mark.db


async def test_register_returns_user_without_password(http):
    response = await http.post(
        "/auth/register",
        json={"email": "Carol@Example.com", "password": TEST_PASSWORD, "name": "Carol"},
    )

    assert response.status_code == 201
    user = response.json()["data"]
    assert user["email"] == "carol@example.com"
    assert user["name"] == "Carol"
    assert {"id", "createdAt"} <= set(user)
    assert not any("password" in key.lower() for key in user)


async def test_register_duplicate_email_any_case(http):
    await http.post("/auth/register", json={"email": "dave@example.com", "password": TEST_PASSWORD})

    response = await http.post("/auth/register", json={"email": "DAVE@example.com", "password": TEST_PASSWORD})

    assert response.status_code == 409
    assert response.json() == {"success": False, "error": "User with this email already exists"}


async def test_register_validation(http):
    response = await http.post("/auth/register", json={"email": "nope", "password": "short"})

    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"email", "password"}


async def test_login_returns_token_and_user(http):
    await http.post("/auth/register", json={"email": "erin@example.com", "password": TEST_PASSWORD, "name": "Erin"})

    response = await http.post("/auth/login", json={"email": "ERIN@example.com", "password": TEST_PASSWORD})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["tokenType"] == "bearer"
    assert data["user"]["email"] == "erin@example.com"
    assert decode_token(data["accessToken"])["sub"] == data["user"]["id"]


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "frank@example.com", "password": "wrong-password"},
        {"email": "nobody@example.com", "password": TEST_PASSWORD},
        {"email": "not-an-email", "password": TEST_PASSWORD},
        {"email": "frank@example.com"},
        {},
    ],
)
async def test_login_failures_are_generic(http, payload):
    await http.post("/auth/register", json={"email": "frank@example.com", "password": TEST_PASSWORD})

    response = await http.post("/auth/login", json=payload)

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid email or password"}


async def test_me_returns_current_user(http):
    headers = await auth_headers(http, "gina@example.com", name="Gina")

    response = await http.get("/auth/me", headers=headers)

    assert response.status_code == 200
    assert response.json()["data"]["email"] == "gina@example.com"
    assert response.json()["data"]["name"] == "Gina"


async def test_me_requires_token(http):
    assert (await http.get("/auth/me")).status_code == 401


async def test_expired_token_is_rejected(http):
    headers = await auth_headers(http, "hank@example.com")
    user_id = (await http.get("/auth/me", headers=headers)).json()["data"]["id"]
    expired = create_access_token({"sub": user_id}, expires_delta=timedelta(seconds=-1))

    response = await http.get("/auth/me", headers={"Authorization": f"Bearer {expired}"})

    assert response.status_code == 401


async def test_token_for_unknown_user_is_rejected(http):
    token = create_access_token({"sub": "00000000-0000-0000-0000-000000000000"})

    response = await http.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


async def test_refresh_issues_new_token(http):
    headers = await auth_headers(http, "ivy@example.com")

    response = await http.post("/auth/refresh", headers=headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user"]["email"] == "ivy@example.com"
    me = await http.get("/auth/me", headers={"Authorization": f"Bearer {data['accessToken']}"})
    assert me.status_code == 200


@pytest.mark.unit
def test_password_hashing():
    hashed = hash_password(TEST_PASSWORD)

    assert hashed != TEST_PASSWORD
    assert verify_password(TEST_PASSWORD, hashed)
    assert not verify_password("something-else", hashed)


async def test_mixed_case_registration_logs_in_with_lowercase(http):
    await http.post("/auth/register", json={"email": "User@Example.com", "password": TEST_PASSWORD})

    response = await http.post("/auth/login", json={"email": "user@example.com", "password": TEST_PASSWORD})

    assert response.status_code == 200
    assert response.json()["data"]["user"]["email"] == "user@example.com"
