"""Health check router."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from alembic.config import Config
from alembic.script import ScriptDirectory
from alembic.util import CommandError
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.db.session import get_db
from taskboard.schemas.base import ApiResponse, success_response
from taskboard.schemas.health import HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter()

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@lru_cache(maxsize=1)
def migrations_head() -> Optional[str]:
    """Newest revision in the migration scripts, or None when they are not shipped."""
    cfg_path = PROJECT_ROOT / "alembic.ini"
    script_location = PROJECT_ROOT / "alembic"
    if not cfg_path.exists() or not script_location.exists():
        return None

    config = Config(str(cfg_path))
    config.set_main_option("script_location", str(script_location))
    try:
        return ScriptDirectory.from_config(config).get_current_head()
    except CommandError:
        logger.warning("Could not resolve migration head from %s", script_location)
        return None


async def applied_revision(db: AsyncSession) -> Optional[str]:
    try:
        result = await db.execute(text("SELECT version_num FROM alembic_version"))
    except SQLAlchemyError:
        await db.rollback()
        return None
    return result.scalar_one_or_none()


@router.get("/health", response_model=ApiResponse[HealthStatus], response_model_exclude_unset=True)
async def health_check(db: AsyncSession = Depends(get_db)):
    """Liveness with database reachability and migration revision checks. No auth."""
    db_ok = True
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Health check could not reach the database")
        db_ok = False

    current = await applied_revision(db) if db_ok else None
    head = migrations_head()
    return success_response(
        HealthStatus(
            api_ok=True,
            db_ok=db_ok,
            migrations_ok=bool(current and current == head),
            migrations_current=current,
            migrations_head=head,
        )
    )
