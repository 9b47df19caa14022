"""
Health check schema.
"""

from typing import Optional

from taskboard.schemas.base import CamelModel


class HealthStatus(CamelModel):
    """Liveness plus database and migration state."""
    
    api_ok: bool
    db_ok: bool
    migrations_ok: bool
    migrations_current: Optional[str] = None
    migrations_head: Optional[str] = None
