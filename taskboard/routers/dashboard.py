"""
Dashboard router.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.dependencies import get_current_user, get_db
from taskboard.schemas.base import ApiResponse, success_response
from taskboard.schemas.dashboard import DashboardStats
from taskboard.schemas.user import CurrentUser
from taskboard.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=ApiResponse[DashboardStats], response_model_exclude_unset=True)
async def get_dashboard(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Project count, task counts by status, overdue count and recent tasks."""
    stats = await DashboardService(db).get_stats(current_user.id)
    return success_response(stats)
