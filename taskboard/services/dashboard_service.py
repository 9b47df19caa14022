"""
Dashboard aggregates for the caller's projects and tasks.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.models.enums import TaskStatus
from taskboard.repositories.project_repository import ProjectRepository
from taskboard.repositories.task_repository import TaskRepository
from taskboard.schemas.dashboard import DashboardStats
from taskboard.schemas.task import TaskRead
from taskboard.utils.time import utc_now

RECENT_TASKS_LIMIT = 5


class DashboardService:
    """Service computing dashboard statistics."""
    
    def __init__(self, db: AsyncSession):
        self.projects = ProjectRepository(db)
        self.tasks = TaskRepository(db)
    
    async def get_stats(self, owner_id: UUID) -> DashboardStats:
        project_count = await self.projects.count(owner_id)
        by_status = await self.tasks.count_by_status(owner_id)
        task_counts = {status.value: by_status.get(status, 0) for status in TaskStatus}
        overdue_count = await self.tasks.count_overdue(owner_id, utc_now())
        recent = await self.tasks.recent(owner_id, RECENT_TASKS_LIMIT)
        
        return DashboardStats(
            project_count=project_count,
            task_counts=task_counts,
            total_tasks=sum(task_counts.values()),
            overdue_count=overdue_count,
            recent_tasks=[TaskRead.model_validate(task) for task in recent],
        )
