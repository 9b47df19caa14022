"""
Task repository - owner-scoped database operations for Task.

Tasks have no owner column; ownership is the owner of the task's
project, so every statement is joined or filtered through Project.
"""

from datetime import datetime
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from taskboard.models.enums import TaskStatus
from taskboard.models.project import Project
from taskboard.models.task import Task
from taskboard.repositories.query_helpers import LIKE_ESCAPE, contains_pattern, ordered, priority_rank
from taskboard.schemas.task import TaskCreate, TaskQuery, TaskUpdate
from taskboard.utils.time import utc_now

SORT_COLUMNS = {
    "createdAt": Task.created_at,
    "updatedAt": Task.updated_at,
    "title": Task.title,
    "dueDate": Task.due_date,
}


def _owned_project_ids(owner_id: UUID):
    return select(Project.id).where(Project.owner_id == owner_id)


class TaskRepository:
    """Repository for Task database operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    def _scoped(self, owner_id: UUID):
        """SELECT of tasks whose project belongs to `owner_id`, with the project loaded."""
        return (
            select(Task)
            .join(Task.project)
            .where(Project.owner_id == owner_id)
            .options(contains_eager(Task.project))
            .execution_options(populate_existing=True)
        )
    
    def _filters(self, params: TaskQuery) -> list:
        conditions = []
        if params.status is not None:
            conditions.append(Task.status == params.status)
        if params.priority is not None:
            conditions.append(Task.priority == params.priority)
        if params.project_id is not None:
            conditions.append(Task.project_id == params.project_id)
        if params.search:
            pattern = contains_pattern(params.search)
            conditions.append(
                or_(
                    Task.title.ilike(pattern, escape=LIKE_ESCAPE),
                    Task.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        return conditions
    
    async def list(self, owner_id: UUID, params: TaskQuery) -> Tuple[List[Task], int]:
        """List one page of the owner's tasks and the total match count."""
        conditions = self._filters(params)
        
        if params.sort_by == "priority":
            sort_column = priority_rank()
        else:
            sort_column = SORT_COLUMNS[params.sort_by]
        
        query = (
            self._scoped(owner_id)
            .where(*conditions)
            .order_by(
                ordered(sort_column, params.sort_order),
                ordered(Task.id, params.sort_order),
            )
            .offset((params.page - 1) * params.limit)
            .limit(params.limit)
        )
        result = await self.db.execute(query)
        tasks = list(result.scalars().all())
        
        total = await self.db.scalar(
            select(func.count(Task.id))
            .select_from(Task)
            .join(Task.project)
            .where(Project.owner_id == owner_id, *conditions)
        )
        return tasks, total or 0
    
    async def get_by_id(self, owner_id: UUID, task_id: UUID) -> Optional[Task]:
        """Get a task by ID if its project belongs to `owner_id`."""
        result = await self.db.execute(
            self._scoped(owner_id).where(Task.id == task_id)
        )
        return result.scalar_one_or_none()
    
    async def create(self, data: TaskCreate) -> Task:
        """
        Insert a task into `data.project_id`.
        
        The caller must already have verified that the project belongs to
        the acting user.
        """
        task = Task(**data.model_dump(exclude_none=True))
        self.db.add(task)
        await self.db.flush()
        return task
    
    async def update(
        self,
        owner_id: UUID,
        task_id: UUID,
        data: TaskUpdate,
    ) -> bool:
        """
        Apply the fields present in `data` to the owner's task.
        
        The UPDATE matches only if the task's current project belongs to
        the owner and, when `project_id` is being changed, the target
        project does too. Returns whether a row was updated.
        """
        update_data = data.model_dump(exclude_unset=True)
        if not update_data:
            return await self.get_by_id(owner_id, task_id) is not None
        
        update_data["updated_at"] = utc_now()
        statement = update(Task).where(
            Task.id == task_id,
            Task.project_id.in_(_owned_project_ids(owner_id)),
        )
        if "project_id" in update_data:
            statement = statement.where(
                select(Project.id)
                .where(Project.id == update_data["project_id"], Project.owner_id == owner_id)
                .exists()
            )
        result = await self.db.execute(
            statement.values(**update_data).execution_options(synchronize_session=False)
        )
        return result.rowcount > 0
    
    async def delete(self, owner_id: UUID, task_id: UUID) -> bool:
        """Delete the owner's task. Returns whether a row was deleted."""
        result = await self.db.execute(
            delete(Task)
            .where(
                Task.id == task_id,
                Task.project_id.in_(_owned_project_ids(owner_id)),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0
    
    async def count_by_status(self, owner_id: UUID) -> Dict[TaskStatus, int]:
        """Task counts per status across the owner's projects."""
        result = await self.db.execute(
            select(Task.status, func.count(Task.id))
            .select_from(Task)
            .join(Task.project)
            .where(Project.owner_id == owner_id)
            .group_by(Task.status)
        )
        return {status: count for status, count in result.all()}
    
    async def count_overdue(self, owner_id: UUID, now: datetime) -> int:
        """Tasks past their due date that are not done."""
        total = await self.db.scalar(
            select(func.count(Task.id))
            .select_from(Task)
            .join(Task.project)
            .where(
                Project.owner_id == owner_id,
                Task.due_date.is_not(None),
                Task.due_date < now,
                Task.status != TaskStatus.DONE,
            )
        )
        return total or 0
    
    async def recent(self, owner_id: UUID, limit: int = 5) -> List[Task]:
        """The owner's most recently updated tasks."""
        result = await self.db.execute(
            self._scoped(owner_id)
            .order_by(Task.updated_at.desc(), Task.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())
