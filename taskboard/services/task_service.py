"""
Task business logic service.
"""

from typing import List, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.errors import not_found
from taskboard.models.task import Task
from taskboard.repositories.project_repository import ProjectRepository
from taskboard.repositories.task_repository import TaskRepository
from taskboard.schemas.base import PaginationMeta, pagination_meta
from taskboard.schemas.task import TaskCreate, TaskFields, TaskQuery, TaskUpdate

TASK_NOT_FOUND = "Task not found"
PROJECT_NOT_FOUND = "Project not found"
TARGET_PROJECT_NOT_FOUND = "Target project not found"


class TaskService:
    """
    Service for task business logic.
    
    A task is visible to a user only through a project that user owns.
    """
    
    def __init__(self, db: AsyncSession):
        self.repository = TaskRepository(db)
        self.projects = ProjectRepository(db)
    
    async def list_tasks(
        self,
        owner_id: UUID,
        params: TaskQuery,
    ) -> Tuple[List[Task], PaginationMeta]:
        """List one page of the owner's tasks with pagination metadata."""
        tasks, total = await self.repository.list(owner_id, params)
        return tasks, pagination_meta(total, params.page, params.limit)
    
    async def get_task(self, owner_id: UUID, task_id: UUID) -> Task:
        """Get a task by ID, or raise not-found."""
        task = await self.repository.get_by_id(owner_id, task_id)
        if task is None:
            not_found("TASK_NOT_FOUND", TASK_NOT_FOUND)
        return task
    
    async def create_task(self, owner_id: UUID, data: TaskCreate) -> Task:
        """Create a task in `data.project_id`, which must belong to the caller."""
        if not await self.projects.exists(owner_id, data.project_id):
            not_found("PROJECT_NOT_FOUND", PROJECT_NOT_FOUND)
        
        task = await self.repository.create(data)
        return await self.get_task(owner_id, task.id)
    
    async def create_project_task(
        self,
        owner_id: UUID,
        project_id: UUID,
        data: TaskFields,
    ) -> Task:
        """Create a task in the project named by the URL."""
        payload = TaskCreate(
            project_id=project_id,
            **data.model_dump(exclude_unset=True),
        )
        return await self.create_task(owner_id, payload)
    
    async def update_task(self, owner_id: UUID, task_id: UUID, data: TaskUpdate) -> Task:
        """
        Partially update a task.
        
        Moving the task to another project requires owning that project
        too; otherwise nothing changes and "Target project not found" is
        raised.
        """
        current = await self.get_task(owner_id, task_id)
        
        if data.project_id is not None and data.project_id != current.project_id:
            if not await self.projects.exists(owner_id, data.project_id):
                not_found("TARGET_PROJECT_NOT_FOUND", TARGET_PROJECT_NOT_FOUND)
        
        if not await self.repository.update(owner_id, task_id, data):
            not_found("TASK_NOT_FOUND", TASK_NOT_FOUND)
        return await self.get_task(owner_id, task_id)
    
    async def delete_task(self, owner_id: UUID, task_id: UUID) -> None:
        """Delete a task."""
        if not await self.repository.delete(owner_id, task_id):
            not_found("TASK_NOT_FOUND", TASK_NOT_FOUND)
