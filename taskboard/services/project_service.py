"""
Project business logic service.
"""

from typing import List, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.errors import not_found
from taskboard.models.project import Project
from taskboard.repositories.project_repository import ProjectRepository
from taskboard.schemas.base import PaginationMeta, pagination_meta
from taskboard.schemas.project import ProjectCreate, ProjectQuery, ProjectUpdate

PROJECT_NOT_FOUND = "Project not found"


class ProjectService:
    """Service for project business logic. Every call is scoped to `owner_id`."""
    
    def __init__(self, db: AsyncSession):
        self.repository = ProjectRepository(db)
    
    async def list_projects(
        self,
        owner_id: UUID,
        params: ProjectQuery,
    ) -> Tuple[List[Project], PaginationMeta]:
        """List one page of the owner's projects with pagination metadata."""
        projects, total = await self.repository.list(owner_id, params)
        return projects, pagination_meta(total, params.page, params.limit)
    
    async def get_project(self, owner_id: UUID, project_id: UUID) -> Project:
        """Get a project with its tasks, or raise not-found."""
        project = await self.repository.get_by_id(owner_id, project_id, with_tasks=True)
        if project is None:
            not_found("PROJECT_NOT_FOUND", PROJECT_NOT_FOUND)
        return project
    
    async def create_project(self, owner_id: UUID, data: ProjectCreate) -> Project:
        """Create a new project owned by the caller."""
        return await self.repository.create(owner_id, data)
    
    async def update_project(
        self,
        owner_id: UUID,
        project_id: UUID,
        data: ProjectUpdate,
    ) -> Project:
        """Partially update a project."""
        project = await self.repository.update(owner_id, project_id, data)
        if project is None:
            not_found("PROJECT_NOT_FOUND", PROJECT_NOT_FOUND)
        return project
    
    async def delete_project(self, owner_id: UUID, project_id: UUID) -> None:
        """Delete a project and, with it, all of its tasks."""
        if not await self.repository.delete(owner_id, project_id):
            not_found("PROJECT_NOT_FOUND", PROJECT_NOT_FOUND)
