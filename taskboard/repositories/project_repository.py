"""
Project repository - owner-scoped database operations for Project.

Every statement carries `Project.owner_id == owner_id` in its WHERE
clause, so a project owned by someone else behaves exactly like a
project that does not exist.
"""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from taskboard.models.project import Project
from taskboard.models.task import Task
from taskboard.repositories.query_helpers import LIKE_ESCAPE, contains_pattern, ordered
from taskboard.schemas.project import ProjectCreate, ProjectQuery, ProjectUpdate
from taskboard.utils.time import utc_now

SORT_COLUMNS = {
    "createdAt": Project.created_at,
    "updatedAt": Project.updated_at,
    "name": Project.name,
}


class ProjectRepository:
    """Repository for Project database operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    def _filters(self, owner_id: UUID, params: ProjectQuery) -> list:
        conditions = [Project.owner_id == owner_id]
        if params.status is not None:
            conditions.append(Project.status == params.status)
        if params.search:
            pattern = contains_pattern(params.search)
            conditions.append(
                or_(
                    Project.name.ilike(pattern, escape=LIKE_ESCAPE),
                    Project.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        return conditions
    
    async def list(self, owner_id: UUID, params: ProjectQuery) -> Tuple[List[Project], int]:
        """List one page of the owner's projects and the total match count."""
        conditions = self._filters(owner_id, params)
        
        query = (
            select(Project)
            .where(*conditions)
            .order_by(
                ordered(SORT_COLUMNS[params.sort_by], params.sort_order),
                ordered(Project.id, params.sort_order),
            )
            .offset((params.page - 1) * params.limit)
            .limit(params.limit)
        )
        result = await self.db.execute(query)
        projects = list(result.scalars().all())
        
        total = await self.db.scalar(
            select(func.count(Project.id)).where(*conditions)
        )
        return projects, total or 0
    
    async def get_by_id(
        self,
        owner_id: UUID,
        project_id: UUID,
        with_tasks: bool = False,
    ) -> Optional[Project]:
        """Get a project by ID for a specific owner."""
        query = (
            select(Project)
            .where(Project.id == project_id, Project.owner_id == owner_id)
            .execution_options(populate_existing=True)
        )
        if with_tasks:
            query = query.options(selectinload(Project.tasks))
        result = await self.db.execute(query)
        return result.scalar_one_or_none()
    
    async def exists(self, owner_id: UUID, project_id: UUID) -> bool:
        """Whether the owner has a project with this ID."""
        found = await self.db.scalar(
            select(Project.id).where(Project.id == project_id, Project.owner_id == owner_id)
        )
        return found is not None
    
    async def create(self, owner_id: UUID, data: ProjectCreate) -> Project:
        """Create a new project owned by `owner_id`."""
        project = Project(
            owner_id=owner_id,
            **data.model_dump(exclude_none=True),
        )
        self.db.add(project)
        await self.db.flush()
        await self.db.refresh(project)
        return project
    
    async def update(
        self,
        owner_id: UUID,
        project_id: UUID,
        data: ProjectUpdate,
    ) -> Optional[Project]:
        """
        Apply the fields present in `data` to the owner's project.
        
        The owner check is part of the UPDATE itself. Returns None when no
        project matches (id, owner). An empty update leaves the row untouched.
        """
        update_data = data.model_dump(exclude_unset=True)
        if not update_data:
            return await self.get_by_id(owner_id, project_id)
        
        update_data["updated_at"] = utc_now()
        result = await self.db.execute(
            update(Project)
            .where(Project.id == project_id, Project.owner_id == owner_id)
            .values(**update_data)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            return None
        return await self.get_by_id(owner_id, project_id)
    
    async def delete(self, owner_id: UUID, project_id: UUID) -> bool:
        """
        Delete the owner's project and all of its tasks.
        
        Both statements run in the caller's transaction and select rows
        through the owner predicate.
        """
        owned = select(Project.id).where(
            Project.id == project_id,
            Project.owner_id == owner_id,
        )
        await self.db.execute(
            delete(Task)
            .where(Task.project_id.in_(owned))
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(
            delete(Project)
            .where(Project.id == project_id, Project.owner_id == owner_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0
    
    async def count(self, owner_id: UUID) -> int:
        """Number of projects the owner has."""
        total = await self.db.scalar(
            select(func.count(Project.id)).where(Project.owner_id == owner_id)
        )
        return total or 0
