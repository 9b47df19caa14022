"""
Project router - API endpoints for projects.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.dependencies import get_current_user, get_db, query_model
from taskboard.schemas.base import ApiResponse, MessageRead, success_response
from taskboard.schemas.project import ProjectCreate, ProjectDetail, ProjectQuery, ProjectRead, ProjectUpdate
from taskboard.schemas.task import TaskFields, TaskRead
from taskboard.schemas.user import CurrentUser
from taskboard.services.project_service import ProjectService
from taskboard.services.task_service import TaskService

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=ApiResponse[List[ProjectRead]], response_model_exclude_unset=True)
async def list_projects(
    current_user: CurrentUser = Depends(get_current_user),
    params: ProjectQuery = Depends(query_model(ProjectQuery)),
    db: AsyncSession = Depends(get_db),
):
    """
    List the caller's projects with pagination, search, and filtering.
    
    Search matches name or description (case-insensitive).
    """
    service = ProjectService(db)
    projects, pagination = await service.list_projects(current_user.id, params)
    return success_response(projects, pagination)


@router.post(
    "",
    response_model=ApiResponse[ProjectRead],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    data: ProjectCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new project."""
    service = ProjectService(db)
    project = await service.create_project(current_user.id, data)
    await db.commit()
    return success_response(project)


@router.get("/{project_id}", response_model=ApiResponse[ProjectDetail], response_model_exclude_unset=True)
async def get_project(
    project_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a project with its tasks."""
    service = ProjectService(db)
    project = await service.get_project(current_user.id, project_id)
    return success_response(project)


@router.put("/{project_id}", response_model=ApiResponse[ProjectRead], response_model_exclude_unset=True)
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a project. Only the fields sent are changed."""
    service = ProjectService(db)
    project = await service.update_project(current_user.id, project_id, data)
    await db.commit()
    return success_response(project)


@router.delete("/{project_id}", response_model=ApiResponse[MessageRead], response_model_exclude_unset=True)
async def delete_project(
    project_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a project and all of its tasks."""
    service = ProjectService(db)
    await service.delete_project(current_user.id, project_id)
    await db.commit()
    return success_response({"message": "Project deleted"})


@router.post(
    "/{project_id}/tasks",
    response_model=ApiResponse[TaskRead],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_project_task(
    project_id: UUID,
    data: TaskFields,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a task inside a project (the project comes from the URL)."""
    service = TaskService(db)
    task = await service.create_project_task(current_user.id, project_id, data)
    await db.commit()
    return success_response(task)
