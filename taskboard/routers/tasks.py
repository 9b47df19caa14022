"""
Task router - API endpoints for tasks.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.dependencies import get_current_user, get_db, query_model
from taskboard.schemas.base import ApiResponse, MessageRead, success_response
from taskboard.schemas.task import TaskCreate, TaskQuery, TaskRead, TaskUpdate
from taskboard.schemas.user import CurrentUser
from taskboard.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=ApiResponse[List[TaskRead]], response_model_exclude_unset=True)
async def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    params: TaskQuery = Depends(query_model(TaskQuery)),
    db: AsyncSession = Depends(get_db),
):
    """
    List the caller's tasks with pagination and filters.
    
    Filters: search, status, priority, projectId.
    """
    service = TaskService(db)
    tasks, pagination = await service.list_tasks(current_user.id, params)
    return success_response(tasks, pagination)


@router.post(
    "",
    response_model=ApiResponse[TaskRead],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    data: TaskCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new task in the project named by `projectId`."""
    service = TaskService(db)
    task = await service.create_task(current_user.id, data)
    await db.commit()
    return success_response(task)


@router.get("/{task_id}", response_model=ApiResponse[TaskRead], response_model_exclude_unset=True)
async def get_task(
    task_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a task by ID."""
    service = TaskService(db)
    task = await service.get_task(current_user.id, task_id)
    return success_response(task)


@router.put("/{task_id}", response_model=ApiResponse[TaskRead], response_model_exclude_unset=True)
async def update_task(
    task_id: UUID,
    data: TaskUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a task. Only the fields sent are changed."""
    service = TaskService(db)
    task = await service.update_task(current_user.id, task_id, data)
    await db.commit()
    return success_response(task)


@router.delete("/{task_id}", response_model=ApiResponse[MessageRead], response_model_exclude_unset=True)
async def delete_task(
    task_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a task."""
    service = TaskService(db)
    await service.delete_task(current_user.id, task_id)
    await db.commit()
    return success_response({"message": "Task deleted"})
