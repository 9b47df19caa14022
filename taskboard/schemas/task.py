"""
Task Pydantic schemas.
"""

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import Field, field_validator

from taskboard.models.enums import ProjectStatus, TaskPriority, TaskStatus
from taskboard.schemas.base import CamelModel
from taskboard.schemas.validation import (
    blank_to_none,
    normalize_datetime,
    reject_null,
    require_datetime_input,
)

TaskSortField = Literal["createdAt", "updatedAt", "title", "dueDate", "priority"]


class TaskFields(CamelModel):
    """Fields accepted when creating a task (without the target project)."""
    
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    
    _description_present = field_validator("description", mode="before")(reject_null)
    _due_date_input = field_validator("due_date", mode="before")(require_datetime_input)
    _due_date_utc = field_validator("due_date")(normalize_datetime)


class TaskCreate(TaskFields):
    """Schema for creating a task; `projectId` names the target project."""
    
    project_id: UUID


class TaskUpdate(CamelModel):
    """
    Schema for partially updating a task.
    
    Only fields present in the request change. `description` and
    `dueDate` may be sent as null to clear them; the other fields may be
    omitted but not nulled.
    """
    
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    project_id: Optional[UUID] = None
    
    _not_nullable = field_validator("title", "status", "priority", "project_id", mode="before")(reject_null)
    _due_date_input = field_validator("due_date", mode="before")(require_datetime_input)
    _due_date_utc = field_validator("due_date")(normalize_datetime)


class ProjectRef(CamelModel):
    """The owning project as embedded in task responses."""
    
    id: UUID
    name: str
    status: ProjectStatus


class TaskSummary(CamelModel):
    """Task as listed inside a project."""
    
    id: UUID
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime] = None
    project_id: UUID
    created_at: datetime
    updated_at: datetime


class TaskRead(TaskSummary):
    """Schema for reading a task (API response)."""
    
    project: ProjectRef


class TaskQuery(CamelModel):
    """Query parameters of GET /tasks."""
    
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=1000)
    search: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    project_id: Optional[UUID] = Field(default=None, alias="projectId")
    sort_by: TaskSortField = Field(default="createdAt", alias="sortBy")
    sort_order: Literal["asc", "desc"] = Field(default="desc", alias="sortOrder")
    
    _blank_filters = field_validator("search", "status", "priority", "project_id", mode="before")(blank_to_none)
