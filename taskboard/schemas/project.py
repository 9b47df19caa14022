"""
Project Pydantic schemas.
"""

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import Field, field_validator

from taskboard.models.enums import ProjectStatus
from taskboard.schemas.base import CamelModel
from taskboard.schemas.task import TaskSummary
from taskboard.schemas.validation import blank_to_none, reject_null

ProjectSortField = Literal["createdAt", "updatedAt", "name"]


class ProjectCreate(CamelModel):
    """Schema for creating a new project. Status defaults to ACTIVE."""
    
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: Optional[ProjectStatus] = None
    
    _description_present = field_validator("description", mode="before")(reject_null)


class ProjectUpdate(CamelModel):
    """
    Schema for partially updating a project.
    
    Only fields present in the request change; `description` may be
    sent as null to clear it.
    """
    
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: Optional[ProjectStatus] = None
    
    _not_nullable = field_validator("name", "status", mode="before")(reject_null)


class ProjectRead(CamelModel):
    """Schema for reading a project (API response)."""
    
    id: UUID
    name: str
    description: Optional[str] = None
    status: ProjectStatus
    owner_id: UUID
    task_count: int = 0
    created_at: datetime
    updated_at: datetime


class ProjectDetail(ProjectRead):
    """A project with its tasks, newest first."""
    
    tasks: List[TaskSummary] = []


class ProjectQuery(CamelModel):
    """Query parameters of GET /projects."""
    
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=1000)
    search: Optional[str] = None
    status: Optional[ProjectStatus] = None
    sort_by: ProjectSortField = Field(default="createdAt", alias="sortBy")
    sort_order: Literal["asc", "desc"] = Field(default="desc", alias="sortOrder")
    
    _blank_filters = field_validator("search", "status", mode="before")(blank_to_none)
