"""
Project model.

A container of tasks, owned by exactly one user.
"""

import uuid
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskboard.models.base_model import TimestampedModel
from taskboard.models.enums import ProjectStatus

if TYPE_CHECKING:
    from taskboard.models.task import Task
    from taskboard.models.user import User


class Project(TimestampedModel):
    """
    Project table.
    
    owner_id never changes after creation. Deleting a project deletes
    its tasks. `task_count` is a read-only column property attached in
    taskboard.models.task.
    """
    
    __tablename__ = "projects"
    
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    
    status: Mapped[ProjectStatus] = mapped_column(
        Enum(ProjectStatus, name="project_status", native_enum=False, length=20),
        nullable=False,
        default=ProjectStatus.ACTIVE,
        server_default=ProjectStatus.ACTIVE.value,
    )
    
    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    
    # Relationships
    owner: Mapped["User"] = relationship(
        "User",
        back_populates="projects",
    )
    
    tasks: Mapped[List["Task"]] = relationship(
        "Task",
        back_populates="project",
        order_by="Task.created_at.desc()",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
