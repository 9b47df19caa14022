"""
Models package.

Import all models here so they are registered with SQLAlchemy.
This file also makes it easy to import models from one place.
"""

from taskboard.models.enums import ProjectStatus, TaskPriority, TaskStatus
from taskboard.models.user import User
from taskboard.models.project import Project
from taskboard.models.task import Task

# Export all models
__all__ = [
    "ProjectStatus",
    "TaskPriority",
    "TaskStatus",
    "User",
    "Project",
    "Task",
]
