"""
Schemas package.

Import all schemas here for easy access.
"""

from taskboard.schemas.base import ApiResponse, MessageRead, PaginationMeta
from taskboard.schemas.user import CurrentUser, LoginRequest, LoginResponse, RegisterRequest, UserRead
from taskboard.schemas.project import ProjectCreate, ProjectDetail, ProjectQuery, ProjectRead, ProjectUpdate
from taskboard.schemas.task import TaskCreate, TaskFields, TaskQuery, TaskRead, TaskSummary, TaskUpdate
from taskboard.schemas.dashboard import DashboardStats
from taskboard.schemas.health import HealthStatus
from taskboard.schemas.validation import ValidationResult, validate_input

__all__ = [
    # Envelope
    "ApiResponse", "MessageRead", "PaginationMeta",
    # User
    "CurrentUser", "LoginRequest", "LoginResponse", "RegisterRequest", "UserRead",
    # Project
    "ProjectCreate", "ProjectDetail", "ProjectQuery", "ProjectRead", "ProjectUpdate",
    # Task
    "TaskCreate", "TaskFields", "TaskQuery", "TaskRead", "TaskSummary", "TaskUpdate",
    # Dashboard
    "DashboardStats",
    # Health
    "HealthStatus",
    # Validation
    "ValidationResult", "validate_input",
]
