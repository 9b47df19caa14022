"""
Dashboard Pydantic schemas.
"""

from typing import Dict, List

from taskboard.schemas.base import CamelModel
from taskboard.schemas.task import TaskRead


class DashboardStats(CamelModel):
    """Aggregate counts for the caller's projects and tasks."""
    
    project_count: int
    task_counts: Dict[str, int]
    total_tasks: int
    overdue_count: int
    recent_tasks: List[TaskRead]
