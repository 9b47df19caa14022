"""
Helpers shared by the owner-scoped repositories.
"""

from sqlalchemy import case
from sqlalchemy.sql.elements import ColumnElement

from taskboard.models.enums import TaskPriority
from taskboard.models.task import Task

LIKE_ESCAPE = "\\"

PRIORITY_RANK = {
    TaskPriority.LOW: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.HIGH: 2,
}


def contains_pattern(term: str) -> str:
    """Build a LIKE pattern matching `term` as a literal substring."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def priority_rank() -> ColumnElement[int]:
    """Sortable rank of Task.priority (LOW < MEDIUM < HIGH)."""
    return case(PRIORITY_RANK, value=Task.priority)


def ordered(column: ColumnElement, sort_order: str) -> ColumnElement:
    return column.asc() if sort_order == "asc" else column.desc()
