"""
Kanban board: status columns with optimistic moves and rollback.

Any status can move to any other status. A move updates the local view
at once and marks the task pending, then asks the server to persist it:

    STABLE --move--> PENDING(task_id, snapshot) --ok--> STABLE
                                                --fail--> ERROR(message)

On failure the whole task set is restored to the last server-confirmed
snapshot and one error notification is shown, cleared after
ERROR_DISMISS_SECONDS or by dismiss_error(). Ordering inside a column is
never stored; it is recomputed from the task set on every read.

Two moves of the same task in flight are not coordinated: whichever
resolves last decides the final pending/error state.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from taskboard.models.enums import TaskPriority, TaskStatus
from taskboard.schemas.task import TaskSummary
from taskboard.utils.time import as_utc, utc_now

logger = logging.getLogger(__name__)

ERROR_DISMISS_SECONDS = 5.0

PRIORITY_ORDER = {
    TaskPriority.HIGH: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.LOW: 2,
}


@dataclass(frozen=True)
class Column:
    status: TaskStatus
    title: str


COLUMNS: Tuple[Column, ...] = (
    Column(TaskStatus.TODO, "To Do"),
    Column(TaskStatus.IN_PROGRESS, "In Progress"),
    Column(TaskStatus.DONE, "Done"),
)


@dataclass(frozen=True)
class KanbanTask:
    """The board's view of a task."""

    id: str
    title: str
    status: TaskStatus
    priority: TaskPriority
    created_at: datetime
    description: Optional[str] = None
    due_date: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "KanbanTask":
        task = TaskSummary.model_validate(data)
        return cls(
            id=str(task.id),
            title=task.title,
            status=task.status,
            priority=task.priority,
            created_at=task.created_at,
            description=task.description,
            due_date=task.due_date,
        )

    def with_status(self, status: TaskStatus) -> "KanbanTask":
        return replace(self, status=status)

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        if self.due_date is None or self.status == TaskStatus.DONE:
            return False
        return as_utc(self.due_date) < (now or utc_now())


def column_order(tasks: Iterable[KanbanTask], status: TaskStatus) -> List[KanbanTask]:
    """Tasks of one column: HIGH before MEDIUM before LOW, newest first within a priority."""
    return sorted(
        (task for task in tasks if task.status == status),
        key=lambda task: (PRIORITY_ORDER[task.priority], -as_utc(task.created_at).timestamp()),
    )


class BoardPhase(str, Enum):
    STABLE = "stable"
    PENDING = "pending"
    ERROR = "error"


@dataclass(frozen=True)
class BoardState:
    phase: BoardPhase
    task_id: Optional[str] = None
    snapshot: Tuple[KanbanTask, ...] = ()
    message: Optional[str] = None


UpdateStatus = Callable[[str, TaskStatus], Awaitable[Any]]
Settled = Callable[[], Awaitable[None]]


class KanbanBoard:
    """
    Client-side state of a project's kanban board.

    Args:
        tasks: The server's current tasks
        update_status: Persists a status change (TaskboardClient.set_task_status
            fits). Any exception it raises reverts the move; cancellation
            reverts and propagates
        on_settled: Awaited after a successful move so dependent views
            (dashboard counts, the project query) can refresh
        dismiss_after: Seconds before an error notification clears itself
    """

    def __init__(
        self,
        tasks: Iterable[KanbanTask],
        update_status: UpdateStatus,
        on_settled: Optional[Settled] = None,
        dismiss_after: float = ERROR_DISMISS_SECONDS,
    ):
        self._confirmed: Tuple[KanbanTask, ...] = tuple(tasks)
        self._tasks: Tuple[KanbanTask, ...] = self._confirmed
        self._update_status = update_status
        self._on_settled = on_settled
        self._dismiss_after = dismiss_after
        self._dismiss_handle: Optional[asyncio.TimerHandle] = None
        self._error_listeners: List[Callable[[str], None]] = []
        self.pending_task_id: Optional[str] = None
        self.error: Optional[str] = None

    @property
    def tasks(self) -> Tuple[KanbanTask, ...]:
        """The task set as currently displayed (may include an optimistic move)."""
        return self._tasks

    @property
    def confirmed_tasks(self) -> Tuple[KanbanTask, ...]:
        return self._confirmed

    @property
    def state(self) -> BoardState:
        if self.pending_task_id is not None:
            return BoardState(BoardPhase.PENDING, task_id=self.pending_task_id, snapshot=self._confirmed)
        if self.error is not None:
            return BoardState(BoardPhase.ERROR, message=self.error)
        return BoardState(BoardPhase.STABLE)

    def sync(self, tasks: Iterable[KanbanTask]) -> None:
        """Replace the board with freshly fetched server data."""
        self._confirmed = tuple(tasks)
        self._tasks = self._confirmed

    def column(self, status: TaskStatus) -> List[KanbanTask]:
        return column_order(self._tasks, status)

    def columns(self) -> Dict[TaskStatus, List[KanbanTask]]:
        return {column.status: self.column(column.status) for column in COLUMNS}

    def on_error(self, listener: Callable[[str], None]) -> None:
        """Register a callback invoked once per error notification."""
        self._error_listeners.append(listener)

    async def move(self, task_id: str, destination: Optional[str]) -> bool:
        """
        Handle a drop of `task_id` onto the column `destination`.

        Returns False for no-ops (dropped outside any column, unknown task,
        or the task's own column), True when a status change was attempted.
        """
        if destination is None:
            return False
        try:
            new_status = TaskStatus(destination)
        except ValueError:
            return False

        task = next((t for t in self._tasks if t.id == task_id), None)
        if task is None or task.status == new_status:
            return False

        self.pending_task_id = task_id
        self._tasks = tuple(t.with_status(new_status) if t.id == task_id else t for t in self._tasks)

        try:
            await self._update_status(task_id, new_status)
        except asyncio.CancelledError:
            self._revert()
            raise
        except Exception as exc:
            logger.warning("Moving task %s to %s failed: %r", task_id, new_status.value, exc)
            self._revert()
            reason = str(exc) or type(exc).__name__
            self._show_error(f"Failed to move task: {reason}. The board has been reverted.")
            return True

        self.pending_task_id = None
        self._confirmed = tuple(t.with_status(new_status) if t.id == task_id else t for t in self._confirmed)
        self._tasks = tuple(t.with_status(new_status) if t.id == task_id else t for t in self._tasks)
        self.dismiss_error()
        if self._on_settled is not None:
            await self._on_settled()
        return True

    def _revert(self) -> None:
        """Restore the last server-confirmed task set."""
        self._tasks = self._confirmed
        self.pending_task_id = None

    def dismiss_error(self) -> None:
        if self._dismiss_handle is not None:
            self._dismiss_handle.cancel()
            self._dismiss_handle = None
        self.error = None

    def _show_error(self, message: str) -> None:
        self.dismiss_error()
        self.error = message
        for listener in self._error_listeners:
            listener(message)
        loop = asyncio.get_running_loop()
        self._dismiss_handle = loop.call_later(self._dismiss_after, self.dismiss_error)
