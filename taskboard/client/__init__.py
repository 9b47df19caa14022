from taskboard.client.api_client import ApiError, Page, TaskboardClient
from taskboard.client.kanban import COLUMNS, BoardPhase, KanbanBoard, KanbanTask, column_order
from taskboard.client.views import ListView, LoadState, load_view

__all__ = [
    "ApiError",
    "Page",
    "TaskboardClient",
    "COLUMNS",
    "BoardPhase",
    "KanbanBoard",
    "KanbanTask",
    "column_order",
    "ListView",
    "LoadState",
    "load_view",
]
