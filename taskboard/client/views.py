"""
Load states of list and detail views.

A view is exactly one of LOADING, ERROR, EMPTY or READY. A failed fetch
and a fetch that legitimately returned nothing are never shown the same way.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional

from taskboard.client.api_client import ApiError, Page


class LoadState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


@dataclass
class ListView:
    noun: str = "items"
    state: LoadState = LoadState.LOADING
    items: List[Dict[str, Any]] = field(default_factory=list)
    pagination: Dict[str, int] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def message(self) -> Optional[str]:
        if self.state == LoadState.LOADING:
            return f"Loading {self.noun}..."
        if self.state == LoadState.ERROR:
            return f"Failed to load {self.noun}: {self.error}"
        if self.state == LoadState.EMPTY:
            return f"No {self.noun} found"
        return None


async def load_view(fetch: Callable[[], Awaitable[Page]], noun: str = "items") -> ListView:
    """Run `fetch` and classify the outcome."""
    try:
        page = await fetch()
    except ApiError as exc:
        return ListView(noun=noun, state=LoadState.ERROR, error=exc.message)

    state = LoadState.READY if page.items else LoadState.EMPTY
    return ListView(noun=noun, state=state, items=page.items, pagination=page.pagination)
