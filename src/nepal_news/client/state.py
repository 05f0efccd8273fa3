"""Display state of a news query and its transitions.

The transitions are pure functions over immutable :class:`QueryState` values
so they can be tested without any UI binding.
"""

from dataclasses import dataclass, replace
from enum import StrEnum

from nepal_news.data import NewsQueryResult


class QueryStatus(StrEnum):
    """Lifecycle of a single query key."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
    REFRESHING = "refreshing"


@dataclass(frozen=True)
class QueryState:
    """Snapshot of what the display should show for a query key.

    ``result`` may be present in ERROR when a refresh failed on top of
    previously displayed data; the error message is shown alongside it.
    """

    status: QueryStatus = QueryStatus.IDLE
    result: NewsQueryResult | None = None
    error: str | None = None

    @property
    def is_fetching(self) -> bool:
        return self.status in (QueryStatus.LOADING, QueryStatus.REFRESHING)


IDLE = QueryState()


def begin_fetch(state: QueryState) -> QueryState:
    """Enter LOADING, or REFRESHING when data is already on display."""
    if state.result is not None:
        return replace(state, status=QueryStatus.REFRESHING, error=None)
    return replace(state, status=QueryStatus.LOADING, error=None)


def fetch_succeeded(state: QueryState, result: NewsQueryResult) -> QueryState:
    return QueryState(status=QueryStatus.SUCCESS, result=result)


def fetch_failed(state: QueryState, message: str) -> QueryState:
    """Enter ERROR, keeping any previously shown result next to the message."""
    return QueryState(status=QueryStatus.ERROR, result=state.result, error=message)


def from_cache(result: NewsQueryResult) -> QueryState:
    return QueryState(status=QueryStatus.SUCCESS, result=result)
