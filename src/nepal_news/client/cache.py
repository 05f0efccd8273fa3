"""In-memory cache of news results keyed by query identity."""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta

from nepal_news.data import NewsQueryResult

DEFAULT_STALE_WINDOW = timedelta(hours=24)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


class QueryCache:
    """Holds the latest result per query key for the life of the process.

    Also tracks the fetch currently in flight for each key so that every
    trigger for that key joins the same attempt instead of racing it.

    Args:
        stale_window: How long a result stays fresh after ``fetched_at``.
        clock: Returns the current time; tests pass a fake.
    """

    def __init__(
        self,
        *,
        stale_window: timedelta = DEFAULT_STALE_WINDOW,
        clock: Clock = utc_now,
    ) -> None:
        self._stale_window = stale_window
        self._clock = clock
        self._entries: dict[str, NewsQueryResult] = {}
        self._inflight: dict[str, asyncio.Task[NewsQueryResult]] = {}

    @property
    def stale_window(self) -> timedelta:
        return self._stale_window

    def now(self) -> datetime:
        return self._clock()

    def get(self, key: str) -> NewsQueryResult | None:
        """Return the entry for ``key`` whether fresh or stale."""
        return self._entries.get(key)

    def get_fresh(self, key: str) -> NewsQueryResult | None:
        """Return the entry for ``key`` only if it is still within the window."""
        result = self._entries.get(key)
        if result is None or not result.is_fresh(self._clock(), self._stale_window):
            return None
        return result

    def put(self, key: str, result: NewsQueryResult) -> None:
        self._entries[key] = result

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def inflight(self, key: str) -> asyncio.Task[NewsQueryResult] | None:
        return self._inflight.get(key)

    def start_fetch(
        self,
        key: str,
        fetch: Callable[[], Awaitable[NewsQueryResult]],
    ) -> asyncio.Task[NewsQueryResult]:
        """Return the in-flight fetch for ``key``, starting one if there is none.

        The task does not write the cache itself; each caller that is still
        interested stores the result when it arrives.
        """
        task = self._inflight.get(key)
        if task is not None:
            return task

        async def run() -> NewsQueryResult:
            return await fetch()

        task = asyncio.create_task(run())
        self._inflight[key] = task
        task.add_done_callback(lambda done: self._forget(key, done))
        return task

    def _forget(self, key: str, task: asyncio.Task[NewsQueryResult]) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        if not task.cancelled():
            # Mark a failure retrieved even when every awaiting view is gone
            task.exception()
