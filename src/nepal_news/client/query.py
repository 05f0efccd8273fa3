"""Cached, retrying news query bound to one display view."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from nepal_news.client.cache import QueryCache
from nepal_news.client.retry import DelayFn, SleepFn, fetch_with_retry, linear_backoff
from nepal_news.client.state import (
    IDLE,
    QueryState,
    QueryStatus,
    begin_fetch,
    fetch_failed,
    fetch_succeeded,
    from_cache,
)
from nepal_news.data import NewsPayload, NewsQueryResult
from nepal_news.errors import NewsFetchError

logger = logging.getLogger(__name__)

DEFAULT_QUERY_KEY = "nepal-tech-news"

Fetcher = Callable[[], Awaitable[NewsPayload]]
Listener = Callable[[QueryState], None]


class NewsQuery:
    """Drives the display state for one query key.

    Flow:
    1. ``mount()`` serves a fresh cached result without touching the network,
       otherwise it loads.
    2. ``refresh()`` always fetches, keeping current data visible meanwhile.
    3. Every fetch goes through the bounded retry loop; only when the budget
       is spent does the state become ERROR.
    4. After ``teardown()`` any result that arrives is dropped.

    Triggers that arrive while a fetch for the key is in flight join it.

    Args:
        fetcher: Performs one fetch attempt.
        cache: Shared result cache.
        key: Query identity used for caching and coalescing.
        max_retries: Retries after the first failed attempt.
        delay: Backoff in seconds for a given retry number.
        sleep: Awaitable sleep used between attempts.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        cache: QueryCache,
        *,
        key: str = DEFAULT_QUERY_KEY,
        max_retries: int = 2,
        delay: DelayFn = linear_backoff,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self._fetcher = fetcher
        self._cache = cache
        self._key = key
        self._max_retries = max_retries
        self._delay = delay
        self._sleep = sleep
        self._state = IDLE
        self._listeners: list[Listener] = []
        self._torn_down = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def state(self) -> QueryState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` on every state change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def mount(self) -> QueryState:
        """Show cached data if fresh, otherwise load it."""
        self._ensure_alive()
        cached = self._cache.get_fresh(self._key)
        if cached is not None:
            logger.debug(f"Serving '{self._key}' from cache (fetched {cached.fetched_at})")
            self._set_state(from_cache(cached))
            return self._state
        return await self._trigger()

    async def refresh(self) -> QueryState:
        """Fetch again regardless of cache freshness."""
        self._ensure_alive()
        return await self._trigger()

    async def retry(self) -> QueryState:
        """The "try again" action after an error."""
        return await self.refresh()

    def teardown(self) -> None:
        """Detach from the view; late results are discarded from now on."""
        self._torn_down = True
        self._listeners.clear()

    async def _trigger(self) -> QueryState:
        if not self._state.is_fetching:
            self._set_state(begin_fetch(self._state))

        task = self._cache.start_fetch(self._key, self._fetch_result)
        try:
            result = await asyncio.shield(task)
        except NewsFetchError as e:
            if self._torn_down:
                logger.debug(f"Discarding error for '{self._key}' after teardown")
                return self._state
            # Joined triggers receive the same failure; report it once
            if self._state.status is QueryStatus.ERROR and self._state.error == str(e):
                return self._state
            self._set_state(fetch_failed(self._state, str(e)))
            return self._state
        except Exception as e:
            if not self._torn_down and self._state.is_fetching:
                logger.error(f"Unexpected error fetching '{self._key}': {e!r}")
                self._set_state(fetch_failed(self._state, f"Failed to fetch news: {e}"))
            raise

        if self._torn_down:
            logger.debug(f"Discarding result for '{self._key}' after teardown")
            return self._state
        # Joined triggers receive the same result; apply it once
        if self._state.status is QueryStatus.SUCCESS and self._state.result is result:
            return self._state
        self._cache.put(self._key, result)
        self._set_state(fetch_succeeded(self._state, result))
        return self._state

    async def _fetch_result(self) -> NewsQueryResult:
        payload = await fetch_with_retry(
            self._fetcher,
            max_retries=self._max_retries,
            delay=self._delay,
            sleep=self._sleep,
        )
        logger.info(f"Fetched {len(payload.articles)} articles for '{self._key}'")
        return NewsQueryResult(
            articles=payload.articles,
            total_articles=payload.total_articles,
            fetched_at=self._cache.now(),
        )

    def _set_state(self, state: QueryState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def _ensure_alive(self) -> None:
        if self._torn_down:
            raise RuntimeError(f"Query '{self._key}' has been torn down")
