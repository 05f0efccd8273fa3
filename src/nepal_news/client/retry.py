"""Bounded retry loop for news fetches."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from nepal_news.errors import NewsFetchError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DelayFn = Callable[[int], float]
SleepFn = Callable[[float], Awaitable[None]]


def linear_backoff(attempt: int, *, base: float = 1.0, cap: float = 30.0) -> float:
    """Delay in seconds before retry number ``attempt`` (1-based).

    Grows by ``base`` per attempt and never drops below ``base``.
    """
    return min(max(attempt, 1) * base, cap)


async def fetch_with_retry(
    operation: Callable[[], Awaitable[T]],
    *,
    max_retries: int = 2,
    delay: DelayFn = linear_backoff,
    sleep: SleepFn = asyncio.sleep,
) -> T:
    """Run ``operation`` until it succeeds or the attempt budget is spent.

    Makes at most ``max_retries + 1`` attempts. Only :class:`NewsFetchError`
    is retried; anything else propagates immediately.

    Args:
        operation: Zero-argument coroutine factory performing one attempt.
        max_retries: Retries after the first attempt.
        delay: Maps a retry number to a wait in seconds.
        sleep: Awaitable sleep; tests inject a recorder.

    Returns:
        The result of the first successful attempt.

    Raises:
        NewsFetchError: The error from the last attempt once retries run out.
    """
    attempt = 0
    while True:
        try:
            return await operation()
        except NewsFetchError as e:
            if attempt >= max_retries:
                logger.warning(f"News fetch failed after {attempt + 1} attempts: {e}")
                raise
            attempt += 1
            wait = delay(attempt)
            logger.info(f"News fetch failed ({e}); retry {attempt}/{max_retries} in {wait:.1f}s")
            await sleep(wait)
