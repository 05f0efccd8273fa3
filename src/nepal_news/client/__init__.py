"""Client-side news retrieval: fetch, retry, cache and display state."""

from nepal_news.client.cache import DEFAULT_STALE_WINDOW, QueryCache
from nepal_news.client.fetch import fetch_nepal_tech_news
from nepal_news.client.query import DEFAULT_QUERY_KEY, NewsQuery
from nepal_news.client.retry import fetch_with_retry, linear_backoff
from nepal_news.client.state import QueryState, QueryStatus

__all__ = [
    "DEFAULT_QUERY_KEY",
    "DEFAULT_STALE_WINDOW",
    "NewsQuery",
    "QueryCache",
    "QueryState",
    "QueryStatus",
    "fetch_nepal_tech_news",
    "fetch_with_retry",
    "linear_backoff",
]
