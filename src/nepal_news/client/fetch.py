"""Single-shot fetch of the Nepal tech news list."""

from __future__ import annotations

import logging

import httpx

from nepal_news.data import Article, NewsPayload
from nepal_news.errors import NewsFetchError

logger = logging.getLogger(__name__)


async def fetch_nepal_tech_news(client: httpx.AsyncClient, url: str) -> NewsPayload:
    """Fetch the news list with exactly one HTTP GET.

    The endpoint is normally the news proxy, but anything answering with a
    JSON object carrying an ``articles`` field works.

    Args:
        client: HTTP client to issue the request with.
        url: Endpoint returning ``{"totalArticles": ..., "articles": [...]}``.

    Returns:
        The decoded payload. A missing or null ``articles`` field yields an
        empty tuple rather than an error.

    Raises:
        NewsFetchError: On network failure, non-2xx status or a body that is
            not a JSON object.
    """
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        raise NewsFetchError(f"Failed to fetch news: {e}") from e

    if not response.is_success:
        raise NewsFetchError(
            f"Failed to fetch news (HTTP {response.status_code})",
            status_code=response.status_code,
        )

    try:
        data = response.json()
    except (ValueError, RecursionError) as e:
        raise NewsFetchError("Failed to fetch news: response was not valid JSON") from e
    if not isinstance(data, dict):
        raise NewsFetchError("Failed to fetch news: unexpected response shape")

    items = data.get("articles") or []
    if not isinstance(items, list):
        raise NewsFetchError("Failed to fetch news: 'articles' is not a list")

    articles = tuple(Article.from_dict(item) for item in items if isinstance(item, dict))
    total = data.get("totalArticles")
    if not isinstance(total, int):
        total = len(articles)
    return NewsPayload(articles=articles, total_articles=total)
