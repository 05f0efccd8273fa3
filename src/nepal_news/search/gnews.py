from __future__ import annotations

import logging
import os
from typing import Any

import httpx

GNEWS_API_URL = "https://gnews.io/api/v4"
DEFAULT_QUERY = "Nepal technology"

logger = logging.getLogger(__name__)


class GNewsSearcher:
    """Run a fixed news search against the GNews API.

    The query is fixed at construction time; callers of :meth:`search` cannot
    change what is sent upstream.

    Args:
        base_url: GNews API base URL (``/search`` is appended).
        api_key: GNews API key (defaults to GNEWS_API_KEY env var).
        query: Keyword query sent as ``q``.
        lang: Language code for results (default: "en").
        max_results: Maximum number of articles to request (max 100).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        base_url: str = GNEWS_API_URL,
        api_key: str | None = None,
        query: str = DEFAULT_QUERY,
        lang: str = "en",
        max_results: int = 10,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("GNEWS_API_KEY")
        if not self._api_key:
            raise ValueError("GNews API key required. Pass api_key or set GNEWS_API_KEY env var.")
        self._search_url = f"{base_url.rstrip('/')}/search"
        self._query = query
        self._lang = lang
        self._max_results = min(max_results, 100)  # GNews max is 100
        self._timeout = timeout

    @property
    def search_url(self) -> str:
        return self._search_url

    def params(self) -> dict[str, str | int]:
        """Query parameters for the upstream request."""
        return {
            "q": self._query,
            "lang": self._lang,
            "max": self._max_results,
            "apikey": self._api_key,  # type: ignore[dict-item]
        }

    async def search(self, client: httpx.AsyncClient | None = None) -> dict[str, Any]:
        """Issue exactly one GET to the GNews search endpoint.

        Args:
            client: Optional HTTP client; a short-lived one is created if omitted.

        Returns:
            The decoded JSON body.

        Raises:
            httpx.HTTPStatusError: If GNews answers with a non-2xx status.
            httpx.HTTPError: On network failure.
        """
        if client is None:
            async with httpx.AsyncClient(timeout=self._timeout) as own_client:
                return await self._search(own_client)
        return await self._search(client)

    async def _search(self, client: httpx.AsyncClient) -> dict[str, Any]:
        logger.info(f"Fetching '{self._query}' news from GNews")
        response = await client.get(self._search_url, params=self.params())
        response.raise_for_status()
        return response.json()
