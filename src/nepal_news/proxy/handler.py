"""Stateless relay between browsers and the upstream news search."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from nepal_news.errors import UpstreamError
from nepal_news.search.base import NewsSearcher

logger = logging.getLogger(__name__)

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}
JSON_CONTENT_TYPE = "application/json"
CACHE_CONTROL = "public, max-age=86400"  # 24 hours


@dataclass(frozen=True)
class ProxyResponse:
    """Framework-independent response produced by :class:`NewsProxy`."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def json(self) -> Any:
        return json.loads(self.body)


class NewsProxy:
    """Forward the fixed news search upstream and relay the result.

    Exactly one upstream attempt is made per inbound request and failures are
    always turned into a JSON envelope with an empty ``articles`` list, so the
    client only ever has one response shape to parse.

    Args:
        searcher: The upstream search to relay.
        client: Optional shared HTTP client passed to the searcher.
    """

    def __init__(
        self,
        searcher: NewsSearcher,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._searcher = searcher
        self._client = client

    async def handle(self, method: str) -> ProxyResponse:
        """Answer one inbound request.

        Only the method is inspected; the body and query string never reach
        the upstream request.
        """
        if method.upper() == "OPTIONS":
            return ProxyResponse(status=200, headers=dict(CORS_HEADERS))

        try:
            data = await self._fetch_upstream()
        except UpstreamError as e:
            logger.error("Error fetching news: %s", e)
            return _error_response(str(e))

        articles = data.get("articles") if isinstance(data, dict) else None
        logger.info(f"Successfully fetched {len(articles or [])} articles")
        return ProxyResponse(
            status=200,
            headers={
                **CORS_HEADERS,
                "Content-Type": JSON_CONTENT_TYPE,
                "Cache-Control": CACHE_CONTROL,
            },
            body=json.dumps(data).encode(),
        )

    async def _fetch_upstream(self) -> Any:
        try:
            return await self._searcher.search(self._client)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("GNews API error: %s %s", status, e.response.text)
            raise UpstreamError(f"GNews API returned {status}: {e.response.text}") from e
        except httpx.HTTPError as e:
            raise UpstreamError(str(e) or "Failed to fetch news") from e
        except (ValueError, RecursionError) as e:
            # Raised by response.json() on an undecodable or too deeply nested body
            raise UpstreamError(f"Invalid JSON from GNews API: {e}") from e


def _error_response(message: str) -> ProxyResponse:
    body = {"error": message, "articles": []}
    return ProxyResponse(
        status=500,
        headers={**CORS_HEADERS, "Content-Type": JSON_CONTENT_TYPE},
        body=json.dumps(body).encode(),
    )
