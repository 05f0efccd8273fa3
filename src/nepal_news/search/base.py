from __future__ import annotations

from typing import Any, Protocol

import httpx


class NewsSearcher(Protocol):
    """Interface for the upstream news search relayed by the proxy."""

    async def search(self, client: httpx.AsyncClient | None = None) -> dict[str, Any]:
        """Run the fixed upstream search once.

        Args:
            client: Optional HTTP client to issue the request with.

        Returns:
            The decoded upstream JSON payload, unchanged.
        """
        ...
