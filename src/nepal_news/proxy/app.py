"""FastAPI application exposing the news proxy."""

import logging

from fastapi import FastAPI, Request, Response
from starlette.types import Receive, Scope, Send

from nepal_news.proxy.handler import NewsProxy

logger = logging.getLogger(__name__)


class ProxyEndpoint:
    """ASGI endpoint passing requests of any method to a :class:`NewsProxy`.

    Mounted as a plain ASGI app so the router does not restrict methods.
    """

    def __init__(self, proxy: NewsProxy) -> None:
        self._proxy = proxy

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        result = await self._proxy.handle(request.method)
        response = Response(
            content=result.body,
            status_code=result.status,
            headers=result.headers,
        )
        await response(scope, receive, send)


def create_app(proxy: NewsProxy, *, path: str = "/fetch-news") -> FastAPI:
    """Build the HTTP app serving ``proxy`` at ``path``.

    Args:
        proxy: The relay handling every request to ``path``.
        path: URL path of the proxy endpoint.
    """
    app = FastAPI(title="Nepal Tech News proxy")

    @app.get("/health")
    async def health_check():
        """Liveness check."""
        return {"status": "healthy"}

    app.add_route(path, ProxyEndpoint(proxy), include_in_schema=False)
    return app
