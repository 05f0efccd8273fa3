"""Tests for the news proxy handler and its HTTP app."""

import json
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from nepal_news.proxy import CORS_HEADERS, NewsProxy, create_app
from nepal_news.search.gnews import GNewsSearcher

UPSTREAM_PAYLOAD: dict[str, Any] = {
    "totalArticles": 54,
    "articles": [
        {
            "title": "Nepal startup raises funding",
            "description": "",
            "content": "Kathmandu-based startup ...",
            "url": "https://example.com/startup",
            "image": None,
            "publishedAt": "2026-02-01T10:00:00Z",
            "source": {"name": "Example News", "url": "https://example.com"},
        }
    ],
}


class StubUpstream:
    """Counts upstream requests and answers with a fixed response."""

    def __init__(self, response: httpx.Response | Exception) -> None:
        self.response = response
        self.calls = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def make_proxy(stub: StubUpstream) -> NewsProxy:
    searcher = GNewsSearcher(api_key="test-key", base_url="http://upstream.test")
    client = httpx.AsyncClient(transport=httpx.MockTransport(stub))
    return NewsProxy(searcher, client=client)


class TestNewsProxy:
    """Tests for NewsProxy.handle."""

    async def test_options_answers_without_upstream_call(self) -> None:
        stub = StubUpstream(httpx.Response(200, json=UPSTREAM_PAYLOAD))
        proxy = make_proxy(stub)

        response = await proxy.handle("OPTIONS")

        assert response.status == 200
        assert response.body == b""
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert stub.calls == 0

    async def test_success_relays_payload_verbatim(self) -> None:
        stub = StubUpstream(httpx.Response(200, json=UPSTREAM_PAYLOAD))
        proxy = make_proxy(stub)

        response = await proxy.handle("GET")

        assert response.status == 200
        assert response.json() == UPSTREAM_PAYLOAD
        assert response.headers["Content-Type"] == "application/json"
        assert response.headers["Cache-Control"] == "public, max-age=86400"
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert stub.calls == 1

    async def test_any_other_method_triggers_upstream(self) -> None:
        stub = StubUpstream(httpx.Response(200, json=UPSTREAM_PAYLOAD))
        proxy = make_proxy(stub)

        response = await proxy.handle("POST")

        assert response.status == 200
        assert stub.calls == 1

    async def test_upstream_429_becomes_error_envelope(self) -> None:
        stub = StubUpstream(httpx.Response(429, text="Too many requests"))
        proxy = make_proxy(stub)

        response = await proxy.handle("GET")

        assert response.status == 500
        body = json.loads(response.body)
        assert isinstance(body["error"], str)
        assert "429" in body["error"]
        assert body["articles"] == []
        assert response.headers["Content-Type"] == "application/json"
        assert "Cache-Control" not in response.headers
        # No retry inside the proxy
        assert stub.calls == 1

    async def test_network_failure_becomes_error_envelope(self) -> None:
        stub = StubUpstream(httpx.ConnectError("connection refused"))
        proxy = make_proxy(stub)

        response = await proxy.handle("GET")

        assert response.status == 500
        body = response.json()
        assert body["error"]
        assert body["articles"] == []
        assert stub.calls == 1

    async def test_invalid_upstream_json_becomes_error_envelope(self) -> None:
        stub = StubUpstream(httpx.Response(200, text="<html>oops</html>"))
        proxy = make_proxy(stub)

        response = await proxy.handle("GET")

        assert response.status == 500
        assert response.json()["articles"] == []

    async def test_too_deeply_nested_upstream_json_becomes_error_envelope(self) -> None:
        body = b'{"articles": ' + b"[" * 100_000 + b"]" * 100_000 + b"}"
        proxy = make_proxy(StubUpstream(httpx.Response(200, content=body)))

        response = await proxy.handle("GET")

        assert response.status == 500
        assert response.json()["articles"] == []
        assert "Invalid JSON" in response.json()["error"]
        for name, value in CORS_HEADERS.items():
            assert response.headers[name] == value

    async def test_cors_headers_on_every_response(self) -> None:
        for upstream in (
            httpx.Response(200, json=UPSTREAM_PAYLOAD),
            httpx.Response(502, text="bad gateway"),
        ):
            proxy = make_proxy(StubUpstream(upstream))
            for method in ("OPTIONS", "GET"):
                response = await proxy.handle(method)
                for name, value in CORS_HEADERS.items():
                    assert response.headers[name] == value


class TestProxyApp:
    """Tests for the FastAPI app wrapping the proxy."""

    @pytest.fixture
    def stub(self) -> StubUpstream:
        return StubUpstream(httpx.Response(200, json=UPSTREAM_PAYLOAD))

    @pytest.fixture
    def client(self, stub: StubUpstream) -> TestClient:
        return TestClient(create_app(make_proxy(stub)))

    def test_options_preflight(self, client: TestClient, stub: StubUpstream) -> None:
        response = client.options("/fetch-news")
        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-headers"] == (
            "authorization, x-client-info, apikey, content-type"
        )
        assert stub.calls == 0

    def test_get_returns_upstream_payload(self, client: TestClient, stub: StubUpstream) -> None:
        response = client.get("/fetch-news")
        assert response.status_code == 200
        assert response.json() == UPSTREAM_PAYLOAD
        assert response.headers["cache-control"] == "public, max-age=86400"
        assert stub.calls == 1

    def test_query_string_is_ignored(self, client: TestClient) -> None:
        response = client.get("/fetch-news", params={"q": "something else", "apikey": "x"})
        assert response.status_code == 200
        assert response.json() == UPSTREAM_PAYLOAD

    def test_upstream_failure(self) -> None:
        stub = StubUpstream(httpx.Response(429, text="rate limited"))
        client = TestClient(create_app(make_proxy(stub)))

        response = client.post("/fetch-news", json={"ignored": True})

        assert response.status_code == 500
        assert response.json()["articles"] == []
        assert "error" in response.json()

    @pytest.mark.parametrize("method", ["HEAD", "PROPFIND", "TRACE"])
    def test_any_method_reaches_proxy(
        self, client: TestClient, stub: StubUpstream, method: str
    ) -> None:
        response = client.request(method, "/fetch-news")
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["cache-control"] == "public, max-age=86400"
        assert stub.calls == 1

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
