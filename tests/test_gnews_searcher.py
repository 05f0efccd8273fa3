"""Tests for GNewsSearcher."""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest

from nepal_news.search.gnews import GNewsSearcher


class TestGNewsSearcher:
    """Tests for GNewsSearcher."""

    @pytest.fixture
    def mock_response_data(self) -> dict:
        """Sample GNews API response."""
        return {
            "totalArticles": 2,
            "articles": [
                {
                    "title": "Article 1",
                    "url": "https://example.com/article1",
                    "source": {"name": "Example News", "url": "https://example.com"},
                    "publishedAt": "2026-02-01T10:00:00Z",
                    "description": "Description 1",
                },
                {
                    "title": "Article 2",
                    "url": "https://example.com/article2",
                    "source": {"name": "Other News", "url": "https://other.example"},
                    "publishedAt": "2026-02-01T11:00:00Z",
                    "description": "Description 2",
                },
            ],
        }

    @pytest.fixture
    def searcher(self) -> GNewsSearcher:
        """Create a searcher with test API key."""
        return GNewsSearcher(api_key="test-key")

    def test_init_requires_api_key(self, monkeypatch: pytest.MonkeyPatch):
        """Should raise if no API key provided."""
        monkeypatch.delenv("GNEWS_API_KEY", raising=False)
        with pytest.raises(ValueError, match="API key required"):
            GNewsSearcher()

    def test_init_uses_env_var(self, monkeypatch: pytest.MonkeyPatch):
        """Should use GNEWS_API_KEY env var if no key passed."""
        monkeypatch.setenv("GNEWS_API_KEY", "env-key")
        searcher = GNewsSearcher()
        assert searcher._api_key == "env-key"

    def test_search_url_appends_search_path(self):
        searcher = GNewsSearcher(api_key="k", base_url="http://upstream.test/api/v4/")
        assert searcher.search_url == "http://upstream.test/api/v4/search"

    async def test_search_returns_payload_verbatim(
        self,
        searcher: GNewsSearcher,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Should return the decoded JSON body unchanged."""
        mock_response = MagicMock()
        mock_response.json.return_value = mock_response_data
        mock_response.raise_for_status = MagicMock()

        async def mock_get(*args, **kwargs):
            return mock_response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        data = await searcher.search()

        assert data == mock_response_data

    async def test_search_sends_fixed_query(
        self,
        searcher: GNewsSearcher,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Should send the fixed keyword pair, language, cap and key."""
        captured: dict = {}

        mock_response = MagicMock()
        mock_response.json.return_value = mock_response_data
        mock_response.raise_for_status = MagicMock()

        async def mock_get(self, url, params=None):
            captured["url"] = url
            captured.update(params or {})
            return mock_response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        await searcher.search()

        assert captured["url"] == "https://gnews.io/api/v4/search"
        assert captured["q"] == "Nepal technology"
        assert captured["lang"] == "en"
        assert captured["max"] == 10
        assert captured["apikey"] == "test-key"

    def test_caps_max_results(self):
        """Should cap max_results at 100 (GNews limit)."""
        searcher = GNewsSearcher(api_key="k", max_results=200)
        assert searcher.params()["max"] == 100

    async def test_search_uses_injected_client(self, mock_response_data: dict):
        """Should make exactly one request through the given client."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=mock_response_data)

        searcher = GNewsSearcher(api_key="k", base_url="http://upstream.test")
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            data = await searcher.search(client)

        assert len(requests) == 1
        assert requests[0].url.path == "/search"
        assert requests[0].url.params["q"] == "Nepal technology"
        assert data["totalArticles"] == 2

    async def test_search_raises_on_error_status(self):
        """Should surface non-2xx responses as HTTPStatusError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, text="forbidden")

        searcher = GNewsSearcher(api_key="k", base_url="http://upstream.test")
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await searcher.search(client)
