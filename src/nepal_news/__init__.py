"""Nepal Tech News: a cached news proxy and client for Nepal technology headlines."""

from nepal_news.client import (
    DEFAULT_QUERY_KEY,
    NewsQuery,
    QueryCache,
    QueryState,
    QueryStatus,
    fetch_nepal_tech_news,
    fetch_with_retry,
    linear_backoff,
)
from nepal_news.config import NewsConfig, create_news_query, create_proxy_app, load_config
from nepal_news.contact import ContactMessage, ContactSubmitter
from nepal_news.data import Article, ArticleSource, NewsPayload, NewsQueryResult
from nepal_news.errors import (
    ContactSubmissionError,
    NewsError,
    NewsFetchError,
    UpstreamError,
)
from nepal_news.proxy import NewsProxy, ProxyResponse, create_app
from nepal_news.render import NewsCard, build_cards, section_message, summary_for
from nepal_news.search import GNewsSearcher, NewsSearcher

__all__ = [
    # Models
    "Article",
    "ArticleSource",
    "NewsPayload",
    "NewsQueryResult",
    # Errors
    "ContactSubmissionError",
    "NewsError",
    "NewsFetchError",
    "UpstreamError",
    # Upstream
    "GNewsSearcher",
    "NewsSearcher",
    # Proxy
    "NewsProxy",
    "ProxyResponse",
    "create_app",
    # Client
    "DEFAULT_QUERY_KEY",
    "NewsQuery",
    "QueryCache",
    "QueryState",
    "QueryStatus",
    "fetch_nepal_tech_news",
    "fetch_with_retry",
    "linear_backoff",
    # Rendering
    "NewsCard",
    "build_cards",
    "section_message",
    "summary_for",
    # Contact
    "ContactMessage",
    "ContactSubmitter",
    # Config
    "NewsConfig",
    "create_news_query",
    "create_proxy_app",
    "load_config",
]
