"""Data models for Nepal Tech News."""

from nepal_news.data.models import Article, ArticleSource, NewsPayload, NewsQueryResult

__all__ = [
    "Article",
    "ArticleSource",
    "NewsPayload",
    "NewsQueryResult",
]
