"""Core data models for Nepal Tech News."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any
from urllib.parse import urlparse


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _image_url(value: Any) -> str | None:
    """Return ``value`` if it looks like a usable http(s) image URL, else None."""
    if not isinstance(value, str) or not value.strip():
        return None
    parsed = urlparse(value.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return None
    return value.strip()


@dataclass(frozen=True)
class ArticleSource:
    """The publisher an article came from."""

    name: str
    url: str = ""


@dataclass(frozen=True)
class Article:
    """A news article as returned by the upstream search API."""

    title: str
    url: str
    source: ArticleSource
    description: str = ""
    content: str = ""
    image: str | None = None
    published_at: str = ""

    @classmethod
    def from_dict(cls, item: dict[str, Any]) -> "Article":
        """Build an Article from one upstream JSON object.

        Fields map 1:1. Missing strings become ``""`` and an absent or
        invalid ``image`` becomes ``None``.
        """
        source = item.get("source") or {}
        if not isinstance(source, dict):
            source = {}
        return cls(
            title=_text(item.get("title")),
            url=_text(item.get("url")),
            source=ArticleSource(
                name=_text(source.get("name")),
                url=_text(source.get("url")),
            ),
            description=_text(item.get("description")),
            content=_text(item.get("content")),
            image=_image_url(item.get("image")),
            published_at=_text(item.get("publishedAt")),
        )


@dataclass(frozen=True)
class NewsPayload:
    """A decoded news response before it enters the cache."""

    articles: tuple[Article, ...] = ()
    total_articles: int = 0


@dataclass(frozen=True)
class NewsQueryResult:
    """A news result held in the client cache.

    ``articles`` keeps upstream order. ``total_articles`` is whatever the
    upstream reported and may differ from ``len(articles)``.
    """

    articles: tuple[Article, ...]
    total_articles: int
    fetched_at: datetime

    def is_fresh(self, now: datetime, stale_window: timedelta) -> bool:
        """Whether this result can still be served without refetching."""
        return now - self.fetched_at < stale_window
