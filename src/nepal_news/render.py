"""Display derivations for the news section."""

from dataclasses import dataclass
from datetime import datetime

from nepal_news.client.state import QueryState, QueryStatus
from nepal_news.data import Article, NewsQueryResult

SUMMARY_FALLBACK_CHARS = 150

LOADING_MESSAGE = "Loading latest news..."
EMPTY_MESSAGE = "No news articles found at the moment."
ERROR_TITLE = "Failed to load news"


@dataclass(frozen=True)
class NewsCard:
    """What one article card shows. ``key`` gives stable list identity."""

    key: str
    title: str
    summary: str
    source_name: str
    published_at: str
    published_label: str
    url: str
    image: str | None = None


def summary_for(article: Article) -> str:
    """Description if present, else the start of the content, else empty."""
    if article.description:
        return article.description
    if article.content:
        return article.content[:SUMMARY_FALLBACK_CHARS]
    return ""


def format_published(published_at: str) -> str:
    """Format an ISO-8601 timestamp as e.g. ``Jan 5, 2026``.

    Unparseable values are returned unchanged.
    """
    try:
        parsed = datetime.fromisoformat(published_at.replace("Z", "+00:00"))
    except ValueError:
        return published_at
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def card_for(article: Article) -> NewsCard:
    return NewsCard(
        key=article.url,
        title=article.title,
        summary=summary_for(article),
        source_name=article.source.name,
        published_at=article.published_at,
        published_label=format_published(article.published_at),
        url=article.url,
        image=article.image,
    )


def build_cards(result: NewsQueryResult | None) -> list[NewsCard]:
    """One card per article, in upstream order."""
    if result is None:
        return []
    return [card_for(article) for article in result.articles]


def section_message(state: QueryState) -> str | None:
    """Status text to show instead of (or above) the cards.

    Returns None when the cards alone should be shown.
    """
    if state.status is QueryStatus.LOADING:
        return LOADING_MESSAGE
    if state.status is QueryStatus.ERROR:
        return f"{ERROR_TITLE}: {state.error or 'Something went wrong'}. Try again."
    if state.status in (QueryStatus.SUCCESS, QueryStatus.REFRESHING):
        if state.result is not None and not state.result.articles:
            return EMPTY_MESSAGE
    return None
