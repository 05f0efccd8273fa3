"""Factory functions to create components from configuration."""

from datetime import timedelta
from functools import partial

import httpx
from fastapi import FastAPI

from nepal_news.client.cache import Clock, QueryCache, utc_now
from nepal_news.client.fetch import fetch_nepal_tech_news
from nepal_news.client.query import NewsQuery
from nepal_news.client.retry import SleepFn, linear_backoff
from nepal_news.config.models import (
    ClientConfig,
    ContactConfig,
    NewsConfig,
    UpstreamConfig,
)
from nepal_news.contact import ContactSubmitter
from nepal_news.proxy.app import create_app
from nepal_news.proxy.handler import NewsProxy
from nepal_news.search.gnews import GNewsSearcher


def create_searcher(config: UpstreamConfig) -> GNewsSearcher:
    """Create the upstream searcher from config."""
    return GNewsSearcher(
        base_url=config.base_url,
        api_key=config.api_key,
        query=config.query,
        lang=config.lang,
        max_results=config.max_results,
        timeout=config.timeout_seconds,
    )


def create_proxy(config: NewsConfig, client: httpx.AsyncClient | None = None) -> NewsProxy:
    return NewsProxy(create_searcher(config.upstream), client=client)


def create_proxy_app(config: NewsConfig) -> FastAPI:
    """Create the FastAPI app serving the proxy at the configured path."""
    return create_app(create_proxy(config), path=config.proxy.path)


def create_cache(config: ClientConfig, *, clock: Clock = utc_now) -> QueryCache:
    return QueryCache(
        stale_window=timedelta(milliseconds=config.stale_window_ms),
        clock=clock,
    )


def create_news_query(
    config: ClientConfig,
    client: httpx.AsyncClient,
    *,
    cache: QueryCache | None = None,
    sleep: SleepFn | None = None,
) -> NewsQuery:
    """Create a news query fetching through the configured endpoint.

    Args:
        config: Client configuration.
        client: HTTP client owned by the caller.
        cache: Shared cache; a new one is created if omitted.
        sleep: Override for the sleep between retries.
    """
    kwargs = {} if sleep is None else {"sleep": sleep}
    return NewsQuery(
        partial(fetch_nepal_tech_news, client, config.endpoint_url),
        cache if cache is not None else create_cache(config),
        max_retries=config.max_retries,
        delay=partial(linear_backoff, base=config.retry_base_delay_seconds),
        **kwargs,
    )


def create_contact_submitter(config: ContactConfig) -> ContactSubmitter:
    return ContactSubmitter(endpoint=config.endpoint)
