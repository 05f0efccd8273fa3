"""Configuration module for Nepal Tech News."""

from nepal_news.config.factory import (
    create_cache,
    create_contact_submitter,
    create_news_query,
    create_proxy,
    create_proxy_app,
    create_searcher,
)
from nepal_news.config.loader import get_default_config_path, load_config
from nepal_news.config.models import (
    ClientConfig,
    ContactConfig,
    NewsConfig,
    ProxyConfig,
    UpstreamConfig,
)

__all__ = [
    "ClientConfig",
    "ContactConfig",
    "NewsConfig",
    "ProxyConfig",
    "UpstreamConfig",
    "create_cache",
    "create_contact_submitter",
    "create_news_query",
    "create_proxy",
    "create_proxy_app",
    "create_searcher",
    "get_default_config_path",
    "load_config",
]
