"""Pydantic configuration models for Nepal Tech News components."""

from pydantic import BaseModel, Field

from nepal_news.contact import FORMSPREE_ENDPOINT
from nepal_news.search.gnews import DEFAULT_QUERY, GNEWS_API_URL

# ============================================================
# Upstream Config
# ============================================================


class UpstreamConfig(BaseModel):
    """Configuration for the GNews search relayed by the proxy."""

    base_url: str = GNEWS_API_URL
    api_key: str | None = None  # falls back to GNEWS_API_KEY
    query: str = DEFAULT_QUERY
    lang: str = "en"
    max_results: int = Field(default=10, ge=1, le=100)
    timeout_seconds: float = 30.0

    model_config = {"frozen": True}


# ============================================================
# Proxy Config
# ============================================================


class ProxyConfig(BaseModel):
    """Configuration for serving the news proxy."""

    host: str = "127.0.0.1"
    port: int = 8000
    path: str = "/fetch-news"

    model_config = {"frozen": True}


# ============================================================
# Client Config
# ============================================================


class ClientConfig(BaseModel):
    """Configuration for the caching news client."""

    endpoint_url: str = "http://127.0.0.1:8000/fetch-news"
    stale_window_ms: int = Field(default=24 * 60 * 60 * 1000, gt=0)
    max_retries: int = Field(default=2, ge=0)
    retry_base_delay_seconds: float = Field(default=1.0, gt=0)
    timeout_seconds: float = 30.0

    model_config = {"frozen": True}


# ============================================================
# Contact Config
# ============================================================


class ContactConfig(BaseModel):
    """Configuration for the contact form backend."""

    endpoint: str = FORMSPREE_ENDPOINT

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsConfig(BaseModel):
    """Root configuration for Nepal Tech News."""

    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)
    proxy: ProxyConfig = Field(default_factory=ProxyConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
    contact: ContactConfig = Field(default_factory=ContactConfig)

    model_config = {"frozen": True}
