from nepal_news.proxy.app import create_app
from nepal_news.proxy.handler import CORS_HEADERS, NewsProxy, ProxyResponse

__all__ = ["CORS_HEADERS", "NewsProxy", "ProxyResponse", "create_app"]
