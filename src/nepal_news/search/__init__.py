from nepal_news.search.base import NewsSearcher
from nepal_news.search.gnews import GNewsSearcher

__all__ = ["GNewsSearcher", "NewsSearcher"]
