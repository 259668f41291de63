from .base_mapper import BaseMapper
from .news_api_mapper import NewsApiMapper, GNewsMapper

MAPPERS = {
    "newsapi": NewsApiMapper,
    "gnews": GNewsMapper,
}


def get_mapper(provider: str) -> BaseMapper:
    return MAPPERS.get(provider, NewsApiMapper)()


__all__ = ["BaseMapper", "NewsApiMapper", "GNewsMapper", "get_mapper"]
