from .news_repository import NewsRepository
from .blog_repository import BlogRepository

__all__ = ["NewsRepository", "BlogRepository"]
