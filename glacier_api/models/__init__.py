from .news_article import NewsArticle
from .blog_post import BlogPost, MediaType

__all__ = ["NewsArticle", "BlogPost", "MediaType"]
