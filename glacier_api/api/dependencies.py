from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..config import get_settings
from ..repositories.blog_repository import BlogRepository
from ..services.blog_service import BlogService
from ..services.media_storage import MediaStorageService
from ..news.services.news_api_client import NewsApiClient
from ..news.services.news_refresh_service import NewsRefreshService
from ..news.services.news_service import NewsService


@lru_cache()
def get_media_storage() -> MediaStorageService:
    return MediaStorageService(get_settings())


@lru_cache()
def get_news_refresh_service() -> NewsRefreshService:
    return NewsRefreshService(NewsApiClient(get_settings()))


def get_blog_repository(db: Session = Depends(get_db)) -> BlogRepository:
    return BlogRepository(db)


def get_blog_service(
    blog_repo: BlogRepository = Depends(get_blog_repository),
    media_storage: MediaStorageService = Depends(get_media_storage)
) -> BlogService:
    return BlogService(blog_repo, media_storage)


def get_news_service(db: Session = Depends(get_db)) -> NewsService:
    return NewsService(db)
