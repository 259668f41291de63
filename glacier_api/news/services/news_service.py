"""
Read-only News Service for API endpoints
Handles only database reads - fetching lives in NewsRefreshService
"""

from sqlalchemy.orm import Session

from ...repositories.news_repository import NewsRepository
from ..schemas.responses import NewsArticleResponse, NewsListResponse


class NewsService:
    def __init__(self, db: Session):
        self.news_repo = NewsRepository(db)

    def get_news_list(self) -> NewsListResponse:
        """All stored articles, most recently published first"""
        articles = self.news_repo.find_all()
        return NewsListResponse(
            articles=[NewsArticleResponse.model_validate(article) for article in articles]
        )
