"""
News Refresh Service
One refresh cycle of the glacier news feed:
1. Search the news provider
2. Keep only glacier/ice related articles
3. Map them onto the stored article shape
4. Replace the whole news table with the result

Upstream or storage failures leave the previously stored articles in place.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

import structlog
from sqlalchemy.orm import Session

from ...core.database import SessionLocal
from ...exceptions import NewsFetchError
from ...repositories.news_repository import NewsRepository
from .mappers import BaseMapper, get_mapper
from .news_api_client import NewsApiClient
from .relevance import filter_relevant

logger = structlog.get_logger(__name__)


@dataclass
class RefreshResult:
    payload: Dict[str, Any]
    updated: bool = False
    fetched: int = 0
    kept: int = 0
    stored: int = 0
    error: Optional[str] = None
    refreshed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def failed(self) -> bool:
        return self.error is not None


class NewsRefreshService:
    """Fetches glacier news and swaps it into the news table"""

    def __init__(
        self,
        client: NewsApiClient,
        session_factory: Callable[[], Session] = SessionLocal,
        mapper: Optional[BaseMapper] = None,
    ):
        self.client = client
        self.session_factory = session_factory
        self.mapper = mapper or get_mapper(client.provider)

    async def refresh(self) -> RefreshResult:
        """
        Run one refresh cycle.

        Returns:
            RefreshResult whose payload is the raw provider response, or an
            error descriptor when the cycle failed
        """
        logger.info("news_refresh_started", provider=self.client.provider)

        try:
            payload = await self.client.search()
        except NewsFetchError as e:
            logger.error("Error fetching glacier news", error=str(e))
            return RefreshResult(
                payload={"error": "Failed to fetch glacier news", "detail": str(e)},
                error=str(e),
            )

        raw_articles = payload.get("articles") or []
        relevant = filter_relevant(raw_articles)
        result = RefreshResult(payload=payload, fetched=len(raw_articles), kept=len(relevant))

        if not relevant:
            logger.warning("No relevant glacier articles found, keeping stored news", fetched=result.fetched)
            return result

        articles = self.mapper.map_articles(relevant)

        db = self.session_factory()
        try:
            result.stored = NewsRepository(db).replace_all(articles)
            result.updated = True
        except Exception as e:
            logger.error("Failed to store glacier news", error=str(e), exc_info=True)
            result.payload = {"error": "Failed to store glacier news", "detail": str(e)}
            result.error = str(e)
            return result
        finally:
            db.close()

        logger.info(
            "Glacier news updated",
            fetched=result.fetched,
            stored=result.stored,
            timestamp=result.refreshed_at.isoformat(),
        )
        return result
