"""
Base mapper class for news providers
Defines the interface that all provider mappers must implement
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional
from datetime import datetime, timezone

import structlog

logger = structlog.get_logger(__name__)


class BaseMapper(ABC):
    """Base class for news provider mappers"""

    def __init__(self, provider_name: str):
        self.provider_name = provider_name

    @abstractmethod
    def map_article(self, raw_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Map a raw provider article onto the stored article shape

        Args:
            raw_data: Raw article data from the provider

        Returns:
            Article data dict with keys:
            - title: str
            - description: str
            - url: str
            - image_url: Optional[str]
            - author: Optional[str]
            - content: Optional[str]
            - source: dict
            - published_at: Optional[datetime]
        """
        pass

    def map_articles(self, raw_articles: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [self.map_article(raw) for raw in raw_articles]

    def normalize_source(self, source: Any) -> Dict[str, Any]:
        if isinstance(source, dict):
            return source
        if source:
            return {"name": str(source)}
        return {"name": self.provider_name}

    def parse_published_date(self, value: Optional[str]) -> Optional[datetime]:
        if not value:
            return None
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            logger.warning("Unexpected published date type", value=value, provider=self.provider_name)
            return None

        try:
            # Providers send ISO 8601 with a trailing Z
            published = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except (TypeError, ValueError):
            logger.warning("Could not parse published date", value=value, provider=self.provider_name)
            return None

        # Stored as naive UTC
        if published.tzinfo is not None:
            published = published.astimezone(timezone.utc).replace(tzinfo=None)
        return published
