from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import httpx
import structlog

from ...config import Settings
from ...exceptions import NewsFetchError

logger = structlog.get_logger(__name__)


PROVIDER_URLS = {
    "newsapi": "https://newsapi.org/v2/everything",
    "gnews": "https://gnews.io/api/v4/search",
}

SEARCH_TERMS = [
    "glacier",
    "glaciers",
    '"ice sheet"',
    '"melting glaciers"',
    '"ice melt"',
    '"climate change"',
]


def build_search_query(terms: List[str] = SEARCH_TERMS) -> str:
    return " OR ".join(terms)


class NewsApiClient:
    """Search client for the configured news provider (NewsAPI or GNews)."""

    def __init__(self, settings: Settings):
        self.provider = settings.news_provider
        self.api_key = settings.news_api_key
        self.url = settings.news_api_url or PROVIDER_URLS[self.provider]
        self.language = settings.news_language
        self.page_size = settings.news_page_size
        self.lookback_days = settings.news_lookback_days
        self.timeout = settings.news_api_timeout_seconds

    def build_params(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        query = build_search_query()
        since = None
        if self.lookback_days:
            since = (now or datetime.now(timezone.utc)) - timedelta(days=self.lookback_days)

        if self.provider == "gnews":
            params = {
                "q": query,
                "lang": self.language,
                "max": self.page_size,
                "sortby": "publishedAt",
                "apikey": self.api_key,
            }
            if since:
                params["from"] = since.strftime("%Y-%m-%dT%H:%M:%SZ")
            return params

        params = {
            "q": query,
            "language": self.language,
            "sortBy": "publishedAt",
            "pageSize": self.page_size,
            "apiKey": self.api_key,
        }
        if since:
            params["from"] = since.strftime("%Y-%m-%d")
        return params

    async def search(self) -> Dict[str, Any]:
        """Runs the glacier search and returns the provider's raw JSON payload."""
        if not self.api_key:
            raise NewsFetchError("News API key is not configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url, params=self.build_params())
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException:
            raise NewsFetchError("News request timed out")
        except httpx.HTTPStatusError as e:
            raise NewsFetchError(f"News provider returned HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            raise NewsFetchError(f"News request failed: {e}")
        except ValueError:
            raise NewsFetchError("News provider returned invalid JSON")

        if not isinstance(payload, dict):
            raise NewsFetchError("Unexpected news payload")
        if payload.get("status") == "error" or payload.get("errors"):
            message = payload.get("message") or payload.get("errors")
            raise NewsFetchError(f"News provider error: {message}")

        logger.info(
            "news_search_completed",
            provider=self.provider,
            total_results=payload.get("totalResults", payload.get("totalArticles")),
            returned=len(payload.get("articles") or []),
        )
        return payload
