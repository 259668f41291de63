"""
Mappers for the supported news search providers.
NewsAPI and GNews return almost the same article shape but disagree on a
few field names (urlToImage vs image, source with or without an id).
"""

from typing import Dict, Any

from .base_mapper import BaseMapper
from ....utils.url_utils import extract_domain


class NewsApiMapper(BaseMapper):
    """Mapper for NewsAPI /v2/everything articles"""

    image_fields = ("urlToImage", "image")

    def __init__(self, provider_name: str = "NewsAPI"):
        super().__init__(provider_name)

    def map_article(self, raw_data: Dict[str, Any]) -> Dict[str, Any]:
        url = raw_data.get("url")
        return {
            "title": raw_data.get("title"),
            "description": raw_data.get("description"),
            "url": url,
            "image_url": self._first_present(raw_data, self.image_fields),
            "author": raw_data.get("author"),
            "content": raw_data.get("content"),
            "source": self._source_for(raw_data.get("source"), url),
            "published_at": self.parse_published_date(raw_data.get("publishedAt")),
        }

    def _first_present(self, raw_data: Dict[str, Any], fields) -> Any:
        for field in fields:
            if raw_data.get(field):
                return raw_data[field]
        return None

    def _source_for(self, source: Any, url: str) -> Dict[str, Any]:
        if not source and url:
            return {"name": extract_domain(url)}
        return self.normalize_source(source)


class GNewsMapper(NewsApiMapper):
    """Mapper for GNews /api/v4/search articles"""

    image_fields = ("image", "urlToImage")

    def __init__(self):
        super().__init__("GNews")
