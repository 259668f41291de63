import pytest
from datetime import datetime, timezone
from unittest.mock import patch, MagicMock, AsyncMock

import httpx

from glacier_api.exceptions import NewsFetchError
from glacier_api.news.services.news_api_client import NewsApiClient, build_search_query, PROVIDER_URLS


def test_build_search_query_joins_terms_with_or():
    query = build_search_query()

    assert query.startswith("glacier OR glaciers")
    assert '"ice sheet"' in query
    assert '"climate change"' in query


class TestNewsApiClient:
    @pytest.fixture(autouse=True)
    def setup_client(self, mock_settings):
        self.settings = mock_settings
        self.client = NewsApiClient(mock_settings)

    def _mock_response(self, payload):
        response = MagicMock()
        response.json = MagicMock(return_value=payload)
        response.raise_for_status = MagicMock()
        return response

    def test_newsapi_params(self):
        params = self.client.build_params()

        assert self.client.url == PROVIDER_URLS["newsapi"]
        assert params["language"] == "en"
        assert params["pageSize"] == 50
        assert params["sortBy"] == "publishedAt"
        assert params["apiKey"] == "test-news-key"
        assert "from" not in params

    def test_lookback_adds_from_date(self):
        self.settings.news_lookback_days = 7
        client = NewsApiClient(self.settings)

        params = client.build_params(now=datetime(2025, 8, 10, tzinfo=timezone.utc))

        assert params["from"] == "2025-08-03"

    def test_gnews_params(self):
        self.settings.news_provider = "gnews"
        self.settings.news_lookback_days = 1
        client = NewsApiClient(self.settings)

        params = client.build_params(now=datetime(2025, 8, 10, 12, 0, tzinfo=timezone.utc))

        assert client.url == PROVIDER_URLS["gnews"]
        assert params["lang"] == "en"
        assert params["max"] == 50
        assert params["apikey"] == "test-news-key"
        assert params["from"] == "2025-08-09T12:00:00Z"

    @patch('httpx.AsyncClient')
    @pytest.mark.asyncio
    async def test_search_returns_payload(self, mock_client):
        payload = {"status": "ok", "totalResults": 1, "articles": [{"title": "Glacier"}]}
        get = AsyncMock(return_value=self._mock_response(payload))
        mock_client.return_value.__aenter__.return_value.get = get

        result = await self.client.search()

        assert result == payload
        get.assert_awaited_once()
        assert get.call_args.args[0] == PROVIDER_URLS["newsapi"]
        assert get.call_args.kwargs["params"]["q"] == build_search_query()

    @pytest.mark.asyncio
    async def test_search_without_api_key(self):
        self.settings.news_api_key = None
        client = NewsApiClient(self.settings)

        with pytest.raises(NewsFetchError, match="not configured"):
            await client.search()

    @patch('httpx.AsyncClient')
    @pytest.mark.asyncio
    async def test_search_timeout(self, mock_client):
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(
            side_effect=httpx.TimeoutException("Request timeout")
        )

        with pytest.raises(NewsFetchError, match="timed out"):
            await self.client.search()

    @patch('httpx.AsyncClient')
    @pytest.mark.asyncio
    async def test_search_http_error(self, mock_client):
        mock_response = MagicMock()
        mock_response.status_code = 401

        mock_client.return_value.__aenter__.return_value.get = AsyncMock(
            side_effect=httpx.HTTPStatusError("Unauthorized", request=None, response=mock_response)
        )

        with pytest.raises(NewsFetchError, match="401"):
            await self.client.search()

    @patch('httpx.AsyncClient')
    @pytest.mark.asyncio
    async def test_search_upstream_error_payload(self, mock_client):
        payload = {"status": "error", "code": "rateLimited", "message": "Too many requests"}
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(return_value=self._mock_response(payload))

        with pytest.raises(NewsFetchError, match="Too many requests"):
            await self.client.search()

    @patch('httpx.AsyncClient')
    @pytest.mark.asyncio
    async def test_search_invalid_json(self, mock_client):
        response = self._mock_response(None)
        response.json = MagicMock(side_effect=ValueError("bad json"))
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(return_value=response)

        with pytest.raises(NewsFetchError, match="invalid JSON"):
            await self.client.search()
