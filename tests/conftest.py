import pytest
from unittest.mock import MagicMock, AsyncMock

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from glacier_api.services.media_storage import UploadedMedia


@pytest.fixture
def session_factory():
    from glacier_api.core.database import Base
    from glacier_api.models import news_article, blog_post  # noqa: F401

    # Use in-memory SQLite shared across sessions for tests
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def test_db(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def mock_settings():
    settings = MagicMock()
    settings.news_provider = "newsapi"
    settings.news_api_key = "test-news-key"
    settings.news_api_url = None
    settings.news_language = "en"
    settings.news_page_size = 50
    settings.news_lookback_days = None
    settings.news_api_timeout_seconds = 30
    settings.storage_bucket = "test-bucket"
    settings.gcp_project_id = "test-project"
    settings.gcp_service_account_path = None
    settings.media_folder = "blogs"
    settings.media_allowed_formats = ["jpg", "jpeg", "png", "gif", "webp", "mp4", "mov", "webm"]
    return settings


@pytest.fixture
def sample_articles():
    return [
        {
            "source": {"id": None, "name": "Polar Times"},
            "author": "A. Researcher",
            "title": "Arctic ice sheet shrinks to record low",
            "description": "Satellite data shows rapid loss.",
            "url": "https://polar.example/ice-sheet",
            "urlToImage": "https://polar.example/ice.jpg",
            "publishedAt": "2025-08-01T10:00:00Z",
            "content": "Full text...",
        },
        {
            "source": {"id": None, "name": "Mountain Daily"},
            "author": None,
            "title": "Hikers report changes in the Alps",
            "description": "The Aletsch Glacier retreated again this summer.",
            "url": "https://mountain.example/aletsch",
            "urlToImage": None,
            "publishedAt": "2025-08-02T08:30:00Z",
            "content": None,
        },
        {
            "source": {"id": None, "name": "City News"},
            "author": "Reporter",
            "title": "Local election results",
            "description": "Turnout was higher than expected.",
            "url": "https://city.example/election",
            "urlToImage": None,
            "publishedAt": "2025-08-03T12:00:00Z",
            "content": None,
        },
    ]


@pytest.fixture
def mock_news_client(sample_articles):
    client = MagicMock()
    client.provider = "newsapi"
    client.search = AsyncMock(return_value={
        "status": "ok",
        "totalResults": len(sample_articles),
        "articles": sample_articles,
    })
    return client


@pytest.fixture
def mock_media_storage():
    storage = MagicMock()
    storage.folder = "blogs"
    storage.upload = MagicMock(return_value=UploadedMedia(
        url="https://storage.googleapis.com/test-bucket/blogs/abc123.png",
        public_id="blogs/abc123",
        resource_type="image",
    ))
    storage.delete = MagicMock(return_value=True)
    return storage


@pytest.fixture
def mock_refresh_service():
    from glacier_api.news.services.news_refresh_service import RefreshResult

    service = MagicMock()
    service.refresh = AsyncMock(return_value=RefreshResult(
        payload={"status": "ok", "totalResults": 1, "articles": []},
        fetched=1,
    ))
    return service


@pytest.fixture
async def async_client(test_db, mock_media_storage, mock_refresh_service):
    from httpx import AsyncClient, ASGITransport
    from glacier_api.main import app
    from glacier_api.core.database import get_db
    from glacier_api.api.dependencies import get_media_storage, get_news_refresh_service

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_media_storage] = lambda: mock_media_storage
    app.dependency_overrides[get_news_refresh_service] = lambda: mock_refresh_service

    # Use ASGITransport for direct app interaction
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
