import structlog
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from ...dependencies import get_news_service, get_news_refresh_service
from ....news.services.news_service import NewsService
from ....news.services.news_refresh_service import NewsRefreshService
from ....news.schemas.responses import NewsListResponse

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/news", response_model=NewsListResponse)
async def get_news_list(news_service: NewsService = Depends(get_news_service)):
    """Get all stored glacier news, most recently published first"""
    try:
        return news_service.get_news_list()
    except Exception as e:
        logger.error("Failed to retrieve news", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to retrieve news")


@router.get("/fetch-news")
async def fetch_news(refresh_service: NewsRefreshService = Depends(get_news_refresh_service)):
    """Refresh the stored news now and return the provider's raw response"""
    result = await refresh_service.refresh()
    if result.failed:
        return JSONResponse(status_code=500, content=result.payload)
    return result.payload
