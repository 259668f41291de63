"""News API response schemas"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class NewsArticleResponse(BaseModel):
    """Stored glacier article"""
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = Field(None, serialization_alias="imageUrl")
    author: Optional[str] = None
    content: Optional[str] = None
    source: Optional[Dict[str, Any]] = None
    published_at: Optional[datetime] = Field(None, serialization_alias="publishedAt")
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")

    class Config:
        from_attributes = True


class NewsListResponse(BaseModel):
    """Response for news list endpoint"""
    articles: List[NewsArticleResponse]
