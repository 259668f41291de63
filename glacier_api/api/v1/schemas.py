from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from ...models.blog_post import MediaType


class BlogPostResponse(BaseModel):
    id: str
    title: str
    description: str
    media_url: str = Field(..., serialization_alias="mediaUrl")
    media_type: MediaType = Field(..., serialization_alias="mediaType")
    created_at: datetime = Field(..., serialization_alias="createdAt")

    class Config:
        from_attributes = True


class BlogListResponse(BaseModel):
    blogs: List[BlogPostResponse]


class MessageResponse(BaseModel):
    message: str
