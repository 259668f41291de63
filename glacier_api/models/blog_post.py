import uuid
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, String, Text, DateTime

from ..core.database import Base


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"

    @classmethod
    def from_content_type(cls, content_type: str) -> "MediaType":
        if content_type and content_type.lower().startswith("video/"):
            return cls.VIDEO
        return cls.IMAGE


class BlogPost(Base):
    __tablename__ = "blogs"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)
    media_url = Column(String(1000), nullable=False)
    media_type = Column(String(20), nullable=False, default=MediaType.IMAGE.value)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    def __repr__(self):
        return f"<BlogPost(id={self.id}, title='{self.title[:50]}', media_type='{self.media_type}')>"
