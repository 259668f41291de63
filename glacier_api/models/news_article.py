from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.sql import func

from ..core.database import Base


class NewsArticle(Base):
    """
    Glacier/climate article pulled from the news search provider.
    The table is disposable: every refresh replaces its full contents.
    """
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, autoincrement=True)

    title = Column(String(500))
    description = Column(Text)
    url = Column(String(1000))
    image_url = Column(String(1000))
    author = Column(String(500))
    content = Column(Text)

    # Provider source descriptor, e.g. {"id": "bbc-news", "name": "BBC News"}
    source = Column(JSON)

    published_at = Column(DateTime)
    created_at = Column(DateTime, default=func.now())

    def __repr__(self):
        return f"<NewsArticle(id={self.id}, title='{(self.title or '')[:50]}...')>"
