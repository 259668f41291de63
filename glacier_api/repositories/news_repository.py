from typing import Any, Dict, List

from sqlalchemy.orm import Session

from ..models.news_article import NewsArticle


class NewsRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[NewsArticle]:
        return (
            self.session.query(NewsArticle)
            .order_by(NewsArticle.published_at.desc().nullslast(), NewsArticle.id)
            .all()
        )

    def delete_all(self) -> int:
        return self.session.query(NewsArticle).delete(synchronize_session=False)

    def insert_many(self, articles: List[Dict[str, Any]]) -> int:
        self.session.add_all([NewsArticle(**article) for article in articles])
        return len(articles)

    def replace_all(self, articles: List[Dict[str, Any]]) -> int:
        """Clear the collection and insert the given rows in a single commit."""
        try:
            self.delete_all()
            stored = self.insert_many(articles)
            self.session.commit()
            return stored
        except Exception:
            self.session.rollback()
            raise
