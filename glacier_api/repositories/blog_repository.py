from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from ..models.blog_post import BlogPost


class BlogRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, title: str, description: str, media_url: str, media_type: str) -> BlogPost:
        blog = BlogPost(
            title=title,
            description=description,
            media_url=media_url,
            media_type=media_type
        )
        self.session.add(blog)
        self.session.commit()
        self.session.refresh(blog)
        return blog

    def get(self, blog_id: str) -> Optional[BlogPost]:
        return self.session.query(BlogPost).filter(BlogPost.id == blog_id).first()

    def find_all(self) -> List[BlogPost]:
        return self.session.query(BlogPost).order_by(desc(BlogPost.created_at)).all()

    def delete(self, blog_id: str) -> bool:
        blog = self.get(blog_id)
        if blog:
            self.session.delete(blog)
            self.session.commit()
            return True
        return False
