from typing import List, Optional

import structlog

from ..exceptions import BlogNotFoundError, ValidationError
from ..models.blog_post import BlogPost, MediaType
from ..repositories.blog_repository import BlogRepository
from ..utils.url_utils import derive_public_id
from .media_storage import MediaStorageService

logger = structlog.get_logger(__name__)


class BlogService:
    def __init__(self, blog_repo: BlogRepository, media_storage: MediaStorageService):
        self.blog_repo = blog_repo
        self.media_storage = media_storage

    def create_blog(
        self,
        title: Optional[str],
        description: Optional[str],
        filename: Optional[str],
        content_type: Optional[str],
        data: Optional[bytes],
    ) -> BlogPost:
        if not data:
            raise ValidationError("No media file uploaded")
        if not title or not title.strip():
            raise ValidationError("Title is required")
        if not description or not description.strip():
            raise ValidationError("Description is required")

        uploaded = self.media_storage.upload(data, filename or "", content_type or "")
        media_type = MediaType.from_content_type(content_type or "")

        blog = self.blog_repo.create(
            title=title.strip(),
            description=description.strip(),
            media_url=uploaded.url,
            media_type=media_type.value,
        )
        logger.info("Blog created", blog_id=blog.id, media_type=blog.media_type, public_id=uploaded.public_id)
        return blog

    def list_blogs(self) -> List[BlogPost]:
        return self.blog_repo.find_all()

    def delete_blog(self, blog_id: str) -> None:
        blog = self.blog_repo.get(blog_id)
        if not blog:
            raise BlogNotFoundError(blog_id)

        try:
            public_id = derive_public_id(blog.media_url, self.media_storage.folder)
        except ValidationError as e:
            logger.warning("Skipping remote media deletion", blog_id=blog_id, error=str(e))
            public_id = None

        if public_id and not self.media_storage.delete(public_id, blog.media_type):
            logger.warning("Remote media was not deleted", blog_id=blog_id, public_id=public_id)

        self.blog_repo.delete(blog_id)
        logger.info("Blog deleted", blog_id=blog_id, public_id=public_id)
