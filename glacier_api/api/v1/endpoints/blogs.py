import asyncio
from functools import partial
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from ...dependencies import get_blog_service
from ..schemas import BlogPostResponse, BlogListResponse, MessageResponse
from ....exceptions import BlogNotFoundError, MediaStorageError, ValidationError
from ....services.blog_service import BlogService

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("", response_model=BlogPostResponse, status_code=201)
async def create_blog(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    media: Optional[UploadFile] = File(None),
    blog_service: BlogService = Depends(get_blog_service)
):
    try:
        data = await media.read() if media else None
        create = partial(
            blog_service.create_blog,
            title=title,
            description=description,
            filename=media.filename if media else None,
            content_type=media.content_type if media else None,
            data=data,
        )
        # Media upload is a blocking GCS transfer
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, create)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MediaStorageError as e:
        logger.error("Failed to store blog media", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to upload media")
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Failed to create blog", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create blog")


@router.get("", response_model=BlogListResponse)
async def list_blogs(blog_service: BlogService = Depends(get_blog_service)):
    try:
        return BlogListResponse(
            blogs=[BlogPostResponse.model_validate(blog) for blog in blog_service.list_blogs()]
        )
    except Exception as e:
        logger.error("Failed to list blogs", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to retrieve blogs")


@router.delete("/{blog_id}", response_model=MessageResponse)
async def delete_blog(blog_id: str, blog_service: BlogService = Depends(get_blog_service)):
    try:
        loop = asyncio.get_event_loop()
        await loop.run_in_executor(None, blog_service.delete_blog, blog_id)
        return MessageResponse(message="Blog deleted successfully")
    except BlogNotFoundError:
        raise HTTPException(status_code=404, detail="Blog not found")
    except Exception as e:
        logger.error("Failed to delete blog", blog_id=blog_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to delete blog")
