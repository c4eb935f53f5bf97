from fastapi import APIRouter, Depends, File, Form, UploadFile
from app.core.dependencies import get_post_service
from app.core.errors import BackendUnavailable
from app.core.schemas import RelationToggleResponse
from app.modules.posts.schemas import PostCreate, PostResponse, CommentCreate, CommentResponse
from app.modules.posts.service import PostService
from app.modules.uploads.service import read_upload
from typing import List

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=List[PostResponse])
async def list_posts(
    service: PostService = Depends(get_post_service)
):
    """List the feed, newest first"""
    return service.refresh()


@router.post("", response_model=PostResponse, status_code=201)
async def create_post(
    post_data: PostCreate,
    service: PostService = Depends(get_post_service)
):
    """Create a post, optionally with an already uploaded image URL"""
    return service.create_post(post_data.content, post_data.image_url)


@router.post("/with-image", response_model=PostResponse, status_code=201)
async def create_post_with_image(
    content: str = Form(...),
    file: UploadFile = File(...),
    service: PostService = Depends(get_post_service)
):
    """Upload an image to the posts bucket and create the post in one call"""
    data = await read_upload(file)
    return service.create_post_with_image(content, file.filename or "", data, file.content_type)


@router.post("/{post_id}/like", response_model=RelationToggleResponse)
async def like_post(
    post_id: str,
    service: PostService = Depends(get_post_service)
):
    """Like a post"""
    return RelationToggleResponse(created=service.like_post(post_id))


@router.get("/{post_id}/comments", response_model=List[CommentResponse])
async def list_comments(
    post_id: str,
    service: PostService = Depends(get_post_service)
):
    """List comments of a post"""
    return service.list_comments(post_id)


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=201)
async def add_comment(
    post_id: str,
    comment_data: CommentCreate,
    service: PostService = Depends(get_post_service)
):
    """Comment on a post"""
    comment = service.add_comment(post_id, comment_data.content)
    if comment is None:
        raise BackendUnavailable("Comment could not be saved")
    return comment
