from fastapi import APIRouter, Depends, File, UploadFile
from app.core.dependencies import get_story_service
from app.modules.stories.schemas import StoryCreate, StoryResponse
from app.modules.stories.service import StoryService
from app.modules.uploads.service import read_upload
from typing import List

router = APIRouter(prefix="/stories", tags=["stories"])


@router.get("", response_model=List[StoryResponse])
async def list_stories(
    service: StoryService = Depends(get_story_service)
):
    """List stories that have not expired yet"""
    return service.refresh()


@router.post("", response_model=StoryResponse, status_code=201)
async def create_story(
    story_data: StoryCreate,
    service: StoryService = Depends(get_story_service)
):
    """Create a story from an already uploaded media URL"""
    return service.create_story(story_data.media_url)


@router.post("/with-media", response_model=StoryResponse, status_code=201)
async def create_story_with_media(
    file: UploadFile = File(...),
    service: StoryService = Depends(get_story_service)
):
    """Upload media to the stories bucket and publish it"""
    data = await read_upload(file)
    return service.create_story_with_media(file.filename or "", data, file.content_type)
