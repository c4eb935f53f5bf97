from fastapi import APIRouter, Depends
from app.core.dependencies import get_group_service
from app.core.schemas import RelationToggleResponse
from app.modules.groups.schemas import GroupCreate, GroupResponse, GroupMemberResponse
from app.modules.groups.service import GroupService
from typing import List

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("", response_model=List[GroupResponse])
async def list_groups(
    service: GroupService = Depends(get_group_service)
):
    """List groups, newest first, with member counts"""
    return service.refresh()


@router.post("", response_model=GroupResponse, status_code=201)
async def create_group(
    group_data: GroupCreate,
    service: GroupService = Depends(get_group_service)
):
    """Create a new group"""
    return service.create_group(
        group_data.name,
        description=group_data.description,
        location=group_data.location,
        cover_image_url=group_data.cover_image_url
    )


@router.post("/{group_id}/join", response_model=RelationToggleResponse)
async def join_group(
    group_id: str,
    service: GroupService = Depends(get_group_service)
):
    """Join a group"""
    return RelationToggleResponse(created=service.join_group(group_id))


@router.get("/{group_id}/members", response_model=List[GroupMemberResponse])
async def list_members(
    group_id: str,
    service: GroupService = Depends(get_group_service)
):
    """List all members of a group"""
    return service.list_members(group_id)
