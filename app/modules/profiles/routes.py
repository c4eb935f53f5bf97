from fastapi import APIRouter, Depends
from app.core.dependencies import get_profile_service
from app.core.errors import NotFound
from app.modules.profiles.schemas import ProfileResponse
from app.modules.profiles.service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    service: ProfileService = Depends(get_profile_service)
):
    """Get the caller's profile, creating it on first visit"""
    actor_id = service.backend.require_actor()
    user = service.backend.get_current_user() or {}
    return service.ensure_profile(actor_id, user.get("email"))


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(
    profile_id: str,
    service: ProfileService = Depends(get_profile_service)
):
    """Get profile by ID"""
    profile = service.get_profile(profile_id)
    if profile is None:
        raise NotFound("Profile not found")
    return profile
