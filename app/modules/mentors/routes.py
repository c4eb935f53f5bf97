from fastapi import APIRouter, Depends
from app.core.dependencies import get_mentor_service
from app.modules.mentors.models import AVAILABILITY_OPTIONS, EXPERTISE_OPTIONS, LANGUAGE_OPTIONS
from app.modules.mentors.schemas import MentorCreate, MentorResponse
from app.modules.mentors.service import MentorService

router = APIRouter(prefix="/mentors", tags=["mentors"])


@router.get("/options")
async def get_mentor_options():
    """Choices accepted by the registration form"""
    return {
        "expertise": EXPERTISE_OPTIONS,
        "languages": LANGUAGE_OPTIONS,
        "availability": AVAILABILITY_OPTIONS,
    }


@router.post("", response_model=MentorResponse, status_code=201)
async def register_mentor(
    mentor_data: MentorCreate,
    service: MentorService = Depends(get_mentor_service)
):
    """Register the caller as a mentor"""
    return service.register_mentor(mentor_data)
