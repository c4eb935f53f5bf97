import logging
from typing import Any, List

from app.core.errors import ValidationFailed
from app.database.supabase_client import BackendClient
from app.modules.mentors.models import AVAILABILITY_OPTIONS, EXPERTISE_OPTIONS, LANGUAGE_OPTIONS
from app.modules.mentors.schemas import MentorCreate, MentorResponse

logger = logging.getLogger(__name__)


def _check_choices(values: List[str], allowed: List[str], field: str) -> List[str]:
    if not values:
        raise ValidationFailed(f"Select at least one {field} option")
    unknown = [v for v in values if v not in allowed]
    if unknown:
        raise ValidationFailed(f"Unknown {field}: {', '.join(unknown)}")
    return list(dict.fromkeys(values))


class MentorService:
    def __init__(self, backend: BackendClient, profiles: Any = None):
        self.backend = backend
        self.profiles = profiles

    def register_mentor(self, mentor_data: MentorCreate) -> MentorResponse:
        """Submit a mentorship application; it starts out pending review"""
        expertise = _check_choices(mentor_data.expertise, EXPERTISE_OPTIONS, "expertise")
        languages = _check_choices(mentor_data.languages, LANGUAGE_OPTIONS, "language")
        if mentor_data.availability not in AVAILABILITY_OPTIONS:
            raise ValidationFailed(f"availability must be one of: {', '.join(AVAILABILITY_OPTIONS)}")
        if not mentor_data.experience.strip():
            raise ValidationFailed("experience must not be empty")
        if not mentor_data.bio.strip():
            raise ValidationFailed("bio must not be empty")

        actor_id = self.backend.require_actor()
        if self.profiles is not None:
            user = self.backend.get_current_user() or {}
            self.profiles.ensure_profile(actor_id, user.get("email"))

        row = self.backend.insert("mentors", {
            "user_id": actor_id,
            "expertise": expertise,
            "languages": languages,
            "availability": mentor_data.availability,
            "experience": mentor_data.experience.strip(),
            "bio": mentor_data.bio.strip(),
            "status": "pending"
        })
        logger.info(f"Mentor application submitted by {actor_id}")
        return MentorResponse(**row)
