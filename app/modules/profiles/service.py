import logging
import random
import string
from typing import Optional

from app.core.errors import BackendUnavailable
from app.database.supabase_client import BackendClient, QueryFilter
from app.modules.profiles.schemas import ProfileResponse

logger = logging.getLogger(__name__)


def _random_suffix() -> str:
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=5))


def default_username(email: Optional[str]) -> str:
    """Local part of the e-mail, or user_ plus five random characters."""
    if email and email.split("@")[0]:
        return email.split("@")[0]
    return f"user_{_random_suffix()}"


class ProfileService:
    def __init__(self, backend: BackendClient):
        self.backend = backend

    def get_profile(self, profile_id: str) -> Optional[ProfileResponse]:
        """Get profile by ID"""
        rows = self.backend.query("profiles", QueryFilter(eq={"id": profile_id}, limit=1))
        if not rows:
            return None
        return ProfileResponse(**rows[0])

    def ensure_profile(self, actor_id: str, email: Optional[str] = None) -> ProfileResponse:
        """
        Return the actor's profile, creating it on first use. Safe to call repeatedly.

        A failed insert is either a concurrent request that created the profile
        first, or a username already taken by someone else. The second case is
        retried once with a random suffix on the username.
        """
        existing = self.get_profile(actor_id)
        if existing:
            return existing

        username = default_username(email)
        try:
            row = self.backend.insert("profiles", {"id": actor_id, "username": username})
        except BackendUnavailable:
            existing = self.get_profile(actor_id)
            if existing:
                return existing
            username = f"{username}_{_random_suffix()}"
            logger.warning(f"Could not create profile {actor_id}, retrying as {username}")
            row = self.backend.insert("profiles", {"id": actor_id, "username": username})
        logger.info(f"Created profile {actor_id} ({username})")
        return ProfileResponse(**row)
