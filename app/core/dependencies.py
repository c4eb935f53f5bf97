"""
Core dependencies: backend facade per request and the access modules built on it
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.database.supabase_client import BackendClient, SupabaseClient, get_supabase
from app.modules.catalog.service import ReferenceCatalog
from app.modules.events.service import EventService
from app.modules.groups.service import GroupService
from app.modules.mentors.service import MentorService
from app.modules.posts.service import PostService
from app.modules.profiles.service import ProfileService
from app.modules.stories.service import StoryService
from supabase import Client
from typing import Iterator, Optional
import logging

logger = logging.getLogger(__name__)

# Reads work anonymously, so a missing header is not rejected here
security = HTTPBearer(auto_error=False)


def get_access_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> Optional[str]:
    """Extract JWT token from Authorization header, if any"""
    if credentials is None:
        return None
    return credentials.credentials


def get_backend(
    token: Optional[str] = Depends(get_access_token),
    supabase: Client = Depends(get_supabase)
) -> BackendClient:
    """Backend facade bound to the caller; authenticated callers get a client carrying their JWT"""
    if token:
        return BackendClient(SupabaseClient.get_user_client(token), access_token=token)
    return BackendClient(supabase)


def get_profile_service(backend: BackendClient = Depends(get_backend)) -> ProfileService:
    return ProfileService(backend)


def get_post_service(
    backend: BackendClient = Depends(get_backend),
    profiles: ProfileService = Depends(get_profile_service)
) -> Iterator[PostService]:
    service = PostService(backend, profiles=profiles)
    try:
        yield service
    finally:
        service.close()


def get_story_service(
    backend: BackendClient = Depends(get_backend),
    profiles: ProfileService = Depends(get_profile_service)
) -> Iterator[StoryService]:
    service = StoryService(backend, profiles=profiles)
    try:
        yield service
    finally:
        service.close()


def get_group_service(
    backend: BackendClient = Depends(get_backend),
    profiles: ProfileService = Depends(get_profile_service)
) -> Iterator[GroupService]:
    service = GroupService(backend, profiles=profiles)
    try:
        yield service
    finally:
        service.close()


def get_event_service(
    backend: BackendClient = Depends(get_backend),
    profiles: ProfileService = Depends(get_profile_service)
) -> Iterator[EventService]:
    service = EventService(backend, profiles=profiles)
    try:
        yield service
    finally:
        service.close()


def get_mentor_service(
    backend: BackendClient = Depends(get_backend),
    profiles: ProfileService = Depends(get_profile_service)
) -> MentorService:
    return MentorService(backend, profiles=profiles)


def get_catalog() -> ReferenceCatalog:
    return ReferenceCatalog.get_default()
