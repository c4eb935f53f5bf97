import logging
from datetime import timedelta
from typing import List, Optional

from app.config import settings
from app.core.entity_access import EntityAccessModule, as_utc
from app.database.supabase_client import QueryFilter
from app.modules.stories.schemas import StoryResponse

logger = logging.getLogger(__name__)


class StoryService(EntityAccessModule):
    """Unexpired stories, newest first."""

    table = "stories"

    def _fetch(self) -> List[StoryResponse]:
        now = self.clock()
        rows = self.backend.query("stories", QueryFilter(
            gt={"expires_at": now},
            order_by="created_at",
            descending=True,
        ))
        profiles = self._load_profiles(row["user_id"] for row in rows)
        stories = [StoryResponse(**row, profile=profiles.get(row["user_id"])) for row in rows]
        # The window is decided by our clock, not the database's
        return [story for story in stories if as_utc(story.expires_at) > now]

    def create_story(self, media_url: str) -> StoryResponse:
        """Publish a story that expires story_ttl_hours from now"""
        media_url = self._require_text(media_url, "media_url")
        return self._insert_story(self._resolve_actor(), media_url)

    def _insert_story(self, actor_id: str, media_url: str) -> StoryResponse:
        now = self.clock()
        row = self.backend.insert("stories", {
            "media_url": media_url,
            "user_id": actor_id,
            "expires_at": now + timedelta(hours=settings.story_ttl_hours)
        })
        story = StoryResponse(**row, profile=self._profile_of(actor_id))
        if self.mounted and as_utc(story.expires_at) > now:
            self.records = [story] + self.records
        return story

    def create_story_with_media(self, filename: str, data: bytes,
                                content_type: Optional[str] = None) -> StoryResponse:
        actor_id = self._resolve_actor()
        media_url = self.backend.upload_blob("stories", filename, data, content_type)
        return self._insert_story(actor_id, media_url)
