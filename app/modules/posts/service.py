import logging
from typing import List, Optional

from app.core.entity_access import EntityAccessModule
from app.core.errors import BackendUnavailable
from app.database.supabase_client import QueryFilter
from app.modules.posts.schemas import PostResponse, CommentResponse

logger = logging.getLogger(__name__)


class PostService(EntityAccessModule):
    """Feed posts, newest first, with like/comment counts and the actor's like flag."""

    table = "posts"

    def _fetch(self) -> List[PostResponse]:
        rows = self.backend.query("posts", QueryFilter(order_by="created_at", descending=True))
        post_ids = [row["id"] for row in rows]
        like_counts = self._counts("likes", "post_id", post_ids)
        comment_counts = self._counts("comments", "post_id", post_ids)
        liked = self._actor_links("likes", "post_id", post_ids)
        profiles = self._load_profiles(row["user_id"] for row in rows)

        return [
            PostResponse(
                **row,
                profile=profiles.get(row["user_id"]),
                like_count=like_counts[row["id"]],
                comment_count=comment_counts[row["id"]],
                user_has_liked=row["id"] in liked,
            )
            for row in rows
        ]

    def create_post(self, content: str, image_url: Optional[str] = None) -> PostResponse:
        """Create a post authored by the current actor and put it at the top of the feed"""
        content = self._require_text(content, "content")
        return self._insert_post(self._resolve_actor(), content, image_url)

    def _insert_post(self, actor_id: str, content: str, image_url: Optional[str]) -> PostResponse:
        row = self.backend.insert("posts", {
            "content": content,
            "image_url": image_url,
            "user_id": actor_id
        })
        # Nobody has liked or commented on a post that did not exist a moment ago
        post = PostResponse(**row, profile=self._profile_of(actor_id))
        if self.mounted:
            self.records = [post] + self.records
        return post

    def create_post_with_image(self, content: str, filename: str, data: bytes,
                               content_type: Optional[str] = None) -> PostResponse:
        """Upload the image first; a failed upload aborts the post."""
        content = self._require_text(content, "content")
        actor_id = self._resolve_actor()
        image_url = self.backend.upload_blob("posts", filename, data, content_type)
        return self._insert_post(actor_id, content, image_url)

    def like_post(self, post_id: str) -> bool:
        return self._toggle_relation("likes", "post_id", post_id)

    def add_comment(self, post_id: str, content: str) -> Optional[CommentResponse]:
        """
        Comment on a post.

        A backend failure is logged and None is returned; the text is not kept.
        """
        content = self._require_text(content, "content")
        actor_id = self._resolve_actor()
        try:
            row = self.backend.insert("comments", {
                "post_id": post_id,
                "content": content,
                "user_id": actor_id
            })
        except BackendUnavailable as e:
            logger.error(f"Error posting comment on {post_id}: {e}")
            return None
        self.refresh()
        return CommentResponse(**row, profile=self._profile_of(actor_id))

    def list_comments(self, post_id: str) -> List[CommentResponse]:
        """List comments of a post, oldest first"""
        rows = self.backend.query("comments", QueryFilter(eq={"post_id": post_id}, order_by="created_at"))
        profiles = self._load_profiles(row["user_id"] for row in rows)
        return [CommentResponse(**row, profile=profiles.get(row["user_id"])) for row in rows]
