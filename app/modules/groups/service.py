from typing import List, Optional

from app.core.entity_access import EntityAccessModule
from app.database.supabase_client import QueryFilter
from app.modules.groups.schemas import GroupResponse, GroupMemberResponse


class GroupService(EntityAccessModule):
    """Community groups, newest first, with member counts and the actor's membership."""

    table = "groups"

    def _fetch(self) -> List[GroupResponse]:
        rows = self.backend.query("groups", QueryFilter(order_by="created_at", descending=True))
        group_ids = [row["id"] for row in rows]
        member_counts = self._counts("group_members", "group_id", group_ids)
        joined = self._actor_links("group_members", "group_id", group_ids)
        return [
            GroupResponse(**row, member_count=member_counts[row["id"]], is_member=row["id"] in joined)
            for row in rows
        ]

    def create_group(self, name: str, description: Optional[str] = None, location: Optional[str] = None,
                     cover_image_url: Optional[str] = None) -> GroupResponse:
        """Create a new group. The creator is not joined automatically."""
        name = self._require_text(name, "name")
        actor_id = self._resolve_actor()
        row = self.backend.insert("groups", {
            "name": name,
            "description": description,
            "location": location,
            "cover_image_url": cover_image_url,
            "created_by": actor_id
        })
        group = GroupResponse(**row)
        if self.mounted:
            self.records = [group] + self.records
        return group

    def join_group(self, group_id: str) -> bool:
        return self._toggle_relation("group_members", "group_id", group_id)

    def list_members(self, group_id: str) -> List[GroupMemberResponse]:
        """List all members of a group"""
        rows = self.backend.query("group_members", QueryFilter(eq={"group_id": group_id}, order_by="created_at"))
        profiles = self._load_profiles(row["user_id"] for row in rows)
        return [
            GroupMemberResponse(
                group_id=row["group_id"],
                user_id=row["user_id"],
                created_at=row.get("created_at"),
                profile=profiles.get(row["user_id"]),
            )
            for row in rows
        ]
