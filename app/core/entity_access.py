"""
Shared shape of the community access modules (posts, stories, groups, events).

Each module holds a transient, re-fetchable copy of its rows:
    idle -> loading -> ready on the first refresh, ready -> loading -> ready on
    every later one. There is no error state; a failed refresh is logged and the
    previous records stay in place. The loading flag is cleared either way,
    also after close(); only the records are left alone once closed.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Set

from app.core.errors import BackendUnavailable, ValidationFailed
from app.database.supabase_client import BackendClient, QueryFilter

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Ids per `in_` filter; keeps request URLs and result sets under the backend row cap
IN_CHUNK_SIZE = 100


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive timestamps coming back from the backend are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _chunks(ids: Iterable[str], size: int = IN_CHUNK_SIZE) -> Iterator[List[str]]:
    ids = list(ids)
    for start in range(0, len(ids), size):
        yield ids[start:start + size]


class EntityAccessModule:
    table: str = ""

    def __init__(self, backend: BackendClient, clock: Optional[Clock] = None, profiles: Any = None):
        self.backend = backend
        self.clock = clock or utc_now
        # Anything with ensure_profile(actor_id, email); called before each mutation
        self.profiles = profiles
        self.records: List[Any] = []
        self.loading = False
        self.state = "idle"
        self.mounted = True

    def _fetch(self) -> List[Any]:
        raise NotImplementedError

    def refresh(self) -> List[Any]:
        """Re-read every record with its derived fields and replace the in-memory list."""
        self.loading = True
        self.state = "loading"
        records = None
        try:
            records = self._fetch()
        except BackendUnavailable as e:
            logger.error(f"Error fetching {self.table}: {e}")
        finally:
            self.loading = False
            self.state = "ready"
        if records is not None and self.mounted:
            self.records = records
        return self.records

    def close(self):
        """Stop writing records; an in-flight refresh finishing later is discarded."""
        self.mounted = False

    def _require_text(self, value: Optional[str], field: str) -> str:
        if value is None or not value.strip():
            raise ValidationFailed(f"{field} must not be empty")
        return value.strip()

    def _resolve_actor(self) -> str:
        actor_id = self.backend.require_actor()
        if self.profiles is not None:
            user = self.backend.get_current_user() or {}
            self.profiles.ensure_profile(actor_id, user.get("email"))
        return actor_id

    def _counts(self, table: str, key: str, ids: Iterable[str]) -> Dict[str, int]:
        """Relation rows per entity, counted by the backend one entity at a time."""
        return {entity_id: self.backend.count(table, QueryFilter(eq={key: entity_id})) for entity_id in ids}

    def _actor_links(self, table: str, key: str, ids: Iterable[str]) -> Set[str]:
        """Entity ids the current actor is linked to; empty for anonymous callers."""
        actor_id = self.backend.get_current_actor()
        if actor_id is None:
            return set()
        linked: Set[str] = set()
        for chunk in _chunks(ids):
            rows = self.backend.query(table, QueryFilter(eq={"user_id": actor_id}, in_={key: chunk}), columns=key)
            linked.update(row[key] for row in rows)
        return linked

    def _load_profiles(self, user_ids: Iterable[str]) -> Dict[str, Dict[str, Any]]:
        profiles: Dict[str, Dict[str, Any]] = {}
        for chunk in _chunks(dict.fromkeys(user_ids)):
            rows = self.backend.query("profiles", QueryFilter(in_={"id": chunk}))
            profiles.update((row["id"], row) for row in rows)
        return profiles

    def _profile_of(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Best-effort profile lookup for a freshly inserted record."""
        try:
            return self._load_profiles([user_id]).get(user_id)
        except BackendUnavailable as e:
            logger.warning(f"Could not load profile {user_id}: {e}")
            return None

    def _toggle_relation(self, table: str, key: str, entity_id: str) -> bool:
        """
        Record the actor's participation in an entity.

        Returns False without inserting when the (entity, actor) row already
        exists. Two requests racing between the check and the insert can still
        both insert; only a unique (entity, user) constraint on the table stops that.
        """
        actor_id = self._resolve_actor()
        existing = self.backend.query(
            table,
            QueryFilter(eq={key: entity_id, "user_id": actor_id}, limit=1),
            columns=f"{key}, user_id",
        )
        if existing:
            logger.info(f"{table}: {actor_id} already linked to {entity_id}")
            return False
        self.backend.insert(table, {key: entity_id, "user_id": actor_id})
        self.refresh()
        return True
