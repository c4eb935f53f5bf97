import logging
import os
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel
from supabase import create_client, Client
from supabase.client import ClientOptions

from app.config import settings
from app.core.errors import BackendUnavailable, Unauthenticated, ValidationFailed

logger = logging.getLogger(__name__)

STORAGE_BUCKETS = ("avatars", "posts", "stories", "groups")


class SupabaseClient:
    _client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_user_client(cls, access_token: str) -> Client:
        """Client that sends the caller's JWT so row level security sees the actor."""
        return create_client(
            settings.supabase_url,
            settings.supabase_key,
            options=ClientOptions(headers={"Authorization": f"Bearer {access_token}"}),
        )

    @classmethod
    def reset_client(cls):
        cls._client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()


class QueryFilter(BaseModel):
    """Filters understood by BackendClient.query; mirrors the PostgREST builder calls."""
    eq: Dict[str, Any] = {}
    in_: Dict[str, List[Any]] = {}
    gte: Dict[str, Any] = {}
    gt: Dict[str, Any] = {}
    order_by: Optional[str] = None
    descending: bool = False
    limit: Optional[int] = None


def _to_param(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class BackendClient:
    """
    Facade over the hosted backend: auth session, row storage and object storage.

    One instance per caller. Every call is a single attempt; failures surface as
    BackendUnavailable and are never retried here.
    """

    def __init__(self, supabase: Client, access_token: Optional[str] = None):
        self.supabase = supabase
        self.access_token = access_token
        self._user: Optional[Dict[str, Any]] = None
        self._user_resolved = False

    def get_current_user(self) -> Optional[Dict[str, Any]]:
        """Resolve the actor behind the access token, or None when there is none."""
        if self._user_resolved:
            return self._user
        self._user_resolved = True
        if not self.access_token:
            return None
        try:
            user_response = self.supabase.auth.get_user(jwt=self.access_token)
        except Exception as e:
            logger.warning(f"Access token rejected: {e}")
            return None
        if not user_response or not user_response.user:
            return None
        user = user_response.user
        self._user = {"id": user.id, "email": user.email}
        return self._user

    def get_current_actor(self) -> Optional[str]:
        user = self.get_current_user()
        return user["id"] if user else None

    def require_actor(self) -> str:
        actor_id = self.get_current_actor()
        if actor_id is None:
            raise Unauthenticated()
        return actor_id

    def _filtered(self, query, filters: QueryFilter):
        for column, value in filters.eq.items():
            query = query.eq(column, _to_param(value))
        for column, values in filters.in_.items():
            query = query.in_(column, [_to_param(v) for v in values])
        for column, value in filters.gte.items():
            query = query.gte(column, _to_param(value))
        for column, value in filters.gt.items():
            query = query.gt(column, _to_param(value))
        return query

    def query(self, table: str, filters: Optional[QueryFilter] = None, columns: str = "*") -> List[Dict[str, Any]]:
        filters = filters or QueryFilter()
        if any(len(values) == 0 for values in filters.in_.values()):
            return []
        try:
            query = self._filtered(self.supabase.table(table).select(columns), filters)
            if filters.order_by:
                query = query.order(filters.order_by, desc=filters.descending)
            if filters.limit is not None:
                query = query.limit(filters.limit)
            result = query.execute()
        except Exception as e:
            logger.error(f"Query on {table} failed: {e}")
            raise BackendUnavailable(f"Could not read {table}") from e
        return result.data or []

    def count(self, table: str, filters: Optional[QueryFilter] = None) -> int:
        """Number of matching rows, counted by the backend; no rows are transferred."""
        filters = filters or QueryFilter()
        if any(len(values) == 0 for values in filters.in_.values()):
            return 0
        try:
            query = self._filtered(self.supabase.table(table).select("*", count="exact", head=True), filters)
            result = query.execute()
        except Exception as e:
            logger.error(f"Count on {table} failed: {e}")
            raise BackendUnavailable(f"Could not count {table}") from e
        return result.count or 0

    def insert(self, table: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        self.require_actor()
        payload = {k: _to_param(v) for k, v in fields.items()}
        try:
            result = self.supabase.table(table).insert(payload).execute()
        except Exception as e:
            logger.error(f"Insert into {table} failed: {e}")
            raise BackendUnavailable(f"Could not write {table}") from e
        if not result.data:
            raise BackendUnavailable(f"Insert into {table} returned no row")
        return result.data[0]

    def upload_blob(self, bucket: str, filename: str, content: bytes, content_type: Optional[str] = None) -> str:
        """Store a file in a public bucket and return its URL."""
        if bucket not in STORAGE_BUCKETS:
            raise ValidationFailed(f"Unknown storage bucket: {bucket}")
        self.require_actor()
        _, ext = os.path.splitext(filename or "")
        path = f"{uuid.uuid4().hex}{ext.lower()}"
        try:
            storage = self.supabase.storage.from_(bucket)
            storage.upload(path, content, {"content-type": content_type or "application/octet-stream"})
            url = storage.get_public_url(path)
        except Exception as e:
            logger.error(f"Upload to {bucket} failed: {e}")
            raise BackendUnavailable(f"Could not upload to {bucket}") from e
        logger.info(f"Uploaded {path}")
        return url
