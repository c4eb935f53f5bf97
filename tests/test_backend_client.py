"""Backend facade: actor resolution, filters, single-attempt failures."""

from datetime import datetime, timezone

import pytest

from app.core.errors import BackendUnavailable, Unauthenticated, ValidationFailed
from app.database.supabase_client import BackendClient, QueryFilter
from tests.fake_supabase import ALICE


def test_current_actor_from_token(alice):
    assert alice.get_current_actor() == ALICE
    assert alice.get_current_user()["email"] == "alice@example.com"


def test_actor_lookup_is_cached_per_client(db, alice):
    alice.get_current_actor()
    alice.get_current_actor()
    assert db.calls.count(("auth", "get_user")) == 1


def test_no_token_means_no_actor(db, anonymous):
    assert anonymous.get_current_actor() is None
    assert db.calls == []
    with pytest.raises(Unauthenticated):
        anonymous.require_actor()


def test_rejected_token_means_no_actor(db):
    assert BackendClient(db, access_token="forged").get_current_actor() is None


def test_query_applies_filters(db, alice):
    db.add("events", {"title": "a", "start_time": "2026-01-01T00:00:00+00:00", "group_id": "g1"})
    db.add("events", {"title": "b", "start_time": "2026-02-01T00:00:00+00:00", "group_id": "g1"})
    db.add("events", {"title": "c", "start_time": "2026-03-01T00:00:00+00:00", "group_id": "g2"})

    rows = alice.query("events", QueryFilter(
        eq={"group_id": "g1"},
        gte={"start_time": datetime(2026, 1, 15, tzinfo=timezone.utc)},
        order_by="start_time",
        descending=True,
    ))

    assert [r["title"] for r in rows] == ["b"]


def test_query_with_empty_in_list_skips_round_trip(db, alice):
    assert alice.query("likes", QueryFilter(in_={"post_id": []})) == []
    assert db.backend_calls() == []


def test_query_failure_is_backend_unavailable_after_one_attempt(db, alice):
    db.fail("posts")

    with pytest.raises(BackendUnavailable):
        alice.query("posts")

    assert db.backend_calls() == [("posts", "select")]


def test_insert_requires_actor(db, anonymous):
    with pytest.raises(Unauthenticated):
        anonymous.insert("posts", {"content": "x"})
    assert db.rows("posts") == []


def test_insert_serialises_datetimes(db, alice):
    row = alice.insert("stories", {"expires_at": datetime(2026, 5, 1, tzinfo=timezone.utc)})
    assert row["expires_at"] == "2026-05-01T00:00:00+00:00"


def test_upload_blob_rejects_unknown_bucket(db, alice):
    with pytest.raises(ValidationFailed):
        alice.upload_blob("secrets", "a.txt", b"x")
    assert db.backend_calls() == []


def test_upload_blob_returns_public_url(db, alice):
    url = alice.upload_blob("avatars", "me.PNG", b"\x89PNG", "image/png")

    [(bucket, path)] = db.blobs.keys()
    assert bucket == "avatars"
    assert "/" not in path and path.endswith(".png")
    assert url.endswith(path)


def test_count_is_reported_by_backend_without_rows(db, alice):
    for i in range(1200):
        db.add("likes", {"post_id": "p1", "user_id": f"fan-{i}"})
    db.add("likes", {"post_id": "p2", "user_id": "fan-0"})

    assert alice.count("likes", QueryFilter(eq={"post_id": "p1"})) == 1200
    assert len(alice.query("likes")) == 1000


def test_count_failure_is_backend_unavailable(db, alice):
    db.fail("likes")

    with pytest.raises(BackendUnavailable):
        alice.count("likes", QueryFilter(eq={"post_id": "p1"}))
