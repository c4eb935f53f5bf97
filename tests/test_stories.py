"""Stories access module: expiry window is decided by the injected clock."""

from datetime import datetime, timedelta, timezone

import pytest

from app.core.errors import BackendUnavailable, Unauthenticated, ValidationFailed
from app.modules.profiles.service import ProfileService
from app.modules.stories.service import StoryService
from tests.fake_supabase import ALICE, BOB


def _seed_story(db, name, created_at, expires_at, user_id=ALICE):
    return db.add("stories", {
        "media_url": f"https://cdn.example/{name}.jpg",
        "user_id": user_id,
        "created_at": created_at.isoformat(),
        "expires_at": expires_at.isoformat(),
    })


T0 = datetime(2026, 3, 1, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("hours_later", [0, 5, 11, 12, 23, 48])
def test_refresh_hides_expired_stories_for_any_clock(db, alice, hours_later):
    now = T0 + timedelta(hours=hours_later)
    _seed_story(db, "short", T0, T0 + timedelta(hours=12))
    _seed_story(db, "long", T0 + timedelta(minutes=1), T0 + timedelta(hours=24))

    stories = StoryService(alice, clock=lambda: now).refresh()

    assert all(s.expires_at > now for s in stories)
    expected = [n for n, exp in (("long", 24), ("short", 12)) if hours_later < exp]
    assert [s.media_url.rsplit("/", 1)[1][:-4] for s in stories] == expected


def test_story_expiring_exactly_now_is_hidden(db, alice):
    _seed_story(db, "edge", T0 - timedelta(hours=1), T0)

    assert StoryService(alice, clock=lambda: T0).refresh() == []


def test_refresh_newest_first_with_profiles(db, alice):
    db.add("profiles", {"id": BOB, "username": "bob"})
    _seed_story(db, "old", T0 - timedelta(hours=2), T0 + timedelta(hours=5), user_id=BOB)
    _seed_story(db, "new", T0 - timedelta(hours=1), T0 + timedelta(hours=5), user_id=BOB)

    stories = StoryService(alice, clock=lambda: T0).refresh()

    assert [s.media_url for s in stories] == ["https://cdn.example/new.jpg", "https://cdn.example/old.jpg"]
    assert stories[0].profile.username == "bob"


def test_create_story_sets_expiry_from_ttl(db, alice):
    service = StoryService(alice, clock=lambda: T0)

    story = service.create_story("https://cdn.example/me.jpg")

    assert story.expires_at == T0 + timedelta(hours=24)
    assert service.records == [story]
    assert db.rows("stories")[0]["user_id"] == ALICE


def test_create_story_requires_media(db, alice):
    with pytest.raises(ValidationFailed):
        StoryService(alice).create_story("")
    assert db.calls == []


def test_create_story_unauthenticated(db, anonymous):
    with pytest.raises(Unauthenticated):
        StoryService(anonymous).create_story("https://cdn.example/me.jpg")
    assert db.rows("stories") == []


def test_create_story_with_media_upload_failure_aborts(db, alice):
    db.fail("storage:stories", "upload")

    with pytest.raises(BackendUnavailable):
        StoryService(alice, clock=lambda: T0).create_story_with_media("me.png", b"\x89PNG", "image/png")

    assert db.rows("stories") == []


def test_create_story_with_media_resolves_profile_once(db, alice):
    StoryService(alice, clock=lambda: T0, profiles=ProfileService(alice)).create_story_with_media(
        "me.png", b"\x89PNG", "image/png"
    )

    assert db.calls.count(("profiles", "select")) == 2
    assert db.calls.count(("profiles", "insert")) == 1
