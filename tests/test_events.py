"""Events access module: upcoming window, start-time ordering, attendance."""

from datetime import datetime, timedelta, timezone

import pytest

from app.core.errors import Unauthenticated, ValidationFailed
from app.modules.events.service import EventService
from tests.fake_supabase import ALICE, BOB

T0 = datetime(2026, 4, 10, 18, 0, tzinfo=timezone.utc)


def _seed_event(db, title, start_time):
    return db.add("events", {"title": title, "start_time": start_time.isoformat(), "created_by": BOB})


@pytest.mark.parametrize("offset_hours", [-100, 0, 1, 30, 1000])
def test_refresh_lists_upcoming_events_soonest_first(db, alice, offset_hours):
    now = T0 + timedelta(hours=offset_hours)
    _seed_event(db, "picnic", T0 + timedelta(days=2))
    _seed_event(db, "meetup", T0)
    _seed_event(db, "museum", T0 + timedelta(days=1))

    events = EventService(alice, clock=lambda: now).refresh()

    starts = [e.start_time for e in events]
    assert starts == sorted(starts)
    assert all(start >= now for start in starts)
    assert len(events) == sum(1 for d in (0, 1, 2) if T0 + timedelta(days=d) >= now)


def test_event_starting_now_is_listed(db, alice):
    _seed_event(db, "meetup", T0)

    [event] = EventService(alice, clock=lambda: T0).refresh()

    assert event.title == "meetup"


def test_attend_twice_in_a_row_yields_one_attendee_row(db, alice):
    event = _seed_event(db, "meetup", T0 + timedelta(days=1))
    service = EventService(alice, clock=lambda: T0)

    assert service.attend_event(event["id"]) is True
    assert service.attend_event(event["id"]) is False

    assert len(db.rows("event_attendees")) == 1
    assert service.records[0].attendee_count == 1
    assert service.records[0].is_attending is True


def test_attendee_count_matches_toggling_actors(db, alice, bob):
    event = _seed_event(db, "meetup", T0 + timedelta(days=1))
    for backend in (bob, bob, alice):
        EventService(backend, clock=lambda: T0).attend_event(event["id"])

    [seen] = EventService(bob, clock=lambda: T0).refresh()

    assert seen.attendee_count == 2
    assert seen.is_attending is True


def test_create_event_is_slotted_by_start_time(db, alice):
    _seed_event(db, "early", T0 + timedelta(hours=1))
    _seed_event(db, "late", T0 + timedelta(days=3))
    service = EventService(alice, clock=lambda: T0)
    service.refresh()

    service.create_event("middle", T0 + timedelta(days=1), location="Shibuya")

    assert [e.title for e in service.records] == ["early", "middle", "late"]
    assert service.records[1].attendee_count == 0
    assert service.records[1].created_by == ALICE


def test_create_past_event_is_stored_but_not_listed(db, alice):
    service = EventService(alice, clock=lambda: T0)

    service.create_event("yesterday", T0 - timedelta(days=1))

    assert len(db.rows("events")) == 1
    assert service.records == []


def test_create_event_rejects_end_before_start(db, alice):
    with pytest.raises(ValidationFailed):
        EventService(alice).create_event("meetup", T0, end_time=T0 - timedelta(hours=1))
    assert db.calls == []


def test_create_event_requires_title(db, alice):
    with pytest.raises(ValidationFailed):
        EventService(alice).create_event("", T0)


def test_create_event_unauthenticated(db, anonymous):
    with pytest.raises(Unauthenticated):
        EventService(anonymous).create_event("meetup", T0)
    assert db.rows("events") == []
