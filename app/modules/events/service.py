from datetime import datetime
from typing import List, Optional

from app.core.entity_access import EntityAccessModule, as_utc
from app.core.errors import ValidationFailed
from app.database.supabase_client import QueryFilter
from app.modules.events.schemas import EventResponse


class EventService(EntityAccessModule):
    """Upcoming events, soonest first, with attendee counts and the actor's attendance."""

    table = "events"

    def _fetch(self) -> List[EventResponse]:
        now = self.clock()
        rows = self.backend.query("events", QueryFilter(gte={"start_time": now}, order_by="start_time"))
        # The window is decided by our clock, not the database's
        events = [EventResponse(**row) for row in rows]
        events = [event for event in events if as_utc(event.start_time) >= now]
        event_ids = [event.id for event in events]
        attendee_counts = self._counts("event_attendees", "event_id", event_ids)
        attending = self._actor_links("event_attendees", "event_id", event_ids)
        for event in events:
            event.attendee_count = attendee_counts[event.id]
            event.is_attending = event.id in attending
        return events

    def create_event(self, title: str, start_time: datetime, description: Optional[str] = None,
                     location: Optional[str] = None, end_time: Optional[datetime] = None,
                     group_id: Optional[str] = None) -> EventResponse:
        """Create an event and slot it into the list by start time"""
        title = self._require_text(title, "title")
        if end_time is not None and as_utc(end_time) < as_utc(start_time):
            raise ValidationFailed("end_time must not be before start_time")
        actor_id = self._resolve_actor()
        row = self.backend.insert("events", {
            "title": title,
            "description": description,
            "location": location,
            "start_time": start_time,
            "end_time": end_time,
            "group_id": group_id,
            "created_by": actor_id
        })
        event = EventResponse(**row)
        if self.mounted and as_utc(event.start_time) >= self.clock():
            self.records = sorted(self.records + [event], key=lambda e: as_utc(e.start_time))
        return event

    def attend_event(self, event_id: str) -> bool:
        return self._toggle_relation("event_attendees", "event_id", event_id)
