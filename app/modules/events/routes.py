from fastapi import APIRouter, Depends
from app.core.dependencies import get_event_service
from app.core.schemas import RelationToggleResponse
from app.modules.events.schemas import EventCreate, EventResponse
from app.modules.events.service import EventService
from typing import List

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=List[EventResponse])
async def list_events(
    service: EventService = Depends(get_event_service)
):
    """List upcoming events, soonest first"""
    return service.refresh()


@router.post("", response_model=EventResponse, status_code=201)
async def create_event(
    event_data: EventCreate,
    service: EventService = Depends(get_event_service)
):
    """Create a new event, optionally attached to a group"""
    return service.create_event(
        event_data.title,
        event_data.start_time,
        description=event_data.description,
        location=event_data.location,
        end_time=event_data.end_time,
        group_id=event_data.group_id
    )


@router.post("/{event_id}/attend", response_model=RelationToggleResponse)
async def attend_event(
    event_id: str,
    service: EventService = Depends(get_event_service)
):
    """Mark the caller as attending an event"""
    return RelationToggleResponse(created=service.attend_event(event_id))
