"""
Event API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, status

from ihost.core.dependencies import AuthContext, get_current_user, get_event_service
from ihost.schemas.event import (
    CreateEventRequest,
    EventDeleteResponse,
    EventWithMetadata,
    UpdateEventRequest,
)
from ihost.services.event_service import EventService

router = APIRouter()


@router.get("", response_model=List[EventWithMetadata])
def get_my_events(
    current_user: AuthContext = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    """All events the caller created, was invited to or asked to join"""
    return event_service.get_all_events_for_user(current_user.uid)


@router.post("", response_model=EventWithMetadata, status_code=status.HTTP_201_CREATED)
def create_event(
    request: CreateEventRequest,
    current_user: AuthContext = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    event_id, _ = event_service.create_event(request, current_user.uid)
    return event_service.get_event_by_id(event_id, current_user.uid)


@router.get("/by-code/{share_code}", response_model=EventWithMetadata)
def get_event_by_share_code(
    share_code: str,
    current_user: AuthContext = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    """Resolve a share code. Joins the caller as PENDING if they are new to the event."""
    return event_service.find_event_by_share_code(share_code, current_user.uid)


@router.get("/{event_id}", response_model=EventWithMetadata)
def get_event(
    event_id: str,
    current_user: AuthContext = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    return event_service.get_event_by_id(event_id, current_user.uid)


@router.put("/{event_id}", response_model=EventWithMetadata)
def update_event(
    event_id: str,
    request: UpdateEventRequest,
    current_user: AuthContext = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    """Partially update an event (creator only)"""
    event_service.update_event(event_id, request, current_user.uid)
    return event_service.get_event_by_id(event_id, current_user.uid)


@router.delete("/{event_id}", response_model=EventDeleteResponse)
def delete_event(
    event_id: str,
    current_user: AuthContext = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    """Delete an event and its invitations (creator only)"""
    deleted = event_service.delete_event(event_id, current_user.uid)
    return EventDeleteResponse(deleted_event_users=deleted)
