"""
Invitation / attendance API endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, Depends

from ihost.core.dependencies import AuthContext, get_current_user, get_event_user_service
from ihost.models.enums import EventUserStatus
from ihost.models.event_user import EventUser
from ihost.schemas.event import EventWithMetadata
from ihost.schemas.event_user import InvitationResponse, InviteUsersRequest, InviteUsersResponse
from ihost.services.event_user_service import EventUserService

router = APIRouter()


@router.post("/invite", response_model=InviteUsersResponse)
def invite_users(
    request: InviteUsersRequest,
    current_user: AuthContext = Depends(get_current_user),
    event_user_service: EventUserService = Depends(get_event_user_service)
):
    """Invite users to an event (creator only). Already invited users are skipped."""
    invited = event_user_service.invite_users(request.event_id, request.user_ids, current_user.uid)
    return InviteUsersResponse(invited_count=len(invited), invited_users=invited)


@router.get("/my-events", response_model=List[EventWithMetadata])
def get_my_events(
    status: Optional[EventUserStatus] = None,
    current_user: AuthContext = Depends(get_current_user),
    event_user_service: EventUserService = Depends(get_event_user_service)
):
    return event_user_service.get_my_events(current_user.uid, status)


@router.get("/event/{event_id}", response_model=List[EventUser])
def get_event_attendees(
    event_id: str,
    status: Optional[EventUserStatus] = None,
    current_user: AuthContext = Depends(get_current_user),
    event_user_service: EventUserService = Depends(get_event_user_service)
):
    return event_user_service.get_event_attendees(event_id, status)


@router.post("/{event_user_id}/accept", response_model=InvitationResponse)
def accept_invitation(
    event_user_id: str,
    current_user: AuthContext = Depends(get_current_user),
    event_user_service: EventUserService = Depends(get_event_user_service)
):
    event_id = event_user_service.accept_invitation(event_user_id, current_user.uid)
    return InvitationResponse(message="Invitation accepted", event_id=event_id)


@router.post("/{event_user_id}/decline", response_model=InvitationResponse)
def decline_invitation(
    event_user_id: str,
    current_user: AuthContext = Depends(get_current_user),
    event_user_service: EventUserService = Depends(get_event_user_service)
):
    event_id = event_user_service.decline_invitation(event_user_id, current_user.uid)
    return InvitationResponse(message="Invitation declined", event_id=event_id)
