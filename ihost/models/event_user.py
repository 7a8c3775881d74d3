"""
Join entity between users and events, stored in `event_users`
"""
from typing import Optional

from ihost.models.base import FirestoreModel
from ihost.models.enums import EventUserRole, EventUserStatus


class EventUser(FirestoreModel):
    """One user's relationship to one event.

    Rows are created when an event is created (CREATOR), when the creator
    invites someone (PENDING) and when someone opens the event through its
    share code (PENDING).
    """

    id: Optional[str] = None
    event_id: str
    user_id: str
    status: EventUserStatus = EventUserStatus.PENDING
    role: EventUserRole = EventUserRole.ATTENDEE
    invited_at: str = ""
    responded_at: Optional[str] = None
