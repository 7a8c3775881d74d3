"""
Document models for iHost API

One model per Firestore collection, plus the status/role enums.
"""
from ihost.models.enums import EventUserRole, EventUserStatus, FriendshipStatus
from ihost.models.user import User
from ihost.models.event import Event
from ihost.models.event_user import EventUser
from ihost.models.friendship import Friendship
from ihost.models.image import EventImage

__all__ = [
    # Enums
    "EventUserRole",
    "EventUserStatus",
    "FriendshipStatus",
    # User
    "User",
    # Event
    "Event",
    "EventUser",
    # Social
    "Friendship",
    # Images
    "EventImage",
]
