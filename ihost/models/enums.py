from enum import Enum


class EventUserStatus(str, Enum):
    """A user's answer to an event.

    Invitees start as PENDING and answer with ACCEPTED or DECLINED. CREATOR
    is written for the event creator when the event is created.
    """

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    CREATOR = "CREATOR"


class EventUserRole(str, Enum):
    """Permission level of a user within an event."""

    CREATOR = "CREATOR"
    ATTENDEE = "ATTENDEE"


class FriendshipStatus(str, Enum):
    """Friend request state. ACCEPTED and DECLINED are terminal."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
