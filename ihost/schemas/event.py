"""
Event schemas
"""
from typing import ClassVar, Optional, Tuple

from pydantic import Field

from ihost.models.base import CamelModel
from ihost.models.enums import EventUserRole, EventUserStatus
from ihost.models.event import Event
from ihost.schemas.common import PatchRequest

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}$"


class CreateEventRequest(CamelModel):
    """Create a new event; the caller becomes its creator"""
    title: str = Field(min_length=1)
    description: Optional[str] = None
    event_date: str = Field(pattern=DATE_PATTERN)
    event_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    location: Optional[str] = None
    free: bool = True
    price: float = Field(default=0.0, ge=0)


class UpdateEventRequest(PatchRequest):
    """Partial event update; only the creator may apply it"""
    required_fields: ClassVar[Tuple[str, ...]] = ("title", "event_date")

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    event_date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    event_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    location: Optional[str] = None


class EventWithMetadata(CamelModel):
    """An event together with the caller's relationship to it"""
    id: str
    event: Event
    user_status: Optional[EventUserStatus] = None
    user_role: Optional[EventUserRole] = None


class EventDeleteResponse(CamelModel):
    message: str = "Event deleted successfully"
    deleted_event_users: int
