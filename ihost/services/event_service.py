"""
Event service - event lifecycle, ownership checks and share codes
"""
import logging
import random
import string
from typing import List, Optional, Tuple

from ihost.core.exceptions import ForbiddenError, ResourceNotFoundError
from ihost.models.enums import EventUserRole, EventUserStatus
from ihost.models.event import Event
from ihost.models.event_user import EventUser
from ihost.repositories.event_repository import EventRepository
from ihost.repositories.event_user_repository import EventUserRepository
from ihost.schemas.event import CreateEventRequest, EventWithMetadata, UpdateEventRequest
from ihost.utils.time_utils import timestamp

logger = logging.getLogger(__name__)

SHARE_CODE_PREFIX = "IH-"
SHARE_CODE_LENGTH = 5
SHARE_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_share_code() -> str:
    """Random `IH-XXXXX` code. Uniqueness is not checked."""
    return SHARE_CODE_PREFIX + "".join(random.choices(SHARE_CODE_ALPHABET, k=SHARE_CODE_LENGTH))


def with_metadata(event: Event, event_user: Optional[EventUser]) -> EventWithMetadata:
    return EventWithMetadata(
        id=event.id,
        event=event,
        user_status=event_user.status if event_user else None,
        user_role=event_user.role if event_user else None,
    )


def join_events(event_users: List[EventUser], events: EventRepository) -> List[EventWithMetadata]:
    """
    Join each participation row with its event.

    Rows whose event is missing or cannot be fetched are dropped; the
    rest of the list is still returned.
    """
    results = []
    for event_user in event_users:
        try:
            event = events.find_by_id(event_user.event_id)
        except Exception as e:
            logger.warning(f"Skipping event {event_user.event_id} for user {event_user.user_id}: {e}")
            continue
        if event is None:
            logger.warning(f"Event {event_user.event_id} referenced by event_user {event_user.id} not found")
            continue
        results.append(with_metadata(event, event_user))
    return results


class EventService:
    """Service for event operations"""

    def __init__(self, events: EventRepository, event_users: EventUserRepository):
        self.events = events
        self.event_users = event_users

    def _get_owned_event(self, event_id: str, user_id: str) -> Event:
        event = self.events.find_by_id(event_id)
        if event is None:
            raise ResourceNotFoundError(f"Event with id {event_id} not found")
        if event.creator_uid != user_id:
            logger.warning(f"User {user_id} attempted to modify event {event_id} they do not own")
            raise ForbiddenError("Only the event creator can modify this event")
        return event

    def create_event(self, request: CreateEventRequest, creator_uid: str) -> Tuple[str, Event]:
        """
        Create an event and the creator's own participation row.

        Returns: (event_id, event)
        """
        now = timestamp()
        event = Event(
            title=request.title,
            description=request.description,
            event_date=request.event_date,
            event_time=request.event_time,
            location=request.location,
            creator_uid=creator_uid,
            free=request.free,
            price=request.price,
            share_code=generate_share_code(),
            created_at=now,
            updated_at=now,
        )
        event_id = self.events.save(event)
        event = event.model_copy(update={"id": event_id})

        self.event_users.save(EventUser(
            event_id=event_id,
            user_id=creator_uid,
            status=EventUserStatus.CREATOR,
            role=EventUserRole.CREATOR,
            invited_at=now,
            responded_at=now,
        ))

        logger.info(f"Event created: {event_id} by user {creator_uid} with share code {event.share_code}")
        return event_id, event

    def update_event(self, event_id: str, request: UpdateEventRequest, user_id: str) -> Event:
        """Apply the supplied fields only and refresh updatedAt."""
        event = self._get_owned_event(event_id, user_id)

        now = timestamp()
        fields = request.document_changes()
        fields["updatedAt"] = now
        self.events.update_fields(event_id, fields)

        logger.info(f"Event updated: {event_id} ({', '.join(sorted(request.changes())) or 'no fields'})")
        return event.model_copy(update={**request.changes(), "updated_at": now})

    def delete_event(self, event_id: str, user_id: str) -> int:
        """
        Delete an event and all of its participation rows.

        Returns the number of deleted event_users rows.
        """
        self._get_owned_event(event_id, user_id)

        deleted = self.event_users.delete_by_event_id(event_id)
        self.events.delete(event_id)

        logger.info(f"Event deleted: {event_id}, removed {deleted} event_users rows")
        return deleted

    def get_event_by_id(self, event_id: str, user_id: str) -> EventWithMetadata:
        event = self.events.find_by_id(event_id)
        if event is None:
            raise ResourceNotFoundError(f"Event with id {event_id} not found")
        event_user = self.event_users.find_by_event_id_and_user_id(event_id, user_id)
        return with_metadata(event, event_user)

    def find_event_by_share_code(self, share_code: str, user_id: str) -> EventWithMetadata:
        """
        Resolve a share code for the caller.

        Opening an event through its code is a request to join: callers
        without a participation row get a PENDING attendee row.
        """
        event = self.events.find_by_share_code(share_code)
        if event is None:
            raise ResourceNotFoundError(f"Event with share code {share_code} not found")

        event_user = self.event_users.find_by_event_id_and_user_id(event.id, user_id)
        if event_user is not None:
            return with_metadata(event, event_user)

        if event.creator_uid == user_id:
            logger.warning(f"Creator {user_id} has no event_users row for own event {event.id}")
            return with_metadata(event, None)

        event_user = EventUser(
            event_id=event.id,
            user_id=user_id,
            status=EventUserStatus.PENDING,
            role=EventUserRole.ATTENDEE,
            invited_at=timestamp(),
        )
        event_user_id = self.event_users.save(event_user)
        event_user = event_user.model_copy(update={"id": event_user_id})

        logger.info(f"User {user_id} requested to join event {event.id} via share code")
        return with_metadata(event, event_user)

    def get_all_events_for_user(self, user_id: str) -> List[EventWithMetadata]:
        return join_events(self.event_users.find_by_user_id(user_id), self.events)
