"""
Event-user service - invitations, responses and attendee lists
"""
import logging
from typing import List, Optional

from ihost.core.exceptions import ForbiddenError, ResourceNotFoundError
from ihost.models.enums import EventUserRole, EventUserStatus
from ihost.models.event_user import EventUser
from ihost.repositories.event_repository import EventRepository
from ihost.repositories.event_user_repository import EventUserRepository
from ihost.schemas.event import EventWithMetadata
from ihost.services.event_service import join_events
from ihost.utils.time_utils import timestamp

logger = logging.getLogger(__name__)


class EventUserService:
    """Service for invitation and attendance operations"""

    def __init__(self, events: EventRepository, event_users: EventUserRepository):
        self.events = events
        self.event_users = event_users

    def invite_users(self, event_id: str, user_ids: List[str], creator_id: str) -> List[EventUser]:
        """
        Invite users to an event.

        Users who already have a row for the event are skipped.
        Returns only the newly created rows.
        """
        event = self.events.find_by_id(event_id)
        if event is None:
            raise ResourceNotFoundError(f"Event with id {event_id} not found")
        if event.creator_uid != creator_id:
            logger.warning(f"User {creator_id} attempted to invite to event {event_id} they do not own")
            raise ForbiddenError("Only the event creator can invite users")

        invited = []
        for user_id in user_ids:
            if self.event_users.find_by_event_id_and_user_id(event_id, user_id) is not None:
                continue
            event_user = EventUser(
                event_id=event_id,
                user_id=user_id,
                status=EventUserStatus.PENDING,
                role=EventUserRole.ATTENDEE,
                invited_at=timestamp(),
                responded_at=None,
            )
            event_user_id = self.event_users.save(event_user)
            invited.append(event_user.model_copy(update={"id": event_user_id}))

        logger.info(f"Invited {len(invited)} of {len(user_ids)} users to event {event_id}")
        return invited

    def _respond(self, event_user_id: str, user_id: str, status: EventUserStatus) -> str:
        event_user = self.event_users.find_by_id(event_user_id)
        if event_user is None:
            raise ResourceNotFoundError(f"Invitation with id {event_user_id} not found")
        if event_user.user_id != user_id:
            logger.warning(f"User {user_id} attempted to answer invitation {event_user_id} of another user")
            raise ForbiddenError("You can only respond to your own invitations")

        self.event_users.update_fields(event_user_id, {
            "status": status.value,
            "respondedAt": timestamp(),
        })
        logger.info(f"Invitation {event_user_id} set to {status.value} by user {user_id}")
        return event_user.event_id

    def accept_invitation(self, event_user_id: str, user_id: str) -> str:
        """Accept an invitation. Returns the event id."""
        return self._respond(event_user_id, user_id, EventUserStatus.ACCEPTED)

    def decline_invitation(self, event_user_id: str, user_id: str) -> str:
        """Decline an invitation. Returns the event id."""
        return self._respond(event_user_id, user_id, EventUserStatus.DECLINED)

    def get_event_attendees(
        self,
        event_id: str,
        status: Optional[EventUserStatus] = None
    ) -> List[EventUser]:
        if status is None:
            return self.event_users.find_by_event_id(event_id)
        return self.event_users.find_by_event_id_and_status(event_id, status)

    def get_my_events(
        self,
        user_id: str,
        status: Optional[EventUserStatus] = None
    ) -> List[EventWithMetadata]:
        """The caller's events, skipping any whose event document is unavailable."""
        if status is None:
            rows = self.event_users.find_by_user_id(user_id)
        else:
            rows = self.event_users.find_by_user_id_and_status(user_id, status)
        return join_events(rows, self.events)
