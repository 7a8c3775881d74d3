"""
Repository for the `event_users` collection
"""
import logging
from typing import List, Optional

from ihost.database import BATCH_LIMIT, EVENT_USERS
from ihost.models.enums import EventUserStatus
from ihost.models.event_user import EventUser
from ihost.repositories.base import FirestoreRepository

logger = logging.getLogger(__name__)


class EventUserRepository(FirestoreRepository[EventUser]):
    collection_name = EVENT_USERS
    model = EventUser

    def find_by_event_id(self, event_id: str) -> List[EventUser]:
        return self._find_where(("eventId", "==", event_id))

    def find_by_event_id_and_status(self, event_id: str, status: EventUserStatus) -> List[EventUser]:
        return self._find_where(("eventId", "==", event_id), ("status", "==", status.value))

    def find_by_user_id(self, user_id: str) -> List[EventUser]:
        return self._find_where(("userId", "==", user_id))

    def find_by_user_id_and_status(self, user_id: str, status: EventUserStatus) -> List[EventUser]:
        return self._find_where(("userId", "==", user_id), ("status", "==", status.value))

    def find_by_event_id_and_user_id(self, event_id: str, user_id: str) -> Optional[EventUser]:
        return self._find_first_where(("eventId", "==", event_id), ("userId", "==", user_id))

    def delete_by_event_id(self, event_id: str) -> int:
        """Delete every row of an event in batched commits, returning the row count."""
        deleted = 0
        batch = self.db.batch()
        pending = 0
        for snapshot in self._where(("eventId", "==", event_id)).stream():
            batch.delete(snapshot.reference)
            pending += 1
            if pending == BATCH_LIMIT:
                batch.commit()
                deleted += pending
                batch = self.db.batch()
                pending = 0
        if pending:
            batch.commit()
            deleted += pending
        logger.info(f"Deleted {deleted} event_users rows for event {event_id}")
        return deleted
