"""
Repository for the `events` collection
"""
from typing import Optional

from ihost.database import EVENTS
from ihost.models.event import Event
from ihost.repositories.base import FirestoreRepository


class EventRepository(FirestoreRepository[Event]):
    collection_name = EVENTS
    model = Event

    def find_by_share_code(self, share_code: str) -> Optional[Event]:
        return self._find_first_where(("shareCode", "==", share_code))
