"""
Repository for the `event_images` collection
"""
from typing import List

from ihost.database import EVENT_IMAGES
from ihost.models.image import EventImage
from ihost.repositories.base import FirestoreRepository


class ImageRepository(FirestoreRepository[EventImage]):
    collection_name = EVENT_IMAGES
    model = EventImage

    def find_by_event_id(self, event_id: str) -> List[EventImage]:
        return self._find_where(("eventId", "==", event_id))
