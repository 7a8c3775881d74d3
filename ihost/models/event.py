"""
Event stored in the `events` collection
"""
from typing import Optional

from ihost.models.base import FirestoreModel


class Event(FirestoreModel):
    """A gathering created and owned by one user.

    Participation is tracked separately in `event_users`. The share code
    (`IH-XXXXX`) lets anyone with the code find the event and ask to join.
    """

    id: Optional[str] = None
    title: str
    description: Optional[str] = None
    event_date: str
    event_time: Optional[str] = None
    location: Optional[str] = None
    creator_uid: str
    free: bool = True
    price: float = 0.0
    share_code: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
