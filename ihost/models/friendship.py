"""
Friendship models - friend requests and accepted friendships
"""
from typing import Optional

from ihost.models.base import FirestoreModel
from ihost.models.enums import FriendshipStatus


class Friendship(FirestoreModel):
    """Connection (or pending request) between two users.

    user1_id sent the request, user2_id received it. A single document
    covers both directions.
    """

    id: Optional[str] = None
    user1_id: str
    user2_id: str
    status: FriendshipStatus = FriendshipStatus.PENDING
    requested_by: str
    requested_at: Optional[str] = None
    responded_at: Optional[str] = None

    def involves(self, user_id: str) -> bool:
        return user_id in (self.user1_id, self.user2_id)
