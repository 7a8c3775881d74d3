"""
Repository for the `friendships` collection
"""
from typing import List, Optional

from ihost.database import FRIENDSHIPS
from ihost.models.enums import FriendshipStatus
from ihost.models.friendship import Friendship
from ihost.repositories.base import FirestoreRepository


class FriendshipRepository(FirestoreRepository[Friendship]):
    collection_name = FRIENDSHIPS
    model = Friendship

    def find_between(self, user_a: str, user_b: str) -> Optional[Friendship]:
        """Any friendship connecting the two users, in either direction and any status."""
        return (
            self._find_first_where(("user1Id", "==", user_a), ("user2Id", "==", user_b))
            or self._find_first_where(("user1Id", "==", user_b), ("user2Id", "==", user_a))
        )

    def find_by_recipient_and_status(self, user_id: str, status: FriendshipStatus) -> List[Friendship]:
        return self._find_where(("user2Id", "==", user_id), ("status", "==", status.value))

    def find_by_requester_and_status(self, user_id: str, status: FriendshipStatus) -> List[Friendship]:
        return self._find_where(("user1Id", "==", user_id), ("status", "==", status.value))

    def find_by_user_and_status(self, user_id: str, status: FriendshipStatus) -> List[Friendship]:
        """Friendships where the user is on either side."""
        return (
            self.find_by_requester_and_status(user_id, status)
            + self.find_by_recipient_and_status(user_id, status)
        )
