"""
Friendship service - friend requests and the friendship state machine
"""
import logging
from typing import Dict, FrozenSet, List

from ihost.core.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    ResourceNotFoundError,
)
from ihost.models.enums import FriendshipStatus
from ihost.models.friendship import Friendship
from ihost.repositories.friendship_repository import FriendshipRepository
from ihost.utils.time_utils import timestamp

logger = logging.getLogger(__name__)

# Allowed status transitions. ACCEPTED and DECLINED are terminal.
TRANSITIONS: Dict[FriendshipStatus, FrozenSet[FriendshipStatus]] = {
    FriendshipStatus.PENDING: frozenset({FriendshipStatus.ACCEPTED, FriendshipStatus.DECLINED}),
    FriendshipStatus.ACCEPTED: frozenset(),
    FriendshipStatus.DECLINED: frozenset(),
}


def can_transition(current: FriendshipStatus, target: FriendshipStatus) -> bool:
    return target in TRANSITIONS[current]


class FriendshipService:
    """Service for social/friend operations"""

    def __init__(self, friendships: FriendshipRepository):
        self.friendships = friendships

    def send_friend_request(self, from_user_id: str, to_user_id: str) -> Friendship:
        """Create a PENDING request from one user to another."""
        if from_user_id == to_user_id:
            raise BadRequestError("Cannot send friend request to yourself", "INVALID_REQUEST")

        if self.friendships.find_between(from_user_id, to_user_id) is not None:
            raise ConflictError("Friendship or request already exists", "FRIENDSHIP_EXISTS")

        friendship = Friendship(
            user1_id=from_user_id,
            user2_id=to_user_id,
            status=FriendshipStatus.PENDING,
            requested_by=from_user_id,
            requested_at=timestamp(),
            responded_at=None,
        )
        friendship_id = self.friendships.save(friendship)

        logger.info(f"Friend request sent: {from_user_id} -> {to_user_id} ({friendship_id})")
        return friendship.model_copy(update={"id": friendship_id})

    def _respond(self, friendship_id: str, user_id: str, target: FriendshipStatus) -> Friendship:
        friendship = self.friendships.find_by_id(friendship_id)
        if friendship is None:
            raise ResourceNotFoundError(f"Friendship with id {friendship_id} not found")
        if friendship.user2_id != user_id:
            logger.warning(f"User {user_id} attempted to answer friend request {friendship_id} not sent to them")
            raise ForbiddenError("Only the recipient can respond to a friend request")
        if not can_transition(friendship.status, target):
            raise BadRequestError(
                f"Friend request is {friendship.status.value}, not {FriendshipStatus.PENDING.value}",
                "INVALID_STATUS",
            )

        now = timestamp()
        self.friendships.update_fields(friendship_id, {"status": target.value, "respondedAt": now})

        logger.info(f"Friend request {friendship_id} {target.value.lower()} by {user_id}")
        return friendship.model_copy(update={"status": target, "responded_at": now})

    def accept_friend_request(self, friendship_id: str, user_id: str) -> Friendship:
        return self._respond(friendship_id, user_id, FriendshipStatus.ACCEPTED)

    def decline_friend_request(self, friendship_id: str, user_id: str) -> Friendship:
        return self._respond(friendship_id, user_id, FriendshipStatus.DECLINED)

    def remove_friend(self, friendship_id: str, user_id: str) -> None:
        """Delete a friendship or request in any status. Either participant may do it."""
        friendship = self.friendships.find_by_id(friendship_id)
        if friendship is None:
            raise ResourceNotFoundError(f"Friendship with id {friendship_id} not found")
        if not friendship.involves(user_id):
            raise ForbiddenError("You are not part of this friendship")

        self.friendships.delete(friendship_id)
        logger.info(f"Friendship {friendship_id} removed by {user_id}")

    def get_pending_requests(self, user_id: str) -> List[Friendship]:
        """Requests waiting for the user's answer"""
        return self.friendships.find_by_recipient_and_status(user_id, FriendshipStatus.PENDING)

    def get_sent_requests(self, user_id: str) -> List[Friendship]:
        """Requests the user sent that are still unanswered"""
        return self.friendships.find_by_requester_and_status(user_id, FriendshipStatus.PENDING)

    def get_friends(self, user_id: str) -> List[Friendship]:
        return self.friendships.find_by_user_and_status(user_id, FriendshipStatus.ACCEPTED)
