"""
Social/Friends API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, status

from ihost.core.dependencies import AuthContext, get_current_user, get_friendship_service
from ihost.models.friendship import Friendship
from ihost.schemas.common import MessageResponse
from ihost.schemas.friendship import FriendRequestCreate
from ihost.services.friendship_service import FriendshipService

router = APIRouter()


@router.post("/request", response_model=Friendship, status_code=status.HTTP_201_CREATED)
def send_friend_request(
    request: FriendRequestCreate,
    current_user: AuthContext = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service)
):
    """Send a friend request to another user"""
    return friendship_service.send_friend_request(current_user.uid, request.to_user_id)


@router.post("/{friendship_id}/accept", response_model=Friendship)
def accept_friend_request(
    friendship_id: str,
    current_user: AuthContext = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.accept_friend_request(friendship_id, current_user.uid)


@router.post("/{friendship_id}/decline", response_model=Friendship)
def decline_friend_request(
    friendship_id: str,
    current_user: AuthContext = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.decline_friend_request(friendship_id, current_user.uid)


@router.delete("/{friendship_id}", response_model=MessageResponse)
def remove_friend(
    friendship_id: str,
    current_user: AuthContext = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service)
):
    """Unfriend, or cancel a sent request"""
    friendship_service.remove_friend(friendship_id, current_user.uid)
    return MessageResponse(message="Friendship removed")


@router.get("/pending", response_model=List[Friendship])
def get_pending_requests(
    current_user: AuthContext = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service)
):
    """Incoming requests waiting for an answer"""
    return friendship_service.get_pending_requests(current_user.uid)


@router.get("/friends", response_model=List[Friendship])
def get_friends(
    current_user: AuthContext = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.get_friends(current_user.uid)


@router.get("/sent", response_model=List[Friendship])
def get_sent_requests(
    current_user: AuthContext = Depends(get_current_user),
    friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.get_sent_requests(current_user.uid)
