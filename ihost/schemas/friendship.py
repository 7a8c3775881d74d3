"""
Friendship schemas
"""
from pydantic import Field

from ihost.models.base import CamelModel


class FriendRequestCreate(CamelModel):
    """Send a friend request"""
    to_user_id: str = Field(min_length=1)
