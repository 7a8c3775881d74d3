"""
Invitation / attendance schemas
"""
from typing import List

from pydantic import Field

from ihost.models.base import CamelModel
from ihost.models.event_user import EventUser


class InviteUsersRequest(CamelModel):
    event_id: str = Field(min_length=1)
    user_ids: List[str] = Field(min_length=1)


class InviteUsersResponse(CamelModel):
    message: str = "Users invited successfully"
    invited_count: int
    invited_users: List[EventUser]


class InvitationResponse(CamelModel):
    """Result of accepting or declining an invitation"""
    message: str
    event_id: str
