"""
Python client for the iHost API
"""
from ihost.client.api_client import ApiClient, ApiError
from ihost.client.result import Result
from ihost.client.repositories import (
    EventRepository,
    EventUserRepository,
    FriendshipRepository,
    ImageRepository,
    StripeRepository,
    UserRepository,
)

__all__ = [
    "ApiClient",
    "ApiError",
    "Result",
    "EventRepository",
    "EventUserRepository",
    "FriendshipRepository",
    "ImageRepository",
    "StripeRepository",
    "UserRepository",
]
