"""
Firestore repositories, one per collection
"""
from ihost.repositories.user_repository import UserRepository
from ihost.repositories.event_repository import EventRepository
from ihost.repositories.event_user_repository import EventUserRepository
from ihost.repositories.friendship_repository import FriendshipRepository
from ihost.repositories.image_repository import ImageRepository

__all__ = [
    "UserRepository",
    "EventRepository",
    "EventUserRepository",
    "FriendshipRepository",
    "ImageRepository",
]
