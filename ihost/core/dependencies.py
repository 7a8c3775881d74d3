"""
FastAPI dependencies - authenticated caller, repositories and services
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from fastapi import Depends, Header
from google.cloud.firestore import Client

from ihost.core.exceptions import UnauthorizedError
from ihost.database import get_db
from ihost.repositories import (
    EventRepository,
    EventUserRepository,
    FriendshipRepository,
    ImageRepository,
    UserRepository,
)
from ihost.services.cloudinary_service import CloudinaryService, cloudinary_service
from ihost.services.event_service import EventService
from ihost.services.event_user_service import EventUserService
from ihost.services.firebase_service import FirebaseService, firebase_service
from ihost.services.friendship_service import FriendshipService
from ihost.services.image_service import ImageService
from ihost.services.payment_service import PaymentService
from ihost.services.user_service import UserService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class AuthContext:
    """The verified caller of the current request"""
    uid: str
    email: Optional[str] = None
    claims: Dict[str, Any] = field(default_factory=dict)


def get_firebase() -> FirebaseService:
    return firebase_service


def get_cloudinary() -> CloudinaryService:
    return cloudinary_service


def get_current_user(
    authorization: Optional[str] = Header(default=None),
    firebase: FirebaseService = Depends(get_firebase),
) -> AuthContext:
    """
    Verify the Firebase ID token from the Authorization header.

    Raises UnauthorizedError when the header is missing or the token is rejected.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("Missing or malformed Authorization header")

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthorizedError("Missing or malformed Authorization header")

    try:
        claims = firebase.verify_id_token(token)
    except ValueError as e:
        raise UnauthorizedError(str(e))

    return AuthContext(uid=claims["uid"], email=claims.get("email"), claims=claims)


# Repositories

def get_user_repository(db: Client = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_event_repository(db: Client = Depends(get_db)) -> EventRepository:
    return EventRepository(db)


def get_event_user_repository(db: Client = Depends(get_db)) -> EventUserRepository:
    return EventUserRepository(db)


def get_friendship_repository(db: Client = Depends(get_db)) -> FriendshipRepository:
    return FriendshipRepository(db)


def get_image_repository(db: Client = Depends(get_db)) -> ImageRepository:
    return ImageRepository(db)


# Services

def get_user_service(
    users: UserRepository = Depends(get_user_repository),
    firebase: FirebaseService = Depends(get_firebase),
) -> UserService:
    return UserService(users, firebase)


def get_event_service(
    events: EventRepository = Depends(get_event_repository),
    event_users: EventUserRepository = Depends(get_event_user_repository),
) -> EventService:
    return EventService(events, event_users)


def get_event_user_service(
    events: EventRepository = Depends(get_event_repository),
    event_users: EventUserRepository = Depends(get_event_user_repository),
) -> EventUserService:
    return EventUserService(events, event_users)


def get_friendship_service(
    friendships: FriendshipRepository = Depends(get_friendship_repository),
) -> FriendshipService:
    return FriendshipService(friendships)


def get_image_service(
    images: ImageRepository = Depends(get_image_repository),
    users: UserService = Depends(get_user_service),
    cloudinary: CloudinaryService = Depends(get_cloudinary),
) -> ImageService:
    return ImageService(images, users, cloudinary)


def get_payment_service(
    events: EventRepository = Depends(get_event_repository),
) -> PaymentService:
    return PaymentService(events)
