"""
User service - profile registration, lookup and updates
"""
import logging
from typing import List, Optional

from ihost.core.exceptions import ConflictError, ResourceNotFoundError
from ihost.models.user import User
from ihost.repositories.user_repository import UserRepository
from ihost.schemas.user import CreateUserRequest, UpdateUserRequest
from ihost.services.firebase_service import FirebaseService
from ihost.utils.time_utils import timestamp

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 12


class UserService:
    """Service for user profile operations"""

    def __init__(self, users: UserRepository, firebase: FirebaseService):
        self.users = users
        self.firebase = firebase

    def is_username_available(self, username: str) -> bool:
        if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
            return False
        return self.users.find_by_username(username) is None

    def is_email_available(self, email: str) -> bool:
        return self.users.find_by_email(email) is None

    def create_user(self, request: CreateUserRequest) -> User:
        """
        Store the application profile for an existing Firebase Auth account.

        Raises:
            ResourceNotFoundError: If Firebase Auth does not know the uid
            ConflictError: If the profile exists or the username is taken
        """
        if self.firebase.get_auth_user(request.uid) is None:
            logger.warning(f"Registration for unknown Firebase uid {request.uid}")
            raise ResourceNotFoundError(
                "Brukeren finnes ikke i Firebase Auth. Registrer deg først.",
                "USER_NOT_FOUND",
            )
        if self.users.exists(request.uid):
            raise ConflictError("Brukerprofil finnes allerede", "PROFILE_EXISTS")
        if self.users.find_by_username(request.username) is not None:
            raise ConflictError(f"Username {request.username} is already taken", "USERNAME_TAKEN")

        now = timestamp()
        user = User(
            uid=request.uid,
            email=request.email,
            username=request.username,
            first_name=request.first_name,
            last_name=request.last_name,
            photo_url=request.photo_url,
            created_at=now,
            updated_at=now,
        )
        self.users.save(user)

        logger.info(f"User profile created: {user.uid} ({user.username})")
        return user

    def update_user(self, uid: str, request: UpdateUserRequest) -> User:
        user = self.get_user_by_id(uid)

        now = timestamp()
        fields = request.document_changes()
        fields["updatedAt"] = now
        self.users.update_fields(uid, fields)

        logger.info(f"User profile updated: {uid}")
        return user.model_copy(update={**request.changes(), "updated_at": now})

    def set_photo_url(self, uid: str, photo_url: str) -> None:
        self.users.update_fields(uid, {"photoUrl": photo_url, "updatedAt": timestamp()})

    def get_user_by_id(self, uid: str) -> User:
        user = self.users.find_by_id(uid)
        if user is None:
            raise ResourceNotFoundError(f"User with uid {uid} not found", "USER_NOT_FOUND")
        return user

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find_by_username(username)

    def get_all_users(self) -> List[User]:
        return self.users.find_all()
