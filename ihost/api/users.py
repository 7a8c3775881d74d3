"""
User profile API endpoints
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, status

from ihost.core.dependencies import AuthContext, get_current_user, get_user_service
from ihost.core.exceptions import ForbiddenError
from ihost.models.user import User
from ihost.schemas.user import (
    AuthResponse,
    AvailabilityResponse,
    CreateUserRequest,
    UpdateUserRequest,
)
from ihost.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[User])
def get_all_users(
    current_user: AuthContext = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """List all users, e.g. to pick whom to invite"""
    users = user_service.get_all_users()
    logger.info(f"Retrieved {len(users)} users for user: {current_user.uid}")
    return users


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service)
):
    """Create the profile for an account already registered in Firebase Auth (public)"""
    user = user_service.create_user(request)
    return AuthResponse(uid=user.uid, email=user.email, username=user.username)


@router.get("/username-available/{username}", response_model=AvailabilityResponse)
def is_username_available(
    username: str,
    user_service: UserService = Depends(get_user_service)
):
    return AvailabilityResponse(available=user_service.is_username_available(username))


@router.get("/email-available/{email}", response_model=AvailabilityResponse)
def is_email_available(
    email: str,
    user_service: UserService = Depends(get_user_service)
):
    return AvailabilityResponse(available=user_service.is_email_available(email))


@router.get("/{uid}", response_model=User)
def get_user(
    uid: str,
    user_service: UserService = Depends(get_user_service)
):
    """Public profile of any user"""
    return user_service.get_user_by_id(uid)


@router.put("/{uid}", response_model=User)
def update_user(
    uid: str,
    request: UpdateUserRequest,
    current_user: AuthContext = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Update your own profile"""
    if current_user.uid != uid:
        raise ForbiddenError("You can only update your own profile")
    return user_service.update_user(uid, request)
