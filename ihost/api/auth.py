"""
Authentication API endpoints
"""
from fastapi import APIRouter, Depends

from ihost.core.dependencies import AuthContext, get_current_user, get_user_service
from ihost.models.user import User
from ihost.services.user_service import UserService

router = APIRouter()


@router.get("/verify", response_model=User)
def verify_token(
    current_user: AuthContext = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Check the bearer token and return the caller's profile"""
    return user_service.get_user_by_id(current_user.uid)
