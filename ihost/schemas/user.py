"""
User profile schemas
"""
from typing import ClassVar, Optional, Tuple

from pydantic import EmailStr, Field

from ihost.models.base import CamelModel
from ihost.schemas.common import PatchRequest


class CreateUserRequest(CamelModel):
    """Profile created after the account exists in Firebase Auth"""
    uid: str = Field(min_length=1)
    email: EmailStr
    username: str = Field(min_length=4, max_length=12)
    first_name: str = Field(min_length=1)
    last_name: Optional[str] = None
    photo_url: Optional[str] = None


class UpdateUserRequest(PatchRequest):
    """Partial profile update. Email and username cannot change."""
    required_fields: ClassVar[Tuple[str, ...]] = ("first_name",)

    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = None
    photo_url: Optional[str] = None


class AuthResponse(CamelModel):
    """Registration result"""
    uid: str
    email: str
    username: str
    message: str = "Brukerprofil opprettet. Du kan nå logge inn."


class AvailabilityResponse(CamelModel):
    available: bool
