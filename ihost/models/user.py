"""
User profile stored in the `users` collection, keyed by Firebase uid
"""
from typing import ClassVar, Optional

from ihost.models.base import FirestoreModel


class User(FirestoreModel):
    """Application profile complementing the Firebase Auth account."""

    id_field: ClassVar[str] = "uid"

    uid: str
    email: str
    username: str
    first_name: str
    last_name: Optional[str] = None
    photo_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
