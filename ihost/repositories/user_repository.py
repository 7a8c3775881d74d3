"""
Repository for the `users` collection (document id = Firebase uid)
"""
from typing import Optional

from ihost.database import USERS
from ihost.models.user import User
from ihost.repositories.base import FirestoreRepository


class UserRepository(FirestoreRepository[User]):
    collection_name = USERS
    model = User

    def find_by_username(self, username: str) -> Optional[User]:
        return self._find_first_where(("username", "==", username))

    def find_by_email(self, email: str) -> Optional[User]:
        return self._find_first_where(("email", "==", email))

    def exists(self, uid: str) -> bool:
        return self.collection.document(uid).get().exists
