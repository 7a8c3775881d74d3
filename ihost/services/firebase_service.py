"""
Firebase Admin SDK access - ID token verification, Auth user lookup and the
Firestore client
"""
import logging
import os
from typing import Dict, Optional

import firebase_admin
from firebase_admin import auth, credentials, exceptions, firestore

from ihost.core.config import settings

logger = logging.getLogger(__name__)


class FirebaseService:
    """Thin wrapper around the Firebase Admin SDK."""

    def __init__(self):
        self._client = None

    def initialize(self):
        """
        Initialize the Firebase Admin SDK once per process.

        Raises RuntimeError when the service account file is missing or invalid.
        """
        if firebase_admin._apps:
            return
        if not os.path.exists(settings.GOOGLE_APPLICATION_CREDENTIALS):
            raise RuntimeError(
                f"Firebase Admin SDK not initialized and credentials file not found: "
                f"{settings.GOOGLE_APPLICATION_CREDENTIALS}\n"
                f"Please download credentials from Firebase Console."
            )
        try:
            cred = credentials.Certificate(settings.GOOGLE_APPLICATION_CREDENTIALS)
            firebase_admin.initialize_app(cred, {"projectId": settings.FIREBASE_PROJECT_ID})
            logger.info("Firebase Admin SDK initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize Firebase Admin SDK: {e}")
            raise RuntimeError(
                f"Firebase Admin SDK initialization failed: {e}\n"
                f"Check that {settings.GOOGLE_APPLICATION_CREDENTIALS} is valid."
            )

    @property
    def firestore(self):
        """Shared Firestore client, created on first use."""
        if self._client is None:
            self.initialize()
            self._client = firestore.client()
        return self._client

    def verify_id_token(self, id_token: str) -> Dict:
        """
        Verify a Firebase ID token and return its decoded claims.

        Raises:
            ValueError: If the token is rejected or cannot be verified
        """
        self.initialize()
        try:
            return auth.verify_id_token(id_token, check_revoked=settings.FIREBASE_CHECK_REVOKED)
        except auth.RevokedIdTokenError as e:
            logger.warning(f"Revoked Firebase ID token: {e}")
            raise ValueError("Firebase token has been revoked")
        except auth.ExpiredIdTokenError as e:
            logger.warning(f"Expired Firebase ID token: {e}")
            raise ValueError("Firebase token expired")
        except auth.UserDisabledError as e:
            logger.warning(f"Firebase ID token for disabled user: {e}")
            raise ValueError("Firebase user account is disabled")
        except (auth.InvalidIdTokenError, ValueError) as e:
            logger.warning(f"Invalid Firebase ID token: {e}")
            raise ValueError(f"Invalid Firebase token: {e}")
        except exceptions.FirebaseError as e:
            logger.error(f"Firebase ID token verification failed: {e}")
            raise ValueError(f"Firebase token could not be verified: {e}")

    def get_auth_user(self, uid: str) -> Optional[auth.UserRecord]:
        """Look up a Firebase Auth account, None when the uid is unknown."""
        self.initialize()
        try:
            return auth.get_user(uid)
        except auth.UserNotFoundError:
            return None


# Global instance
firebase_service = FirebaseService()
