"""
Firestore connection for iHost API
"""
from google.cloud.firestore import Client

from ihost.services.firebase_service import firebase_service

# Firestore collection names
USERS = "users"
EVENTS = "events"
EVENT_USERS = "event_users"
FRIENDSHIPS = "friendships"
EVENT_IMAGES = "event_images"

# Maximum writes in a single Firestore batch commit
BATCH_LIMIT = 500


def get_db() -> Client:
    """
    Dependency for getting the Firestore client in endpoints

    Usage in FastAPI endpoints:
        def my_endpoint(db: Client = Depends(get_db)):
            ...
    """
    return firebase_service.firestore
