"""
Metadata for images uploaded to Cloudinary, stored in `event_images`
"""
from typing import Optional

from ihost.models.base import FirestoreModel


class EventImage(FirestoreModel):
    id: Optional[str] = None
    path: str
    event_id: str = ""
    uploaded_by: str = ""
    original_filename: str = "unknown"
    created_at: Optional[str] = None
