"""
Image service - event images and profile photos
"""
import logging
from typing import List, Optional

from ihost.core.exceptions import ForbiddenError, ResourceNotFoundError
from ihost.models.image import EventImage
from ihost.repositories.image_repository import ImageRepository
from ihost.schemas.image import ImageUploadResponse
from ihost.services.cloudinary_service import (
    EVENT_IMAGES_FOLDER,
    USER_IMAGES_FOLDER,
    CloudinaryService,
    public_id_from_url,
)
from ihost.services.user_service import UserService
from ihost.utils.time_utils import timestamp

logger = logging.getLogger(__name__)


class ImageService:
    """Service for image metadata and uploads"""

    def __init__(self, images: ImageRepository, users: UserService, cloudinary: CloudinaryService):
        self.images = images
        self.users = users
        self.cloudinary = cloudinary

    def upload_event_image(
        self,
        content: bytes,
        content_type: Optional[str],
        filename: Optional[str],
        event_id: str,
        uploader_uid: str,
    ) -> ImageUploadResponse:
        url = self.cloudinary.upload_image(content, content_type, EVENT_IMAGES_FOLDER)

        image = EventImage(
            path=url,
            event_id=event_id,
            uploaded_by=uploader_uid,
            original_filename=filename or "unknown",
            created_at=timestamp(),
        )
        document_id = self.images.save(image)
        image = image.model_copy(update={"id": document_id})

        logger.info(f"Event image {document_id} stored for event {event_id} by {uploader_uid}")
        return ImageUploadResponse(image_url=url, document_id=document_id, metadata=image)

    def get_event_images(self, event_id: str) -> List[EventImage]:
        return self.images.find_by_event_id(event_id)

    def upload_profile_photo(self, content: bytes, content_type: Optional[str], uid: str) -> str:
        """
        Replace the user's profile photo and return the new URL.

        The previous photo is deleted from Cloudinary on a best-effort basis.
        """
        user = self.users.get_user_by_id(uid)

        if user.photo_url:
            old_public_id = f"{USER_IMAGES_FOLDER}/{public_id_from_url(user.photo_url)}"
            if not self.cloudinary.delete_image(old_public_id):
                logger.warning(f"Could not delete previous profile photo {old_public_id} for {uid}")

        url = self.cloudinary.upload_image(content, content_type, USER_IMAGES_FOLDER)
        self.users.set_photo_url(uid, url)

        logger.info(f"Profile photo updated for {uid}")
        return url

    def delete_image(self, document_id: str, uid: str) -> None:
        """Delete an event image. Only its uploader may do so."""
        image = self.images.find_by_id(document_id)
        if image is None:
            raise ResourceNotFoundError(f"Image with id {document_id} not found")
        if image.uploaded_by != uid:
            logger.warning(f"User {uid} attempted to delete image {document_id} uploaded by someone else")
            raise ForbiddenError("You can only delete your own images")

        public_id = f"{EVENT_IMAGES_FOLDER}/{public_id_from_url(image.path)}"
        if not self.cloudinary.delete_image(public_id):
            logger.warning(f"Cloudinary object {public_id} was not deleted")
        self.images.delete(document_id)

        logger.info(f"Image {document_id} deleted by {uid}")
