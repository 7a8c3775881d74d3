"""
Cloudinary service - image upload and deletion
"""
import logging
from typing import Optional

import cloudinary
import cloudinary.uploader

from ihost.core.config import settings
from ihost.core.exceptions import BadRequestError, ImageUploadError

logger = logging.getLogger(__name__)

EVENT_IMAGES_FOLDER = "event_images"
USER_IMAGES_FOLDER = "user_images"

# Images are scaled down to fit inside this box, never up
MAX_WIDTH = 1920
MAX_HEIGHT = 1080


def configure_cloudinary():
    """Configure the Cloudinary SDK from settings."""
    cloudinary.config(
        cloud_name=settings.CLOUDINARY_CLOUD_NAME,
        api_key=settings.CLOUDINARY_API_KEY,
        api_secret=settings.CLOUDINARY_API_SECRET,
        secure=True,
    )


def public_id_from_url(url: str) -> str:
    """
    Public id of an uploaded image: the last path segment without its extension.

    https://res.cloudinary.com/demo/image/upload/v1/event_images/abc123.jpg -> abc123
    """
    filename = url.rstrip("/").rsplit("/", 1)[-1]
    return filename.rsplit(".", 1)[0] if "." in filename else filename


class CloudinaryService:
    """Service for storing images on Cloudinary"""

    def upload_image(self, content: bytes, content_type: Optional[str], folder: str) -> str:
        """
        Upload an image and return its secure URL.

        Raises:
            BadRequestError: If the file is empty or not an image
            ImageUploadError: If Cloudinary rejects the upload
        """
        if not content:
            raise BadRequestError("File is empty", "INVALID_FILE")
        if not content_type or not content_type.startswith("image/"):
            raise BadRequestError("File must be an image", "INVALID_FILE")

        try:
            result = cloudinary.uploader.upload(
                content,
                folder=folder,
                resource_type="image",
                width=MAX_WIDTH,
                height=MAX_HEIGHT,
                crop="limit",
                quality="auto:good",
                fetch_format="auto",
            )
        except Exception as e:
            logger.error(f"Cloudinary upload to {folder} failed: {e}")
            raise ImageUploadError(f"Failed to upload image: {e}")

        url = result.get("secure_url")
        if not url:
            raise ImageUploadError("Cloudinary did not return an image URL")

        logger.info(f"Image uploaded to Cloudinary: {url}")
        return url

    def delete_image(self, public_id: str) -> bool:
        """Delete an image by public id (including folder). False when it was not deleted."""
        try:
            result = cloudinary.uploader.destroy(public_id)
        except Exception as e:
            logger.error(f"Cloudinary delete of {public_id} failed: {e}")
            return False

        deleted = result.get("result") == "ok"
        if not deleted:
            logger.warning(f"Cloudinary did not delete {public_id}: {result}")
        return deleted


# Global instance
cloudinary_service = CloudinaryService()
