"""
Image upload schemas
"""
from ihost.models.base import CamelModel
from ihost.models.image import EventImage


class ImageUploadResponse(CamelModel):
    message: str = "Image uploaded successfully"
    image_url: str
    document_id: str
    metadata: EventImage


class ProfilePhotoResponse(CamelModel):
    message: str = "Profile image uploaded successfully"
    image_url: str


class ImageDeleteResponse(CamelModel):
    message: str = "Image deleted successfully"
    document_id: str
