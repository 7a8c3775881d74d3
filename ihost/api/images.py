"""
Image upload API endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from ihost.core.dependencies import AuthContext, get_current_user, get_image_service
from ihost.models.image import EventImage
from ihost.schemas.image import ImageDeleteResponse, ImageUploadResponse, ProfilePhotoResponse
from ihost.services.image_service import ImageService

router = APIRouter()


@router.post("/upload", response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
def upload_event_image(
    file: UploadFile = File(...),
    event_id: Optional[str] = Form(default=None, alias="eventId"),
    current_user: AuthContext = Depends(get_current_user),
    image_service: ImageService = Depends(get_image_service)
):
    """Upload an image for an event"""
    return image_service.upload_event_image(
        file.file.read(),
        file.content_type,
        file.filename,
        event_id or "",
        current_user.uid,
    )


@router.get("/event/{event_id}", response_model=List[EventImage])
def get_event_images(
    event_id: str,
    current_user: AuthContext = Depends(get_current_user),
    image_service: ImageService = Depends(get_image_service)
):
    return image_service.get_event_images(event_id)


@router.post("/upload-profile", response_model=ProfilePhotoResponse)
def upload_profile_photo(
    file: UploadFile = File(...),
    current_user: AuthContext = Depends(get_current_user),
    image_service: ImageService = Depends(get_image_service)
):
    """Replace the caller's profile photo"""
    url = image_service.upload_profile_photo(file.file.read(), file.content_type, current_user.uid)
    return ProfilePhotoResponse(image_url=url)


@router.delete("/{document_id}", response_model=ImageDeleteResponse)
def delete_image(
    document_id: str,
    current_user: AuthContext = Depends(get_current_user),
    image_service: ImageService = Depends(get_image_service)
):
    """Delete an event image you uploaded"""
    image_service.delete_image(document_id, current_user.uid)
    return ImageDeleteResponse(document_id=document_id)
