"""
Typed errors raised by services and mapped to HTTP responses in main.py
"""
from fastapi import status


class IHostError(Exception):
    """Base class for errors that carry their own HTTP status and error code."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error_code: str = "BAD_REQUEST"

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code


class BadRequestError(IHostError):
    """Invalid input or an operation not allowed in the current state."""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "BAD_REQUEST"


class UnauthorizedError(IHostError):
    """Missing, malformed or rejected bearer token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "UNAUTHORIZED"


class ForbiddenError(IHostError):
    """Authenticated, but not allowed to touch this resource."""
    status_code = status.HTTP_403_FORBIDDEN
    error_code = "FORBIDDEN"


class ResourceNotFoundError(IHostError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"


class ConflictError(IHostError):
    """Duplicate registration, friendship or username."""
    status_code = status.HTTP_409_CONFLICT
    error_code = "CONFLICT"


class ImageUploadError(IHostError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "UPLOAD_FAILED"
