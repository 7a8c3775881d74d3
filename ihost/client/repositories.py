"""
Client-side repositories, one per API resource

Every method wraps exactly one endpoint and returns a Result instead of
raising, mirroring how the mobile app consumes the API.
"""
import logging
from typing import Callable, List, Optional, TypeVar

import httpx
from pydantic import ValidationError

from ihost.client.api_client import ApiClient, ApiError
from ihost.client.result import Result
from ihost.models.enums import EventUserStatus
from ihost.models.event_user import EventUser
from ihost.models.friendship import Friendship
from ihost.models.image import EventImage
from ihost.models.user import User
from ihost.schemas.event import (
    CreateEventRequest,
    EventDeleteResponse,
    EventWithMetadata,
    UpdateEventRequest,
)
from ihost.schemas.event_user import InvitationResponse, InviteUsersRequest, InviteUsersResponse
from ihost.schemas.friendship import FriendRequestCreate
from ihost.schemas.image import ImageUploadResponse, ProfilePhotoResponse
from ihost.schemas.payment import KeysResponse, PaymentIntentRequest, PaymentIntentResponse
from ihost.schemas.user import AuthResponse, CreateUserRequest, UpdateUserRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _body(model) -> dict:
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


def _status_params(status: Optional[EventUserStatus]) -> dict:
    return {"status": status.value} if status else {}


class ClientRepository:
    def __init__(self, client: ApiClient):
        self.client = client

    def _call(self, action: str, func: Callable[[], T]) -> Result[T]:
        try:
            value = func()
        except (ApiError, httpx.HTTPError, ValidationError) as e:
            logger.error(f"{type(self).__name__}: {action} failed: {e}")
            return Result.failure(e)
        logger.debug(f"{type(self).__name__}: {action} succeeded")
        return Result.success(value)


class UserRepository(ClientRepository):
    def register(self, request: CreateUserRequest) -> Result[AuthResponse]:
        return self._call("register", lambda: AuthResponse.model_validate(
            self.client.post("/api/users/register", json=_body(request))
        ))

    def get_all_users(self) -> Result[List[User]]:
        return self._call("get all users", lambda: [
            User.model_validate(item) for item in self.client.get("/api/users")
        ])

    def get_user(self, uid: str) -> Result[User]:
        return self._call(f"get user {uid}", lambda: User.model_validate(
            self.client.get(f"/api/users/{uid}")
        ))

    def update_user(self, uid: str, request: UpdateUserRequest) -> Result[User]:
        return self._call(f"update user {uid}", lambda: User.model_validate(
            self.client.put(f"/api/users/{uid}", json=_body(request))
        ))

    def is_username_available(self, username: str) -> Result[bool]:
        return self._call("check username", lambda: bool(
            self.client.get(f"/api/users/username-available/{username}")["available"]
        ))

    def is_email_available(self, email: str) -> Result[bool]:
        return self._call("check email", lambda: bool(
            self.client.get(f"/api/users/email-available/{email}")["available"]
        ))

    def verify(self) -> Result[User]:
        """Profile of the user owning the current token"""
        return self._call("verify token", lambda: User.model_validate(
            self.client.get("/api/auth/verify")
        ))


class EventRepository(ClientRepository):
    def get_user_events(self) -> Result[List[EventWithMetadata]]:
        return self._call("load events", lambda: [
            EventWithMetadata.model_validate(item) for item in self.client.get("/api/events")
        ])

    def get_event(self, event_id: str) -> Result[EventWithMetadata]:
        return self._call(f"load event {event_id}", lambda: EventWithMetadata.model_validate(
            self.client.get(f"/api/events/{event_id}")
        ))

    def get_event_by_code(self, share_code: str) -> Result[EventWithMetadata]:
        """Also registers the caller as a PENDING attendee when new to the event."""
        return self._call(f"load event by code {share_code}", lambda: EventWithMetadata.model_validate(
            self.client.get(f"/api/events/by-code/{share_code}")
        ))

    def create_event(self, request: CreateEventRequest) -> Result[EventWithMetadata]:
        return self._call("create event", lambda: EventWithMetadata.model_validate(
            self.client.post("/api/events", json=_body(request))
        ))

    def update_event(self, event_id: str, request: UpdateEventRequest) -> Result[EventWithMetadata]:
        return self._call(f"update event {event_id}", lambda: EventWithMetadata.model_validate(
            self.client.put(f"/api/events/{event_id}", json=_body(request))
        ))

    def delete_event(self, event_id: str) -> Result[EventDeleteResponse]:
        return self._call(f"delete event {event_id}", lambda: EventDeleteResponse.model_validate(
            self.client.delete(f"/api/events/{event_id}")
        ))


class EventUserRepository(ClientRepository):
    def invite_users(self, event_id: str, user_ids: List[str]) -> Result[InviteUsersResponse]:
        request = InviteUsersRequest(event_id=event_id, user_ids=user_ids)
        return self._call(f"invite to {event_id}", lambda: InviteUsersResponse.model_validate(
            self.client.post("/api/event-users/invite", json=_body(request))
        ))

    def accept_invitation(self, event_user_id: str) -> Result[InvitationResponse]:
        return self._call(f"accept {event_user_id}", lambda: InvitationResponse.model_validate(
            self.client.post(f"/api/event-users/{event_user_id}/accept")
        ))

    def decline_invitation(self, event_user_id: str) -> Result[InvitationResponse]:
        return self._call(f"decline {event_user_id}", lambda: InvitationResponse.model_validate(
            self.client.post(f"/api/event-users/{event_user_id}/decline")
        ))

    def get_event_attendees(
        self,
        event_id: str,
        status: Optional[EventUserStatus] = None
    ) -> Result[List[EventUser]]:
        return self._call(f"attendees of {event_id}", lambda: [
            EventUser.model_validate(item)
            for item in self.client.get(f"/api/event-users/event/{event_id}", params=_status_params(status))
        ])

    def get_my_events(self, status: Optional[EventUserStatus] = None) -> Result[List[EventWithMetadata]]:
        return self._call("my events", lambda: [
            EventWithMetadata.model_validate(item)
            for item in self.client.get("/api/event-users/my-events", params=_status_params(status))
        ])


class FriendshipRepository(ClientRepository):
    def send_friend_request(self, to_user_id: str) -> Result[Friendship]:
        request = FriendRequestCreate(to_user_id=to_user_id)
        return self._call(f"friend request to {to_user_id}", lambda: Friendship.model_validate(
            self.client.post("/api/friendships/request", json=_body(request))
        ))

    def accept_friend_request(self, friendship_id: str) -> Result[Friendship]:
        return self._call(f"accept friendship {friendship_id}", lambda: Friendship.model_validate(
            self.client.post(f"/api/friendships/{friendship_id}/accept")
        ))

    def decline_friend_request(self, friendship_id: str) -> Result[Friendship]:
        return self._call(f"decline friendship {friendship_id}", lambda: Friendship.model_validate(
            self.client.post(f"/api/friendships/{friendship_id}/decline")
        ))

    def remove_friend(self, friendship_id: str) -> Result[str]:
        return self._call(f"remove friendship {friendship_id}", lambda: (
            self.client.delete(f"/api/friendships/{friendship_id}")["message"]
        ))

    def _list(self, path: str) -> Result[List[Friendship]]:
        return self._call(f"GET {path}", lambda: [
            Friendship.model_validate(item) for item in self.client.get(path)
        ])

    def get_pending_requests(self) -> Result[List[Friendship]]:
        return self._list("/api/friendships/pending")

    def get_friends(self) -> Result[List[Friendship]]:
        return self._list("/api/friendships/friends")

    def get_sent_requests(self) -> Result[List[Friendship]]:
        return self._list("/api/friendships/sent")


class ImageRepository(ClientRepository):
    def upload_event_image(
        self,
        event_id: str,
        filename: str,
        content: bytes,
        content_type: str = "image/jpeg"
    ) -> Result[ImageUploadResponse]:
        return self._call(f"upload image for {event_id}", lambda: ImageUploadResponse.model_validate(
            self.client.post(
                "/api/images/upload",
                files={"file": (filename, content, content_type)},
                data={"eventId": event_id},
            )
        ))

    def get_event_images(self, event_id: str) -> Result[List[EventImage]]:
        return self._call(f"images of {event_id}", lambda: [
            EventImage.model_validate(item) for item in self.client.get(f"/api/images/event/{event_id}")
        ])

    def upload_profile_photo(
        self,
        filename: str,
        content: bytes,
        content_type: str = "image/jpeg"
    ) -> Result[str]:
        return self._call("upload profile photo", lambda: ProfilePhotoResponse.model_validate(
            self.client.post("/api/images/upload-profile", files={"file": (filename, content, content_type)})
        ).image_url)

    def delete_image(self, document_id: str) -> Result[str]:
        return self._call(f"delete image {document_id}", lambda: (
            self.client.delete(f"/api/images/{document_id}")["documentId"]
        ))


class StripeRepository(ClientRepository):
    def create_payment_intent(self, event_id: str) -> Result[PaymentIntentResponse]:
        request = PaymentIntentRequest(event_id=event_id)
        return self._call(f"payment intent for {event_id}", lambda: PaymentIntentResponse.model_validate(
            self.client.post("/api/stripe/payment-intent", json=_body(request))
        ))

    def get_publishable_key(self) -> Result[str]:
        return self._call("stripe keys", lambda: KeysResponse.model_validate(
            self.client.get("/api/stripe/keys")
        ).publishable_key)
