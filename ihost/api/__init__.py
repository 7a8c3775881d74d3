"""
API routes aggregation
"""
from fastapi import APIRouter
from ihost.api import auth, users, events, event_users, friendships, images, payments

api_router = APIRouter()

# Authentication
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])

# Users
api_router.include_router(users.router, prefix="/users", tags=["users"])

# Events
api_router.include_router(events.router, prefix="/events", tags=["events"])

# Invitations
api_router.include_router(event_users.router, prefix="/event-users", tags=["event-users"])

# Social/Friends
api_router.include_router(friendships.router, prefix="/friendships", tags=["friendships"])

# Images
api_router.include_router(images.router, prefix="/images", tags=["images"])

# Payments
api_router.include_router(payments.router, prefix="/stripe", tags=["stripe"])
