"""
Stripe payment API endpoints
"""
from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import JSONResponse

from ihost.core.dependencies import AuthContext, get_current_user, get_payment_service
from ihost.schemas.payment import (
    KeysResponse,
    PaymentIntentRequest,
    PaymentIntentResponse,
    WebhookResponse,
)
from ihost.services.payment_service import PaymentService

router = APIRouter()


@router.post("/payment-intent", response_model=PaymentIntentResponse)
def create_payment_intent(
    request: PaymentIntentRequest,
    current_user: AuthContext = Depends(get_current_user),
    payment_service: PaymentService = Depends(get_payment_service)
):
    """Prepare a PaymentSheet for an event's ticket price"""
    return payment_service.create_payment_intent(request.event_id)


@router.get("/keys", response_model=KeysResponse)
def get_keys(
    current_user: AuthContext = Depends(get_current_user),
    payment_service: PaymentService = Depends(get_payment_service)
):
    return KeysResponse(publishable_key=payment_service.get_publishable_key())


@router.post("/webhook", response_model=WebhookResponse)
async def stripe_webhook(
    request: Request,
    stripe_signature: str = Header(default="", alias="stripe-signature"),
    payment_service: PaymentService = Depends(get_payment_service)
):
    """Stripe webhook (public, authenticated by its signature)"""
    payload = await request.body()
    if not payment_service.handle_webhook(payload, stripe_signature):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=WebhookResponse(received=False).model_dump(),
        )
    return WebhookResponse(received=True)
