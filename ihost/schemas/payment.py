"""
Stripe payment schemas
"""
from typing import Optional

from pydantic import Field

from ihost.models.base import CamelModel


class PaymentIntentRequest(CamelModel):
    event_id: str = Field(min_length=1)


class PaymentIntentResponse(CamelModel):
    """Everything the mobile PaymentSheet needs"""
    payment_intent: str
    ephemeral_key: str
    customer: str
    publishable_key: Optional[str] = None


class KeysResponse(CamelModel):
    publishable_key: str


class WebhookResponse(CamelModel):
    received: bool
