"""
Payment service - Stripe PaymentSheet setup and webhook handling

Webhook events are verified and logged only; no order or ledger state is
stored for payments.
"""
import logging
from decimal import ROUND_HALF_UP, Decimal

import stripe

from ihost.core.config import settings
from ihost.core.exceptions import BadRequestError, ResourceNotFoundError
from ihost.repositories.event_repository import EventRepository
from ihost.schemas.payment import PaymentIntentResponse

logger = logging.getLogger(__name__)


def configure_stripe():
    """Set the Stripe secret key from settings."""
    stripe.api_key = settings.STRIPE_SECRET_KEY


def to_minor_units(price: float) -> int:
    """Convert a price to the currency's smallest unit (ore for NOK), rounding half up."""
    return int((Decimal(str(price)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def metadata_event_id(intent):
    """The eventId stored in a PaymentIntent's metadata, or None."""
    # StripeObject is not a dict; missing keys raise AttributeError
    metadata = getattr(intent, "metadata", None)
    return getattr(metadata, "eventId", None)


class PaymentService:
    """Service for Stripe payments"""

    def __init__(self, events: EventRepository):
        self.events = events

    def create_payment_intent(self, event_id: str) -> PaymentIntentResponse:
        """
        Create a customer, an ephemeral key and a payment intent for an event's price.

        Raises:
            ResourceNotFoundError: If the event does not exist
            BadRequestError: If the event price is not positive
        """
        logger.info(f"Creating payment intent for event: {event_id}")

        event = self.events.find_by_id(event_id)
        if event is None:
            raise ResourceNotFoundError("Event not found")

        amount = to_minor_units(event.price)
        if amount <= 0:
            logger.warning(f"Invalid order amount: {amount}")
            raise BadRequestError("Order total must be greater than 0")

        customer = stripe.Customer.create()
        logger.info(f"Created customer: {customer.id}")

        ephemeral_key = stripe.EphemeralKey.create(
            customer=customer.id,
            stripe_version=settings.STRIPE_API_VERSION,
        )

        payment_intent = stripe.PaymentIntent.create(
            amount=amount,
            currency=settings.STRIPE_CURRENCY,
            customer=customer.id,
            metadata={"eventId": event_id},
            automatic_payment_methods={"enabled": True},
        )
        logger.info(f"Created payment intent: {payment_intent.id} for amount: {amount}")

        return PaymentIntentResponse(
            payment_intent=payment_intent.client_secret or "",
            ephemeral_key=ephemeral_key.secret or "",
            customer=customer.id,
            publishable_key=settings.STRIPE_PUBLISHABLE_KEY or None,
        )

    def get_publishable_key(self) -> str:
        return settings.STRIPE_PUBLISHABLE_KEY

    def handle_webhook(self, payload: bytes, signature: str) -> bool:
        """
        Verify and dispatch a Stripe webhook.

        Returns False when the payload or signature cannot be verified.
        """
        logger.info(f"Received webhook with signature: {signature[:20]}...")

        try:
            event = stripe.Webhook.construct_event(payload, signature, settings.STRIPE_WEBHOOK_SECRET)
        except stripe.SignatureVerificationError as e:
            logger.error(f"Invalid webhook signature: {e}")
            return False
        except ValueError as e:
            logger.error(f"Invalid webhook payload: {e}")
            return False

        event_type = event["type"]
        logger.info(f"Processing webhook event: {event_type}")

        if event_type == "payment_intent.succeeded":
            intent = event["data"]["object"]
            logger.info(
                f"Payment succeeded for PaymentIntent: {intent['id']} "
                f"(event {metadata_event_id(intent)})"
            )
        elif event_type == "payment_intent.payment_failed":
            intent = event["data"]["object"]
            logger.warning(
                f"Payment failed for PaymentIntent: {intent['id']} "
                f"(event {metadata_event_id(intent)})"
            )
        elif event_type == "payment_method.attached":
            logger.info("Payment method attached")
        else:
            logger.info(f"Unhandled event type: {event_type}")

        return True
