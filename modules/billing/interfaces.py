"""
Billing module interface.

Other modules should depend on IBillingService, not the concrete implementation.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import WebhookResult


@runtime_checkable
class IBillingService(Protocol):
    """Keeps the stored subscription tier in sync with Stripe."""

    async def handle_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookResult:
        """
        Verify and apply a Stripe webhook event.

        Args:
            payload: Raw request body, exactly as received
            signature: Value of the Stripe-Signature header

        Returns:
            WebhookResult describing what was done

        Raises:
            MissingSignatureError / WebhookVerificationError: Bad signature (400)
            UnknownPriceError: Price id isn't one we sell (400)
            BillingUserNotFoundError: No user matches the customer (404)
        """
        ...
