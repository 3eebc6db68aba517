"""
Billing module exceptions.

Raised while processing Stripe webhooks. A non-2xx response makes Stripe
redeliver the event, so only genuinely retryable conditions should map to
one.
"""

from typing import Optional

from shared.exceptions import NotFoundError, ValidationError


class WebhookVerificationError(ValidationError):
    """Raised when Stripe webhook signature verification fails."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            "Webhook signature verification failed",
            code="WEBHOOK_VERIFICATION_FAILED",
            details={"reason": reason} if reason else {},
        )


class MissingSignatureError(ValidationError):
    """Raised when the Stripe-Signature header is absent."""

    def __init__(self):
        super().__init__(
            "Missing Stripe signature header",
            code="MISSING_SIGNATURE",
        )


class UnknownPriceError(ValidationError):
    """Raised when a subscription references a price we don't sell."""

    def __init__(self, price_id: Optional[str]):
        super().__init__(
            f"Unknown price: {price_id}",
            code="UNKNOWN_PRICE",
            details={"price_id": price_id},
        )


class BillingUserNotFoundError(NotFoundError):
    """Raised when a Stripe customer can't be matched to a user."""

    def __init__(self, customer_id: Optional[str] = None, email: Optional[str] = None):
        super().__init__(
            "No user matches the Stripe customer",
            code="BILLING_USER_NOT_FOUND",
            details={"customer_id": customer_id, "email": email},
        )
