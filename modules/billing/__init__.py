"""
Billing module.

Keeps each user's subscription tier in sync with Stripe and defines how
many companies each tier may own.

Public API:
- IBillingService: Interface for billing operations
- SubscriptionTier, TIER_COMPANY_LIMITS, company_limit_for
- WebhookResult: Outcome of processing a Stripe event
- Billing exceptions: WebhookVerificationError, UnknownPriceError, etc.
"""

from .interfaces import IBillingService
from .models import (
    SubscriptionTier,
    TIER_COMPANY_LIMITS,
    INACTIVE_SUBSCRIPTION_STATUSES,
    WebhookAction,
    WebhookResult,
    company_limit_for,
)
from .exceptions import (
    WebhookVerificationError,
    MissingSignatureError,
    UnknownPriceError,
    BillingUserNotFoundError,
)

__all__ = [
    # Interface
    "IBillingService",
    # Models
    "SubscriptionTier",
    "TIER_COMPANY_LIMITS",
    "INACTIVE_SUBSCRIPTION_STATUSES",
    "WebhookAction",
    "WebhookResult",
    "company_limit_for",
    # Exceptions
    "WebhookVerificationError",
    "MissingSignatureError",
    "UnknownPriceError",
    "BillingUserNotFoundError",
]
