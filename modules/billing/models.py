"""
Billing module data models.

Subscription tiers, the company quota each tier grants, and the result
of processing a Stripe webhook event.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SubscriptionTier(str, Enum):
    """User subscription tiers."""

    FREE = "free"
    BASIC = "basic"
    PREMIUM = "premium"


# Maximum number of companies a user may own per tier
TIER_COMPANY_LIMITS: dict[SubscriptionTier, int] = {
    SubscriptionTier.FREE: 1,
    SubscriptionTier.BASIC: 1,
    SubscriptionTier.PREMIUM: 10,
}

# Stripe subscription statuses that no longer grant a paid tier
INACTIVE_SUBSCRIPTION_STATUSES = frozenset({"canceled", "incomplete_expired", "unpaid"})


def company_limit_for(tier: SubscriptionTier | str) -> int:
    """Return the company quota for a tier (unknown tiers get the free quota)."""
    try:
        return TIER_COMPANY_LIMITS[SubscriptionTier(tier)]
    except ValueError:
        return TIER_COMPANY_LIMITS[SubscriptionTier.FREE]


class WebhookAction(str, Enum):
    """What the webhook handler did with an event."""

    TIER_UPDATED = "tier_updated"
    IGNORED = "ignored"


class WebhookResult(BaseModel):
    """Acknowledgement returned to Stripe."""

    received: bool = True
    event_type: str = Field(..., description="Stripe event type")
    action: WebhookAction = Field(..., description="Outcome of processing")
    user_id: Optional[str] = Field(None, description="Internal user ID that was updated")
    tier: Optional[SubscriptionTier] = Field(None, description="Tier written to the user")
