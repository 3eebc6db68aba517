"""
Billing service implementation.

Handles the Stripe webhook. Every handler writes an absolute tier, so a
redelivered event converges on the same stored state.

User resolution follows a fixed order: the stored stripe_customer_id, then
the customer's email fetched from Stripe. When the email fallback matches,
the customer id is saved so later events take the direct path.
"""

import logging
from typing import Any, Optional

import stripe

from shared.config import get_settings
from shared.exceptions import ExternalServiceError
from modules.users.models import User
from modules.users.repository import UserRepository

from .interfaces import IBillingService
from .models import (
    INACTIVE_SUBSCRIPTION_STATUSES,
    SubscriptionTier,
    WebhookAction,
    WebhookResult,
)
from .exceptions import (
    BillingUserNotFoundError,
    MissingSignatureError,
    UnknownPriceError,
    WebhookVerificationError,
)

logger = logging.getLogger(__name__)

SUBSCRIPTION_CHANGED = ("customer.subscription.created", "customer.subscription.updated")
SUBSCRIPTION_DELETED = "customer.subscription.deleted"
CHECKOUT_COMPLETED = "checkout.session.completed"


def _as_dict(obj: Any) -> dict:
    """Stripe objects are dict-like; tests hand in plain dicts."""
    if obj is None:
        return {}
    if isinstance(obj, dict):
        return obj
    return obj.to_dict()


def _first_price_id(container: dict) -> Optional[str]:
    """Price id of the first item in ``items`` or ``line_items``."""
    for key in ("items", "line_items"):
        data = (container.get(key) or {}).get("data") or []
        if data:
            price = data[0].get("price") or {}
            return price.get("id") if isinstance(price, dict) else price
    return None


class BillingService(IBillingService):
    """Stripe webhook processing."""

    def __init__(self, users: UserRepository):
        self._settings = get_settings()
        self._users = users
        stripe.api_key = self._settings.stripe_secret_key

    @property
    def price_tiers(self) -> dict[str, SubscriptionTier]:
        """Configured Stripe price ids mapped to tiers."""
        mapping = {
            self._settings.stripe_basic_price_id: SubscriptionTier.BASIC,
            self._settings.stripe_premium_price_id: SubscriptionTier.PREMIUM,
        }
        return {price: tier for price, tier in mapping.items() if price}

    def tier_for_price(self, price_id: Optional[str]) -> SubscriptionTier:
        tier = self.price_tiers.get(price_id or "")
        if tier is None:
            logger.warning("Unknown Stripe price id: %s", price_id)
            raise UnknownPriceError(price_id)
        return tier

    async def handle_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookResult:
        if not signature:
            logger.warning("Stripe webhook without signature header")
            raise MissingSignatureError()

        try:
            event = stripe.Webhook.construct_event(
                payload,
                signature,
                self._settings.stripe_webhook_secret,
            )
        except ValueError as e:
            logger.warning("Invalid Stripe webhook payload: %s", e)
            raise WebhookVerificationError(str(e))
        except stripe.SignatureVerificationError as e:
            logger.warning("Invalid Stripe webhook signature: %s", e)
            raise WebhookVerificationError(str(e))

        event = _as_dict(event)
        event_type = event["type"]
        obj = _as_dict(event["data"]["object"])
        logger.info("Received Stripe event: %s", event_type)

        if event_type in SUBSCRIPTION_CHANGED:
            return self._on_subscription_changed(event_type, obj)
        if event_type == SUBSCRIPTION_DELETED:
            return self._on_subscription_deleted(event_type, obj)
        if event_type == CHECKOUT_COMPLETED:
            return self._on_checkout_completed(event_type, obj)

        logger.debug("Ignoring unhandled Stripe event: %s", event_type)
        return WebhookResult(event_type=event_type, action=WebhookAction.IGNORED)

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    def _on_subscription_changed(self, event_type: str, subscription: dict) -> WebhookResult:
        customer_id = subscription.get("customer")
        user = self._resolve_user(customer_id)

        if subscription.get("status") in INACTIVE_SUBSCRIPTION_STATUSES:
            tier = SubscriptionTier.FREE
        else:
            tier = self.tier_for_price(_first_price_id(subscription))

        return self._apply_tier(event_type, user, tier, customer_id)

    def _on_subscription_deleted(self, event_type: str, subscription: dict) -> WebhookResult:
        customer_id = subscription.get("customer")
        user = self._resolve_user(customer_id)
        return self._apply_tier(event_type, user, SubscriptionTier.FREE, customer_id)

    def _on_checkout_completed(self, event_type: str, session: dict) -> WebhookResult:
        try:
            full_session = _as_dict(
                stripe.checkout.Session.retrieve(
                    session["id"],
                    expand=["line_items.data.price"],
                )
            )
        except stripe.StripeError as e:
            logger.error("Failed to retrieve checkout session %s: %s", session.get("id"), e)
            raise ExternalServiceError(
                "Failed to retrieve checkout session",
                service="stripe",
                code="STRIPE_ERROR",
            ) from e

        customer_id = full_session.get("customer") or session.get("customer")
        if isinstance(customer_id, dict):
            customer_id = customer_id.get("id")

        tier = self.tier_for_price(_first_price_id(full_session))

        clerk_id = (session.get("metadata") or {}).get("userId")
        user = self._users.get_by_clerk_id(clerk_id) if clerk_id else None
        if user is None:
            user = self._resolve_user(customer_id)

        return self._apply_tier(event_type, user, tier, customer_id)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _resolve_user(self, customer_id: Optional[str]) -> User:
        """
        Find the user behind a Stripe customer.

        Raises:
            BillingUserNotFoundError: If neither lookup matches
        """
        if not customer_id:
            raise BillingUserNotFoundError()

        user = self._users.get_by_stripe_customer_id(customer_id)
        if user is not None:
            return user

        email = self._customer_email(customer_id)
        user = self._users.get_by_email(email) if email else None
        if user is None:
            logger.warning("No user for Stripe customer %s (email %s)", customer_id, email)
            raise BillingUserNotFoundError(customer_id, email)

        logger.info("Linked Stripe customer %s to user %s by email", customer_id, user.id)
        return user

    def _customer_email(self, customer_id: str) -> Optional[str]:
        try:
            customer = _as_dict(stripe.Customer.retrieve(customer_id))
        except stripe.StripeError as e:
            logger.error("Failed to retrieve Stripe customer %s: %s", customer_id, e)
            raise ExternalServiceError(
                "Failed to retrieve Stripe customer",
                service="stripe",
                code="STRIPE_ERROR",
            ) from e
        return customer.get("email")

    def _apply_tier(
        self,
        event_type: str,
        user: User,
        tier: SubscriptionTier,
        customer_id: Optional[str],
    ) -> WebhookResult:
        self._users.set_subscription(user.id, tier, stripe_customer_id=customer_id)
        logger.info("Set tier %s for user %s (%s)", tier.value, user.id, event_type)
        return WebhookResult(
            event_type=event_type,
            action=WebhookAction.TIER_UPDATED,
            user_id=user.id,
            tier=tier,
        )
