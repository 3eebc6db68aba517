"""
Billing API endpoints.

Stripe posts webhook events to /api/webhooks/stripe. The raw body is passed
through untouched because the signature covers the exact bytes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from api.dependencies import get_billing_service

from .interfaces import IBillingService
from .models import WebhookResult

router = APIRouter()


@router.post("/stripe", response_model=WebhookResult)
async def stripe_webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(None, alias="Stripe-Signature"),
    service: IBillingService = Depends(get_billing_service),
) -> WebhookResult:
    """
    Receive a Stripe event and sync the user's subscription tier.
    """
    payload = await request.body()
    return await service.handle_webhook(payload, stripe_signature)
