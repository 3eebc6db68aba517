"""
Users module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from shared.models import CamelModel
from modules.billing.models import SubscriptionTier


class User(CamelModel):
    """A local user record."""

    id: str = Field(..., description="Internal user ID (UUID)")
    clerk_id: str = Field(..., description="Clerk user ID")
    email: str = Field(..., description="Email address")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    subscription_tier: SubscriptionTier = SubscriptionTier.FREE
    stripe_customer_id: Optional[str] = Field(None, exclude=True)
    companies: list[str] = Field(default_factory=list, description="Owned company IDs, in creation order")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserProfile(CamelModel):
    """User profile with subscription quota, as shown to the signed-in user."""

    id: str
    clerk_id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    subscription_tier: SubscriptionTier
    company_count: int = Field(..., ge=0)
    company_limit: int = Field(..., ge=0)
    can_create_company: bool


class SyncUserRequest(CamelModel):
    """Payload sent by the frontend after the first Clerk sign-in."""

    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UpdateUserRequest(CamelModel):
    """
    Profile update.

    Only supplied fields change. The subscription tier is owned by billing
    and is not accepted here.
    """

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    new_password: Optional[str] = Field(None, min_length=8)


class UpdateUserResponse(CamelModel):
    success: bool = True
    message: str = "User updated successfully"
    user: User
