"""
Users service implementation.
"""

import logging
from typing import Optional

from shared.models import AuthenticatedUser
from modules.billing.models import SubscriptionTier, company_limit_for

from .interfaces import IUserService
from .identity import ClerkClient
from .models import User, UserProfile, SyncUserRequest, UpdateUserRequest
from .repository import UserRepository
from .exceptions import UserNotFoundError, EmailInUseError, EmailMismatchError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """User records backed by Supabase, passwords delegated to Clerk."""

    def __init__(self, repository: UserRepository, identity: Optional[ClerkClient] = None):
        self._repo = repository
        self._identity = identity

    async def get_user(self, clerk_id: str) -> User:
        user = self._repo.get_by_clerk_id(clerk_id)
        if user is None:
            raise UserNotFoundError(clerk_id)
        return user

    async def sync_user(self, caller: AuthenticatedUser, request: SyncUserRequest) -> User:
        existing = self._repo.get_by_clerk_id(caller.id)
        if existing is not None:
            return existing

        # The token email is verified by Clerk; the body is only a fallback.
        email = request.email
        if caller.email:
            if email.lower() != caller.email.lower():
                raise EmailMismatchError(email)
            email = caller.email

        other = self._repo.get_by_email(email)
        if other is not None:
            raise EmailInUseError(email)

        user = self._repo.create({
            "clerk_id": caller.id,
            "email": email,
            "first_name": request.first_name,
            "last_name": request.last_name,
            "subscription_tier": SubscriptionTier.FREE.value,
        })
        logger.info("Created user %s for Clerk user %s", user.id, caller.id)
        return user

    async def get_profile(self, clerk_id: str) -> UserProfile:
        user = await self.get_user(clerk_id)
        limit = company_limit_for(user.subscription_tier)
        count = len(user.companies)
        return UserProfile(
            id=user.id,
            clerk_id=user.clerk_id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            subscription_tier=user.subscription_tier,
            company_count=count,
            company_limit=limit,
            can_create_company=count < limit,
        )

    async def update_user(self, clerk_id: str, request: UpdateUserRequest) -> User:
        user = await self.get_user(clerk_id)

        fields = request.model_dump(exclude_unset=True, exclude_none=True, exclude={"new_password"})
        if "email" in fields and fields["email"].lower() != user.email:
            other = self._repo.get_by_email(fields["email"])
            if other is not None and other.id != user.id:
                raise EmailInUseError(fields["email"])

        # Password first: a rejected password leaves the profile untouched.
        if request.new_password:
            if self._identity is None:
                self._identity = ClerkClient()
            await self._identity.update_password(clerk_id, request.new_password)

        if not fields:
            return user

        updated = self._repo.update(user.id, fields)
        if updated is None:
            raise UserNotFoundError(clerk_id)
        logger.info("Updated user %s (%s)", user.id, ", ".join(sorted(fields)))
        return updated
