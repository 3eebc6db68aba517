"""
Users module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import User, UserProfile, SyncUserRequest, UpdateUserRequest


@runtime_checkable
class IUserService(Protocol):
    """Contract for local user records."""

    async def get_user(self, clerk_id: str) -> User:
        """
        Get the user record for a Clerk id.

        Raises:
            UserNotFoundError: If the user has never been synced
        """
        ...

    async def sync_user(self, caller: AuthenticatedUser, request: SyncUserRequest) -> User:
        """Create the user record on first sign-in; return the existing one otherwise."""
        ...

    async def get_profile(self, clerk_id: str) -> UserProfile:
        """Get the profile with tier, company count and company limit."""
        ...

    async def update_user(self, clerk_id: str, request: UpdateUserRequest) -> User:
        """
        Update names/email and, when supplied, the password in Clerk.

        Raises:
            UserNotFoundError: If the user doesn't exist
            EmailInUseError: If the new email belongs to another user
            IdentityProviderError: If Clerk rejects the password change
        """
        ...
