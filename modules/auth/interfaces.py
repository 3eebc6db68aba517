"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """Contract for turning a bearer token into a caller identity."""

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a Clerk session token and return the authenticated user.

        Args:
            token: Session JWT from the Authorization header

        Returns:
            AuthenticatedUser whose id is the Clerk user id

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...
