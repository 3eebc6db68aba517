"""
Authentication module.

Verifies Clerk session tokens and turns them into an AuthenticatedUser.

Public API:
- IAuthService: Interface for auth operations
- ClerkSessionClaims: Decoded session token claims
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import ClerkSessionClaims
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "ClerkSessionClaims",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
]
