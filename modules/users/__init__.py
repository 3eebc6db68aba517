"""
Users module.

Local user records keyed by Clerk id: first-sign-in sync, profile with
subscription quota, and profile/password updates.

Public API:
- IUserService: Interface for user operations
- User, UserProfile: User models
- UserRepository: Data access for the users table
- User exceptions: UserNotFoundError, EmailInUseError, IdentityProviderError
"""

from .interfaces import IUserService
from .models import (
    User,
    UserProfile,
    SyncUserRequest,
    UpdateUserRequest,
    UpdateUserResponse,
)
from .repository import UserRepository
from .exceptions import (
    UserNotFoundError,
    EmailInUseError,
    IdentityProviderError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "UserProfile",
    "SyncUserRequest",
    "UpdateUserRequest",
    "UpdateUserResponse",
    # Data access
    "UserRepository",
    # Exceptions
    "UserNotFoundError",
    "EmailInUseError",
    "IdentityProviderError",
]
