"""
Users module exceptions.
"""

from typing import Optional

from shared.exceptions import NotFoundError, ValidationError, ExternalServiceError


class UserNotFoundError(NotFoundError):
    """Raised when no local user record matches the identifier."""

    def __init__(self, identifier: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": identifier},
        )


class EmailInUseError(ValidationError):
    """Raised when an email already belongs to a different user."""

    def __init__(self, email: str):
        super().__init__(
            f"Email already in use: {email}",
            code="EMAIL_IN_USE",
            details={"email": email},
        )


class EmailMismatchError(ValidationError):
    """Raised when the submitted email differs from the one on the session token."""

    def __init__(self, email: str):
        super().__init__(
            "Email does not match the signed-in account",
            code="EMAIL_MISMATCH",
            details={"email": email},
        )


class IdentityProviderError(ExternalServiceError):
    """
    Raised when the Clerk Backend API rejects or fails a request.

    ``status_code`` carries Clerk's own response status so callers see the
    same 4xx Clerk returned (e.g. 422 for a weak password).
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message,
            service="clerk",
            code="IDENTITY_PROVIDER_ERROR",
            status_code=status_code or 502,
        )
