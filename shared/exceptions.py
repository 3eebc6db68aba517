"""
Base exception classes for the Hubber backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to an HTTP status code, so domain code
only has to raise the right type.
"""

from typing import Optional, Any


class HubberError(Exception):
    """
    Base exception for all Hubber errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(HubberError):
    """Resource not found."""

    pass


class ValidationError(HubberError):
    """Input validation failed."""

    pass


class AuthenticationError(HubberError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(HubberError):
    """Authorization failed (insufficient permissions or quota)."""

    pass


class ExternalServiceError(HubberError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        status_code: int = 502,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.status_code = status_code
        self.details["service"] = service
