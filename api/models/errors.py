"""
Error response models.

Every failure leaves the API in the same envelope.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    error: str
    code: str
    details: Optional[Any] = None
