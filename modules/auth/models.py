"""
Authentication module data models.
"""

from typing import Optional
from pydantic import BaseModel, Field


class ClerkSessionClaims(BaseModel):
    """
    Decoded Clerk session token.

    Clerk issues short-lived RS256 tokens; ``email`` is only present when a
    custom session claim template adds it.
    """

    sub: str = Field(..., description="Clerk user ID")
    sid: Optional[str] = Field(None, description="Session ID")
    azp: Optional[str] = Field(None, description="Authorized party (origin)")
    iss: Optional[str] = Field(None, description="Issuer (Clerk frontend API)")
    email: Optional[str] = Field(None, description="Primary email, custom claim")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
