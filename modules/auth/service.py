"""
Authentication service implementation.

Validates Clerk session tokens. Production deployments verify RS256
signatures against Clerk's JWKS endpoint; a shared HS256 secret is accepted
when no JWKS URL is configured (local development and tests).
"""

import logging
from datetime import datetime, timezone
from typing import Optional
import jwt
from jwt import PyJWKClient
from jwt.exceptions import PyJWKClientError

from shared.config import get_settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import ClerkSessionClaims
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """Clerk session token validation."""

    def __init__(self, jwks_client: Optional[PyJWKClient] = None):
        self._settings = get_settings()
        self._jwks_client = jwks_client
        if self._jwks_client is None and self._settings.clerk_jwks_url:
            self._jwks_client = PyJWKClient(self._settings.clerk_jwks_url)

    def _resolve_key(self, token: str) -> tuple[object, list[str]]:
        if self._jwks_client is not None:
            signing_key = self._jwks_client.get_signing_key_from_jwt(token)
            return signing_key.key, ["RS256"]
        if self._settings.clerk_jwt_secret:
            return self._settings.clerk_jwt_secret, ["HS256"]
        raise AuthNotConfiguredError()

    async def validate_token(self, token: str) -> AuthenticatedUser:
        if not token:
            raise MissingTokenError()

        try:
            key, algorithms = self._resolve_key(token)
            payload = jwt.decode(
                token,
                key,
                algorithms=algorithms,
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except (jwt.InvalidTokenError, PyJWKClientError) as e:
            raise InvalidTokenError(str(e))

        claims = ClerkSessionClaims(**payload)

        authorized_parties = self._settings.clerk_authorized_parties
        if authorized_parties and claims.azp not in authorized_parties:
            logger.warning("Rejected token for %s: azp %r not authorized", claims.sub, claims.azp)
            raise InvalidTokenError("Token was issued for an unauthorized party")

        return AuthenticatedUser(
            id=claims.sub,
            email=claims.email,
            session_id=claims.sid,
            last_sign_in=datetime.fromtimestamp(claims.iat, tz=timezone.utc),
        )


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
