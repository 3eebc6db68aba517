"""
Clerk Backend API client.

Only the calls the backend needs: password changes on behalf of the
signed-in user.
"""

import logging
from typing import Optional

import httpx

from shared.config import get_settings

from .exceptions import IdentityProviderError

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_ERROR = "Failed to update password"


class ClerkClient:
    """Thin async wrapper over the Clerk Backend API."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: float = 10.0,
    ):
        settings = get_settings()
        self._secret_key = secret_key if secret_key is not None else settings.clerk_secret_key
        self._api_url = (api_url or settings.clerk_api_url).rstrip("/")
        self._timeout = timeout

    async def update_password(self, clerk_id: str, password: str) -> None:
        """
        Set a new password for a Clerk user.

        Raises:
            IdentityProviderError: With Clerk's message and status on rejection,
                502 when Clerk can't be reached, 503 when not configured.
        """
        if not self._secret_key:
            raise IdentityProviderError("Identity provider not configured", status_code=503)

        try:
            async with httpx.AsyncClient() as client:
                response = await client.patch(
                    f"{self._api_url}/users/{clerk_id}",
                    headers={
                        "Authorization": f"Bearer {self._secret_key}",
                        "Content-Type": "application/json",
                    },
                    json={"password": password},
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            logger.error("Clerk request failed for %s: %s", clerk_id, e)
            raise IdentityProviderError(f"Identity provider unreachable: {e}") from e

        if response.is_error:
            message = self._error_message(response)
            logger.warning(
                "Clerk rejected password update for %s (%s): %s",
                clerk_id,
                response.status_code,
                message,
            )
            raise IdentityProviderError(message, status_code=response.status_code)

        logger.info("Password updated for %s", clerk_id)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull ``errors[0].long_message`` out of a Clerk error body."""
        try:
            body = response.json()
        except ValueError:
            return DEFAULT_PASSWORD_ERROR
        errors = body.get("errors") if isinstance(body, dict) else None
        if not errors:
            return DEFAULT_PASSWORD_ERROR
        first = errors[0] or {}
        return first.get("long_message") or first.get("message") or DEFAULT_PASSWORD_ERROR
