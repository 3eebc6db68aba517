"""
Clients module exceptions.
"""

from shared.exceptions import NotFoundError


class ClientNotFoundError(NotFoundError):
    """Raised when a client doesn't exist or belongs to another company."""

    def __init__(self, client_id: str):
        super().__init__(
            "Client not found",
            code="CLIENT_NOT_FOUND",
            details={"client_id": client_id},
        )
