"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of SQL-function errors into
domain exceptions.
"""

from typing import Any, Callable, TypeVar, Generic, Optional
from uuid import UUID
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import HubberError


T = TypeVar("T")

# SQLSTATEs raised by the linkage functions in migrations/
SQLSTATE_NOT_FOUND = "HB404"
SQLSTATE_CONFLICT = "HB409"
SQLSTATE_QUOTA = "HB403"


def is_uuid(value: Any) -> bool:
    """True if value parses as a UUID (all primary keys are UUIDs)."""
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


def canonical_id(value: str) -> str:
    """Lower-case hyphenated form of a UUID string; other values pass through."""
    try:
        return str(UUID(str(value)))
    except ValueError:
        return value


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - RPC invocation with SQLSTATE-to-exception translation
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ClientRepository(BaseRepository[Client]):
            def get_by_id(self, client_id: str) -> Optional[Client]:
                result = self._db.table("clients").select("*").eq("id", client_id).execute()
                if not result.data:
                    return None
                return self._map_to_client(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _call(
        self,
        function: str,
        params: dict[str, Any],
        errors: Optional[dict[str, Callable[[], HubberError]]] = None,
    ) -> Any:
        """
        Invoke a Postgres function and return its JSON result.

        Args:
            function: Name of the SQL function.
            params: Named arguments for the function.
            errors: Map of SQLSTATE to a factory for the exception to raise.

        Returns:
            The decoded ``data`` of the RPC response (single object if the
            function returns one row).
        """
        try:
            result = self._db.rpc(function, params).execute()
        except APIError as e:
            factory = (errors or {}).get(e.code or "")
            if factory is not None:
                raise factory() from e
            raise

        data = result.data
        if isinstance(data, list):
            return data[0] if data else None
        return data
