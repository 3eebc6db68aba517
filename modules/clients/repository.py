"""
Client repository for database access.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.models import NormalizedClientAddress
from shared.repository import BaseRepository, SQLSTATE_NOT_FOUND, is_uuid
from modules.companies.exceptions import CompanyNotFoundError

from .models import Client, ClientSummary
from .exceptions import ClientNotFoundError


class ClientRepository(BaseRepository[Client]):
    """
    Repository for client data access.

    Creation and deletion run through SQL functions that keep
    companies.clients in step with the clients table.
    """

    TABLE = "clients"

    def get_by_id(self, client_id: str) -> Optional[Client]:
        if not is_uuid(client_id):
            return None
        result = self._db.table(self.TABLE).select("*").eq("id", client_id).execute()
        if not result.data:
            return None
        return self._map_to_client(result.data[0])

    def list_by_company(self, company_id: str) -> list[Client]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("company_id", company_id)
            .order("created_at")
            .execute()
        )
        return [self._map_to_client(row) for row in result.data or []]

    def get_summaries(self, client_ids: list[str]) -> dict[str, ClientSummary]:
        """Fetch id/name/company for a set of clients, keyed by id."""
        ids = sorted({c for c in client_ids if is_uuid(c)})
        if not ids:
            return {}
        result = (
            self._db.table(self.TABLE)
            .select("id, first_name, last_name, company")
            .in_("id", ids)
            .execute()
        )
        return {
            str(row["id"]): ClientSummary(
                id=str(row["id"]),
                first_name=row["first_name"],
                last_name=row["last_name"],
                company=row.get("company"),
            )
            for row in result.data or []
        }

    def create_for_company(self, company_id: str, data: dict[str, Any]) -> Client:
        """
        Insert a client and append it to companies.clients atomically.

        Raises:
            CompanyNotFoundError: If the company row is gone
        """
        row = self._call(
            "create_client_for_company",
            {"p_company_id": company_id, "p_client": data},
            errors={SQLSTATE_NOT_FOUND: lambda: CompanyNotFoundError(company_id)},
        )
        return self._map_to_client(row)

    def update(self, client_id: str, data: dict[str, Any]) -> Optional[Client]:
        row = dict(data)
        row["updated_at"] = datetime.now(timezone.utc).isoformat()
        result = self._db.table(self.TABLE).update(row).eq("id", client_id).execute()
        if not result.data:
            return None
        return self._map_to_client(result.data[0])

    def delete_from_company(self, company_id: str, client_id: str) -> list[str]:
        """
        Delete a client and its jobs, removing both from the company lists.

        Returns:
            Ids of the jobs that were removed with the client.
        """
        result = self._call(
            "delete_client_from_company",
            {"p_company_id": company_id, "p_client_id": client_id},
            errors={SQLSTATE_NOT_FOUND: lambda: ClientNotFoundError(client_id)},
        )
        return [str(j) for j in (result or {}).get("deleted_jobs") or []]

    def _map_to_client(self, data: dict[str, Any]) -> Client:
        """Map database row to Client model."""
        return Client(
            id=str(data["id"]),
            company_id=str(data["company_id"]),
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data["email"],
            phone=data["phone"],
            company=data.get("company"),
            address=NormalizedClientAddress.from_row(data.get("address")),
            images=data.get("images") or [],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
