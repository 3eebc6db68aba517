"""
Clients service implementation.
"""

import logging

from shared.models import model_to_row
from shared.repository import canonical_id
from modules.companies.repository import CompanyRepository
from modules.companies.exceptions import CompanyNotFoundError

from .interfaces import IClientService
from .models import Client, ClientData, UpdateClientData
from .repository import ClientRepository
from .exceptions import ClientNotFoundError

logger = logging.getLogger(__name__)


class ClientService(IClientService):
    """Client operations backed by Supabase."""

    def __init__(self, repository: ClientRepository, companies: CompanyRepository):
        self._repo = repository
        self._companies = companies

    async def create_client(self, company_id: str, data: ClientData) -> Client:
        self._require_company(company_id)
        client = self._repo.create_for_company(company_id, model_to_row(data, ("address",)))
        logger.info("Created client %s in company %s", client.id, company_id)
        return client

    async def get_clients_by_company(self, company_id: str) -> list[Client]:
        self._require_company(company_id)
        return self._repo.list_by_company(company_id)

    async def update_client(
        self,
        company_id: str,
        client_id: str,
        data: UpdateClientData,
    ) -> Client:
        client = self._get_company_client(company_id, client_id)

        row = model_to_row(data, ("address",), partial=True)
        if not row:
            return client

        updated = self._repo.update(client.id, row)
        if updated is None:
            raise ClientNotFoundError(client_id)
        logger.info("Updated client %s (%s)", client.id, ", ".join(sorted(row)))
        return updated

    async def delete_client(self, company_id: str, client_id: str) -> None:
        client = self._get_company_client(company_id, client_id)
        removed_jobs = self._repo.delete_from_company(company_id, client.id)
        logger.info(
            "Deleted client %s from company %s (%d jobs removed)",
            client.id,
            company_id,
            len(removed_jobs),
        )

    def _require_company(self, company_id: str) -> None:
        if not self._companies.exists(company_id):
            raise CompanyNotFoundError(company_id)

    def _get_company_client(self, company_id: str, client_id: str) -> Client:
        self._require_company(company_id)
        client = self._repo.get_by_id(client_id)
        if client is None or client.company_id != canonical_id(company_id):
            raise ClientNotFoundError(client_id)
        return client
