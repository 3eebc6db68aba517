"""
Clients module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Client, ClientData, UpdateClientData


@runtime_checkable
class IClientService(Protocol):
    """
    Interface for client operations.

    Every method first confirms the company exists (CompanyNotFoundError).
    """

    async def create_client(self, company_id: str, data: ClientData) -> Client:
        """Create a client and add it to the company's client list."""
        ...

    async def get_clients_by_company(self, company_id: str) -> list[Client]:
        """List a company's clients, oldest first."""
        ...

    async def update_client(
        self,
        company_id: str,
        client_id: str,
        data: UpdateClientData,
    ) -> Client:
        """
        Update a client of the company.

        Raises:
            ClientNotFoundError: If the client isn't one of the company's
        """
        ...

    async def delete_client(self, company_id: str, client_id: str) -> None:
        """Delete a client (and its jobs), detaching it from the company."""
        ...
