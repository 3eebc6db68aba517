"""
Companies module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import (
    Company,
    CompanyDirectoryEntry,
    CompanySummary,
    CreateCompanyRequest,
    PublicCompany,
    UpdateCompanyRequest,
)


@runtime_checkable
class ICompanyService(Protocol):
    """
    Interface for company operations.

    Owner-scoped methods take the caller's Clerk id; the service resolves it
    to the local user and enforces ownership.
    """

    async def create_company(self, owner_clerk_id: str, request: CreateCompanyRequest) -> Company:
        """
        Create a company for the caller.

        Raises:
            UserNotFoundError: If the caller has no user record
            CompanyLimitReachedError: If the caller's tier quota is used up
        """
        ...

    async def get_company_by_id(self, company_id: str) -> Company:
        """Get a company by internal id. Raises CompanyNotFoundError."""
        ...

    async def get_owned_company(self, owner_clerk_id: str, company_id: str) -> Company:
        """Get a company the caller owns. Raises CompanyNotFoundError otherwise."""
        ...

    async def get_company_by_public_id(self, public_id: str) -> PublicCompany:
        """Get the portal projection by public id. Raises CompanyNotFoundError."""
        ...

    async def get_user_companies(self, owner_clerk_id: str) -> list[Company]:
        """List the caller's companies in creation order."""
        ...

    async def update_company(
        self,
        owner_clerk_id: str,
        company_id: str,
        request: UpdateCompanyRequest,
    ) -> Company:
        """Update a company the caller owns."""
        ...

    async def delete_company(self, owner_clerk_id: str, company_id: str) -> None:
        """Delete a company the caller owns, detaching it from their list."""
        ...

    async def list_public_companies(
        self,
        name: Optional[str] = None,
        limit: int = 50,
    ) -> list[CompanyDirectoryEntry]:
        """Public directory listing with an optional name filter."""
        ...

    async def get_public_company_summary(self, company_id: str) -> CompanySummary:
        """``{name, employees}`` by internal id. Raises CompanyNotFoundError."""
        ...
