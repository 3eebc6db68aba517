"""
Companies service implementation.

The tier quota is checked here against a freshly loaded owner record and
again inside the create_company_for_owner SQL function under a row lock.
"""

import logging
from typing import Optional
from uuid import uuid4

from shared.config import Settings, get_settings
from shared.models import model_to_row
from modules.billing.models import company_limit_for
from modules.users.repository import UserRepository
from modules.users.exceptions import UserNotFoundError
from modules.users.models import User

from .interfaces import ICompanyService
from .models import (
    Company,
    CompanyDirectoryEntry,
    CompanySummary,
    CreateCompanyRequest,
    PublicCompany,
    UpdateCompanyRequest,
)
from .repository import CompanyRepository
from .exceptions import CompanyNotFoundError, CompanyLimitReachedError

logger = logging.getLogger(__name__)

# Stored as jsonb with camelCase keys
_JSON_FIELDS = ("address", "social_media", "testimonials")


class CompanyService(ICompanyService):
    """Company operations backed by Supabase."""

    def __init__(
        self,
        repository: CompanyRepository,
        users: UserRepository,
        settings: Optional[Settings] = None,
    ):
        self._repo = repository
        self._users = users
        self._settings = settings or get_settings()

    def portal_url(self, company_id: str) -> str:
        return f"{self._settings.public_url.rstrip('/')}/company/portal/{company_id}"

    async def create_company(self, owner_clerk_id: str, request: CreateCompanyRequest) -> Company:
        owner = self._get_owner(owner_clerk_id)

        limit = company_limit_for(owner.subscription_tier)
        if len(owner.companies) >= limit:
            logger.warning("User %s hit company limit %d", owner.id, limit)
            raise CompanyLimitReachedError(limit, owner.subscription_tier.value)

        company_id = str(uuid4())
        row = model_to_row(request, _JSON_FIELDS)
        row.update({
            "id": company_id,
            "public_id": str(uuid4()),
            "company_url": self.portal_url(company_id),
        })

        company = self._repo.create_for_owner(
            owner.id,
            row,
            max_companies=limit,
            tier=owner.subscription_tier.value,
        )
        logger.info("Created company %s for user %s", company.id, owner.id)
        return company

    async def get_company_by_id(self, company_id: str) -> Company:
        company = self._repo.get_by_id(company_id)
        if company is None:
            raise CompanyNotFoundError(company_id)
        return self._with_portal_url(company)

    async def get_owned_company(self, owner_clerk_id: str, company_id: str) -> Company:
        owner = self._get_owner(owner_clerk_id)
        company = self._repo.get_by_id(company_id)
        if company is None or company.owner_id != owner.id:
            raise CompanyNotFoundError(company_id)
        return self._with_portal_url(company)

    async def get_company_by_public_id(self, public_id: str) -> PublicCompany:
        company = self._repo.get_by_public_id(public_id)
        if company is None:
            raise CompanyNotFoundError(public_id)
        return PublicCompany.model_validate(company.model_dump())

    async def get_user_companies(self, owner_clerk_id: str) -> list[Company]:
        owner = self._get_owner(owner_clerk_id)
        companies = self._repo.get_many(owner.companies)
        return [self._with_portal_url(c) for c in companies]

    async def update_company(
        self,
        owner_clerk_id: str,
        company_id: str,
        request: UpdateCompanyRequest,
    ) -> Company:
        company = await self.get_owned_company(owner_clerk_id, company_id)

        row = model_to_row(request, _JSON_FIELDS, partial=True)
        if not row:
            return company

        updated = self._repo.update(company.id, row)
        if updated is None:
            raise CompanyNotFoundError(company_id)
        logger.info("Updated company %s (%s)", company.id, ", ".join(sorted(row)))
        return self._with_portal_url(updated)

    async def delete_company(self, owner_clerk_id: str, company_id: str) -> None:
        company = await self.get_owned_company(owner_clerk_id, company_id)
        self._repo.delete_for_owner(company.id)
        logger.info("Deleted company %s", company.id)

    async def list_public_companies(
        self,
        name: Optional[str] = None,
        limit: int = 50,
    ) -> list[CompanyDirectoryEntry]:
        return self._repo.list_directory(name=name, limit=limit)

    async def get_public_company_summary(self, company_id: str) -> CompanySummary:
        company = await self.get_company_by_id(company_id)
        return CompanySummary(name=company.name, employees=company.employees)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_owner(self, owner_clerk_id: str) -> User:
        owner = self._users.get_by_clerk_id(owner_clerk_id)
        if owner is None:
            raise UserNotFoundError(owner_clerk_id)
        return owner

    def _with_portal_url(self, company: Company) -> Company:
        """Back-fill companyUrl on rows created before it was stored."""
        if company.company_url:
            return company
        return company.model_copy(update={"company_url": self.portal_url(company.id)})
