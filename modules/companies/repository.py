"""
Company repository for database access.

Plain reads and updates go through the companies table; creation and
deletion go through SQL functions so the owner's company list changes in
the same transaction.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.models import NormalizedAddress
from shared.repository import (
    BaseRepository,
    SQLSTATE_NOT_FOUND,
    SQLSTATE_QUOTA,
    is_uuid,
)
from modules.users.exceptions import UserNotFoundError

from .models import (
    Company,
    CompanyDirectoryEntry,
    CompanyStatus,
    SocialMedia,
    Testimonial,
)
from .exceptions import CompanyNotFoundError, CompanyLimitReachedError

DIRECTORY_COLUMNS = (
    "id, public_id, name, phone, email, business_type, address, "
    "total_revenue, status, created_at, updated_at"
)


class CompanyRepository(BaseRepository[Company]):
    """
    Repository for company data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    TABLE = "companies"

    def get_by_id(self, company_id: str) -> Optional[Company]:
        if not is_uuid(company_id):
            return None
        result = self._db.table(self.TABLE).select("*").eq("id", company_id).execute()
        if not result.data:
            return None
        return self._map_to_company(result.data[0])

    def get_by_public_id(self, public_id: str) -> Optional[Company]:
        if not is_uuid(public_id):
            return None
        result = self._db.table(self.TABLE).select("*").eq("public_id", public_id).execute()
        if not result.data:
            return None
        return self._map_to_company(result.data[0])

    def get_many(self, company_ids: list[str]) -> list[Company]:
        """
        Fetch companies by id, preserving the order of ``company_ids``.

        Ids that no longer resolve are skipped.
        """
        ids = [c for c in company_ids if is_uuid(c)]
        if not ids:
            return []
        result = self._db.table(self.TABLE).select("*").in_("id", ids).execute()
        by_id = {str(row["id"]): row for row in result.data or []}
        return [self._map_to_company(by_id[c]) for c in ids if c in by_id]

    def exists(self, company_id: str) -> bool:
        if not is_uuid(company_id):
            return False
        result = self._db.table(self.TABLE).select("id").eq("id", company_id).execute()
        return bool(result.data)

    def list_directory(self, name: Optional[str] = None, limit: int = 50) -> list[CompanyDirectoryEntry]:
        """
        List companies for the public directory, ordered by name.

        Args:
            name: Optional case-insensitive substring filter on the name.
            limit: Maximum number of rows.
        """
        query = self._db.table(self.TABLE).select(DIRECTORY_COLUMNS)
        if name:
            query = query.ilike("name", f"%{name}%")
        result = query.order("name").limit(limit).execute()
        return [self._map_to_directory_entry(row) for row in result.data or []]

    def create_for_owner(
        self,
        owner_id: str,
        data: dict[str, Any],
        max_companies: int,
        tier: str = "free",
    ) -> Company:
        """
        Insert a company and append it to the owner's list atomically.

        The SQL function locks the owner row and re-checks the quota, so two
        concurrent creations can't both slip under the limit.

        Raises:
            UserNotFoundError: If the owner row is gone
            CompanyLimitReachedError: If the quota is already used up
        """
        row = self._call(
            "create_company_for_owner",
            {"p_owner_id": owner_id, "p_company": data, "p_max_companies": max_companies},
            errors={
                SQLSTATE_NOT_FOUND: lambda: UserNotFoundError(owner_id),
                SQLSTATE_QUOTA: lambda: CompanyLimitReachedError(max_companies, tier),
            },
        )
        return self._map_to_company(row)

    def update(self, company_id: str, data: dict[str, Any]) -> Optional[Company]:
        row = dict(data)
        row["updated_at"] = datetime.now(timezone.utc).isoformat()
        result = self._db.table(self.TABLE).update(row).eq("id", company_id).execute()
        if not result.data:
            return None
        return self._map_to_company(result.data[0])

    def delete_for_owner(self, company_id: str) -> str:
        """
        Delete a company and remove it from its owner's list atomically.

        Returns:
            The owner's internal user id.
        """
        result = self._call(
            "delete_company_for_owner",
            {"p_company_id": company_id},
            errors={SQLSTATE_NOT_FOUND: lambda: CompanyNotFoundError(company_id)},
        )
        return str(result["owner_id"])

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_company(self, data: dict[str, Any]) -> Company:
        """Map database row to Company model."""
        social_media = data.get("social_media")
        return Company(
            id=str(data["id"]),
            public_id=str(data["public_id"]),
            owner_id=str(data["owner_id"]),
            name=data["name"],
            logo=data.get("logo"),
            description=data.get("description"),
            address=NormalizedAddress.from_row(data.get("address")),
            phone=data.get("phone") or "",
            email=data.get("email") or "",
            website=data.get("website"),
            business_type=data.get("business_type") or "N/A",
            founded_year=data.get("founded_year"),
            social_media=SocialMedia.model_validate(social_media) if social_media else None,
            services=data.get("services") or [],
            images=data.get("images") or [],
            testimonials=[Testimonial.model_validate(t) for t in data.get("testimonials") or []],
            employees=[str(e) for e in data.get("employees") or []],
            clients=[str(c) for c in data.get("clients") or []],
            jobs=[str(j) for j in data.get("jobs") or []],
            total_revenue=float(data.get("total_revenue") or 0),
            status=CompanyStatus(data.get("status") or "active"),
            company_url=data.get("company_url"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def _map_to_directory_entry(self, data: dict[str, Any]) -> CompanyDirectoryEntry:
        return CompanyDirectoryEntry(
            id=str(data["id"]),
            public_id=str(data["public_id"]),
            name=data["name"],
            phone=data.get("phone") or "",
            email=data.get("email") or "",
            business_type=data.get("business_type") or "N/A",
            address=NormalizedAddress.from_row(data.get("address")),
            total_revenue=float(data.get("total_revenue") or 0),
            status=CompanyStatus(data.get("status") or "active"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
