"""
Job repository for database access.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.models import NormalizedAddress
from shared.repository import (
    BaseRepository,
    SQLSTATE_CONFLICT,
    SQLSTATE_NOT_FOUND,
    is_uuid,
)
from modules.companies.exceptions import CompanyNotFoundError

from .models import Job, JobStatus
from .exceptions import JobNotFoundError, ClientNotInCompanyError


class JobRepository(BaseRepository[Job]):
    """Repository for job data access."""

    TABLE = "jobs"

    def get_by_id(self, job_id: str) -> Optional[Job]:
        if not is_uuid(job_id):
            return None
        result = self._db.table(self.TABLE).select("*").eq("id", job_id).execute()
        if not result.data:
            return None
        return self._map_to_job(result.data[0])

    def list_by_company(self, company_id: str) -> list[Job]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("company_id", company_id)
            .order("start_date")
            .execute()
        )
        return [self._map_to_job(row) for row in result.data or []]

    def create_for_company(self, company_id: str, client_id: str, data: dict[str, Any]) -> Job:
        """
        Insert a job and append it to companies.jobs atomically.

        The SQL function re-checks client membership under a lock on the
        company row.
        """
        row = self._call(
            "create_job_for_company",
            {"p_company_id": company_id, "p_client_id": client_id, "p_job": data},
            errors={
                SQLSTATE_NOT_FOUND: lambda: CompanyNotFoundError(company_id),
                SQLSTATE_CONFLICT: lambda: ClientNotInCompanyError(client_id, company_id),
            },
        )
        return self._map_to_job(row)

    def update(self, job_id: str, data: dict[str, Any]) -> Optional[Job]:
        row = dict(data)
        row["updated_at"] = datetime.now(timezone.utc).isoformat()
        result = self._db.table(self.TABLE).update(row).eq("id", job_id).execute()
        if not result.data:
            return None
        return self._map_to_job(result.data[0])

    def delete(self, job_id: str) -> str:
        """
        Delete a job and remove it from its company's list.

        Returns:
            The id of the company the job belonged to.
        """
        result = self._call(
            "delete_job",
            {"p_job_id": job_id},
            errors={SQLSTATE_NOT_FOUND: lambda: JobNotFoundError(job_id)},
        )
        return str(result["company_id"])

    def _map_to_job(self, data: dict[str, Any]) -> Job:
        """Map database row to Job model."""
        return Job(
            id=str(data["id"]),
            company_id=str(data["company_id"]),
            client_id=str(data["client_id"]),
            title=data["title"],
            description=data.get("description"),
            location=NormalizedAddress.from_row(data.get("location")),
            start_date=data["start_date"],
            end_date=data["end_date"],
            status=JobStatus(data.get("status") or "active"),
            assigned_employees=[str(e) for e in data.get("assigned_employees") or []],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
