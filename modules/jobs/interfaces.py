"""
Jobs module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import CreateJobRequest, Job, PublicJob, UpdateJobData


@runtime_checkable
class IJobService(Protocol):
    """Interface for job operations."""

    async def create_job(self, request: CreateJobRequest) -> Job:
        """
        Create a job for one of the company's clients.

        Raises:
            CompanyNotFoundError: If the company doesn't exist
            ClientNotInCompanyError: If the client isn't in the company's list
        """
        ...

    async def get_jobs_by_company(self, company_id: str) -> list[PublicJob]:
        """List a company's jobs with client summaries."""
        ...

    async def update_job(self, job_id: str, data: UpdateJobData) -> Job:
        """Update a job. Raises JobNotFoundError, InvalidJobDatesError."""
        ...

    async def delete_job(self, job_id: str, company_id: Optional[str] = None) -> None:
        """
        Delete a job and detach it from its company.

        The owning company is read from the job itself; ``company_id`` is
        only used as a guard.
        """
        ...
