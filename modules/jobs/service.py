"""
Jobs service implementation.
"""

import logging
from typing import Optional

from shared.models import model_to_row
from shared.repository import canonical_id
from modules.companies.repository import CompanyRepository
from modules.companies.exceptions import CompanyNotFoundError
from modules.clients.repository import ClientRepository

from .interfaces import IJobService
from .models import CreateJobRequest, Job, PublicJob, UpdateJobData
from .repository import JobRepository
from .exceptions import JobNotFoundError, ClientNotInCompanyError, InvalidJobDatesError

logger = logging.getLogger(__name__)


class JobService(IJobService):
    """Job operations backed by Supabase."""

    def __init__(
        self,
        repository: JobRepository,
        companies: CompanyRepository,
        clients: ClientRepository,
    ):
        self._repo = repository
        self._companies = companies
        self._clients = clients

    async def create_job(self, request: CreateJobRequest) -> Job:
        company = self._companies.get_by_id(request.company_id)
        if company is None:
            raise CompanyNotFoundError(request.company_id)
        client_id = canonical_id(request.client_id)
        if client_id not in company.clients:
            raise ClientNotInCompanyError(request.client_id, request.company_id)

        row = model_to_row(request, ("location",))
        del row["company_id"], row["client_id"]

        job = self._repo.create_for_company(company.id, client_id, row)
        logger.info("Created job %s in company %s", job.id, company.id)
        return job

    async def get_jobs_by_company(self, company_id: str) -> list[PublicJob]:
        if not self._companies.exists(company_id):
            raise CompanyNotFoundError(company_id)

        jobs = self._repo.list_by_company(company_id)
        summaries = self._clients.get_summaries([job.client_id for job in jobs])
        return [
            PublicJob(**job.model_dump(), client=summaries.get(job.client_id))
            for job in jobs
        ]

    async def update_job(self, job_id: str, data: UpdateJobData) -> Job:
        job = self._repo.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)

        start = data.start_date or job.start_date
        end = data.end_date or job.end_date
        if end < start:
            raise InvalidJobDatesError()

        row = model_to_row(data, ("location",), partial=True)
        if not row:
            return job

        updated = self._repo.update(job.id, row)
        if updated is None:
            raise JobNotFoundError(job_id)
        logger.info("Updated job %s (%s)", job.id, ", ".join(sorted(row)))
        return updated

    async def delete_job(self, job_id: str, company_id: Optional[str] = None) -> None:
        job = self._repo.get_by_id(job_id)
        if job is None or (company_id and job.company_id != canonical_id(company_id)):
            raise JobNotFoundError(job_id)

        owner_company = self._repo.delete(job.id)
        logger.info("Deleted job %s from company %s", job.id, owner_company)
