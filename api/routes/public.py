"""
Public portal endpoints.

No authentication: these back the shareable company portal pages.
The fixed paths are registered before /{public_id} so they aren't
swallowed by it.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_company_service, get_job_service
from modules.companies.interfaces import ICompanyService
from modules.companies.models import CompanyDirectoryEntry, CompanySummary, PublicCompany
from modules.companies.exceptions import MissingCompanyIdError
from modules.jobs.interfaces import IJobService
from modules.jobs.models import JobListResponse

router = APIRouter()


@router.get("/companies", response_model=list[CompanyDirectoryEntry])
async def list_companies(
    name: Optional[str] = Query(None, max_length=100, description="Case-insensitive name filter"),
    limit: int = Query(50, ge=1, le=100),
    service: ICompanyService = Depends(get_company_service),
) -> list[CompanyDirectoryEntry]:
    """
    Public company directory (portal search).
    """
    return await service.list_public_companies(name=name, limit=limit)


@router.get("/company", response_model=CompanySummary)
async def get_company_summary(
    company_id: Optional[str] = Query(None, alias="companyId"),
    service: ICompanyService = Depends(get_company_service),
) -> CompanySummary:
    """
    Company name and employee list by internal id.
    """
    if not company_id:
        raise MissingCompanyIdError()
    return await service.get_public_company_summary(company_id)


@router.get("/job", response_model=JobListResponse)
async def list_company_jobs(
    company_id: Optional[str] = Query(None, alias="companyId"),
    service: IJobService = Depends(get_job_service),
) -> JobListResponse:
    """
    A company's jobs, each with a summary of its client.
    """
    if not company_id:
        raise MissingCompanyIdError()
    jobs = await service.get_jobs_by_company(company_id)
    return JobListResponse(jobs=jobs)


@router.get("/{public_id}", response_model=PublicCompany)
async def get_public_company(
    public_id: str,
    service: ICompanyService = Depends(get_company_service),
) -> PublicCompany:
    """
    Portal lookup by the company's public id.
    """
    return await service.get_company_by_public_id(public_id)
