"""
Job API endpoints, mounted at /api/jobs.

The public listing lives under /api/public/job (api/routes/public.py).
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_job_service
from shared.models import MessageResponse

from .interfaces import IJobService
from .models import (
    CreateJobRequest,
    DeleteJobRequest,
    JobResponse,
    UpdateJobRequest,
)

router = APIRouter()


@router.post("", response_model=JobResponse)
async def create_job(
    request: CreateJobRequest,
    service: IJobService = Depends(get_job_service),
) -> JobResponse:
    """
    Create a job for a client of the company.
    """
    job = await service.create_job(request)
    return JobResponse(job=job)


@router.patch("", response_model=JobResponse)
async def update_job(
    request: UpdateJobRequest,
    service: IJobService = Depends(get_job_service),
) -> JobResponse:
    job = await service.update_job(request.job_id, request.updated_data)
    return JobResponse(job=job)


@router.delete("", response_model=MessageResponse)
async def delete_job(
    request: DeleteJobRequest,
    service: IJobService = Depends(get_job_service),
) -> MessageResponse:
    await service.delete_job(request.job_id, request.company_id)
    return MessageResponse(message="Job deleted successfully")
