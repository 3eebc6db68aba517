"""
Jobs module data models.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, Optional
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from shared.models import Address, CamelModel, NormalizedAddress, PartialUpdate
from modules.clients.models import ClientSummary


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Dates without an offset are taken as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class JobStatus(str, Enum):
    """Job status values."""

    ACTIVE = "active"
    FINISHED = "finished"
    ON_HOLD = "on-hold"
    CANCELLED = "cancelled"


class CreateJobRequest(CamelModel):
    """Request to create a job. ``location`` must be a complete address."""

    company_id: str = Field(..., min_length=1)
    client_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    location: Address
    start_date: datetime
    end_date: datetime
    status: JobStatus = JobStatus.ACTIVE
    assigned_employees: list[UUID] = Field(default_factory=list)

    normalize_dates = field_validator("start_date", "end_date")(_as_utc)

    @model_validator(mode="after")
    def end_not_before_start(self) -> "CreateJobRequest":
        if self.end_date < self.start_date:
            raise ValueError("endDate cannot be before startDate")
        return self


class UpdateJobData(PartialUpdate):
    """Partial job update; a supplied location is validated as a full address."""

    non_nullable: ClassVar[tuple[str, ...]] = (
        "title", "location", "start_date", "end_date", "status", "assigned_employees",
    )

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    location: Optional[Address] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[JobStatus] = None
    assigned_employees: Optional[list[UUID]] = None

    normalize_dates = field_validator("start_date", "end_date")(_as_utc)


class UpdateJobRequest(CamelModel):
    job_id: str = Field(..., min_length=1)
    updated_data: UpdateJobData = Field(default_factory=UpdateJobData)


class DeleteJobRequest(CamelModel):
    job_id: str = Field(..., min_length=1)
    company_id: Optional[str] = Field(None, description="When given, must match the job's company")


class Job(CamelModel):
    """A stored job."""

    id: str
    company_id: str
    client_id: str
    title: str
    description: Optional[str] = None
    location: NormalizedAddress
    start_date: datetime
    end_date: datetime
    status: JobStatus
    assigned_employees: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    normalize_dates = field_validator("start_date", "end_date")(_as_utc)


class PublicJob(Job):
    """Job as listed on the public portal, with its client's summary."""

    client: Optional[ClientSummary] = None


class JobResponse(CamelModel):
    success: bool = True
    job: Job


class JobListResponse(CamelModel):
    success: bool = True
    jobs: list[PublicJob]
