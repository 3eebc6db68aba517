"""
Jobs module.

Projects a company runs for one of its own clients.
"""

from .interfaces import IJobService
from .models import (
    Job,
    JobStatus,
    PublicJob,
    CreateJobRequest,
    UpdateJobData,
)
from .repository import JobRepository
from .exceptions import (
    JobNotFoundError,
    ClientNotInCompanyError,
    InvalidJobDatesError,
)

__all__ = [
    "IJobService",
    "Job",
    "JobStatus",
    "PublicJob",
    "CreateJobRequest",
    "UpdateJobData",
    "JobRepository",
    "JobNotFoundError",
    "ClientNotInCompanyError",
    "InvalidJobDatesError",
]
