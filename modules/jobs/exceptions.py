"""
Jobs module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class JobNotFoundError(NotFoundError):
    """Raised when a job doesn't exist (or isn't in the given company)."""

    def __init__(self, job_id: str):
        super().__init__(
            "Job not found",
            code="JOB_NOT_FOUND",
            details={"job_id": job_id},
        )


class ClientNotInCompanyError(ValidationError):
    """Raised when a job names a client that isn't in the company's client list."""

    def __init__(self, client_id: str, company_id: str):
        super().__init__(
            "Client does not belong to this company",
            code="CLIENT_NOT_IN_COMPANY",
            details={"client_id": client_id, "company_id": company_id},
        )


class InvalidJobDatesError(ValidationError):
    """Raised when a job would end before it starts."""

    def __init__(self):
        super().__init__(
            "endDate cannot be before startDate",
            code="INVALID_JOB_DATES",
        )
