"""
Companies module.

Company records owned by users: creation under the tier quota, owner-only
edits and deletion, and the public portal projections.

Public API:
- ICompanyService: Interface for company operations
- Company and request/response models
- CompanyRepository: Data access for the companies table
- Company exceptions: CompanyNotFoundError, CompanyLimitReachedError, etc.
"""

from .interfaces import ICompanyService
from .models import (
    Company,
    CompanyStatus,
    CreateCompanyRequest,
    UpdateCompanyRequest,
    PublicCompany,
    CompanyDirectoryEntry,
    CompanySummary,
    DeleteCompanyResponse,
)
from .repository import CompanyRepository
from .exceptions import (
    CompanyNotFoundError,
    CompanyLimitReachedError,
    MissingCompanyIdError,
)

__all__ = [
    # Interface
    "ICompanyService",
    # Models
    "Company",
    "CompanyStatus",
    "CreateCompanyRequest",
    "UpdateCompanyRequest",
    "PublicCompany",
    "CompanyDirectoryEntry",
    "CompanySummary",
    "DeleteCompanyResponse",
    # Data access
    "CompanyRepository",
    # Exceptions
    "CompanyNotFoundError",
    "CompanyLimitReachedError",
    "MissingCompanyIdError",
]
