"""
Companies module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError, AuthorizationError


class CompanyNotFoundError(NotFoundError):
    """
    Raised when a company doesn't exist.

    Also raised when it exists but belongs to someone else, so callers
    can't probe for other tenants' ids.
    """

    def __init__(self, company_id: str):
        super().__init__(
            "Company not found",
            code="COMPANY_NOT_FOUND",
            details={"company_id": company_id},
        )


class CompanyLimitReachedError(AuthorizationError):
    """Raised when the owner already has as many companies as their tier allows."""

    def __init__(self, limit: int, tier: str):
        super().__init__(
            f"Company limit reached for the {tier} plan ({limit})",
            code="COMPANY_LIMIT_REACHED",
            details={"limit": limit, "tier": tier},
        )


class MissingCompanyIdError(ValidationError):
    """Raised when a company route is called without an id."""

    def __init__(self):
        super().__init__("Company ID is required", code="COMPANY_ID_REQUIRED")
