"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.billing.interfaces import IBillingService
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from modules.companies.interfaces import ICompanyService
    from modules.companies.repository import CompanyRepository
    from modules.clients.interfaces import IClientService
    from modules.clients.repository import ClientRepository
    from modules.jobs.interfaces import IJobService
    from modules.jobs.repository import JobRepository


class ServiceContainer:
    """
    Container for all service instances.

    Repositories and services are created lazily on first access and cached
    for the lifetime of the container. Use reset() to clear them in tests.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._billing_service: "IBillingService | None" = None
        self._user_service: "IUserService | None" = None
        self._company_service: "ICompanyService | None" = None
        self._client_service: "IClientService | None" = None
        self._job_service: "IJobService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._company_repository: "CompanyRepository | None" = None
        self._client_repository: "ClientRepository | None" = None
        self._job_repository: "JobRepository | None" = None

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def company_repository(self) -> "CompanyRepository":
        if self._company_repository is None:
            from modules.companies.repository import CompanyRepository
            from shared.database import get_supabase_client
            self._company_repository = CompanyRepository(get_supabase_client())
        return self._company_repository

    @property
    def client_repository(self) -> "ClientRepository":
        if self._client_repository is None:
            from modules.clients.repository import ClientRepository
            from shared.database import get_supabase_client
            self._client_repository = ClientRepository(get_supabase_client())
        return self._client_repository

    @property
    def job_repository(self) -> "JobRepository":
        if self._job_repository is None:
            from modules.jobs.repository import JobRepository
            from shared.database import get_supabase_client
            self._job_repository = JobRepository(get_supabase_client())
        return self._job_repository

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import get_auth_service
            self._auth_service = get_auth_service()
        return self._auth_service

    @property
    def billing(self) -> "IBillingService":
        """Get the billing service instance."""
        if self._billing_service is None:
            from modules.billing.service import BillingService
            self._billing_service = BillingService(users=self.user_repository)
        return self._billing_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            from modules.users.identity import ClerkClient
            self._user_service = UserService(
                repository=self.user_repository,
                identity=ClerkClient(),
            )
        return self._user_service

    @property
    def companies(self) -> "ICompanyService":
        """Get the company service instance."""
        if self._company_service is None:
            from modules.companies.service import CompanyService
            self._company_service = CompanyService(
                repository=self.company_repository,
                users=self.user_repository,
            )
        return self._company_service

    @property
    def clients(self) -> "IClientService":
        """Get the client service instance."""
        if self._client_service is None:
            from modules.clients.service import ClientService
            self._client_service = ClientService(
                repository=self.client_repository,
                companies=self.company_repository,
            )
        return self._client_service

    @property
    def jobs(self) -> "IJobService":
        """Get the job service instance."""
        if self._job_service is None:
            from modules.jobs.service import JobService
            self._job_service = JobService(
                repository=self.job_repository,
                companies=self.company_repository,
                clients=self.client_repository,
            )
        return self._job_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_billing_service() -> "IBillingService":
    """FastAPI dependency for billing service."""
    return get_container().billing


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_company_service() -> "ICompanyService":
    """FastAPI dependency for company service."""
    return get_container().companies


def get_client_service() -> "IClientService":
    """FastAPI dependency for client service."""
    return get_container().clients


def get_job_service() -> "IJobService":
    """FastAPI dependency for job service."""
    return get_container().jobs
