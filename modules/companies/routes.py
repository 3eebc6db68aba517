"""
Company API endpoints.

Two routers: ``router`` for the owner's collection under /api/companies and
``company_router`` for single-company operations under /api/company.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_company_service
from shared.models import AuthenticatedUser

from .interfaces import ICompanyService
from .models import (
    Company,
    CreateCompanyRequest,
    UpdateCompanyRequest,
    DeleteCompanyResponse,
)
from .exceptions import MissingCompanyIdError

router = APIRouter()
company_router = APIRouter()


@router.get("", response_model=list[Company])
async def list_companies(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICompanyService = Depends(get_company_service),
) -> list[Company]:
    """
    List the caller's companies, oldest first.
    """
    return await service.get_user_companies(user.id)


@router.post("", response_model=Company, status_code=201)
async def create_company(
    request: CreateCompanyRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICompanyService = Depends(get_company_service),
) -> Company:
    """
    Create a company.

    Fails with 403 when the caller's subscription tier doesn't allow
    another company.
    """
    return await service.create_company(user.id, request)


@router.get("/{company_id}", response_model=Company)
async def get_company(
    company_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICompanyService = Depends(get_company_service),
) -> Company:
    return await service.get_owned_company(user.id, company_id)


@company_router.get("/{company_id}", response_model=Company)
async def fetch_company(
    company_id: str,
    service: ICompanyService = Depends(get_company_service),
) -> Company:
    """
    Fetch a company by internal id (used by the company dashboard pages).
    """
    return await service.get_company_by_id(company_id)


@company_router.put("/{company_id}", response_model=Company)
async def update_company(
    company_id: str,
    request: UpdateCompanyRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICompanyService = Depends(get_company_service),
) -> Company:
    """
    Update a company the caller owns. Unknown or foreign ids give 404.
    """
    return await service.update_company(user.id, company_id, request)


@company_router.delete("/{company_id}", response_model=DeleteCompanyResponse)
async def delete_company(
    company_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICompanyService = Depends(get_company_service),
) -> DeleteCompanyResponse:
    await service.delete_company(user.id, company_id)
    return DeleteCompanyResponse(company_id=company_id)


@company_router.put("", include_in_schema=False)
@company_router.delete("", include_in_schema=False)
async def company_id_required(
    user: AuthenticatedUser = Depends(get_current_user),
) -> None:
    raise MissingCompanyIdError()
