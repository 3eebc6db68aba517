"""
Client API endpoints, mounted at /api/client.

Scoped by companyId in the query (GET) or body (POST/PATCH/DELETE).
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_client_service
from shared.models import MessageResponse
from modules.companies.exceptions import MissingCompanyIdError

from .interfaces import IClientService
from .models import (
    ClientResponse,
    ClientListResponse,
    CreateClientRequest,
    UpdateClientRequest,
    DeleteClientRequest,
)

router = APIRouter()


@router.get("", response_model=ClientListResponse)
async def list_clients(
    company_id: Optional[str] = Query(None, alias="companyId"),
    service: IClientService = Depends(get_client_service),
) -> ClientListResponse:
    if not company_id:
        raise MissingCompanyIdError()
    clients = await service.get_clients_by_company(company_id)
    return ClientListResponse(clients=clients)


@router.post("", response_model=ClientResponse)
async def create_client(
    request: CreateClientRequest,
    service: IClientService = Depends(get_client_service),
) -> ClientResponse:
    client = await service.create_client(request.company_id, request.client_data)
    return ClientResponse(client=client)


@router.patch("", response_model=ClientResponse)
async def update_client(
    request: UpdateClientRequest,
    service: IClientService = Depends(get_client_service),
) -> ClientResponse:
    client = await service.update_client(
        request.company_id,
        request.client_id,
        request.updated_data,
    )
    return ClientResponse(client=client)


@router.delete("", response_model=MessageResponse)
async def delete_client(
    request: DeleteClientRequest,
    service: IClientService = Depends(get_client_service),
) -> MessageResponse:
    await service.delete_client(request.company_id, request.client_id)
    return MessageResponse(message="Client deleted successfully")
