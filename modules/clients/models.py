"""
Clients module data models.

Request bodies mirror what the dashboard already sends:
``{companyId, clientData}`` to create, ``{companyId, clientId, updatedData}``
to update and ``{companyId, clientId}`` to delete.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import EmailStr, Field, computed_field

from shared.models import CamelModel, ClientAddress, NormalizedClientAddress, PartialUpdate


class ClientData(CamelModel):
    """Fields of a new client."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    company: Optional[str] = Field(None, description="Client's own company name, if any")
    address: ClientAddress
    images: list[str] = Field(default_factory=list)


class UpdateClientData(PartialUpdate):
    """Partial client update; a supplied address must be complete."""

    non_nullable: ClassVar[tuple[str, ...]] = (
        "first_name", "last_name", "email", "phone", "address", "images",
    )

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = None
    address: Optional[ClientAddress] = None
    images: Optional[list[str]] = None


class CreateClientRequest(CamelModel):
    company_id: str = Field(..., min_length=1)
    client_data: ClientData


class UpdateClientRequest(CamelModel):
    company_id: str = Field(..., min_length=1)
    client_id: str = Field(..., min_length=1)
    updated_data: UpdateClientData = Field(default_factory=UpdateClientData)


class DeleteClientRequest(CamelModel):
    company_id: str = Field(..., min_length=1)
    client_id: str = Field(..., min_length=1)


class Client(CamelModel):
    """A stored client."""

    id: str
    company_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    company: Optional[str] = None
    address: NormalizedClientAddress
    images: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def client_type(self) -> str:
        """``company`` when the client names a company, else ``individual``."""
        return "company" if self.company else "individual"


class ClientSummary(CamelModel):
    """Client fields embedded in public job listings."""

    id: str
    first_name: str
    last_name: str
    company: Optional[str] = None


class ClientResponse(CamelModel):
    success: bool = True
    client: Client


class ClientListResponse(CamelModel):
    success: bool = True
    clients: list[Client]
