"""
Companies module data models.

Create and update requests share the same field definitions; the update
model only makes them optional. A supplied address is always validated as
a complete Address.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional
from uuid import uuid4

from pydantic import EmailStr, Field

from shared.models import Address, CamelModel, NormalizedAddress, PartialUpdate


class CompanyStatus(str, Enum):
    """Company lifecycle status."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class SocialMedia(CamelModel):
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class Testimonial(CamelModel):
    """A customer quote shown on the public portal."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: Optional[str] = None
    company: Optional[str] = None
    comment: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    image_url: Optional[str] = None


class CreateCompanyRequest(CamelModel):
    """Request to create a company."""

    name: str = Field(..., min_length=1, max_length=200)
    phone: str = Field(..., min_length=1)
    email: EmailStr
    business_type: str = Field(..., min_length=1, description="Industry tag, e.g. construction")
    address: Address
    logo: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    founded_year: Optional[int] = Field(None, ge=1000, le=9999)
    social_media: Optional[SocialMedia] = None
    services: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    testimonials: list[Testimonial] = Field(default_factory=list)
    total_revenue: float = Field(0, ge=0)
    status: CompanyStatus = CompanyStatus.ACTIVE


class UpdateCompanyRequest(PartialUpdate):
    """
    Partial company update.

    Owner, public id, portal URL and the employee/client/job lists are not
    part of this model and can't be changed through it.
    """

    non_nullable: ClassVar[tuple[str, ...]] = (
        "name", "phone", "email", "business_type", "address",
        "services", "images", "testimonials", "total_revenue", "status",
    )

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    phone: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    business_type: Optional[str] = Field(None, min_length=1)
    address: Optional[Address] = None
    logo: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    founded_year: Optional[int] = Field(None, ge=1000, le=9999)
    social_media: Optional[SocialMedia] = None
    services: Optional[list[str]] = None
    images: Optional[list[str]] = None
    testimonials: Optional[list[Testimonial]] = None
    total_revenue: Optional[float] = Field(None, ge=0)
    status: Optional[CompanyStatus] = None


class Company(CamelModel):
    """A company as returned to its owner."""

    id: str
    public_id: str
    owner_id: str
    name: str
    logo: Optional[str] = None
    description: Optional[str] = None
    address: NormalizedAddress
    phone: str
    email: str
    website: Optional[str] = None
    business_type: str
    founded_year: Optional[int] = None
    social_media: Optional[SocialMedia] = None
    services: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    testimonials: list[Testimonial] = Field(default_factory=list)
    employees: list[str] = Field(default_factory=list)
    clients: list[str] = Field(default_factory=list)
    jobs: list[str] = Field(default_factory=list)
    total_revenue: float = 0
    status: CompanyStatus = CompanyStatus.ACTIVE
    company_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PublicCompany(CamelModel):
    """Portal projection: what anyone with the public id may see."""

    public_id: str
    name: str
    logo: Optional[str] = None
    description: Optional[str] = None
    business_type: str
    founded_year: Optional[int] = None
    address: NormalizedAddress
    phone: str = ""
    email: str = ""
    website: Optional[str] = None
    social_media: Optional[SocialMedia] = None
    services: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    testimonials: list[Testimonial] = Field(default_factory=list)


class CompanyDirectoryEntry(CamelModel):
    """One row of the public company directory."""

    id: str
    public_id: str
    name: str
    phone: str
    email: str
    business_type: str
    address: NormalizedAddress
    total_revenue: float = 0
    status: CompanyStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CompanySummary(CamelModel):
    """Minimal unauthenticated view by internal id."""

    name: str
    employees: list[str] = Field(default_factory=list)


class DeleteCompanyResponse(CamelModel):
    success: bool = True
    message: str = "Company successfully deleted"
    company_id: str
