"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Any, ClassVar, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for everything that crosses the HTTP boundary.

    Fields are snake_case in Python and camelCase on the wire. Both spellings
    are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class PartialUpdate(CamelModel):
    """
    Base for PATCH-style request bodies.

    Every field is optional, but the columns named in ``non_nullable`` may
    only be omitted, not sent as null.
    """

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    Populated from the verified Clerk session token and made available to
    route handlers via dependency injection. ``id`` is the Clerk user id
    (the token's ``sub`` claim), not the internal users.id.
    """

    id: str = Field(..., description="Clerk user ID")
    email: Optional[str] = Field(None, description="Primary email, when the token carries it")
    session_id: Optional[str] = Field(None, description="Clerk session ID")
    last_sign_in: Optional[datetime] = Field(None, description="Token issue time")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class Address(CamelModel):
    """Full postal address. All five fields are required together."""

    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state_or_province: str = Field(..., min_length=1)
    postal_code_or_zip: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)


class ClientAddress(CamelModel):
    """Address subset stored on clients."""

    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    postal_code_or_zip: str = Field(..., min_length=1)


class NormalizedAddress(CamelModel):
    """
    Address as returned to callers.

    Legacy rows may be missing sub-fields; every field is coerced to a
    string so the response never carries nulls.
    """

    street: str = ""
    city: str = ""
    state_or_province: str = ""
    postal_code_or_zip: str = ""
    country: str = ""

    @classmethod
    def from_row(cls, data: Optional[dict]) -> "NormalizedAddress":
        data = data or {}
        return cls(
            street=data.get("street") or "",
            city=data.get("city") or "",
            state_or_province=data.get("stateOrProvince") or "",
            postal_code_or_zip=data.get("postalCodeOrZip") or "",
            country=data.get("country") or "",
        )


class NormalizedClientAddress(CamelModel):
    """Client address as returned to callers; missing sub-fields read as empty."""

    street: str = ""
    city: str = ""
    postal_code_or_zip: str = ""

    @classmethod
    def from_row(cls, data: Optional[dict]) -> "NormalizedClientAddress":
        data = data or {}
        return cls(
            street=data.get("street") or "",
            city=data.get("city") or "",
            postal_code_or_zip=data.get("postalCodeOrZip") or "",
        )


class MessageResponse(CamelModel):
    """Generic acknowledgement envelope."""

    success: bool = True
    message: str


def model_to_row(
    model: BaseModel,
    nested: tuple[str, ...] = (),
    partial: bool = False,
) -> dict[str, Any]:
    """
    Convert a request model into column values.

    Top-level keys stay snake_case to match the columns. Fields listed in
    ``nested`` are stored as jsonb and keep their camelCase wire keys.
    With ``partial`` only fields the caller actually sent are included.
    """
    row = model.model_dump(mode="json", exclude_unset=partial, exclude=set(nested))
    for name in nested:
        if partial and name not in model.model_fields_set:
            continue
        value = getattr(model, name)
        if value is None:
            row[name] = None
        elif isinstance(value, list):
            row[name] = [item.model_dump(mode="json", by_alias=True) for item in value]
        else:
            row[name] = value.model_dump(mode="json", by_alias=True)
    return row
