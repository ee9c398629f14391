"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

The DTO only checks *shape*: field types, and lengths matching the
columns of ``Customer``.  The single business rule, a non-blank
``name``, belongs to ``CustomerService`` so that a blank name surfaces
as ``InvalidCustomer`` rather than a parsing error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    Unknown keys (a client-supplied ``id`` included) are ignored: the
    identifier is always assigned by the store.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str | None = Field(default=None, max_length=255)
    email: str = Field(default="", max_length=254)
    phone: str = Field(default="", max_length=20)
    document: str = Field(default="", max_length=20)
    address: str = ""

    @field_validator("email", "phone", "document", "address", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Accept explicit ``null`` for optional profile fields."""
        return "" if v is None else v

    @property
    def has_name(self) -> bool:
        return self.name is not None and bool(self.name.strip())
