"""
Pydantic models for person data.

``PersonBase`` holds the client‑editable fields and is what request
bodies are bound to (``PersonCreate``).  ``Person`` adds the
server‑managed identifier and timestamps and is both the stored
record and the response body.  Identifiers and timestamps sent by a
client are ignored.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from .order import Order

# Every one of these must be present and non‑blank.
REQUIRED_FIELDS = (
    "status",
    "first_name",
    "last_name",
    "email_address",
    "address_line1",
    "address_line2",
    "city",
    "state",
    "zip_code",
)


class PersonBase(BaseModel):
    status: str = Field(..., examples=["Active"])
    first_name: str = Field(..., examples=["Hiro"])
    last_name: str = Field(..., examples=["Protagonist"])
    email_address: str = Field(..., examples=["deliverator@mrlees.com"])
    address_line1: str = Field(..., examples=["123 Any St."])
    address_line2: str = Field(..., examples=["Apt 456"])
    city: str = Field(..., examples=["Los Angeles"])
    state: str = Field(..., examples=["California"])
    zip_code: str = Field(..., examples=["12345"])
    orders: List[Order] = Field(default_factory=list)

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator(*REQUIRED_FIELDS)
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class PersonCreate(PersonBase):
    """Request body for POST, PUT and PATCH."""


class Person(PersonBase):
    """A stored person, as returned by the API."""

    id: int
    created: datetime
    updated: datetime
