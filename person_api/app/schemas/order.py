"""
Pydantic model for orders.

An order belongs to exactly one person and has no lifecycle of its
own.  Only ``id``, ``status`` and ``orderDate`` are interpreted by the
service; any additional fields sent by clients (amount, line items,
...) are kept as an opaque payload and returned unchanged.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class Order(BaseModel):
    """A purchase record owned by a person."""

    id: int = Field(..., examples=[1])
    status: str = Field(..., examples=["open"])
    order_date: datetime = Field(..., examples=["2025-09-01T10:00:00Z"])

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "allow",
    }

    @field_validator("order_date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # Naive and aware datetimes cannot be compared when sorting.
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
