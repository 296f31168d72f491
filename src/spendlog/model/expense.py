from __future__ import annotations

"""
Expense model.

Scope
- Pure Pydantic v2 model for a single recorded expense
- Mirrors one record of data/expenses.json (camelCase keys on disk)
- No I/O operations (handled by expense_io.py)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Integers stay integers on disk; fractional amounts stay floats.
Amount = Union[
    Annotated[int, Field(ge=0)],
    Annotated[float, Field(ge=0, allow_inf_nan=False)],
]


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with millisecond precision, UTC written as a trailing Z."""
    text = value.isoformat(timespec="milliseconds")
    if text.endswith("+00:00"):
        return text[: -len("+00:00")] + "Z"
    return text


class Expense(BaseModel):
    """A single recorded monetary outlay.

    Instances are frozen: an update produces a new Expense carrying the same
    id and created_at.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    id: int = Field(gt=0, strict=True, description="Smallest unused positive integer at creation")
    description: str = Field(min_length=1, description="What the money was spent on")
    amount: Amount = Field(description="Amount, no currency unit")
    created_at: datetime = Field(alias="createdAt", description="Set once at creation")
    updated_at: datetime | None = Field(
        default=None, alias="updatedAt", description="None until the first update"
    )

    @field_validator("description")
    @classmethod
    def _validate_description(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description must not be blank")
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _validate_amount_is_number(cls, value: Any) -> Any:
        """Reject booleans and numeric strings that lax mode would coerce."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("amount must be a number")
        return value

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)

    @field_serializer("updated_at")
    def _serialize_updated_at(self, value: Optional[datetime]) -> Optional[str]:
        return None if value is None else format_timestamp(value)

    def to_record(self) -> dict[str, Any]:
        """JSON-ready dict using the on-disk field names."""
        return self.model_dump(mode="json", by_alias=True)


@dataclass(frozen=True)
class ExpenseRow:
    """Display-ready view of an expense for the list command."""

    id: int
    date: str
    description: str
    amount: str


__all__ = ["Amount", "Expense", "ExpenseRow", "format_timestamp"]
