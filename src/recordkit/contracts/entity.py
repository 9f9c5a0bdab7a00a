# recordkit/contracts/entity.py
"""
Entity contract.

An entity is a uniquely identified record (a product, an order, an
employee, a task, a book). The id is assigned by the caller and never
changes; uniqueness is the registry's job, not the entity's.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Immutable keyed record.

    Attributes:
        id: Caller-assigned identifier.
        name: Display name; the default key for searches.
        amount: Numeric field (price, salary, order total); the default
            key for sorting.
        status: Optional lifecycle status (e.g. ``"open"`` for tasks).
        category: Optional grouping (e.g. product category, job position).
        kind: Free-form tag naming what the record represents.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    id: int
    name: str
    amount: int | float = 0
    status: str | None = None
    category: str | None = None
    kind: str = Field(default="record")

    def describe(self) -> dict[str, Any]:
        return self.model_dump()
