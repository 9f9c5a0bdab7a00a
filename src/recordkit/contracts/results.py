# recordkit/contracts/results.py
"""
Result signals returned by registry operations.

Missing ids and full registries are ordinary outcomes, not errors: the
caller inspects the returned value instead of catching an exception.
"""
from __future__ import annotations

from enum import Enum


class Outcome(str, Enum):
    CREATED = "created"
    REPLACED = "replaced"
    UPDATED = "updated"
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    CAPACITY_EXCEEDED = "capacity_exceeded"

    @property
    def ok(self) -> bool:
        """True when the operation changed the registry."""
        return self not in (Outcome.NOT_FOUND, Outcome.CAPACITY_EXCEEDED)
