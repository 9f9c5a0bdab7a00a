# recordkit/core/errors.py
"""
Exceptions raised by recordkit.

Registry lookups never raise; these cover broken caller contracts and
malformed input files.
"""
from __future__ import annotations

from typing import Any


class RecordkitError(Exception):
    """Base class for recordkit errors."""


class PreconditionViolated(RecordkitError, ValueError):
    """Raised when an opt-in precondition check fails."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}: {reason}")


class SeedFileError(RecordkitError, ValueError):
    """Raised when a seed file does not describe a list of entities."""

    def __init__(self, path: str, reason: str, errors: list[Any] | None = None):
        self.path = path
        self.reason = reason
        self.errors = errors or []
        super().__init__(f"Invalid seed file '{path}': {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "seed_file_error",
            "path": self.path,
            "message": self.reason,
            "errors": self.errors,
        }
