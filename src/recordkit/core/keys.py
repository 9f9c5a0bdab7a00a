# recordkit/core/keys.py
"""Key-extraction functions shared by the searchers and sorters."""
from __future__ import annotations

from operator import attrgetter
from typing import Any, Callable

KeyFunc = Callable[[Any], Any]

by_id: KeyFunc = attrgetter("id")
by_name: KeyFunc = attrgetter("name")
by_amount: KeyFunc = attrgetter("amount")


def by_field(name: str) -> KeyFunc:
    """Build a key function reading the attribute ``name``."""
    return attrgetter(name)
