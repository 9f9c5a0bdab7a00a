# recordkit/core/search.py
"""
Linear and binary search over entity sequences.

Both return the matching element or None. ``binary_search`` requires the
input to be sorted ascending by the same key it searches on; on unsorted
input its result is undefined (it may miss an element that is present).
Sorting first is the caller's responsibility. Pass ``check_sorted=True``
to verify the order at O(n) cost.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence, TypeVar

from recordkit.core.errors import PreconditionViolated
from recordkit.core.keys import KeyFunc, by_name

logger = logging.getLogger(__name__)

T = TypeVar("T")


def linear_search(sequence: Sequence[T], value: Any, key: KeyFunc = by_name) -> T | None:
    """
    Return the first element whose key equals ``value``.

    Works on unsorted input. O(n).
    """
    for item in sequence:
        if key(item) == value:
            return item
    return None


def is_sorted(sequence: Sequence[T], key: KeyFunc = by_name) -> bool:
    return all(key(sequence[i]) <= key(sequence[i + 1]) for i in range(len(sequence) - 1))


def binary_search(
    sorted_sequence: Sequence[T],
    value: Any,
    key: KeyFunc = by_name,
    check_sorted: bool = False,
) -> T | None:
    """
    Find an element whose key equals ``value`` in a sorted sequence.

    Args:
        sorted_sequence: Elements sorted ascending by ``key``
        value: Key value to look for
        key: Key-extraction function, also used for the sort order
        check_sorted: Verify the ordering first (O(n))

    Returns:
        A matching element, or None

    Raises:
        PreconditionViolated: If ``check_sorted`` is set and the input
            is not sorted by ``key``
    """
    if check_sorted and not is_sorted(sorted_sequence, key):
        raise PreconditionViolated("binary_search", "input is not sorted by the search key")

    low, high = 0, len(sorted_sequence) - 1
    while low <= high:
        mid = low + (high - low) // 2
        current = key(sorted_sequence[mid])
        if current == value:
            return sorted_sequence[mid]
        if current < value:
            low = mid + 1
        else:
            high = mid - 1

    logger.debug("binary_search: %r not found among %d items", value, len(sorted_sequence))
    return None
