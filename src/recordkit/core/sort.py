# recordkit/core/sort.py
"""
In-place sorting of entity sequences by a key-extraction function.

``bubble_sort`` is stable and O(n^2) (O(n) on sorted input thanks to the
early exit). ``quick_sort`` uses the Lomuto partition with the last element
as pivot: O(n log n) on average, O(n^2) on sorted or reverse-sorted input,
and not stable.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, MutableSequence

from recordkit.core.keys import KeyFunc, by_amount

logger = logging.getLogger(__name__)

Sorter = Callable[..., None]


def bubble_sort(sequence: MutableSequence[Any], key: KeyFunc = by_amount) -> None:
    n = len(sequence)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if key(sequence[j]) > key(sequence[j + 1]):
                sequence[j], sequence[j + 1] = sequence[j + 1], sequence[j]
                swapped = True
        if not swapped:
            break


def _partition(sequence: MutableSequence[Any], low: int, high: int, key: KeyFunc) -> int:
    pivot = key(sequence[high])
    i = low - 1
    for j in range(low, high):
        if key(sequence[j]) <= pivot:
            i += 1
            sequence[i], sequence[j] = sequence[j], sequence[i]
    sequence[i + 1], sequence[high] = sequence[high], sequence[i + 1]
    return i + 1


def quick_sort(
    sequence: MutableSequence[Any],
    low: int = 0,
    high: int | None = None,
    key: KeyFunc = by_amount,
) -> None:
    """
    Sort ``sequence[low:high + 1]`` in place.

    Args:
        sequence: Mutable sequence to sort
        low: First index of the range
        high: Last index of the range (defaults to the last element)
        key: Key-extraction function
    """
    if high is None:
        high = len(sequence) - 1

    # Recurse into the smaller side and loop on the larger one, keeping
    # the call depth logarithmic even on already-sorted input.
    while low < high:
        pivot_index = _partition(sequence, low, high, key)
        if pivot_index - low < high - pivot_index:
            quick_sort(sequence, low, pivot_index - 1, key)
            low = pivot_index + 1
        else:
            quick_sort(sequence, pivot_index + 1, high, key)
            high = pivot_index - 1


SORTERS: dict[str, Sorter] = {
    "bubble": bubble_sort,
    "quick": quick_sort,
}


def get_sorter(name: str) -> Sorter:
    """
    Look up a sorter by name.

    Raises:
        KeyError: If no sorter is registered under ``name``
    """
    try:
        return SORTERS[name]
    except KeyError:
        raise KeyError(
            f"Sorter '{name}' not found. Available: {sorted(SORTERS)}"
        ) from None
