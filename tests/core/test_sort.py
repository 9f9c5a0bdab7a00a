# tests/core/test_sort.py
from __future__ import annotations

import random

import pytest

from recordkit.contracts.entity import Entity
from recordkit.core.keys import by_amount, by_field, by_name
from recordkit.core.sort import SORTERS, bubble_sort, get_sorter, quick_sort


def _orders(amounts: list[float]) -> list[Entity]:
    return [Entity(id=i, name=f"order-{i}", amount=a, kind="order") for i, a in enumerate(amounts)]


_rng = random.Random(1234)

INPUTS = {
    "empty": [],
    "single": [5],
    "random": [_rng.randint(0, 100) for _ in range(60)],
    "sorted": list(range(40)),
    "reverse": list(range(40, 0, -1)),
    "all_equal": [7] * 25,
    "floats": [3.5, -1.25, 0.0, 2.75, -1.25, 10.0],
}


class TestSortersAgree:
    @pytest.mark.parametrize("shape", sorted(INPUTS))
    @pytest.mark.parametrize("name", sorted(SORTERS))
    def test_matches_reference_sort(self, name, shape):
        items = _orders(INPUTS[shape])
        expected = [by_amount(e) for e in sorted(items, key=by_amount)]

        get_sorter(name)(items, key=by_amount)

        assert [by_amount(e) for e in items] == expected

    @pytest.mark.parametrize("shape", sorted(INPUTS))
    def test_bubble_and_quick_agree(self, shape):
        bubbled = _orders(INPUTS[shape])
        quicked = list(bubbled)

        bubble_sort(bubbled)
        quick_sort(quicked)

        assert [e.amount for e in bubbled] == [e.amount for e in quicked]
        assert sorted(e.id for e in quicked) == list(range(len(INPUTS[shape])))

    def test_large_sorted_input_does_not_hit_recursion_limit(self):
        items = _orders(list(range(2000)))

        quick_sort(items)

        assert [e.amount for e in items] == list(range(2000))


class TestBubbleSort:
    def test_is_stable(self):
        items = _orders([2, 1, 2, 1])

        bubble_sort(items)

        assert [e.id for e in items] == [1, 3, 0, 2]

    def test_sorts_by_name(self, books):
        bubble_sort(books, key=by_name)
        assert [b.name for b in books] == ["Beloved", "Dune", "Emma", "Ulysses"]


class TestQuickSort:
    def test_example_order(self, orders):
        quick_sort(orders)
        assert [o.id for o in orders] == [2, 3, 1]

    def test_sub_range_only(self):
        items = _orders([9, 5, 3, 1, 0])

        quick_sort(items, 1, 3)

        assert [e.amount for e in items] == [9, 1, 3, 5, 0]

    def test_custom_key(self, books):
        quick_sort(books, key=by_field("category"))
        assert [b.category for b in books] == ["Austen", "Herbert", "Joyce", "Morrison"]

    def test_descending_via_key(self, orders):
        quick_sort(orders, key=lambda o: -o.amount)
        assert [o.amount for o in orders] == [30, 20, 10]


class TestGetSorter:
    def test_known(self):
        assert get_sorter("bubble") is bubble_sort
        assert get_sorter("quick") is quick_sort

    def test_unknown(self):
        with pytest.raises(KeyError, match="Available"):
            get_sorter("merge")
