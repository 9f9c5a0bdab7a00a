# tests/core/test_sequence.py
"""Tests for the ordered registries."""
from __future__ import annotations

import pytest

from recordkit.contracts.entity import Entity
from recordkit.contracts.results import Outcome
from recordkit.core.sequence import ArrayRegistry, LinkedRegistry


def _employee(entity_id: int, name: str, salary: float = 1000.0) -> Entity:
    return Entity(id=entity_id, name=name, amount=salary, category="staff", kind="employee")


class TestArrayRegistry:
    def test_unbounded_by_default(self):
        registry = ArrayRegistry()

        for i in range(100):
            assert registry.add(_employee(i, f"e{i}")) is Outcome.CREATED

        assert len(registry) == 100
        assert registry.capacity is None
        assert not registry.is_full

    def test_capacity_exceeded(self):
        registry = ArrayRegistry(capacity=2)
        registry.add(_employee(1, "Ann"))
        registry.add(_employee(2, "Ben"))

        outcome = registry.add(_employee(3, "Cat"))

        assert outcome is Outcome.CAPACITY_EXCEEDED
        assert registry.is_full
        assert len(registry) == 2
        assert registry.search(3) is None

    def test_zero_capacity(self):
        registry = ArrayRegistry(capacity=0)

        assert registry.add(_employee(1, "Ann")) is Outcome.CAPACITY_EXCEEDED
        assert len(registry) == 0

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            ArrayRegistry(capacity=-1)

    def test_search(self):
        registry = ArrayRegistry()
        ann = _employee(1, "Ann")
        registry.add(ann)
        registry.add(_employee(2, "Ben"))

        assert registry.search(1) == ann
        assert registry.search(9) is None

    def test_traverse_keeps_insertion_order(self):
        registry = ArrayRegistry()
        for i, name in [(3, "Cat"), (1, "Ann"), (2, "Ben")]:
            registry.add(_employee(i, name))

        assert [e.name for e in registry.traverse()] == ["Cat", "Ann", "Ben"]

    def test_delete_shifts_later_entries(self):
        registry = ArrayRegistry(capacity=3)
        for i, name in [(1, "Ann"), (2, "Ben"), (3, "Cat")]:
            registry.add(_employee(i, name))

        assert registry.delete(2) is Outcome.DELETED

        assert [e.id for e in registry] == [1, 3]
        assert not registry.is_full
        assert registry.add(_employee(4, "Dan")) is Outcome.CREATED

    def test_delete_missing(self):
        registry = ArrayRegistry()
        registry.add(_employee(1, "Ann"))

        assert registry.delete(2) is Outcome.NOT_FOUND
        assert len(registry) == 1

    def test_duplicate_ids_first_match_wins(self):
        registry = ArrayRegistry()
        registry.add(_employee(1, "Ann"))
        registry.add(_employee(1, "Ann again"))

        assert registry.search(1).name == "Ann"
        registry.delete(1)
        assert registry.search(1).name == "Ann again"


class TestLinkedRegistry:
    def _task(self, entity_id: int, name: str, status: str = "open") -> Entity:
        return Entity(id=entity_id, name=name, status=status, kind="task")

    def test_add_and_traverse(self):
        registry = LinkedRegistry()
        for i, name in [(1, "write"), (2, "review"), (3, "ship")]:
            assert registry.add(self._task(i, name)) is Outcome.CREATED

        assert [t.name for t in registry.traverse()] == ["write", "review", "ship"]
        assert len(registry) == 3

    def test_search(self):
        registry = LinkedRegistry()
        registry.add(self._task(1, "write"))
        registry.add(self._task(2, "review", status="done"))

        assert registry.search(2).status == "done"
        assert registry.search(5) is None

    def test_delete_head(self):
        registry = LinkedRegistry()
        for i in range(1, 4):
            registry.add(self._task(i, f"t{i}"))

        assert registry.delete(1) is Outcome.DELETED
        assert [t.id for t in registry] == [2, 3]

    def test_delete_middle(self):
        registry = LinkedRegistry()
        for i in range(1, 4):
            registry.add(self._task(i, f"t{i}"))

        assert registry.delete(2) is Outcome.DELETED
        assert [t.id for t in registry] == [1, 3]

    def test_delete_tail_then_append(self):
        """Appending after removing the tail links onto the new tail."""
        registry = LinkedRegistry()
        for i in range(1, 4):
            registry.add(self._task(i, f"t{i}"))

        registry.delete(3)
        registry.add(self._task(4, "t4"))

        assert [t.id for t in registry] == [1, 2, 4]
        assert len(registry) == 3

    def test_delete_only_element(self):
        registry = LinkedRegistry()
        registry.add(self._task(1, "t1"))

        registry.delete(1)
        assert registry.values() == []
        assert len(registry) == 0

        registry.add(self._task(2, "t2"))
        assert [t.id for t in registry] == [2]

    def test_delete_missing(self):
        registry = LinkedRegistry()
        assert registry.delete(1) is Outcome.NOT_FOUND

        registry.add(self._task(1, "t1"))
        assert registry.delete(2) is Outcome.NOT_FOUND
        assert len(registry) == 1
