# recordkit/core/sequence.py
"""
Ordered entity registries.

Both registries keep insertion order and look entities up by scanning,
so search and delete are O(n). ``ArrayRegistry`` is list backed with an
optional size limit; ``LinkedRegistry`` is a singly linked list.

Neither deduplicates ids: the first entity with a matching id wins.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from recordkit.contracts.entity import Entity
from recordkit.contracts.results import Outcome

logger = logging.getLogger(__name__)


class ArrayRegistry:
    """
    Growable list of entities with an optional capacity.

    Args:
        capacity: Maximum number of entities, or None for no limit.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._items: list[Entity] = []

    @property
    def capacity(self) -> int | None:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return self._capacity is not None and len(self._items) >= self._capacity

    def add(self, entity: Entity) -> Outcome:
        if self.is_full:
            logger.warning(
                "Registry full (capacity %d), entity %s rejected",
                self._capacity,
                entity.id,
            )
            return Outcome.CAPACITY_EXCEEDED

        self._items.append(entity)
        return Outcome.CREATED

    def search(self, entity_id: int) -> Entity | None:
        for entity in self._items:
            if entity.id == entity_id:
                return entity
        return None

    def traverse(self) -> Iterator[Entity]:
        return iter(list(self._items))

    def delete(self, entity_id: int) -> Outcome:
        """Remove the first entity with ``entity_id``; later entries shift left."""
        for index, entity in enumerate(self._items):
            if entity.id == entity_id:
                del self._items[index]
                return Outcome.DELETED

        logger.info("Delete skipped, entity %s not found", entity_id)
        return Outcome.NOT_FOUND

    def values(self) -> list[Entity]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Entity]:
        return self.traverse()


@dataclass
class _Node:
    entity: Entity
    next: _Node | None = None


class LinkedRegistry:
    """Singly linked list of entities with O(1) append."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def add(self, entity: Entity) -> Outcome:
        node = _Node(entity)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return Outcome.CREATED

    def search(self, entity_id: int) -> Entity | None:
        current = self._head
        while current is not None:
            if current.entity.id == entity_id:
                return current.entity
            current = current.next
        return None

    def traverse(self) -> Iterator[Entity]:
        current = self._head
        while current is not None:
            yield current.entity
            current = current.next

    def delete(self, entity_id: int) -> Outcome:
        previous: _Node | None = None
        current = self._head
        while current is not None and current.entity.id != entity_id:
            previous = current
            current = current.next

        if current is None:
            logger.info("Delete skipped, entity %s not found", entity_id)
            return Outcome.NOT_FOUND

        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        if current is self._tail:
            self._tail = previous
        self._size -= 1
        return Outcome.DELETED

    def values(self) -> list[Entity]:
        return list(self.traverse())

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Entity]:
        return self.traverse()
