# recordkit/core/registry.py
"""
Hash-keyed entity registry.

Entities are stored by id in a dict, so add/update/delete/get are O(1) on
average. Missing ids are reported through return values, never raised.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from recordkit.contracts.entity import Entity
from recordkit.contracts.results import Outcome

logger = logging.getLogger(__name__)


class EntityRegistry:
    """
    Registry of Entity instances keyed by id.

    ``add`` on an existing id overwrites it (last write wins). ``update``
    and ``delete`` on an absent id leave the registry untouched and return
    ``Outcome.NOT_FOUND``.

    Example:
        registry = EntityRegistry()
        registry.add(Entity(id=1, name="Widget", amount=30))

        registry.get(1)       # Entity(id=1, ...)
        registry.delete(2)    # Outcome.NOT_FOUND
    """

    def __init__(self, entities: Iterable[Entity] = ()) -> None:
        self._entities: dict[int, Entity] = {}
        for entity in entities:
            self.add(entity)

    def add(self, entity: Entity) -> Outcome:
        """
        Insert an entity, replacing any entity with the same id.

        Args:
            entity: Entity to store

        Returns:
            Outcome.CREATED or Outcome.REPLACED
        """
        outcome = Outcome.REPLACED if entity.id in self._entities else Outcome.CREATED
        self._entities[entity.id] = entity
        logger.debug("Entity %s %s", entity.id, outcome.value)
        return outcome

    def update(self, entity: Entity) -> Outcome:
        """
        Replace the entity stored under ``entity.id``.

        Args:
            entity: New version of an existing entity

        Returns:
            Outcome.UPDATED, or Outcome.NOT_FOUND if the id is unknown
        """
        if entity.id not in self._entities:
            logger.info("Update skipped, entity %s not found", entity.id)
            return Outcome.NOT_FOUND

        self._entities[entity.id] = entity
        logger.debug("Entity %s updated", entity.id)
        return Outcome.UPDATED

    def delete(self, entity_id: int) -> Outcome:
        """
        Remove the entity stored under ``entity_id``.

        Returns:
            Outcome.DELETED, or Outcome.NOT_FOUND if the id is unknown
        """
        if self._entities.pop(entity_id, None) is None:
            logger.info("Delete skipped, entity %s not found", entity_id)
            return Outcome.NOT_FOUND

        logger.debug("Entity %s deleted", entity_id)
        return Outcome.DELETED

    def get(self, entity_id: int) -> Entity | None:
        """Return the entity stored under ``entity_id``, or None."""
        return self._entities.get(entity_id)

    def has(self, entity_id: int) -> bool:
        return entity_id in self._entities

    def ids(self) -> list[int]:
        return list(self._entities.keys())

    def values(self) -> list[Entity]:
        """
        Snapshot of the stored entities.

        The returned list is independent of the registry, so it can be
        sorted or searched while the registry keeps changing.
        """
        return list(self._entities.values())

    def list(self) -> list[dict[str, Any]]:
        return [entity.describe() for entity in self._entities.values()]

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.values())
