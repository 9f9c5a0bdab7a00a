# recordkit/main.py
"""
Composition root.

Builds a registry from the configured seed files and walks through the
registry, search, sort and forecast operations, logging each step.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from recordkit.contracts.entity import Entity
from recordkit.contracts.results import Outcome
from recordkit.core.config import Settings, settings as default_settings
from recordkit.core.forecast import future_value
from recordkit.core.keys import by_amount, by_name
from recordkit.core.loader import load_entities
from recordkit.core.logging import configure_logging
from recordkit.core.registry import EntityRegistry
from recordkit.core.search import binary_search, linear_search
from recordkit.core.sequence import ArrayRegistry
from recordkit.core.sort import get_sorter

logger = logging.getLogger(__name__)


@dataclass
class Walkthrough:
    """What the walkthrough found, for callers that want more than logs."""

    sorted_ids: list[int] = field(default_factory=list)
    cheapest: Entity | None = None
    median_match: Entity | None = None
    name_match: Entity | None = None
    total_in_periods: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "sorted_ids": self.sorted_ids,
            "cheapest": self.cheapest.describe() if self.cheapest else None,
            "median_match": self.median_match.describe() if self.median_match else None,
            "name_match": self.name_match.describe() if self.name_match else None,
            "total_in_periods": self.total_in_periods,
        }


def build_registry(cfg: Settings) -> EntityRegistry:
    registry = EntityRegistry(load_entities(cfg.seed_paths))
    logger.info("Registry ready with %d entit(ies)", len(registry))
    return registry


def build_roster(registry: EntityRegistry, cfg: Settings) -> ArrayRegistry:
    """Copy ``registry`` into an ordered roster bounded by ``registry_capacity``."""
    roster = ArrayRegistry(cfg.registry_capacity)
    rejected = [e.id for e in registry if roster.add(e) is Outcome.CAPACITY_EXCEEDED]
    if rejected:
        logger.warning("Roster full, %d entit(ies) left out: %s", len(rejected), rejected)
    return roster


def run_walkthrough(
    registry: EntityRegistry,
    cfg: Settings,
    *,
    name: str | None = None,
    rate: float = 0.05,
    periods: int = 3,
) -> Walkthrough:
    """
    Sort a snapshot of ``registry`` by amount, then search it.

    Args:
        registry: Registry to read from; it is not modified
        cfg: Settings selecting the sorter and the sortedness check
        name: Entity name to look up by linear search
        rate: Growth rate applied to the total amount
        periods: Number of growth periods
    """
    result = Walkthrough()
    snapshot = registry.values()
    if not snapshot:
        logger.warning("Registry is empty, nothing to walk through")
        return result

    sorter = get_sorter(cfg.sort_algorithm)
    sorter(snapshot, key=by_amount)
    result.sorted_ids = [e.id for e in snapshot]
    result.cheapest = snapshot[0]
    logger.info("Sorted by amount with '%s': %s", cfg.sort_algorithm, result.sorted_ids)

    median_amount = by_amount(snapshot[len(snapshot) // 2])
    result.median_match = binary_search(
        snapshot, median_amount, key=by_amount, check_sorted=cfg.check_sorted
    )
    logger.info("Binary search for amount %s -> %s", median_amount, _label(result.median_match))

    if name is not None:
        result.name_match = linear_search(snapshot, name, key=by_name)
        if result.name_match is None:
            logger.info("No entity named '%s'", name)
        else:
            logger.info("Linear search for '%s' -> %s", name, _label(result.name_match))

    total = sum(by_amount(e) for e in snapshot)
    result.total_in_periods = future_value(total, rate, periods)
    logger.info(
        "Total amount %s grows to %.2f after %d period(s) at %.2f%%",
        total,
        result.total_in_periods,
        periods,
        rate * 100,
    )
    return result


def _label(entity: Entity | None) -> str:
    return "not found" if entity is None else f"#{entity.id} {entity.name}"


def main(cfg: Settings | None = None) -> None:
    cfg = cfg or default_settings
    configure_logging(cfg.log_level, cfg.log_json)
    registry = build_registry(cfg)
    roster = build_roster(registry, cfg)
    for entity in roster.traverse():
        logger.info("Roster: #%s %s (%s)", entity.id, entity.name, entity.kind)
    run_walkthrough(registry, cfg)


if __name__ == "__main__":
    main()
