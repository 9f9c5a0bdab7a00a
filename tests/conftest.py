# tests/conftest.py
from __future__ import annotations

import pytest

from recordkit.contracts.entity import Entity


@pytest.fixture
def orders() -> list[Entity]:
    """Three orders whose amounts are out of id order."""
    return [
        Entity(id=1, name="Alice", amount=30, kind="order"),
        Entity(id=2, name="Bob", amount=10, kind="order"),
        Entity(id=3, name="Carol", amount=20, kind="order"),
    ]


@pytest.fixture
def books() -> list[Entity]:
    return [
        Entity(id=10, name="Dune", category="Herbert", kind="book"),
        Entity(id=11, name="Emma", category="Austen", kind="book"),
        Entity(id=12, name="Beloved", category="Morrison", kind="book"),
        Entity(id=13, name="Ulysses", category="Joyce", kind="book"),
    ]
