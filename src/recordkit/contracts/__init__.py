"""Public contracts for recordkit."""
from recordkit.contracts.entity import Entity
from recordkit.contracts.results import Outcome

__all__ = [
    "Entity",
    "Outcome",
]
