"""Core registries and algorithms."""
from recordkit.core.errors import PreconditionViolated, RecordkitError, SeedFileError
from recordkit.core.forecast import (
    average_growth,
    forecast_future_value,
    future_value,
    future_value_recursive,
)
from recordkit.core.keys import by_amount, by_field, by_id, by_name
from recordkit.core.registry import EntityRegistry
from recordkit.core.search import binary_search, linear_search
from recordkit.core.sequence import ArrayRegistry, LinkedRegistry
from recordkit.core.sort import SORTERS, bubble_sort, get_sorter, quick_sort

__all__ = [
    "RecordkitError", "PreconditionViolated", "SeedFileError",
    "future_value", "future_value_recursive", "average_growth", "forecast_future_value",
    "by_id", "by_name", "by_amount", "by_field",
    "EntityRegistry", "ArrayRegistry", "LinkedRegistry",
    "linear_search", "binary_search",
    "bubble_sort", "quick_sort", "SORTERS", "get_sorter",
]
