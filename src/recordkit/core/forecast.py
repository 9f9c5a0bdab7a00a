# recordkit/core/forecast.py
"""
Compound-growth forecasting.
"""
from __future__ import annotations

import logging
from typing import Sequence

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 500


def future_value(principal: float, rate: float, periods: int) -> float:
    """
    Value of ``principal`` after ``periods`` rounds of growth at ``rate``.

    Non-positive ``periods`` return the principal unchanged.
    """
    value = principal
    for _ in range(max(0, periods)):
        value *= 1 + rate
    return value


def future_value_recursive(
    principal: float,
    rate: float,
    periods: int,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> float:
    """
    Recursive form of :func:`future_value`, same results.

    Raises:
        ValueError: If ``periods`` exceeds ``max_depth``
    """
    if periods > max_depth:
        raise ValueError(
            f"periods={periods} exceeds the recursion bound of {max_depth}; "
            "use future_value instead"
        )
    if periods <= 0:
        return principal
    return future_value_recursive(principal * (1 + rate), rate, periods - 1, max_depth)


def average_growth(values: Sequence[float]) -> float:
    """
    Mean period-over-period growth ratio of ``values``.

    Raises:
        ValueError: With fewer than two values, or a zero value that
            another one grows from
    """
    if len(values) < 2:
        raise ValueError(f"At least two values are needed, got {len(values)}")

    total = 0.0
    for previous, current in zip(values, values[1:]):
        if previous == 0:
            raise ValueError("Growth from a zero value is undefined")
        total += (current - previous) / previous
    return total / (len(values) - 1)


def forecast_future_value(past_values: Sequence[float], periods_ahead: int) -> float:
    """Project the last of ``past_values`` forward at their average growth."""
    rate = average_growth(past_values)
    logger.debug("Average growth %.4f over %d values", rate, len(past_values))
    return future_value(past_values[-1], rate, periods_ahead)
