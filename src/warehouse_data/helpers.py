"""
Helper functions shared by the warehouse data generators.

Contains:
- random_between(): Inclusive integer draw
- random_datetime(): Uniform datetime between two instants
- pick(): Uniform choice from a sequence
- round_money(): Currency rounding to cents
- require_count(): Count argument contract (zero allowed, negative rejected)
"""

import operator
from collections.abc import Sequence
from datetime import datetime
from typing import TypeVar

import numpy as np

T = TypeVar("T")


class InvalidCountError(ValueError):
    """Raised when a generator receives a negative count."""

    pass


def require_count(value: int, name: str = "count") -> int:
    """
    Validate a count argument.

    Zero is a valid count and yields an empty collection. Negative values
    are rejected rather than clamped.

    Args:
        value: Count passed by the caller (any int-like, incl. numpy ints)
        name: Argument name for the error message

    Returns:
        The count as a plain int

    Raises:
        InvalidCountError: If value is negative
        TypeError: If value is not an integer
    """
    count = operator.index(value)
    if count < 0:
        raise InvalidCountError(f"{name} must be >= 0, got {count}")
    return count


def random_between(rng: np.random.Generator, low: int, high: int) -> int:
    """Draw an integer uniformly from [low, high], both ends inclusive."""
    return int(rng.integers(low, high + 1))


def random_datetime(rng: np.random.Generator, start: datetime, end: datetime) -> datetime:
    """Draw a datetime uniformly from [start, end)."""
    return start + (end - start) * float(rng.random())


def random_uniform(rng: np.random.Generator, low: float, high: float) -> float:
    """Draw a float uniformly from [low, high)."""
    return float(rng.uniform(low, high))


def pick(rng: np.random.Generator, options: Sequence[T]) -> T:
    """Pick one element uniformly."""
    return options[int(rng.integers(len(options)))]


def round_money(value: float) -> float:
    """Round a currency amount to cents."""
    return round(float(value), 2)
