"""Comparison operations for temporal values.

This module provides explicit comparison functions with the same meaning
as the operators on the value classes.

Comparison Rules:
    - Date equality: same [inclusive_start, exclusive_end) range
    - Time and DateTime equality: same normalized instant
    - Ordering: Time against Time or DateTime against DateTime only,
      by normalized instant
    - Naive vs Aware: the naive value is read as UTC, for both equality
      and ordering. This is a simplification, not a time-zone-correct
      comparison.
    - Values of different kinds are never equal and cannot be ordered

Supported Operations:
    - equal, not_equal
    - less_than, less_equal, greater_than, greater_equal
    - compare
    - min_value, max_value
"""

from __future__ import annotations

from typing import Callable, Union

from isospan.core.date import Date
from isospan.core.datetime import DateTime
from isospan.core.time import Time

# Type alias for temporal values
TemporalType = Union[Date, Time, DateTime]

# Type alias for values that can be ordered
OrderableType = Union[Time, DateTime]


def equal(left: TemporalType, right: TemporalType) -> bool:
    """Test equality between two temporal values.

    Examples:
        >>> equal(Date(2021, 1, 1), Date.from_ordinal_day(2021, 1))
        True
        >>> equal(Date(2021), Time(10))
        False
    """
    _check_temporal(left)
    _check_temporal(right)
    if type(left) is not type(right):
        return False
    return left == right


def not_equal(left: TemporalType, right: TemporalType) -> bool:
    return not equal(left, right)


def less_than(left: OrderableType, right: OrderableType) -> bool:
    """Test if left is earlier than right.

    Raises:
        TypeError: If the values are not both Times or both DateTimes.

    Examples:
        >>> less_than(Time(10), Time(11))
        True
    """
    _check_orderable(left, right, "<")
    return _key(left) < _key(right)


def less_equal(left: OrderableType, right: OrderableType) -> bool:
    _check_orderable(left, right, "<=")
    return _key(left) <= _key(right)


def greater_than(left: OrderableType, right: OrderableType) -> bool:
    _check_orderable(left, right, ">")
    return _key(left) > _key(right)


def greater_equal(left: OrderableType, right: OrderableType) -> bool:
    _check_orderable(left, right, ">=")
    return _key(left) >= _key(right)


def compare(left: OrderableType, right: OrderableType) -> int:
    """Compare two values, returning -1, 0, or 1.

    Raises:
        TypeError: If the values are not both Times or both DateTimes.

    Examples:
        >>> compare(Time(10), Time(10, 0))
        0
        >>> compare(Time(12), Time(10))
        1
    """
    _check_orderable(left, right, "compare")
    a, b = _key(left), _key(right)
    return (a > b) - (a < b)


def min_value(*values: OrderableType) -> OrderableType:
    """Return the earliest of the given values.

    Raises:
        ValueError: If no values provided.
        TypeError: If values are of different kinds.
    """
    return _pick("min_value", values, less_than)


def max_value(*values: OrderableType) -> OrderableType:
    """Return the latest of the given values.

    Raises:
        ValueError: If no values provided.
        TypeError: If values are of different kinds.
    """
    return _pick("max_value", values, greater_than)


def _pick(
    name: str,
    values: tuple[OrderableType, ...],
    wins: Callable[[OrderableType, OrderableType], bool],
) -> OrderableType:
    if not values:
        raise ValueError(f"{name} requires at least one argument")
    best = values[0]
    for candidate in values[1:]:
        if wins(candidate, best):
            best = candidate
    return best


def _key(value: OrderableType) -> int:
    if isinstance(value, DateTime):
        return value.instant
    return value.ticks


def _check_temporal(value: object) -> None:
    if not isinstance(value, (Date, Time, DateTime)):
        raise TypeError(
            f"expected Date, Time, or DateTime, got {type(value).__name__}"
        )


def _check_orderable(left: object, right: object, op: str) -> None:
    """Check that two values can be ordered.

    Raises:
        TypeError: Unless both are Times or both are DateTimes.
    """
    if not (
        (isinstance(left, Time) and isinstance(right, Time))
        or (isinstance(left, DateTime) and isinstance(right, DateTime))
    ):
        raise TypeError(
            f"{op!r} not supported between instances of {type(left).__name__!r} "
            f"and {type(right).__name__!r}"
        )


__all__ = [
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "compare",
    "min_value",
    "max_value",
]
