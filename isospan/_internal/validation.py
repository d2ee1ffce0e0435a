"""Field range checks for isospan.

Every calendar field is checked here before it takes part in any day
arithmetic, and every failure is a RangeError naming the field, its
bounds and the offending value.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from isospan._internal.constants import MAX_YEAR, MIN_YEAR
from isospan.errors import RangeError

P = ParamSpec("P")
R = TypeVar("R")


def check_field(name: str, value: int, low: int, high: int, *, where: str = "") -> None:
    """Raise RangeError unless ``low <= value <= high``.

    Args:
        name: Field name used in the message.
        value: The value to check.
        low: Smallest allowed value.
        high: Largest allowed value.
        where: Optional context appended to the bounds, e.g. ``"for 2021-02"``.

    Examples:
        >>> check_field("week_day", 8, 1, 7)
        Traceback (most recent call last):
        ...
        RangeError: week_day must be between 1 and 7, got 8
    """
    if not low <= value <= high:
        context = f" {where}" if where else ""
        raise RangeError(f"{name} must be between {low} and {high}{context}, got {value}")


def validate_range(**bounds: tuple[int, int]) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Check named arguments of the decorated function against (low, high) bounds.

    Arguments passed as None are not checked.

    Examples:
        >>> @validate_range(week=(1, 53))
        ... def week_start(week_year: int, week: int) -> int:
        ...     ...
        >>> week_start(2024, 54)
        Traceback (most recent call last):
        ...
        RangeError: week must be between 1 and 53, got 54
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            supplied = signature.bind_partial(*args, **kwargs).arguments
            for name, (low, high) in bounds.items():
                value = supplied.get(name)
                if value is not None:
                    check_field(name, value, low, high)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int) -> None:
    """Reject years outside the four-digit range."""
    check_field("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    check_field("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Reject a day that the given month does not have.

    Raises:
        RangeError: If day is outside 1 and the month's length.
    """
    from isospan._internal.calendar import days_in_month

    check_field("day", day, 1, days_in_month(year, month), where=f"for {year:04d}-{month:02d}")


__all__ = [
    "check_field",
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
]
