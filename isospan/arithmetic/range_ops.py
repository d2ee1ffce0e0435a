"""Containment and overlap between temporal values.

A Date covers the half-open day range [inclusive_start, exclusive_end);
a DateTime is a single instant. These functions relate the two:
    - contains: a Date holds another Date, or a DateTime instant
    - is_contained_by: contains with the arguments swapped
    - overlaps: two Dates share at least one day
"""

from __future__ import annotations

from typing import Union

from isospan.core.date import Date
from isospan.core.datetime import DateTime


def contains(outer: Date, inner: Union[Date, DateTime]) -> bool:
    """Check if a Date contains another Date or a DateTime.

    For a Date: ``outer.start <= inner.start and inner.end <= outer.end``.
    For a DateTime: ``outer.start <= inner.instant < outer.end``.

    Raises:
        TypeError: If outer is not a Date, or inner is neither a Date
            nor a DateTime.

    Examples:
        >>> contains(Date(2021), Date(2021, 6))
        True
        >>> contains(Date(2021, 6), Date(2021))
        False
    """
    if not isinstance(outer, Date):
        raise TypeError(f"contains() expects a Date first, got {type(outer).__name__}")
    return outer.contains(inner)


def is_contained_by(inner: Union[Date, DateTime], outer: Date) -> bool:
    """Check if a Date or DateTime lies within a Date."""
    return contains(outer, inner)


def overlaps(left: Date, right: Date) -> bool:
    """Check if two Dates share at least one day.

    Adjacent periods do not overlap: ``2021-06`` and ``2021-07`` share
    no day.

    Raises:
        TypeError: If either value is not a Date.

    Examples:
        >>> overlaps(Date.from_week(2021, 1), Date(2021, 1))
        True
    """
    if not isinstance(left, Date):
        raise TypeError(f"overlaps() expects Dates, got {type(left).__name__}")
    return left.overlaps(right)


__all__ = [
    "contains",
    "is_contained_by",
    "overlaps",
]
