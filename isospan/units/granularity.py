"""Granularity enumeration for Date values.

This module provides the Granularity enum naming which fields of a Date
are populated, and therefore how long the period it denotes is.
"""

from __future__ import annotations

from enum import Enum


class Granularity(Enum):
    """The single populated granularity of a Date.

    Examples:
        >>> Granularity.WEEK.resolves_to_day
        False

        >>> Granularity.ORDINAL_DAY.resolves_to_day
        True
    """

    CENTURY = "century"
    DECADE = "decade"
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    ORDINAL_DAY = "ordinal_day"
    WEEK = "week"
    WEEK_DAY = "week_day"
    SUB_YEAR = "sub_year"

    @property
    def resolves_to_day(self) -> bool:
        """Return True if a Date of this granularity names one calendar day.

        Only such dates can be combined with a Time.
        """
        return self in (Granularity.DAY, Granularity.ORDINAL_DAY, Granularity.WEEK_DAY)


__all__ = ["Granularity"]
