"""Calendar arithmetic for isospan.

This module maps every date granularity to a half-open range of absolute
day numbers ``[inclusive_start, exclusive_end)`` in the proleptic
Gregorian calendar, and provides the ISO week-numbering helpers.

Absolute days are ordinals: 0001-01-01 is day 1, 0000-12-31 is day 0.
Every function here is pure.

Internal module: the public API exposes these ranges through Date.
"""

from __future__ import annotations

from isospan._internal.constants import (
    DAYS_IN_MONTH,
    MAX_WEEK,
    MAX_SUB_YEAR_CODE,
    MIN_SUB_YEAR_CODE,
    MIN_YEAR,
    SUB_YEAR_GROUPINGS,
    UNSUPPORTED_SUB_YEAR_CODES,
)
from isospan._internal.validation import (
    check_field,
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)
from isospan.errors import RangeError, UnsupportedError

# Days in one full 400-year Gregorian cycle
_DAYS_PER_400_YEARS = 146097

# Days in a common year before the first of each month, 1-indexed
_CUMULATIVE_DAYS = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_year(year: int) -> bool:
    """Return True for years with a February 29.

    Every fourth year is a leap year, except century years that 400 does
    not divide.

    Examples:
        >>> is_leap_year(2024), is_leap_year(1900), is_leap_year(2000)
        (True, False, True)
    """
    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the length of a month, counting a leap February as 29 days.

    Raises:
        RangeError: If month is not in 1-12.
    """
    validate_month(month)
    leap_day = 1 if month == 2 and is_leap_year(year) else 0
    return DAYS_IN_MONTH[month] + leap_day


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def _days_before_month(year: int, month: int) -> int:
    leap_day = 1 if month > 2 and is_leap_year(year) else 0
    return _CUMULATIVE_DAYS[month] + leap_day


def _days_before_year(year: int) -> int:
    """Return the days from 0001-01-01 up to January 1 of ``year``.

    Negative for year 0. Floor division keeps the leap-year counts exact
    below year 1.
    """
    previous = year - 1
    return 365 * previous + previous // 4 - previous // 100 + previous // 400


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert a calendar date to its absolute day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(0, 12, 31)
        0
    """
    return _days_before_year(year) + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an absolute day number to (year, month, day).

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    # Mean-year estimate, then settle on the year whose days hold ordinal
    year = (ordinal - 1) * 400 // _DAYS_PER_400_YEARS + 1
    while _days_before_year(year + 1) < ordinal:
        year += 1
    while _days_before_year(year) >= ordinal:
        year -= 1

    day_of_year = ordinal - _days_before_year(year)
    month = 12
    while _days_before_month(year, month) >= day_of_year:
        month -= 1
    return (year, month, day_of_year - _days_before_month(year, month))


def iso_weekday(ordinal: int) -> int:
    """Return the ISO weekday of an absolute day (Monday=1, Sunday=7).

    0001-01-01 (ordinal 1) was a Monday.
    """
    return (ordinal - 1) % 7 + 1


def add_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Return the (year, month) that lies ``months`` months after the given one.

    Examples:
        >>> add_months(2021, 12, 3)
        (2022, 3)
        >>> add_months(2021, 9, -12)
        (2020, 9)
    """
    years, month_index = divmod(month - 1 + months, 12)
    return (year + years, month_index + 1)


def iso_week_one_start(week_year: int) -> int:
    """Return the absolute day of the Monday that starts ISO week 1.

    Week 1 starts on the Monday on or before January 1 when January 1
    falls on Monday-Thursday, otherwise on the following Monday.

    Examples:
        >>> ordinal_to_ymd(iso_week_one_start(2009))
        (2008, 12, 29)
        >>> ordinal_to_ymd(iso_week_one_start(2021))
        (2021, 1, 4)
    """
    jan1 = ymd_to_ordinal(week_year, 1, 1)
    weekday = iso_weekday(jan1)
    if weekday <= 4:
        return jan1 - (weekday - 1)
    return jan1 + (8 - weekday)


def century_range(century: int) -> tuple[int, int]:
    """Return the range of the hundred years starting ``century * 100``."""
    first_year = century * 100
    return (ymd_to_ordinal(first_year, 1, 1), ymd_to_ordinal(first_year + 100, 1, 1))


def decade_range(decade: int) -> tuple[int, int]:
    """Return the range of the ten years starting ``decade * 10``."""
    first_year = decade * 10
    return (ymd_to_ordinal(first_year, 1, 1), ymd_to_ordinal(first_year + 10, 1, 1))


def year_range(year: int) -> tuple[int, int]:
    validate_year(year)
    return (ymd_to_ordinal(year, 1, 1), ymd_to_ordinal(year + 1, 1, 1))


def month_range(year: int, month: int) -> tuple[int, int]:
    validate_year(year)
    validate_month(month)
    next_year, next_month = add_months(year, month, 1)
    return (ymd_to_ordinal(year, month, 1), ymd_to_ordinal(next_year, next_month, 1))


def day_range(year: int, month: int, day: int) -> tuple[int, int]:
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)
    start = ymd_to_ordinal(year, month, day)
    return (start, start + 1)


def ordinal_day_range(year: int, ordinal_day: int) -> tuple[int, int]:
    """Return the one-day range of day ``ordinal_day`` of ``year``.

    Raises:
        RangeError: If the day falls outside the year, such as day 366
            of a common year.
    """
    validate_year(year)
    check_field("ordinal day", ordinal_day, 1, days_in_year(year), where=f"for {year:04d}")
    start = ymd_to_ordinal(year, 1, 1) + ordinal_day - 1
    return (start, start + 1)


@validate_range(week=(1, MAX_WEEK))
def week_range(week_year: int, week: int) -> tuple[int, int]:
    """Return the seven-day range of an ISO week.

    Week 53 only exists when its Monday still falls within ``week_year``.

    Raises:
        RangeError: If week is outside 1-53 or week 53 starts in the
            following year.

    Examples:
        >>> start, end = week_range(2009, 1)
        >>> ordinal_to_ymd(start), end - start
        ((2008, 12, 29), 7)
    """
    validate_year(week_year)
    start = iso_week_one_start(week_year) + 7 * (week - 1)
    if week == MAX_WEEK and ordinal_to_ymd(start)[0] != week_year:
        raise RangeError(f"week {week} does not exist in {week_year:04d}")
    return (start, start + 7)


@validate_range(week_day=(1, 7))
def week_day_range(week_year: int, week: int, week_day: int) -> tuple[int, int]:
    """Return the one-day range of a day within an ISO week."""
    week_start, _ = week_range(week_year, week)
    start = week_start + week_day - 1
    return (start, start + 1)


def sub_year_range(year: int, code: int) -> tuple[int, int]:
    """Return the range covered by a sub-year grouping code.

    Raises:
        UnsupportedError: For the hemisphere-ambiguous codes 21-24.
        RangeError: For codes that name no grouping, or a grouping that
            would start before the first supported year.

    Examples:
        >>> start, end = sub_year_range(2021, 34)  # second quarter
        >>> ordinal_to_ymd(start), ordinal_to_ymd(end)
        ((2021, 4, 1), (2021, 7, 1))
    """
    validate_year(year)
    if code in UNSUPPORTED_SUB_YEAR_CODES:
        raise UnsupportedError(
            f"sub-year grouping {code} is not supported: hemisphere is ambiguous"
        )
    if code not in SUB_YEAR_GROUPINGS:
        raise RangeError(
            f"sub-year grouping must be between {MIN_SUB_YEAR_CODE} and "
            f"{MAX_SUB_YEAR_CODE}, got {code}"
        )

    year_offset, start_month, span = SUB_YEAR_GROUPINGS[code]
    start_year = year + year_offset
    if start_year < MIN_YEAR:
        raise RangeError(
            f"sub-year grouping {code} of {year:04d} starts before year {MIN_YEAR:04d}"
        )
    end_year, end_month = add_months(start_year, start_month, span)
    return (
        ymd_to_ordinal(start_year, start_month, 1),
        ymd_to_ordinal(end_year, end_month, 1),
    )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "iso_weekday",
    "add_months",
    "iso_week_one_start",
    "century_range",
    "decade_range",
    "year_range",
    "month_range",
    "day_range",
    "ordinal_day_range",
    "week_range",
    "week_day_range",
    "sub_year_range",
]
