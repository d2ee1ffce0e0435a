"""Date class representing a calendar period.

This module provides the Date class: a century, decade, year, month, day,
ordinal day, ISO week, ISO week day or sub-year grouping, each normalized
to a half-open range of absolute days.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isospan._internal.calendar import (
    century_range,
    day_range,
    decade_range,
    month_range,
    ordinal_day_range,
    ordinal_to_ymd,
    sub_year_range,
    week_day_range,
    week_range,
    year_range,
)
from isospan._internal.constants import TICKS_PER_DAY
from isospan._internal.validation import check_field
from isospan.units.granularity import Granularity

if TYPE_CHECKING:
    from isospan.core.datetime import DateTime


class Date:
    """A calendar period in the proleptic Gregorian calendar.

    Exactly one granularity is populated per Date. Fields that do not
    belong to it read as None. Whatever the granularity, the Date covers
    the half-open range ``[inclusive_start, exclusive_end)`` of absolute
    days (0001-01-01 is day 1), and ``inclusive_start < exclusive_end``
    always holds.

    Use the constructor for year, month and day dates and the ``from_*``
    class methods for the other granularities. Each computes the range
    once, from all of its fields, and the result is immutable.

    Attributes:
        granularity: Which fields are populated.
        inclusive_start: First absolute day in the period.
        exclusive_end: First absolute day after the period.

    Examples:
        >>> Date(2021, 6).granularity
        <Granularity.MONTH: 'month'>

        >>> d = Date.from_week(2009, 1)
        >>> d.start_ymd
        (2008, 12, 29)
        >>> d.exclusive_end - d.inclusive_start
        7

        >>> str(Date.from_sub_year(2021, 34))
        '2021-34'
    """

    __slots__ = (
        "_granularity",
        "_century",
        "_decade",
        "_year",
        "_month",
        "_day",
        "_ordinal_day",
        "_week_year",
        "_week",
        "_week_day",
        "_sub_year",
        "_start",
        "_end",
    )

    def __init__(self, year: int, month: int | None = None, day: int | None = None) -> None:
        """Create a year, month or day Date.

        Args:
            year: The year (0-9999).
            month: The month (1-12), or None for a whole year.
            day: The day of the month, or None for a whole month.

        Raises:
            RangeError: If any component is out of range.
            ValueError: If day is given without month.
        """
        if month is None and day is not None:
            raise ValueError("day requires a month")

        if day is not None:
            granularity = Granularity.DAY
            start, end = day_range(year, month, day)  # type: ignore[arg-type]
        elif month is not None:
            granularity = Granularity.MONTH
            start, end = month_range(year, month)
        else:
            granularity = Granularity.YEAR
            start, end = year_range(year)

        self._init_fields(granularity, start, end, year=year, month=month, day=day)

    def _init_fields(
        self,
        granularity: Granularity,
        start: int,
        end: int,
        *,
        century: int | None = None,
        decade: int | None = None,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        ordinal_day: int | None = None,
        week_year: int | None = None,
        week: int | None = None,
        week_day: int | None = None,
        sub_year: int | None = None,
    ) -> None:
        self._granularity = granularity
        self._century = century
        self._decade = decade
        self._year = year
        self._month = month
        self._day = day
        self._ordinal_day = ordinal_day
        self._week_year = week_year
        self._week = week
        self._week_day = week_day
        self._sub_year = sub_year
        self._start = start
        self._end = end

    @classmethod
    def _create(cls, granularity: Granularity, start: int, end: int, **fields: int) -> Date:
        """Internal factory that bypasses __init__ once the range is known."""
        instance = object.__new__(cls)
        instance._init_fields(granularity, start, end, **fields)
        return instance

    @classmethod
    def from_century(cls, century: int) -> Date:
        """Create the Date for a two-digit century: 20 is 2000-2099.

        Raises:
            RangeError: If century is outside 0-99.
        """
        check_field("century", century, 0, 99)
        start, end = century_range(century)
        return cls._create(Granularity.CENTURY, start, end, century=century)

    @classmethod
    def from_decade(cls, decade: int) -> Date:
        """Create the Date for a three-digit decade: 202 is 2020-2029.

        Raises:
            RangeError: If decade is outside 0-999.
        """
        check_field("decade", decade, 0, 999)
        start, end = decade_range(decade)
        return cls._create(Granularity.DECADE, start, end, decade=decade)

    @classmethod
    def from_year(cls, year: int) -> Date:
        return cls(year)

    @classmethod
    def from_year_month(cls, year: int, month: int) -> Date:
        return cls(year, month)

    @classmethod
    def from_calendar(cls, year: int, month: int, day: int) -> Date:
        return cls(year, month, day)

    @classmethod
    def from_ordinal_day(cls, year: int, ordinal_day: int) -> Date:
        """Create the Date for day ``ordinal_day`` (1-366) of ``year``.

        Raises:
            RangeError: If the day does not fall within the year.

        Examples:
            >>> Date.from_ordinal_day(2021, 166).start_ymd
            (2021, 6, 15)
        """
        start, end = ordinal_day_range(year, ordinal_day)
        return cls._create(
            Granularity.ORDINAL_DAY, start, end, year=year, ordinal_day=ordinal_day
        )

    @classmethod
    def from_week(cls, week_year: int, week: int) -> Date:
        """Create the Date for ISO week ``week`` of ``week_year``.

        Raises:
            RangeError: If week is outside 1-53, or is 53 in a year
                whose 53rd week would start in the following year.
        """
        start, end = week_range(week_year, week)
        return cls._create(Granularity.WEEK, start, end, week_year=week_year, week=week)

    @classmethod
    def from_week_day(cls, week_year: int, week: int, week_day: int) -> Date:
        """Create the Date for a day (1=Monday, 7=Sunday) of an ISO week.

        Raises:
            RangeError: If week or week_day is out of range.
        """
        start, end = week_day_range(week_year, week, week_day)
        return cls._create(
            Granularity.WEEK_DAY,
            start,
            end,
            week_year=week_year,
            week=week,
            week_day=week_day,
        )

    @classmethod
    def from_sub_year(cls, year: int, sub_year: int) -> Date:
        """Create the Date for a season, quarter, quadrimester or semester.

        Raises:
            UnsupportedError: For the hemisphere-ambiguous codes 21-24.
            RangeError: For codes outside 21-41.
        """
        start, end = sub_year_range(year, sub_year)
        return cls._create(Granularity.SUB_YEAR, start, end, year=year, sub_year=sub_year)

    @property
    def granularity(self) -> Granularity:
        return self._granularity

    @property
    def century(self) -> int | None:
        return self._century

    @property
    def decade(self) -> int | None:
        return self._decade

    @property
    def year(self) -> int | None:
        return self._year

    @property
    def month(self) -> int | None:
        return self._month

    @property
    def day(self) -> int | None:
        return self._day

    @property
    def ordinal_day(self) -> int | None:
        return self._ordinal_day

    @property
    def week_year(self) -> int | None:
        return self._week_year

    @property
    def week(self) -> int | None:
        return self._week

    @property
    def week_day(self) -> int | None:
        return self._week_day

    @property
    def sub_year(self) -> int | None:
        return self._sub_year

    @property
    def inclusive_start(self) -> int:
        """Return the first absolute day in this period."""
        return self._start

    @property
    def exclusive_end(self) -> int:
        """Return the first absolute day after this period."""
        return self._end

    @property
    def start_ymd(self) -> tuple[int, int, int]:
        return ordinal_to_ymd(self._start)

    @property
    def end_ymd(self) -> tuple[int, int, int]:
        return ordinal_to_ymd(self._end)

    @property
    def start_ticks(self) -> int:
        """Return the start of this period in ticks since 0001-01-01T00:00."""
        return (self._start - 1) * TICKS_PER_DAY

    @property
    def end_ticks(self) -> int:
        return (self._end - 1) * TICKS_PER_DAY

    @property
    def resolves_to_day(self) -> bool:
        """Return True if this Date names exactly one calendar day."""
        return self._granularity.resolves_to_day

    def contains(self, other: Date | DateTime) -> bool:
        """Check if this period contains another period or an instant.

        For a Date: True if ``other`` lies entirely within this period.
        For a DateTime: True if its instant falls in ``[start, end)``.

        Raises:
            TypeError: If other is neither a Date nor a DateTime.

        Examples:
            >>> Date(2021).contains(Date(2021, 6))
            True
            >>> Date(2021, 6).contains(Date(2021))
            False
        """
        from isospan.core.datetime import DateTime

        if isinstance(other, Date):
            return self._start <= other._start and other._end <= self._end
        if isinstance(other, DateTime):
            return self.start_ticks <= other.instant < self.end_ticks
        raise TypeError(
            f"Date.contains() expects a Date or DateTime, got {type(other).__name__}"
        )

    def overlaps(self, other: Date) -> bool:
        """Check if this period shares at least one day with another.

        Examples:
            >>> Date(2021, 6).overlaps(Date.from_sub_year(2021, 26))
            True
            >>> Date(2021, 6).overlaps(Date(2021, 7))
            False
        """
        if not isinstance(other, Date):
            raise TypeError(
                f"Date.overlaps() expects a Date, got {type(other).__name__}"
            )
        return self._start < other._end and other._start < self._end

    def to_iso_format(self) -> str:
        """Return the canonical ISO 8601 form of this Date.

        Returns:
            One of ``CC``, ``DDD``, ``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD``,
            ``YYYY-DDD``, ``YYYY-Www``, ``YYYY-Www-D`` or ``YYYY-GG``.

        Examples:
            >>> Date.from_ordinal_day(2021, 5).to_iso_format()
            '2021-005'
            >>> Date.from_week_day(2009, 1, 4).to_iso_format()
            '2009-W01-4'
        """
        g = self._granularity
        if g is Granularity.CENTURY:
            return f"{self._century:02d}"
        if g is Granularity.DECADE:
            return f"{self._decade:03d}"
        if g is Granularity.DAY:
            return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"
        if g is Granularity.MONTH:
            return f"{self._year:04d}-{self._month:02d}"
        if g is Granularity.ORDINAL_DAY:
            return f"{self._year:04d}-{self._ordinal_day:03d}"
        if g is Granularity.WEEK_DAY:
            return f"{self._week_year:04d}-W{self._week:02d}-{self._week_day}"
        if g is Granularity.WEEK:
            return f"{self._week_year:04d}-W{self._week:02d}"
        if g is Granularity.SUB_YEAR:
            return f"{self._year:04d}-{self._sub_year:02d}"
        if g is Granularity.YEAR:
            return f"{self._year:04d}"
        raise AssertionError(f"unhandled granularity {g!r}")

    def __eq__(self, other: object) -> bool:
        """Two Dates are equal when they cover the same range of days.

        Granularity does not matter: ``2021-001`` equals ``2021-01-01``.
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"Date({self.to_iso_format()!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Date"]
