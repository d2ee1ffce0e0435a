"""DateTime class combining a day-resolving Date with a Time.

This module provides the DateTime class for representing a single instant,
measured in ticks (100 ns) since 0001-01-01T00:00 of the proleptic
Gregorian calendar.
"""

from __future__ import annotations

from isospan._internal.calendar import ordinal_to_ymd
from isospan._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    TICK_DIGITS,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from isospan.core.date import Date
from isospan.core.time import Time
from isospan.errors import FormatError, RangeError


class DateTime:
    """A calendar day combined with a time of day.

    A DateTime is built only from a Date that names one calendar day (a
    day, ordinal day or week day) and a Time. Its ``instant`` is the
    start of that day plus the Time's normalized ticks, so a zone-aware
    DateTime is held in UTC and may land on a neighbouring day.

    The supplied Date and Time are kept, so the fields that were given
    remain inspectable.

    Attributes:
        date: The day-resolving Date.
        time: The Time.
        instant: Ticks since 0001-01-01T00:00 (UTC when zone-aware).

    Examples:
        >>> dt = DateTime.combine(Date(2021, 6, 15), Time(10, offset=UtcOffset(120)))
        >>> str(dt)
        '2021-06-15T08:00:00.0000000Z'

        >>> DateTime.combine(Date(2021, 6), Time(10))
        Traceback (most recent call last):
        ...
        FormatError: cannot combine a month date with a time: '2021-06' does not name a single day
    """

    __slots__ = ("_date", "_time", "_instant")

    def __init__(self, date: Date, time: Time) -> None:
        """Combine a Date and a Time.

        Raises:
            FormatError: If the Date does not resolve to one calendar day.
            RangeError: If the instant falls outside years 0000-9999 in UTC.
        """
        if not date.resolves_to_day:
            raise FormatError(
                f"cannot combine a {date.granularity.value.replace('_', ' ')} date "
                f"with a time: {date.to_iso_format()!r} does not name a single day"
            )
        instant = date.start_ticks + time.ticks
        year = ordinal_to_ymd(instant // TICKS_PER_DAY + 1)[0]
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise RangeError(
                f"{date.to_iso_format()}{time.to_iso_format()} falls outside "
                f"years {MIN_YEAR:04d}-{MAX_YEAR:04d} in UTC"
            )
        self._date: Date = date
        self._time: Time = time
        self._instant: int = instant

    @classmethod
    def combine(cls, date: Date, time: Time) -> DateTime:
        """Create a DateTime from a day-resolving Date and a Time."""
        return cls(date, time)

    @property
    def date(self) -> Date:
        return self._date

    @property
    def time(self) -> Time:
        return self._time

    @property
    def instant(self) -> int:
        """Return the instant in ticks since 0001-01-01T00:00."""
        return self._instant

    @property
    def is_aware(self) -> bool:
        return self._time.is_aware

    @property
    def is_naive(self) -> bool:
        return self._time.is_naive

    def to_iso_format(self) -> str:
        """Return the canonical ISO 8601 form of this DateTime.

        Always the full extended form with seven fractional digits,
        followed by 'Z' when zone-aware, whatever style was parsed.

        Examples:
            >>> DateTime.combine(Date.from_week_day(2009, 1, 1), Time(23, 59)).to_iso_format()
            '2008-12-29T23:59:00.0000000'
        """
        days, ticks_of_day = divmod(self._instant, TICKS_PER_DAY)
        year, month, day = ordinal_to_ymd(days + 1)

        hours, rest = divmod(ticks_of_day, TICKS_PER_HOUR)
        minutes, rest = divmod(rest, TICKS_PER_MINUTE)
        seconds, fraction = divmod(rest, TICKS_PER_SECOND)

        text = (
            f"{year:04d}-{month:02d}-{day:02d}"
            f"T{hours:02d}:{minutes:02d}:{seconds:02d}.{fraction:0{TICK_DIGITS}d}"
        )
        if self.is_aware:
            text += "Z"
        return text

    def __eq__(self, other: object) -> bool:
        """Two DateTimes are equal when their instants are equal.

        A zone-naive DateTime is read as UTC.
        """
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant == other._instant

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant < other._instant

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant <= other._instant

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant > other._instant

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant >= other._instant

    def __hash__(self) -> int:
        return hash(self._instant)

    def __repr__(self) -> str:
        return f"DateTime({self.to_iso_format()!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["DateTime"]
