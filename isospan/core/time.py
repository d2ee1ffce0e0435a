"""Time class representing a time of day.

This module provides the Time class: an hour with optional minute and
second, where the most granular supplied field may carry a decimal
fraction, plus an optional UTC offset. Every Time is normalized to a
tick count (100 ns units) that is shifted to UTC when an offset is known.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Union

from isospan._internal.constants import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    TICKS_PER_HOUR,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from isospan.errors import RangeError
from isospan.units.offset import UtcOffset

# A clock field: integral, or a decimal fraction kept exactly as written
Number = Union[int, Decimal]

# 60 admits a positive leap second
_SECOND_LIMIT = 61


def _as_number(name: str, value: Number | float | str) -> Number:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be a number, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (float, str)):
        return Decimal(str(value))
    raise TypeError(f"{name} must be a number, got {type(value).__name__}")


def _as_integral(name: str, value: Number) -> int:
    if isinstance(value, int):
        return value
    if value != value.to_integral_value():
        raise RangeError(
            f"{name} must be integral when a more granular field follows, got {value}"
        )
    return int(value)


class Time:
    """A time of day with an optional fixed UTC offset.

    The hour is always present; minute and second are optional, and a
    second requires a minute. Only the most granular field supplied may be
    fractional. Fractions are stored as ``Decimal`` with their digits
    exactly as supplied.

    ``ticks`` is the time of day in 100-nanosecond units. When an offset is
    present it is subtracted, so ``ticks`` is in UTC and may fall outside
    ``[0, one day)``; the Time is then zone-aware. Without an offset the
    Time is zone-naive and ``ticks`` is local.

    Attributes:
        hour: The hour (0-24).
        minute: The minute (0-59), or None.
        second: The second (0-60), or None.
        offset: The UtcOffset, or None if zone-naive.
        ticks: Normalized tick count.

    Examples:
        >>> t = Time(10, 30)
        >>> t.is_aware
        False
        >>> str(t)
        'T10:30'

        >>> t = Time(Decimal("10.5"), offset=UtcOffset(60))
        >>> str(t)
        'T10.5+01:00'
        >>> t.ticks == 9 * 36_000_000_000 + 30 * 600_000_000
        True
    """

    __slots__ = ("_hour", "_minute", "_second", "_offset", "_ticks")

    def __init__(
        self,
        hour: Number,
        minute: Number | None = None,
        second: Number | None = None,
        *,
        offset: UtcOffset | None = None,
    ) -> None:
        """Create a Time from its fields.

        Args:
            hour: The hour (0-24). Fractional only if it is the last field.
            minute: The minute (0-59). Fractional only if it is the last field.
            second: The second (0-60). May be fractional.
            offset: Optional UTC offset.

        Raises:
            RangeError: If a field is out of range, a non-terminal field is
                fractional, or hour 24 is followed by a non-zero field.
            ValueError: If second is given without minute.
        """
        if second is not None and minute is None:
            raise ValueError("second requires a minute")

        hour = _as_number("hour", hour)
        if minute is not None:
            minute = _as_number("minute", minute)
        if second is not None:
            second = _as_number("second", second)

        # Everything but the last supplied field must be integral
        if minute is not None:
            hour = _as_integral("hour", hour)
        if second is not None:
            minute = _as_integral("minute", minute)  # type: ignore[arg-type]

        if not 0 <= hour <= HOURS_PER_DAY:
            raise RangeError(f"hour must be between 0 and {HOURS_PER_DAY}, got {hour}")
        if minute is not None and not 0 <= minute < MINUTES_PER_HOUR:
            raise RangeError(f"minute must be between 0 and 59, got {minute}")
        if second is not None and not 0 <= second < _SECOND_LIMIT:
            raise RangeError(f"second must be between 0 and 60, got {second}")
        if hour == HOURS_PER_DAY and (minute or second):
            raise RangeError("hour 24 may only be followed by zero minutes and seconds")

        exact = Fraction(hour) * TICKS_PER_HOUR
        if minute is not None:
            exact += Fraction(minute) * TICKS_PER_MINUTE
        if second is not None:
            exact += Fraction(second) * TICKS_PER_SECOND

        # Truncate to whole ticks, never round
        ticks = int(exact)
        if offset is not None:
            ticks -= offset.total_minutes * TICKS_PER_MINUTE

        self._hour: Number = hour
        self._minute: Number | None = minute
        self._second: Number | None = second
        self._offset: UtcOffset | None = offset
        self._ticks: int = ticks

    @property
    def hour(self) -> Number:
        return self._hour

    @property
    def minute(self) -> Number | None:
        return self._minute

    @property
    def second(self) -> Number | None:
        return self._second

    @property
    def offset(self) -> UtcOffset | None:
        return self._offset

    @property
    def offset_minutes(self) -> int | None:
        """Return the signed UTC offset in minutes, or None if zone-naive."""
        return None if self._offset is None else self._offset.total_minutes

    @property
    def ticks(self) -> int:
        """Return the time of day in 100 ns ticks, in UTC when zone-aware."""
        return self._ticks

    @property
    def is_aware(self) -> bool:
        return self._offset is not None

    @property
    def is_naive(self) -> bool:
        return self._offset is None

    def to_iso_format(self) -> str:
        """Return the canonical ISO 8601 form of this Time.

        The supplied fields are written in extended form behind a leading
        'T'; the last one keeps its fraction. A zone-aware Time ends with
        'Z' or its '+HH:MM' offset.

        Examples:
            >>> Time(9, 5, Decimal("7.25")).to_iso_format()
            'T09:05:07.25'
            >>> Time(10, offset=UtcOffset(0)).to_iso_format()
            'T10Z'
        """
        parts = [_format_field(self._hour)]
        if self._minute is not None:
            parts.append(_format_field(self._minute))
        if self._second is not None:
            parts.append(_format_field(self._second))

        suffix = "" if self._offset is None else str(self._offset)
        return "T" + ":".join(parts) + suffix

    def __eq__(self, other: object) -> bool:
        """Two Times are equal when their normalized ticks are equal.

        A zone-naive Time is read as UTC, so ``T10:00`` equals ``T10:00Z``.
        """
        if not isinstance(other, Time):
            return NotImplemented
        return self._ticks == other._ticks

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __repr__(self) -> str:
        return f"Time({self.to_iso_format()!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


def _format_field(value: Number) -> str:
    """Zero-pad the integer part of a field to two digits, keeping any fraction."""
    if isinstance(value, int):
        return f"{value:02d}"
    whole, _, fraction = format(value, "f").partition(".")
    text = f"{int(whole):02d}"
    if fraction:
        text += "." + fraction
    return text


__all__ = ["Time"]
