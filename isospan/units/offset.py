"""UTC offset representation.

This module provides the UtcOffset class for representing a fixed
offset from UTC, without any IANA time-zone database support.
"""

from __future__ import annotations

from isospan._internal.constants import (
    MAX_OFFSET_HOURS,
    MAX_OFFSET_MINUTES,
    MINUTES_PER_HOUR,
)
from isospan.errors import OffsetError


class UtcOffset:
    """A fixed UTC offset in whole minutes.

    The offset is stored in minutes from UTC, with positive values being
    east of UTC (ahead in time) and negative values being west of UTC
    (behind in time). Its magnitude is at most 24 hours.

    Attributes:
        total_minutes: The signed offset in minutes.
        hours: The signed hour component.
        minutes: The unsigned minute component.

    Examples:
        >>> UtcOffset.utc().is_utc
        True

        >>> off = UtcOffset.from_components(-1, 5, 30)
        >>> off.total_minutes
        -330
        >>> str(off)
        '-05:30'
    """

    __slots__ = ("_total_minutes",)

    def __init__(self, total_minutes: int) -> None:
        """Create a UtcOffset from signed minutes.

        Raises:
            OffsetError: If the magnitude exceeds 24 hours.
        """
        if abs(total_minutes) > MAX_OFFSET_MINUTES:
            raise OffsetError(
                f"offset must be within +/-{MAX_OFFSET_HOURS:02d}:00, "
                f"got {total_minutes} minutes"
            )
        self._total_minutes: int = total_minutes

    @classmethod
    def utc(cls) -> UtcOffset:
        """Return the zero offset."""
        return cls(0)

    @classmethod
    def from_components(cls, sign: int, hours: int, minutes: int = 0) -> UtcOffset:
        """Create a UtcOffset from a sign and unsigned hour and minute fields.

        Args:
            sign: 1 for east of UTC, -1 for west.
            hours: Hour field (0-24).
            minutes: Minute field (0-59).

        Raises:
            OffsetError: If a field or the total is out of range.
        """
        if hours > MAX_OFFSET_HOURS:
            raise OffsetError(f"offset hour must be at most {MAX_OFFSET_HOURS}, got {hours}")
        if minutes >= MINUTES_PER_HOUR:
            raise OffsetError(f"offset minute must be at most 59, got {minutes}")
        return cls(sign * (hours * MINUTES_PER_HOUR + minutes))

    @property
    def total_minutes(self) -> int:
        return self._total_minutes

    @property
    def hours(self) -> int:
        """Return the hour component, carrying the offset's sign."""
        magnitude = abs(self._total_minutes) // MINUTES_PER_HOUR
        return -magnitude if self._total_minutes < 0 else magnitude

    @property
    def minutes(self) -> int:
        """Return the minute component (always non-negative)."""
        return abs(self._total_minutes) % MINUTES_PER_HOUR

    @property
    def is_utc(self) -> bool:
        return self._total_minutes == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._total_minutes == other._total_minutes

    def __hash__(self) -> int:
        return hash(self._total_minutes)

    def __repr__(self) -> str:
        return f"UtcOffset({self._total_minutes})"

    def __str__(self) -> str:
        """Return the canonical suffix: 'Z' for UTC, else '+HH:MM' or '-HH:MM'."""
        if self._total_minutes == 0:
            return "Z"

        sign = "+" if self._total_minutes > 0 else "-"
        magnitude = abs(self._total_minutes)
        hours, minutes = divmod(magnitude, MINUTES_PER_HOUR)
        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["UtcOffset"]
