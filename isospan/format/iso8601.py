"""ISO 8601 parsing and canonical formatting.

This module provides functions for converting ISO 8601 strings to
temporal values and back.

Functions:
    parse_iso8601: Parse a date, time or date-time string.
    try_parse_iso8601: Same, returning a ParseResult instead of raising.
    parse_date: Parse a date string.
    parse_time: Parse a time string, with optional UTC offset.
    format_iso8601: Return the canonical string of a value.
    format_day: Render an absolute day number as YYYY-MM-DD.

Dates:
    - CC (century), CCC (decade), YYYY
    - YYYY-MM, YYYY-MM-DD, YYYYMMDD (YYYYMM is not accepted)
    - YYYY-DDD, YYYYDDD (ordinal)
    - YYYY-Www, YYYYWww, YYYY-Www-D, YYYYWwwD (ISO week)
    - YYYY-GG with GG in 21-41 (sub-year grouping)

Times (optional leading 'T', required for the basic multi-field forms):
    - hh, hh:mm, hh:mm:ss, Thhmm, Thhmmss
    - the last field may carry a ',' or '.' fraction
    - optional 'Z' or +hh, +hh:mm, +hhmm offset ('-' or U+2212 for west)

Examples:
    >>> from isospan.format import parse_iso8601, format_iso8601

    >>> format_iso8601(parse_iso8601("20210615"))
    '2021-06-15'

    >>> format_iso8601(parse_iso8601("2009W011T1030+0100"))
    '2008-12-29T09:30:00.0000000Z'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from isospan._internal.calendar import ordinal_to_ymd
from isospan.core.date import Date
from isospan.core.datetime import DateTime
from isospan.core.time import Time
from isospan.errors import FormatError, IsospanError
from isospan.format._patterns import (
    DATE_TEMPLATES,
    OFFSET_PATTERN,
    TIME_TEMPLATES,
    Style,
    match_first,
)
from isospan.units.offset import UtcOffset

logger = logging.getLogger(__name__)

# Type alias for temporal values
TemporalType = Union[Date, Time, DateTime]

_SEPARATOR = "T"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of try_parse_iso8601: a value, or the classified error.

    Attributes:
        spec: The input string.
        value: The parsed value, or None on failure.
        error: The FormatError, RangeError or UnsupportedError, or None.
    """

    spec: str
    value: TemporalType | None = None
    error: IsospanError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> TemporalType:
        """Return the value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


def parse_iso8601(spec: str) -> TemporalType:
    """Parse an ISO 8601 string into a Date, Time or DateTime.

    A 'T' after the first character splits the string into a date part
    and a time part, which must both parse and are combined. Otherwise
    the date patterns are tried, then the time patterns.

    Args:
        spec: The ISO 8601 string to parse.

    Returns:
        A Date, Time, or DateTime depending on the input.

    Raises:
        FormatError: If the string matches no pattern, has more than one
            'T', or breaks a style rule.
        RangeError: If a matched field is outside its domain.
        UnsupportedError: For sub-year codes 21-24.

    Examples:
        >>> parse_iso8601("2021-06")
        Date('2021-06')

        >>> parse_iso8601("T10:00+00:00") == parse_iso8601("T10:00Z")
        True

        >>> parse_iso8601("2021-06-15T10:30")
        DateTime('2021-06-15T10:30:00.0000000')
    """
    spec = spec.strip()
    if not spec:
        raise FormatError("empty string")

    if spec.find(_SEPARATOR) > 0:
        parts = spec.split(_SEPARATOR)
        if len(parts) > 2:
            raise FormatError(f"more than one {_SEPARATOR!r} separator in {spec!r}")
        date_part, time_part = parts
        return DateTime.combine(parse_date(date_part), parse_time(_SEPARATOR + time_part))

    found = match_first(DATE_TEMPLATES, spec)
    if found is not None:
        template, match = found
        logger.debug("matched %s date pattern for %r", template.name, spec)
        return template.extractor(match)

    return parse_time(spec)


def try_parse_iso8601(spec: str) -> ParseResult:
    """Parse like parse_iso8601, but return failures instead of raising.

    Examples:
        >>> result = try_parse_iso8601("2021-22")
        >>> result.ok
        False
        >>> type(result.error).__name__
        'UnsupportedError'
    """
    try:
        return ParseResult(spec=spec, value=parse_iso8601(spec))
    except IsospanError as exc:
        logger.debug("rejected %r: %s: %s", spec, type(exc).__name__, exc)
        return ParseResult(spec=spec, error=exc)


def parse_date(spec: str) -> Date:
    """Parse an ISO 8601 date string.

    Raises:
        FormatError: If no date pattern matches.
        RangeError: If a field is out of range.
        UnsupportedError: For sub-year codes 21-24.
    """
    spec = spec.strip()
    found = match_first(DATE_TEMPLATES, spec)
    if found is None:
        raise FormatError(f"not an ISO 8601 date: {spec!r}")

    template, match = found
    logger.debug("matched %s date pattern for %r", template.name, spec)
    return template.extractor(match)


def parse_time(spec: str) -> Time:
    """Parse an ISO 8601 time string with an optional UTC offset.

    An offset written with minutes fixes the separator style of the time
    itself (ISO 8601-1:2019 5.4.3.2): '+01:00' only follows extended
    times, '+0100' only basic ones.

    Raises:
        FormatError: If no time pattern matches, the styles disagree, or
            a zero offset is written with a minus sign.
        OffsetError: If the offset hour or minute is out of range.
        RangeError: If a time field is out of range.

    Examples:
        >>> parse_time("T1030+0100")
        Time('T10:30+01:00')

        >>> parse_time("T1030+01:00")
        Traceback (most recent call last):
        ...
        FormatError: not an ISO 8601 extended time: 'T1030+01:00'
    """
    spec = spec.strip()
    body, offset, style = _split_offset(spec)

    found = match_first(TIME_TEMPLATES, body, style)
    if found is None:
        qualifier = f" {style.value}" if style is not None else ""
        raise FormatError(f"not an ISO 8601{qualifier} time: {spec!r}")

    template, match = found
    logger.debug("matched %s time pattern for %r", template.name, spec)
    hour, minute, second = template.extractor(match)
    return Time(hour, minute, second, offset=offset)


def _split_offset(spec: str) -> tuple[str, UtcOffset | None, Style | None]:
    """Strip a trailing offset from a time string.

    Returns:
        The remaining time body, the offset (None if absent), and the
        separator style the offset imposes (None if it imposes none).
    """
    if spec.endswith("Z"):
        return spec[:-1], UtcOffset.utc(), None

    match = OFFSET_PATTERN.search(spec)
    if match is None:
        return spec, None, None

    sign_char, hours_text, colon, minutes_text = match.groups()
    sign = 1 if sign_char == "+" else -1
    offset = UtcOffset.from_components(
        sign, int(hours_text), int(minutes_text) if minutes_text else 0
    )

    # ISO 8601-1:2019 4.3.13: a zero offset is always '+'
    if offset.is_utc and sign_char != "+":
        raise FormatError(f"zero UTC offset must be written with '+': {spec!r}")

    style = None
    if minutes_text is not None:
        style = Style.EXTENDED if colon else Style.BASIC
    return spec[: match.start()], offset, style


def format_iso8601(value: TemporalType) -> str:
    """Return the canonical ISO 8601 string of a temporal value.

    Dates keep their granularity in extended form, Times keep their
    supplied fields in extended form, and DateTimes are always written
    in full with seven fractional second digits.

    Raises:
        TypeError: If value is not a Date, Time or DateTime.

    Examples:
        >>> format_iso8601(parse_iso8601("2021W237"))
        '2021-W23-7'

        >>> format_iso8601(parse_iso8601("T1030,5-0500"))
        'T10:30.5-05:00'
    """
    if isinstance(value, DateTime):
        return value.to_iso_format()
    elif isinstance(value, Date):
        return value.to_iso_format()
    elif isinstance(value, Time):
        return value.to_iso_format()
    else:
        raise TypeError(
            f"expected Date, Time, or DateTime, got {type(value).__name__}"
        )


def format_day(ordinal: int) -> str:
    """Render an absolute day number (0001-01-01 = 1) as YYYY-MM-DD.

    Examples:
        >>> format_day(parse_iso8601("2009-W01").inclusive_start)
        '2008-12-29'
    """
    year, month, day = ordinal_to_ymd(ordinal)
    return f"{year:04d}-{month:02d}-{day:02d}"


__all__ = [
    "ParseResult",
    "TemporalType",
    "parse_iso8601",
    "try_parse_iso8601",
    "parse_date",
    "parse_time",
    "format_iso8601",
    "format_day",
]
