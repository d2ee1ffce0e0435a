"""ISO 8601 parsing and canonical formatting.

Functions:
    parse_iso8601: Parse an ISO 8601 date, time or date-time string.
    try_parse_iso8601: Parse without raising, returning a ParseResult.
    parse_date: Parse an ISO 8601 date string.
    parse_time: Parse an ISO 8601 time string.
    format_iso8601: Format a temporal value as its canonical string.
    format_day: Format an absolute day number as YYYY-MM-DD.

Examples:
    >>> from isospan.format import parse_iso8601, format_iso8601

    >>> format_iso8601(parse_iso8601("2021166"))
    '2021-166'
"""

from __future__ import annotations

from isospan.format.iso8601 import (
    ParseResult,
    TemporalType,
    format_day,
    format_iso8601,
    parse_date,
    parse_iso8601,
    parse_time,
    try_parse_iso8601,
)

__all__: list[str] = [
    "ParseResult",
    "TemporalType",
    "parse_iso8601",
    "try_parse_iso8601",
    "parse_date",
    "parse_time",
    "format_iso8601",
    "format_day",
]
