"""isospan: ISO 8601 dates, times and periods as comparable ranges.

isospan parses the ISO 8601 date, time and date-time forms, normalizes
every date to a half-open range of days and every time to a tick count,
and answers containment, overlap and ordering questions about them.

Core Types:
    Date: A century, decade, year, month, day, ordinal day, ISO week,
        ISO week day or sub-year grouping (season, quarter, ...)
    Time: Time of day with optional fractional last field and UTC offset
    DateTime: A single calendar day combined with a Time

Units:
    Granularity: Which fields of a Date are populated
    UtcOffset: Fixed offset from UTC

Format Functions:
    parse_iso8601: Parse an ISO 8601 date/time/date-time string
    try_parse_iso8601: Parse without raising
    format_iso8601: Canonical ISO 8601 string of a value

Queries:
    evaluate: Evaluate ';' lists and '^' comparisons of ISO 8601 strings

Exceptions:
    IsospanError: Base exception
    FormatError: Text matches no recognized form
    RangeError: A field is outside its domain
    UnsupportedError: A recognized form that is not implemented
    OffsetError: UTC offset out of range

Example:
    >>> from isospan import parse_iso8601, contains
    >>> contains(parse_iso8601("2021-34"), parse_iso8601("2021-05-17T10:00Z"))
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from isospan.core.date import Date
from isospan.core.datetime import DateTime
from isospan.core.time import Time

# Units
from isospan.units.granularity import Granularity
from isospan.units.offset import UtcOffset

# Exceptions
from isospan.errors import (
    FormatError,
    IsospanError,
    OffsetError,
    RangeError,
    UnsupportedError,
)

# Format functions
from isospan.format import (
    ParseResult,
    format_iso8601,
    parse_date,
    parse_iso8601,
    parse_time,
    try_parse_iso8601,
)

# Comparison and range functions
from isospan.arithmetic import (
    compare,
    contains,
    equal,
    is_contained_by,
    overlaps,
)

# Queries
from isospan.query import evaluate

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Time",
    # Units
    "Granularity",
    "UtcOffset",
    # Exceptions
    "IsospanError",
    "FormatError",
    "RangeError",
    "UnsupportedError",
    "OffsetError",
    # Format functions
    "ParseResult",
    "parse_iso8601",
    "try_parse_iso8601",
    "parse_date",
    "parse_time",
    "format_iso8601",
    # Comparison and range functions
    "equal",
    "compare",
    "contains",
    "is_contained_by",
    "overlaps",
    # Queries
    "evaluate",
]
