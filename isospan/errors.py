"""isospan exception hierarchy.

All isospan-specific exceptions inherit from IsospanError. The three
classified failure kinds are FormatError, RangeError and UnsupportedError;
a caller can tell them apart with ``except`` clauses or ``isinstance``.
"""

from __future__ import annotations


class IsospanError(Exception):
    """Base exception for all isospan errors."""

    pass


class FormatError(IsospanError):
    """Input text does not match a recognized ISO 8601 form.

    Raised when a string cannot be read as a temporal value at all.

    Examples:
        - No date or time pattern matches
        - More than one 'T' separator
        - Offset and time body mix basic and extended style
        - A zero offset spelled with a minus sign
        - A date coarser than one day combined with a time
    """

    pass


class RangeError(IsospanError):
    """A recognized form carries a numeric field outside its domain.

    Examples:
        - Month 00 or 13
        - Day 31 in a 30-day month
        - Ordinal day 366 in a common year
        - Week 53 in a year with 52 weeks
        - Week day outside 1-7
        - Sub-year grouping code outside 21-41
    """

    pass


class UnsupportedError(IsospanError):
    """A recognized form that is intentionally not implemented.

    Raised for the hemisphere-ambiguous season codes 21-24, which cannot be
    mapped to months without knowing the hemisphere.
    """

    pass


class OffsetError(FormatError, RangeError):
    """UTC offset hour or minute out of range.

    An out-of-range offset rejects the whole time string, so it is a
    FormatError; it is also a RangeError because a numeric field is
    outside its domain.

    Examples:
        - "+25:00"
        - "+05:60"
        - "+24:30" (magnitude over 24 hours)
    """

    pass


__all__ = [
    "IsospanError",
    "FormatError",
    "RangeError",
    "UnsupportedError",
    "OffsetError",
]
