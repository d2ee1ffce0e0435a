"""Pattern templates for ISO 8601 date and time strings.

Each template pairs a fixed-shape regular expression with an extractor.
Date extractors build the Date directly; time extractors return the
(hour, minute, second) fields, leaving the offset to the dispatcher.

The tables are ordered: the dispatcher takes the first template that
matches.

Internal module - use parse_iso8601() from isospan.format instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable

from isospan._internal.constants import MAX_MONTH_FIELD
from isospan.core.date import Date
from isospan.core.time import Number


class Style(Enum):
    """ISO 8601 separator style of a template."""

    BASIC = "basic"
    EXTENDED = "extended"
    EITHER = "either"


@dataclass(frozen=True)
class FormatTemplate:
    """A pattern template for one ISO 8601 shape.

    Attributes:
        name: Human-readable name for the shape.
        pattern: Compiled regex pattern for matching.
        style: Separator style, used to keep a time and its offset consistent.
        extractor: Function turning a regex match into a value or fields.
    """

    name: str
    pattern: re.Pattern[str]
    style: Style
    extractor: Callable[[re.Match[str]], Any]


def _number(text: str) -> Number:
    """Read a field that may carry a ',' or '.' decimal fraction."""
    if "," in text or "." in text:
        return Decimal(text.replace(",", "."))
    return int(text)


# Dates


def _extract_year_month(match: re.Match[str]) -> Date:
    year = int(match.group(1))
    month = int(match.group(2))
    if month > MAX_MONTH_FIELD:
        return Date.from_sub_year(year, month)
    return Date(year, month)


def _date(name: str, pattern: str, extractor: Callable[[re.Match[str]], Date]) -> FormatTemplate:
    return FormatTemplate(
        name=name,
        pattern=re.compile(pattern, re.ASCII),
        style=Style.EITHER,
        extractor=extractor,
    )


# YYYYMM is deliberately absent: ISO 8601 forbids the basic year-month
# form because it reads like a two-digit-year date.
DATE_TEMPLATES: tuple[FormatTemplate, ...] = (
    _date("century", r"^(\d{2})$", lambda m: Date.from_century(int(m.group(1)))),
    _date("decade", r"^(\d{3})$", lambda m: Date.from_decade(int(m.group(1)))),
    _date("year", r"^(\d{4})$", lambda m: Date(int(m.group(1)))),
    _date("year-month", r"^(\d{4})-(\d{2})$", _extract_year_month),
    _date(
        "calendar-extended",
        r"^(\d{4})-(\d{2})-(\d{2})$",
        lambda m: Date(int(m.group(1)), int(m.group(2)), int(m.group(3))),
    ),
    _date(
        "calendar-basic",
        r"^(\d{4})(\d{2})(\d{2})$",
        lambda m: Date(int(m.group(1)), int(m.group(2)), int(m.group(3))),
    ),
    _date(
        "ordinal",
        r"^(\d{4})-?(\d{3})$",
        lambda m: Date.from_ordinal_day(int(m.group(1)), int(m.group(2))),
    ),
    _date(
        "week",
        r"^(\d{4})-?W(\d{2})$",
        lambda m: Date.from_week(int(m.group(1)), int(m.group(2))),
    ),
    _date(
        "week-day-extended",
        r"^(\d{4})-W(\d{2})-(\d)$",
        lambda m: Date.from_week_day(int(m.group(1)), int(m.group(2)), int(m.group(3))),
    ),
    _date(
        "week-day-basic",
        r"^(\d{4})W(\d{2})(\d)$",
        lambda m: Date.from_week_day(int(m.group(1)), int(m.group(2)), int(m.group(3))),
    ),
)


# Times

_FIELD = r"\d{2}"
_FRACTIONAL_FIELD = r"\d{2}(?:[,.]\d+)?"


def _time(name: str, pattern: str, style: Style) -> FormatTemplate:
    def extractor(match: re.Match[str]) -> tuple[Number, Number | None, Number | None]:
        fields = [_number(group) for group in match.groups()]
        fields.extend([None] * (3 - len(fields)))
        return (fields[0], fields[1], fields[2])  # type: ignore[return-value]

    return FormatTemplate(
        name=name,
        pattern=re.compile(pattern, re.ASCII),
        style=style,
        extractor=extractor,
    )


# Basic forms need the leading 'T': a bare digit run is a date.
TIME_TEMPLATES: tuple[FormatTemplate, ...] = (
    _time("hour", rf"^T?({_FRACTIONAL_FIELD})$", Style.EITHER),
    _time("hour-minute-basic", rf"^T({_FIELD})({_FRACTIONAL_FIELD})$", Style.BASIC),
    _time(
        "hour-minute-second-basic",
        rf"^T({_FIELD})({_FIELD})({_FRACTIONAL_FIELD})$",
        Style.BASIC,
    ),
    _time("hour-minute-extended", rf"^T?({_FIELD}):({_FRACTIONAL_FIELD})$", Style.EXTENDED),
    _time(
        "hour-minute-second-extended",
        rf"^T?({_FIELD}):({_FIELD}):({_FRACTIONAL_FIELD})$",
        Style.EXTENDED,
    ),
)

# Trailing UTC offset: sign (hyphen-minus, plus or U+2212 minus), hour,
# optional minute with or without a colon.
OFFSET_PATTERN: re.Pattern[str] = re.compile(r"([-+−])(\d{2})(?:(:?)(\d{2}))?$", re.ASCII)


def match_first(
    templates: tuple[FormatTemplate, ...],
    text: str,
    style: Style | None = None,
) -> tuple[FormatTemplate, re.Match[str]] | None:
    """Return the first template matching ``text``, or None.

    Args:
        templates: Ordered templates to try.
        text: The string to match.
        style: If given, skip templates of the opposite separator style.

    Returns:
        The matching template and its match, or None if nothing matches.
    """
    for template in templates:
        if style is not None and template.style not in (style, Style.EITHER):
            continue
        match = template.pattern.match(text)
        if match:
            return template, match
    return None


__all__ = [
    "Style",
    "FormatTemplate",
    "DATE_TEMPLATES",
    "TIME_TEMPLATES",
    "OFFSET_PATTERN",
    "match_first",
]
