"""Evaluation of list and conjunction queries over ISO 8601 strings.

A query is one of:
    - a single spec, e.g. ``2021-06``
    - a list of queries separated by ';', e.g. ``2021;2021-W01;T10Z``
    - a conjunction of two specs joined by '^' or '∧', e.g. ``2021^2021-06``,
      which reports how the two values relate

Every query evaluates to a result object instead of raising, so a caller
can render any mix of values, relations and errors.

Examples:
    >>> evaluate("2021^2021-06").relations["contains"]
    True

    >>> evaluate("2021-22").to_dict()
    {'error': 'Not implemented'}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Union

from isospan.arithmetic.range_ops import contains, overlaps
from isospan.core.date import Date
from isospan.core.datetime import DateTime
from isospan.core.time import Time
from isospan.errors import FormatError, IsospanError, RangeError, UnsupportedError
from isospan.format.iso8601 import TemporalType, format_day, try_parse_iso8601

logger = logging.getLogger(__name__)

LIST_SEPARATOR = ";"
CONJUNCTION_SEPARATORS = ("^", "∧")

CANNOT_PARSE = "Cannot parse input"
INVALID_INPUT = "Invalid input"
NOT_IMPLEMENTED = "Not implemented"
CANNOT_COMPUTE = "Cannot compute input"


@dataclass(frozen=True)
class ValueResult:
    """A single successfully parsed value."""

    value: TemporalType

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return describe_value(self.value)


@dataclass(frozen=True)
class ErrorResult:
    """A query that produced no value.

    Attributes:
        message: User-facing message for the failure.
        error: The underlying parse error, if there was one.
    """

    message: str
    error: IsospanError | None = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


@dataclass(frozen=True)
class ComparisonResult:
    """The relations between the two sides of a conjunction.

    Attributes:
        left: Left-hand value (the Date, when a Date meets a DateTime).
        right: Right-hand value.
        relations: Relation name to outcome, e.g. ``{"contains": True}``.
    """

    left: TemporalType
    right: TemporalType
    relations: dict[str, bool]

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": describe_value(self.left),
            "right": describe_value(self.right),
            **self.relations,
        }


@dataclass(frozen=True)
class ListResult:
    """Results of the items of a ';' separated list, in order."""

    items: tuple[QueryResult, ...]

    @property
    def ok(self) -> bool:
        return all(item.ok for item in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {"items": [item.to_dict() for item in self.items]}


QueryResult = Union[ValueResult, ErrorResult, ComparisonResult, ListResult]


def evaluate(text: str) -> QueryResult:
    """Evaluate a query string.

    Args:
        text: A spec, a ';' list, or a '^'/'∧' conjunction.

    Returns:
        A ListResult, ComparisonResult, ValueResult or ErrorResult.

    Examples:
        >>> [item.ok for item in evaluate("2021;2021-13").items]
        [True, False]
    """
    if LIST_SEPARATOR in text:
        parts = text.strip(LIST_SEPARATOR).split(LIST_SEPARATOR)
        logger.debug("evaluating list of %d items", len(parts))
        return ListResult(items=tuple(evaluate(part) for part in parts))

    if any(sep in text for sep in CONJUNCTION_SEPARATORS):
        return _evaluate_conjunction(text)

    return evaluate_value(text)


def evaluate_value(spec: str) -> ValueResult | ErrorResult:
    """Parse one spec, mapping each error kind to its user-facing message."""
    result = try_parse_iso8601(spec.strip())
    if result.ok:
        return ValueResult(value=result.unwrap())
    return ErrorResult(message=error_message(result.error), error=result.error)


def error_message(error: IsospanError | None) -> str:
    """Return the user-facing message for a parse error."""
    if isinstance(error, UnsupportedError):
        return NOT_IMPLEMENTED
    if isinstance(error, FormatError):
        return CANNOT_PARSE
    if isinstance(error, RangeError):
        return INVALID_INPUT
    return CANNOT_PARSE


def relate(left: TemporalType, right: TemporalType) -> ComparisonResult | ErrorResult:
    """Compute the relations that apply between two values.

    Date and Date: contains, is_contained_by, overlaps, equals.
    Date and DateTime, in either order: contains (the Date goes left).
    DateTime and DateTime, or Time and Time: equals, is_before, is_after.
    Any other pairing has no relations and yields an ErrorResult.

    Examples:
        >>> relate(Date(2021, 6), Date(2021)).relations["is_contained_by"]
        True
    """
    if isinstance(left, Date) and isinstance(right, Date):
        return ComparisonResult(
            left=left,
            right=right,
            relations={
                "contains": contains(left, right),
                "is_contained_by": contains(right, left),
                "overlaps": overlaps(left, right),
                "equals": left == right,
            },
        )

    if isinstance(left, DateTime) and isinstance(right, Date):
        left, right = right, left

    if isinstance(left, Date) and isinstance(right, DateTime):
        return ComparisonResult(
            left=left,
            right=right,
            relations={"contains": contains(left, right)},
        )

    if (isinstance(left, DateTime) and isinstance(right, DateTime)) or (
        isinstance(left, Time) and isinstance(right, Time)
    ):
        return ComparisonResult(
            left=left,
            right=right,
            relations={
                "equals": left == right,
                "is_before": left < right,  # type: ignore[operator]
                "is_after": left > right,  # type: ignore[operator]
            },
        )

    return ErrorResult(message=CANNOT_COMPUTE)


def _evaluate_conjunction(text: str) -> ComparisonResult | ErrorResult:
    for sep in CONJUNCTION_SEPARATORS[1:]:
        text = text.replace(sep, CONJUNCTION_SEPARATORS[0])
    parts = text.split(CONJUNCTION_SEPARATORS[0])

    if len(parts) != 2:
        logger.debug("conjunction needs two operands, got %d", len(parts))
        return ErrorResult(message=CANNOT_COMPUTE)

    left, right = (evaluate_value(part) for part in parts)
    if not isinstance(left, ValueResult) or not isinstance(right, ValueResult):
        return ErrorResult(message=CANNOT_COMPUTE)

    return relate(left.value, right.value)


def describe_value(value: TemporalType) -> dict[str, Any]:
    """Return a JSON-ready description of a temporal value.

    Examples:
        >>> describe_value(Date(2021, 6))["exclusive_end"]
        '2021-07-01'
    """
    if isinstance(value, Date):
        return {
            "type": "date",
            "canonical": value.to_iso_format(),
            "granularity": value.granularity.value,
            "inclusive_start": format_day(value.inclusive_start),
            "exclusive_end": format_day(value.exclusive_end),
        }
    elif isinstance(value, DateTime):
        return {
            "type": "date-time",
            "canonical": value.to_iso_format(),
            "zone_aware": value.is_aware,
        }
    elif isinstance(value, Time):
        return {
            "type": "time",
            "canonical": value.to_iso_format(),
            "zone_aware": value.is_aware,
        }
    else:
        raise TypeError(
            f"expected Date, Time, or DateTime, got {type(value).__name__}"
        )


__all__ = [
    "ValueResult",
    "ErrorResult",
    "ComparisonResult",
    "ListResult",
    "QueryResult",
    "evaluate",
    "evaluate_value",
    "error_message",
    "relate",
    "describe_value",
]
