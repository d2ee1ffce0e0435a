"""Comparison and interval operations on temporal values.

The functions in this module complement the operators and methods on the
value classes with explicit, type-checked function forms.

Comparison Operations (from isospan.arithmetic.comparisons):
    - equal, not_equal: Test equality/inequality
    - less_than, less_equal: Test ordering
    - greater_than, greater_equal: Test ordering
    - compare: Return -1, 0, or 1 for comparison
    - min_value, max_value: Find extremes

Range Operations (from isospan.arithmetic.range_ops):
    - contains: A Date holds a Date or DateTime
    - is_contained_by: The reverse of contains
    - overlaps: Two Dates share a day
"""

from __future__ import annotations

from isospan.arithmetic.comparisons import (
    equal,
    not_equal,
    less_than,
    less_equal,
    greater_than,
    greater_equal,
    compare,
    min_value,
    max_value,
)
from isospan.arithmetic.range_ops import (
    contains,
    is_contained_by,
    overlaps,
)

__all__ = [
    # Comparison operations
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "compare",
    "min_value",
    "max_value",
    # Range operations
    "contains",
    "is_contained_by",
    "overlaps",
]
