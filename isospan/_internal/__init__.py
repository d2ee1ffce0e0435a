"""Internal utilities for isospan.

This module contains private implementation details:
    - Constants, tick sizes and the sub-year grouping table
    - Field validation
    - Calendar arithmetic

Note: This module is not part of the public API.
"""

from __future__ import annotations

from isospan._internal.validation import (
    check_field,
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "check_field",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
