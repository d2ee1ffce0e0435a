"""Internal constants for isospan.

These constants define the limits, tick sizes and lookup tables used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# One tick is 100 nanoseconds
TICKS_PER_SECOND: int = 10_000_000
TICKS_PER_MINUTE: int = 60 * TICKS_PER_SECOND
TICKS_PER_HOUR: int = 60 * TICKS_PER_MINUTE
TICKS_PER_DAY: int = 24 * TICKS_PER_HOUR  # 864_000_000_000

# Digits rendered after the decimal point of a DateTime second
TICK_DIGITS: int = 7

MINUTES_PER_HOUR: int = 60
HOURS_PER_DAY: int = 24

# Four-digit years only
MIN_YEAR: int = 0
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

MAX_WEEK: int = 53

# UTC offset limits
MAX_OFFSET_HOURS: int = 24
MAX_OFFSET_MINUTES: int = MAX_OFFSET_HOURS * MINUTES_PER_HOUR

# A two-digit month field above this value is a sub-year grouping code
MAX_MONTH_FIELD: int = 20

MIN_SUB_YEAR_CODE: int = 21
MAX_SUB_YEAR_CODE: int = 41

# Seasons 21-24 do not say which hemisphere they belong to
UNSUPPORTED_SUB_YEAR_CODES: frozenset[int] = frozenset({21, 22, 23, 24})

# code -> (year offset, start month, length in months)
SUB_YEAR_GROUPINGS: dict[int, tuple[int, int, int]] = {
    # Northern hemisphere meteorological seasons
    25: (0, 3, 3),    # spring
    26: (0, 6, 3),    # summer
    27: (0, 9, 3),    # autumn
    28: (0, 12, 3),   # winter
    # Southern hemisphere meteorological seasons
    29: (-1, 9, 3),   # spring
    30: (0, 12, 3),   # summer
    31: (0, 3, 3),    # autumn
    32: (0, 6, 3),    # winter
    # Quarters
    33: (0, 1, 3),
    34: (0, 4, 3),
    35: (0, 7, 3),
    36: (0, 10, 3),
    # Quadrimesters
    37: (0, 1, 4),
    38: (0, 5, 4),
    39: (0, 9, 4),
    # Semesters
    40: (0, 1, 6),
    41: (0, 7, 6),
}


__all__ = [
    "TICKS_PER_SECOND",
    "TICKS_PER_MINUTE",
    "TICKS_PER_HOUR",
    "TICKS_PER_DAY",
    "TICK_DIGITS",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "MAX_WEEK",
    "MAX_OFFSET_HOURS",
    "MAX_OFFSET_MINUTES",
    "MAX_MONTH_FIELD",
    "MIN_SUB_YEAR_CODE",
    "MAX_SUB_YEAR_CODE",
    "UNSUPPORTED_SUB_YEAR_CODES",
    "SUB_YEAR_GROUPINGS",
]
