"""Core temporal value types.

This module provides the three kinds of parsed value:
    - Date: A calendar period of one granularity, normalized to a day range
    - Time: A time of day with optional UTC offset, normalized to ticks
    - DateTime: A day-resolving Date combined with a Time, as one instant
"""

from __future__ import annotations

from isospan.core.date import Date
from isospan.core.datetime import DateTime
from isospan.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Time",
]
