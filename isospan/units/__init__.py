"""Temporal units and enumerations.

This module provides:
    - Granularity: Which fields of a Date are populated
    - UtcOffset: Fixed offset from UTC
"""

from __future__ import annotations

from isospan.units.granularity import Granularity
from isospan.units.offset import UtcOffset

__all__: list[str] = [
    "Granularity",
    "UtcOffset",
]
