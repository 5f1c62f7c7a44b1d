"""Internal constants for Hilal.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Umm al-Qura table coverage (Hijri years, inclusive)
START_YEAR: int = 1318
END_YEAR: int = 1500

# Julian days bracketing the table: 1 Muharram 1318 and 1 Dhul Hijjah 1500
UM_START_JD: int = 2415140
UM_END_JD: int = 2479960

# MJD = JD - MJD_FACTOR (day boundary at noon, unlike the astronomical MJD)
MJD_FACTOR: int = 2400000

# First Julian day of the Gregorian calendar (1582-10-15)
GREGORIAN_CUTOVER_JD: int = 2299161

MONTHS_PER_YEAR: int = 12
MIN_MONTH_LENGTH: int = 29
MAX_MONTH_LENGTH: int = 30
MAX_HIJRI_DAY: int = 30

# Dhul Hijjah 1500 has no following table entry; it is capped at 29 days
LAST_MONTH_DAYS: int = 29

# A lunar year longer than this has a 30-day Dhul Hijjah
COMMON_YEAR_DAYS: int = 354

# Tabular (arithmetic) calendar cycle
TABULAR_CYCLE_YEARS: int = 30
TABULAR_CYCLE_DAYS: int = 10631
TABULAR_MEAN_YEAR: float = 354.36667
TABULAR_EPOCH_SHIFT: int = 7666


__all__ = [
    "START_YEAR",
    "END_YEAR",
    "UM_START_JD",
    "UM_END_JD",
    "MJD_FACTOR",
    "GREGORIAN_CUTOVER_JD",
    "MONTHS_PER_YEAR",
    "MIN_MONTH_LENGTH",
    "MAX_MONTH_LENGTH",
    "MAX_HIJRI_DAY",
    "LAST_MONTH_DAYS",
    "COMMON_YEAR_DAYS",
    "TABULAR_CYCLE_YEARS",
    "TABULAR_CYCLE_DAYS",
    "TABULAR_MEAN_YEAR",
    "TABULAR_EPOCH_SHIFT",
]
