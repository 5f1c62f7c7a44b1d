"""Tabular (arithmetic) Islamic calendar.

Used for dates outside the Umm al-Qura table, or for every date when a
calendar is configured without the table. The year is modelled as a
30-year cycle of 10631 days with a mean year of 354.36667 days; the
floating-point term means results near cycle boundaries are an
approximation of the civil calendar.

Year numbering has no year 0: the year before 1 AH is -1 AH.

This module is not part of the public API.
"""

from __future__ import annotations

import math

from hilal._internal.constants import (
    TABULAR_CYCLE_DAYS,
    TABULAR_CYCLE_YEARS,
    TABULAR_EPOCH_SHIFT,
    TABULAR_MEAN_YEAR,
)
from hilal._internal.julian import trunc_div, trunc_mod

# Offset between Hijri years and the cycle-aligned year count
_YEAR_SHIFT = 5520


def _cycle_has_leap_day(y: int) -> bool:
    # Position in the cycle counts 1-30, so the 30th year can be leap
    k = trunc_mod(y - 1, TABULAR_CYCLE_YEARS)
    return int((k + 1) * 0.36667) > int(k * 0.36667)


def is_leap_year(year: int) -> bool:
    """Return True if the tabular year has 355 days.

    Examples:
        >>> is_leap_year(1446)
        True
        >>> is_leap_year(1445)
        False
    """
    if year < 0:
        return _cycle_has_leap_day(year + _YEAR_SHIFT + 1)
    return _cycle_has_leap_day(year)


def days_in_month(month: int, year: int) -> int:
    """Return the tabular month length.

    Odd months have 30 days and even months 29, except that Dhul Hijjah
    gains a day in leap years.
    """
    if month == 12:
        return 30 if is_leap_year(year) else 29
    return 29 + (month % 2)


def hijri_to_julian_day(year: int, month: int, day: int) -> int:
    """Convert a tabular Hijri date to a Julian Day number.

    Examples:
        >>> hijri_to_julian_day(1446, 9, 1)
        2460734
    """
    if year < 0:
        hy = year + _YEAR_SHIFT
    else:
        hy = year + _YEAR_SHIFT - 1

    n = trunc_div(hy, TABULAR_CYCLE_YEARS)
    j = n * TABULAR_CYCLE_DAYS + int((hy - n * TABULAR_CYCLE_YEARS) * TABULAR_MEAN_YEAR)
    return j + math.ceil((month - 1) * 29.5) + day - TABULAR_EPOCH_SHIFT


def julian_day_to_hijri(julian_day: int) -> tuple[int, int, int]:
    """Convert a Julian Day number to a tabular Hijri date.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> julian_day_to_hijri(2460734)
        (1446, 9, 1)
    """
    j = julian_day + TABULAR_EPOCH_SHIFT
    n = trunc_div(j, TABULAR_CYCLE_DAYS)
    j1 = j - n * TABULAR_CYCLE_DAYS

    y = int(j1 / TABULAR_MEAN_YEAR)
    j1 -= int(y * TABULAR_MEAN_YEAR)

    if j1 == 0:
        # Last day of the previous year's Dhul Hijjah
        year = n * TABULAR_CYCLE_YEARS + y - _YEAR_SHIFT
        if year <= 0:
            year -= 1
        day = julian_day - hijri_to_julian_day(year, 12, 1) + 1
        return (year, 12, day)

    j1 += 29
    month = int((24 * j1) / 709)
    day = j1 - int((709 * month) / 24)
    year = n * TABULAR_CYCLE_YEARS + y + 1 - _YEAR_SHIFT
    if year <= 0:
        year -= 1

    return (year, month, day)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "hijri_to_julian_day",
    "julian_day_to_hijri",
]
