"""Julian Day conversions for Hilal.

This module maps proleptic Gregorian dates to and from Julian Day
numbers. All arithmetic truncates toward zero (``int()`` on floats and
:func:`trunc_div` on integers) rather than flooring, which keeps the
results identical to the published Umm al-Qura tables.

JD 0 fell on a Monday, so ``jd % 7`` is the weekday with Monday=0.

This module is not part of the public API.
"""

from __future__ import annotations

from hilal._internal.constants import GREGORIAN_CUTOVER_JD, MJD_FACTOR


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero.

    Python's ``//`` floors toward negative infinity; the calendar
    formulas were derived for truncating division.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
    """
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder matching :func:`trunc_div` (sign follows the dividend)."""
    return a - b * trunc_div(a, b)


def gregorian_to_julian_day(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to a Julian Day number.

    January and February are counted as months 13 and 14 of the
    previous year so that the leap day falls at the end of the year.

    Args:
        year: The Gregorian year.
        month: The Gregorian month (1-12).
        day: The day of the month.

    Returns:
        The Julian Day number.

    Examples:
        >>> gregorian_to_julian_day(2025, 3, 2)
        2460737
        >>> gregorian_to_julian_day(2000, 1, 1)
        2451545
    """
    if month < 3:
        year -= 1
        month += 12

    a = trunc_div(year, 100)
    b = 2 - a + trunc_div(a, 4)

    return (
        int(365.25 * (year + 4716))
        + int(30.6001 * (month + 1))
        + day
        + b
        - 1524
    )


def julian_day_to_gregorian(julian_day: int) -> tuple[int, int, int]:
    """Convert a Julian Day number to a proleptic Gregorian date.

    Days before the 1582 cutover skip the century correction.

    Args:
        julian_day: The Julian Day number.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> julian_day_to_gregorian(2460737)
        (2025, 3, 2)
    """
    if julian_day < GREGORIAN_CUTOVER_JD:
        a = julian_day
    else:
        alpha = int((julian_day - 1867216 - 0.25) / 36524.25)
        a = julian_day + 1 + alpha - trunc_div(alpha, 4)

    b = a + 1524
    c = int((b - 122.1) / 365.25)
    d = int(365.25 * c)
    e = int((b - d) / 30.6001)

    day = b - d - int(30.6001 * e)
    month = e - 1
    if month > 12:
        month -= 12

    year = c - 4716
    if month < 3:
        year += 1

    return (year, month, day)


def gregorian_to_mjd(year: int, month: int, day: int) -> int | None:
    """Convert a Gregorian date to a Modified Julian Day.

    Only the component ranges are checked (month 1-12, day 1-31); a day
    past the end of a short month rolls into the next month.

    Returns:
        The MJD, or None if a component is out of range.
    """
    if month < 1 or month > 12 or day < 1 or day > 31:
        return None
    return gregorian_to_julian_day(year, month, day) - MJD_FACTOR


def mjd_to_gregorian(mjd: int) -> tuple[int, int, int]:
    """Convert a Modified Julian Day to (year, month, day)."""
    return julian_day_to_gregorian(mjd + MJD_FACTOR)


def julian_day_to_weekday(julian_day: int) -> int:
    """Return the day of week for a Julian Day (Monday=0, Sunday=6).

    Examples:
        >>> julian_day_to_weekday(2460737)  # 2025-03-02
        6
    """
    return julian_day % 7


__all__ = [
    "trunc_div",
    "trunc_mod",
    "gregorian_to_julian_day",
    "julian_day_to_gregorian",
    "gregorian_to_mjd",
    "mjd_to_gregorian",
    "julian_day_to_weekday",
]
