"""Validation utilities for Hilal.

Each helper raises the matching HilalError subclass and returns None
when the value is acceptable.

This module is not part of the public API.
"""

from __future__ import annotations

from hilal._internal.constants import END_YEAR, MONTHS_PER_YEAR, START_YEAR
from hilal.errors import DateOutOfRangeError, InvalidDateComponentsError


def validate_month(month: int) -> None:
    """Validate that a Hijri month is within 1-12.

    Raises:
        InvalidDateComponentsError: If month is outside 1-12.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise InvalidDateComponentsError(
            f"month must be between 1 and {MONTHS_PER_YEAR}, got {month}"
        )


def validate_hijri_year(year: int) -> None:
    """Validate that a Hijri year is covered by the Umm al-Qura table.

    Raises:
        DateOutOfRangeError: If year is outside START_YEAR to END_YEAR.
    """
    if year < START_YEAR or year > END_YEAR:
        raise DateOutOfRangeError(
            f"year {year} is outside the valid range ({START_YEAR}-{END_YEAR})"
        )


def validate_offset(offset: int, length: int, month: int, year: int) -> None:
    """Validate that a month can be adjusted independently.

    Offset 0 has no previous month to measure its length against, so
    the first adjustable offset is 1.

    Raises:
        DateOutOfRangeError: If offset is not in 1 to length - 1.
    """
    if offset <= 0 or offset >= length:
        raise DateOutOfRangeError(
            f"month {month} of year {year} is outside the adjustable range"
        )


def validate_gregorian_components(year: int, month: int, day: int) -> None:
    """Validate Gregorian components to the converter's accepted ranges.

    Raises:
        InvalidDateComponentsError: If month is outside 1-12 or day
            outside 1-31.
    """
    if month < 1 or month > 12 or day < 1 or day > 31:
        raise InvalidDateComponentsError(
            "invalid Gregorian date components: "
            f"year={year}, month={month}, day={day}"
        )


__all__ = [
    "validate_month",
    "validate_hijri_year",
    "validate_offset",
    "validate_gregorian_components",
]
