"""Hilal exception hierarchy.

All Hilal-specific exceptions inherit from HilalError and carry a
human-readable ``details`` string.
"""

from __future__ import annotations


class HilalError(Exception):
    """Base exception for all Hilal errors."""

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details


class InvalidDateComponentsError(HilalError):
    """Malformed year, month or day.

    Raised by the validating constructors, the Gregorian converter and
    the adjustment calls.

    Examples:
        - Hijri month outside 1-12
        - Hijri day past the end of its month
        - Gregorian day outside 1-31
    """

    pass


class DateOutOfRangeError(HilalError):
    """Year or table offset outside the Umm al-Qura range (1318-1500).

    Examples:
        - Adjusting a month of year 1050
        - Adjusting 1 Muharram 1318, which has no previous month
    """

    pass


class InvalidAdjustmentError(HilalError):
    """A month start that would give its own month an invalid length.

    The month being set must be 29 or 30 days after the start of the
    month before it. Only the following months are corrected
    automatically.
    """

    pass


class AdjustmentNotFoundError(HilalError):
    """Removal requested for a month that has no adjustment."""

    pass


class JSONProcessingError(HilalError):
    """Adjustment data could not be encoded or decoded.

    Examples:
        - Text that is not valid JSON
        - A top-level array instead of an object
        - Non-integer values
    """

    pass


__all__ = [
    "HilalError",
    "InvalidDateComponentsError",
    "DateOutOfRangeError",
    "InvalidAdjustmentError",
    "AdjustmentNotFoundError",
    "JSONProcessingError",
]
