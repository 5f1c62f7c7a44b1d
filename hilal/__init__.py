"""Hilal: Hijri calendar conversion with Umm al-Qura month-start adjustments.

Hilal converts between Hijri and Gregorian dates using the Umm al-Qura
table for the years 1318-1500 AH, falling back to the arithmetic
(tabular) Islamic calendar outside that range. Month starts can be
overridden to follow local moon sightings, with neighbouring months
shifted automatically so every month keeps 29 or 30 days.

Core Types:
    HijriDate: Hijri calendar date (year, month, day)
    HijriCalendar: Conversion, validation and month lengths
    HijriCalendarAdjustment: HijriCalendar with month-start overrides
    PossibleStart: A candidate start date for a month
    AutoAdjustment: A neighbouring month shifted by an override

Format:
    HijriDateFormatter: Pattern formatting and parsing
    DateStyle: Predefined patterns

Exceptions:
    HilalError: Base exception
    InvalidDateComponentsError: Malformed date components
    DateOutOfRangeError: Date outside the supported range
    InvalidAdjustmentError: Override would break month lengths
    AdjustmentNotFoundError: No override for the requested month
    JSONProcessingError: Bad adjustment JSON

Example:
    >>> import datetime
    >>> from hilal import HijriCalendarAdjustment
    >>> cal = HijriCalendarAdjustment()
    >>> cal.hijri_date(datetime.date(2025, 3, 1))
    HijriDate(1446, 9, 1)
    >>> cal.add_adjustment(9, 1446, datetime.date(2025, 3, 2))
    >>> cal.hijri_date(datetime.date(2025, 3, 1))
    HijriDate(1446, 8, 30)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from hilal.core.adjustment import AutoAdjustment, HijriCalendarAdjustment, PossibleStart
from hilal.core.calendar import CalendarComponent, HijriCalendar
from hilal.core.hijri_date import HijriDate

# Exceptions
from hilal.errors import (
    AdjustmentNotFoundError,
    DateOutOfRangeError,
    HilalError,
    InvalidAdjustmentError,
    InvalidDateComponentsError,
    JSONProcessingError,
)

# Format
from hilal.format import DateStyle, HijriDateFormatter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "AutoAdjustment",
    "CalendarComponent",
    "HijriCalendar",
    "HijriCalendarAdjustment",
    "HijriDate",
    "PossibleStart",
    # Exceptions
    "AdjustmentNotFoundError",
    "DateOutOfRangeError",
    "HilalError",
    "InvalidAdjustmentError",
    "InvalidDateComponentsError",
    "JSONProcessingError",
    # Format
    "DateStyle",
    "HijriDateFormatter",
]
