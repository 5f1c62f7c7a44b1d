"""Core Hilal types.

This module provides the fundamental types:
    - HijriDate: A (year, month, day) value in the Hijri calendar
    - HijriCalendar: Hijri/Gregorian conversion and validation
    - HijriCalendarAdjustment: HijriCalendar with month-start overrides
    - PossibleStart, AutoAdjustment: Results of candidate enumeration
"""

from __future__ import annotations

from hilal.core.adjustment import AutoAdjustment, HijriCalendarAdjustment, PossibleStart
from hilal.core.calendar import CalendarComponent, HijriCalendar
from hilal.core.hijri_date import HijriDate

__all__: list[str] = [
    "AutoAdjustment",
    "CalendarComponent",
    "HijriCalendar",
    "HijriCalendarAdjustment",
    "HijriDate",
    "PossibleStart",
]
