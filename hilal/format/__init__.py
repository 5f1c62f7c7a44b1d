"""Hijri date formatting and parsing.

This module provides text conversion for HijriDate values:
    - Pattern formatting with localized month and weekday names
    - Parsing of the short and named-month forms
    - A registry of localization providers

Classes:
    HijriDateFormatter: Format and parse HijriDates.
    DateStyle: Predefined patterns.
    LocalizationProvider: Base class for month and weekday names.

Examples:
    >>> from hilal import HijriCalendar, HijriDate
    >>> from hilal.format import HijriDateFormatter, DateStyle

    >>> formatter = HijriDateFormatter(HijriCalendar(), date_style=DateStyle.LONG)
    >>> formatter.format(HijriDate(1446, 9, 1))
    '1 Ramadan 1446'
"""

from __future__ import annotations

from hilal.format.locales import (
    LocalizationProvider,
    get_provider,
    register_provider,
    reset_custom_providers,
)
from hilal.format.pattern import DateStyle, HijriDateFormatter

__all__: list[str] = [
    "DateStyle",
    "HijriDateFormatter",
    "LocalizationProvider",
    "get_provider",
    "register_provider",
    "reset_custom_providers",
]
