"""Pattern-based formatting and parsing of Hijri dates.

Supported Pattern Letters:
    d     - Day of month (1-30)
    dd    - Day of month, zero-padded (01-30)
    M     - Month (1-12)
    MM    - Month, zero-padded (01-12)
    MMM   - Short month name
    MMMM  - Full month name
    y     - Full year, any repetition (1446)
    E     - Short weekday name (E, EE or EEE)
    EEEE  - Full weekday name

A single quote makes the next character literal. Every other character
is copied as-is.

Examples:
    >>> from hilal import HijriCalendar, HijriDate
    >>> formatter = HijriDateFormatter(HijriCalendar())
    >>> formatter.format(HijriDate(1446, 9, 1))
    '1 Ram 1446'
    >>> formatter.date_format = "EEEE, d MMMM y"
    >>> formatter.format(HijriDate(1446, 9, 1))
    'Saturday, 1 Ramadan 1446'
    >>> formatter.parse("1/9/1446")
    HijriDate(1446, 9, 1)
"""

from __future__ import annotations

import re
from enum import Enum

from hilal.core.calendar import HijriCalendar
from hilal.core.hijri_date import HijriDate
from hilal.format.locales import LocalizationProvider, get_provider

_SHORT_PATTERN = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")


class DateStyle(Enum):
    """Predefined patterns used when no custom format is set."""

    NONE = ""
    SHORT = "d/M/y"
    MEDIUM = "d MMM y"
    LONG = "d MMMM y"
    FULL = "EEEE, d MMMM y"


class HijriDateFormatter:
    """Convert HijriDates to and from text.

    Args:
        calendar: The calendar used to work out weekdays.
        locale: Locale tag choosing the month and weekday names.
        date_style: Pattern used when ``date_format`` is None.
        date_format: Custom pattern overriding ``date_style``.
    """

    def __init__(
        self,
        calendar: HijriCalendar,
        locale: str = "en",
        date_style: DateStyle = DateStyle.MEDIUM,
        date_format: str | None = None,
    ) -> None:
        self.calendar = calendar
        self.locale = locale
        self.date_style = date_style
        self.date_format = date_format

    @property
    def provider(self) -> LocalizationProvider:
        return get_provider(self.locale)

    def format(self, date: HijriDate) -> str:
        """Format a HijriDate with the custom pattern or the date style."""
        pattern = self.date_format if self.date_format is not None else self.date_style.value
        return self._format_pattern(date, pattern)

    def parse(self, text: str) -> HijriDate | None:
        """Parse ``d/M/y`` or ``d <month name> y`` text.

        Month names are those of the active locale, full or short. The
        result is not validated against the calendar.

        Returns:
            The parsed HijriDate, or None if the text matches neither form.
        """
        match = _SHORT_PATTERN.search(text)
        if match:
            day, month, year = (int(group) for group in match.groups())
            return HijriDate(year, month, day)

        provider = self.provider
        names = sorted(
            {*provider.full_month_names, *provider.short_month_names},
            key=len,
            reverse=True,
        )
        if not names:
            return None
        named = re.compile(
            r"(\d{1,2}) (" + "|".join(re.escape(name) for name in names) + r") (\d{4})"
        )
        match = named.search(text)
        if match:
            month = provider.month_number(match.group(2))
            if month is not None:
                return HijriDate(int(match.group(3)), month, int(match.group(1)))
        return None

    def _format_pattern(self, date: HijriDate, pattern: str) -> str:
        provider = self.provider
        result = []
        i = 0
        while i < len(pattern):
            char = pattern[i]

            if char == "'":
                if i + 1 < len(pattern):
                    result.append(pattern[i + 1])
                i += 2
                continue

            count = 1
            while i + count < len(pattern) and pattern[i + count] == char:
                count += 1

            if char == "d":
                result.append(f"{date.day:02d}" if count >= 2 else str(date.day))
            elif char == "M":
                if count == 1:
                    result.append(str(date.month))
                elif count == 2:
                    result.append(f"{date.month:02d}")
                elif count == 3:
                    result.append(provider.short_month_name(date.month))
                else:
                    result.append(provider.full_month_name(date.month))
            elif char == "y":
                result.append(str(date.year))
            elif char == "E":
                weekday = self.calendar.weekday(date)
                if count <= 3:
                    result.append(provider.short_weekday_name(weekday))
                else:
                    result.append(provider.full_weekday_name(weekday))
            else:
                result.append(char * count)

            i += count

        return "".join(result)


__all__ = ["DateStyle", "HijriDateFormatter"]
