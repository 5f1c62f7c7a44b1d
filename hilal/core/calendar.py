"""HijriCalendar: Hijri/Gregorian conversion and validation.

A HijriCalendar is an explicit configuration object. It decides between
the Umm al-Qura table and the tabular algorithm, and it owns the live
copy of the table that conversions read. There is no shared default
instance; callers construct the calendar they need and pass it along.
"""

from __future__ import annotations

import bisect
import datetime
import threading
from enum import Enum
from typing import Mapping

from hilal._internal import tabular
from hilal._internal.constants import (
    COMMON_YEAR_DAYS,
    END_YEAR,
    LAST_MONTH_DAYS,
    MAX_HIJRI_DAY,
    MJD_FACTOR,
    MONTHS_PER_YEAR,
    START_YEAR,
)
from hilal._internal.julian import (
    gregorian_to_julian_day,
    julian_day_to_gregorian,
    julian_day_to_weekday,
)
from hilal._internal.ummalqura import (
    UMM_AL_QURA_DATA,
    month_to_offset,
    offset_to_month,
)
from hilal.core.hijri_date import HijriDate


class CalendarComponent(Enum):
    """Calendar units accepted by :meth:`HijriCalendar.range_of`."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    WEEKDAY = "weekday"


class HijriCalendar:
    """The Hijri calendar, backed by the Umm al-Qura table.

    With ``use_umm_al_qura`` enabled (the default), years 1318-1500 are
    converted through the table and every other year falls back to the
    tabular algorithm. With it disabled, the tabular algorithm is used
    throughout.

    Conversions never raise: invalid input produces whatever the
    arithmetic yields, and :meth:`is_valid_hijri_date` is the way to
    check a date first.

    Args:
        use_umm_al_qura: Whether to use the Umm al-Qura table.
        adjustment_data: Optional mapping of table offset to the MJD of
            the month start that replaces the table entry.

    Examples:
        >>> cal = HijriCalendar()
        >>> cal.hijri_date(datetime.date(2025, 3, 1))
        HijriDate(1446, 9, 1)
        >>> cal.date(HijriDate(1446, 10, 1))
        datetime.date(2025, 3, 30)
        >>> cal.days_in_month(9, 1446)
        29
    """

    def __init__(
        self,
        use_umm_al_qura: bool = True,
        adjustment_data: Mapping[int, int] | None = None,
    ) -> None:
        self.use_umm_al_qura = use_umm_al_qura
        self._lock = threading.RLock()
        self._adjustment_data: dict[int, int] = dict(adjustment_data or {})
        self._um_data: list[int] = self._build_table(self._adjustment_data)

    @staticmethod
    def _build_table(adjustment_data: Mapping[int, int]) -> list[int]:
        table = list(UMM_AL_QURA_DATA)
        for offset, value in adjustment_data.items():
            if 0 <= offset < len(table):
                table[offset] = value
        return table

    @property
    def table(self) -> tuple[int, ...]:
        """The month-start table used for conversions, adjustments included."""
        with self._lock:
            return tuple(self._um_data)

    # Conversion

    def hijri_date(self, date: datetime.date) -> HijriDate:
        """Convert a Gregorian date to a HijriDate."""
        year, month, day = self.gregorian_to_hijri(date.year, date.month, date.day)
        return HijriDate(year, month, day)

    def gregorian_to_hijri(self, year: int, month: int, day: int) -> tuple[int, int, int]:
        """Convert Gregorian components to Hijri (year, month, day)."""
        return self.julian_day_to_hijri(gregorian_to_julian_day(year, month, day))

    def date(self, hijri_date: HijriDate) -> datetime.date:
        """Convert a HijriDate to a Gregorian ``datetime.date``.

        The HijriDate is not validated; an impossible date such as the
        30th of a 29-day month lands on the first day of the next month.
        """
        year, month, day = self.hijri_to_gregorian(
            hijri_date.year, hijri_date.month, hijri_date.day
        )
        return datetime.date(year, month, day)

    def hijri_to_gregorian(self, year: int, month: int, day: int) -> tuple[int, int, int]:
        """Convert Hijri components to Gregorian (year, month, day)."""
        return julian_day_to_gregorian(self.hijri_to_julian_day(year, month, day))

    def julian_day_to_hijri(self, julian_day: int) -> tuple[int, int, int]:
        """Convert a Julian Day number to Hijri (year, month, day).

        Inside the live table this finds the last month starting on or
        before the day. The final table entry (1 Dhul Hijjah 1500) has no
        successor, so the table covers 29 days from it. The window follows
        the live table, so adjusted first and last months stay in it.
        """
        if self.use_umm_al_qura:
            mjd = julian_day - MJD_FACTOR
            with self._lock:
                if self._um_data[0] <= mjd < self._um_data[-1] + LAST_MONTH_DAYS:
                    i = bisect.bisect_right(self._um_data, mjd)
                    years = (i - 1) // MONTHS_PER_YEAR
                    return (
                        START_YEAR + years,
                        i - MONTHS_PER_YEAR * years,
                        mjd - self._um_data[i - 1] + 1,
                    )
        return tabular.julian_day_to_hijri(julian_day)

    def hijri_to_julian_day(self, year: int, month: int, day: int) -> int:
        """Convert Hijri components to a Julian Day number."""
        if self.use_umm_al_qura and START_YEAR <= year <= END_YEAR:
            i = month + MONTHS_PER_YEAR * (year - START_YEAR)
            with self._lock:
                if 0 < i <= len(self._um_data):
                    return day + self._um_data[i - 1] - 1 + MJD_FACTOR
        return tabular.hijri_to_julian_day(year, month, day)

    # Calendar utilities

    def days_in_month(self, month: int, year: int) -> int:
        """Return the number of days (29 or 30) in a Hijri month."""
        if self.use_umm_al_qura and START_YEAR <= year <= END_YEAR:
            i = self.month_to_offset(month, year)
            with self._lock:
                if 0 <= i and i + 1 < len(self._um_data):
                    return self._um_data[i + 1] - self._um_data[i]
                if i + 1 == len(self._um_data):
                    return LAST_MONTH_DAYS
        return tabular.days_in_month(month, year)

    def days_in_year(self, year: int) -> int:
        """Return the number of days in a Hijri year."""
        return sum(
            self.days_in_month(month, year) for month in range(1, MONTHS_PER_YEAR + 1)
        )

    def is_leap_year(self, year: int) -> bool:
        """Return True if the Hijri year has more than 354 days."""
        if self.use_umm_al_qura and START_YEAR <= year <= END_YEAR:
            start = (year - START_YEAR) * MONTHS_PER_YEAR
            with self._lock:
                if start + MONTHS_PER_YEAR < len(self._um_data):
                    span = self._um_data[start + MONTHS_PER_YEAR] - self._um_data[start]
                    return span > COMMON_YEAR_DAYS
        return tabular.is_leap_year(year)

    def month_to_offset(self, month: int, year: int) -> int:
        """Return the Umm al-Qura table offset for a month."""
        return month_to_offset(month, year)

    def offset_to_month(self, offset: int) -> tuple[int, int]:
        """Return ``(month, year)`` for an Umm al-Qura table offset."""
        return offset_to_month(offset)

    def is_valid_hijri_date(self, year: int, month: int, day: int) -> bool:
        """Check whether a Hijri date exists in this calendar.

        Year 0 does not exist. In Umm al-Qura mode only years 1318-1500
        are valid, and Dhul Hijjah 1500 is capped at 29 days because the
        table has no entry after it.

        Examples:
            >>> cal = HijriCalendar()
            >>> cal.is_valid_hijri_date(1500, 12, 29)
            True
            >>> cal.is_valid_hijri_date(1500, 12, 30)
            False
        """
        if month < 1 or month > MONTHS_PER_YEAR or day < 1 or day > MAX_HIJRI_DAY:
            return False
        if year == 0:
            return False

        if self.use_umm_al_qura:
            if year == END_YEAR and month == MONTHS_PER_YEAR:
                return day <= LAST_MONTH_DAYS
            if year < START_YEAR or year > END_YEAR:
                return False

        return day <= self.days_in_month(month, year)

    def weekday(self, hijri_date: HijriDate) -> int:
        """Return the day of the week (Monday=0, Sunday=6).

        Examples:
            >>> HijriCalendar().weekday(HijriDate(1446, 9, 1))  # 2025-03-01
            5
        """
        return julian_day_to_weekday(
            self.hijri_to_julian_day(hijri_date.year, hijri_date.month, hijri_date.day)
        )

    def range_of(
        self,
        component: CalendarComponent,
        unit: CalendarComponent,
        hijri_date: HijriDate,
    ) -> range | None:
        """Return the values a component takes within a larger unit.

        Supported combinations are day in month, day in year, month in
        year, weekday in month and weekday in year.

        Returns:
            A ``range`` of values, or None for unsupported combinations.

        Examples:
            >>> cal = HijriCalendar()
            >>> cal.range_of(CalendarComponent.DAY, CalendarComponent.MONTH, HijriDate(1446, 9, 1))
            range(1, 30)
        """
        if component is CalendarComponent.DAY and unit is CalendarComponent.MONTH:
            return range(1, self.days_in_month(hijri_date.month, hijri_date.year) + 1)

        if component is CalendarComponent.DAY and unit is CalendarComponent.YEAR:
            return range(1, self.days_in_year(hijri_date.year) + 1)

        if component is CalendarComponent.MONTH and unit is CalendarComponent.YEAR:
            return range(1, MONTHS_PER_YEAR + 1)

        if component is CalendarComponent.WEEKDAY and unit is CalendarComponent.MONTH:
            first = self.weekday(HijriDate(hijri_date.year, hijri_date.month, 1))
            length = self.days_in_month(hijri_date.month, hijri_date.year)
            weekdays = {(first + day) % 7 for day in range(length)}
            return range(min(weekdays), max(weekdays) + 1)

        if component is CalendarComponent.WEEKDAY and unit is CalendarComponent.YEAR:
            return range(0, 7)

        return None


__all__ = ["CalendarComponent", "HijriCalendar"]
