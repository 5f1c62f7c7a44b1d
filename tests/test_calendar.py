"""Tests for HijriCalendar conversion and validation."""

from __future__ import annotations

import datetime

import pytest

from hilal._internal.constants import END_YEAR, START_YEAR, UM_END_JD, UM_START_JD
from hilal._internal.ummalqura import UMM_AL_QURA_DATA
from hilal.core.calendar import CalendarComponent, HijriCalendar
from hilal.core.hijri_date import HijriDate


class TestHijriCalendarConversion:
    """Tests for Gregorian <-> Hijri conversion."""

    def test_first_of_ramadan_1446(self, calendar: HijriCalendar) -> None:
        """2025-03-01 is 1 Ramadan 1446."""
        assert calendar.hijri_date(datetime.date(2025, 3, 1)) == HijriDate(1446, 9, 1)

    def test_last_of_shaban_1446(self, calendar: HijriCalendar) -> None:
        """2025-02-28 is 29 Shaban 1446."""
        assert calendar.hijri_date(datetime.date(2025, 2, 28)) == HijriDate(1446, 8, 29)

    def test_first_of_shawwal_1446(self, calendar: HijriCalendar) -> None:
        """1 Shawwal 1446 is 2025-03-30."""
        assert calendar.date(HijriDate(1446, 10, 1)) == datetime.date(2025, 3, 30)

    def test_component_api(self, calendar: HijriCalendar) -> None:
        """The tuple helpers agree with the date API."""
        assert calendar.gregorian_to_hijri(2025, 3, 1) == (1446, 9, 1)
        assert calendar.hijri_to_gregorian(1446, 9, 1) == (2025, 3, 1)

    def test_table_start(self, calendar: HijriCalendar) -> None:
        """1 Muharram 1318 is 1900-04-30 and converts back."""
        assert calendar.date(HijriDate(1318, 1, 1)) == datetime.date(1900, 4, 30)
        assert calendar.julian_day_to_hijri(UM_START_JD) == (1318, 1, 1)
        assert calendar.hijri_date(datetime.date(1900, 4, 30)) == HijriDate(1318, 1, 1)

    def test_round_trip_table_dates(self, calendar: HijriCalendar) -> None:
        """Valid table dates convert to Gregorian and back unchanged."""
        for year in range(START_YEAR, END_YEAR + 1, 7):
            for month in range(1, 13):
                last = calendar.days_in_month(month, year)
                for day in (1, 15, last):
                    d = HijriDate(year, month, day)
                    assert calendar.hijri_date(calendar.date(d)) == d

    def test_round_trip_gregorian_days(self, calendar: HijriCalendar) -> None:
        """Every day of 2020-2030 converts to Hijri and back."""
        start = datetime.date(2020, 1, 1)
        for i in range((datetime.date(2030, 12, 31) - start).days + 1):
            d = start + datetime.timedelta(days=i)
            assert calendar.date(calendar.hijri_date(d)) == d

    def test_consecutive_days(self, calendar: HijriCalendar) -> None:
        """The day after the last of a month is the first of the next."""
        last = calendar.date(HijriDate(1446, 8, 29))
        assert calendar.hijri_date(last + datetime.timedelta(days=1)) == HijriDate(
            1446, 9, 1
        )

    def test_last_table_month(self, calendar: HijriCalendar) -> None:
        """Dhul Hijjah 1500 starts on the final table entry and round-trips."""
        first = calendar.date(HijriDate(1500, 12, 1))
        assert calendar.julian_day_to_hijri(UM_END_JD) == (1500, 12, 1)
        assert calendar.hijri_date(first) == HijriDate(1500, 12, 1)
        last = calendar.date(HijriDate(1500, 12, 29))
        assert calendar.hijri_date(last) == HijriDate(1500, 12, 29)
        assert calendar.days_in_month(12, 1500) == 29

    def test_after_table_uses_tabular(self, calendar: HijriCalendar) -> None:
        """The day after 29 Dhul Hijjah 1500 is converted arithmetically."""
        last = calendar.date(HijriDate(1500, 12, 29))
        after = calendar.hijri_date(last + datetime.timedelta(days=1))
        assert after > HijriDate(1500, 12, 29)

    def test_outside_table_uses_tabular(self, calendar: HijriCalendar) -> None:
        """Dates before the table convert with the tabular algorithm."""
        d = datetime.date(1800, 1, 15)
        hijri = calendar.hijri_date(d)
        assert hijri.year < START_YEAR
        assert calendar.date(hijri) == d


class TestTabularCalendar:
    """Tests for a calendar configured without the table."""

    def test_tabular_ramadan(self, tabular_calendar: HijriCalendar) -> None:
        """The tabular calendar is two days ahead of Umm al-Qura here."""
        assert tabular_calendar.hijri_date(datetime.date(2025, 3, 1)) == HijriDate(
            1446, 9, 3
        )

    def test_tabular_month_lengths(self, tabular_calendar: HijriCalendar) -> None:
        """Month lengths follow the odd/even rule."""
        assert tabular_calendar.days_in_month(9, 1446) == 30
        assert tabular_calendar.days_in_month(10, 1446) == 29

    def test_tabular_validation(self, tabular_calendar: HijriCalendar) -> None:
        """Years outside the table are valid, year 0 is not."""
        assert tabular_calendar.is_valid_hijri_date(1200, 1, 1)
        assert not tabular_calendar.is_valid_hijri_date(0, 1, 1)


class TestHijriCalendarMonthLengths:
    """Tests for days_in_month, days_in_year and is_leap_year."""

    def test_ramadan_1446(self, calendar: HijriCalendar) -> None:
        """Ramadan 1446 has 29 days."""
        assert calendar.days_in_month(9, 1446) == 29

    def test_all_table_months(self, calendar: HijriCalendar) -> None:
        """Every table month has 29 or 30 days."""
        for offset in range(1, len(UMM_AL_QURA_DATA)):
            month, year = calendar.offset_to_month(offset - 1)
            assert calendar.days_in_month(month, year) in (29, 30)

    def test_days_in_year_sums_months(self, calendar: HijriCalendar) -> None:
        """days_in_year is the sum of the month lengths."""
        total = sum(calendar.days_in_month(m, 1446) for m in range(1, 13))
        assert calendar.days_in_year(1446) == total

    def test_leap_year_matches_length(self, calendar: HijriCalendar) -> None:
        """A table year is leap when it is longer than 354 days."""
        for year in range(1440, 1460):
            assert calendar.is_leap_year(year) == (calendar.days_in_year(year) > 354)

    def test_leap_year_outside_table(self, calendar: HijriCalendar) -> None:
        """Years outside the table use the tabular rule."""
        assert calendar.is_leap_year(1200) == (calendar.days_in_year(1200) == 355)


class TestHijriCalendarOffsets:
    """Tests for table offsets."""

    def test_month_to_offset(self, calendar: HijriCalendar) -> None:
        """Offsets count months from 1 Muharram 1318."""
        assert calendar.month_to_offset(1, 1318) == 0
        assert calendar.month_to_offset(9, 1446) == 1544
        assert calendar.month_to_offset(12, 1500) == len(UMM_AL_QURA_DATA) - 1

    def test_offset_to_month(self, calendar: HijriCalendar) -> None:
        """offset_to_month reverses month_to_offset."""
        assert calendar.offset_to_month(1544) == (9, 1446)
        assert calendar.offset_to_month(0) == (1, 1318)

    def test_table_is_a_copy(self, calendar: HijriCalendar) -> None:
        """The exposed table matches the base data."""
        assert calendar.table == UMM_AL_QURA_DATA
        assert calendar.table[1544] == 60736


class TestHijriCalendarValidation:
    """Tests for is_valid_hijri_date."""

    @pytest.mark.parametrize(
        "year,month,day",
        [
            (1446, 0, 1),
            (1446, 13, 1),
            (1446, 1, 0),
            (1446, 1, 31),
            (1446, 9, 30),
            (0, 1, 1),
            (1317, 1, 1),
            (1501, 1, 1),
        ],
    )
    def test_invalid_dates(self, calendar: HijriCalendar, year: int, month: int, day: int) -> None:
        """Impossible or out-of-table dates are rejected."""
        assert not calendar.is_valid_hijri_date(year, month, day)

    def test_valid_date(self, calendar: HijriCalendar) -> None:
        """A real date is accepted."""
        assert calendar.is_valid_hijri_date(1446, 9, 29)

    def test_last_month_capped(self, calendar: HijriCalendar) -> None:
        """Dhul Hijjah 1500 has at most 29 days."""
        assert calendar.is_valid_hijri_date(1500, 12, 29)
        assert not calendar.is_valid_hijri_date(1500, 12, 30)

    def test_first_table_day(self, calendar: HijriCalendar) -> None:
        """1 Muharram 1318 is valid."""
        assert calendar.is_valid_hijri_date(1318, 1, 1)


class TestHijriCalendarWeekday:
    """Tests for weekday and range_of."""

    def test_weekday(self, calendar: HijriCalendar) -> None:
        """1 Ramadan 1446 (2025-03-01) is a Saturday."""
        assert calendar.weekday(HijriDate(1446, 9, 1)) == 5

    def test_weekday_matches_gregorian(self, calendar: HijriCalendar) -> None:
        """Weekday agrees with the converted Gregorian date."""
        for day in range(1, 30):
            d = HijriDate(1446, 9, day)
            assert calendar.weekday(d) == calendar.date(d).weekday()

    def test_range_day_in_month(self, calendar: HijriCalendar) -> None:
        """Days in a 29-day month run 1-29."""
        r = calendar.range_of(
            CalendarComponent.DAY, CalendarComponent.MONTH, HijriDate(1446, 9, 1)
        )
        assert r == range(1, 30)

    def test_range_day_in_year(self, calendar: HijriCalendar) -> None:
        """Days in a year run to the year length."""
        r = calendar.range_of(
            CalendarComponent.DAY, CalendarComponent.YEAR, HijriDate(1446, 1, 1)
        )
        assert r == range(1, calendar.days_in_year(1446) + 1)

    def test_range_month_in_year(self, calendar: HijriCalendar) -> None:
        """Months run 1-12."""
        r = calendar.range_of(
            CalendarComponent.MONTH, CalendarComponent.YEAR, HijriDate(1446, 1, 1)
        )
        assert r == range(1, 13)

    def test_range_weekday_in_month(self, calendar: HijriCalendar) -> None:
        """A 29-day month contains every weekday."""
        r = calendar.range_of(
            CalendarComponent.WEEKDAY, CalendarComponent.MONTH, HijriDate(1446, 9, 1)
        )
        assert r == range(0, 7)

    def test_range_weekday_in_year(self, calendar: HijriCalendar) -> None:
        """A year contains every weekday."""
        r = calendar.range_of(
            CalendarComponent.WEEKDAY, CalendarComponent.YEAR, HijriDate(1446, 1, 1)
        )
        assert r == range(0, 7)

    def test_range_unsupported(self, calendar: HijriCalendar) -> None:
        """Unsupported combinations give None."""
        assert (
            calendar.range_of(
                CalendarComponent.YEAR, CalendarComponent.MONTH, HijriDate(1446, 1, 1)
            )
            is None
        )
