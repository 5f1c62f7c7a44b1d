"""HijriDate class representing a date in the Hijri calendar.

A HijriDate is a plain (year, month, day) value. It does not know which
calendar produced it, so every conversion or validity check takes the
HijriCalendar to use as an argument.
"""

from __future__ import annotations

import datetime
import re
from typing import TYPE_CHECKING

from hilal._internal.constants import END_YEAR, START_YEAR
from hilal.errors import DateOutOfRangeError, InvalidDateComponentsError

if TYPE_CHECKING:
    from hilal.core.calendar import HijriCalendar

_ISO_PATTERN = re.compile(r"^(-?[0-9]+)-([0-9]{1,2})-([0-9]{1,2})$")


class HijriDate:
    """A date in the Hijri calendar.

    The plain constructor performs no validation, so values such as
    ``HijriDate(1445, 13, 35)`` can be built and then checked with
    :meth:`is_valid`. Use :meth:`validated` to reject them up front.

    Dates are ordered by year, then month, then day.

    Attributes:
        year: The Hijri year.
        month: The Hijri month (1-12).
        day: The day of the month (1-30).

    Examples:
        >>> d = HijriDate(1446, 9, 1)
        >>> d.month
        9
        >>> str(d)
        '1446-09-01'
        >>> HijriDate(1445, 9, 1) < HijriDate(1445, 10, 1)
        True
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def validated(
        cls, year: int, month: int, day: int, calendar: HijriCalendar
    ) -> HijriDate:
        """Create a HijriDate, rejecting dates the calendar cannot represent.

        Args:
            year: The Hijri year.
            month: The Hijri month (1-12).
            day: The day of the month.
            calendar: The calendar to validate against.

        Returns:
            The validated HijriDate.

        Raises:
            DateOutOfRangeError: If the calendar uses the Umm al-Qura table
                and the year is outside it.
            InvalidDateComponentsError: If the date is otherwise invalid.

        Examples:
            >>> from hilal import HijriCalendar
            >>> cal = HijriCalendar()
            >>> HijriDate.validated(1445, 9, 15, cal)
            HijriDate(1445, 9, 15)
        """
        if calendar.use_umm_al_qura and (year < START_YEAR or year > END_YEAR):
            raise DateOutOfRangeError(
                f"year {year} is outside the valid range ({START_YEAR}-{END_YEAR})"
            )
        if not calendar.is_valid_hijri_date(year, month, day):
            raise InvalidDateComponentsError(
                f"year: {year}, month: {month}, day: {day} is not a valid Hijri date"
            )
        return cls(year, month, day)

    @classmethod
    def from_gregorian(
        cls, date: datetime.date, calendar: HijriCalendar
    ) -> HijriDate:
        """Convert a Gregorian date using the given calendar.

        Examples:
            >>> from hilal import HijriCalendar
            >>> HijriDate.from_gregorian(datetime.date(2025, 3, 1), HijriCalendar())
            HijriDate(1446, 9, 1)
        """
        return calendar.hijri_date(date)

    @classmethod
    def from_iso_format(cls, s: str) -> HijriDate:
        """Parse a ``YYYY-MM-DD`` string without validating the date.

        Raises:
            InvalidDateComponentsError: If the string is malformed.
        """
        match = _ISO_PATTERN.match(s)
        if not match:
            raise InvalidDateComponentsError(
                f"invalid Hijri date string: {s!r}, expected YYYY-MM-DD"
            )
        return cls(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def is_valid(self, calendar: HijriCalendar) -> bool:
        """Return True if the calendar accepts this date."""
        return calendar.is_valid_hijri_date(self._year, self._month, self._day)

    def to_gregorian(self, calendar: HijriCalendar) -> datetime.date:
        """Convert to a Gregorian date without validating first."""
        return calendar.date(self)

    def to_validated_gregorian(self, calendar: HijriCalendar) -> datetime.date:
        """Convert to a Gregorian date, rejecting invalid dates.

        Raises:
            InvalidDateComponentsError: If the date is not valid in the
                calendar.
        """
        if not self.is_valid(calendar):
            raise InvalidDateComponentsError(
                f"year: {self._year}, month: {self._month}, day: {self._day} "
                "is not a valid Hijri date"
            )
        return calendar.date(self)

    def to_iso_format(self) -> str:
        return str(self)

    def to_json(self) -> dict:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> HijriDate(1446, 9, 1).to_json()
            {'_type': 'HijriDate', 'value': '1446-09-01'}
        """
        return {"_type": "HijriDate", "value": self.to_iso_format()}

    @classmethod
    def from_json(cls, data: dict) -> HijriDate:
        """Create a HijriDate from the dictionary produced by :meth:`to_json`.

        Raises:
            InvalidDateComponentsError: If the data is malformed.
        """
        if not isinstance(data, dict):
            raise InvalidDateComponentsError(
                f"expected dict, got {type(data).__name__}"
            )
        value = data.get("value")
        if not value:
            raise InvalidDateComponentsError("missing 'value' field for HijriDate")
        return cls.from_iso_format(value)

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HijriDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HijriDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HijriDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HijriDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HijriDate):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"HijriDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return f"{self._year}-{self._month:02d}-{self._day:02d}"


__all__ = ["HijriDate"]
