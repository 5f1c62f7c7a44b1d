"""HijriCalendarAdjustment: moon-sighting overrides for the Umm al-Qura table.

The engine keeps three views of the month-start table:

    base table   the pristine Umm al-Qura data, never modified
    overrides    sparse mapping of table offset to replacement MJD
    live table   base table with every override applied; used for all
                 conversions

Every month in the live table is 29 or 30 days long. Setting a month
start may shorten or lengthen the months after it, so the following
entries are clamped forward until a month that is already valid is
reached. Removing an override reverts the entries its insertion
cascaded into, then drops any neighbouring override left with an
invalid length.

Operations validate and compute the complete new override set before
anything is committed, so a failed call leaves the engine untouched.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Mapping

from hilal._internal.constants import (
    MAX_MONTH_LENGTH,
    MIN_MONTH_LENGTH,
    MJD_FACTOR,
)
from hilal._internal.julian import gregorian_to_mjd, mjd_to_gregorian
from hilal._internal.ummalqura import UMM_AL_QURA_DATA, offset_to_month
from hilal._internal.validation import (
    validate_gregorian_components,
    validate_hijri_year,
    validate_month,
    validate_offset,
)
from hilal.convert.json import adjustments_from_json, adjustments_to_json
from hilal.core.calendar import HijriCalendar
from hilal.errors import AdjustmentNotFoundError, InvalidAdjustmentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutoAdjustment:
    """A month start that would move as a side effect of an adjustment."""

    month: int
    year: int
    gregorian_year: int
    gregorian_month: int
    gregorian_day: int
    julian_day: int

    @property
    def gregorian_date(self) -> datetime.date:
        return datetime.date(self.gregorian_year, self.gregorian_month, self.gregorian_day)


@dataclass(frozen=True)
class PossibleStart:
    """A candidate first day for a Hijri month.

    Attributes:
        gregorian_year: Year of the candidate date.
        gregorian_month: Month of the candidate date.
        gregorian_day: Day of the candidate date.
        julian_day: Julian Day of the candidate date.
        is_current_start: True if the live table already starts the
            month on this day.
        auto_adjustments: The later month starts that would be moved if
            this candidate were applied, in table order.
    """

    gregorian_year: int
    gregorian_month: int
    gregorian_day: int
    julian_day: int
    is_current_start: bool
    auto_adjustments: tuple[AutoAdjustment, ...]

    @property
    def gregorian_date(self) -> datetime.date:
        return datetime.date(self.gregorian_year, self.gregorian_month, self.gregorian_day)


def _valid_length(length: int) -> bool:
    return MIN_MONTH_LENGTH <= length <= MAX_MONTH_LENGTH


def _first_invalid_offset(table: list[int]) -> int | None:
    for i in range(1, len(table)):
        if not _valid_length(table[i] - table[i - 1]):
            return i
    return None


class HijriCalendarAdjustment(HijriCalendar):
    """A HijriCalendar whose month starts can be overridden.

    All public methods hold the instance lock, so one engine can be
    shared between threads.

    Args:
        use_umm_al_qura: Whether to use the Umm al-Qura table.
        adjustment_data: Optional initial overrides (offset to MJD).

    Raises:
        InvalidAdjustmentError: If the initial overrides leave a month
            shorter than 29 or longer than 30 days.

    Examples:
        >>> cal = HijriCalendarAdjustment()
        >>> cal.add_adjustment(9, 1446, datetime.date(2025, 3, 2))
        >>> cal.hijri_date(datetime.date(2025, 3, 2))
        HijriDate(1446, 9, 1)
        >>> cal.get_adjustment_data()
        {1544: 60737, 1545: 60766}
        >>> cal.get_adjustment_data_as_json()
        '{"1544":60737,"1545":60766}'
    """

    def __init__(
        self,
        use_umm_al_qura: bool = True,
        adjustment_data: Mapping[int, int] | None = None,
    ) -> None:
        self._base_data: tuple[int, ...] = UMM_AL_QURA_DATA
        # origin offset -> {cascaded offset: (value applied, override it replaced)}
        self._cascades: dict[int, dict[int, tuple[int, int | None]]] = {}
        super().__init__(use_umm_al_qura)
        if adjustment_data:
            self._replace_adjustments(adjustment_data)

    @classmethod
    def from_json(cls, json: str | bytes) -> HijriCalendarAdjustment:
        """Create an engine from JSON adjustment data.

        Raises:
            JSONProcessingError: If the JSON is malformed.
            InvalidAdjustmentError: If the overrides break a month length.
        """
        return cls(use_umm_al_qura=True, adjustment_data=adjustments_from_json(json))

    @property
    def base_table(self) -> tuple[int, ...]:
        """The unmodified Umm al-Qura table."""
        return self._base_data

    @property
    def live_table(self) -> tuple[int, ...]:
        """The table used for conversions, overrides applied."""
        return self.table

    # Adjustments

    def add_adjustment(self, month: int, year: int, gregorian_date: datetime.date) -> None:
        """Set the first day of a Hijri month to a Gregorian date.

        Args:
            month: The Hijri month (1-12).
            year: The Hijri year (1318-1500).
            gregorian_date: The day that becomes the 1st of the month.

        Raises:
            InvalidDateComponentsError: If month is outside 1-12.
            DateOutOfRangeError: If year is outside 1318-1500.
            InvalidAdjustmentError: If the month before would not be 29
                or 30 days long.
        """
        self.add_adjustment_components(
            month, year, gregorian_date.year, gregorian_date.month, gregorian_date.day
        )

    def add_adjustment_components(
        self,
        month: int,
        year: int,
        gregorian_year: int,
        gregorian_month: int,
        gregorian_day: int,
    ) -> None:
        """Set the first day of a Hijri month from Gregorian components.

        Same as :meth:`add_adjustment`; additionally raises
        InvalidDateComponentsError for a Gregorian month outside 1-12 or
        day outside 1-31.
        """
        validate_month(month)
        validate_hijri_year(year)
        offset = self.month_to_offset(month, year)

        with self._lock:
            validate_offset(offset, len(self._um_data), month, year)
            validate_gregorian_components(gregorian_year, gregorian_month, gregorian_day)
            mjd = gregorian_to_mjd(gregorian_year, gregorian_month, gregorian_day)

            length = mjd - self._um_data[offset - 1]
            if not _valid_length(length):
                logger.debug(
                    "rejecting adjustment offset=%d mjd=%d: previous month length %d",
                    offset, mjd, length,
                )
                raise InvalidAdjustmentError(
                    f"adjustment would make month {self._previous_month_label(offset)} "
                    f"{length} days long (must be 29 or 30 days)"
                )

            cascade = self._auto_adjustments(offset, mjd)

            overrides = dict(self._adjustment_data)
            self._set_override(overrides, offset, mjd)
            record = dict(self._cascades.get(offset, {}))
            for key, value in cascade.items():
                prior = record[key][1] if key in record else self._adjustment_data.get(key)
                record[key] = (value, prior)
                self._set_override(overrides, key, value)

            self._commit(overrides)
            # An explicit adjustment is no longer owned by another cascade
            for origin, cascaded in self._cascades.items():
                if origin != offset:
                    cascaded.pop(offset, None)
            if record:
                self._cascades[offset] = record
            else:
                self._cascades.pop(offset, None)

        logger.debug(
            "added adjustment offset=%d mjd=%d cascaded=%s", offset, mjd, sorted(cascade)
        )

    def remove_adjustment(self, month: int, year: int) -> None:
        """Remove the override for a Hijri month.

        Entries moved when the override was added are reverted, and any
        neighbouring override whose month length becomes invalid is
        removed as well.

        Raises:
            InvalidDateComponentsError: If month is outside 1-12.
            DateOutOfRangeError: If year is outside 1318-1500.
            AdjustmentNotFoundError: If the month has no override. An
                override on 1 Muharram 1318, which only a bulk load can
                set, is removed like any other.
        """
        validate_month(month)
        validate_hijri_year(year)
        offset = self.month_to_offset(month, year)

        with self._lock:
            if offset not in self._adjustment_data:
                raise AdjustmentNotFoundError(
                    f"no adjustment found for month {month} of year {year}"
                )

            overrides = dict(self._adjustment_data)
            del overrides[offset]
            self._revert_cascade(offset, overrides)
            deleted = self._auto_deletions(offset, overrides)

            if _first_invalid_offset(self._build_table(overrides)) is not None:
                # Later edits overlapped the cascade; drop only what is invalid
                overrides = dict(self._adjustment_data)
                del overrides[offset]
                deleted = self._auto_deletions(offset, overrides)

            self._commit(overrides)
            self._cascades.pop(offset, None)
            for key in deleted:
                self._cascades.pop(key, None)

        logger.debug("removed adjustment offset=%d auto-deleted=%s", offset, deleted)

    def clear_adjustments(self) -> None:
        """Remove every override, restoring the base table."""
        with self._lock:
            self._commit({})
            self._cascades.clear()

    def get_possible_starts(self, month: int, year: int) -> list[PossibleStart]:
        """List candidate first days for a Hijri month.

        Candidates run from 28 to 31 days after the start of the previous
        month. Each reports the later month starts that choosing it would
        move. Nothing is modified.

        Returns:
            Four candidates in date order, or an empty list if the month
            cannot be adjusted.
        """
        offset = self.month_to_offset(month, year)
        starts: list[PossibleStart] = []

        with self._lock:
            if offset <= 0 or offset >= len(self._um_data):
                return starts

            previous = self._um_data[offset - 1]
            current = self._um_data[offset]
            for mjd in range(previous + MIN_MONTH_LENGTH - 1, previous + MAX_MONTH_LENGTH + 2):
                g_year, g_month, g_day = mjd_to_gregorian(mjd)
                autos = tuple(
                    self._auto_adjustment_entry(key, value)
                    for key, value in sorted(self._auto_adjustments(offset, mjd).items())
                )
                starts.append(
                    PossibleStart(
                        gregorian_year=g_year,
                        gregorian_month=g_month,
                        gregorian_day=g_day,
                        julian_day=mjd + MJD_FACTOR,
                        is_current_start=mjd == current,
                        auto_adjustments=autos,
                    )
                )

        return starts

    # Serialization

    def get_adjustment_data(self) -> dict[int, int]:
        """Return a copy of the overrides (offset to MJD)."""
        with self._lock:
            return dict(self._adjustment_data)

    def get_adjustment_data_as_json(self) -> str:
        """Return the overrides in their JSON wire format.

        Raises:
            JSONProcessingError: If encoding fails.
        """
        with self._lock:
            return adjustments_to_json(self._adjustment_data)

    def set_adjustment_data_from_json(self, json: str | bytes) -> None:
        """Replace every override with the contents of a JSON document.

        Raises:
            JSONProcessingError: If the JSON is malformed.
            InvalidAdjustmentError: If the overrides break a month length.
        """
        self._replace_adjustments(adjustments_from_json(json))

    # Internals

    def _replace_adjustments(self, adjustment_data: Mapping[int, int]) -> None:
        overrides: dict[int, int] = {}
        for offset, value in adjustment_data.items():
            if not 0 <= offset < len(self._base_data):
                logger.warning("ignoring adjustment for out-of-range offset %d", offset)
                continue
            self._set_override(overrides, offset, value)

        bad = _first_invalid_offset(self._build_table(overrides))
        if bad is not None:
            month, year = offset_to_month(bad)
            raise InvalidAdjustmentError(
                f"adjustment data makes month {self._previous_month_label(bad)} "
                f"an invalid length (next month starts {month}/{year})"
            )

        with self._lock:
            self._commit(overrides)
            self._cascades.clear()
        logger.debug("loaded %d adjustments", len(overrides))

    def _set_override(self, overrides: dict[int, int], offset: int, value: int) -> None:
        if self._base_data[offset] == value:
            overrides.pop(offset, None)
        else:
            overrides[offset] = value

    def _commit(self, overrides: dict[int, int]) -> None:
        self._adjustment_data = overrides
        self._um_data = self._build_table(overrides)

    def _auto_adjustments(self, offset: int, value: int) -> dict[int, int]:
        """Clamp the months after ``offset`` until one is already valid."""
        table = list(self._um_data)
        table[offset] = value
        adjustments: dict[int, int] = {}

        for i in range(offset + 1, len(table)):
            length = table[i] - table[i - 1]
            if length < MIN_MONTH_LENGTH:
                table[i] = table[i - 1] + MIN_MONTH_LENGTH
            elif length > MAX_MONTH_LENGTH:
                table[i] = table[i - 1] + MAX_MONTH_LENGTH
            else:
                break
            adjustments[i] = table[i]

        return adjustments

    def _revert_cascade(self, offset: int, overrides: dict[int, int]) -> None:
        """Undo the entries the override at ``offset`` cascaded into.

        Entries changed since by another adjustment are left alone.
        """
        for key, (applied, prior) in self._cascades.get(offset, {}).items():
            if overrides.get(key) != applied:
                continue
            if prior is None:
                del overrides[key]
            else:
                overrides[key] = prior

    def _auto_deletions(self, offset: int, overrides: dict[int, int]) -> list[int]:
        """Drop overrides next to ``offset`` that no longer fit.

        Scans forward, then backward, stopping at the first month that
        has no override or whose length is still valid. ``overrides`` is
        updated in place.
        """
        deleted: list[int] = []
        table = self._build_table(overrides)

        for key in range(offset + 1, len(table)):
            if key not in overrides or _valid_length(table[key] - table[key - 1]):
                break
            del overrides[key]
            table[key] = self._base_data[key]
            deleted.append(key)

        for key in range(offset - 1, -1, -1):
            if key not in overrides or _valid_length(table[key + 1] - table[key]):
                break
            del overrides[key]
            table[key] = self._base_data[key]
            deleted.append(key)

        return deleted

    def _auto_adjustment_entry(self, offset: int, mjd: int) -> AutoAdjustment:
        month, year = offset_to_month(offset)
        g_year, g_month, g_day = mjd_to_gregorian(mjd)
        return AutoAdjustment(
            month=month,
            year=year,
            gregorian_year=g_year,
            gregorian_month=g_month,
            gregorian_day=g_day,
            julian_day=mjd + MJD_FACTOR,
        )

    @staticmethod
    def _previous_month_label(offset: int) -> str:
        month, year = offset_to_month(offset - 1)
        return f"{month}/{year}"


__all__ = ["AutoAdjustment", "HijriCalendarAdjustment", "PossibleStart"]
