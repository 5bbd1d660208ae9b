from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Union

import numpy as np

from calendrics._exceptions import DateRangeError

ArrayLike = Union[int, "np.ndarray"]

# Days from 0000-03-01 (proleptic ISO) to 1970-01-01.
_DAYS_0000_03_01_TO_1970 = 719_468
_DAYS_PER_400_YEARS = 146_097
_DAYS_PER_4_YEARS = 4 * 365 + 1
# date.toordinal() of 1970-01-01, minus one.
_ORDINAL_TO_EPOCH_DAY = 719_163

_ISO_MONTH_LENGTHS = np.array([31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64)


def _as_int64(*values: ArrayLike) -> tuple[bool, list[np.ndarray]]:
    scalar = all(np.ndim(v) == 0 for v in values)
    arrays = np.broadcast_arrays(*(np.asarray(v, dtype=np.int64) for v in values))
    return scalar, arrays


def _unwrap(value: np.ndarray, scalar: bool) -> ArrayLike:
    return int(value) if scalar else value


# ── proleptic ISO (Gregorian) ─────────────────────────────────────────────

def iso_is_leap_year(year: ArrayLike) -> bool | np.ndarray:
    scalar, (y,) = _as_int64(year)
    leap = (y % 4 == 0) & ((y % 100 != 0) | (y % 400 == 0))
    return bool(leap) if scalar else leap


def iso_length_of_month(year: ArrayLike, month: ArrayLike) -> ArrayLike:
    scalar, (y, m) = _as_int64(year, month)
    feb_29 = (m == 2) & iso_is_leap_year(y)
    return _unwrap(_ISO_MONTH_LENGTHS[m - 1] + feb_29, scalar)


def iso_to_epoch_day(year: ArrayLike, month: ArrayLike, day: ArrayLike) -> ArrayLike:
    """
    Epoch day of a proleptic ISO date, for any signed year.

    Inputs are not validated; month and day must form a real ISO date.
    """
    scalar, (y, m, d) = _as_int64(year, month, day)
    # Count years from March so that the leap day is the last day of a year.
    y = y - np.where(m <= 2, 1, 0)
    era = y // 400
    year_of_era = y - era * 400
    march_month = (m + 9) % 12
    day_of_year = (153 * march_month + 2) // 5 + d - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return _unwrap(era * _DAYS_PER_400_YEARS + day_of_era - _DAYS_0000_03_01_TO_1970, scalar)


def epoch_day_to_iso(
    epoch_day: ArrayLike,
) -> tuple[ArrayLike, ArrayLike, ArrayLike]:
    """Proleptic ISO ``(year, month, day)`` of an epoch day."""
    scalar, (z,) = _as_int64(epoch_day)
    z = z + _DAYS_0000_03_01_TO_1970
    era = z // _DAYS_PER_400_YEARS
    day_of_era = z - era * _DAYS_PER_400_YEARS
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36_524
        - day_of_era // (_DAYS_PER_400_YEARS - 1)
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    march_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * march_month + 2) // 5 + 1
    month = np.where(march_month < 10, march_month + 3, march_month - 9)
    year = year_of_era + era * 400 + np.where(month <= 2, 1, 0)
    return _unwrap(year, scalar), _unwrap(month, scalar), _unwrap(day, scalar)


# ── weekdays ─────────────────────────────────────────────────────────────

def day_of_week(epoch_day: ArrayLike) -> ArrayLike:
    """ISO day of week (Monday = 1) of an epoch day; 1970-01-01 was a Thursday."""
    scalar, (ed,) = _as_int64(epoch_day)
    return _unwrap((ed + 3) % 7 + 1, scalar)


def previous_or_same(epoch_day: ArrayLike, dow: int) -> ArrayLike:
    """Latest epoch day on or before ``epoch_day`` falling on ``dow``."""
    scalar, (ed,) = _as_int64(epoch_day)
    back = (day_of_week(ed) - int(dow)) % 7
    return _unwrap(ed - back, scalar)


# ── four-year cycles ─────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class FourYearCycle:
    """
    Day counting for calendars with a 366-day year every fourth year.

    ``leap_residue`` is ``year % 4`` of the leap years (0 for Julian, 3 for
    the Nile calendars); ``epoch_offset`` is the number of days from the
    calendar's 0001-001 to 1970-01-01.
    """

    leap_residue: int
    epoch_offset: int

    @property
    def _shift(self) -> int:
        # Years to add so that the leap year is the last of each cycle.
        return (4 - self.leap_residue) % 4

    def is_leap_year(self, year: ArrayLike) -> bool | np.ndarray:
        scalar, (y,) = _as_int64(year)
        leap = y % 4 == self.leap_residue
        return bool(leap) if scalar else leap

    def days_before_year(self, year: ArrayLike) -> ArrayLike:
        scalar, (y,) = _as_int64(year)
        return _unwrap((y - 1) * 365 + (y - 1 + self._shift) // 4, scalar)

    def to_epoch_day(self, year: ArrayLike, day_of_year: ArrayLike) -> ArrayLike:
        scalar, (y, doy) = _as_int64(year, day_of_year)
        days = self.days_before_year(y) + doy - 1
        return _unwrap(days - self.epoch_offset, scalar)

    def from_epoch_day(self, epoch_day: ArrayLike) -> tuple[ArrayLike, ArrayLike]:
        """``(year, day_of_year)`` of an epoch day."""
        scalar, (ed,) = _as_int64(epoch_day)
        shifted = ed + self.epoch_offset + 365 * self._shift
        cycle = shifted // _DAYS_PER_4_YEARS
        day_of_cycle = shifted % _DAYS_PER_4_YEARS
        last_day = day_of_cycle == _DAYS_PER_4_YEARS - 1
        year_of_cycle = np.where(last_day, 3, day_of_cycle // 365)
        day_of_year = np.where(last_day, 366, day_of_cycle % 365 + 1)
        year = cycle * 4 + year_of_cycle + 1 - self._shift
        return _unwrap(year, scalar), _unwrap(day_of_year, scalar)


# ── datetime bridge ──────────────────────────────────────────────────────

def from_python_date(value: datetime.date) -> int:
    return value.toordinal() - _ORDINAL_TO_EPOCH_DAY


def to_python_date(epoch_day: int) -> datetime.date:
    ordinal = int(epoch_day) + _ORDINAL_TO_EPOCH_DAY
    if not datetime.date.min.toordinal() <= ordinal <= datetime.date.max.toordinal():
        raise DateRangeError(
            f"Epoch day {epoch_day} is outside the range of datetime.date."
        )
    return datetime.date.fromordinal(ordinal)
