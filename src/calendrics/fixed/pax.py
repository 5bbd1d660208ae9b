from __future__ import annotations

from types import MappingProxyType

import numpy as np

from calendrics.chrono import ChronoPeriod, Chronology, Era
from calendrics.chrono.base import _trunc_div
from calendrics.epoch.conversion import ArrayLike
from calendrics.fixed._base import MAX_YEAR, MIN_YEAR, FixedDate
from calendrics.temporal import Field, ValueRange

DAYS_IN_WEEK = 7
DAYS_IN_MONTH = 28
MONTHS_IN_YEAR = 13
DAYS_IN_YEAR = MONTHS_IN_YEAR * DAYS_IN_MONTH

# Pax 0001-01-01 is ISO 0000-12-31.
_PAX_0001_TO_ISO_1970 = 719_163
_YEARS_PER_CYCLE = 400
_DAYS_PER_CYCLE = 146_097


def _leap_rule(years: np.ndarray) -> np.ndarray:
    last_two = np.abs(years) % 100
    return (last_two == 99) | ((years % 400 != 0) & (last_two % 6 == 0))


# _CUMULATIVE[r] = leap years among 1..r, for r in [0, 400).
_CUMULATIVE = np.zeros(_YEARS_PER_CYCLE, dtype=np.int64)
np.cumsum(_leap_rule(np.arange(1, _YEARS_PER_CYCLE, dtype=np.int64)), out=_CUMULATIVE[1:])
_LEAPS_PER_CYCLE = int(_CUMULATIVE[-1]) + int(_leap_rule(np.array(_YEARS_PER_CYCLE)))


def _leaps_through(n: np.ndarray) -> np.ndarray:
    """Leap years among 1..n, for n >= 0."""
    return (n // _YEARS_PER_CYCLE) * _LEAPS_PER_CYCLE + _CUMULATIVE[n % _YEARS_PER_CYCLE]


def leap_years_before(proleptic_year: ArrayLike) -> ArrayLike:
    """
    Leap years between year 1 and ``proleptic_year``, signed.

    The leap rule is symmetric around year 0, so the count for a year
    ``y <= 0`` mirrors the count for ``1 - y``.
    """
    year = np.asarray(proleptic_year, dtype=np.int64)
    count = np.where(year >= 1, _leaps_through(np.maximum(year - 1, 0)), -_leaps_through(np.maximum(-year, 0)))
    return int(count) if np.ndim(count) == 0 else count


class PaxEra(Era):
    BCE = 0
    CE = 1


class PaxChronology(Chronology):
    """
    The Pax calendar: thirteen months of 28 days.

    A leap year inserts a one-week month "Pax" as month 13, moving the last
    month to 14.  Years whose last two digits are 99, or are divisible by 6
    (00 included), are leap, except multiples of 400.
    """

    id = "Pax"
    era_type = PaxEra
    _ranges = MappingProxyType({
        Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 1, 4),
        Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 52, 53),
        Field.DAY_OF_MONTH: ValueRange.of(1, DAYS_IN_WEEK, DAYS_IN_MONTH),
        Field.DAY_OF_YEAR: ValueRange.of(1, DAYS_IN_YEAR, DAYS_IN_YEAR + DAYS_IN_WEEK),
        Field.MONTH_OF_YEAR: ValueRange.of(1, MONTHS_IN_YEAR, MONTHS_IN_YEAR + 1),
        Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR),
        Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
    })

    def is_leap_year(self, proleptic_year: ArrayLike):
        leap = _leap_rule(np.asarray(proleptic_year, dtype=np.int64))
        return bool(leap) if np.ndim(leap) == 0 else leap

    def _months_in(self, proleptic_year: int) -> int:
        return MONTHS_IN_YEAR + (1 if self.is_leap_year(proleptic_year) else 0)

    def _length_of_month(self, proleptic_year: int, month: int) -> int:
        if month == MONTHS_IN_YEAR and self.is_leap_year(proleptic_year):
            return DAYS_IN_WEEK
        return DAYS_IN_MONTH

    def _year_start(self, proleptic_year: int) -> int:
        """Days from Pax 0001-01-01 to the first day of the year."""
        return (proleptic_year - 1) * DAYS_IN_YEAR + DAYS_IN_WEEK * leap_years_before(proleptic_year)

    def _first_proleptic_month(self, proleptic_year: int) -> int:
        return proleptic_year * MONTHS_IN_YEAR + leap_years_before(proleptic_year)

    # ── factories ────────────────────────────────────────────────────────

    def date(self, proleptic_year: int, month: int, day_of_month: int) -> PaxDate:
        self.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        ValueRange.of(1, self._months_in(proleptic_year)).check_valid_value(month, Field.MONTH_OF_YEAR)
        length = self._length_of_month(proleptic_year, month)
        ValueRange.of(1, length).check_valid_value(day_of_month, Field.DAY_OF_MONTH)
        return PaxDate(self, proleptic_year, month, day_of_month)

    def date_year_day(self, proleptic_year: int, day_of_year: int) -> PaxDate:
        self.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        leap = self.is_leap_year(proleptic_year)
        length = DAYS_IN_YEAR + (DAYS_IN_WEEK if leap else 0)
        ValueRange.of(1, length).check_valid_value(day_of_year, Field.DAY_OF_YEAR)
        before_pax = (MONTHS_IN_YEAR - 1) * DAYS_IN_MONTH
        if leap and day_of_year > before_pax:
            if day_of_year <= before_pax + DAYS_IN_WEEK:
                return self.date(proleptic_year, MONTHS_IN_YEAR, day_of_year - before_pax)
            return self.date(proleptic_year, MONTHS_IN_YEAR + 1, day_of_year - before_pax - DAYS_IN_WEEK)
        month, day = divmod(day_of_year - 1, DAYS_IN_MONTH)
        return self.date(proleptic_year, month + 1, day + 1)

    def date_epoch_day(self, epoch_day: int) -> PaxDate:
        pax_day = int(epoch_day) + _PAX_0001_TO_ISO_1970
        # Pax years average the same length as Gregorian ones.
        year = pax_day * _YEARS_PER_CYCLE // _DAYS_PER_CYCLE + 1
        while self._year_start(year) > pax_day:
            year -= 1
        while self._year_start(year + 1) <= pax_day:
            year += 1
        return self.date_year_day(year, pax_day - self._year_start(year) + 1)


pax = PaxChronology()


class PaxDate(FixedDate):
    """A date in the Pax calendar."""

    __slots__ = ()

    _calendar = pax

    @property
    def day_of_year(self) -> int:
        pax_shift = DAYS_IN_MONTH - DAYS_IN_WEEK if self._month == MONTHS_IN_YEAR + 1 else 0
        return (self._month - 1) * DAYS_IN_MONTH - pax_shift + self._day

    @property
    def proleptic_month(self) -> int:
        return pax._first_proleptic_month(self._year) + self._month - 1

    def length_of_year(self) -> int:
        return DAYS_IN_YEAR + (DAYS_IN_WEEK if self.is_leap_year() else 0)

    def to_epoch_day(self) -> int:
        return pax._year_start(self._year) + self.day_of_year - 1 - _PAX_0001_TO_ISO_1970

    def _length_of_year_in_months(self) -> int:
        return pax._months_in(self._year)

    def range(self, field: Field) -> ValueRange:
        if field is Field.MONTH_OF_YEAR:
            return ValueRange.of(1, self._length_of_year_in_months())
        return super().range(field)

    def _resolve_previous(self, proleptic_year: int, month: int, day_of_month: int) -> PaxDate:
        pax.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        month = min(month, pax._months_in(proleptic_year))
        day = min(day_of_month, pax._length_of_month(proleptic_year, month))
        return pax.date(proleptic_year, month, day)

    # ── year arithmetic keeps the last month the last month ─────────────

    def _with_year(self, proleptic_year: int) -> PaxDate:
        return self.plus_years(proleptic_year - self._year)

    def plus_years(self, years: int) -> PaxDate:
        if years == 0:
            return self
        year = pax.range(Field.YEAR).check_valid_value(self._year + years, Field.YEAR)
        if self._month == MONTHS_IN_YEAR and not self.is_leap_year() and pax.is_leap_year(year):
            return pax.date(year, MONTHS_IN_YEAR + 1, self._day)
        return self._resolve_previous(year, self._month, self._day)

    def plus_months(self, months: int) -> PaxDate:
        if months == 0:
            return self
        target = self.proleptic_month + months
        year = target // MONTHS_IN_YEAR
        while pax._first_proleptic_month(year) > target:
            year -= 1
        while pax._first_proleptic_month(year + 1) <= target:
            year += 1
        month = target - pax._first_proleptic_month(year) + 1
        return self._resolve_previous(year, month, self._day)

    def _years_until(self, end: PaxDate) -> int:
        # A date in month 13 of a short year is moved past the week a leap
        # year would insert, so that years are compared month for month.
        start_shift = DAYS_IN_WEEK if (
            self._month == MONTHS_IN_YEAR and not self.is_leap_year() and end.is_leap_year()
        ) else 0
        end_shift = DAYS_IN_WEEK if (
            end.month == MONTHS_IN_YEAR and not end.is_leap_year() and self.is_leap_year()
        ) else 0
        start = self._year * 512 + self.day_of_year + start_shift
        stop = end.proleptic_year * 512 + end.day_of_year + end_shift
        return _trunc_div(stop - start, 512)

    def _period_until(self, end: PaxDate) -> ChronoPeriod:
        years = self._years_until(end)
        same_year = self.plus_years(years)
        months = same_year._months_until(end)
        days = same_year.plus_months(months)._days_until(end)
        return pax.period(years, months, days)
