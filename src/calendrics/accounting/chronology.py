from __future__ import annotations

from types import MappingProxyType

import numpy as np

from calendrics.accounting.config import AccountingConfig
from calendrics.accounting.date import AccountingDate
from calendrics.accounting.division import YearDivision
from calendrics.chrono import Chronology, Era
from calendrics.epoch import iso_length_of_month, iso_to_epoch_day, previous_or_same
from calendrics.epoch.conversion import ArrayLike
from calendrics.temporal import DayOfWeek, Field, Month, ValueRange

# Fiscal years are limited to six digits either side of year 0.
MAX_YEAR = 999_999
_NEAREST_END_ALLOWANCE = 3


class AccountingEra(Era):
    BCE = 0
    CE = 1


class AccountingChronology(Chronology):
    """
    A 52/53-week fiscal calendar.

    Every year ends on the same weekday near the end of a given ISO month
    and holds 52 weeks, or 53 in a leap year.  The weeks are grouped into
    months by a ``YearDivision``; the leap week goes to one fixed month.

    Build instances with ``AccountingChronologyBuilder``.  Year-rule queries
    accept NumPy arrays of years::

        chrono.year_end(np.arange(2000, 2010))
        chrono.is_leap_year(np.arange(2000, 2010))
    """

    id = "Accounting"
    era_type = AccountingEra

    def __init__(self, config: AccountingConfig) -> None:
        self._config = config
        division = config.division
        months = division.months_in_year
        weeks = division.weeks_in_month_range(config.leap_week_in_month)
        self._ranges = MappingProxyType({
            Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, weeks.minimum, weeks.maximum),
            Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 52, 53),
            Field.DAY_OF_MONTH: ValueRange.of(1, weeks.minimum * 7, weeks.maximum * 7),
            Field.DAY_OF_YEAR: ValueRange.of(1, 364, 371),
            Field.MONTH_OF_YEAR: division.months_in_year_range(),
            Field.PROLEPTIC_MONTH: ValueRange.of(-MAX_YEAR * months, MAX_YEAR * months + months - 1),
            Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR, MAX_YEAR + 1),
            Field.YEAR: ValueRange.of(-MAX_YEAR, MAX_YEAR),
        })
        self._year_zero_end: int = self.year_end(0)

    # ── configuration ────────────────────────────────────────────────────

    @property
    def config(self) -> AccountingConfig:
        return self._config

    @property
    def ends_on(self) -> DayOfWeek:
        return self._config.ends_on

    @property
    def end(self) -> Month:
        return self._config.end

    @property
    def in_last_week(self) -> bool:
        return self._config.in_last_week

    @property
    def division(self) -> YearDivision:
        return self._config.division

    @property
    def leap_week_in_month(self) -> int:
        return self._config.leap_week_in_month

    @property
    def year_offset(self) -> int:
        return self._config.year_offset

    # ── year rules ───────────────────────────────────────────────────────

    def year_end(self, proleptic_year: ArrayLike) -> ArrayLike:
        """
        Epoch day of the last day of fiscal ``proleptic_year``.

        That is the ``ends_on`` weekday on or before the last day of the end
        month, or for the "nearest" rule on or before the 3rd of the month
        after it.
        """
        iso_year = np.asarray(proleptic_year, dtype=np.int64) + self.year_offset
        month = int(self.end)
        limit = iso_to_epoch_day(iso_year, month, iso_length_of_month(iso_year, month))
        if not self.in_last_week:
            limit = limit + _NEAREST_END_ALLOWANCE
        return previous_or_same(limit, self.ends_on)

    def is_leap_year(self, proleptic_year: ArrayLike) -> bool | np.ndarray:
        """A year is leap when it holds 53 weeks (371 days) rather than 52."""
        year = np.asarray(proleptic_year, dtype=np.int64)
        leap = self.year_end(year) - self.year_end(year - 1) == 371
        return bool(leap) if np.ndim(leap) == 0 else leap

    def previous_leap_years(self, proleptic_year: ArrayLike) -> ArrayLike:
        """
        Leap years between year 1 and ``proleptic_year``, signed.

        Zero for year 1; negative for earlier years, so that
        ``previous_leap_years(y + 1) - previous_leap_years(y)`` is 1 exactly
        when ``y`` is leap.
        """
        year = np.asarray(proleptic_year, dtype=np.int64)
        weeks = (self.year_end(year - 1) - self._year_zero_end) // 7
        previous = weeks - 52 * (year - 1)
        return int(previous) if np.ndim(previous) == 0 else previous

    def _year_start(self, proleptic_year: int) -> int:
        return (
            self._year_zero_end + 1
            + 364 * (proleptic_year - 1)
            + 7 * self.previous_leap_years(proleptic_year)
        )

    def _leap_month(self, proleptic_year: int) -> int | None:
        return self.leap_week_in_month if self.is_leap_year(proleptic_year) else None

    def _length_of_month(self, proleptic_year: int, month: int) -> int:
        return 7 * self.division.weeks_in_month(month, self._leap_month(proleptic_year))

    # ── factories ────────────────────────────────────────────────────────

    def date(self, proleptic_year: int, month: int, day_of_month: int) -> AccountingDate:
        self.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        self.range(Field.MONTH_OF_YEAR).check_valid_value(month, Field.MONTH_OF_YEAR)
        length = self._length_of_month(proleptic_year, month)
        ValueRange.of(1, length).check_valid_value(day_of_month, Field.DAY_OF_MONTH)
        return AccountingDate(self, proleptic_year, month, day_of_month)

    def date_year_day(self, proleptic_year: int, day_of_year: int) -> AccountingDate:
        self.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        leap = self._leap_month(proleptic_year)
        ValueRange.of(1, 371 if leap else 364).check_valid_value(day_of_year, Field.DAY_OF_YEAR)
        weeks = (day_of_year - 1) // 7
        month = self.division.month_from_elapsed_weeks(weeks, leap)
        day = day_of_year - 7 * self.division.weeks_at_start_of_month(month, leap)
        return self.date(proleptic_year, month, day)

    def date_epoch_day(self, epoch_day: int) -> AccountingDate:
        epoch_day = int(epoch_day)
        # Estimate from the mean Gregorian year, then step onto the right year.
        year = (epoch_day - self._year_zero_end - 1) * 400 // 146_097 + 1
        while self._year_start(year) > epoch_day:
            year -= 1
        while self._year_start(year + 1) <= epoch_day:
            year += 1
        return self.date_year_day(year, epoch_day - self._year_start(year) + 1)

    # ── identity ─────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccountingChronology):
            return NotImplemented
        return self._config == other._config

    def __hash__(self) -> int:
        return hash(self._config)

    def __str__(self) -> str:
        rule = "in last week of" if self.in_last_week else "nearest end of"
        naming = "starting" if self.year_offset else "ending"
        return (
            f"Accounting calendar ends on {self.ends_on.name} {rule} {self.end.name}, "
            f"year divided in {self.division.name} with leap-week in month "
            f"{self.leap_week_in_month} {naming} in the given ISO year"
        )
