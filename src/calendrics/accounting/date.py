from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from calendrics.chrono import CalendarDate
from calendrics.temporal import Field

if TYPE_CHECKING:
    from calendrics.accounting.chronology import AccountingChronology


class AccountingDate(CalendarDate):
    """A date of an ``AccountingChronology``; create one through the chronology."""

    __slots__ = ()

    _chronology: AccountingChronology

    @classmethod
    def of(cls, chronology: AccountingChronology, proleptic_year: int, month: int, day_of_month: int) -> AccountingDate:
        return chronology.date(proleptic_year, month, day_of_month)

    @classmethod
    def of_year_day(cls, chronology: AccountingChronology, proleptic_year: int, day_of_year: int) -> AccountingDate:
        return chronology.date_year_day(proleptic_year, day_of_year)

    @classmethod
    def of_epoch_day(cls, chronology: AccountingChronology, epoch_day: int) -> AccountingDate:
        return chronology.date_epoch_day(epoch_day)

    @classmethod
    def from_temporal(cls, chronology: AccountingChronology, temporal: CalendarDate | datetime.date) -> AccountingDate:
        return chronology.date_from(temporal)

    # ── hooks ────────────────────────────────────────────────────────────

    def _leap_month(self) -> int | None:
        return self._chronology._leap_month(self._year)

    @property
    def day_of_year(self) -> int:
        weeks = self._chronology.division.weeks_at_start_of_month(self._month, self._leap_month())
        return 7 * weeks + self._day

    def length_of_month(self) -> int:
        return self._chronology._length_of_month(self._year, self._month)

    def length_of_year(self) -> int:
        return 371 if self.is_leap_year() else 364

    def to_epoch_day(self) -> int:
        return self._chronology._year_start(self._year) + self.day_of_year - 1

    def _resolve_previous(self, proleptic_year: int, month: int, day_of_month: int) -> AccountingDate:
        chronology = self._chronology
        chronology.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        chronology.range(Field.MONTH_OF_YEAR).check_valid_value(month, Field.MONTH_OF_YEAR)
        length = chronology._length_of_month(proleptic_year, month)
        return chronology.date(proleptic_year, month, min(day_of_month, length))
