from __future__ import annotations

from abc import abstractmethod
from types import MappingProxyType
from typing import ClassVar

from calendrics.chrono import Chronology
from calendrics.epoch import FourYearCycle
from calendrics.epoch.conversion import ArrayLike
from calendrics.fixed._base import MAX_YEAR, MIN_YEAR, FixedDate
from calendrics.temporal import Field, ValueRange

DAYS_IN_MONTH = 30


class NileChronology(Chronology):
    """
    Twelve months of 30 days then five epagomenal days (six in a leap
    year) as month 13; the leap year is the one before each multiple of 4.
    """

    _cycle: ClassVar[FourYearCycle]
    _ranges = MappingProxyType({
        Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 1, 5),
        Field.DAY_OF_MONTH: ValueRange.of(1, 5, DAYS_IN_MONTH),
        Field.MONTH_OF_YEAR: ValueRange.of(1, 13),
        Field.PROLEPTIC_MONTH: ValueRange.of(MIN_YEAR * 13, MAX_YEAR * 13 + 12),
        Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR),
        Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
    })

    @abstractmethod
    def _new_date(self, proleptic_year: int, month: int, day_of_month: int) -> NileDate:
        ...

    def is_leap_year(self, proleptic_year: ArrayLike):
        return self._cycle.is_leap_year(proleptic_year)

    def _length_of_month(self, proleptic_year: int, month: int) -> int:
        if month == 13:
            return 6 if self.is_leap_year(proleptic_year) else 5
        return DAYS_IN_MONTH

    def date(self, proleptic_year: int, month: int, day_of_month: int) -> NileDate:
        self.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        self.range(Field.MONTH_OF_YEAR).check_valid_value(month, Field.MONTH_OF_YEAR)
        length = self._length_of_month(proleptic_year, month)
        ValueRange.of(1, length).check_valid_value(day_of_month, Field.DAY_OF_MONTH)
        return self._new_date(proleptic_year, month, day_of_month)

    def date_year_day(self, proleptic_year: int, day_of_year: int) -> NileDate:
        self.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        length = 366 if self.is_leap_year(proleptic_year) else 365
        ValueRange.of(1, length).check_valid_value(day_of_year, Field.DAY_OF_YEAR)
        month, day = divmod(day_of_year - 1, DAYS_IN_MONTH)
        return self.date(proleptic_year, month + 1, day + 1)

    def date_epoch_day(self, epoch_day: int) -> NileDate:
        year, day_of_year = self._cycle.from_epoch_day(int(epoch_day))
        return self.date_year_day(year, day_of_year)


class NileDate(FixedDate):
    __slots__ = ()

    _chronology: NileChronology

    @property
    def day_of_year(self) -> int:
        return (self._month - 1) * DAYS_IN_MONTH + self._day

    def length_of_year(self) -> int:
        return 366 if self.is_leap_year() else 365

    def to_epoch_day(self) -> int:
        return self._chronology._cycle.to_epoch_day(self._year, self.day_of_year)
