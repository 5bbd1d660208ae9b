from __future__ import annotations

from types import MappingProxyType

from calendrics.chrono import Chronology, Era
from calendrics.epoch import FourYearCycle
from calendrics.epoch.conversion import ArrayLike
from calendrics.fixed._base import MAX_YEAR, MIN_YEAR, FixedDate
from calendrics.temporal import Field, Month, ValueRange

# Julian 0001-01-01 is ISO 0000-12-30.
_CYCLE = FourYearCycle(leap_residue=0, epoch_offset=719_164)


class JulianEra(Era):
    BC = 0
    AD = 1


class JulianChronology(Chronology):
    """
    The proleptic Julian calendar: ISO month lengths, a leap day every
    fourth year with no century exception.
    """

    id = "Julian"
    era_type = JulianEra
    _ranges = MappingProxyType({
        Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
        Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR),
        Field.PROLEPTIC_MONTH: ValueRange.of(MIN_YEAR * 12, MAX_YEAR * 12 + 11),
    })

    def is_leap_year(self, proleptic_year: ArrayLike):
        return _CYCLE.is_leap_year(proleptic_year)

    def _length_of_month(self, proleptic_year: int, month: int) -> int:
        return Month(month).length(self.is_leap_year(proleptic_year))

    def date(self, proleptic_year: int, month: int, day_of_month: int) -> JulianDate:
        self.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        self.range(Field.MONTH_OF_YEAR).check_valid_value(month, Field.MONTH_OF_YEAR)
        length = self._length_of_month(proleptic_year, month)
        ValueRange.of(1, length).check_valid_value(day_of_month, Field.DAY_OF_MONTH)
        return JulianDate(self, proleptic_year, month, day_of_month)

    def date_year_day(self, proleptic_year: int, day_of_year: int) -> JulianDate:
        self.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        leap = self.is_leap_year(proleptic_year)
        ValueRange.of(1, 366 if leap else 365).check_valid_value(day_of_year, Field.DAY_OF_YEAR)
        month = max(m for m in Month if m.first_day_of_year(leap) <= day_of_year)
        day = day_of_year - month.first_day_of_year(leap) + 1
        return self.date(proleptic_year, month, day)

    def date_epoch_day(self, epoch_day: int) -> JulianDate:
        year, day_of_year = _CYCLE.from_epoch_day(int(epoch_day))
        return self.date_year_day(year, day_of_year)


julian = JulianChronology()


class JulianDate(FixedDate):
    """A date in the proleptic Julian calendar."""

    __slots__ = ()

    _calendar = julian

    @property
    def day_of_year(self) -> int:
        return Month(self._month).first_day_of_year(self.is_leap_year()) + self._day - 1

    def length_of_year(self) -> int:
        return 366 if self.is_leap_year() else 365

    def to_epoch_day(self) -> int:
        return _CYCLE.to_epoch_day(self._year, self.day_of_year)
