from __future__ import annotations

from types import MappingProxyType

from calendrics.chrono import Era
from calendrics.epoch import FourYearCycle
from calendrics.fixed._nile import NileChronology, NileDate
from calendrics.temporal import Field, ValueRange

DAYS_IN_WEEK = 10


class FrenchRepublicEra(Era):
    BEFORE_REPUBLICAN = 0
    REPUBLICAN = 1


class FrenchRepublicChronology(NileChronology):
    """
    The French Republican calendar, extended proleptically.

    Months are split into three ten-day weeks (décades); the complementary
    days of month 13 form a single short week.  0001-01-01 is ISO 1792-09-22.
    """

    id = "French Republican"
    era_type = FrenchRepublicEra
    _cycle = FourYearCycle(leap_residue=3, epoch_offset=64_748)
    _ranges = MappingProxyType({
        **NileChronology._ranges,
        Field.DAY_OF_WEEK: ValueRange.of(1, DAYS_IN_WEEK),
        Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, DAYS_IN_WEEK),
        Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, DAYS_IN_WEEK),
        Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 1, 3),
        Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 37),
    })

    def _new_date(self, proleptic_year: int, month: int, day_of_month: int) -> FrenchRepublicDate:
        return FrenchRepublicDate(self, proleptic_year, month, day_of_month)


french_republic = FrenchRepublicChronology()


class FrenchRepublicDate(NileDate):
    """A date in the French Republican calendar; its week has ten days."""

    __slots__ = ()

    _calendar = french_republic

    @property
    def day_of_week(self) -> int:
        return (self._day - 1) % DAYS_IN_WEEK + 1

    def _length_of_week(self) -> int:
        return DAYS_IN_WEEK
