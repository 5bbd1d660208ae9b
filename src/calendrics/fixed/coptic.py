from __future__ import annotations

from calendrics.chrono import Era
from calendrics.epoch import FourYearCycle
from calendrics.fixed._nile import NileChronology, NileDate


class CopticEra(Era):
    BEFORE_AM = 0
    AM = 1


class CopticChronology(NileChronology):
    """The Coptic calendar; 0001-01-01 (AM) is ISO 0284-08-29."""

    id = "Coptic"
    era_type = CopticEra
    _cycle = FourYearCycle(leap_residue=3, epoch_offset=615_558)

    def _new_date(self, proleptic_year: int, month: int, day_of_month: int) -> CopticDate:
        return CopticDate(self, proleptic_year, month, day_of_month)


coptic = CopticChronology()


class CopticDate(NileDate):
    """A date in the Coptic calendar."""

    __slots__ = ()

    _calendar = coptic
