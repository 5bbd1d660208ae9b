from __future__ import annotations

import datetime
from typing import ClassVar

from calendrics.chrono import CalendarDate, Chronology
from calendrics.temporal import Field

# Years of the fixed calendars stay within six digits of their epoch.
MIN_YEAR = -999_998
MAX_YEAR = 999_999


class FixedDate(CalendarDate):
    """Date of a calendar that has exactly one chronology instance."""

    __slots__ = ()

    _calendar: ClassVar[Chronology]

    @classmethod
    def of(cls, proleptic_year: int, month: int, day_of_month: int) -> FixedDate:
        return cls._calendar.date(proleptic_year, month, day_of_month)

    @classmethod
    def of_year_day(cls, proleptic_year: int, day_of_year: int) -> FixedDate:
        return cls._calendar.date_year_day(proleptic_year, day_of_year)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> FixedDate:
        return cls._calendar.date_epoch_day(epoch_day)

    @classmethod
    def from_temporal(cls, temporal: CalendarDate | datetime.date) -> FixedDate:
        return cls._calendar.date_from(temporal)

    @classmethod
    def now(cls) -> FixedDate:
        return cls._calendar.date_now()

    def _resolve_previous(self, proleptic_year: int, month: int, day_of_month: int) -> FixedDate:
        chronology = self._chronology
        chronology.range(Field.YEAR).check_valid_value(proleptic_year, Field.YEAR)
        chronology.range(Field.MONTH_OF_YEAR).check_valid_value(month, Field.MONTH_OF_YEAR)
        length = chronology._length_of_month(proleptic_year, month)
        return chronology.date(proleptic_year, month, min(day_of_month, length))

    def length_of_month(self) -> int:
        return self._chronology._length_of_month(self._year, self._month)
