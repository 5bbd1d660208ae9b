from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from calendrics._exceptions import CalendarMismatchError, DateRangeError
from calendrics.temporal import Field, Unit

if TYPE_CHECKING:
    from calendrics.chrono.base import CalendarDate, Chronology


@dataclass(frozen=True, slots=True)
class ChronoPeriod:
    """
    An amount of years, months and days scoped to one chronology.

    Periods only apply to dates of the chronology that created them, since a
    "month" means a different number of days in each calendar.
    """

    chronology: Chronology
    years: int = 0
    months: int = 0
    days: int = 0

    # ── queries ──────────────────────────────────────────────────────────

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    @property
    def is_negative(self) -> bool:
        return self.years < 0 or self.months < 0 or self.days < 0

    def _month_range(self) -> int:
        # Number of months in every year, or 0 when years differ in length.
        months = self.chronology.range(Field.MONTH_OF_YEAR)
        if not months.is_fixed:
            return 0
        return months.maximum - months.minimum + 1

    # ── arithmetic on periods ────────────────────────────────────────────

    def plus(self, other: ChronoPeriod) -> ChronoPeriod:
        self._check_chronology(other.chronology)
        return ChronoPeriod(
            self.chronology,
            self.years + other.years,
            self.months + other.months,
            self.days + other.days,
        )

    def multiplied_by(self, scalar: int) -> ChronoPeriod:
        return ChronoPeriod(
            self.chronology, self.years * scalar, self.months * scalar, self.days * scalar
        )

    def negated(self) -> ChronoPeriod:
        return self.multiplied_by(-1)

    def normalized(self) -> ChronoPeriod:
        """Fold whole years out of the months; days are left alone."""
        month_range = self._month_range()
        if month_range == 0:
            raise DateRangeError(
                f"Cannot normalize a period of {self.chronology}: month count varies by year."
            )
        total = self.years * month_range + self.months
        years = abs(total) // month_range * (1 if total >= 0 else -1)
        return ChronoPeriod(self.chronology, years, total - years * month_range, self.days)

    def __add__(self, other: ChronoPeriod) -> ChronoPeriod:
        if not isinstance(other, ChronoPeriod):
            return NotImplemented
        return self.plus(other)

    def __neg__(self) -> ChronoPeriod:
        return self.negated()

    # ── applying to dates ────────────────────────────────────────────────

    def add_to(self, date: CalendarDate) -> CalendarDate:
        self._check_chronology(date.chronology)
        month_range = self._month_range()
        if self.months == 0:
            if self.years != 0:
                date = date.plus(self.years, Unit.YEARS)
        elif month_range:
            date = date.plus(self.years * month_range + self.months, Unit.MONTHS)
        else:
            if self.years != 0:
                date = date.plus(self.years, Unit.YEARS)
            date = date.plus(self.months, Unit.MONTHS)
        if self.days != 0:
            date = date.plus(self.days, Unit.DAYS)
        return date

    def subtract_from(self, date: CalendarDate) -> CalendarDate:
        self._check_chronology(date.chronology)
        month_range = self._month_range()
        if self.months == 0:
            if self.years != 0:
                date = date.minus(self.years, Unit.YEARS)
        elif month_range:
            date = date.minus(self.years * month_range + self.months, Unit.MONTHS)
        else:
            if self.years != 0:
                date = date.minus(self.years, Unit.YEARS)
            date = date.minus(self.months, Unit.MONTHS)
        if self.days != 0:
            date = date.minus(self.days, Unit.DAYS)
        return date

    def _check_chronology(self, chronology: Chronology) -> None:
        if chronology != self.chronology:
            raise CalendarMismatchError(
                f"Chronology mismatch, expected: {self.chronology}, actual: {chronology}"
            )

    def __str__(self) -> str:
        if self.is_zero:
            return f"{self.chronology} P0D"
        parts = "".join(
            f"{value}{letter}"
            for value, letter in ((self.years, "Y"), (self.months, "M"), (self.days, "D"))
            if value
        )
        return f"{self.chronology} P{parts}"
