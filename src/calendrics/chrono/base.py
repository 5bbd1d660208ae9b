from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from functools import total_ordering
from typing import ClassVar, Mapping

from calendrics._exceptions import CalendarMismatchError, UnsupportedFieldError
from calendrics.chrono.era import Era
from calendrics.chrono.period import ChronoPeriod
from calendrics.epoch import from_python_date, to_python_date
from calendrics.epoch import day_of_week as iso_day_of_week
from calendrics.temporal import Field, Unit, ValueRange

# Fields whose new value is checked against the date's own range, not only
# the chronology's outer range.
_DATE_RANGE_CHECKED = frozenset({
    Field.DAY_OF_WEEK,
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH,
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR,
    Field.DAY_OF_MONTH,
    Field.DAY_OF_YEAR,
    Field.ALIGNED_WEEK_OF_MONTH,
    Field.ALIGNED_WEEK_OF_YEAR,
})

_YEARS_PER_UNIT = {
    Unit.YEARS: 1,
    Unit.DECADES: 10,
    Unit.CENTURIES: 100,
    Unit.MILLENNIA: 1000,
}


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def _check_supported(field: Field) -> None:
    if not isinstance(field, Field) or not field.is_date_based:
        raise UnsupportedFieldError(f"Unsupported field: {field}")


def _check_supported_unit(unit: Unit) -> None:
    if not isinstance(unit, Unit) or not unit.is_date_based:
        raise UnsupportedFieldError(f"Unsupported unit: {unit}")


class Chronology(ABC):
    """
    A calendar system: field ranges, eras and date factories.

    Subclasses set ``era_type`` and the ``_ranges`` table; fields absent from
    the table fall back to ``Field.base_range``.  Chronologies are immutable
    and shared by every date they create.
    """

    id: ClassVar[str]
    era_type: ClassVar[type[Era]]
    _ranges: Mapping[Field, ValueRange]

    # ── rules ────────────────────────────────────────────────────────────

    @abstractmethod
    def is_leap_year(self, proleptic_year: int) -> bool:
        ...

    def range(self, field: Field) -> ValueRange:
        _check_supported(field)
        return self._ranges.get(field, field.base_range)

    # ── eras ─────────────────────────────────────────────────────────────

    def eras(self) -> list[Era]:
        return list(self.era_type)

    def era_of(self, value: int) -> Era:
        return self.era_type.of(value)

    def proleptic_year(self, era: Era, year_of_era: int) -> int:
        if not isinstance(era, self.era_type):
            raise CalendarMismatchError(f"Era must be {self.era_type.__name__}; got {era!r}.")
        return year_of_era if era.value == 1 else 1 - year_of_era

    # ── factories ────────────────────────────────────────────────────────

    @abstractmethod
    def date(self, proleptic_year: int, month: int, day_of_month: int) -> CalendarDate:
        ...

    @abstractmethod
    def date_year_day(self, proleptic_year: int, day_of_year: int) -> CalendarDate:
        ...

    @abstractmethod
    def date_epoch_day(self, epoch_day: int) -> CalendarDate:
        ...

    def date_of_era(self, era: Era, year_of_era: int, month: int, day_of_month: int) -> CalendarDate:
        return self.date(self.proleptic_year(era, year_of_era), month, day_of_month)

    def date_year_day_of_era(self, era: Era, year_of_era: int, day_of_year: int) -> CalendarDate:
        return self.date_year_day(self.proleptic_year(era, year_of_era), day_of_year)

    def date_from(self, temporal: CalendarDate | datetime.date) -> CalendarDate:
        """
        A date of this chronology for ``temporal``.

        ISO dates (``datetime.date`` and ``datetime.datetime``) convert
        through their epoch day; dates of another calendar are rejected.
        """
        if isinstance(temporal, CalendarDate):
            if temporal.chronology != self:
                raise CalendarMismatchError(
                    f"Unable to obtain a date of {self} from a date of {temporal.chronology}."
                )
            return temporal
        if isinstance(temporal, datetime.date):
            return self.date_epoch_day(from_python_date(temporal))
        raise CalendarMismatchError(
            f"Unable to obtain a date of {self} from {type(temporal).__name__}."
        )

    def date_now(self) -> CalendarDate:
        return self.date_from(datetime.date.today())

    def period(self, years: int = 0, months: int = 0, days: int = 0) -> ChronoPeriod:
        return ChronoPeriod(self, years, months, days)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


@total_ordering
class CalendarDate(ABC):
    """
    Immutable date of a chronology, held as (proleptic year, month, day).

    Era, year-of-era, day-of-year and the aligned fields are derived on
    demand.  Every operation returns a new date; use the chronology's
    factories (or the calendar's ``of`` classmethods) to create one.
    """

    __slots__ = ("_chronology", "_year", "_month", "_day")

    def __init__(self, chronology: Chronology, proleptic_year: int, month: int, day_of_month: int) -> None:
        self._chronology = chronology
        self._year = int(proleptic_year)
        self._month = int(month)
        self._day = int(day_of_month)

    # ── calendar-specific hooks ──────────────────────────────────────────

    @property
    @abstractmethod
    def day_of_year(self) -> int:
        ...

    @abstractmethod
    def length_of_month(self) -> int:
        ...

    @abstractmethod
    def length_of_year(self) -> int:
        ...

    @abstractmethod
    def to_epoch_day(self) -> int:
        ...

    @abstractmethod
    def _resolve_previous(self, proleptic_year: int, month: int, day_of_month: int) -> CalendarDate:
        """A valid date, moving month and day back until they fit the year."""

    def _length_of_week(self) -> int:
        return 7

    def _length_of_year_in_months(self) -> int:
        return self._chronology.range(Field.MONTH_OF_YEAR).maximum

    # ── basic accessors ──────────────────────────────────────────────────

    @property
    def chronology(self) -> Chronology:
        return self._chronology

    @property
    def proleptic_year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day_of_month(self) -> int:
        return self._day

    @property
    def day_of_week(self) -> int:
        return iso_day_of_week(self.to_epoch_day())

    @property
    def era(self) -> Era:
        return self._chronology.era_type.of_year(self._year)

    @property
    def year_of_era(self) -> int:
        return self._year if self._year >= 1 else 1 - self._year

    @property
    def proleptic_month(self) -> int:
        return self._year * self._length_of_year_in_months() + self._month - 1

    def is_leap_year(self) -> bool:
        return self._chronology.is_leap_year(self._year)

    # ── fields ───────────────────────────────────────────────────────────

    def is_supported(self, field: Field) -> bool:
        return isinstance(field, Field) and field.is_date_based

    def is_supported_unit(self, unit: Unit) -> bool:
        return isinstance(unit, Unit) and unit.is_date_based

    def range(self, field: Field) -> ValueRange:
        _check_supported(field)
        week = self._length_of_week()
        if field is Field.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is Field.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if field is Field.ALIGNED_WEEK_OF_MONTH:
            return ValueRange.of(1, -(-self.length_of_month() // week))
        if field is Field.ALIGNED_WEEK_OF_YEAR:
            return ValueRange.of(1, -(-self.length_of_year() // week))
        return self._chronology.range(field)

    def get(self, field: Field) -> int:
        _check_supported(field)
        week = self._length_of_week()
        if field is Field.DAY_OF_WEEK:
            return self.day_of_week
        if field is Field.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (self._day - 1) % week + 1
        if field is Field.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self.day_of_year - 1) % week + 1
        if field is Field.DAY_OF_MONTH:
            return self._day
        if field is Field.DAY_OF_YEAR:
            return self.day_of_year
        if field is Field.EPOCH_DAY:
            return self.to_epoch_day()
        if field is Field.ALIGNED_WEEK_OF_MONTH:
            return (self._day - 1) // week + 1
        if field is Field.ALIGNED_WEEK_OF_YEAR:
            return (self.day_of_year - 1) // week + 1
        if field is Field.MONTH_OF_YEAR:
            return self._month
        if field is Field.PROLEPTIC_MONTH:
            return self.proleptic_month
        if field is Field.YEAR_OF_ERA:
            return self.year_of_era
        if field is Field.YEAR:
            return self._year
        if field is Field.ERA:
            return 1 if self._year >= 1 else 0
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def with_field(self, field: Field, value: int) -> CalendarDate:
        """
        A copy with ``field`` set to ``value``.

        Setting a month or year keeps the day of month, clamped to the new
        month's length.  Day-of-week, day-of-month, day-of-year and the
        aligned fields must also fit this date's own range.
        """
        _check_supported(field)
        self._chronology.range(field).check_valid_value(value, field)
        if field in _DATE_RANGE_CHECKED:
            self.range(field).check_valid_value(value, field)
        value = int(value)
        week = self._length_of_week()

        if field is Field.DAY_OF_WEEK:
            return self.plus_days(value - self.day_of_week)
        if field in (Field.ALIGNED_DAY_OF_WEEK_IN_MONTH, Field.ALIGNED_DAY_OF_WEEK_IN_YEAR):
            return self.plus_days(value - self.get(field))
        if field is Field.DAY_OF_MONTH:
            return self._resolve_previous(self._year, self._month, value)
        if field is Field.DAY_OF_YEAR:
            return self._chronology.date_year_day(self._year, value)
        if field is Field.EPOCH_DAY:
            return self._chronology.date_epoch_day(value)
        if field in (Field.ALIGNED_WEEK_OF_MONTH, Field.ALIGNED_WEEK_OF_YEAR):
            return self.plus_days((value - self.get(field)) * week)
        if field is Field.MONTH_OF_YEAR:
            return self._resolve_previous(self._year, value, self._day)
        if field is Field.PROLEPTIC_MONTH:
            return self.plus_months(value - self.proleptic_month)
        if field is Field.YEAR_OF_ERA:
            year = value if self._year >= 1 else 1 - value
            return self._resolve_previous(year, self._month, self._day)
        if field is Field.YEAR:
            return self._with_year(value)
        if field is Field.ERA:
            if value == self.get(Field.ERA):
                return self
            return self._resolve_previous(1 - self._year, self._month, self._day)
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def _with_year(self, proleptic_year: int) -> CalendarDate:
        return self._resolve_previous(proleptic_year, self._month, self._day)

    # ── arithmetic ───────────────────────────────────────────────────────

    def plus(self, amount: int | ChronoPeriod, unit: Unit | None = None) -> CalendarDate:
        """
        ``plus(amount, unit)`` or ``plus(period)``.

        Month and year steps keep the day of month, clamped to the length of
        the destination month.
        """
        if unit is None:
            if isinstance(amount, ChronoPeriod):
                return amount.add_to(self)
            raise TypeError(f"A unit is required to add {amount!r}.")
        _check_supported_unit(unit)
        amount = int(amount)
        if unit is Unit.DAYS:
            return self.plus_days(amount)
        if unit is Unit.WEEKS:
            return self.plus_days(amount * 7)
        if unit is Unit.MONTHS:
            return self.plus_months(amount)
        if unit in _YEARS_PER_UNIT:
            return self.plus_years(amount * _YEARS_PER_UNIT[unit])
        if unit is Unit.ERAS:
            return self.with_field(Field.ERA, self.get(Field.ERA) + amount)
        raise UnsupportedFieldError(f"Unsupported unit: {unit}")

    def minus(self, amount: int | ChronoPeriod, unit: Unit | None = None) -> CalendarDate:
        if unit is None:
            if isinstance(amount, ChronoPeriod):
                return amount.subtract_from(self)
            raise TypeError(f"A unit is required to subtract {amount!r}.")
        return self.plus(-int(amount), unit)

    def plus_days(self, days: int) -> CalendarDate:
        if days == 0:
            return self
        return self._chronology.date_epoch_day(self.to_epoch_day() + days)

    def plus_months(self, months: int) -> CalendarDate:
        if months == 0:
            return self
        per_year = self._length_of_year_in_months()
        target = self.proleptic_month + months
        return self._resolve_previous(target // per_year, target % per_year + 1, self._day)

    def plus_years(self, years: int) -> CalendarDate:
        if years == 0:
            return self
        return self._resolve_previous(self._year + years, self._month, self._day)

    def __add__(self, other: ChronoPeriod) -> CalendarDate:
        if not isinstance(other, ChronoPeriod):
            return NotImplemented
        return other.add_to(self)

    def __sub__(self, other: ChronoPeriod) -> CalendarDate:
        if not isinstance(other, ChronoPeriod):
            return NotImplemented
        return other.subtract_from(self)

    # ── until ────────────────────────────────────────────────────────────

    def until(
        self,
        end: CalendarDate | datetime.date,
        unit: Unit | None = None,
    ) -> int | ChronoPeriod:
        """
        Whole ``unit``s from this date to ``end``, or the full period when
        ``unit`` is omitted.  Negative when ``end`` is earlier.
        """
        end = self._chronology.date_from(end)
        if unit is None:
            return self._period_until(end)
        _check_supported_unit(unit)
        if unit is Unit.DAYS:
            return self._days_until(end)
        if unit is Unit.WEEKS:
            return _trunc_div(self._days_until(end), 7)
        if unit is Unit.MONTHS:
            return self._months_until(end)
        if unit in _YEARS_PER_UNIT:
            return _trunc_div(self._years_until(end), _YEARS_PER_UNIT[unit])
        if unit is Unit.ERAS:
            return end.get(Field.ERA) - self.get(Field.ERA)
        raise UnsupportedFieldError(f"Unsupported unit: {unit}")

    def _days_until(self, end: CalendarDate) -> int:
        return end.to_epoch_day() - self.to_epoch_day()

    def _months_until(self, end: CalendarDate) -> int:
        # Pack day-of-month under the month so one truncation handles both.
        start_packed = self.proleptic_month * 256 + self._day
        end_packed = end.proleptic_month * 256 + end.day_of_month
        return _trunc_div(end_packed - start_packed, 256)

    def _years_until(self, end: CalendarDate) -> int:
        return _trunc_div(self._months_until(end), self._length_of_year_in_months())

    def _period_until(self, end: CalendarDate) -> ChronoPeriod:
        total_months = end.proleptic_month - self.proleptic_month
        days = end.day_of_month - self._day
        if total_months > 0 and days < 0:
            total_months -= 1
            days = self.plus_months(total_months)._days_until(end)
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        per_year = self._length_of_year_in_months()
        return self._chronology.period(
            _trunc_div(total_months, per_year), _trunc_mod(total_months, per_year), days
        )

    # ── ISO interop ──────────────────────────────────────────────────────

    def to_iso(self) -> datetime.date:
        return to_python_date(self.to_epoch_day())

    def adjust_into(self, value: datetime.date) -> datetime.date:
        """``value`` moved to this date's day; the time of a datetime is kept."""
        target = to_python_date(self.to_epoch_day())
        return value.replace(year=target.year, month=target.month, day=target.day)

    # ── comparison ───────────────────────────────────────────────────────

    def _key(self) -> tuple[int, int, int]:
        return self._year, self._month, self._day

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._chronology == other._chronology and self._key() == other._key()

    def __lt__(self, other: CalendarDate) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        if self._chronology != other._chronology:
            raise CalendarMismatchError(
                f"Cannot compare a date of {self._chronology} with one of {other._chronology}."
            )
        return self.to_epoch_day() < other.to_epoch_day()

    def __hash__(self) -> int:
        return hash((self._chronology, self._key()))

    def __str__(self) -> str:
        return (
            f"{self._chronology} {self.era.name} "
            f"{self.year_of_era}-{self._month:02d}-{self._day:02d}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._year}, {self._month}, {self._day})"
