# src/calendrics/__init__.py
"""
calendrics
~~~~~~~~~~

Alternative proleptic calendar systems over a shared epoch-day count: a
configurable 52/53-week accounting calendar plus the Julian, Coptic, French
Republican and Pax calendars, all behind one date engine.

Basic usage::

    from calendrics import AccountingChronologyBuilder, DayOfWeek, Month, Unit, YearDivision

    fiscal = (
        AccountingChronologyBuilder()
        .ends_on(DayOfWeek.SUNDAY)
        .in_last_week_of(Month.DECEMBER)
        .with_division(YearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS)
        .leap_week_in_month(12)
        .build()
    )
    today = fiscal.date_now()
    today.plus(1, Unit.MONTHS)

Subpackages
-----------
temporal    Field, Unit, DayOfWeek, Month, ValueRange.
epoch       Epoch-day conversions (NumPy-vectorised).
chrono      Chronology / CalendarDate engine, eras and periods.
accounting  Configurable fiscal calendars.
fixed       Julian, Coptic, French Republican and Pax calendars.
"""

from __future__ import annotations

from calendrics._exceptions import (
    CalendarError,
    CalendarMismatchError,
    ConfigurationError,
    DateRangeError,
    UnsupportedFieldError,
)
from calendrics.accounting import (
    AccountingChronology,
    AccountingChronologyBuilder,
    AccountingConfig,
    AccountingDate,
    AccountingEra,
    YearDivision,
)
from calendrics.chrono import CalendarDate, ChronoPeriod, Chronology, Era
from calendrics.fixed import (
    CopticDate,
    FrenchRepublicDate,
    JulianDate,
    PaxDate,
    coptic,
    french_republic,
    julian,
    pax,
)
from calendrics.temporal import DayOfWeek, Field, Month, Unit, ValueRange

__all__ = [
    "AccountingChronology",
    "AccountingChronologyBuilder",
    "AccountingConfig",
    "AccountingDate",
    "AccountingEra",
    "CalendarDate",
    "CalendarError",
    "CalendarMismatchError",
    "ChronoPeriod",
    "Chronology",
    "ConfigurationError",
    "CopticDate",
    "DateRangeError",
    "DayOfWeek",
    "Era",
    "Field",
    "FrenchRepublicDate",
    "JulianDate",
    "Month",
    "PaxDate",
    "Unit",
    "UnsupportedFieldError",
    "ValueRange",
    "YearDivision",
    "coptic",
    "french_republic",
    "julian",
    "pax",
]
