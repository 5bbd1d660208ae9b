# src/calendrics/chrono/__init__.py
"""
calendrics.chrono
~~~~~~~~~~~~~~~~~

The calendar-independent date engine.  A ``Chronology`` describes a calendar
system; a ``CalendarDate`` is an immutable (year, month, day) of one
chronology and implements field access, field mutation and unit arithmetic
on top of a handful of per-calendar hooks.

Basic usage::

    from calendrics.fixed import julian
    from calendrics.temporal import Field, Unit

    d = julian.date(2012, 1, 31)
    d.plus(1, Unit.MONTHS)               # → 2012-02-29, clamped
    d.with_field(Field.DAY_OF_MONTH, 5)  # → 2012-01-05
    d.until(julian.date(2013, 1, 30), Unit.YEARS)    # → 0

Periods are scoped to the chronology that created them::

    p = julian.period(1, 2, 3)
    d + p                                # → 2013-04-03

Public API
----------
Chronology     Abstract calendar system: ranges, eras, date factories.
CalendarDate   Abstract immutable date with the shared arithmetic.
ChronoPeriod   Years, months and days of one chronology.
Era            Base of the per-calendar two-era enums.
"""

from __future__ import annotations

from calendrics.chrono.base import CalendarDate, Chronology
from calendrics.chrono.era import Era
from calendrics.chrono.period import ChronoPeriod

__all__ = [
    "CalendarDate",
    "ChronoPeriod",
    "Chronology",
    "Era",
]
