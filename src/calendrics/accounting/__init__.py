# src/calendrics/accounting/__init__.py
"""
calendrics.accounting
~~~~~~~~~~~~~~~~~~~~~

Configurable 52/53-week fiscal calendars.  A year always ends on the same
weekday near the end of a chosen month; its weeks are grouped into months by
a 4-4-5, 4-5-4, 5-4-4 or thirteen-by-four pattern, and the occasional 53rd
week is added to one fixed month.

Basic usage::

    from calendrics.accounting import AccountingChronologyBuilder, YearDivision
    from calendrics.temporal import DayOfWeek, Month, Unit

    fiscal = (
        AccountingChronologyBuilder()
        .ends_on(DayOfWeek.SUNDAY)
        .nearest_end_of(Month.AUGUST)
        .with_division(YearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS)
        .leap_week_in_month(12)
        .build()
    )
    fiscal.is_leap_year(2012)                 # → True
    d = fiscal.date(2012, 3, 35)
    d.plus(1, Unit.MONTHS)                    # → 2012-04-28, clamped
    d.to_iso()                                # → datetime.date(2011, 11, 27)

Year rules take NumPy arrays as well::

    import numpy as np
    fiscal.is_leap_year(np.arange(2000, 2030))

Public API
----------
AccountingChronologyBuilder  Immutable fluent builder; ``from_mapping`` loads a dict.
AccountingChronology         The calendar: year rules, ranges and factories.
AccountingDate               A date of an accounting calendar.
AccountingConfig             The rules, as a frozen dataclass.
AccountingEra                BCE / CE.
YearDivision                 Grouping of weeks into months.
validate                     Check an ``AccountingConfig``.
"""

from __future__ import annotations

from calendrics.accounting.builder import AccountingChronologyBuilder
from calendrics.accounting.chronology import AccountingChronology, AccountingEra
from calendrics.accounting.config import AccountingConfig, validate
from calendrics.accounting.date import AccountingDate
from calendrics.accounting.division import YearDivision

__all__ = [
    "AccountingChronology",
    "AccountingChronologyBuilder",
    "AccountingConfig",
    "AccountingDate",
    "AccountingEra",
    "YearDivision",
    "validate",
]
