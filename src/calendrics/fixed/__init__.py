# src/calendrics/fixed/__init__.py
"""
calendrics.fixed
~~~~~~~~~~~~~~~~

Non-configurable calendars implementing the same contract as the accounting
calendar.  Each module exposes one shared chronology instance and its date
class.

Basic usage::

    import datetime
    from calendrics.fixed import CopticDate, julian, pax

    julian.date(1582, 10, 4).to_iso()                  # → datetime.date(1582, 10, 14)
    CopticDate.from_temporal(datetime.date(2012, 7, 5))  # → CopticDate(1728, 10, 28)
    pax.is_leap_year(1999)                             # → True

Public API
----------
julian, JulianChronology, JulianDate, JulianEra
    Proleptic Julian calendar.
coptic, CopticChronology, CopticDate, CopticEra
    Coptic calendar: 12 × 30 days plus 5 or 6 epagomenal days.
french_republic, FrenchRepublicChronology, FrenchRepublicDate, FrenchRepublicEra
    French Republican calendar, with ten-day weeks.
pax, PaxChronology, PaxDate, PaxEra
    Pax calendar: 13 × 28 days, leap years add a one-week month.
"""

from __future__ import annotations

from calendrics.fixed.coptic import CopticChronology, CopticDate, CopticEra, coptic
from calendrics.fixed.french_republic import (
    FrenchRepublicChronology,
    FrenchRepublicDate,
    FrenchRepublicEra,
    french_republic,
)
from calendrics.fixed.julian import JulianChronology, JulianDate, JulianEra, julian
from calendrics.fixed.pax import PaxChronology, PaxDate, PaxEra, pax

__all__ = [
    "CopticChronology",
    "CopticDate",
    "CopticEra",
    "FrenchRepublicChronology",
    "FrenchRepublicDate",
    "FrenchRepublicEra",
    "JulianChronology",
    "JulianDate",
    "JulianEra",
    "PaxChronology",
    "PaxDate",
    "PaxEra",
    "coptic",
    "french_republic",
    "julian",
    "pax",
]
