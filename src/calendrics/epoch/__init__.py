# src/calendrics/epoch/__init__.py
"""
calendrics.epoch
~~~~~~~~~~~~~~~~

The epoch-day substrate every calendar converts through.  An epoch day is
the signed number of days since 1970-01-01 (ISO); day counts for proleptic
ISO dates and for four-year leap cycles are closed-form.

Basic usage::

    from calendrics.epoch import epoch_day_to_iso, iso_to_epoch_day

    iso_to_epoch_day(2012, 2, 29)     # → 15399
    epoch_day_to_iso(-719_528)        # → (0, 1, 1)

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    years, months, days = epoch_day_to_iso(np.arange(0, 366, 30))

Public API
----------
iso_to_epoch_day      Proleptic ISO (year, month, day) → epoch day.
epoch_day_to_iso      Epoch day → proleptic ISO (year, month, day).
iso_is_leap_year      Gregorian leap-year rule.
iso_length_of_month   Days in an ISO month.
day_of_week           ISO day of week (Monday = 1) of an epoch day.
previous_or_same      Latest epoch day on or before a given one with a weekday.
FourYearCycle         Day counting for "leap day every fourth year" calendars.
from_python_date      datetime.date → epoch day.
to_python_date        Epoch day → datetime.date.
"""

from __future__ import annotations

from calendrics.epoch.conversion import (
    FourYearCycle,
    day_of_week,
    epoch_day_to_iso,
    from_python_date,
    iso_is_leap_year,
    iso_length_of_month,
    iso_to_epoch_day,
    previous_or_same,
    to_python_date,
)

__all__ = [
    "FourYearCycle",
    "day_of_week",
    "epoch_day_to_iso",
    "from_python_date",
    "iso_is_leap_year",
    "iso_length_of_month",
    "iso_to_epoch_day",
    "previous_or_same",
    "to_python_date",
]
