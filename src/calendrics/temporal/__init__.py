# src/calendrics/temporal/__init__.py
"""
calendrics.temporal
~~~~~~~~~~~~~~~~~~~

Vocabulary shared by every calendar: the closed sets of fields and units,
ISO days of week and months, and the ``ValueRange`` a field may take.

Basic usage::

    from calendrics.temporal import Field, ValueRange

    dom = ValueRange.of(1, 28, 31)
    dom.check_valid_value(30, Field.DAY_OF_MONTH)   # → 30
    str(dom)                                        # → '1 - 28/31'

Public API
----------
Field       Date and time fields (date-based ones are supported by dates).
Unit        Units of amount (date-based ones are supported by dates).
DayOfWeek   ISO day of week, Monday = 1.
Month       ISO month, January = 1.
ValueRange  Immutable min/max range with variable outer bounds.
"""

from __future__ import annotations

from calendrics.temporal.fields import DayOfWeek, Field, Month, Unit
from calendrics.temporal.value_range import ValueRange

__all__ = [
    "DayOfWeek",
    "Field",
    "Month",
    "Unit",
    "ValueRange",
]
