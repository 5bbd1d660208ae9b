from __future__ import annotations

from enum import Enum

from calendrics._exceptions import DateRangeError


class Era(Enum):
    """
    Base of the two-era enums every calendar defines.

    Era 1 holds proleptic years ``>= 1``; era 0 holds ``<= 0``, counted
    backwards so that proleptic year 0 is year-of-era 1.  Members of
    different calendars never compare equal.
    """

    @classmethod
    def of(cls, value: int) -> Era:
        try:
            return cls(value)
        except ValueError:
            raise DateRangeError(f"Invalid {cls.__name__}: {value}") from None

    @classmethod
    def of_year(cls, proleptic_year: int) -> Era:
        return cls(1 if proleptic_year >= 1 else 0)
