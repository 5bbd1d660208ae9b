from __future__ import annotations

from enum import Enum

import numpy as np

from calendrics._exceptions import DateRangeError
from calendrics.temporal import Field, ValueRange


class YearDivision(Enum):
    """
    How the 52 weeks of a fiscal year are grouped into months.

    Each member holds the weeks of every month of a non-leap year.  In a
    leap year one designated month gains a 53rd week; every method takes
    that month as ``leap_week_in_month`` (``None`` for a non-leap year).
    """

    QUARTERS_OF_PATTERN_4_4_5_WEEKS = (4, 4, 5, 4, 4, 5, 4, 4, 5, 4, 4, 5)
    QUARTERS_OF_PATTERN_4_5_4_WEEKS = (4, 5, 4, 4, 5, 4, 4, 5, 4, 4, 5, 4)
    QUARTERS_OF_PATTERN_5_4_4_WEEKS = (5, 4, 4, 5, 4, 4, 5, 4, 4, 5, 4, 4)
    THIRTEEN_EVEN_MONTHS_OF_4_WEEKS = (4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4)

    def __init__(self, *weeks: int) -> None:
        weeks_per_month = np.array(weeks, dtype=np.int64)
        # elapsed[i] = weeks before month i + 1 starts.
        elapsed = np.zeros(len(weeks), dtype=np.int64)
        np.cumsum(weeks_per_month[:-1], out=elapsed[1:])
        weeks_per_month.flags.writeable = False
        elapsed.flags.writeable = False
        self.weeks_per_month = weeks_per_month
        self._elapsed = elapsed

    # ── shape ────────────────────────────────────────────────────────────

    @property
    def months_in_year(self) -> int:
        return len(self.weeks_per_month)

    @property
    def weeks_in_year(self) -> int:
        return int(self.weeks_per_month.sum())

    def months_in_year_range(self) -> ValueRange:
        return ValueRange.of(1, self.months_in_year)

    def weeks_in_month_range(self, leap_week_in_month: int | None = None) -> ValueRange:
        """Fewest and most weeks any month has, the leap week included."""
        leap = self._check_leap(leap_week_in_month)
        longest = int(self.weeks_per_month.max())
        if leap:
            longest = max(longest, int(self.weeks_per_month[leap - 1]) + 1)
        return ValueRange.of(int(self.weeks_per_month.min()), longest)

    # ── week arithmetic ──────────────────────────────────────────────────

    def weeks_in_month(self, month: int, leap_week_in_month: int | None = None) -> int:
        month = self._check_month(month)
        leap = self._check_leap(leap_week_in_month)
        return int(self.weeks_per_month[month - 1]) + (1 if month == leap else 0)

    def weeks_at_start_of_month(self, month: int, leap_week_in_month: int | None = None) -> int:
        month = self._check_month(month)
        leap = self._check_leap(leap_week_in_month)
        return int(self._elapsed[month - 1]) + (1 if leap and month > leap else 0)

    def month_from_elapsed_weeks(self, weeks: int, leap_week_in_month: int | None = None) -> int:
        """
        Month holding the week at zero-based offset ``weeks``.

        A week on a month boundary belongs to the month it starts.
        """
        total = self.weeks_in_year + (1 if leap_week_in_month else 0)
        if weeks < 0 or weeks >= total:
            raise DateRangeError(
                f"Count of {weeks} elapsed weeks not valid, should be in the range [0, {total})."
            )
        leap = self._check_leap(leap_week_in_month)
        month = int(np.searchsorted(self._elapsed, weeks, side="right"))
        # The leap week pushes later months back by one week.
        if leap and month > leap and weeks == self._elapsed[month - 1]:
            return month - 1
        return month

    # ── validation ───────────────────────────────────────────────────────

    def _check_month(self, month: int) -> int:
        return self.months_in_year_range().check_valid_int_value(month, Field.MONTH_OF_YEAR)

    def _check_leap(self, leap_week_in_month: int | None) -> int:
        if not leap_week_in_month:
            return 0
        return self._check_month(leap_week_in_month)
