from __future__ import annotations

from enum import Enum, IntEnum

from calendrics.temporal.value_range import ValueRange


class Field(Enum):
    """
    Closed set of fields a date or time can be queried or adjusted by.

    Each member carries the widest range it can take in any calendar
    (``base_range``) and whether it is date-based.  Calendar dates support
    only the date-based members; the time members exist so that callers get
    an ``UnsupportedFieldError`` rather than a lookup failure.
    """

    NANO_OF_SECOND = ("NanoOfSecond", ValueRange.of(0, 999_999_999), False)
    SECOND_OF_MINUTE = ("SecondOfMinute", ValueRange.of(0, 59), False)
    MINUTE_OF_HOUR = ("MinuteOfHour", ValueRange.of(0, 59), False)
    MINUTE_OF_DAY = ("MinuteOfDay", ValueRange.of(0, 24 * 60 - 1), False)
    HOUR_OF_DAY = ("HourOfDay", ValueRange.of(0, 23), False)
    AMPM_OF_DAY = ("AmPmOfDay", ValueRange.of(0, 1), False)

    DAY_OF_WEEK = ("DayOfWeek", ValueRange.of(1, 7), True)
    ALIGNED_DAY_OF_WEEK_IN_MONTH = ("AlignedDayOfWeekInMonth", ValueRange.of(1, 7), True)
    ALIGNED_DAY_OF_WEEK_IN_YEAR = ("AlignedDayOfWeekInYear", ValueRange.of(1, 7), True)
    DAY_OF_MONTH = ("DayOfMonth", ValueRange.of(1, 28, 31), True)
    DAY_OF_YEAR = ("DayOfYear", ValueRange.of(1, 365, 366), True)
    EPOCH_DAY = ("EpochDay", ValueRange.of(-365_243_219_162, 365_241_780_471), True)
    ALIGNED_WEEK_OF_MONTH = ("AlignedWeekOfMonth", ValueRange.of(1, 4, 5), True)
    ALIGNED_WEEK_OF_YEAR = ("AlignedWeekOfYear", ValueRange.of(1, 53), True)
    MONTH_OF_YEAR = ("MonthOfYear", ValueRange.of(1, 12), True)
    PROLEPTIC_MONTH = (
        "ProlepticMonth",
        ValueRange.of(-999_999_999 * 12, 999_999_999 * 12 + 11),
        True,
    )
    YEAR_OF_ERA = ("YearOfEra", ValueRange.of(1, 999_999_999, 1_000_000_000), True)
    YEAR = ("Year", ValueRange.of(-999_999_999, 999_999_999), True)
    ERA = ("Era", ValueRange.of(0, 1), True)

    def __init__(self, display_name: str, base_range: ValueRange, date_based: bool) -> None:
        self.display_name = display_name
        self.base_range = base_range
        self.is_date_based = date_based

    def check_valid_value(self, value: int) -> int:
        return self.base_range.check_valid_value(value, self)

    def __str__(self) -> str:
        return self.display_name


class Unit(Enum):
    """Closed set of units an amount of time can be measured in."""

    NANOS = ("Nanos", False)
    MICROS = ("Micros", False)
    MILLIS = ("Millis", False)
    SECONDS = ("Seconds", False)
    MINUTES = ("Minutes", False)
    HOURS = ("Hours", False)
    HALF_DAYS = ("HalfDays", False)
    DAYS = ("Days", True)
    WEEKS = ("Weeks", True)
    MONTHS = ("Months", True)
    YEARS = ("Years", True)
    DECADES = ("Decades", True)
    CENTURIES = ("Centuries", True)
    MILLENNIA = ("Millennia", True)
    ERAS = ("Eras", True)
    FOREVER = ("Forever", False)

    def __init__(self, display_name: str, date_based: bool) -> None:
        self.display_name = display_name
        self.is_date_based = date_based

    def __str__(self) -> str:
        return self.display_name


class DayOfWeek(IntEnum):
    """ISO day of week, Monday is 1."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class Month(IntEnum):
    """ISO month of year, January is 1."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def length(self, leap_year: bool) -> int:
        if self is Month.FEBRUARY:
            return 29 if leap_year else 28
        if self in (Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER):
            return 30
        return 31

    def first_day_of_year(self, leap_year: bool) -> int:
        return 1 + sum(m.length(leap_year) for m in Month if m < self)
