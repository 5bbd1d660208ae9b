from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class ConfigurationError(CalendarError, ValueError):
    """Incomplete or self-inconsistent calendar configuration."""


class DateRangeError(CalendarError, ValueError):
    """A field value, or a day within a month or year, is out of range."""


class UnsupportedFieldError(CalendarError):
    """The field or unit is not meaningful for this calendar."""


class CalendarMismatchError(CalendarError, TypeError):
    """A period, era or date belongs to a different calendar."""
