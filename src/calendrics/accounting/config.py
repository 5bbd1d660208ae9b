from __future__ import annotations

from dataclasses import dataclass

from calendrics._exceptions import ConfigurationError
from calendrics.accounting.division import YearDivision
from calendrics.temporal import DayOfWeek, Month


@dataclass(frozen=True, slots=True)
class AccountingConfig:
    """
    Rules of an accounting calendar; any member may still be unset.

    ``in_last_week`` selects the year-end rule: ``True`` ends the year on
    the last ``ends_on`` weekday of the ``end`` month, ``False`` on the one
    nearest the end of that month.  ``year_offset`` names a fiscal year after
    the ISO year it ends in (0) or starts in (1).
    """

    ends_on: DayOfWeek | None = None
    end: Month | None = None
    in_last_week: bool = False
    division: YearDivision | None = None
    leap_week_in_month: int | None = None
    year_offset: int = 0


def validate(config: AccountingConfig) -> AccountingConfig:
    """Return ``config`` unchanged if it describes a buildable calendar."""
    missing = [
        name
        for name in ("ends_on", "end", "division", "leap_week_in_month")
        if getattr(config, name) is None
    ]
    if missing:
        raise ConfigurationError(f"Accounting calendar is missing {', '.join(missing)}.")

    months = config.division.months_in_year
    leap = config.leap_week_in_month
    if isinstance(leap, bool) or not isinstance(leap, int) or not 1 <= leap <= months:
        raise ConfigurationError(
            f"Leap week month must be within [1, {months}] for "
            f"{config.division.name}; got {leap!r}."
        )
    if config.year_offset not in (0, 1):
        raise ConfigurationError(f"Year offset must be 0 or 1; got {config.year_offset}.")
    return config
