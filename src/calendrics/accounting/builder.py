from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Any, Mapping, TypeVar

from calendrics._exceptions import ConfigurationError
from calendrics.accounting.chronology import AccountingChronology
from calendrics.accounting.config import AccountingConfig, validate
from calendrics.accounting.division import YearDivision
from calendrics.temporal import DayOfWeek, Month

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_MAPPING_KEYS = frozenset({
    "ends_on",
    "nearest_end_of",
    "in_last_week_of",
    "division",
    "leap_week_in_month",
    "year_offset",
})


def _coerce(enum_type: type[E], value: Any, key: str) -> E:
    """An enum member from a member, its name (any case) or its value."""
    if value is None or isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        try:
            return enum_type[value.strip().upper()]
        except KeyError:
            raise ConfigurationError(f"Unknown {enum_type.__name__} for {key!r}: {value!r}.") from None
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum_type(value)
        except ValueError:
            raise ConfigurationError(f"Unknown {enum_type.__name__} for {key!r}: {value!r}.") from None
    raise ConfigurationError(f"Expected a {enum_type.__name__} for {key!r}; got {value!r}.")


def _coerce_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"Expected an integer for {key!r}; got {value!r}.")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Expected an integer for {key!r}; got {value!r}.") from None


class AccountingChronologyBuilder:
    """
    Immutable fluent builder for ``AccountingChronology``.

    Each setter returns a new builder.  Setters only normalise their own
    argument; the configuration as a whole is checked once, by ``build()``.

    Basic usage::

        chrono = (
            AccountingChronologyBuilder()
            .ends_on(DayOfWeek.SUNDAY)
            .nearest_end_of(Month.AUGUST)
            .with_division(YearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS)
            .leap_week_in_month(12)
            .build()
        )
    """

    __slots__ = ("_config",)

    def __init__(self, config: AccountingConfig | None = None) -> None:
        self._config = config if config is not None else AccountingConfig()

    @property
    def config(self) -> AccountingConfig:
        return self._config

    def _with(self, **changes: Any) -> AccountingChronologyBuilder:
        return AccountingChronologyBuilder(replace(self._config, **changes))

    # ── setters ──────────────────────────────────────────────────────────

    def ends_on(self, day: DayOfWeek) -> AccountingChronologyBuilder:
        return self._with(ends_on=_coerce(DayOfWeek, day, "ends_on"))

    def nearest_end_of(self, month: Month) -> AccountingChronologyBuilder:
        return self._with(end=_coerce(Month, month, "nearest_end_of"), in_last_week=False)

    def in_last_week_of(self, month: Month) -> AccountingChronologyBuilder:
        return self._with(end=_coerce(Month, month, "in_last_week_of"), in_last_week=True)

    def with_division(self, division: YearDivision) -> AccountingChronologyBuilder:
        return self._with(division=_coerce(YearDivision, division, "division"))

    def leap_week_in_month(self, month: int) -> AccountingChronologyBuilder:
        return self._with(leap_week_in_month=month)

    def year_ends_in_iso_year(self) -> AccountingChronologyBuilder:
        return self._with(year_offset=0)

    def year_starts_in_iso_year(self) -> AccountingChronologyBuilder:
        return self._with(year_offset=1)

    # ── build ────────────────────────────────────────────────────────────

    def build(self) -> AccountingChronology:
        config = validate(self._config)
        logger.debug("Building accounting chronology from %s", config)
        return AccountingChronology(config)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> AccountingChronologyBuilder:
        """
        Builder filled from a plain mapping, e.g. a parsed TOML table::

            [fiscal]
            ends_on = "sunday"
            nearest_end_of = "august"
            division = "quarters_of_pattern_4_4_5_weeks"
            leap_week_in_month = 12

        Enum values may be members, names in any case or integer values.
        ``year_offset`` is 0 (years named for the ISO year they end in) or 1.
        """
        unknown = set(mapping) - _MAPPING_KEYS
        if unknown:
            raise ConfigurationError(f"Unknown accounting calendar keys: {', '.join(sorted(unknown))}.")
        if "nearest_end_of" in mapping and "in_last_week_of" in mapping:
            raise ConfigurationError("Set only one of 'nearest_end_of' and 'in_last_week_of'.")

        builder = cls()
        if "ends_on" in mapping:
            builder = builder.ends_on(mapping["ends_on"])
        if "nearest_end_of" in mapping:
            builder = builder.nearest_end_of(mapping["nearest_end_of"])
        if "in_last_week_of" in mapping:
            builder = builder.in_last_week_of(mapping["in_last_week_of"])
        if "division" in mapping:
            builder = builder.with_division(mapping["division"])
        if "leap_week_in_month" in mapping:
            builder = builder.leap_week_in_month(_coerce_int(mapping["leap_week_in_month"], "leap_week_in_month"))
        if "year_offset" in mapping:
            builder = builder._with(year_offset=_coerce_int(mapping["year_offset"], "year_offset"))
        logger.debug("Accounting calendar configuration loaded: %s", builder._config)
        return builder

    def __repr__(self) -> str:
        return f"AccountingChronologyBuilder({self._config!r})"
