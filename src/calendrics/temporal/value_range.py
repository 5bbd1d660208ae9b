from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from calendrics._exceptions import DateRangeError

if TYPE_CHECKING:
    from calendrics.temporal.fields import Field

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True, slots=True)
class ValueRange:
    """
    Valid values of a field, as ``minimum .. maximum``.

    The outer bounds may vary: a day-of-month range of ``1 - 28/31`` has a
    smallest maximum of 28 and a largest maximum of 31.  A range is *fixed*
    when both pairs coincide.
    """

    minimum: int
    largest_minimum: int
    smallest_maximum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.largest_minimum:
            raise ValueError("Smallest minimum must not exceed largest minimum.")
        if self.smallest_maximum > self.maximum:
            raise ValueError("Smallest maximum must not exceed largest maximum.")
        if self.largest_minimum > self.maximum:
            raise ValueError("Minimum must not exceed maximum.")

    @classmethod
    def of(cls, minimum: int, *bounds: int) -> ValueRange:
        """
        ``of(min, max)``, ``of(min, max_small, max_large)`` or
        ``of(min, min_large, max_small, max_large)``.
        """
        if len(bounds) == 1:
            return cls(minimum, minimum, bounds[0], bounds[0])
        if len(bounds) == 2:
            return cls(minimum, minimum, bounds[0], bounds[1])
        if len(bounds) == 3:
            return cls(minimum, bounds[0], bounds[1], bounds[2])
        raise TypeError(f"ValueRange.of() takes 2 to 4 bounds; got {1 + len(bounds)}.")

    # ── queries ──────────────────────────────────────────────────────────

    @property
    def is_fixed(self) -> bool:
        return (
            self.minimum == self.largest_minimum
            and self.smallest_maximum == self.maximum
        )

    @property
    def is_int_value(self) -> bool:
        return self.minimum >= _INT_MIN and self.maximum <= _INT_MAX

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def is_valid_int_value(self, value: int) -> bool:
        return self.is_int_value and self.is_valid_value(value)

    # ── checks ───────────────────────────────────────────────────────────

    def check_valid_value(self, value: int, field: Field | None = None) -> int:
        if not self.is_valid_value(value):
            raise DateRangeError(self._message(value, field))
        return value

    def check_valid_int_value(self, value: int, field: Field | None = None) -> int:
        if not self.is_valid_int_value(value):
            raise DateRangeError(self._message(value, field))
        return int(value)

    def _message(self, value: int, field: Field | None) -> str:
        if field is None:
            return f"Invalid value (valid values {self}): {value}"
        return f"Invalid value for {field.name} (valid values {self}): {value}"

    def __str__(self) -> str:
        lower = str(self.minimum)
        if self.minimum != self.largest_minimum:
            lower += f"/{self.largest_minimum}"
        upper = str(self.smallest_maximum)
        if self.smallest_maximum != self.maximum:
            upper += f"/{self.maximum}"
        return f"{lower} - {upper}"
