"""
tests/temporal/test_value_range.py

Covers:
  - ValueRange construction forms and invariants
  - Fixed / variable ranges and string form
  - Validity checks raising DateRangeError with the field name
  - Field / Unit date-based flags, Month lengths and day-of-year offsets
"""

import pytest

from calendrics import DateRangeError
from calendrics.temporal import Field, Month, Unit, ValueRange


# ── ValueRange ────────────────────────────────────────────────────────────────

class TestValueRange:

    def test_two_bounds(self):
        r = ValueRange.of(1, 7)
        assert (r.minimum, r.largest_minimum, r.smallest_maximum, r.maximum) == (1, 1, 7, 7)
        assert r.is_fixed

    def test_three_bounds(self):
        r = ValueRange.of(1, 28, 31)
        assert (r.minimum, r.smallest_maximum, r.maximum) == (1, 28, 31)
        assert not r.is_fixed

    def test_four_bounds(self):
        r = ValueRange.of(0, 1, 5, 6)
        assert (r.minimum, r.largest_minimum, r.smallest_maximum, r.maximum) == (0, 1, 5, 6)

    def test_wrong_bound_count(self):
        with pytest.raises(TypeError):
            ValueRange.of(1)

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValueError):
            ValueRange.of(5, 1)
        with pytest.raises(ValueError):
            ValueRange.of(1, 31, 28)

    def test_str(self):
        assert str(ValueRange.of(1, 7)) == "1 - 7"
        assert str(ValueRange.of(1, 28, 31)) == "1 - 28/31"
        assert str(ValueRange.of(0, 1, 5, 6)) == "0/1 - 5/6"

    def test_is_valid_value(self):
        r = ValueRange.of(1, 28, 31)
        assert r.is_valid_value(1)
        assert r.is_valid_value(31)
        assert not r.is_valid_value(0)
        assert not r.is_valid_value(32)

    def test_int_value(self):
        assert ValueRange.of(1, 31).is_int_value
        assert not ValueRange.of(0, 2**40).is_int_value
        assert not ValueRange.of(0, 2**40).is_valid_int_value(5)

    def test_check_returns_value(self):
        assert ValueRange.of(1, 12).check_valid_value(12, Field.MONTH_OF_YEAR) == 12
        assert ValueRange.of(1, 12).check_valid_int_value(3) == 3

    def test_check_raises_with_field_name(self):
        with pytest.raises(DateRangeError, match="MONTH_OF_YEAR"):
            ValueRange.of(1, 12).check_valid_value(13, Field.MONTH_OF_YEAR)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            ValueRange.of(1, 12).check_valid_value(0)

    def test_frozen(self):
        r = ValueRange.of(1, 7)
        with pytest.raises(AttributeError):
            r.minimum = 0


# ── Fields and units ──────────────────────────────────────────────────────────

class TestFieldsAndUnits:

    def test_date_fields_flagged(self):
        assert Field.DAY_OF_MONTH.is_date_based
        assert Field.ERA.is_date_based
        assert not Field.HOUR_OF_DAY.is_date_based

    def test_members_are_distinct(self):
        # Equal ranges must not collapse members into aliases.
        assert Field.DAY_OF_WEEK is not Field.ALIGNED_DAY_OF_WEEK_IN_MONTH
        assert len({f.name for f in Field}) == len(list(Field))

    def test_base_range(self):
        assert Field.DAY_OF_MONTH.base_range == ValueRange.of(1, 28, 31)
        assert Field.DAY_OF_MONTH.check_valid_value(31) == 31
        with pytest.raises(DateRangeError):
            Field.MONTH_OF_YEAR.check_valid_value(13)

    def test_units(self):
        assert Unit.MILLENNIA.is_date_based
        assert not Unit.HALF_DAYS.is_date_based
        assert not Unit.FOREVER.is_date_based
        assert str(Unit.DAYS) == "Days"


class TestMonth:

    @pytest.mark.parametrize("month, leap, length", [
        (Month.JANUARY, False, 31),
        (Month.FEBRUARY, False, 28),
        (Month.FEBRUARY, True, 29),
        (Month.APRIL, True, 30),
        (Month.DECEMBER, False, 31),
    ])
    def test_month_length(self, month, leap, length):
        assert month.length(leap) == length

    def test_first_day_of_year(self):
        assert Month.JANUARY.first_day_of_year(False) == 1
        assert Month.MARCH.first_day_of_year(False) == 60
        assert Month.MARCH.first_day_of_year(True) == 61
        assert Month.DECEMBER.first_day_of_year(True) == 336
