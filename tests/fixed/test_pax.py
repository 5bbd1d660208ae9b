"""
tests/fixed/test_pax.py

Covers:
  - ISO ↔ Pax conversion, including years 0 and before
  - Leap rule (99s and multiples of 6, not multiples of 400) and its counts
  - The leap-year Pax week as month 13, the last month moving to 14
  - Year and month arithmetic across leap and common years
  - until in years and as a period, with the month-13 shift
"""

import datetime

import numpy as np
import pytest

from calendrics import DateRangeError, Field, PaxDate, Unit, ValueRange, pax
from calendrics.epoch import iso_to_epoch_day
from calendrics.fixed import PaxEra
from calendrics.fixed.pax import leap_years_before


def d(year, month, day):
    return pax.date(year, month, day)


def _is_leap(year):
    last_two = abs(year) % 100
    return last_two == 99 or (year % 400 != 0 and last_two % 6 == 0)


SAMPLES = [
    ((1, 1, 1), (0, 12, 31)),
    ((1, 1, 2), (1, 1, 1)),
    ((1, 1, 28), (1, 1, 27)),
    ((1, 2, 1), (1, 1, 28)),
    ((6, 13, 6), (6, 12, 1)),
    ((6, 13, 7), (6, 12, 2)),
    ((6, 14, 1), (6, 12, 3)),
    ((6, 14, 28), (6, 12, 30)),
    ((7, 1, 1), (6, 12, 31)),
    ((7, 1, 2), (7, 1, 1)),
    ((399, 13, 7), (399, 12, 4)),
    ((399, 14, 1), (399, 12, 5)),
    ((400, 13, 28), (400, 12, 30)),
    ((401, 1, 1), (400, 12, 31)),
    ((0, 13, 27), (0, 12, 29)),
    ((0, 13, 28), (0, 12, 30)),
    ((1582, 10, 5), (1582, 9, 9)),
    ((1945, 10, 28), (1945, 10, 6)),
    ((2012, 6, 23), (2012, 6, 4)),
    ((2012, 6, 24), (2012, 6, 5)),
    ((-6, 1, 1), (-6, 1, 2)),
    ((-6, 13, 7), (-6, 12, 10)),
    ((-6, 14, 1), (-6, 12, 11)),
    ((-6, 14, 28), (-5, 1, 7)),
    ((-5, 1, 1), (-5, 1, 8)),
    ((-99, 1, 1), (-99, 1, 6)),
    ((-99, 14, 2), (-99, 12, 16)),
    ((-100, 1, 1), (-101, 12, 31)),
    ((-100, 14, 2), (-100, 12, 10)),
]


# ── Conversion ────────────────────────────────────────────────────────────────

class TestConversion:

    @pytest.mark.parametrize("ymd, iso", SAMPLES)
    def test_epoch_day(self, ymd, iso):
        epoch_day = iso_to_epoch_day(*iso)
        assert d(*ymd).to_epoch_day() == epoch_day
        assert pax.date_epoch_day(epoch_day) == d(*ymd)
        assert PaxDate.of_epoch_day(epoch_day) == d(*ymd)

    @pytest.mark.parametrize("ymd, iso", [s for s in SAMPLES if s[1][0] >= 1])
    def test_python_dates(self, ymd, iso):
        assert d(*ymd).to_iso() == datetime.date(*iso)
        assert PaxDate.from_temporal(datetime.date(*iso)) == d(*ymd)
        assert d(*ymd).until(datetime.date(*iso)) == pax.period(0, 0, 0)

    @pytest.mark.parametrize("ymd, iso", SAMPLES)
    def test_until_self_is_zero(self, ymd, iso):
        assert d(*ymd).until(d(*ymd)) == pax.period(0, 0, 0)

    def test_round_trip(self):
        rng = np.random.default_rng(99)
        for epoch_day in rng.integers(-2_000_000, 2_000_000, size=500):
            date = pax.date_epoch_day(int(epoch_day))
            assert date.to_epoch_day() == epoch_day
            assert date.plus(1, Unit.DAYS).to_epoch_day() == epoch_day + 1

    def test_year_day(self):
        assert pax.date_year_day(2012, 336) == d(2012, 12, 28)
        assert pax.date_year_day(2012, 337) == d(2012, 13, 1)
        assert pax.date_year_day(2012, 343) == d(2012, 13, 7)
        assert pax.date_year_day(2012, 344) == d(2012, 14, 1)
        assert pax.date_year_day(2012, 371) == d(2012, 14, 28)
        assert PaxDate.of_year_day(2013, 364) == d(2013, 13, 28)
        with pytest.raises(DateRangeError):
            pax.date_year_day(2001, 365)

    def test_day_of_year(self):
        assert d(2012, 14, 1).day_of_year == 344
        assert d(2013, 13, 1).day_of_year == 337


# ── Leap years ────────────────────────────────────────────────────────────────

class TestLeapYears:

    def test_loop(self):
        for year in range(-500, 500):
            assert pax.is_leap_year(year) is _is_leap(year)
            assert d(year, 1, 1).is_leap_year() is _is_leap(year)

    @pytest.mark.parametrize("year, leap", [
        (400, False), (100, True), (99, True), (7, False), (6, True), (5, False),
        (1, False), (0, False), (-1, False), (-6, True), (-99, True), (-100, True), (-400, False),
    ])
    def test_specific(self, year, leap):
        assert pax.is_leap_year(year) is leap

    def test_array(self):
        years = np.arange(-500, 500)
        np.testing.assert_array_equal(pax.is_leap_year(years), [_is_leap(int(y)) for y in years])

    def test_leap_years_before(self):
        assert leap_years_before(1) == 0
        assert leap_years_before(7) == 1
        assert leap_years_before(2014) == 20 * 18 - 5 + 2
        assert leap_years_before(0) == 0
        assert leap_years_before(-6) == -1
        count = 0
        for year in range(2, 900):
            count += _is_leap(year - 1)
            assert leap_years_before(year) == count

    def test_leap_years_before_array(self):
        years = np.arange(-450, 450)
        expected = [leap_years_before(int(y)) for y in years]
        np.testing.assert_array_equal(leap_years_before(years), expected)

    @pytest.mark.parametrize("year, month, length", [
        (1900, 1, 28), (1900, 12, 28), (1900, 13, 7), (1900, 14, 28),
        (1901, 13, 28), (1905, 13, 28), (1906, 13, 7), (2000, 13, 28), (2100, 13, 7),
    ])
    def test_length_of_month(self, year, month, length):
        assert d(year, month, 1).length_of_month() == length

    def test_length_of_year(self):
        assert d(2012, 1, 1).length_of_year() == 371
        assert d(2013, 1, 1).length_of_year() == 364


BAD_DATES = [
    (1900, 0, 0), (1900, -1, 1), (1900, 0, 1), (1900, 15, 1), (1900, 16, 1),
    (1900, 1, -1), (1900, 1, 0), (1900, 1, 29),
    (1900, 13, 0), (1900, 13, 8), (1900, 14, 0), (1900, 14, 29),
    (1898, 13, 0), (1898, 13, 29), (1898, 14, 1),
    (1900, 2, 29), (1900, 12, 29),
]


class TestValidation:

    @pytest.mark.parametrize("year, month, day", BAD_DATES)
    def test_bad_dates(self, year, month, day):
        with pytest.raises(DateRangeError):
            PaxDate.of(year, month, day)


# ── Fields ────────────────────────────────────────────────────────────────────

class TestFields:

    @pytest.mark.parametrize("ymd, field, low, high", [
        ((2012, 1, 23), Field.DAY_OF_MONTH, 1, 28),
        ((2012, 13, 3), Field.DAY_OF_MONTH, 1, 7),
        ((2012, 14, 23), Field.DAY_OF_MONTH, 1, 28),
        ((2012, 13, 3), Field.ALIGNED_WEEK_OF_MONTH, 1, 1),
        ((2012, 1, 23), Field.MONTH_OF_YEAR, 1, 14),
        ((2012, 1, 23), Field.DAY_OF_YEAR, 1, 371),
        ((2011, 13, 23), Field.DAY_OF_MONTH, 1, 28),
        ((2011, 13, 23), Field.MONTH_OF_YEAR, 1, 13),
        ((2011, 13, 23), Field.DAY_OF_YEAR, 1, 364),
    ])
    def test_range(self, ymd, field, low, high):
        assert d(*ymd).range(field) == ValueRange.of(low, high)

    def test_chronology_range(self):
        assert pax.range(Field.MONTH_OF_YEAR) == ValueRange.of(1, 13, 14)
        assert pax.range(Field.DAY_OF_MONTH) == ValueRange.of(1, 7, 28)
        assert pax.range(Field.DAY_OF_YEAR) == ValueRange.of(1, 364, 371)
        assert pax.range(Field.ALIGNED_WEEK_OF_MONTH) == ValueRange.of(1, 1, 4)

    @pytest.mark.parametrize("field, expected", [
        (Field.DAY_OF_WEEK, 4),
        (Field.DAY_OF_MONTH, 26),
        (Field.DAY_OF_YEAR, 28 * 4 + 26),
        (Field.ALIGNED_DAY_OF_WEEK_IN_MONTH, 5),
        (Field.ALIGNED_WEEK_OF_MONTH, 4),
        (Field.ALIGNED_WEEK_OF_YEAR, 20),
        (Field.MONTH_OF_YEAR, 5),
        (Field.PROLEPTIC_MONTH, 2014 * 13 + 20 * 18 - 5 + 2 + 5 - 1),
        (Field.YEAR, 2014),
        (Field.ERA, 1),
    ])
    def test_get(self, field, expected):
        assert d(2014, 5, 26).get(field) == expected

    @pytest.mark.parametrize("ymd, field, value, expected", [
        ((2014, 5, 26), Field.DAY_OF_WEEK, 3, (2014, 5, 25)),
        ((2014, 5, 26), Field.DAY_OF_MONTH, 28, (2014, 5, 28)),
        ((2014, 5, 26), Field.DAY_OF_YEAR, 364, (2014, 13, 28)),
        ((2014, 5, 26), Field.ALIGNED_WEEK_OF_YEAR, 23, (2014, 6, 19)),
        ((2014, 5, 26), Field.MONTH_OF_YEAR, 7, (2014, 7, 26)),
        ((2014, 5, 26), Field.PROLEPTIC_MONTH, 2013 * 13 + 20 * 18 - 5 + 2 + 3 - 1, (2013, 3, 26)),
        ((2014, 5, 26), Field.YEAR, 2012, (2012, 5, 26)),
        ((2014, 5, 26), Field.ERA, 0, (-2013, 5, 26)),
        ((2012, 3, 28), Field.MONTH_OF_YEAR, 13, (2012, 13, 7)),
        ((2012, 13, 7), Field.YEAR, 2011, (2011, 13, 7)),
        ((2011, 13, 7), Field.YEAR, 2012, (2012, 14, 7)),
        ((2012, 14, 20), Field.YEAR, 2013, (2013, 13, 20)),
    ])
    def test_with_field(self, ymd, field, value, expected):
        assert d(*ymd).with_field(field, value) == d(*expected)

    def test_month_fourteen_needs_leap_year(self):
        with pytest.raises(DateRangeError):
            d(2011, 5, 1).with_field(Field.MONTH_OF_YEAR, 15)
        assert d(2011, 5, 1).with_field(Field.MONTH_OF_YEAR, 14) == d(2011, 13, 1)

    def test_last_day_of_month(self):
        date = d(2012, 13, 2)
        assert date.with_field(Field.DAY_OF_MONTH, date.range(Field.DAY_OF_MONTH).maximum) == d(2012, 13, 7)


# ── Arithmetic ────────────────────────────────────────────────────────────────

PLUS_CASES = [
    ((2014, 5, 26), 8, Unit.DAYS, (2014, 6, 6)),
    ((2014, 5, 26), 3, Unit.WEEKS, (2014, 6, 19)),
    ((2014, 5, 26), -5, Unit.WEEKS, (2014, 4, 19)),
    ((2014, 5, 26), 3, Unit.MONTHS, (2014, 8, 26)),
    ((2014, 5, 26), -5, Unit.MONTHS, (2013, 13, 26)),
    ((2014, 5, 26), -5, Unit.YEARS, (2009, 5, 26)),
    ((2014, 5, 26), 3, Unit.CENTURIES, (2314, 5, 26)),
    ((2014, 5, 26), -5, Unit.MILLENNIA, (2014 - 5000, 5, 26)),
    ((2014, 5, 26), -1, Unit.ERAS, (-2013, 5, 26)),
    ((2012, 13, 6), 3, Unit.MONTHS, (2013, 2, 6)),
    ((2011, 13, 26), 1, Unit.YEARS, (2012, 14, 26)),
    ((2014, 13, 26), -2, Unit.YEARS, (2012, 14, 26)),
    ((2012, 14, 26), -6, Unit.YEARS, (2006, 14, 26)),
    ((2012, 13, 6), -6, Unit.YEARS, (2006, 13, 6)),
    ((-2014, 5, 26), -5, Unit.MONTHS, (-2015, 13, 26)),
]


class TestArithmetic:

    @pytest.mark.parametrize("start, amount, unit, expected", PLUS_CASES)
    def test_plus(self, start, amount, unit, expected):
        assert d(*start).plus(amount, unit) == d(*expected)

    @pytest.mark.parametrize("start, amount, unit, expected", PLUS_CASES)
    def test_minus(self, start, amount, unit, expected):
        assert d(*expected).minus(amount, unit) == d(*start)

    @pytest.mark.parametrize("start, amount, unit, expected", [
        ((2012, 12, 26), 1, Unit.MONTHS, (2012, 13, 7)),
        ((2012, 14, 26), -1, Unit.MONTHS, (2012, 13, 7)),
        ((2012, 13, 6), 3, Unit.YEARS, (2015, 13, 6)),
    ])
    def test_plus_clamps_into_pax_week(self, start, amount, unit, expected):
        assert d(*start).plus(amount, unit) == d(*expected)

    def test_minus_into_leap_year(self):
        assert d(2015, 13, 6).minus(3, Unit.YEARS) == d(2012, 14, 6)

    def test_period(self):
        assert d(2014, 5, 26).plus(pax.period(0, 2, 2)) == d(2014, 7, 28)
        assert d(2014, 5, 26).minus(pax.period(0, 2, 3)) == d(2014, 3, 23)

    @pytest.mark.parametrize("start, end, unit, expected", [
        ((2014, 5, 26), (2014, 6, 4), Unit.DAYS, 6),
        ((2014, 5, 26), (2014, 6, 5), Unit.WEEKS, 1),
        ((2014, 5, 26), (2014, 6, 25), Unit.MONTHS, 0),
        ((2014, 5, 26), (2014, 6, 26), Unit.MONTHS, 1),
        ((2014, 5, 26), (2015, 5, 25), Unit.YEARS, 0),
        ((2014, 5, 26), (2015, 5, 26), Unit.YEARS, 1),
        ((2014, 5, 26), (2024, 5, 26), Unit.DECADES, 1),
        ((2011, 13, 26), (2013, 13, 26), Unit.YEARS, 2),
        ((2011, 13, 26), (2012, 14, 26), Unit.YEARS, 1),
        ((2012, 14, 26), (2011, 13, 26), Unit.YEARS, -1),
        ((2012, 14, 26), (2013, 13, 26), Unit.YEARS, 1),
        ((2011, 13, 6), (2012, 13, 6), Unit.YEARS, 0),
        ((2012, 13, 6), (2011, 13, 6), Unit.YEARS, 0),
        ((2011, 13, 1), (2012, 13, 7), Unit.YEARS, 0),
        ((2012, 13, 7), (2011, 13, 1), Unit.YEARS, 0),
        ((2011, 12, 28), (2012, 13, 1), Unit.YEARS, 1),
        ((2012, 13, 1), (2011, 12, 28), Unit.YEARS, -1),
        ((2013, 13, 6), (2012, 13, 6), Unit.YEARS, -1),
        ((2012, 13, 6), (2013, 13, 6), Unit.YEARS, 1),
    ])
    def test_until(self, start, end, unit, expected):
        assert d(*start).until(d(*end), unit) == expected

    @pytest.mark.parametrize("start, end, expected", [
        ((2014, 5, 26), (2014, 6, 5), (0, 0, 7)),
        ((2014, 5, 26), (2014, 6, 26), (0, 1, 0)),
        ((2014, 5, 26), (2015, 5, 25), (0, 12, 27)),
        ((2014, 5, 26), (2024, 5, 25), (9, 12, 27)),
        ((2011, 13, 26), (2012, 14, 26), (1, 0, 0)),
        ((2012, 14, 26), (2011, 13, 26), (-1, 0, 0)),
        ((2011, 13, 6), (2012, 13, 6), (0, 13, 0)),
        ((2012, 13, 6), (2011, 13, 6), (0, -13, 0)),
        ((2012, 13, 7), (2011, 13, 1), (0, -13, -6)),
        ((2011, 12, 28), (2012, 13, 1), (1, 0, 1)),
        ((2012, 13, 1), (2011, 12, 28), (-1, 0, -1)),
        ((2013, 13, 6), (2012, 13, 6), (-1, -1, 0)),
    ])
    def test_until_period(self, start, end, expected):
        assert d(*start).until(d(*end)) == pax.period(*expected)


# ── Eras, interop and strings ─────────────────────────────────────────────────

class TestIdentity:

    def test_era_loop(self):
        for year in range(-200, 200):
            base = pax.date_year_day(year, 1)
            era = PaxEra.BCE if year <= 0 else PaxEra.CE
            year_of_era = 1 - year if year <= 0 else year
            assert base.era is era
            assert base.get(Field.YEAR_OF_ERA) == year_of_era
            assert pax.date_of_era(era, year_of_era, 1, 1) == base
            assert pax.date_year_day_of_era(era, year_of_era, 1) == base

    def test_from_iso(self):
        assert pax.date_from(datetime.date(2012, 7, 6)) == d(2012, 7, 27)

    def test_adjust_into(self):
        assert d(2012, 6, 23).adjust_into(datetime.date.min) == datetime.date(2012, 6, 4)

    @pytest.mark.parametrize("ymd, expected", [
        ((1, 1, 1), "Pax CE 1-01-01"),
        ((2012, 6, 23), "Pax CE 2012-06-23"),
    ])
    def test_str(self, ymd, expected):
        assert str(d(*ymd)) == expected

    def test_equality(self):
        assert d(2000, 1, 3) == PaxDate.of(2000, 1, 3)
        assert hash(d(2000, 1, 3)) == hash(PaxDate.of(2000, 1, 3))
        assert d(2000, 1, 3) != d(2000, 1, 4)
        assert d(2000, 1, 3) != d(2001, 1, 3)
