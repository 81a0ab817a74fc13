"""Tests for calendar functions."""

from datetime import date

import pytest

from ticktime import (
    ContractViolationError,
    DayOfWeek,
    TICKS_PER_DAY,
    days_in_month,
    days_in_year,
    is_leap_year,
    validate,
)
from ticktime.calendar import (
    date_from_julian_day,
    day_of_week,
    day_of_year,
    ticks_from_fields,
)
from ticktime.constants import DAYS_PER_MONTH, DAYS_TO_MONTH, JULIAN_DAY_NUMBER_AT_EPOCH


class TestLeapYear:
    """Test Gregorian leap year rules."""

    @pytest.mark.parametrize(
        "year,expected",
        [(2000, True), (1900, False), (2024, True), (2023, False), (1600, True), (4, True), (1, False)],
    )
    def test_is_leap_year(self, year, expected):
        """Divisible by 4, except centuries not divisible by 400."""
        assert is_leap_year(year) is expected

    def test_days_in_year(self):
        """Leap years have 366 days."""
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365
        assert days_in_year(1900) == 365


class TestDaysInMonth:
    """Test days_in_month."""

    def test_february(self):
        """February has 29 days only in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_thirty_day_months(self):
        """April, June, September and November have 30 days."""
        for month in (4, 6, 9, 11):
            assert days_in_month(2024, month) == 30

    def test_tables_agree(self):
        """Cumulative table is the running sum of the per-month table."""
        assert DAYS_TO_MONTH[0] == 0
        for month in range(1, 13):
            assert DAYS_TO_MONTH[month] == DAYS_TO_MONTH[month - 1] + DAYS_PER_MONTH[month]

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_month_out_of_range(self, month):
        """Out of range month is a contract violation."""
        with pytest.raises(ContractViolationError, match="Month out of range"):
            days_in_month(2024, month)


class TestValidate:
    """Test the validate predicate."""

    def test_accepts_bounds(self):
        """Inclusive bounds on every field are valid."""
        assert validate(1, 1, 1, 0, 0, 0, 0)
        assert validate(9999, 12, 31, 23, 59, 59, 999)
        assert validate(2024, 2, 29)

    def test_rejects_february_30(self):
        """February never has 30 days."""
        for year in (2023, 2024, 2000, 1900):
            assert not validate(year, 2, 30)

    def test_rejects_february_29_in_common_year(self):
        """February 29 exists only in leap years."""
        assert not validate(2023, 2, 29)

    @pytest.mark.parametrize(
        "fields",
        [
            (0, 1, 1, 0, 0, 0, 0),
            (10000, 1, 1, 0, 0, 0, 0),
            (2024, 13, 1, 0, 0, 0, 0),
            (2024, 0, 1, 0, 0, 0, 0),
            (2024, 1, 0, 0, 0, 0, 0),
            (2024, 4, 31, 0, 0, 0, 0),
            (2024, 1, 1, 24, 0, 0, 0),
            (2024, 1, 1, -1, 0, 0, 0),
            (2024, 1, 1, 0, 60, 0, 0),
            (2024, 1, 1, 0, 0, 60, 0),
            (2024, 1, 1, 0, 0, 0, 1000),
        ],
    )
    def test_rejects_out_of_range(self, fields):
        """Each field out of range fails validation without raising."""
        assert not validate(*fields)


class TestTicksFromFields:
    """Test field to tick conversion."""

    def test_epoch_is_zero(self):
        """0001-01-01 00:00 is tick zero."""
        assert ticks_from_fields(1, 1, 1) == 0

    def test_matches_ordinal(self):
        """Whole days agree with the stdlib proleptic Gregorian ordinal."""
        for d in (date(1, 3, 1), date(1600, 2, 29), date(1970, 1, 1), date(2024, 3, 1)):
            expected = (d.toordinal() - 1) * TICKS_PER_DAY
            assert ticks_from_fields(d.year, d.month, d.day) == expected

    def test_invalid_fields_raise(self):
        """Invalid fields are a contract violation."""
        with pytest.raises(ContractViolationError, match="Invalid date/time fields"):
            ticks_from_fields(2023, 2, 29)


class TestJulianDay:
    """Test the Fliegel-van Flandern inverse."""

    def test_epoch(self):
        """The epoch day number maps to 0001-01-01."""
        assert date_from_julian_day(JULIAN_DAY_NUMBER_AT_EPOCH) == (1, 1, 1)

    def test_j2000(self):
        """JDN 2451545 is 2000-01-01."""
        assert date_from_julian_day(2451545) == (2000, 1, 1)

    def test_agrees_with_stdlib_across_range(self):
        """Sampled days across years 1-9999 decode to the stdlib date."""
        for ordinal in range(1, date.max.toordinal() + 1, 997):
            d = date.fromordinal(ordinal)
            jdn = JULIAN_DAY_NUMBER_AT_EPOCH + ordinal - 1
            assert date_from_julian_day(jdn) == (d.year, d.month, d.day)

    def test_last_day(self):
        """The last representable day decodes correctly."""
        jdn = JULIAN_DAY_NUMBER_AT_EPOCH + date.max.toordinal() - 1
        assert date_from_julian_day(jdn) == (9999, 12, 31)


class TestDayOfWeekAndYear:
    """Test weekday and ordinal helpers."""

    def test_epoch_is_monday(self):
        """Tick zero falls on a Monday."""
        assert day_of_week(0) == DayOfWeek.MONDAY

    def test_negative_ticks(self):
        """Pre-epoch days wrap to Sunday rather than a negative value."""
        assert day_of_week(-1) == DayOfWeek.SUNDAY
        assert day_of_week(-7 * TICKS_PER_DAY) == DayOfWeek.MONDAY

    def test_day_of_year(self):
        """Prior months are summed, respecting leap February."""
        assert day_of_year(2024, 3, 1) == 61
        assert day_of_year(2023, 3, 1) == 60
        assert day_of_year(2024, 12, 31) == 366
        assert day_of_year(2024, 1, 1) == 1
