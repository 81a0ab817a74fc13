"""Proleptic Gregorian calendar arithmetic on tick counts."""

from enum import IntEnum

from ticktime.constants import (
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    DAYS_TO_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from ticktime.validation import check_contract


class DayOfWeek(IntEnum):
    """Day of the week; 0001-01-01 is a Monday."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    if year % 4 == 0:
        return year % 100 != 0 or year % 400 == 0
    return False


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` (1-12) of ``year``.

    Raises:
        ContractViolationError: If month is outside 1-12.
    """
    check_contract(1 <= month <= 12, f"Month out of range: {month}", month=month)
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_PER_MONTH[month]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def validate(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> bool:
    """Check that calendar fields describe a representable instant."""
    return (
        MIN_YEAR <= year <= MAX_YEAR
        and 1 <= month <= 12
        and 1 <= day <= days_in_month(year, month)
        and 0 <= hour <= 23
        and 0 <= minute <= 59
        and 0 <= second <= 59
        and 0 <= millisecond <= 999
    )


def ticks_from_fields(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Convert calendar fields to ticks since 0001-01-01 00:00.

    Raises:
        ContractViolationError: If the fields fail ``validate``.
    """
    check_contract(
        validate(year, month, day, hour, minute, second, millisecond),
        "Invalid date/time fields: "
        f"{year:04d}-{month:02d}-{day:02d} "
        f"{hour:02d}:{minute:02d}:{second:02d}.{millisecond:03d}",
        year=year,
        month=month,
        day=day,
    )
    total_days = 0
    # DAYS_TO_MONTH ignores Feb 29
    if month > 2 and is_leap_year(year):
        total_days += 1
    year -= 1
    month -= 1  # now an index into DAYS_TO_MONTH
    total_days += (
        year * 365 + year // 4 - year // 100 + year // 400
        + DAYS_TO_MONTH[month] + day - 1
    )
    return (
        total_days * TICKS_PER_DAY
        + hour * TICKS_PER_HOUR
        + minute * TICKS_PER_MINUTE
        + second * TICKS_PER_SECOND
        + millisecond * TICKS_PER_MILLISECOND
    )


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def date_from_julian_day(julian_day_number: int) -> tuple[int, int, int]:
    """Convert a Julian Day Number to a Gregorian (year, month, day).

    Fliegel, H. F. and van Flandern, T. C., Communications of the ACM,
    Vol. 11, No. 10 (October 1968). Operation order follows the paper.
    """
    l = julian_day_number + 68569
    n = _div(4 * l, 146097)
    l = l - _div(146097 * n + 3, 4)
    i = _div(4000 * (l + 1), 1461001)
    l = l - _div(1461 * i, 4) + 31
    j = _div(80 * l, 2447)
    k = l - _div(2447 * j, 80)
    l = _div(j, 11)
    j = j + 2 - 12 * l
    i = 100 * (n - 49) + i + l
    return i, j, k


def day_of_year(year: int, month: int, day: int) -> int:
    """1-based ordinal of the date within its year."""
    for current_month in range(1, month):
        day += days_in_month(year, current_month)
    return day


def day_of_week(ticks: int) -> DayOfWeek:
    # floored modulo keeps pre-epoch ticks in Monday..Sunday
    return DayOfWeek((ticks // TICKS_PER_DAY) % DAYS_PER_WEEK)
