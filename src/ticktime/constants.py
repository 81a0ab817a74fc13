"""Tick and calendar constants for ticktime."""

# One tick is 100 nanoseconds.
TICKS_PER_MILLISECOND = 10_000
TICKS_PER_SECOND = TICKS_PER_MILLISECOND * 1000
TICKS_PER_MINUTE = TICKS_PER_SECOND * 60
TICKS_PER_HOUR = TICKS_PER_MINUTE * 60
TICKS_PER_DAY = TICKS_PER_HOUR * 24

TICKS_PER_MICROSECOND = TICKS_PER_MILLISECOND // 1000

MIN_YEAR = 1
MAX_YEAR = 9999

# Indexed by month (1-12); index 0 is unused.
DAYS_PER_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Cumulative non-leap days before each month, indexed by zero-based month
# (0 = January); the final entry is the length of a whole year.
DAYS_TO_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)

DAYS_PER_WEEK = 7

# 0001-01-01 .. 9999-12-31 inclusive
DAYS_TO_MAX_YEAR_END = 3_652_059

MIN_TICKS = 0
MAX_TICKS = DAYS_TO_MAX_YEAR_END * TICKS_PER_DAY - 1

# Julian date at the epoch (0001-01-01 00:00) and the day number of the epoch day.
JULIAN_DAY_AT_EPOCH = 1721425.5
JULIAN_DAY_NUMBER_AT_EPOCH = 1721426
MODIFIED_JULIAN_DAY_OFFSET = 2400000.5
