"""ticktime - Tick-based proleptic Gregorian date/time value type."""

from ticktime.backends.pandas import PandasBackend
from ticktime.backends.polars import PolarsBackend
from ticktime.calendar import (
    DayOfWeek,
    days_in_month,
    days_in_year,
    is_leap_year,
    validate,
)
from ticktime.clock import Clock, FixedClock, SystemClock, SystemTime
from ticktime.config import (
    configure_ticktime,
    get_clock,
    reset_ticktime_config,
)
from ticktime.constants import (
    MAX_TICKS,
    MIN_TICKS,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from ticktime.conversion import from_frame, to_frame
from ticktime.core import DateTime
from ticktime.logging import configure_logging, get_logger
from ticktime.validation import ContractViolationError

__all__ = [
    # Primary API
    "DateTime",
    "DayOfWeek",
    # Calendar helpers
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "validate",
    # Constants
    "MAX_TICKS",
    "MIN_TICKS",
    "TICKS_PER_DAY",
    "TICKS_PER_HOUR",
    "TICKS_PER_MILLISECOND",
    "TICKS_PER_MINUTE",
    "TICKS_PER_SECOND",
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
    "SystemTime",
    # Config
    "configure_ticktime",
    "get_clock",
    "reset_ticktime_config",
    # Errors
    "ContractViolationError",
    # Logging
    "configure_logging",
    "get_logger",
    # Backends
    "PandasBackend",
    "PolarsBackend",
    "from_frame",
    "to_frame",
]
__version__ = "0.1.0"
