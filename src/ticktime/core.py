"""DateTime value type: an instant stored as 100 ns ticks since 0001-01-01."""

from datetime import datetime, timedelta, timezone
from functools import total_ordering
from typing import Any

from ticktime import calendar
from ticktime.calendar import DayOfWeek
from ticktime.clock import Clock
from ticktime.config import get_clock
from ticktime.constants import (
    JULIAN_DAY_AT_EPOCH,
    JULIAN_DAY_NUMBER_AT_EPOCH,
    MAX_TICKS,
    MIN_TICKS,
    MODIFIED_JULIAN_DAY_OFFSET,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from ticktime.logging import get_logger
from ticktime.validation import check_contract


def _timedelta_to_ticks(delta: timedelta) -> int:
    return (
        (delta.days * 86400 + delta.seconds) * TICKS_PER_SECOND
        + delta.microseconds * TICKS_PER_MICROSECOND
    )


def _ticks_to_timedelta(ticks: int) -> timedelta:
    """Convert a tick difference to a timedelta, truncating toward zero."""
    micros = abs(ticks) // TICKS_PER_MICROSECOND
    return timedelta(microseconds=micros if ticks >= 0 else -micros)


@total_ordering
class DateTime:
    """Immutable instant in the proleptic Gregorian calendar.

    Stored as a single integer count of 100 ns ticks since
    0001-01-01 00:00:00.000, which is a Monday. All calendar fields are
    derived from the tick count on demand.

    Example:
        dt = DateTime(2024, 3, 1, 14, 30)
        dt.day_of_year  # 61
        dt.hour12  # 2
        dt.to_file_name_string()  # "2024_03_01_14_30_00"
    """

    __slots__ = ("_ticks",)

    is_leap_year = staticmethod(calendar.is_leap_year)
    days_in_month = staticmethod(calendar.days_in_month)
    days_in_year = staticmethod(calendar.days_in_year)
    validate = staticmethod(calendar.validate)

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> None:
        """Build an instant from calendar fields.

        Raises:
            ContractViolationError: If the fields fail ``DateTime.validate``.
        """
        ticks = calendar.ticks_from_fields(
            year, month, day, hour, minute, second, millisecond
        )
        object.__setattr__(self, "_ticks", ticks)

    @classmethod
    def from_ticks(cls, ticks: int) -> "DateTime":
        """Build an instant directly from a tick count.

        Raises:
            ContractViolationError: If ticks fall outside years 1-9999.
        """
        check_contract(
            MIN_TICKS <= ticks <= MAX_TICKS,
            f"Ticks out of range: {ticks}",
            ticks=ticks,
        )
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_ticks", ticks)
        return instance

    @classmethod
    def from_datetime(cls, dt: datetime) -> "DateTime":
        """Build an instant from a ``datetime`` (or pandas ``Timestamp``).

        Timezone-aware values are converted to UTC. Sub-microsecond
        precision is dropped.

        Raises:
            ContractViolationError: If the value, after conversion to UTC,
                falls outside years 1-9999.
        """
        if dt.tzinfo is not None:
            try:
                dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
            except OverflowError:
                check_contract(
                    False,
                    f"UTC conversion out of range: {dt.isoformat()}",
                    value=dt.isoformat(),
                )
                raise
        ticks = calendar.ticks_from_fields(
            dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second
        )
        return cls.from_ticks(ticks + dt.microsecond * TICKS_PER_MICROSECOND)

    @classmethod
    def min_value(cls) -> "DateTime":
        return cls.from_ticks(MIN_TICKS)

    @classmethod
    def max_value(cls) -> "DateTime":
        return cls.from_ticks(MAX_TICKS)

    @classmethod
    def now(cls, clock: Clock | None = None) -> "DateTime":
        """Current local time from ``clock`` or the configured clock."""
        fields = (clock or get_clock()).local_time()
        get_logger(__name__).debug("now", fields=tuple(fields))
        # fields.day_of_week is not trusted; it is recomputed from ticks
        return cls(
            fields.year,
            fields.month,
            fields.day,
            fields.hour,
            fields.minute,
            fields.second,
            fields.millisecond,
        )

    @classmethod
    def utc_now(cls, clock: Clock | None = None) -> "DateTime":
        """Current UTC time from ``clock`` or the configured clock."""
        fields = (clock or get_clock()).utc_time()
        get_logger(__name__).debug("utc_now", fields=tuple(fields))
        return cls(
            fields.year,
            fields.month,
            fields.day,
            fields.hour,
            fields.minute,
            fields.second,
            fields.millisecond,
        )

    # Calendar fields

    @property
    def ticks(self) -> int:
        return self._ticks

    def get_date(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return calendar.date_from_julian_day(self.julian_day_number)

    @property
    def year(self) -> int:
        return self.get_date()[0]

    @property
    def month(self) -> int:
        return self.get_date()[1]

    @property
    def day(self) -> int:
        return self.get_date()[2]

    @property
    def day_of_week(self) -> DayOfWeek:
        return calendar.day_of_week(self._ticks)

    @property
    def day_of_year(self) -> int:
        return calendar.day_of_year(*self.get_date())

    @property
    def time_of_day_ticks(self) -> int:
        """Ticks elapsed since midnight."""
        return self._ticks % TICKS_PER_DAY

    @property
    def hour(self) -> int:
        return self.time_of_day_ticks // TICKS_PER_HOUR

    @property
    def hour12(self) -> int:
        """Hour on a 12-hour clock: midnight and noon are both 12."""
        hour = self.hour
        if hour < 1:
            return 12
        if hour > 12:
            return hour - 12
        return hour

    @property
    def is_am(self) -> bool:
        return self.hour < 12

    @property
    def is_pm(self) -> bool:
        return self.hour >= 12

    @property
    def minute(self) -> int:
        return (self._ticks // TICKS_PER_MINUTE) % 60

    @property
    def second(self) -> int:
        return (self._ticks // TICKS_PER_SECOND) % 60

    @property
    def millisecond(self) -> int:
        return (self._ticks // TICKS_PER_MILLISECOND) % 1000

    @property
    def date(self) -> "DateTime":
        """Midnight at the start of the same day."""
        return DateTime.from_ticks(self._ticks - self.time_of_day_ticks)

    @property
    def julian_day(self) -> float:
        return JULIAN_DAY_AT_EPOCH + self._ticks / TICKS_PER_DAY

    @property
    def julian_day_number(self) -> int:
        """Integral Julian Day Number of the calendar day (noon-based)."""
        return JULIAN_DAY_NUMBER_AT_EPOCH + self._ticks // TICKS_PER_DAY

    @property
    def modified_julian_day(self) -> float:
        return self.julian_day - MODIFIED_JULIAN_DAY_OFFSET

    # Arithmetic

    def add_ticks(self, ticks: int) -> "DateTime":
        return DateTime.from_ticks(self._ticks + ticks)

    def add_milliseconds(self, milliseconds: int) -> "DateTime":
        return self.add_ticks(milliseconds * TICKS_PER_MILLISECOND)

    def add_seconds(self, seconds: int) -> "DateTime":
        return self.add_ticks(seconds * TICKS_PER_SECOND)

    def add_minutes(self, minutes: int) -> "DateTime":
        return self.add_ticks(minutes * TICKS_PER_MINUTE)

    def add_hours(self, hours: int) -> "DateTime":
        return self.add_ticks(hours * TICKS_PER_HOUR)

    def add_days(self, days: int) -> "DateTime":
        return self.add_ticks(days * TICKS_PER_DAY)

    def __add__(self, other: Any) -> "DateTime":
        if isinstance(other, timedelta):
            return self.add_ticks(_timedelta_to_ticks(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, DateTime):
            return _ticks_to_timedelta(self._ticks - other._ticks)
        if isinstance(other, timedelta):
            return self.add_ticks(-_timedelta_to_ticks(other))
        return NotImplemented

    # Conversion and formatting

    def to_datetime(self) -> datetime:
        """Naive ``datetime`` with microsecond precision."""
        year, month, day = self.get_date()
        micros = (self._ticks % TICKS_PER_SECOND) // TICKS_PER_MICROSECOND
        return datetime(
            year, month, day, self.hour, self.minute, self.second, micros
        )

    def to_string(self) -> str:
        year, month, day = self.get_date()
        return (
            f"{year:04d}-{month:02d}-{day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            f".{self.millisecond:03d}"
        )

    def to_file_name_string(self) -> str:
        """Format as ``YYYY_MM_DD_HH_mm_ss`` for use in file names."""
        year, month, day = self.get_date()
        return (
            f"{year:04d}_{month:02d}_{day:02d}_"
            f"{self.hour:02d}_{self.minute:02d}_{self.second:02d}"
        )

    # Value semantics

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("DateTime is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("DateTime is immutable")

    def __reduce__(self):
        return (DateTime.from_ticks, (self._ticks,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks == other._ticks

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ticks < other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        year, month, day = self.get_date()
        return (
            f"DateTime({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, {self.millisecond})"
        )
