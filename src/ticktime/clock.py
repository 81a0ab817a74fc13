"""Clock sources for the current instant."""

from datetime import datetime, timezone
from typing import NamedTuple, Protocol

from ticktime.logging import get_logger


class SystemTime(NamedTuple):
    """Calendar fields of a clock reading.

    ``day_of_week`` is informational only (Monday = 0); ``DateTime`` derives
    the weekday from its ticks and never reads this field.
    """

    year: int
    month: int
    day_of_week: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int

    @classmethod
    def from_datetime(cls, dt: datetime) -> "SystemTime":
        return cls(
            year=dt.year,
            month=dt.month,
            day_of_week=dt.weekday(),
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
            millisecond=dt.microsecond // 1000,
        )


class Clock(Protocol):
    """Protocol for a source of the current local and UTC calendar fields."""

    def local_time(self) -> SystemTime:
        """Current local wall-clock fields."""
        ...

    def utc_time(self) -> SystemTime:
        """Current UTC fields."""
        ...


class SystemClock:
    """Clock backed by the operating system via ``datetime.now``."""

    def __init__(self) -> None:
        self._log = get_logger(__name__)

    def local_time(self) -> SystemTime:
        fields = SystemTime.from_datetime(datetime.now())
        self._log.debug("clock_read", kind="local", fields=tuple(fields))
        return fields

    def utc_time(self) -> SystemTime:
        fields = SystemTime.from_datetime(datetime.now(timezone.utc))
        self._log.debug("clock_read", kind="utc", fields=tuple(fields))
        return fields


class FixedClock:
    """Clock that always returns the same readings.

    If no UTC reading is given, the local reading is used for both.
    """

    def __init__(self, local: SystemTime, utc: SystemTime | None = None) -> None:
        self._local = local
        self._utc = utc if utc is not None else local

    def local_time(self) -> SystemTime:
        return self._local

    def utc_time(self) -> SystemTime:
        return self._utc
