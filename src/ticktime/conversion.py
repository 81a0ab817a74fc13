"""Bulk conversion between DateTime sequences and DataFrames."""

from typing import Any, Iterable, Literal

from ticktime.backends import Backend, PandasBackend, PolarsBackend
from ticktime.core import DateTime
from ticktime.logging import get_logger, timed_block

FRAME_COLUMNS = (
    "ticks",
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
    "day_of_week",
    "day_of_year",
)

_TIME_COLUMNS = ("hour", "minute", "second", "millisecond")

_log = get_logger(__name__)


def get_backend(backend: Literal["pandas", "polars"]) -> Backend:
    """Resolve a backend name to a backend instance."""
    if backend == "pandas":
        return PandasBackend()
    elif backend == "polars":
        return PolarsBackend()
    else:
        raise ValueError(f"Unknown backend: {backend}. Must be 'pandas' or 'polars'.")


def to_frame(
    instants: Iterable[DateTime],
    backend: Literal["pandas", "polars"] = "pandas",
) -> Any:
    """Decompose instants into a DataFrame of calendar field columns.

    Columns are ticks, year, month, day, hour, minute, second, millisecond,
    day_of_week (Monday = 0) and day_of_year, one row per instant in order.

    Example:
        df = to_frame([DateTime(2024, 1, 1), DateTime(2024, 3, 1)], backend="polars")
    """
    impl = get_backend(backend)
    columns: dict[str, list[int]] = {name: [] for name in FRAME_COLUMNS}
    with timed_block(_log, "to_frame", backend=backend):
        for instant in instants:
            year, month, day = instant.get_date()
            columns["ticks"].append(instant.ticks)
            columns["year"].append(year)
            columns["month"].append(month)
            columns["day"].append(day)
            columns["hour"].append(instant.hour)
            columns["minute"].append(instant.minute)
            columns["second"].append(instant.second)
            columns["millisecond"].append(instant.millisecond)
            columns["day_of_week"].append(int(instant.day_of_week))
            columns["day_of_year"].append(instant.day_of_year)
    return impl.from_columns(columns)


def from_frame(
    df: Any,
    backend: Literal["pandas", "polars"] = "pandas",
) -> list[DateTime]:
    """Rebuild instants from a DataFrame.

    Uses the ``ticks`` column when present. Otherwise builds each instant from
    ``year``, ``month`` and ``day`` plus any of ``hour``, ``minute``,
    ``second`` and ``millisecond`` (missing time columns default to 0).

    Raises:
        ValueError: If neither ticks nor the date columns are present.
        ContractViolationError: If a row holds invalid fields or ticks.
    """
    impl = get_backend(backend)
    if impl.is_empty(df):
        return []

    names = set(impl.column_names(df))
    with timed_block(_log, "from_frame", backend=backend):
        if "ticks" in names:
            return [DateTime.from_ticks(t) for t in impl.column(df, "ticks")]

        missing = [c for c in ("year", "month", "day") if c not in names]
        if missing:
            raise ValueError(f"DataFrame missing columns: {', '.join(missing)}")

        date_values = [impl.column(df, c) for c in ("year", "month", "day")]
        n_rows = len(date_values[0])
        time_values = [
            impl.column(df, c) if c in names else [0] * n_rows for c in _TIME_COLUMNS
        ]
        return [DateTime(*fields) for fields in zip(*date_values, *time_values)]
