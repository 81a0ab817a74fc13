"""Pandas backend implementation."""

import pandas as pd


class PandasBackend:
    """Backend implementation for pandas DataFrames."""

    def from_columns(self, columns: dict[str, list[int]]) -> pd.DataFrame:
        """Build a DataFrame of int64 columns."""
        return pd.DataFrame(
            {name: pd.Series(values, dtype="int64") for name, values in columns.items()}
        )

    def column_names(self, df: pd.DataFrame) -> list[str]:
        """Column names, including named index levels."""
        names = [str(c) for c in df.columns]
        index_names = [n for n in df.index.names if n is not None]
        return index_names + names

    def column(self, df: pd.DataFrame, name: str) -> list[int]:
        if name in df.columns:
            values = df[name]
        else:
            values = df.index.get_level_values(name)
        return [int(v) for v in values]

    def empty(self) -> pd.DataFrame:
        """Return an empty DataFrame."""
        return pd.DataFrame()

    def is_empty(self, df: pd.DataFrame) -> bool:
        """Check if DataFrame has no rows. Index-only frames are not empty."""
        return len(df) == 0
