"""Polars backend implementation."""

import polars as pl


class PolarsBackend:
    """Backend implementation for polars DataFrames."""

    def from_columns(self, columns: dict[str, list[int]]) -> pl.DataFrame:
        """Build a DataFrame of Int64 columns."""
        return pl.DataFrame(
            [pl.Series(name, values, dtype=pl.Int64) for name, values in columns.items()]
        )

    def column_names(self, df: pl.DataFrame) -> list[str]:
        return list(df.columns)

    def column(self, df: pl.DataFrame, name: str) -> list[int]:
        return [int(v) for v in df[name].to_list()]

    def empty(self) -> pl.DataFrame:
        """Return an empty DataFrame."""
        return pl.DataFrame()

    def is_empty(self, df: pl.DataFrame) -> bool:
        """Check if DataFrame is empty."""
        return df.is_empty()
