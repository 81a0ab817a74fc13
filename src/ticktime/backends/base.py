"""Abstract backend protocol for columnar instant data."""

from typing import Protocol, TypeVar

DF = TypeVar("DF", covariant=True)


class Backend(Protocol[DF]):
    """Protocol defining the DataFrame operations used for bulk conversion."""

    def from_columns(self, columns: dict[str, list[int]]) -> DF:
        """Build a DataFrame from equal-length integer columns."""
        ...

    def column_names(self, df: DF) -> list[str]:
        """Names of the DataFrame's columns."""
        ...

    def column(self, df: DF, name: str) -> list[int]:
        """Values of one column as plain Python ints."""
        ...

    def empty(self) -> DF:
        """Return an empty DataFrame."""
        ...

    def is_empty(self, df: DF) -> bool:
        """Check if DataFrame is empty."""
        ...
