"""Backend implementations for ticktime."""

from ticktime.backends.base import Backend
from ticktime.backends.pandas import PandasBackend
from ticktime.backends.polars import PolarsBackend

__all__ = ["Backend", "PandasBackend", "PolarsBackend"]
