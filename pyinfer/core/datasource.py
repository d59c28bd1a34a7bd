"""
Universal DataSource for pyinfer.

DataSource is the "I have a table" abstraction. Whatever loaded the data
(a CSV reader, a database query, a notebook cell) hands it over either as
plain columns or as a pandas DataFrame; the statistical core only ever
asks for one column by name.

Usage:
    from pyinfer import DataSource

    ds = DataSource.from_arrays(rent=rents, city=cities)
    ds = DataSource.from_dataframe(df)

    ds.keys()            # frozenset({'rent', 'city'})
    rents = ds['rent']   # float64 array
    cities = ds['city']  # object array (categorical)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, TYPE_CHECKING

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from pyinfer.core.exceptions import ValidationError, DimensionError

if TYPE_CHECKING:
    from pandas import DataFrame


def _as_column(values: ArrayLike, name: str) -> NDArray:
    """Store numeric columns as float64 and everything else as categories."""
    if isinstance(values, pd.Series):
        if (pd.api.types.is_numeric_dtype(values)
                and not pd.api.types.is_bool_dtype(values)):
            return values.to_numpy(dtype=np.float64)
        return values.to_numpy(dtype=object)

    arr = np.asarray(values)
    if arr.ndim != 1:
        raise DimensionError(
            f"column {name!r}: expected 1D values, got {arr.ndim}D with shape {arr.shape}"
        )
    if arr.dtype != bool and np.issubdtype(arr.dtype, np.number):
        return arr.astype(np.float64)
    return arr.astype(object)


@dataclass
class DataSource:
    """
    Column-oriented in-memory table. Domain-agnostic.

    Construct via factory classmethods, not directly. Columns are
    read-only arrays of equal length.
    """
    _data: dict[str, NDArray]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Column Access ===

    def keys(self) -> frozenset[str]:
        """
        Return the names of all available columns.

        Example:
            >>> ds = DataSource.from_arrays(rent=[2100.0, 2450.0])
            >>> ds.keys()
            frozenset({'rent'})
        """
        return frozenset(self._data.keys())

    def __getitem__(self, key: str) -> NDArray:
        """
        Access a named column.

        Raises:
            KeyError: If key not found, with helpful message listing available keys
        """
        if key not in self._data:
            available = sorted(self.keys())
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {available}"
            )
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        """Check if a column exists."""
        return key in self._data

    def column(self, name: str) -> NDArray:
        """Select a column by name. Same as ``ds[name]``."""
        return self[name]

    def is_numeric(self, name: str) -> bool:
        """True if the named column holds numbers rather than categories."""
        return self[name].dtype != object

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of rows."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata.copy()

    # === Factory Methods ===

    @classmethod
    def from_arrays(cls, **columns: ArrayLike) -> DataSource:
        """Construct from named 1D array-likes."""
        if not columns:
            raise ValidationError("DataSource needs at least one column")

        storage: dict[str, NDArray] = {}
        for name, values in columns.items():
            arr = _as_column(values, name)
            arr.setflags(write=False)
            storage[name] = arr

        lengths = {name: arr.shape[0] for name, arr in storage.items()}
        if len(set(lengths.values())) > 1:
            details = ", ".join(f"{k}={v}" for k, v in lengths.items())
            raise DimensionError(f"Inconsistent column lengths: {details}")

        return cls(
            _data=storage,
            _metadata={
                'n_observations': next(iter(lengths.values())),
                'source': 'arrays',
                'columns': list(storage),
            },
        )

    @classmethod
    def from_dataframe(cls, df: 'DataFrame') -> DataSource:
        """Construct from a pandas DataFrame, keeping column order."""
        if len(df.columns) == 0:
            raise ValidationError("DataFrame has no columns")

        storage: dict[str, NDArray] = {}
        for col in df.columns:
            arr = _as_column(df[col], str(col))
            arr.setflags(write=False)
            storage[str(col)] = arr

        return cls(
            _data=storage,
            _metadata={
                'n_observations': len(df),
                'source': 'dataframe',
                'columns': list(storage),
            },
        )

    @classmethod
    def build(cls, data: Any = None, **columns: ArrayLike) -> DataSource:
        """
        Convenience factory that dispatches to the appropriate from_* method.

        Examples:
            DataSource.build(df)                    # from_dataframe
            DataSource.build({'rent': rents})       # from_arrays
            DataSource.build(rent=rents)            # from_arrays
            DataSource.build(existing_datasource)   # returned unchanged
        """
        if isinstance(data, DataSource):
            return data
        if isinstance(data, pd.DataFrame):
            return cls.from_dataframe(data)
        if isinstance(data, Mapping):
            return cls.from_arrays(**{str(k): v for k, v in data.items()}, **columns)
        if data is not None:
            raise ValidationError(
                f"Cannot build a DataSource from {type(data).__name__}; "
                f"pass a DataFrame, a mapping of columns, or keyword columns"
            )
        return cls.from_arrays(**columns)
