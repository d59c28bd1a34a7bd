"""
Specification: the response variable selected from a table.

Built by specify(); consumed by generate() and calculate().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from numpy.typing import NDArray

from pyinfer.core.datasource import DataSource
from pyinfer.core.exceptions import ValidationError
from pyinfer.core.validation import (
    check_categorical,
    check_finite,
    check_min_samples,
)
from pyinfer.bootstrap._statistics import check_success, observed_categories


@dataclass(frozen=True)
class Specification:
    """
    Frozen response selection.

    Attributes:
        data: Table the response was taken from.
        response: Column name.
        sample: The response column (read-only).
        success: Success category for proportions, or None.
    """
    data: DataSource
    response: str
    sample: NDArray
    success: Any = None

    @property
    def n(self) -> int:
        return self.sample.shape[0]

    @property
    def is_categorical(self) -> bool:
        return self.sample.dtype == object

    @property
    def categories(self) -> tuple[Any, ...]:
        """Observed categories of a categorical response."""
        if not self.is_categorical:
            raise ValidationError(
                f"response {self.response!r} is numeric and has no categories"
            )
        return observed_categories(self.sample)

    @classmethod
    def for_response(
        cls,
        data: Any,
        response: str,
        *,
        success: Any = None,
    ) -> Specification:
        """
        Select and validate a response column.

        Args:
            data: DataSource, pandas DataFrame or mapping of columns.
            response: Column name.
            success: Category counted as a success in proportions.

        Raises:
            ValidationError: Unknown column, or missing values.
            InvalidSampleSizeError: Empty column.
            InvalidSuccessCategoryError: success not observed in the column.
        """
        source = DataSource.build(data)

        if not isinstance(response, str):
            raise ValidationError(
                f"response: must be a column name, got {response!r}"
            )
        if response not in source:
            raise ValidationError(
                f"response {response!r} is not a column; "
                f"available: {sorted(source.keys())}"
            )

        sample = source.column(response)
        check_min_samples(sample, 1, response)

        if sample.dtype == object:
            check_categorical(sample, response)
        else:
            check_finite(sample, response)
        if success is not None:
            # Numeric columns stay numeric; 1.0 == 1 matches the category
            check_success(sample, success)

        return cls(
            data=source,
            response=response,
            sample=sample,
            success=success,
        )

    def __repr__(self) -> str:
        kind = 'categorical' if self.is_categorical else 'numeric'
        extra = f", success={self.success!r}" if self.success is not None else ""
        return f"Specification(response={self.response!r}, n={self.n}, {kind}{extra})"
