"""
Design class for the bootstrap.

BootstrapDesign encapsulates all inputs needed by backends to build a
bootstrap distribution. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyinfer.core.defaults import DEFAULT_REPS
from pyinfer.core.exceptions import ValidationError, DimensionError
from pyinfer.core.validation import (
    check_1d,
    check_array,
    check_categorical,
    check_finite,
    check_min_samples,
    check_reps,
)
from pyinfer.bootstrap._resample import SeedLike, check_seed
from pyinfer.bootstrap._statistics import check_success, resolve_statistic


@dataclass(frozen=True)
class BootstrapDesign:
    """
    Frozen design for bootstrap resampling.

    Attributes:
        sample: Original observations, shape (n,). float64 for numeric
            statistics, object for proportion. Read-only.
        statistic: Canonical statistic name.
        reps: Number of bootstrap replicates.
        success: Success category for proportion, else None.
        seed: int, numpy Generator or None. A Generator is used (and
            advanced) directly; it is never shared with other designs.
        n_workers: Number of workers drawing replicates. 1 is sequential.
        indices: Optional precomputed (reps, n) index matrix. When given,
            the backend draws nothing and evaluates these replicates.
    """
    sample: NDArray
    statistic: str
    reps: int
    success: Any
    seed: SeedLike
    n_workers: int
    indices: NDArray[np.intp] | None = None

    @property
    def n(self) -> int:
        return self.sample.shape[0]

    @classmethod
    def for_bootstrap(
        cls,
        sample: ArrayLike,
        statistic: str = 'mean',
        reps: int = DEFAULT_REPS,
        *,
        success: Any = None,
        seed: SeedLike = None,
        n_workers: int = 1,
        indices: ArrayLike | None = None,
    ) -> BootstrapDesign:
        """
        Create a bootstrap design with validation.

        Args:
            sample: 1D observations.
            statistic: 'mean', 'median', 'proportion' ('prop'), 'sum', 'sd'.
            reps: Number of bootstrap replicates. Must be >= 1.
            success: Success category. Required for proportion, rejected
                otherwise.
            seed: Random seed or Generator.
            n_workers: Parallel workers, >= 1.
            indices: Precomputed replicate indices, shape (reps, n).

        Returns:
            Validated BootstrapDesign.

        Raises:
            InvalidStatisticKindError: Unknown statistic.
            InvalidSampleSizeError: Empty sample.
            InvalidSuccessCategoryError: Bad or missing success category.
            ValidationError: Any other invalid input.
        """
        kind = resolve_statistic(statistic)

        if kind == 'proportion':
            sample_arr = check_categorical(sample, 'sample').copy()
            check_min_samples(sample_arr, 1, 'sample')
            check_success(sample_arr, success)
        else:
            if success is not None:
                raise ValidationError(
                    f"success only applies to proportion, not {kind!r}"
                )
            sample_arr = check_array(sample, 'sample').astype(np.float64, copy=True)
            check_1d(sample_arr, 'sample')
            check_min_samples(sample_arr, 1, 'sample')
            check_finite(sample_arr, 'sample')
            if kind == 'sd':
                check_min_samples(sample_arr, 2, 'sample')

        sample_arr.setflags(write=False)

        reps = check_reps(reps, 'reps')
        n_workers = check_reps(n_workers, 'n_workers')
        check_seed(seed)

        index_arr = None
        if indices is not None:
            index_arr = np.asarray(indices)
            if index_arr.ndim != 2:
                raise DimensionError(
                    f"indices: expected 2D array, got {index_arr.ndim}D"
                )
            if not np.issubdtype(index_arr.dtype, np.integer):
                raise ValidationError(
                    f"indices: expected integer dtype, got {index_arr.dtype}"
                )
            n = sample_arr.shape[0]
            if index_arr.shape != (reps, n):
                raise DimensionError(
                    f"indices: expected shape ({reps}, {n}), got {index_arr.shape}"
                )
            if index_arr.min() < 0 or index_arr.max() >= n:
                raise ValidationError(
                    f"indices: values must lie in [0, {n - 1}]"
                )

        return cls(
            sample=sample_arr,
            statistic=kind,
            reps=reps,
            success=success if kind == 'proportion' else None,
            seed=seed,
            n_workers=n_workers,
            indices=index_arr,
        )
