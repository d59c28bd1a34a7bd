"""
Bootstrap resampling primitives.

All randomness is drawn from an explicitly passed numpy Generator. Nothing
here touches numpy's global random state, so two runs given generators
built from the same seed draw identical replicates.
"""

from __future__ import annotations

import numbers
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyinfer.core.exceptions import InvalidSampleSizeError, ValidationError
from pyinfer.core.validation import check_1d

SeedLike = Union[int, np.random.Generator, None]


def check_seed(seed: SeedLike) -> None:
    """
    Verify seed is a non-negative int, a numpy Generator or None.

    Raises:
        ValidationError: For any other value
    """
    if seed is None or isinstance(seed, np.random.Generator):
        return
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise ValidationError(
            f"seed: must be an int, a numpy Generator or None, got {seed!r}"
        )
    if seed < 0:
        raise ValidationError(f"seed: must be non-negative, got {seed}")


def as_generator(seed: SeedLike) -> np.random.Generator:
    """
    Turn a seed into the Generator that will own all draws for one request.

    An existing Generator is returned as-is (and will be advanced by the
    caller's draws); an int builds a fresh, reproducible Generator; None
    seeds from the OS.
    """
    check_seed(seed)
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(int(seed))


def resample_indices(n: int, rng: np.random.Generator) -> NDArray[np.intp]:
    """
    Draw n indices uniformly from {0, ..., n-1} with replacement.

    Raises:
        InvalidSampleSizeError: If n < 1
    """
    if n < 1:
        raise InvalidSampleSizeError(
            f"cannot resample from an empty sample (n={n})", n=n,
        )
    return rng.choice(n, size=n, replace=True)


def resample(sample: ArrayLike, rng: np.random.Generator) -> NDArray:
    """
    Draw one bootstrap replicate: n observations taken with replacement.

    The replicate has the same length as the sample, may repeat
    observations and need not contain all of them.
    """
    arr = np.asarray(sample)
    check_1d(arr, 'sample')
    return arr[resample_indices(arr.shape[0], rng)]


def draw_index_matrix(
    n: int,
    reps: int,
    rng: np.random.Generator,
) -> NDArray[np.intp]:
    """
    Draw the indices of `reps` replicates as an (reps, n) matrix.

    Row b is exactly what the b-th call to resample_indices(n, rng) would
    have returned, so materializing the indices up front and resampling
    on the fly consume the generator identically.
    """
    indices = np.empty((reps, n), dtype=np.intp)
    for b in range(reps):
        indices[b] = resample_indices(n, rng)
    return indices
