"""
Argument checks shared by the bootstrap and the pipeline.

Every check takes the argument's name and puts it first in the error
message ("reps: must be at least 1, got 0"). Checks raise on bad input and
never repair it; the only conversions are array-likes to numpy arrays and
integer samples to float64.
"""

import numbers

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyinfer.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidSampleSizeError,
    InvalidConfidenceLevelError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Numeric sample as a float array.

    Integer input is cast to float64. Strings, booleans and mixed
    (object) input raise ValidationError.
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: mixed or non-numeric values (object dtype), expected numbers"
        )

    # Booleans are categories here, not 0/1 numbers
    if result.dtype == bool or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """Raise ValidationError counting the NaN and Inf entries, if any."""
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray, ndim: int, name: str) -> None:
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray, name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_min_samples(array: NDArray, min_samples: int, name: str) -> None:
    """
    Require at least min_samples observations along the first axis.

    Raises:
        InvalidSampleSizeError: carrying the observed n
    """
    n = array.shape[0]
    if n < min_samples:
        raise InvalidSampleSizeError(
            f"{name}: requires at least {min_samples} observations, got {n}",
            n=n,
        )


def check_categorical(values: ArrayLike, name: str) -> NDArray[np.object_]:
    """
    Validate and convert categorical observations to a 1D object array.

    Args:
        values: Observations (strings, booleans, or any hashable labels)
        name: Parameter name for error messages

    Returns:
        1D numpy array with object dtype

    Raises:
        DimensionError: If input is not 1D
        ValidationError: If any observation is missing or unhashable
    """
    result = np.asarray(values, dtype=object)
    check_1d(result, name)

    missing = pd.isna(result)
    if np.any(missing):
        raise ValidationError(
            f"{name}: contains {int(np.sum(missing))} missing observations"
        )

    for value in result:
        try:
            hash(value)
        except TypeError as e:
            raise ValidationError(
                f"{name}: observation {value!r} is not a valid category: {e}"
            ) from e

    return result


def check_conf_level(level: Any, name: str = 'level') -> float:
    """
    Verify a confidence level lies strictly between 0 and 1.

    Both endpoints are rejected: level=1 would ask for the full range of
    the distribution and level=0 for a single point, neither of which is
    an interval estimate.

    Returns:
        The level as a float

    Raises:
        InvalidConfidenceLevelError: If level is not a real number in (0, 1)
    """
    if isinstance(level, bool) or not isinstance(level, numbers.Real):
        raise InvalidConfidenceLevelError(
            f"{name}: must be a real number in (0, 1), got {level!r}",
            level=level,
        )
    level = float(level)
    if not (0.0 < level < 1.0):
        raise InvalidConfidenceLevelError(
            f"{name}: must be strictly between 0 and 1, got {level}",
            level=level,
        )
    return level


def check_reps(reps: Any, name: str = 'reps') -> int:
    """
    Verify a replicate count is an integer >= 1.

    Raises:
        ValidationError: If reps is not a positive integer
    """
    if isinstance(reps, bool) or not isinstance(reps, numbers.Integral):
        raise ValidationError(f"{name}: must be an integer, got {reps!r}")
    if reps < 1:
        raise ValidationError(f"{name}: must be >= 1, got {reps}")
    return int(reps)
