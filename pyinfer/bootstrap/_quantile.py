"""
Type-7 sample quantiles.

Hyndman & Fan (1996) type 7, the default of R's quantile() and of
numpy.quantile: for probability q over sorted values v[0..m-1],

    index = q * (m - 1)
    Q(q)  = v[floor(index)] + (index - floor(index)) * (v[ceil(index)] - v[floor(index)])

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyinfer.core.exceptions import InvalidSampleSizeError, ValidationError


def quantile_type7(sorted_values: NDArray, q: float) -> float:
    """
    Single type-7 quantile of an already sorted 1D array.

    Pure: the same sorted array and q always give the same float.

    Raises:
        InvalidSampleSizeError: If sorted_values is empty
        ValidationError: If q is outside [0, 1]
    """
    m = len(sorted_values)
    if m == 0:
        raise InvalidSampleSizeError(
            "cannot take a quantile of an empty distribution", n=0,
        )
    if not (0.0 <= q <= 1.0):
        raise ValidationError(f"q: must be in [0, 1], got {q}")

    index = q * (m - 1)
    lo = int(math.floor(index))
    hi = int(math.ceil(index))
    h = index - lo

    v_lo = float(sorted_values[lo])
    v_hi = float(sorted_values[hi])
    if h == 0.0 or v_lo == v_hi:
        return v_lo
    return v_lo + h * (v_hi - v_lo)


def sorted_quantiles(
    values: ArrayLike,
    probs: ArrayLike,
    *,
    presorted: bool = False,
) -> NDArray[np.floating]:
    """
    Type-7 quantiles for several probabilities, sorting once.

    Args:
        values: 1D numeric values.
        probs: Probabilities in [0, 1].
        presorted: Skip sorting when values are already ascending.
    """
    x = np.asarray(values, dtype=np.float64)
    if not presorted:
        x = np.sort(x)
    p = np.atleast_1d(np.asarray(probs, dtype=np.float64))
    return np.array([quantile_type7(x, float(q)) for q in p], dtype=np.float64)
