"""
Statistic calculator.

Maps a sample (or a bootstrap replicate) to a single real number. Numeric
statistics (mean, median, sum, sd) need numeric observations; the
proportion statistic works on categorical observations and a designated
success category.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyinfer.core.exceptions import (
    InvalidSampleSizeError,
    InvalidStatisticKindError,
    InvalidSuccessCategoryError,
)
from pyinfer.core.validation import check_1d, check_array

SUPPORTED_STATISTICS = ('mean', 'median', 'proportion', 'sum', 'sd')

_ALIASES = {
    'prop': 'proportion',
}


def resolve_statistic(kind: Any) -> str:
    """
    Canonical name of a statistic kind.

    Raises:
        InvalidStatisticKindError: For anything that is not a supported name
    """
    if isinstance(kind, str):
        key = kind.strip().lower()
        key = _ALIASES.get(key, key)
        if key in SUPPORTED_STATISTICS:
            return key
    raise InvalidStatisticKindError(
        f"Unknown statistic: {kind!r}. "
        f"Must be one of {', '.join(SUPPORTED_STATISTICS)} "
        f"(or 'prop' for proportion).",
        kind=kind,
        supported=SUPPORTED_STATISTICS,
    )


def observed_categories(sample: ArrayLike) -> tuple[Any, ...]:
    """Distinct observations in order of first appearance."""
    return tuple(dict.fromkeys(np.asarray(sample, dtype=object).tolist()))


def check_success(sample: ArrayLike, success: Any) -> None:
    """
    Verify success names a category that actually occurs in the sample.

    Checked once against the original sample. A replicate that happens to
    draw no successes is fine and simply has proportion 0.

    Raises:
        InvalidSuccessCategoryError: If success is None or not observed
    """
    categories = observed_categories(sample)
    if success is None:
        raise InvalidSuccessCategoryError(
            f"proportion requires a success category; "
            f"observed categories: {list(categories)}",
            success=None,
            categories=categories,
        )
    if success not in categories:
        raise InvalidSuccessCategoryError(
            f"success {success!r} is not an observed category; "
            f"observed categories: {list(categories)}",
            success=success,
            categories=categories,
        )


def _mean(x: NDArray) -> float:
    return float(np.mean(x))


def _median(x: NDArray) -> float:
    # np.median averages the two middle values for even n
    return float(np.median(x))


def _sum(x: NDArray) -> float:
    return float(np.sum(x))


def _sd(x: NDArray) -> float:
    if x.shape[0] < 2:
        return float('nan')
    return float(np.std(x, ddof=1))


_NUMERIC = {
    'mean': _mean,
    'median': _median,
    'sum': _sum,
    'sd': _sd,
}


def statistic_function(
    kind: Any,
    success: Any = None,
) -> Callable[[ArrayLike], float]:
    """
    Build the function computing `kind` on one sample.

    The returned function validates its input (non-empty, 1D, numeric for
    numeric statistics) on every call.
    """
    kind = resolve_statistic(kind)

    if kind == 'proportion':
        if success is None:
            raise InvalidSuccessCategoryError(
                "proportion requires a success category", success=None,
            )

        def _proportion(values: ArrayLike) -> float:
            x = np.asarray(values, dtype=object)
            check_1d(x, 'values')
            n = x.shape[0]
            if n == 0:
                raise InvalidSampleSizeError(
                    "cannot compute proportion of an empty sample", n=0,
                )
            # Element-wise ==, so tuple labels are not broadcast
            hits = np.fromiter((v == success for v in x), dtype=bool, count=n)
            return float(np.count_nonzero(hits)) / n

        return _proportion

    fn = _NUMERIC[kind]

    def _numeric(values: ArrayLike) -> float:
        x = check_array(values, 'values')
        check_1d(x, 'values')
        if x.shape[0] == 0:
            raise InvalidSampleSizeError(
                f"cannot compute {kind} of an empty sample", n=0,
            )
        return fn(x)

    return _numeric


def compute_statistic(
    values: ArrayLike,
    kind: Any,
    success: Any = None,
) -> float:
    """
    Compute one statistic over a sample.

    Args:
        values: 1D observations. Numeric for mean/median/sum/sd; any
            hashable labels for proportion.
        kind: 'mean', 'median', 'proportion' (or 'prop'), 'sum', 'sd'.
        success: Success category, required for proportion.

    Returns:
        The statistic as a float.

    Raises:
        InvalidStatisticKindError: Unknown kind
        InvalidSampleSizeError: Empty input
        InvalidSuccessCategoryError: Proportion without a success value
        ValidationError: Numeric statistic on non-numeric data
    """
    return statistic_function(kind, success)(values)
