"""
Solver dispatch for the bootstrap.

bootstrap() builds a bootstrap distribution; get_ci() turns a distribution
into a confidence interval.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pyinfer.core.defaults import (
    DEFAULT_CI_TYPE,
    DEFAULT_LEVEL,
    DEFAULT_REPS,
    MIN_RECOMMENDED_REPS,
)
from pyinfer.core.validation import (
    check_1d,
    check_array,
    check_conf_level,
    check_finite,
    check_min_samples,
)
from pyinfer.bootstrap._ci import compute_interval, resolve_ci_type
from pyinfer.bootstrap._common import ConfidenceInterval
from pyinfer.bootstrap._resample import SeedLike
from pyinfer.bootstrap.backends.cpu import CPUBootstrapBackend
from pyinfer.bootstrap.design import BootstrapDesign
from pyinfer.bootstrap.solution import BootstrapSolution


def bootstrap(
    sample: ArrayLike,
    statistic: str = 'mean',
    reps: int = DEFAULT_REPS,
    *,
    success: Any = None,
    seed: SeedLike = None,
    n_workers: int = 1,
) -> BootstrapSolution:
    """
    Bootstrap distribution of a statistic.

    Draws `reps` replicates of the sample with replacement, each the size
    of the sample, and computes the statistic on each.

    Parameters
    ----------
    sample : array-like
        1D observations. Numeric for mean/median/sum/sd, categorical for
        proportion.
    statistic : str
        'mean', 'median', 'proportion' (or 'prop'), 'sum', 'sd'.
    reps : int
        Number of bootstrap replicates.
    success : optional
        Category counted as a success. Required for proportion.
    seed : int, numpy Generator or None
        Source of randomness. The same int seed reproduces the same
        distribution.
    n_workers : int
        Threads drawing replicates. 1 (default) is sequential.

    Returns
    -------
    BootstrapSolution
    """
    design = BootstrapDesign.for_bootstrap(
        sample,
        statistic,
        reps,
        success=success,
        seed=seed,
        n_workers=n_workers,
    )
    result = CPUBootstrapBackend().solve(design)
    return BootstrapSolution(_result=result, _design=design)


def get_ci(
    distribution: BootstrapSolution | ArrayLike,
    level: float = DEFAULT_LEVEL,
    *,
    type: str = DEFAULT_CI_TYPE,
    point_estimate: float | None = None,
) -> ConfidenceInterval:
    """
    Confidence interval from a bootstrap distribution.

    The percentile interval sorts the distribution and takes its type-7
    quantiles at alpha/2 and 1 - alpha/2, alpha = 1 - level.

    Parameters
    ----------
    distribution : BootstrapSolution or array-like
        Bootstrap statistics. A BootstrapSolution also supplies the point
        estimate for 'se' and 'bias-corrected' intervals.
    level : float
        Confidence level, strictly between 0 and 1.
    type : str
        'percentile' (default), 'se' or 'bias-corrected'.
    point_estimate : float, optional
        Observed statistic. Overrides the one carried by a
        BootstrapSolution.

    Returns
    -------
    ConfidenceInterval

    Raises
    ------
    InvalidConfidenceLevelError
        If level is not in (0, 1).
    InvalidSampleSizeError
        If the distribution is empty.
    """
    return _interval(distribution, level, type, point_estimate, stacklevel=3)


def _interval(
    distribution: BootstrapSolution | ArrayLike,
    level: float,
    type: str,
    point_estimate: float | None,
    *,
    stacklevel: int,
) -> ConfidenceInterval:
    """Body of get_ci; stacklevel makes warnings point at the user's call."""
    level = check_conf_level(level)
    ci_type = resolve_ci_type(type)

    if isinstance(distribution, BootstrapSolution):
        stats = distribution.stats
        if point_estimate is None:
            point_estimate = distribution.t0
    else:
        stats = check_array(distribution, 'distribution')
        check_1d(stats, 'distribution')

    check_min_samples(stats, 1, 'distribution')
    check_finite(stats, 'distribution')

    if stats.shape[0] < MIN_RECOMMENDED_REPS:
        warnings.warn(
            f"Interval built from only {stats.shape[0]} bootstrap "
            f"replicates; bounds will be unstable below "
            f"{MIN_RECOMMENDED_REPS}.",
            RuntimeWarning,
            stacklevel=stacklevel,
        )

    return compute_interval(
        np.asarray(stats, dtype=np.float64), level, ci_type, point_estimate,
    )


get_confidence_interval = get_ci
