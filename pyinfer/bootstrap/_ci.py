"""
Bootstrap confidence interval computation.

Three constructions from one bootstrap distribution:
- percentile: type-7 quantiles at alpha/2 and 1 - alpha/2
- se: point estimate +/- normal critical value times sd of the distribution
- bias-corrected: percentile interval with quantile levels shifted by the
  median bias of the distribution relative to the point estimate
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from pyinfer.core.exceptions import ValidationError
from pyinfer.core.validation import (
    check_1d,
    check_array,
    check_conf_level,
    check_finite,
    check_min_samples,
)
from pyinfer.bootstrap._common import ConfidenceInterval
from pyinfer.bootstrap._quantile import quantile_type7

CI_TYPES = ('percentile', 'se', 'bias-corrected')

_ALIASES = {
    'perc': 'percentile',
    'bias_corrected': 'bias-corrected',
}


def resolve_ci_type(ci_type: Any) -> str:
    """Canonical interval type name."""
    if isinstance(ci_type, str):
        key = ci_type.strip().lower()
        key = _ALIASES.get(key, key)
        if key in CI_TYPES:
            return key
    raise ValidationError(
        f"Unknown interval type: {ci_type!r}. "
        f"Must be one of {', '.join(CI_TYPES)}."
    )


def compute_interval(
    stats: NDArray,
    level: float,
    ci_type: str,
    point_estimate: float | None = None,
) -> ConfidenceInterval:
    """
    Compute a confidence interval from a bootstrap distribution.

    Inputs are assumed validated (non-empty finite stats, level in (0, 1),
    canonical ci_type).
    """
    alpha = 1.0 - level

    if ci_type == 'percentile':
        lower, upper = _ci_percentile(stats, alpha)
    elif ci_type == 'se':
        lower, upper = _ci_se(stats, alpha, _require_point(point_estimate, ci_type))
    elif ci_type == 'bias-corrected':
        lower, upper = _ci_bias_corrected(
            stats, alpha, _require_point(point_estimate, ci_type),
        )
    else:
        raise ValidationError(f"Unknown interval type: {ci_type!r}")

    return ConfidenceInterval(
        lower=lower,
        upper=upper,
        level=level,
        method=ci_type,
        point_estimate=None if point_estimate is None else float(point_estimate),
    )


def _require_point(point_estimate: float | None, ci_type: str) -> float:
    if point_estimate is None:
        raise ValidationError(
            f"{ci_type} interval requires a point estimate"
        )
    return float(point_estimate)


def _ci_percentile(stats: NDArray, alpha: float) -> tuple[float, float]:
    """
    Percentile bootstrap CI.

    CI = [Q(alpha/2), Q(1-alpha/2)]
    """
    t = np.sort(stats)
    return (
        quantile_type7(t, alpha / 2.0),
        quantile_type7(t, 1.0 - alpha / 2.0),
    )


def _ci_se(
    stats: NDArray,
    alpha: float,
    point_estimate: float,
) -> tuple[float, float]:
    """
    Standard-error CI.

    CI = point_estimate -/+ z_{1-alpha/2} * sd(t)
    """
    if stats.shape[0] < 2:
        raise ValidationError(
            "se interval needs at least 2 bootstrap replicates, "
            f"got {stats.shape[0]}"
        )
    se = float(np.std(stats, ddof=1))
    z = float(sp_stats.norm.ppf(1.0 - alpha / 2.0))
    return (point_estimate - z * se, point_estimate + z * se)


def _ci_bias_corrected(
    stats: NDArray,
    alpha: float,
    point_estimate: float,
) -> tuple[float, float]:
    """
    Bias-corrected percentile CI.

    Steps:
    1. p0 = proportion of t* <= point estimate
    2. z0 = Phi^{-1}(p0)
    3. CI = [Q(Phi(2*z0 + z_{alpha/2})), Q(Phi(2*z0 + z_{1-alpha/2}))]
    """
    R = stats.shape[0]
    t = np.sort(stats)

    p0 = float(np.mean(t <= point_estimate))
    # Clamp to avoid infinite z0
    p0 = float(np.clip(p0, 1.0 / (2.0 * R), 1.0 - 1.0 / (2.0 * R)))
    z0 = sp_stats.norm.ppf(p0)

    z_lo = sp_stats.norm.ppf(alpha / 2.0)
    z_hi = sp_stats.norm.ppf(1.0 - alpha / 2.0)

    q_lo = float(sp_stats.norm.cdf(2.0 * z0 + z_lo))
    q_hi = float(sp_stats.norm.cdf(2.0 * z0 + z_hi))

    return quantile_type7(t, q_lo), quantile_type7(t, q_hi)


def percentile_interval(stats: ArrayLike, level: float) -> tuple[float, float]:
    """
    Percentile bounds of a bootstrap distribution.

    Returns (Q(alpha/2), Q(1 - alpha/2)) with alpha = 1 - level and Q the
    type-7 quantile. Order of `stats` does not matter.

    Raises:
        InvalidConfidenceLevelError: level not strictly inside (0, 1)
        InvalidSampleSizeError: empty distribution
    """
    level = check_conf_level(level)
    t = check_array(stats, 'stats')
    check_1d(t, 'stats')
    check_min_samples(t, 1, 'stats')
    check_finite(t, 'stats')
    return _ci_percentile(t, 1.0 - level)
