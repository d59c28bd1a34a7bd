"""
pyinfer bootstrap.

Nonparametric bootstrap of a single statistic and percentile (plus
standard-error and bias-corrected) confidence intervals.

Usage:
    from pyinfer.bootstrap import bootstrap, get_ci

    dist = bootstrap(rents, "mean", reps=10000, seed=42)
    ci = get_ci(dist, level=0.95)
    lower, upper = ci
"""

from pyinfer.bootstrap._ci import percentile_interval
from pyinfer.bootstrap._common import ConfidenceInterval
from pyinfer.bootstrap._quantile import quantile_type7
from pyinfer.bootstrap._resample import resample
from pyinfer.bootstrap._statistics import SUPPORTED_STATISTICS, compute_statistic
from pyinfer.bootstrap.design import BootstrapDesign
from pyinfer.bootstrap.solution import BootstrapSolution
from pyinfer.bootstrap.solvers import bootstrap, get_ci, get_confidence_interval

__all__ = [
    "bootstrap",
    "get_ci",
    "get_confidence_interval",
    "resample",
    "compute_statistic",
    "quantile_type7",
    "percentile_interval",
    "SUPPORTED_STATISTICS",
    "BootstrapDesign",
    "BootstrapSolution",
    "ConfidenceInterval",
]
