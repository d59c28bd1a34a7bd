"""
Tidy inference pipeline.

    specify -> generate -> calculate -> get_ci

Public API:
    specify(data, response, success=None)   - select the response column
    generate(spec, reps, seed=None)         - bootstrap replicates
    calculate(spec_or_replicates, stat)     - point estimate or distribution
    get_ci(distribution, level, type)       - confidence interval
"""

from pyinfer.bootstrap.solvers import get_ci, get_confidence_interval
from pyinfer.pipeline.design import Specification
from pyinfer.pipeline.replicates import Replicates
from pyinfer.pipeline.solvers import specify, generate, calculate

__all__ = [
    "specify",
    "generate",
    "calculate",
    "get_ci",
    "get_confidence_interval",
    "Specification",
    "Replicates",
]
