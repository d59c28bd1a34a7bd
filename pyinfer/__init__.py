"""
pyinfer: bootstrap confidence intervals for Python.

Resample a sample with replacement, compute a statistic on every
replicate, and read a confidence interval off the resulting distribution.

Submodules:
    core: Table abstraction, exceptions, validation, result envelope
    bootstrap: Resampling, statistics, distribution builder, intervals
    pipeline: specify / generate / calculate / get_ci verbs
"""

__version__ = "0.1.0"

from pyinfer.core.datasource import DataSource
from pyinfer.core.exceptions import (
    PyInferError,
    ValidationError,
    InvalidSampleSizeError,
    InvalidStatisticKindError,
    InvalidConfidenceLevelError,
    InvalidSuccessCategoryError,
)
from pyinfer.bootstrap import (
    BootstrapSolution,
    ConfidenceInterval,
    bootstrap,
    get_ci,
    get_confidence_interval,
)
from pyinfer.pipeline import specify, generate, calculate

__all__ = [
    "__version__",
    "DataSource",
    "bootstrap",
    "get_ci",
    "get_confidence_interval",
    "specify",
    "generate",
    "calculate",
    "BootstrapSolution",
    "ConfidenceInterval",
    "PyInferError",
    "ValidationError",
    "InvalidSampleSizeError",
    "InvalidStatisticKindError",
    "InvalidConfidenceLevelError",
    "InvalidSuccessCategoryError",
]
