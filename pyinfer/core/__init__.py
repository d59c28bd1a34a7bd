"""
Core infrastructure for pyinfer.

Shared abstractions used by the bootstrap core and the pipeline verbs.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    datasource: Column-oriented table abstraction
    defaults: Default replicate count, confidence level and interval type
"""

from pyinfer.core.protocols import Backend
from pyinfer.core.result import Result
from pyinfer.core.datasource import DataSource
from pyinfer.core.exceptions import (
    PyInferError,
    ValidationError,
    DimensionError,
    InvalidSampleSizeError,
    InvalidStatisticKindError,
    InvalidConfidenceLevelError,
    InvalidSuccessCategoryError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Data
    "DataSource",
    # Exceptions
    "PyInferError",
    "ValidationError",
    "DimensionError",
    "InvalidSampleSizeError",
    "InvalidStatisticKindError",
    "InvalidConfidenceLevelError",
    "InvalidSuccessCategoryError",
]
