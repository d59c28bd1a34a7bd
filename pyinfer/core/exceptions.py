"""
Exception hierarchy for pyinfer.

All exceptions inherit from PyInferError to allow catching any
library-specific error. Every error here is a local validation failure:
it is raised as soon as the bad input is seen, before any resampling work
is done, and no partial result is ever returned alongside it.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class PyInferError(Exception):
    """Base exception for all pyinfer errors."""
    pass


class ValidationError(PyInferError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not one-dimensional.
    """
    pass


class InvalidSampleSizeError(ValidationError):
    """
    Sample (or bootstrap replicate) has zero length.

    Attributes:
        n: The offending size (always 0 in practice)
    """

    def __init__(self, message: str, n: int = 0):
        super().__init__(message)
        self.n = n


class InvalidStatisticKindError(ValidationError):
    """
    Requested statistic is not supported.

    Attributes:
        kind: The statistic name that was requested
        supported: Names that would have been accepted
    """

    def __init__(
        self,
        message: str,
        kind: Any = None,
        supported: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.kind = kind
        self.supported = supported


class InvalidConfidenceLevelError(ValidationError):
    """
    Confidence level is not strictly between 0 and 1.

    Attributes:
        level: The level that was requested
    """

    def __init__(self, message: str, level: Any = None):
        super().__init__(message)
        self.level = level


class InvalidSuccessCategoryError(ValidationError):
    """
    Proportion requested without a usable success category.

    Raised when no success value is given, or when the value is not one
    of the categories observed in the sample.

    Attributes:
        success: The success value that was requested (None if missing)
        categories: Categories actually observed in the sample
    """

    def __init__(
        self,
        message: str,
        success: Any = None,
        categories: tuple[Any, ...] = (),
    ):
        super().__init__(message)
        self.success = success
        self.categories = categories
