"""
Tests for input validators.
"""

import numpy as np
import pytest

from pyinfer.core.exceptions import (
    DimensionError,
    InvalidConfidenceLevelError,
    InvalidSampleSizeError,
    ValidationError,
)
from pyinfer.core.validation import (
    check_1d,
    check_array,
    check_categorical,
    check_conf_level,
    check_finite,
    check_min_samples,
    check_reps,
)


class TestCheckArray:

    def test_int_list_becomes_float(self):
        arr = check_array([1, 2, 3], "x")
        assert arr.dtype == np.float64

    def test_float32_kept(self):
        arr = check_array(np.array([1.0], dtype=np.float32), "x")
        assert arr.dtype == np.float32

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x: non-numeric"):
            check_array(["a", "b"], "x")

    def test_booleans_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "x")

    def test_mixed_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "x")


class TestShapeAndSize:

    def test_check_1d(self):
        check_1d(np.zeros(3), "x")
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "x")

    def test_min_samples_raises_sample_size_error(self):
        with pytest.raises(InvalidSampleSizeError) as exc_info:
            check_min_samples(np.array([]), 1, "sample")
        assert exc_info.value.n == 0

    def test_min_samples_ok(self):
        check_min_samples(np.array([1.0]), 1, "sample")

    def test_finite(self):
        with pytest.raises(ValidationError, match="1 NaN, 1 Inf"):
            check_finite(np.array([1.0, np.nan, np.inf]), "x")


class TestCheckCategorical:

    def test_strings(self):
        arr = check_categorical(["a", "b", "a"], "outcome")
        assert arr.dtype == object
        assert arr.tolist() == ["a", "b", "a"]

    def test_missing_rejected(self):
        with pytest.raises(ValidationError, match="2 missing"):
            check_categorical(["a", None, np.nan], "outcome")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            check_categorical([["a"], ["b"]], "outcome")


class TestCheckConfLevel:

    @pytest.mark.parametrize("level", [0.5, 0.9, 0.95, 0.99, 0.001])
    def test_valid(self, level):
        assert check_conf_level(level) == level

    @pytest.mark.parametrize("level", [0, 0.0, 1, 1.0, -0.1, 1.5, 95, float("nan")])
    def test_out_of_range(self, level):
        with pytest.raises(InvalidConfidenceLevelError) as exc_info:
            check_conf_level(level)
        if level == level:
            assert exc_info.value.level == level

    @pytest.mark.parametrize("level", ["0.95", None, True])
    def test_not_a_number(self, level):
        with pytest.raises(InvalidConfidenceLevelError):
            check_conf_level(level)


class TestCheckReps:

    def test_valid(self):
        assert check_reps(np.int64(10)) == 10

    @pytest.mark.parametrize("reps", [0, -5])
    def test_too_small(self, reps):
        with pytest.raises(ValidationError, match=">= 1"):
            check_reps(reps)

    @pytest.mark.parametrize("reps", [10.0, "10", True])
    def test_not_integer(self, reps):
        with pytest.raises(ValidationError, match="integer"):
            check_reps(reps)
