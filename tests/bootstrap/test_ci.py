"""
Tests for bootstrap confidence intervals.

Tests the percentile, standard-error and bias-corrected constructions,
their ordering and range properties, and level validation.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pyinfer.core.exceptions import (
    InvalidConfidenceLevelError,
    InvalidSampleSizeError,
    ValidationError,
)
from pyinfer.bootstrap import (
    ConfidenceInterval,
    bootstrap,
    get_ci,
    percentile_interval,
)


@pytest.fixture
def rent_boot(rents):
    return bootstrap(rents, "mean", reps=2000, seed=42)


# ---------------------------------------------------------------------------
# Tests: Percentile
# ---------------------------------------------------------------------------

class TestPercentileCI:

    def test_percentile_formula(self, rent_boot):
        """Bounds are the type-7 quantiles at alpha/2 and 1 - alpha/2."""
        ci = get_ci(rent_boot, level=0.90)
        assert ci.lower == pytest.approx(np.quantile(rent_boot.stats, 0.05), rel=1e-12)
        assert ci.upper == pytest.approx(np.quantile(rent_boot.stats, 0.95), rel=1e-12)
        assert ci.level == 0.90
        assert ci.method == "percentile"

    def test_brackets_point_estimate(self, rent_boot):
        ci = get_ci(rent_boot)
        assert ci.lower < rent_boot.t0 < ci.upper
        assert ci.point_estimate == rent_boot.t0

    def test_raw_array(self):
        stats = np.arange(1.0, 201.0)
        ci = get_ci(stats, level=0.95)
        assert ci.lower == pytest.approx(np.quantile(stats, 0.025))
        assert ci.upper == pytest.approx(np.quantile(stats, 0.975))
        assert ci.point_estimate is None

    def test_order_does_not_matter(self, rng):
        stats = rng.normal(size=500)
        assert get_ci(stats) == get_ci(rng.permutation(stats))

    def test_higher_level_is_wider(self, rent_boot):
        assert get_ci(rent_boot, 0.99).width > get_ci(rent_boot, 0.95).width > \
            get_ci(rent_boot, 0.80).width

    def test_idempotent(self, rent_boot):
        assert get_ci(rent_boot, 0.95) == get_ci(rent_boot, 0.95)

    def test_solution_method(self, rent_boot):
        assert rent_boot.get_ci(0.95) == get_ci(rent_boot, 0.95)

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("level", [0.5, 0.8, 0.95, 0.999])
    def test_bounds_ordered_and_within_range(self, seed, level):
        stats = np.random.default_rng(seed).gamma(2.0, size=150)
        ci = get_ci(stats, level)
        assert ci.lower <= ci.upper
        assert stats.min() <= ci.lower
        assert ci.upper <= stats.max()

    def test_constant_distribution(self):
        ci = get_ci(np.full(200, 4.2))
        assert ci.lower == ci.upper == 4.2


class TestPercentileInterval:

    def test_bounds(self, rent_boot):
        lower, upper = percentile_interval(rent_boot.stats, 0.95)
        assert (lower, upper) == get_ci(rent_boot).as_tuple()

    def test_small_distribution(self):
        """Type 7 on 1..5 at level 0.5: indices 1.0 and 3.0."""
        assert percentile_interval([5.0, 1.0, 4.0, 2.0, 3.0], 0.5) == (2.0, 4.0)

    @pytest.mark.parametrize("level", [0.0, 1.0])
    def test_level_endpoints(self, level):
        with pytest.raises(InvalidConfidenceLevelError):
            percentile_interval([1.0, 2.0], level)

    def test_empty(self):
        with pytest.raises(InvalidSampleSizeError):
            percentile_interval([], 0.95)


# ---------------------------------------------------------------------------
# Tests: SE and bias-corrected
# ---------------------------------------------------------------------------

class TestSECI:

    def test_se_formula(self, rent_boot):
        ci = get_ci(rent_boot, 0.95, type="se")
        se = np.std(rent_boot.stats, ddof=1)
        z = sp_stats.norm.ppf(0.975)
        assert ci.lower == pytest.approx(rent_boot.t0 - z * se, rel=1e-12)
        assert ci.upper == pytest.approx(rent_boot.t0 + z * se, rel=1e-12)

    def test_close_to_percentile_for_symmetric_data(self, rent_boot):
        se_ci = get_ci(rent_boot, type="se")
        perc_ci = get_ci(rent_boot)
        assert se_ci.lower == pytest.approx(perc_ci.lower, abs=40)
        assert se_ci.upper == pytest.approx(perc_ci.upper, abs=40)

    def test_raw_array_needs_point_estimate(self):
        with pytest.raises(ValidationError, match="point estimate"):
            get_ci(np.arange(200.0), type="se")

    def test_explicit_point_estimate(self):
        stats = np.arange(200.0)
        ci = get_ci(stats, type="se", point_estimate=100.0)
        assert ci.lower + ci.upper == pytest.approx(200.0)


class TestBiasCorrectedCI:

    def test_formula(self, rent_boot):
        ci = get_ci(rent_boot, 0.95, type="bias-corrected")

        t = rent_boot.stats
        z0 = sp_stats.norm.ppf(np.mean(t <= rent_boot.t0))
        q_lo = sp_stats.norm.cdf(2 * z0 + sp_stats.norm.ppf(0.025))
        q_hi = sp_stats.norm.cdf(2 * z0 + sp_stats.norm.ppf(0.975))

        assert ci.lower == pytest.approx(np.quantile(t, q_lo), rel=1e-10)
        assert ci.upper == pytest.approx(np.quantile(t, q_hi), rel=1e-10)
        assert ci.method == "bias-corrected"

    def test_no_bias_equals_percentile(self):
        """Point estimate at the median of the distribution: z0 = 0."""
        stats = np.arange(1.0, 201.0)
        bc = get_ci(stats, type="bias-corrected", point_estimate=100.5)
        perc = get_ci(stats)
        assert bc.lower == pytest.approx(perc.lower)
        assert bc.upper == pytest.approx(perc.upper)

    def test_extreme_point_estimate_is_clamped(self):
        stats = np.arange(1.0, 201.0)
        ci = get_ci(stats, type="bias-corrected", point_estimate=-1000.0)
        assert np.isfinite(ci.lower) and np.isfinite(ci.upper)
        assert ci.lower <= ci.upper

    @pytest.mark.parametrize("name", ["perc", "bias_corrected", "SE"])
    def test_aliases(self, rent_boot, name):
        get_ci(rent_boot, type=name)

    def test_unknown_type(self, rent_boot):
        with pytest.raises(ValidationError, match="Unknown interval type"):
            get_ci(rent_boot, type="bca")


# ---------------------------------------------------------------------------
# Tests: Validation
# ---------------------------------------------------------------------------

class TestValidation:

    @pytest.mark.parametrize("level", [1.0, 0, 0.0, 1, -0.5, 95])
    def test_invalid_level(self, rent_boot, level):
        with pytest.raises(InvalidConfidenceLevelError):
            get_ci(rent_boot, level)

    def test_invalid_level_via_solution(self, rent_boot):
        with pytest.raises(InvalidConfidenceLevelError):
            rent_boot.get_ci(1.0)

    def test_empty_distribution(self):
        with pytest.raises(InvalidSampleSizeError):
            get_ci([], 0.95)

    def test_level_checked_first(self):
        with pytest.raises(InvalidConfidenceLevelError):
            get_ci([], 1.0)

    def test_few_replicates_warns(self):
        with pytest.warns(RuntimeWarning, match="only 10 bootstrap replicates"):
            get_ci(np.arange(10.0), 0.95)

    def test_warning_points_at_caller(self, rents):
        small = bootstrap(rents, "mean", reps=10, seed=1)
        with pytest.warns(RuntimeWarning) as record:
            get_ci(small, 0.95)
        with pytest.warns(RuntimeWarning) as method_record:
            small.get_ci(0.95)
        assert record[0].filename == __file__
        assert method_record[0].filename == __file__


# ---------------------------------------------------------------------------
# Tests: ConfidenceInterval
# ---------------------------------------------------------------------------

class TestConfidenceInterval:

    def test_accessors(self):
        ci = ConfidenceInterval(lower=2299.0, upper=2977.0, level=0.95)
        lower, upper = ci
        assert (lower, upper) == (2299.0, 2977.0)
        assert ci.as_tuple() == (2299.0, 2977.0)
        assert ci.width == 678.0
        assert ci.alpha == pytest.approx(0.05)
        assert ci.contains(2638.0)
        assert ci.contains(2299.0)
        assert not ci.contains(3000.0)

    def test_label(self):
        assert ConfidenceInterval(0.69, 0.793, 0.95).label == "95% percentile interval"
        assert ConfidenceInterval(0.0, 1.0, 0.9, method="se").label == "90% se interval"
        assert ConfidenceInterval(0.0, 1.0, 0.975).label == "97.5% percentile interval"

    def test_interpretation_is_about_the_procedure(self):
        text = ConfidenceInterval(2299.0, 2977.0, 0.95).interpretation()
        assert "repeated sampling" in text
        assert "95% of the bootstrap statistics fall within" in text
        assert "probability" not in text.lower()

    def test_str_and_summary(self):
        ci = ConfidenceInterval(0.69, 0.793, 0.95, point_estimate=0.74)
        assert str(ci) == "95% percentile interval: (0.69, 0.793)"
        assert "point estimate: 0.74000" in ci.summary()
