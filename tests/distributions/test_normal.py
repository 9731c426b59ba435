"""
Tests for the normal distribution functions.

s_normcdf and s_norminv are closed-form approximations (Zelen-Severo and
Shore), so exact references are matched only to the accuracy those
formulas carry. Point values below are the formulas' own outputs.
"""

import math

import pytest

from pynumerics.calculus import integrate
from pynumerics.core.compute.tolerances import APPROXIMATION, FP64_EXACT
from pynumerics.distributions import (
    norminv,
    normcdf,
    normpdf,
    s_norminv,
    s_normcdf,
    s_normpdf,
)


class TestNormPdf:

    def test_standard_peak(self):
        """s_normpdf(0) = 1 / sqrt(2 pi)."""
        assert s_normpdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi), rel=FP64_EXACT.rtol)

    def test_symmetric(self):
        assert s_normpdf(-1.3) == s_normpdf(1.3)

    def test_standard_parameters(self):
        """normpdf(x, 0, 1) reduces to s_normpdf(x)."""
        assert normpdf(1.0, 0.0, 1.0) == pytest.approx(s_normpdf(1.0), rel=FP64_EXACT.rtol)

    def test_unit_scale(self):
        """normpdf(1, 1, 1) = 0.39894."""
        assert normpdf(1.0, 1.0, 1.0) == pytest.approx(0.39894, abs=1e-5)

    def test_location_scale(self):
        """normpdf(1, 1, 2) = s_normpdf(0) / 2."""
        assert normpdf(1.0, 1.0, 2.0) == pytest.approx(0.19947114020071635, rel=1e-12)

    def test_standardizes_off_centre(self):
        """normpdf(0, 1, 2) = s_normpdf(-0.5) / 2 = 0.17603, not s_normpdf(-1) / 2."""
        assert normpdf(0.0, 1.0, 2.0) == pytest.approx(0.17603266338214976, rel=1e-12)
        assert normpdf(0.0, 1.0, 2.0) != pytest.approx(s_normpdf(-1.0) / 2.0, abs=1e-2)

    def test_integrates_to_one(self):
        total = integrate(lambda x: normpdf(x, 3.0, 0.5), -2.0, 8.0, 512)
        assert total == pytest.approx(1.0, abs=1e-8)


class TestNormCdf:

    def test_standard_at_zero(self):
        """s_normcdf(0) = 0.5000000005248086 (formula value, not exactly 0.5)."""
        assert s_normcdf(0.0) == pytest.approx(0.5000000005248086, rel=1e-12)

    def test_location_scale(self):
        """normcdf(0.5, 1, 2) = s_normcdf(-0.25) = 0.4012880670269864."""
        assert normcdf(0.5, 1.0, 2.0) == pytest.approx(0.4012880670269864, rel=1e-12)

    def test_increasing_on_positive_axis(self):
        values = [s_normcdf(x) for x in (0.0, 0.5, 1.0, 2.0, 4.0)]
        assert values == sorted(values)

    def test_upper_tail(self):
        assert s_normcdf(8.0) == pytest.approx(1.0, abs=1e-12)

    def test_not_mirrored_for_negative_x(self):
        """The polynomial is applied as-is: F(-x) + F(x) drifts from 1."""
        assert s_normcdf(-1.0) + s_normcdf(1.0) != pytest.approx(1.0, abs=1e-6)
        assert s_normcdf(-1.0) + s_normcdf(1.0) == pytest.approx(1.0, abs=APPROXIMATION.atol)


class TestNormInv:

    def test_median(self):
        """s_norminv(0.5) = 0 exactly."""
        assert s_norminv(0.5) == 0.0

    def test_reference(self):
        """s_norminv(0.3) = -0.531145444833719."""
        assert s_norminv(0.3) == pytest.approx(-0.531145444833719, rel=1e-12)

    def test_location_scale(self):
        """norminv(0.3, 4, 2) = 2.937709110332562."""
        assert norminv(0.3, 4.0, 2.0) == pytest.approx(2.937709110332562, rel=1e-12)

    def test_antisymmetric(self):
        """Shore's formula is exactly antisymmetric around p = 0.5."""
        assert s_norminv(0.2) == pytest.approx(-s_norminv(0.8), rel=1e-12)

    def test_round_trip_with_cdf(self):
        """Approximate inverse of s_normcdf on the positive axis."""
        for p in (0.6, 0.75, 0.9, 0.97):
            assert s_normcdf(s_norminv(p)) == pytest.approx(p, abs=APPROXIMATION.atol)
