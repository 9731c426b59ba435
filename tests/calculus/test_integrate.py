"""
Tests for integrate(): composite Simpson quadrature.

Reference values are closed-form integrals.
"""

import math

import numpy as np
import pytest

from pynumerics.calculus import integrate
from pynumerics.core.exceptions import ValidationError


class TestIntegrateAccuracy:
    """Convergence on smooth integrands."""

    def test_sine_over_half_period(self):
        """Integral of sin over [0, pi] is 2."""
        assert integrate(math.sin, 0.0, math.pi, 350) == pytest.approx(2.0, abs=1e-4)

    def test_parabola(self):
        """Integral of x^2 over [0, 1] is 1/3."""
        result = integrate(lambda x: x * x, 0.0, 1.0, 256)
        assert result == pytest.approx(1.0 / 3.0, abs=1e-4)

    def test_cubic_is_exact(self):
        """Simpson's rule integrates cubics exactly for even n."""
        result = integrate(lambda x: x ** 3 - 2.0 * x, -1.0, 2.0, 4)
        assert result == pytest.approx(0.75, rel=1e-12)

    def test_numpy_ufunc(self):
        assert integrate(np.exp, 0.0, 1.0, 64) == pytest.approx(math.e - 1.0, abs=1e-8)

    def test_reversed_limits_negate(self):
        forward = integrate(lambda x: x * x, 0.0, 1.0, 256)
        backward = integrate(lambda x: x * x, 1.0, 0.0, 256)
        assert backward == pytest.approx(-forward, rel=1e-12)

    def test_empty_interval(self):
        assert integrate(math.cos, 1.0, 1.0, 10) == 0.0


class TestIntegrateWeights:
    """The 4, 2, 4, ... weighting is applied regardless of n's parity."""

    def test_odd_n_uses_alternating_weights(self):
        """
        n = 3 on x^2 over [0, 1]:
        (f(0) + f(1) + 4 f(1/3) + 2 f(2/3)) * (1/3) / 3 = 7/27.
        """
        result = integrate(lambda x: x * x, 0.0, 1.0, 3)
        assert result == pytest.approx(7.0 / 27.0, rel=1e-12)

    def test_single_interval(self):
        """n = 1 uses only the endpoints."""
        assert integrate(lambda x: 1.0, 0.0, 3.0, 1) == pytest.approx(2.0, rel=1e-12)

    @pytest.mark.parametrize("n", [1, 2, 7, 256])
    def test_evaluation_count(self, n):
        """f is evaluated exactly n + 1 times."""
        calls = []

        def f(x):
            calls.append(x)
            return x

        integrate(f, 0.0, 1.0, n)
        assert len(calls) == n + 1


class TestIntegrateValidation:

    def test_zero_subintervals(self):
        with pytest.raises(ValidationError, match="n: must be >= 1"):
            integrate(math.sin, 0.0, 1.0, 0)

    def test_float_subintervals(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            integrate(math.sin, 0.0, 1.0, 256.0)

    def test_non_callable(self):
        with pytest.raises(ValidationError, match="f: expected a callable"):
            integrate(2.0, 0.0, 1.0, 4)
