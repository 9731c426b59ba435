"""
Composite Simpson quadrature.

This is a standalone utility function (no adaptive refinement, no error
estimate). Accuracy is controlled entirely by the number of subintervals.
"""

from __future__ import annotations

import numpy as np

from pynumerics.core.protocols import ScalarFunction
from pynumerics.core.validation import check_callable, check_positive_int


def integrate(f: ScalarFunction, a: float, b: float, n: int) -> float:
    """
    Approximate the definite integral of f over [a, b].

    Composite Simpson's rule over n equal subintervals: endpoints carry
    weight 1, interior point i (1 <= i <= n-1) carries weight 4 when i is
    odd and 2 when i is even, and the sum is scaled by delta/3.

    The 4/2 alternation is applied regardless of the parity of n. For odd
    n this is no longer the textbook rule, but it still converges and is
    the quadrature every incomplete-integral in this package relies on.

    Parameters
    ----------
    f : callable
        Integrand, evaluated exactly n + 1 times.
    a, b : float
        Integration limits. b < a gives the negated integral.
    n : int
        Number of subintervals, >= 1.

    Returns
    -------
    float
        Approximation of the integral. Non-finite integrand values
        propagate into the result.
    """
    check_callable(f, "f")
    n = check_positive_int(n, "n")

    delta = (b - a) / n
    total = f(a) + f(b)

    if n > 1:
        interior = np.arange(1, n)
        weights = np.where(interior % 2 == 0, 2.0, 4.0)
        values = np.fromiter(
            (f(a + i * delta) for i in interior),
            dtype=np.float64,
            count=n - 1,
        )
        total = total + np.dot(weights, values)

    return float(total * delta / 3.0)
