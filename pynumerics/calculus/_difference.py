"""
Finite-difference differentiation.
"""

from __future__ import annotations

from pynumerics.core.defaults import FORWARD_DIFFERENCE_STEP
from pynumerics.core.protocols import ScalarFunction
from pynumerics.core.validation import check_callable


def differentiate(
    f: ScalarFunction,
    a: float,
    h: float = FORWARD_DIFFERENCE_STEP,
) -> float:
    """
    Forward-difference derivative (f(a + h) - f(a)) / h.

    The step is fixed, not adapted to f. With the default h = 1e-10 the
    result carries roughly 1e-6 relative cancellation error for functions
    of order one; functions with large curvature at a do worse.

    Parameters
    ----------
    f : callable
        Function to differentiate.
    a : float
        Evaluation point.
    h : float
        Step size.

    Returns
    -------
    float
    """
    check_callable(f, "f")
    return float((f(a + h) - f(a)) / h)
