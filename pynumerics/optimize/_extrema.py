"""
Grid-scan extremum search and stationary-point detection.

All three scans visit the grid left + k*step (k = 0, 1, ...) while the
point is <= right. Resolution is exactly `step`; there is no refinement.
Cost is linear in (right - left) / step.
"""

from __future__ import annotations

import math

import numpy as np

from pynumerics.calculus import differentiate
from pynumerics.core.compute.grid import grid_points
from pynumerics.core.defaults import STATIONARY_POINT_DECIMALS
from pynumerics.core.protocols import ScalarFunction
from pynumerics.core.validation import check_callable, check_interval, check_step


def maximum(f: ScalarFunction, left: float, right: float, step: float) -> float:
    """
    Largest value of f on the grid over [left, right].

    Returns the extreme value f(x*), not its location. NaN evaluations
    are skipped; the result is NaN only if every evaluation is NaN.
    """
    return _scan(f, left, right, step, np.fmax)


def minimum(f: ScalarFunction, left: float, right: float, step: float) -> float:
    """
    Smallest value of f on the grid over [left, right].

    Returns the extreme value f(x*), not its location. NaN evaluations
    are skipped; the result is NaN only if every evaluation is NaN.
    """
    return _scan(f, left, right, step, np.fmin)


def stationary_points(
    f: ScalarFunction,
    left: float,
    right: float,
    step: float,
) -> list[float]:
    """
    Approximate critical points of f on [left, right].

    Evaluates the forward-difference derivative at every grid point and
    keeps the points where it rounds to zero at 4 decimal places, i.e.
    |f'(x)| < 0.00005. The rounding band stands in for an epsilon
    comparison: a zero crossing whose neighbouring grid points all have
    |f'| >= 0.00005 is missed, and a flat region yields a run of points.

    The right endpoint is tested on its own and appended when it
    qualifies, unless it already was the last grid point.

    Parameters
    ----------
    f : callable
        Function to scan.
    left, right : float
        Scan interval, left <= right.
    step : float
        Grid resolution, > 0.

    Returns
    -------
    list of float
        Qualifying points in ascending order.
    """
    check_callable(f, "f")
    left, right = check_interval(left, right)
    step = check_step(step)

    points: list[float] = []
    last = None
    for x in grid_points(left, right, step):
        if _rounds_to_zero(differentiate(f, x)):
            points.append(x)
        last = x

    if last != right and _rounds_to_zero(differentiate(f, right)):
        points.append(right)

    return points


# --- Helpers ---

def _scan(f, left, right, step, pick) -> float:
    """Fold `pick` over f evaluated on the grid."""
    check_callable(f, "f")
    left, right = check_interval(left, right)
    step = check_step(step)

    best = np.float64(np.nan)
    for x in grid_points(left, right, step):
        best = pick(best, f(x))
    return float(best)


def _rounds_to_zero(value: float, decimals: int = STATIONARY_POINT_DECIMALS) -> bool:
    """True when value rounds (half away from zero) to 0 at `decimals` places."""
    if not np.isfinite(value):
        return False
    return math.floor(abs(value) * 10.0 ** decimals + 0.5) == 0
