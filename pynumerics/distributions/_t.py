"""
Student's t distribution: density, cumulative and quantile functions.

tcdf goes through the regularized incomplete beta:

    two-tailed  A(t | v) = 1 - I(v / (v + t^2); v/2, 1/2)
    one-tailed  F(t | v) = 1 - (1 - A(t | v)) / 2         for t > 0

and F(t) = 1 - F(-t) for t < 0.
"""

from __future__ import annotations

import numpy as np

from pynumerics.core.defaults import (
    T_QUANTILE_NARROW_BRACKET,
    T_QUANTILE_TAIL,
    T_QUANTILE_WIDE_BRACKET,
)
from pynumerics.distributions._special import gamma, regincbet
from pynumerics.optimize import fzero


def tpdf(x: float, v: float) -> float:
    """t density with v degrees of freedom."""
    v = np.float64(v)
    return float(
        gamma((v + 1.0) * 0.5)
        / np.sqrt(v * np.pi)
        / gamma(v * 0.5)
        * np.power(1.0 + x * x / v, -(v + 1.0) * 0.5)
    )


def tcdf(x: float, v: float) -> float:
    """t cumulative distribution with v degrees of freedom; exactly 0.5 at 0."""
    if x == 0.0:
        return 0.5
    if x > 0.0:
        return _one_tailed(x, v)
    return 1.0 - _one_tailed(-x, v)


def tinv(p: float, v: float) -> float:
    """
    t quantile by root-finding on tcdf.

    The search runs over [-10, 10] when p is strictly inside
    (1e-9, 1 - 1e-9) and over the 8-bit signed range [-128, 127]
    otherwise. Returns -inf for p <= 0 and inf for p >= 1.

    Raises:
        NoRootInRangeError: If the quantile lies outside [-128, 127]
    """
    if p <= 0.0:
        return float('-inf')
    if p >= 1.0:
        return float('inf')

    if T_QUANTILE_TAIL < p < 1.0 - T_QUANTILE_TAIL:
        left, right = T_QUANTILE_NARROW_BRACKET
    else:
        left, right = T_QUANTILE_WIDE_BRACKET
    return fzero(lambda t: p - tcdf(t, v), left, right)


def _two_tailed(t: float, v: float) -> float:
    return 1.0 - regincbet(v / (v + t * t), v * 0.5, 0.5)


def _one_tailed(t: float, v: float) -> float:
    return 1.0 - (1.0 - _two_tailed(t, v)) * 0.5
