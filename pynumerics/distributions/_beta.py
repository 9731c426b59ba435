"""
Beta distribution: density, cumulative and quantile functions.
"""

from __future__ import annotations

import numpy as np

from pynumerics.distributions._special import beta, regincbet
from pynumerics.optimize import fzero


def betapdf(x: float, a: float, b: float) -> float:
    """Beta density x^(a-1) (1-x)^(b-1) / beta(a, b); 0 outside [0, 1]."""
    if x < 0.0 or x > 1.0:
        return 0.0
    x = np.float64(x)
    with np.errstate(divide='ignore'):
        return float(np.power(x, a - 1.0) * np.power(1.0 - x, b - 1.0) / beta(a, b))


def betacdf(x: float, a: float, b: float) -> float:
    """Beta cumulative distribution, the regularized incomplete beta."""
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    return regincbet(x, a, b)


def betainv(p: float, a: float, b: float) -> float:
    """
    Beta quantile by root-finding on betacdf over [0, 1].

    Returns 0 for p <= 0 and 1 for p >= 1.
    """
    if p <= 0.0:
        return 0.0
    if p >= 1.0:
        return 1.0
    return fzero(lambda t: p - betacdf(t, a, b), 0.0, 1.0)
