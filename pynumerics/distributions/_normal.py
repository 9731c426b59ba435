"""
Normal distribution: density, cumulative and quantile functions.

The cumulative and quantile functions are published closed-form
approximations, not exact evaluations:

    s_normcdf  - Zelen & Severo (1964), absolute error about 7.5e-8 for x >= 0
    s_norminv  - Shore (1982), absolute error about 1e-2 in the tails

Both are applied as-is across their whole domain. The Zelen-Severo
polynomial is not mirrored for negative x, so accuracy degrades as x
goes negative and the formula breaks down near x = -1/0.2316419.
"""

from __future__ import annotations

import numpy as np

# Zelen & Severo polynomial coefficients b_1 .. b_5
ZELEN_SEVERO_P = 0.2316419
ZELEN_SEVERO_COEFFICIENTS = (
    0.319381530,
    -0.356563782,
    1.781477937,
    -1.821255978,
    1.330274429,
)

# Shore's quantile approximation constants
SHORE_SCALE = 5.5556
SHORE_EXPONENT = 0.1186


def s_normpdf(x: float) -> float:
    """Standard normal density exp(-x^2/2) / sqrt(2 pi)."""
    return float(np.exp(-0.5 * np.float64(x) ** 2) / np.sqrt(2.0 * np.pi))


def normpdf(x: float, mu: float, sigma: float) -> float:
    """
    Normal density with location mu and scale sigma.

    x is standardized before the standard density is evaluated, so the
    result integrates to one for every sigma. The unstandardized form
    s_normpdf(x - mu) / sigma is deliberately not used: it only agrees
    when sigma = 1 (normpdf(0, 1, 2) is 0.1760 here, 0.1210 there).
    """
    return s_normpdf((x - mu) / sigma) / sigma


def s_normcdf(x: float) -> float:
    """
    Standard normal cumulative distribution (Zelen & Severo).

    1 - phi(x) * sum(b_k t^k), t = 1 / (1 + 0.2316419 x), k = 1..5.
    """
    t = 1.0 / (1.0 + ZELEN_SEVERO_P * np.float64(x))
    poly = sum(b * t ** k for k, b in enumerate(ZELEN_SEVERO_COEFFICIENTS, start=1))
    return float(1.0 - s_normpdf(x) * poly)


def normcdf(x: float, mu: float, sigma: float) -> float:
    """Normal cumulative distribution with location mu and scale sigma."""
    return s_normcdf((x - mu) / sigma)


def s_norminv(p: float) -> float:
    """
    Standard normal quantile (Shore).

    p < 0.5:   -5.5556 * (1 - (p / (1 - p))^0.1186)
    p >= 0.5:   5.5556 * (1 - ((1 - p) / p)^0.1186)
    """
    p = np.float64(p)
    if p < 0.5:
        return float(-SHORE_SCALE * (1.0 - np.power(p / (1.0 - p), SHORE_EXPONENT)))
    return float(SHORE_SCALE * (1.0 - np.power((1.0 - p) / p, SHORE_EXPONENT)))


def norminv(p: float, mu: float, sigma: float) -> float:
    """Normal quantile with location mu and scale sigma."""
    return mu + s_norminv(p) * sigma
