"""
Optimization module.

Extremum search and root finding over a scalar function.

Public API:
    maximum(f, left, right, step)            - Largest grid value of f
    minimum(f, left, right, step)            - Smallest grid value of f
    stationary_points(f, left, right, step)  - Grid points where f' rounds to 0
    fzero(f, left, right)                    - Sampling + bisection root finder
"""

from pynumerics.optimize._extrema import maximum, minimum, stationary_points
from pynumerics.optimize._fzero import fzero

__all__ = [
    "maximum",
    "minimum",
    "stationary_points",
    "fzero",
]
