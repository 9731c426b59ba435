"""
Calculus module.

Numerical integration and differentiation of a scalar function.

Public API:
    integrate(f, a, b, n)  - Composite Simpson's rule over n subintervals
    differentiate(f, a)    - Forward finite difference with h = 1e-10
"""

from pynumerics.calculus._simpson import integrate
from pynumerics.calculus._difference import differentiate

__all__ = [
    "integrate",
    "differentiate",
]
