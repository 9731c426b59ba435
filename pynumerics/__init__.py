"""
PyNumerics: a compact numerical computing kernel for Python.

Closed-form and approximate tools rather than a general numerical
library: fixed-step quadrature, grid and bisection search, cofactor
matrix algebra for small matrices, and distribution functions built on
top of them.

Submodules:
    calculus: Simpson integration, forward-difference derivative
    optimize: Grid extrema, stationary points, root finding
    linalg: Square/rectangular matrices, determinant, inverse, JSON exchange
    distributions: Normal, gamma, beta, Student's t, chi-squared
    exports: Flat float/JSON function surface for host environments
"""

__version__ = "0.1.0"

from pynumerics import calculus
from pynumerics import optimize
from pynumerics import linalg
from pynumerics import distributions

__all__ = [
    "__version__",
    "calculus",
    "optimize",
    "linalg",
    "distributions",
]
