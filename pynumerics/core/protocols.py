"""
Core protocols for PyNumerics.

These define structural interfaces the numerical kernels accept.
We use Protocol (structural typing) rather than ABC (nominal typing) so
plain functions, lambdas, numpy ufuncs and callable objects all qualify
without registration.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ScalarFunction(Protocol):
    """
    A real function of one real variable.

    The kernels (integration, differentiation, extremum search, root
    finding) only ever invoke the function; they never inspect it.
    Implementations are assumed to be stateless and side-effect-free.
    Results are meaningless otherwise, but nothing breaks.

    Examples:
        math.sin, numpy.cos, lambda x: x * x - 3.0 * x + 1.0
    """

    def __call__(self, x: float, /) -> float:
        """Evaluate the function at x."""
        ...
