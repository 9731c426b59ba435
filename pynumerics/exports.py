"""
Flat function surface for host environments.

Everything here takes and returns floats, or, for matrix operations,
matrices in exchange-format JSON text (see pynumerics.linalg.serialization).
No function keeps state between calls, so the module can be bound
one-to-one to a foreign-function or command dispatch table.

Usage:
    >>> matrix_deter('{"Size": 2, "Matrix": [1, 2, 3, 4]}')
    -2.0
"""

from __future__ import annotations

from pynumerics.core.exceptions import ValidationError
from pynumerics.distributions import (
    s_normpdf, normpdf, s_normcdf, normcdf, s_norminv, norminv,
    gamma, lowincgamma, uppincgamma, regincgamma, gammapdf, gammacdf, gammainv,
    beta, incbet, regincbet, betapdf, betacdf, betainv,
    tpdf, tcdf, tinv,
    chi2pdf, chi2cdf, chi2inv,
)
from pynumerics.linalg import SquareMatrix, from_json, to_json


def matrix_deter(text: str) -> float:
    """Determinant of a square matrix given as JSON."""
    return _square(text).deter()


def matrix_invert(text: str) -> str:
    """Inverse of a square matrix given as JSON, returned as JSON."""
    return to_json(_square(text).invert())


def matrix_transpose(text: str) -> str:
    """Transpose of a matrix given as JSON, returned as JSON."""
    return to_json(from_json(text).transpose())


def matrix_sum(left: str, right: str) -> str:
    """Element-wise sum of two matrices given as JSON, returned as JSON."""
    return to_json(from_json(left).sum(from_json(right)))


def _square(text: str) -> SquareMatrix:
    m = from_json(text)
    if not isinstance(m, SquareMatrix):
        raise ValidationError(
            f"expected a square matrix record (Size), got {m.sizey}x{m.sizex} "
            f"rectangular record (SizeX/SizeY)"
        )
    return m


__all__ = [
    # Matrix operations on JSON text
    "matrix_deter",
    "matrix_invert",
    "matrix_transpose",
    "matrix_sum",
    # Distributions
    "s_normpdf", "normpdf", "s_normcdf", "normcdf", "s_norminv", "norminv",
    "gamma", "lowincgamma", "uppincgamma", "regincgamma",
    "gammapdf", "gammacdf", "gammainv",
    "beta", "incbet", "regincbet", "betapdf", "betacdf", "betainv",
    "tpdf", "tcdf", "tinv",
    "chi2pdf", "chi2cdf", "chi2inv",
]
