"""
Core infrastructure for PyNumerics.

This module provides shared abstractions and utilities used by all
component subpackages (calculus, optimize, linalg, distributions).

Key components:
    protocols: ScalarFunction protocol
    exceptions: Exception hierarchy
    validation: Input validators
    defaults: Numeric defaults (single source of truth)
    compute: Evaluation grids and tolerance tiers
"""

from pynumerics.core.protocols import ScalarFunction
from pynumerics.core.exceptions import (
    PyNumericsError,
    ValidationError,
    DimensionError,
    IndexRangeError,
    MatrixParseError,
    NumericalError,
    SingularMatrixError,
    NoRootInRangeError,
)

__all__ = [
    # Protocols
    "ScalarFunction",
    # Exceptions
    "PyNumericsError",
    "ValidationError",
    "DimensionError",
    "IndexRangeError",
    "MatrixParseError",
    "NumericalError",
    "SingularMatrixError",
    "NoRootInRangeError",
]
