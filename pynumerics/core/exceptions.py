"""
Exception hierarchy for PyNumerics.

All exceptions inherit from PyNumericsError to allow catching any
library-specific error. Component-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyNumericsError(Exception):
    """Base exception for all PyNumerics errors."""
    pass


class ValidationError(PyNumericsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when two matrices take part in an element-wise operation
    but do not share the same shape.

    Attributes:
        expected: Shape of the left operand as (rows, cols)
        actual: Shape of the right operand as (rows, cols)
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, int] | None = None,
        actual: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexRangeError(ValidationError, IndexError):
    """
    A 1-based matrix index fell outside the matrix.

    Also an IndexError, so generic sequence-handling code can catch it.

    Attributes:
        row: Requested row
        col: Requested column
        shape: Matrix shape as (rows, cols)
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class MatrixParseError(ValidationError):
    """
    A serialized matrix record could not be decoded.

    Attributes:
        reason: Short description of what was malformed
    """

    def __init__(self, message: str, reason: str | None = None):
        super().__init__(message)
        self.reason = reason


class NumericalError(PyNumericsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised by adjugate inversion when the determinant is exactly zero.
    No near-singularity tolerance is applied.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed
        size: Matrix size
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        size: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.size = size


class NoRootInRangeError(NumericalError):
    """
    Root bracketing found no sign change.

    Raised by fzero when no pair of adjacent samples in [left, right]
    has differing signs, so there is no bracket to bisect.

    Attributes:
        left: Lower end of the searched interval
        right: Upper end of the searched interval
        n_samples: Number of sampling steps that were scanned
    """

    def __init__(
        self,
        message: str,
        left: float | None = None,
        right: float | None = None,
        n_samples: int | None = None,
    ):
        super().__init__(message)
        self.left = left
        self.right = right
        self.n_samples = n_samples
