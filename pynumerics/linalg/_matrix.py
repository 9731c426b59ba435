"""
Dense matrix types with 1-based element access.

Both types keep a flat, fixed-size float64 backing array in row-major
order. Matrices are created zero-filled, mutated in place through
set(), and never resized. Every derived matrix (transpose, minor, sum,
inverse) owns a fresh backing array.

Determinant and inverse use Laplace cofactor expansion along the first
row. This is O(n!) in the matrix size, and inversion is O(n * n!)
because every cell of the adjugate needs a minor determinant. It is
meant for small matrices only; a RuntimeWarning is issued when the
expansion starts on a matrix larger than COFACTOR_WARNING_SIZE.
"""

from __future__ import annotations

import warnings
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pynumerics.core.defaults import COFACTOR_WARNING_SIZE
from pynumerics.core.exceptions import (
    DimensionError,
    IndexRangeError,
    SingularMatrixError,
    ValidationError,
)
from pynumerics.core.validation import check_int, check_positive_int


class Matrix:
    """
    Rectangular matrix of sizey rows by sizex columns.

    Element (row, col) lives at (row - 1) * sizex + (col - 1) in the
    backing array. Indices are 1-based.

    Examples:
        >>> m = Matrix(3, 2)        # 2 rows, 3 columns
        >>> m.set(2, 3, 7.5)
        >>> m.get(2, 3)
        7.5
    """

    __slots__ = ('_sizex', '_sizey', '_data')

    def __init__(self, sizex: int, sizey: int):
        self._sizex = check_positive_int(sizex, "sizex")
        self._sizey = check_positive_int(sizey, "sizey")
        self._data = np.zeros(self._sizex * self._sizey, dtype=np.float64)

    # === Factory Methods ===

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Construct from a nested sequence of rows."""
        array = _rows_to_array(rows)
        sizey, sizex = array.shape
        m = cls(sizex, sizey)
        m._data[:] = array.ravel()
        return m

    @classmethod
    def _from_flat(cls, sizex: int, sizey: int, data: NDArray[np.floating[Any]]) -> Matrix:
        m = cls(sizex, sizey)
        m._data[:] = data
        return m

    # === Properties ===

    @property
    def sizex(self) -> int:
        """Number of columns."""
        return self._sizex

    @property
    def sizey(self) -> int:
        """Number of rows."""
        return self._sizey

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._sizey, self._sizex)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the row-major backing array."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    # === Element Access ===

    def get(self, row: int, col: int) -> float:
        """Element at 1-based (row, col)."""
        return float(self._data[self._address(row, col)])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite element at 1-based (row, col)."""
        self._data[self._address(row, col)] = value

    def _address(self, row: int, col: int) -> int:
        row = check_int(row, "row")
        col = check_int(col, "col")
        if not (1 <= row <= self._sizey and 1 <= col <= self._sizex):
            raise IndexRangeError(
                f"index ({row}, {col}) out of range for "
                f"{self._sizey}x{self._sizex} matrix",
                row=row,
                col=col,
                shape=self.shape,
            )
        return (row - 1) * self._sizex + (col - 1)

    # === Operations ===

    def transpose(self) -> Matrix:
        """New matrix with rows and columns swapped."""
        transposed = self.to_array().T
        return type(self)._from_flat(self._sizey, self._sizex, transposed.ravel())

    def sum(self, other: Matrix) -> Matrix:
        """
        Element-wise addition.

        Raises:
            DimensionError: If the two shapes differ
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected a matrix, got {type(other).__name__}"
            )
        if self.shape != other.shape:
            raise DimensionError(
                f"cannot add {other.sizey}x{other.sizex} matrix to "
                f"{self._sizey}x{self._sizex} matrix",
                expected=self.shape,
                actual=other.shape,
            )
        return type(self)._from_flat(self._sizex, self._sizey, self._data + other._data)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sum(other)

    def to_array(self) -> NDArray[np.floating[Any]]:
        """2-D copy of the matrix, shape (sizey, sizex)."""
        return self._data.reshape(self._sizey, self._sizex).copy()

    def to_list(self) -> list[list[float]]:
        """Nested list of rows."""
        return self.to_array().tolist()

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data, equal_nan=True)
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sizex={self._sizex}, sizey={self._sizey}, rows={self.to_list()})"


class SquareMatrix(Matrix):
    """
    Square matrix of size x size.

    Element (row, col) lives at (row - 1) * size + (col - 1). Adds
    determinant, cofactor and adjugate-based inversion.
    """

    __slots__ = ()

    def __init__(self, size: int):
        super().__init__(size, size)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> SquareMatrix:
        """Construct from a nested sequence of rows; must be square."""
        array = _rows_to_array(rows)
        if array.shape[0] != array.shape[1]:
            raise DimensionError(
                f"rows: expected a square layout, got {array.shape[0]}x{array.shape[1]}",
                expected=(array.shape[0], array.shape[0]),
                actual=array.shape,
            )
        m = cls(array.shape[0])
        m._data[:] = array.ravel()
        return m

    @classmethod
    def _from_flat(cls, sizex: int, sizey: int, data: NDArray[np.floating[Any]]) -> SquareMatrix:
        m = cls(sizex)
        m._data[:] = data
        return m

    @property
    def size(self) -> int:
        """Number of rows (= columns)."""
        return self._sizex

    # === Cofactor Expansion ===

    def minor(self, row: int, col: int) -> SquareMatrix:
        """
        (size-1) x (size-1) matrix with `row` and `col` deleted.

        Raises:
            ValidationError: If the matrix is 1x1 (no minor exists)
        """
        self._address(row, col)
        if self.size == 1:
            raise ValidationError("a 1x1 matrix has no minor")
        kept = np.delete(np.delete(self.to_array(), row - 1, axis=0), col - 1, axis=1)
        return SquareMatrix._from_flat(self.size - 1, self.size - 1, kept.ravel())

    def cofactor(self, row: int, col: int) -> float:
        """Signed minor determinant, positive when row + col is even."""
        sign = 1.0 if (row + col) % 2 == 0 else -1.0
        return sign * self.minor(row, col)._deter()

    def deter(self) -> float:
        """
        Determinant by Laplace expansion along the first row.

        Runs in O(n!) time and recurses to depth n.
        """
        if self.size > COFACTOR_WARNING_SIZE:
            warnings.warn(
                f"cofactor expansion of a {self.size}x{self.size} matrix "
                f"costs O(n!) operations",
                RuntimeWarning,
                stacklevel=2,
            )
        return self._deter()

    def _deter(self) -> float:
        d = self._data
        if self.size == 1:
            return float(d[0])
        if self.size == 2:
            return float(d[0] * d[3] - d[1] * d[2])

        total = 0.0
        for x in range(1, self.size + 1):
            total += self.get(1, x) * self.cofactor(1, x)
        return total

    def adjugate(self) -> SquareMatrix:
        """Transpose of the cofactor matrix."""
        if self.size == 1:
            return SquareMatrix.from_rows([[1.0]])
        transposed = self.transpose()
        adj = SquareMatrix(self.size)
        for i in range(1, self.size + 1):
            for j in range(1, self.size + 1):
                adj.set(i, j, transposed.cofactor(i, j))
        return adj

    def invert(self) -> SquareMatrix:
        """
        Inverse by the adjugate formula adj(A) / det(A).

        Raises:
            SingularMatrixError: If the determinant is exactly zero. No
                tolerance is applied to near-singular matrices.
        """
        determinant = self.deter()
        if determinant == 0.0:
            raise SingularMatrixError(
                f"{self.size}x{self.size} matrix is not invertible: determinant is 0",
                matrix_name="self",
                determinant=determinant,
                size=self.size,
            )
        d = 1.0 / determinant
        adj = self.adjugate()
        return SquareMatrix._from_flat(self.size, self.size, d * adj._data)


def _rows_to_array(rows: Sequence[Sequence[float]]) -> NDArray[np.floating[Any]]:
    """Convert nested rows to a 2-D float64 array, rejecting ragged input."""
    try:
        array = np.asarray(rows, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"rows: cannot convert to a numeric 2-D array: {e}") from e
    if array.ndim != 2 or array.size == 0:
        raise DimensionError(
            f"rows: expected a non-empty 2-D layout, got shape {array.shape}"
        )
    return array
