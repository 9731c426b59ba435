"""
Linear algebra module.

Dense square and rectangular matrices with 1-based element access,
transpose, element-wise sum, cofactor determinant and adjugate inverse.
Intended for small matrices: determinant and inverse are O(n!).

Public API:
    Matrix(sizex, sizey)   - Rectangular matrix, sizey rows by sizex columns
    SquareMatrix(size)     - Square matrix with deter(), invert(), adjugate()
    to_json(m) / from_json(text)       - Exchange-format JSON
    to_record(m) / from_record(obj)    - Exchange-format dict
"""

from pynumerics.linalg._matrix import Matrix, SquareMatrix
from pynumerics.linalg.serialization import (
    to_json, from_json, to_record, from_record,
)

__all__ = [
    "Matrix",
    "SquareMatrix",
    "to_json",
    "from_json",
    "to_record",
    "from_record",
]
