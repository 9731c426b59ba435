"""
Matrix exchange format.

A matrix travels as a flat JSON record with capitalized field names:

    square:       {"Size": 2, "Matrix": [1.0, 2.0, 3.0, 4.0]}
    rectangular:  {"SizeX": 3, "SizeY": 2, "Matrix": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]}

`Matrix` is the row-major backing sequence. Decoding never falls back
to a zero matrix: anything malformed raises MatrixParseError.

Usage:
    text = to_json(m)
    assert from_json(text) == m
"""

from __future__ import annotations

import json
import numbers
from typing import Any

import numpy as np

from pynumerics.core.exceptions import MatrixParseError
from pynumerics.linalg._matrix import Matrix, SquareMatrix

SQUARE_FIELDS = frozenset({'Size', 'Matrix'})
RECTANGULAR_FIELDS = frozenset({'SizeX', 'SizeY', 'Matrix'})


def to_record(m: Matrix) -> dict[str, Any]:
    """Encode a matrix as an exchange record (plain dict)."""
    values = [float(v) for v in m.data]
    if isinstance(m, SquareMatrix):
        return {'Size': m.size, 'Matrix': values}
    return {'SizeX': m.sizex, 'SizeY': m.sizey, 'Matrix': values}


def to_json(m: Matrix) -> str:
    """Encode a matrix as exchange-format JSON text."""
    return json.dumps(to_record(m))


def from_record(record: Any) -> Matrix:
    """
    Decode an exchange record.

    Dispatches on the fields present: {Size, Matrix} gives a
    SquareMatrix, {SizeX, SizeY, Matrix} gives a Matrix.

    Raises:
        MatrixParseError: If the record is not a dict, has the wrong
            fields, has non-integer or non-positive sizes, has
            non-numeric entries, or the entry count does not match
            the declared shape
    """
    if not isinstance(record, dict):
        raise MatrixParseError(
            f"matrix record must be an object, got {type(record).__name__}",
            reason='not_an_object',
        )

    keys = frozenset(record)
    if keys == SQUARE_FIELDS:
        size = _size_field(record, 'Size')
        values = _values_field(record, size * size)
        m = SquareMatrix(size)
    elif keys == RECTANGULAR_FIELDS:
        sizex = _size_field(record, 'SizeX')
        sizey = _size_field(record, 'SizeY')
        values = _values_field(record, sizex * sizey)
        m = Matrix(sizex, sizey)
    else:
        raise MatrixParseError(
            f"matrix record fields must be {sorted(SQUARE_FIELDS)} or "
            f"{sorted(RECTANGULAR_FIELDS)}, got {sorted(keys)}",
            reason='fields',
        )

    m._data[:] = values
    return m


def from_json(text: str | bytes) -> Matrix:
    """
    Decode exchange-format JSON text.

    Raises:
        MatrixParseError: If the text is not valid JSON or the record
            is malformed (see from_record)
    """
    try:
        record = json.loads(text)
    except (json.JSONDecodeError, TypeError, UnicodeDecodeError) as e:
        raise MatrixParseError(f"invalid matrix JSON: {e}", reason='json') from e
    return from_record(record)


# --- Helpers ---

def _size_field(record: dict[str, Any], name: str) -> int:
    value = record[name]
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise MatrixParseError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}",
            reason='size_type',
        )
    if value < 1:
        raise MatrixParseError(f"{name}: must be >= 1, got {value}", reason='size_value')
    return int(value)


def _values_field(record: dict[str, Any], expected: int) -> np.ndarray:
    values = record['Matrix']
    if not isinstance(values, list):
        raise MatrixParseError(
            f"Matrix: expected an array, got {type(values).__name__}",
            reason='matrix_type',
        )
    if len(values) != expected:
        raise MatrixParseError(
            f"Matrix: expected {expected} entries for the declared shape, got {len(values)}",
            reason='matrix_length',
        )
    for i, v in enumerate(values):
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise MatrixParseError(
                f"Matrix[{i}]: expected a number, got {type(v).__name__} {v!r}",
                reason='matrix_entry',
            )
    return np.asarray(values, dtype=np.float64)
