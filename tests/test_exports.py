"""
Tests for the flat host-facing function surface.

Matrix operations take and return exchange-format JSON text.
"""

import json

import pytest

from pynumerics import distributions, exports
from pynumerics.core.exceptions import (
    DimensionError,
    MatrixParseError,
    SingularMatrixError,
    ValidationError,
)


class TestMatrixOperations:

    def test_deter(self):
        assert exports.matrix_deter('{"Size": 2, "Matrix": [1, 2, 3, 4]}') == -2.0

    def test_invert(self):
        result = json.loads(exports.matrix_invert('{"Size": 2, "Matrix": [1, 2, 3, 4]}'))
        assert result == {'Size': 2, 'Matrix': [-2.0, 1.0, 1.5, -0.5]}

    def test_invert_singular(self):
        with pytest.raises(SingularMatrixError):
            exports.matrix_invert('{"Size": 2, "Matrix": [1, 2, 2, 4]}')

    def test_transpose_rectangular(self):
        text = '{"SizeX": 3, "SizeY": 2, "Matrix": [1, 2, 3, 4, 5, 6]}'
        result = json.loads(exports.matrix_transpose(text))
        assert result == {'SizeX': 2, 'SizeY': 3, 'Matrix': [1.0, 4.0, 2.0, 5.0, 3.0, 6.0]}

    def test_transpose_square(self):
        result = json.loads(exports.matrix_transpose('{"Size": 2, "Matrix": [1, 2, 3, 4]}'))
        assert result == {'Size': 2, 'Matrix': [1.0, 3.0, 2.0, 4.0]}

    def test_sum(self):
        a = '{"Size": 2, "Matrix": [1, 2, 3, 4]}'
        b = '{"Size": 2, "Matrix": [10, 20, 30, 40]}'
        assert json.loads(exports.matrix_sum(a, b)) == {'Size': 2, 'Matrix': [11.0, 22.0, 33.0, 44.0]}

    def test_sum_shape_mismatch(self):
        a = '{"SizeX": 2, "SizeY": 1, "Matrix": [1, 2]}'
        b = '{"SizeX": 1, "SizeY": 2, "Matrix": [1, 2]}'
        with pytest.raises(DimensionError):
            exports.matrix_sum(a, b)

    def test_deter_needs_square_record(self):
        with pytest.raises(ValidationError, match="square"):
            exports.matrix_deter('{"SizeX": 2, "SizeY": 2, "Matrix": [1, 2, 3, 4]}')

    def test_malformed_json(self):
        with pytest.raises(MatrixParseError):
            exports.matrix_deter('{"Size": 2, "Matrix": [1, 2, 3]}')


class TestDistributionSurface:

    def test_every_distribution_function_exported(self):
        """All distribution functions except the internal quadrature helper."""
        expected = set(distributions.__all__) - {'gamma_integral'}
        assert expected <= set(exports.__all__)

    def test_same_objects(self):
        assert exports.tinv is distributions.tinv
        assert exports.normcdf is distributions.normcdf

    def test_float_in_float_out(self):
        assert isinstance(exports.betacdf(0.6, 9.0, 4.0), float)
