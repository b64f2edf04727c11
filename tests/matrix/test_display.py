"""
Tests for text rendering of matrices.
"""

import numpy as np

from pygauss import IntegerMatrix, RealMatrix, mat
from pygauss.core.protocols import ElementGrid
from pygauss.matrix.display import format_element, format_matrix


class _Grid:
    """Minimal grid that isn't a matrix."""

    def __init__(self, values, rows, cols, dtype):
        self._values = values
        self.rows = rows
        self.cols = cols
        self.dtype = np.dtype(dtype)

    def __iter__(self):
        return iter(self._values)


class TestFormatElement:

    def test_integer(self):
        assert format_element(7, np.dtype(np.int32)) == "7"
        assert format_element(-12345, np.dtype(np.int64)) == "-12345"

    def test_real(self):
        assert format_element(1.5, np.dtype(np.float32)) == "1.5000"
        assert format_element(-0.25, np.dtype(np.float64)) == "-0.2500"


class TestFormatMatrix:

    def test_integer_matrix(self):
        m = IntegerMatrix.from_array([[1, 2], [3, 4]])
        assert str(m) == "[ 1 2 ]\n[ 3 4 ]"

    def test_integer_literal_unpadded(self):
        assert str(mat("1, 2; 3, 4")) == "[ 1 2 ]\n[ 3 4 ]"
        assert str(mat("-7, 10")) == "[ -7 10 ]"

    def test_real_matrix(self):
        m = RealMatrix.from_array([[1.0, 2.5]], dtype=np.float64)
        assert str(m) == "[ 1.0000 2.5000 ]"

    def test_one_line_per_row(self):
        m = RealMatrix(3, 2)
        lines = str(m).split("\n")
        assert len(lines) == 3
        assert all(line.startswith("[ ") and line.endswith(" ]") for line in lines)

    def test_wide_values(self):
        m = IntegerMatrix.from_array([[100000, 1]], dtype=np.int64)
        assert str(m) == "[ 100000 1 ]"

    def test_no_identity_information(self):
        text = str(IntegerMatrix(2, 2))
        assert "0x" not in text
        assert "IntegerMatrix" not in text

    def test_custom_grid(self):
        grid = _Grid([1, 2, 3, 4, 5, 6], 3, 2, np.int16)
        assert isinstance(grid, ElementGrid)
        assert format_matrix(grid) == "[ 1 2 ]\n[ 3 4 ]\n[ 5 6 ]"


class TestRepr:

    def test_repr(self):
        assert repr(IntegerMatrix(2, 2)) == "IntegerMatrix(rows=2, cols=2, dtype=int32)"
        assert repr(RealMatrix(1, 3, dtype=np.float64)) == (
            "RealMatrix(rows=1, cols=3, dtype=float64)"
        )

    def test_matrix_is_element_grid(self):
        assert isinstance(RealMatrix(1, 1), ElementGrid)
