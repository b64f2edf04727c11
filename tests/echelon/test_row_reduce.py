"""
Tests for row_reduce/rref dispatch, EchelonDesign and EchelonSolution.
"""

import dataclasses

import numpy as np
import pytest

from pygauss import IntegerMatrix, RealMatrix, row_reduce, rref
from pygauss.core.exceptions import (
    DimensionError,
    ElementTypeError,
    ValidationError,
)
from pygauss.echelon import EchelonDesign, EchelonSolution


# ═══════════════════════════════════════════════════════════════════════
# Dispatch
# ═══════════════════════════════════════════════════════════════════════


class TestDispatch:

    def test_default_is_gauss_jordan(self, rref_example):
        solution = row_reduce(rref_example)
        assert isinstance(solution, EchelonSolution)
        assert solution.backend_name == 'cpu_gauss_jordan'

    def test_forward(self, rref_example):
        assert row_reduce(rref_example, method='forward').backend_name == 'cpu_forward'

    def test_unknown_method(self, rref_example):
        with pytest.raises(ValidationError, match="Unknown method"):
            row_reduce(rref_example, method='lu')

    def test_negative_tolerance(self, rref_example):
        with pytest.raises(ValidationError, match="non-negative"):
            row_reduce(rref_example, tol=-1.0)

    def test_nan_tolerance(self, rref_example):
        with pytest.raises(ValidationError):
            row_reduce(rref_example, tol=float('nan'))

    @pytest.mark.parametrize("tol", ["x", [1e-9], True])
    def test_non_numeric_tolerance(self, rref_example, tol):
        with pytest.raises(ValidationError, match="tol must be a real number"):
            row_reduce(rref_example, tol=tol)

    def test_numpy_scalar_tolerance(self, rref_example):
        solution = row_reduce(rref_example, tol=np.float32(1e-6))
        assert solution.tolerance == pytest.approx(1e-6)

    def test_tolerance_with_forward(self, rref_example):
        with pytest.raises(ValidationError, match="only to method='gauss_jordan'"):
            row_reduce(rref_example, method='forward', tol=1e-9)

    def test_rref_returns_matrix(self, rref_example):
        reduced = rref(rref_example)
        assert isinstance(reduced, RealMatrix)
        assert reduced == row_reduce(rref_example).matrix

    def test_method_on_matrix(self, rref_example):
        assert rref_example.rref() == rref(rref_example)
        assert rref_example.rref(method='forward') == rref(rref_example, method='forward')

    def test_receiver_unchanged(self, rref_example):
        before = rref_example.to_numpy()
        rref_example.rref()
        np.testing.assert_array_equal(rref_example.to_numpy(), before)

    def test_array_input_reduced_in_float64(self):
        solution = row_reduce([[2, 4], [1, 3]])
        assert solution.matrix.dtype == np.float64
        assert solution.matrix.to_list() == [[1.0, 0.0], [0.0, 1.0]]

    def test_design_input(self, rref_example):
        design = EchelonDesign.from_matrix(rref_example)
        assert row_reduce(design).rank == 3

    def test_integer_matrix_rejected(self):
        with pytest.raises(ElementTypeError, match="needs division"):
            row_reduce(IntegerMatrix.from_array([[1, 2], [3, 4]]))

    def test_non_finite_rejected(self):
        m = RealMatrix.from_array([[1.0, np.nan], [np.inf, 1.0]], dtype=np.float64)
        with pytest.raises(ValidationError, match="1 NaN, 1 Inf"):
            row_reduce(m)


# ═══════════════════════════════════════════════════════════════════════
# Design
# ═══════════════════════════════════════════════════════════════════════


class TestEchelonDesign:

    def test_from_matrix_keeps_dtype(self):
        design = EchelonDesign.from_matrix(RealMatrix(2, 3))
        assert design.dtype == np.float32
        assert design.shape == (2, 3)
        assert design.rows == 2 and design.cols == 3

    def test_from_array_default_dtype(self):
        assert EchelonDesign.from_array([[1, 2]]).dtype == np.float64

    def test_from_array_integer_dtype(self):
        with pytest.raises(ElementTypeError):
            EchelonDesign.from_array([[1, 2]], dtype=np.int32)

    def test_from_array_not_2d(self):
        with pytest.raises(DimensionError):
            EchelonDesign.from_array([1.0, 2.0])

    def test_data_read_only(self):
        design = EchelonDesign.from_array([[1.0, 2.0]])
        with pytest.raises(ValueError):
            design.data[0, 0] = 5.0

    def test_frozen(self):
        design = EchelonDesign.from_array([[1.0]])
        with pytest.raises(dataclasses.FrozenInstanceError):
            design._rows = 2

    def test_to_matrix(self):
        design = EchelonDesign.from_array([[1.0, 2.0], [3.0, 4.0]])
        m = design.to_matrix()
        assert isinstance(m, RealMatrix)
        assert m.to_list() == [[1.0, 2.0], [3.0, 4.0]]


# ═══════════════════════════════════════════════════════════════════════
# Solution
# ═══════════════════════════════════════════════════════════════════════


class TestEchelonSolution:

    def test_matrix_is_fresh(self, rref_example):
        solution = row_reduce(rref_example)
        first = solution.matrix
        first[0, 0] = 42.0
        assert solution.matrix[0, 0] == 1.0

    def test_info(self, rref_example):
        solution = row_reduce(rref_example)
        assert solution.info['rank'] == 3
        assert solution.info['row_swaps'] == solution.row_swaps
        assert solution.timing['total_seconds'] >= 0.0

    def test_summary(self, rref_example):
        text = row_reduce(rref_example).summary()
        assert "gauss_jordan" in text
        assert "reduced row echelon form" in text
        assert "size: 3 x 4" in text
        assert "rank: 3" in text
        assert "pivot columns: [0, 1, 2]" in text
        assert "zero tolerance" in text
        assert text.endswith(str(rref(rref_example)))

    def test_summary_forward_with_warning(self):
        with pytest.warns(RuntimeWarning):
            solution = row_reduce([[0.0, 1.0], [0.0, 2.0]], method='forward')
        text = solution.summary()
        assert "(forward): row echelon form" in text
        assert "warning: zero pivot" in text
        assert "zero tolerance" not in text

    def test_repr(self, rref_example):
        assert repr(row_reduce(rref_example)) == (
            "EchelonSolution(rows=3, cols=4, rank=3, reduced=True)"
        )
        assert repr(row_reduce(rref_example, method='forward')) == (
            "EchelonSolution(rows=3, cols=4, rank=3, reduced=False)"
        )
