"""
Tests for Gauss-Jordan reduction to reduced row echelon form.
"""

import warnings

import numpy as np
import pytest

from pygauss import RealMatrix, row_reduce
from pygauss.core.protocols import Backend
from pygauss.echelon.backends import CPUGaussJordanBackend
from pygauss.echelon.design import EchelonDesign


# ═══════════════════════════════════════════════════════════════════════
# Known results
# ═══════════════════════════════════════════════════════════════════════


class TestKnownResults:

    def test_full_rank_system(self, rref_example):
        solution = row_reduce(rref_example)
        expected = np.array([
            [1.0, 0.0, 0.0, 25.0 / 24.0],
            [0.0, 1.0, 0.0, 55.0 / 24.0],
            [0.0, 0.0, 1.0, -35.0 / 24.0],
        ])
        np.testing.assert_allclose(solution.array, expected, atol=1e-12)
        assert solution.rank == 3
        assert solution.pivot_columns == (0, 1, 2)
        assert solution.reduced is True

    def test_solution_satisfies_system(self, rref_example):
        x = row_reduce(rref_example).array[:, 3]
        A = rref_example.to_numpy()
        np.testing.assert_allclose(A[:, :3] @ x, A[:, 3], rtol=1e-12)

    def test_partial_pivoting_swaps(self, rref_example):
        # Column 1 picks the 20/3 entry in row 2 over 8/3 in row 1
        assert row_reduce(rref_example).row_swaps == 1

    def test_zero_below_leading_entry(self, rref_example):
        reduced = row_reduce(rref_example).matrix
        assert reduced[0, 0] == 1.0
        assert reduced[1, 0] == 0.0
        assert reduced[2, 0] == 0.0

    def test_identity_fixed_point(self):
        eye = RealMatrix.identity(4, dtype=np.float64)
        solution = row_reduce(eye)
        assert solution.matrix == eye
        assert solution.rank == 4
        assert solution.row_swaps == 0

    def test_zero_matrix(self):
        solution = row_reduce(RealMatrix(3, 3, dtype=np.float64))
        assert solution.rank == 0
        assert solution.pivot_columns == ()
        assert solution.matrix == RealMatrix(3, 3, dtype=np.float64)

    def test_zero_leading_column(self):
        solution = row_reduce(RealMatrix.from_array([[0.0, 1.0], [0.0, 2.0]]))
        assert solution.matrix.to_list() == [[0.0, 1.0], [0.0, 0.0]]
        assert solution.pivot_columns == (1,)
        assert solution.rank == 1

    def test_tall(self):
        m = RealMatrix.from_array([[1.0, 2.0], [2.0, 4.0], [3.0, 7.0]], dtype=np.float64)
        solution = row_reduce(m)
        np.testing.assert_allclose(
            solution.array, [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]], atol=1e-12
        )
        assert solution.rank == 2

    def test_wide_rank_deficient(self):
        m = RealMatrix.from_array([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0]], dtype=np.float64)
        solution = row_reduce(m)
        np.testing.assert_allclose(
            solution.array, [[1.0, 2.0, 3.0], [0.0, 0.0, 0.0]], atol=1e-12
        )
        assert solution.pivot_columns == (0,)

    def test_no_negative_zero(self):
        m = RealMatrix.from_array([[2.0, -4.0], [1.0, -2.0]], dtype=np.float64)
        reduced = row_reduce(m).array
        assert not np.any(np.signbit(reduced[reduced == 0]))


# ═══════════════════════════════════════════════════════════════════════
# Properties
# ═══════════════════════════════════════════════════════════════════════


class TestProperties:

    def test_rank_matches_numpy(self, rng):
        for shape in [(3, 3), (4, 6), (6, 4)]:
            data = rng.standard_normal(shape)
            solution = row_reduce(RealMatrix.from_array(data, dtype=np.float64))
            assert solution.rank == np.linalg.matrix_rank(data)

    def test_low_rank_detected(self, rng):
        u = rng.standard_normal((5, 2))
        v = rng.standard_normal((2, 5))
        solution = row_reduce(RealMatrix.from_array(u @ v, dtype=np.float64), tol=1e-9)
        assert solution.rank == 2

    def test_idempotent(self, rng):
        m = RealMatrix.from_array(rng.standard_normal((3, 5)), dtype=np.float64)
        once = row_reduce(m).matrix
        twice = row_reduce(once).matrix
        assert twice.allclose(once)

    def test_pivot_columns_are_unit(self, rng):
        solution = row_reduce(
            RealMatrix.from_array(rng.standard_normal((4, 4)), dtype=np.float64)
        )
        for row, col in enumerate(solution.pivot_columns):
            unit = np.zeros(4)
            unit[row] = 1.0
            np.testing.assert_array_equal(solution.array[:, col], unit)

    def test_float32_preserved(self, rref_example):
        single = RealMatrix.from_array(rref_example.to_numpy(), dtype=np.float32)
        solution = row_reduce(single)
        assert solution.matrix.dtype == np.float32
        np.testing.assert_allclose(
            solution.array[:, 3], [25 / 24, 55 / 24, -35 / 24], rtol=1e-4
        )


# ═══════════════════════════════════════════════════════════════════════
# Tolerance
# ═══════════════════════════════════════════════════════════════════════


class TestTolerance:

    def _near_singular(self):
        return RealMatrix.from_array([[1.0, 1.0], [1.0, 1.0 + 1e-12]], dtype=np.float64)

    def test_default_resolves_small_pivot(self):
        solution = row_reduce(self._near_singular())
        assert solution.rank == 2

    def test_explicit_tolerance(self):
        solution = row_reduce(self._near_singular(), tol=1e-9)
        assert solution.rank == 1
        assert solution.tolerance == 1e-9
        assert solution.matrix.to_list() == [[1.0, 1.0], [0.0, 0.0]]

    def test_default_scales_with_magnitude(self, rref_example):
        tol = row_reduce(rref_example).tolerance
        assert tol == pytest.approx(4 * np.finfo(np.float64).eps * 12.0)

    def test_no_warnings(self, rref_example):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            solution = row_reduce(rref_example)
        assert solution.warnings == ()


# ═══════════════════════════════════════════════════════════════════════
# Backend
# ═══════════════════════════════════════════════════════════════════════


class TestBackend:

    def test_protocol(self):
        assert isinstance(CPUGaussJordanBackend(), Backend)

    def test_result_envelope(self, rref_example):
        result = CPUGaussJordanBackend().solve(EchelonDesign.from_matrix(rref_example))
        assert result.backend_name == 'cpu_gauss_jordan'
        assert result.info['method'] == 'gauss_jordan'
        assert result.info['dtype'] == 'float64'
        assert result.info['pivot_columns'] == [0, 1, 2]
        assert {'total_seconds', 'pivot_search', 'elimination'} <= set(result.timing)

    def test_design_untouched(self, rref_example):
        design = EchelonDesign.from_matrix(rref_example)
        before = design.data.copy()
        CPUGaussJordanBackend().solve(design)
        np.testing.assert_array_equal(design.data, before)
