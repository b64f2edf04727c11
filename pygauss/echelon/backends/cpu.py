"""
CPU backends for row reduction.

CPUGaussJordanBackend is the reference: reduced row echelon form with
partial pivoting and a magnitude tolerance.

CPUForwardEliminationBackend keeps the forward-elimination routine
unchanged: column 0 drives the pivot swaps, comparisons against 0.0 and 1.0
are exact, zero pivots are skipped, and entries above pivots are never
cleared. Use it when that exact behaviour matters.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pygauss.core.result import Result
from pygauss.core.compute.timing import Timer
from pygauss.core.compute.tolerances import pivot_tolerance
from pygauss.echelon.design import EchelonDesign
from pygauss.echelon.solution import EchelonParams


def _swap_rows(A: NDArray[Any], i: int, j: int) -> None:
    A[[i, j]] = A[[j, i]]


def _leading_columns(A: NDArray[Any]) -> tuple[int, ...]:
    """
    Pivot column of each row, top to bottom.

    A row's pivot is its first nonzero entry. Rows that are all zero, or whose
    leading entry is not strictly right of the previous pivot, add no pivot.
    """
    pivots: list[int] = []
    for row in A:
        nonzero = np.flatnonzero(row)
        if nonzero.size and (not pivots or int(nonzero[0]) > pivots[-1]):
            pivots.append(int(nonzero[0]))
    return tuple(pivots)


class CPUGaussJordanBackend:
    """Gauss-Jordan elimination to reduced row echelon form."""

    def __init__(self, tol: float | None = None):
        """
        Parameters
        ----------
        tol : float, optional
            Pivot magnitude treated as zero. Defaults to
            max(rows, cols) * eps(dtype) * max|A|.
        """
        self._tol = tol

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: EchelonDesign) -> Result[EchelonParams]:
        timer = Timer()
        timer.start()

        A = design.data.copy()
        rows, cols = design.shape

        if self._tol is not None:
            tol = float(self._tol)
        else:
            tol = pivot_tolerance(A.dtype, design.shape, float(np.max(np.abs(A))))

        pivots: list[int] = []
        swaps = 0
        pivot_row = 0

        for col in range(cols):
            if pivot_row >= rows:
                break

            with timer.section('pivot_search'):
                k = pivot_row + int(np.argmax(np.abs(A[pivot_row:, col])))
                negligible = abs(float(A[k, col])) <= tol

            if negligible:
                A[pivot_row:, col] = 0
                continue

            if k != pivot_row:
                _swap_rows(A, pivot_row, k)
                swaps += 1

            with timer.section('elimination'):
                A[pivot_row] = A[pivot_row] / A[pivot_row, col]
                factors = A[:, col].copy()
                factors[pivot_row] = 0
                A -= np.outer(factors, A[pivot_row]).astype(A.dtype, copy=False)
                A[:, col] = 0
                A[pivot_row, col] = 1

            pivots.append(col)
            pivot_row += 1

        # Round-off residue below the tolerance (and -0.0) becomes exact zero
        A[np.abs(A) <= tol] = 0

        timer.stop()

        params = EchelonParams(
            matrix=A,
            pivot_columns=tuple(pivots),
            rank=len(pivots),
            reduced=True,
            row_swaps=swaps,
            tolerance=tol,
        )
        return Result(
            params=params,
            info={
                'method': 'gauss_jordan',
                'rank': len(pivots),
                'pivot_columns': list(pivots),
                'row_swaps': swaps,
                'tolerance': tol,
                'dtype': str(A.dtype),
            },
            timing=timer.result(),
            backend_name=self.name,
        )


class CPUForwardEliminationBackend:
    """
    Forward elimination with column-0 pivoting and exact comparisons.

    For each pivot row i (up to min(rows, cols)):
        1. for j in i..rows-1, swap rows i and j if A[i, 0] != 1 and A[j, 0] > 0
        2. if A[i, 0] != 1, divide row i by A[i, i] (skipped when A[i, i] == 0)
        3. subtract A[j, i] * row i from every row j below i
    """

    @property
    def name(self) -> str:
        return 'cpu_forward'

    def solve(self, design: EchelonDesign) -> Result[EchelonParams]:
        timer = Timer()
        timer.start()

        A = design.data.copy()
        rows, cols = design.shape
        zero = A.dtype.type(0)
        one = A.dtype.type(1)

        swaps = 0
        warnings_list: list[str] = []

        for i in range(min(rows, cols)):
            with timer.section('pivot_search'):
                for j in range(i, rows):
                    if A[i, 0] != one and A[j, 0] > zero:
                        if j != i:
                            _swap_rows(A, i, j)
                            swaps += 1

            with timer.section('normalize'):
                if A[i, 0] != one:
                    pivot = A[i, i]
                    if pivot == zero:
                        warnings_list.append(
                            f"zero pivot at ({i}, {i}); row {i} left unnormalized "
                            f"and column {i} not eliminated below it"
                        )
                    else:
                        A[i] = A[i] / pivot

            with timer.section('elimination'):
                factors = A[i + 1:, i].copy()
                A[i + 1:] -= np.outer(factors, A[i]).astype(A.dtype, copy=False)

        timer.stop()

        pivots = _leading_columns(A)

        params = EchelonParams(
            matrix=A,
            pivot_columns=pivots,
            rank=len(pivots),
            reduced=False,
            row_swaps=swaps,
            tolerance=None,
        )
        return Result(
            params=params,
            info={
                'method': 'forward',
                'rank': len(pivots),
                'pivot_columns': list(pivots),
                'row_swaps': swaps,
                'tolerance': None,
                'dtype': str(A.dtype),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
