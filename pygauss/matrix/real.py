"""
RealMatrix: dense matrix over floating-point dtypes.

Adds what only makes sense with division and inexact arithmetic: row
reduction and tolerance-based comparison.
"""

from __future__ import annotations

from typing import Literal
import numpy as np

from pygauss.core.compute.tolerances import select_tolerance
from pygauss.core.dtypes import REAL
from pygauss.matrix._base import DenseMatrix


class RealMatrix(DenseMatrix):
    """
    A 2-dimensional matrix of floating-point numbers with size (rows, cols).

    Admits float16/32/64; defaults to float32.
    """
    _domain = REAL

    __slots__ = ()

    def rref(
        self,
        method: Literal['gauss_jordan', 'forward'] = 'gauss_jordan',
        tol: float | None = None,
    ) -> RealMatrix:
        """
        Row-reduce into a new matrix; self is left unmodified.

        Parameters
        ----------
        method : str
            'gauss_jordan' (default) gives the reduced row echelon form using
            partial pivoting and a zero tolerance. 'forward' runs forward
            elimination only with exact comparisons, giving row echelon form.
        tol : float, optional
            Pivot magnitude treated as zero ('gauss_jordan' only). Defaults
            to max(rows, cols) * eps * max|A|.

        See pygauss.echelon.row_reduce for pivots, rank and diagnostics.
        """
        from pygauss.echelon.solvers import rref
        return rref(self, method=method, tol=tol)

    def allclose(
        self,
        other: RealMatrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Shape-and-value comparison within floating tolerance.

        Tolerances default to the tier for the coarser of the two dtypes.
        """
        if not isinstance(other, RealMatrix) or self.shape != other.shape:
            return False
        coarser = min(self.dtype, other.dtype, key=lambda d: d.itemsize)
        tier = select_tolerance(coarser)
        return bool(np.allclose(
            self._data.astype(np.float64),
            other._data.astype(np.float64),
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))
