"""
Solver dispatch for row reduction.

Provides row_reduce() as the full entry point (reduced matrix plus pivots,
rank, timing and warnings) and rref() for just the reduced matrix.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Literal
import warnings

from pygauss.core.exceptions import ValidationError
from pygauss.echelon.design import EchelonDesign
from pygauss.echelon.solution import EchelonSolution
from pygauss.echelon.backends.cpu import (
    CPUForwardEliminationBackend,
    CPUGaussJordanBackend,
)
from pygauss.matrix._base import DenseMatrix
from pygauss.matrix.real import RealMatrix


Method = Literal['gauss_jordan', 'forward']


def _ensure_design(matrix: Any) -> EchelonDesign:
    """Convert a matrix or raw array to EchelonDesign if needed."""
    if isinstance(matrix, EchelonDesign):
        return matrix
    if isinstance(matrix, DenseMatrix):
        return EchelonDesign.from_matrix(matrix)
    return EchelonDesign.from_array(matrix)


def _get_backend(method: Method, tol: float | None):
    """Select backend for the requested method."""
    if method == 'gauss_jordan':
        if tol is not None:
            if isinstance(tol, bool) or not isinstance(tol, Real):
                raise ValidationError(
                    f"tol must be a real number, got {type(tol).__name__}"
                )
            if not tol >= 0:
                raise ValidationError(f"tol must be non-negative, got {tol!r}")
        return CPUGaussJordanBackend(tol=tol)

    if method == 'forward':
        if tol is not None:
            raise ValidationError(
                "tol applies only to method='gauss_jordan'; forward "
                "elimination compares exactly"
            )
        return CPUForwardEliminationBackend()

    raise ValidationError(
        f"Unknown method: {method!r}. Must be 'gauss_jordan' or 'forward'."
    )


def row_reduce(
    matrix: RealMatrix | EchelonDesign | Any,
    *,
    method: Method = 'gauss_jordan',
    tol: float | None = None,
) -> EchelonSolution:
    """
    Row-reduce a real matrix.

    Parameters
    ----------
    matrix : RealMatrix, EchelonDesign or array-like
        Matrix to reduce. Array-likes are reduced in float64.
        IntegerMatrix is rejected.
    method : str
        'gauss_jordan' (default): reduced row echelon form with partial
        pivoting. 'forward': forward elimination only, exact comparisons.
    tol : float, optional
        Zero tolerance for 'gauss_jordan'.

    Returns
    -------
    EchelonSolution with the reduced matrix, pivot columns and rank.

    Warns
    -----
    RuntimeWarning
        For every zero pivot the forward routine had to skip.
    """
    design = _ensure_design(matrix)
    backend = _get_backend(method, tol)

    result = backend.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return EchelonSolution(_result=result, _design=design)


def rref(
    matrix: RealMatrix | EchelonDesign | Any,
    *,
    method: Method = 'gauss_jordan',
    tol: float | None = None,
) -> RealMatrix:
    """Row-reduce and return only the reduced matrix. See row_reduce()."""
    return row_reduce(matrix, method=method, tol=tol).matrix
