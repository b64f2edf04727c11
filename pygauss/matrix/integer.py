"""
IntegerMatrix: dense matrix over exact integer dtypes.

Arithmetic is exact. Results are computed with unbounded Python integers and
then checked against the dtype range, so an overflowing sum or product
raises IntegerOverflowError instead of wrapping around.
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from pygauss.core.dtypes import INTEGER
from pygauss.core.exceptions import IntegerOverflowError
from pygauss.matrix._base import DenseMatrix


def _fit(exact: NDArray[np.object_], dtype: np.dtype, operation: str) -> NDArray[Any]:
    """Cast exact integer results to dtype, refusing any that don't fit."""
    values = exact.ravel().tolist()
    info = np.iinfo(dtype)
    low, high = min(values), max(values)
    if low < int(info.min) or high > int(info.max):
        raise IntegerOverflowError(
            f"{operation} overflowed {dtype}: results span [{low}, {high}], "
            f"dtype holds [{info.min}, {info.max}]",
            dtype=dtype, minimum=low, maximum=high,
        )
    return np.array(values, dtype=dtype)


class IntegerMatrix(DenseMatrix):
    """
    A 2-dimensional matrix of integers with size (rows, cols).

    Admits int8/16/32/64 and uint8/16/32/64; defaults to int32.

    Examples:
        >>> m = IntegerMatrix(2, 2)
        >>> m[0, 0], m[0, 1], m[1, 0], m[1, 1] = 1, 2, 3, 4
        >>> (m * IntegerMatrix.identity(2)) == m
        True
    """
    _domain = INTEGER

    __slots__ = ()

    def _elementwise(
        self,
        ufunc: Callable[[NDArray[Any], NDArray[Any]], NDArray[Any]],
        other: DenseMatrix,
        operation: str,
    ) -> NDArray[Any]:
        exact = ufunc(self._data.astype(object), other._data.astype(object))
        return _fit(exact, self.dtype, operation)

    def _product(self, other: DenseMatrix) -> NDArray[Any]:
        exact = self._grid().astype(object) @ other._grid().astype(object)
        return _fit(exact, self.dtype, 'multiply')
