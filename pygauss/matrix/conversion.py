"""
Widening conversion between element precisions.

One generic rule covers every pair: a conversion is allowed when it stays in
the matrix's domain, strictly increases the element width, and is a numpy
'safe' cast. Narrowing, same-width and cross-domain requests are rejected
before any data is touched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar
import numpy as np
from numpy.typing import DTypeLike

from pygauss.core.dtypes import can_widen, widening_targets
from pygauss.core.exceptions import WideningError

if TYPE_CHECKING:
    from pygauss.matrix._base import DenseMatrix

M = TypeVar('M', bound='DenseMatrix')


def widen(matrix: M, dtype: DTypeLike) -> M:
    """
    Losslessly promote a matrix to a wider element dtype.

    Shape and every element value are preserved exactly.

    Args:
        matrix: IntegerMatrix or RealMatrix to convert
        dtype: Target dtype, e.g. np.int64 or 'float64'

    Returns:
        New matrix of the same class with the target dtype

    Raises:
        WideningError: If dtype is not a lossless widening of matrix.dtype
    """
    source = matrix.dtype
    try:
        target = np.dtype(dtype)
    except TypeError as e:
        raise WideningError(
            f"{dtype!r} is not a valid dtype: {e}", source=source, target=dtype
        ) from e

    if not can_widen(source, target):
        allowed = ", ".join(str(d) for d in widening_targets(source)) or "none"
        raise WideningError(
            f"Cannot convert a {source} matrix to {target}: only lossless "
            f"widening is supported (allowed targets: {allowed})",
            source=source, target=target,
        )

    return type(matrix).from_flat(
        matrix.data.astype(target), matrix.rows, matrix.cols, dtype=target
    )
