"""
Input validation utilities for pygauss.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (integer matrices never truncate floats)
    - No wrapping, padding or broadcasting of indices and shapes
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import operator
from typing import Any, Sequence
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pygauss.core.exceptions import (
    ConstructionError,
    DimensionError,
    ElementTypeError,
    IntegerOverflowError,
    MatrixIndexError,
    ValidationError,
)


def _as_count(value: Any) -> int | None:
    """Integer value of a dimension, or None if it isn't an integer."""
    if isinstance(value, (bool, np.bool_)):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def check_dimensions(rows: Any, cols: Any) -> tuple[int, int]:
    """
    Verify a requested matrix shape is constructible.

    Args:
        rows: Requested number of rows
        cols: Requested number of columns

    Returns:
        (rows, cols) as plain ints

    Raises:
        ConstructionError: If either dimension is not an integer or is < 1
    """
    n_rows = _as_count(rows)
    n_cols = _as_count(cols)
    if n_rows is None or n_cols is None:
        raise ConstructionError(
            f"Matrix dimensions must be integers, got rows={rows!r}, cols={cols!r}",
            rows=rows, cols=cols,
        )
    if n_rows < 1 or n_cols < 1:
        raise ConstructionError(
            f"Cannot initialize a matrix with rows or columns less than 1 "
            f"(rows={n_rows}, cols={n_cols})",
            rows=n_rows, cols=n_cols,
        )
    return n_rows, n_cols


def check_index(i: Any, j: Any, shape: tuple[int, int]) -> int:
    """
    Verify (i, j) addresses an element and return its flat index.

    Negative indices are rejected, not wrapped.

    Args:
        i: Row index
        j: Column index
        shape: (rows, cols) of the matrix

    Returns:
        Row-major flat index j + i * cols

    Raises:
        MatrixIndexError: If either index is not an integer or out of range
    """
    rows, cols = shape
    row = _as_count(i)
    col = _as_count(j)
    if row is None or col is None:
        raise MatrixIndexError(
            f"Matrix indices must be integers, got ({i!r}, {j!r})",
            index=(i, j), shape=shape,
        )
    if not (0 <= row < rows and 0 <= col < cols):
        raise MatrixIndexError(
            f"Index ({row}, {col}) out of range for matrix of size ({rows}, {cols})",
            index=(row, col), shape=shape,
        )
    return col + row * cols


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes (add, subtract).

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"Cannot {operation} matrices of size {left} and size {right}",
            expected=left, got=right, operation=operation,
        )


def check_inner_dimensions(left: tuple[int, int], right: tuple[int, int]) -> None:
    """
    Verify left.cols == right.rows (matrix product).

    Raises:
        DimensionError: If the inner dimensions disagree
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"Cannot multiply matrices of size {left} and size {right}: "
            f"left has {left[1]} columns but right has {right[0]} rows",
            expected=(left[1], right[1]), got=right, operation='multiply',
        )


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify a list of rows is non-empty and every row has the same length.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (n_rows, n_cols)

    Raises:
        ConstructionError: If there are no rows or the rows are empty
        DimensionError: If row lengths are inconsistent
    """
    n_rows = len(rows)
    if n_rows == 0:
        raise ConstructionError(f"{name}: no rows given", rows=0, cols=0)
    lengths = [len(row) for row in rows]
    n_cols = lengths[0]
    for idx, length in enumerate(lengths):
        if length != n_cols:
            raise DimensionError(
                f"{name}: inconsistent matrix columns, row {idx} has {length} "
                f"elements but row 0 has {n_cols}",
                expected=(n_cols,), got=(length,), operation='construct',
            )
    check_dimensions(n_rows, n_cols)
    return n_rows, n_cols


def _check_integer_range(
    low: int,
    high: int,
    dtype: np.dtype,
    name: str,
) -> None:
    info = np.iinfo(dtype)
    if low < int(info.min) or high > int(info.max):
        raise IntegerOverflowError(
            f"{name}: values in [{low}, {high}] do not fit {dtype} "
            f"(range [{info.min}, {info.max}])",
            dtype=dtype, minimum=low, maximum=high,
        )


def coerce_elements(values: ArrayLike, dtype: DTypeLike, name: str) -> NDArray[Any]:
    """
    Convert array-like values to an owned array of the given element dtype.

    Integer targets accept only integer input and check that every value
    fits the dtype. Floating targets accept integer and floating input.
    Booleans, complex numbers, strings and other objects are rejected.

    Args:
        values: Input values (any shape)
        dtype: Target element dtype
        name: Parameter name for error messages

    Returns:
        A new numpy array of dtype with the same shape as values

    Raises:
        ValidationError: If values cannot be converted to an array
        ElementTypeError: If values are of a kind the dtype can't hold
        IntegerOverflowError: If integer values fall outside the dtype range
    """
    target = np.dtype(dtype)
    try:
        array = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    kind = array.dtype.kind
    is_int_target = target.kind in 'iu'

    if kind == 'O':
        # Python ints too large for int64/uint64 land here
        flat = array.ravel().tolist()
        if not is_int_target or not all(
            isinstance(v, int) and not isinstance(v, bool) for v in flat
        ):
            raise ElementTypeError(
                f"{name}: converted to object dtype, indicating mixed types "
                f"or non-numeric data",
                dtype=array.dtype,
            )
        if flat:
            _check_integer_range(min(flat), max(flat), target, name)
        return np.array(flat, dtype=target).reshape(array.shape)

    if is_int_target:
        if kind not in 'iu':
            raise ElementTypeError(
                f"{name}: {array.dtype} values cannot be stored in an integer "
                f"matrix of dtype {target}",
                dtype=array.dtype,
            )
        if array.size:
            _check_integer_range(int(array.min()), int(array.max()), target, name)
        return array.astype(target, copy=True)

    if kind not in 'iuf':
        raise ElementTypeError(
            f"{name}: non-numeric dtype {array.dtype}, expected real numbers",
            dtype=array.dtype,
        )
    return array.astype(target, copy=True)


def coerce_scalar(value: Any, dtype: DTypeLike, name: str) -> Any:
    """
    Convert one value to a numpy scalar of dtype, with coerce_elements rules.

    Raises:
        ValidationError: If value is not a scalar
    """
    if np.ndim(value) != 0:
        raise ValidationError(
            f"{name}: expected a scalar, got shape {np.shape(value)}"
        )
    return coerce_elements([value], dtype, name)[0]


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            expected=(2,), got=(array.ndim,),
        )


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )
