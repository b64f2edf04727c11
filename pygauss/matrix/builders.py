"""
Literal builders and identity helpers.

    mat(2, 3)                 zero-filled 2x3 IntegerMatrix
    mat([[1, 2], [3, 4]])     IntegerMatrix from rows
    mat("1, 2; 3, 4")         IntegerMatrix from a grid literal
    float_mat(...)            the same three forms for RealMatrix (float32)

Grid literals separate rows with ';' and values with commas and/or
whitespace. A trailing ';' is allowed. Rows of different lengths are
rejected.
"""

from __future__ import annotations

import re
from typing import Any, Callable, TypeVar
import numpy as np
from numpy.typing import DTypeLike

from pygauss.core.exceptions import ElementTypeError, ValidationError
from pygauss.core.validation import check_rectangular
from pygauss.matrix._base import DenseMatrix
from pygauss.matrix.integer import IntegerMatrix
from pygauss.matrix.real import RealMatrix

M = TypeVar('M', bound=DenseMatrix)

_VALUE_SEPARATOR = re.compile(r'[,\s]+')


def parse_grid(text: str, convert: Callable[[str], Any]) -> list[list[Any]]:
    """
    Split a grid literal into rows of converted values.

    Args:
        text: Grid literal such as "1, 2, 3; 4, 5, 6;"
        convert: Converts one token (int or float)

    Returns:
        List of rows

    Raises:
        ElementTypeError: If a token can't be converted
        DimensionError: If rows have different lengths
    """
    chunks = text.split(';')
    # One trailing separator ends the literal, like the last row's ';'
    if len(chunks) > 1 and not chunks[-1].strip():
        chunks = chunks[:-1]

    rows = []
    for chunk in chunks:
        tokens = [tok for tok in _VALUE_SEPARATOR.split(chunk.strip()) if tok]
        try:
            rows.append([convert(tok) for tok in tokens])
        except ValueError as e:
            raise ElementTypeError(
                f"grid literal: {e} in row {chunk.strip()!r}"
            ) from e
    check_rectangular(rows, 'grid literal')
    return rows


def _build(
    cls: type[M],
    args: tuple[Any, ...],
    dtype: DTypeLike | None,
    convert: Callable[[str], Any],
    name: str,
) -> M:
    if len(args) == 2:
        rows, cols = args
        return cls(rows, cols, dtype=dtype)
    if len(args) == 1:
        (source,) = args
        if isinstance(source, str):
            return cls.from_array(parse_grid(source, convert), dtype=dtype)
        return cls.from_array(source, dtype=dtype)
    raise ValidationError(
        f"{name}() takes (rows, cols) or a single grid of values, "
        f"got {len(args)} positional arguments"
    )


def mat(*args: Any, dtype: DTypeLike | None = None) -> IntegerMatrix:
    """
    Build an IntegerMatrix from (rows, cols) or a grid of values.

    Defaults to int32.
    """
    return _build(IntegerMatrix, args, dtype, int, 'mat')


def float_mat(*args: Any, dtype: DTypeLike | None = None) -> RealMatrix:
    """
    Build a RealMatrix from (rows, cols) or a grid of values.

    Defaults to float32; pass dtype=np.float64 or call .widen() for doubles.
    """
    return _build(RealMatrix, args, dtype, float, 'float_mat')


def int_identity(size: int) -> IntegerMatrix:
    """size x size uint8 identity."""
    return IntegerMatrix.identity(size, dtype=np.uint8)


def float_identity(size: int) -> RealMatrix:
    """size x size float32 identity."""
    return RealMatrix.identity(size, dtype=np.float32)
