"""
Dense matrix module.

Public API:
    IntegerMatrix     - matrix over int8..int64 / uint8..uint64
    RealMatrix        - matrix over float16/32/64, with rref()
    widen(m, dtype)   - lossless promotion to a wider dtype
    mat(...)          - IntegerMatrix literal builder
    float_mat(...)    - RealMatrix literal builder
    int_identity(n)   - uint8 identity
    float_identity(n) - float32 identity
    format_matrix(m)  - row-per-line text rendering
"""

from pygauss.matrix._base import DenseMatrix
from pygauss.matrix.integer import IntegerMatrix
from pygauss.matrix.real import RealMatrix
from pygauss.matrix.conversion import widen
from pygauss.matrix.display import format_matrix
from pygauss.matrix.builders import (
    mat,
    float_mat,
    int_identity,
    float_identity,
    parse_grid,
)

__all__ = [
    "DenseMatrix",
    "IntegerMatrix",
    "RealMatrix",
    "widen",
    "format_matrix",
    "mat",
    "float_mat",
    "int_identity",
    "float_identity",
    "parse_grid",
]
