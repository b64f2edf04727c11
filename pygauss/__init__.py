"""
pygauss: dense integer and floating-point matrices for Python.

Submodules:
    matrix: IntegerMatrix, RealMatrix, widening conversion, literal builders
    echelon: Row reduction (Gauss-Jordan and forward elimination)
    core: Exceptions, validation, element domains, result envelope
"""

__version__ = "0.1.0"

from pygauss import matrix
from pygauss import echelon
from pygauss.matrix import (
    IntegerMatrix,
    RealMatrix,
    widen,
    mat,
    float_mat,
    int_identity,
    float_identity,
)
from pygauss.echelon import row_reduce, rref

__all__ = [
    "__version__",
    "matrix",
    "echelon",
    "IntegerMatrix",
    "RealMatrix",
    "widen",
    "mat",
    "float_mat",
    "int_identity",
    "float_identity",
    "row_reduce",
    "rref",
]
