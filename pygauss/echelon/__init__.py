"""
Row reduction module.

Public API:
    row_reduce(m)  - reduced matrix plus pivots, rank, timing, warnings
    rref(m)        - reduced matrix only

Methods:
    'gauss_jordan' - reduced row echelon form, partial pivoting (default)
    'forward'      - forward elimination with exact comparisons
"""

from pygauss.echelon.design import EchelonDesign
from pygauss.echelon.solution import EchelonParams, EchelonSolution
from pygauss.echelon.solvers import row_reduce, rref

__all__ = [
    "row_reduce",
    "rref",
    "EchelonDesign",
    "EchelonParams",
    "EchelonSolution",
]
