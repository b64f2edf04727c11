"""
Core infrastructure for pygauss.

Shared abstractions used by the matrix engine and the row-reduction
pipeline.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    dtypes: Element domains and widening rules
    protocols: ElementGrid, Backend protocols
    result: Generic Result[P] envelope
    compute: Timing and tolerance tiers
"""

from pygauss.core.protocols import ElementGrid, Backend
from pygauss.core.result import Result
from pygauss.core.dtypes import (
    ElementDomain,
    INTEGER,
    REAL,
    DEFAULT_INTEGER_DTYPE,
    DEFAULT_REAL_DTYPE,
    can_widen,
    widening_targets,
)
from pygauss.core.exceptions import (
    PyGaussError,
    ValidationError,
    ConstructionError,
    DimensionError,
    ElementTypeError,
    WideningError,
    MatrixIndexError,
    NumericalError,
    IntegerOverflowError,
)

__all__ = [
    # Protocols
    "ElementGrid",
    "Backend",
    # Result
    "Result",
    # Element domains
    "ElementDomain",
    "INTEGER",
    "REAL",
    "DEFAULT_INTEGER_DTYPE",
    "DEFAULT_REAL_DTYPE",
    "can_widen",
    "widening_targets",
    # Exceptions
    "PyGaussError",
    "ValidationError",
    "ConstructionError",
    "DimensionError",
    "ElementTypeError",
    "WideningError",
    "MatrixIndexError",
    "NumericalError",
    "IntegerOverflowError",
]
