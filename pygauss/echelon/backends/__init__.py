"""Row-reduction backends."""

from pygauss.echelon.backends.cpu import (
    CPUGaussJordanBackend,
    CPUForwardEliminationBackend,
)

__all__ = [
    "CPUGaussJordanBackend",
    "CPUForwardEliminationBackend",
]
