"""
Row-reduction solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pygauss.core.result import Result
from pygauss.matrix.real import RealMatrix

if TYPE_CHECKING:
    from pygauss.echelon.design import EchelonDesign


@dataclass(frozen=True)
class EchelonParams:
    """
    Parameter payload for row reduction.

    Attributes:
        matrix: Reduced matrix (rows x cols), same dtype as the input
        pivot_columns: Column index of each pivot, in row order
        rank: Number of pivots found
        reduced: True for reduced row echelon form (entries above pivots
                 cleared), False for row echelon form only
        row_swaps: Number of row interchanges performed
        tolerance: Magnitude treated as zero, or None for exact comparison
    """
    matrix: NDArray[np.floating[Any]]
    pivot_columns: tuple[int, ...]
    rank: int
    reduced: bool
    row_swaps: int
    tolerance: float | None = None


@dataclass
class EchelonSolution:
    """
    User-facing row-reduction results.

    Wraps Result[EchelonParams] and provides convenient accessors.
    """
    _result: Result[EchelonParams]
    _design: 'EchelonDesign'

    @property
    def matrix(self) -> RealMatrix:
        """Reduced matrix as a new RealMatrix."""
        return RealMatrix.from_array(self._result.params.matrix)

    @property
    def array(self) -> NDArray[np.floating[Any]]:
        """Reduced matrix as a 2D array."""
        return self._result.params.matrix

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.params.pivot_columns

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def reduced(self) -> bool:
        return self._result.params.reduced

    @property
    def row_swaps(self) -> int:
        return self._result.params.row_swaps

    @property
    def tolerance(self) -> float | None:
        return self._result.params.tolerance

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self) -> str:
        """Text report: method, rank, pivots, then the reduced matrix."""
        form = "reduced row echelon form" if self.reduced else "row echelon form"
        lines = [
            f"Row reduction ({self.info.get('method', self.backend_name)}): {form}",
            f"  size: {self._design.rows} x {self._design.cols}",
            f"  rank: {self.rank}",
            f"  pivot columns: {list(self.pivot_columns)}",
            f"  row swaps: {self.row_swaps}",
        ]
        if self.tolerance is not None:
            lines.append(f"  zero tolerance: {self.tolerance:.3e}")
        for warning in self.warnings:
            lines.append(f"  warning: {warning}")
        lines.append(str(self.matrix))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EchelonSolution(rows={self._design.rows}, cols={self._design.cols}, "
            f"rank={self.rank}, reduced={self.reduced})"
        )
