"""
EchelonDesign: validated input for row reduction.

Wraps a 2D floating-point array and provides shape and dtype metadata to
the row-reduction backends. Immutable after construction; backends work on
their own copy of the data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pygauss.core.dtypes import REAL
from pygauss.core.exceptions import ElementTypeError
from pygauss.core.validation import (
    check_2d,
    check_dimensions,
    check_finite,
    coerce_elements,
)

if TYPE_CHECKING:
    from pygauss.matrix.real import RealMatrix


@dataclass(frozen=True)
class EchelonDesign:
    """
    Design for row reduction.

    Construction:
        EchelonDesign.from_matrix(real_matrix)
        EchelonDesign.from_array(data, dtype=np.float64)
    """
    _data: NDArray[np.floating[Any]]
    _rows: int
    _cols: int

    @classmethod
    def from_matrix(cls, matrix: Any) -> EchelonDesign:
        """
        Build from a RealMatrix, keeping its dtype.

        Raises:
            ElementTypeError: If matrix is not real-valued (e.g. IntegerMatrix)
        """
        from pygauss.matrix.real import RealMatrix

        if not isinstance(matrix, RealMatrix):
            raise ElementTypeError(
                f"Row reduction needs division; expected a RealMatrix, got "
                f"{type(matrix).__name__}",
                dtype=getattr(matrix, 'dtype', None),
            )
        return cls._build(matrix.to_numpy())

    @classmethod
    def from_array(
        cls,
        data: ArrayLike,
        dtype: DTypeLike | None = np.float64,
    ) -> EchelonDesign:
        """
        Build from a 2D array-like.

        Parameters
        ----------
        data : array-like
            2D matrix (list of rows or ndarray).
        dtype : dtype
            Real dtype to reduce in. Default float64.
        """
        resolved = REAL.resolve(dtype)
        return cls._build(coerce_elements(data, resolved, 'data'))

    @classmethod
    def _build(cls, data: NDArray[np.floating[Any]]) -> EchelonDesign:
        """Internal builder with validation."""
        check_2d(data, 'data')
        rows, cols = check_dimensions(*data.shape)
        check_finite(data, 'data')
        data.flags.writeable = False
        return cls(_data=data, _rows=rows, _cols=cols)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Input matrix (rows x cols), read-only."""
        return self._data

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def to_matrix(self) -> RealMatrix:
        """The input as a RealMatrix."""
        from pygauss.matrix.real import RealMatrix
        return RealMatrix.from_array(self._data)
