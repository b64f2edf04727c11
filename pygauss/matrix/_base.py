"""
Dense row-major matrix engine shared by IntegerMatrix and RealMatrix.

Storage is a one-dimensional numpy array of length rows * cols; element
(i, j) lives at flat index j + i * cols. A matrix owns its storage: every
constructor copies its input, every transform allocates a new instance,
and only element assignment mutates in place.

Subclasses bind an ElementDomain and may override the two arithmetic
kernels (_elementwise, _product) to change how results are computed.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Iterator, TypeVar
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pygauss.core.dtypes import (
    ElementDomain,
    additive_identity,
    multiplicative_identity,
)
from pygauss.core.exceptions import (
    DimensionError,
    ElementTypeError,
    MatrixIndexError,
    ValidationError,
)
from pygauss.core.validation import (
    check_2d,
    check_dimensions,
    check_index,
    check_inner_dimensions,
    check_rectangular,
    check_same_shape,
    coerce_elements,
    coerce_scalar,
)
from pygauss.matrix.conversion import widen
from pygauss.matrix.display import format_matrix

M = TypeVar('M', bound='DenseMatrix')


class DenseMatrix:
    """
    A 2-dimensional dense matrix of size (rows, cols).

    Not instantiated directly; use IntegerMatrix or RealMatrix.

    Construction:
        Matrix(rows, cols)                  zero-filled
        Matrix.from_flat(data, rows, cols)  row-major sequence
        Matrix.from_array(data)             list of rows or 2D array
        Matrix.identity(size)
    """
    _domain: ClassVar[ElementDomain]

    __slots__ = ('_rows', '_cols', '_data')

    def __init__(self, rows: int, cols: int, dtype: DTypeLike | None = None):
        n_rows, n_cols = check_dimensions(rows, cols)
        resolved = self._domain.resolve(dtype)
        self._rows = n_rows
        self._cols = n_cols
        self._data = np.full(
            n_rows * n_cols, additive_identity(resolved), dtype=resolved
        )

    # --- Construction ---

    @classmethod
    def _wrap(cls: type[M], data: NDArray[Any], rows: int, cols: int) -> M:
        """Adopt an owned flat array without copying or validating."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._data = data
        return obj

    @classmethod
    def _infer_dtype(cls, data: Any, dtype: DTypeLike | None) -> np.dtype:
        # Arrays already in this domain keep their dtype
        if dtype is None and isinstance(data, np.ndarray) and cls._domain.admits(data.dtype):
            return data.dtype
        return cls._domain.resolve(dtype)

    @classmethod
    def from_flat(
        cls: type[M],
        data: ArrayLike,
        rows: int,
        cols: int,
        dtype: DTypeLike | None = None,
    ) -> M:
        """
        Build a matrix from a row-major flat sequence.

        Args:
            data: rows * cols values, row after row
            rows: Number of rows
            cols: Number of columns
            dtype: Element dtype; defaults to the input array's dtype when it
                   belongs to this domain, else the domain default

        Raises:
            ConstructionError: If rows or cols < 1
            DimensionError: If data is not flat or has the wrong length
        """
        n_rows, n_cols = check_dimensions(rows, cols)
        resolved = cls._infer_dtype(data, dtype)
        array = coerce_elements(data, resolved, 'data')
        if array.ndim != 1:
            raise DimensionError(
                f"data: expected a flat sequence, got shape {array.shape}",
                expected=(n_rows * n_cols,), got=array.shape, operation='construct',
            )
        if array.size != n_rows * n_cols:
            raise DimensionError(
                f"data: {array.size} values cannot fill a ({n_rows}, {n_cols}) "
                f"matrix, expected {n_rows * n_cols}",
                expected=(n_rows * n_cols,), got=(array.size,), operation='construct',
            )
        return cls._wrap(array, n_rows, n_cols)

    @classmethod
    def from_array(cls: type[M], data: ArrayLike, dtype: DTypeLike | None = None) -> M:
        """
        Build a matrix from a list of rows or a 2D array.

        Raises:
            ConstructionError: If there are no rows or no columns
            DimensionError: If rows have inconsistent lengths or data isn't 2D
        """
        resolved = cls._infer_dtype(data, dtype)
        if not isinstance(data, np.ndarray):
            try:
                rows = list(data)
            except TypeError as e:
                raise ValidationError(
                    f"data: expected a sequence of rows, got {type(data).__name__}"
                ) from e
            for idx, row in enumerate(rows):
                if np.ndim(row) != 1:
                    raise DimensionError(
                        f"data: row {idx} is not a flat sequence of values",
                        operation='construct',
                    )
            check_rectangular(rows, 'data')
            data = rows
        array = coerce_elements(data, resolved, 'data')
        check_2d(array, 'data')
        n_rows, n_cols = check_dimensions(*array.shape)
        return cls._wrap(array.ravel(), n_rows, n_cols)

    @classmethod
    def identity(cls: type[M], size: int, dtype: DTypeLike | None = None) -> M:
        """Create a size x size identity matrix."""
        identity = cls(size, size, dtype=dtype)
        one = multiplicative_identity(identity.dtype)
        for i in range(identity._rows):
            identity._data[i + i * identity._cols] = one
        return identity

    # --- Shape and storage ---

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

    @property
    def data(self) -> NDArray[Any]:
        """Read-only view of the row-major storage."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def size(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    def _grid(self) -> NDArray[Any]:
        return self._data.reshape(self._rows, self._cols)

    # --- Element access ---

    def get(self, i: int, j: int) -> Any:
        """Element at row i, column j."""
        return self._data[check_index(i, j, self.shape)]

    def set(self, i: int, j: int, value: Any) -> None:
        """Overwrite the element at row i, column j in place."""
        idx = check_index(i, j, self.shape)
        self._data[idx] = coerce_scalar(value, self.dtype, f"value at ({i}, {j})")

    @staticmethod
    def _split_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise MatrixIndexError(
                f"Matrix indices must be an (i, j) pair, got {key!r}"
            )
        return key

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self.get(*self._split_key(key))

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self.set(*self._split_key(key), value)

    def __iter__(self) -> Iterator[Any]:
        """Iterate elements in row-major order."""
        return iter(self._data)

    # --- Transforms ---

    def transpose(self: M) -> M:
        """New (cols, rows) matrix with result[i, j] == self[j, i]."""
        return self._wrap(self._grid().T.flatten(), self._cols, self._rows)

    def t(self: M) -> M:
        """Alias for transpose()."""
        return self.transpose()

    @property
    def T(self: M) -> M:
        return self.transpose()

    def copy(self: M) -> M:
        return self._wrap(self._data.copy(), self._rows, self._cols)

    def widen(self: M, dtype: DTypeLike) -> M:
        """Losslessly promote to a wider dtype of the same domain."""
        return widen(self, dtype)

    def to_numpy(self) -> NDArray[Any]:
        """2D copy of the matrix."""
        return self._grid().copy()

    def to_list(self) -> list[list[Any]]:
        """Nested lists of Python scalars, one list per row."""
        return self._grid().tolist()

    # --- Arithmetic ---

    def _check_operand(self, other: DenseMatrix, operation: str) -> None:
        if other._domain is not self._domain:
            raise ElementTypeError(
                f"Cannot {operation} a {type(self).__name__} and a "
                f"{type(other).__name__}",
                dtype=other.dtype,
            )
        if other.dtype != self.dtype:
            raise ElementTypeError(
                f"Cannot {operation} matrices of dtype {self.dtype} and "
                f"{other.dtype}; widen one operand first",
                dtype=other.dtype,
            )

    def _elementwise(
        self,
        ufunc: Callable[[NDArray[Any], NDArray[Any]], NDArray[Any]],
        other: DenseMatrix,
        operation: str,
    ) -> NDArray[Any]:
        return ufunc(self._data, other._data).astype(self.dtype, copy=False)

    def _product(self, other: DenseMatrix) -> NDArray[Any]:
        return (self._grid() @ other._grid()).astype(self.dtype, copy=False).ravel()

    def add(self: M, other: M) -> M:
        """
        Elementwise sum.

        Raises:
            ElementTypeError: If the operands differ in domain or dtype
            DimensionError: If the shapes differ
        """
        self._check_operand(other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        return self._wrap(self._elementwise(np.add, other, 'add'), self._rows, self._cols)

    def subtract(self: M, other: M) -> M:
        """
        Elementwise difference.

        Raises:
            ElementTypeError: If the operands differ in domain or dtype
            DimensionError: If the shapes differ
        """
        self._check_operand(other, 'subtract')
        check_same_shape(self.shape, other.shape, 'subtract')
        return self._wrap(
            self._elementwise(np.subtract, other, 'subtract'), self._rows, self._cols
        )

    def multiply(self: M, other: M) -> M:
        """
        Matrix product, shape (self.rows, other.cols).

        Raises:
            ElementTypeError: If the operands differ in domain or dtype
            DimensionError: If self.cols != other.rows
        """
        self._check_operand(other, 'multiply')
        check_inner_dimensions(self.shape, other.shape)
        return self._wrap(self._product(other), self._rows, other._cols)

    def __add__(self: M, other: Any) -> M:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self: M, other: Any) -> M:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self: M, other: Any) -> M:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.multiply(other)

    __matmul__ = __mul__

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return (
            other._domain is self._domain
            and self.shape == other.shape
            and bool(np.array_equal(self._data, other._data))
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rows={self._rows}, cols={self._cols}, "
            f"dtype={self.dtype})"
        )
