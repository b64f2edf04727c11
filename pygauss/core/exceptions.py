"""
Exception hierarchy for pygauss.

All exceptions inherit from PyGaussError so callers can catch any
library-specific error in one place. Errors that correspond to a builtin
category (bad types, bad indices, overflow) also inherit from that builtin,
so generic handlers keep working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyGaussError(Exception):
    """Base exception for all pygauss errors."""
    pass


class ValidationError(PyGaussError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ConstructionError(ValidationError):
    """
    A matrix was requested with non-positive or non-integer dimensions.

    This is a precondition violation: a matrix with zero rows or columns
    cannot exist, so the constructor never returns a value.

    Attributes:
        rows: Requested row count
        cols: Requested column count
    """

    def __init__(self, message: str, rows: object = None, cols: object = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class DimensionError(ValidationError):
    """
    Matrix dimensions are incompatible for the requested operation.

    Raised when operand shapes don't satisfy an operation's contract
    (equal shapes for add/subtract, matching inner dimensions for
    multiply) or when flat data doesn't match the declared shape.

    Attributes:
        expected: The shape (or shape fragment) that was required
        got: The shape that was supplied
        operation: Name of the operation that rejected the shapes
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        got: tuple[int, ...] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.got = got
        self.operation = operation


class ElementTypeError(ValidationError, TypeError):
    """
    An element type is not admitted by the matrix's element domain.

    Raised for dtypes outside the domain, for operands of different
    domains or dtypes, and for values that cannot be represented
    (e.g. 1.5 stored into an integer matrix).

    Attributes:
        dtype: The offending dtype, if known
    """

    def __init__(self, message: str, dtype: object = None):
        super().__init__(message)
        self.dtype = dtype


class WideningError(ElementTypeError):
    """
    A requested element-type conversion is not a lossless widening.

    Attributes:
        source: Source dtype
        target: Requested target dtype
    """

    def __init__(self, message: str, source: object = None, target: object = None):
        super().__init__(message, dtype=target)
        self.source = source
        self.target = target


class MatrixIndexError(ValidationError, IndexError):
    """
    Element index outside the matrix.

    Attributes:
        index: The (i, j) pair that was requested
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[object, object] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyGaussError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class IntegerOverflowError(NumericalError, OverflowError):
    """
    An exact integer result does not fit the element dtype.

    Integer matrices never wrap around silently; the operation is
    abandoned and this error is raised instead.

    Attributes:
        dtype: The integer dtype that could not hold the result
        minimum: Smallest value produced
        maximum: Largest value produced
    """

    def __init__(
        self,
        message: str,
        dtype: object = None,
        minimum: int | None = None,
        maximum: int | None = None,
    ):
        super().__init__(message)
        self.dtype = dtype
        self.minimum = minimum
        self.maximum = maximum
