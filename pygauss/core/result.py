"""
Generic result container for pygauss computations.

Algorithms that produce more than a single matrix (row reduction reports
pivots, rank and swaps) return their payload inside this envelope, so that
timing, diagnostics and non-fatal warnings travel with the answer.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (method, rank, tolerance)
    - timing is optional
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The algorithm-specific payload type

    Attributes:
        params: Algorithm-specific payload (reduced matrix, pivots, ...)
        info: Structured metadata (method, rank, pivot columns, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EchelonParams(matrix=A, pivot_columns=(0, 1), rank=2, ...),
        ...     info={'method': 'gauss_jordan', 'rank': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
