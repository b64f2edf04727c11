"""
Core protocols for pygauss.

Structural interfaces used at the seams between components. We use
Protocol (structural typing) rather than ABC so that renderers and
backends only depend on the handful of members they actually call.
"""

from typing import Any, Iterator, Protocol, TypeVar, TYPE_CHECKING, runtime_checkable
import numpy as np

if TYPE_CHECKING:
    from pygauss.core.result import Result

P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class ElementGrid(Protocol):
    """
    Anything that can be rendered as a rectangular grid of elements.

    The display layer consumes nothing beyond this: the shape, the element
    dtype (to pick a number format) and a row-major element iterator that
    is finite and restartable.
    """

    @property
    def rows(self) -> int:
        ...

    @property
    def cols(self) -> int:
        ...

    @property
    def dtype(self) -> np.dtype:
        ...

    def __iter__(self) -> Iterator[Any]:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a validated design and produces a Result envelope.
    Backends are stateless; all configuration is passed at construction.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss_jordan'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            ValidationError: If design is invalid for this backend
        """
        ...
