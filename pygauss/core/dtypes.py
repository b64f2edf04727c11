"""
Element domains and dtype rules.

A matrix's element type is a numpy dtype drawn from one of two closed
domains: exact integers or IEEE floating point. The domain decides which
dtypes a matrix class accepts, what its additive and multiplicative
identities are, and which conversions count as lossless widening.

Usage:
    from pygauss.core.dtypes import INTEGER, REAL, can_widen

    dtype = INTEGER.resolve('int16')
    can_widen(np.int16, np.int64)   # True
    can_widen(np.int64, np.int16)   # False
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import DTypeLike

from pygauss.core.exceptions import ElementTypeError


@dataclass(frozen=True)
class ElementDomain:
    """
    Closed set of numpy dtypes sharing arithmetic semantics.

    Attributes:
        name: 'integer' or 'real'
        dtypes: Admitted dtypes, narrowest first within each signedness
        default: dtype used when the caller doesn't specify one
    """
    name: str
    dtypes: tuple[np.dtype, ...]
    default: np.dtype

    def admits(self, dtype: DTypeLike) -> bool:
        """Check whether dtype belongs to this domain. Never raises."""
        try:
            resolved = np.dtype(dtype)
        except TypeError:
            return False
        return resolved in self.dtypes

    def resolve(self, dtype: DTypeLike | None = None) -> np.dtype:
        """
        Normalize a dtype request against this domain.

        Args:
            dtype: Requested dtype, or None for the domain default

        Returns:
            The resolved numpy dtype

        Raises:
            ElementTypeError: If dtype is not admitted by this domain
        """
        if dtype is None:
            return self.default
        try:
            resolved = np.dtype(dtype)
        except TypeError as e:
            raise ElementTypeError(
                f"{dtype!r} is not a valid dtype: {e}", dtype=dtype
            ) from e
        if resolved not in self.dtypes:
            allowed = ", ".join(str(d) for d in self.dtypes)
            raise ElementTypeError(
                f"dtype {resolved} is not in the {self.name} domain "
                f"(allowed: {allowed})",
                dtype=resolved,
            )
        return resolved


INTEGER = ElementDomain(
    name='integer',
    dtypes=tuple(np.dtype(t) for t in (
        np.int8, np.int16, np.int32, np.int64,
        np.uint8, np.uint16, np.uint32, np.uint64,
    )),
    default=np.dtype(np.int32),
)

REAL = ElementDomain(
    name='real',
    dtypes=tuple(np.dtype(t) for t in (np.float16, np.float32, np.float64)),
    default=np.dtype(np.float32),
)

DEFAULT_INTEGER_DTYPE: np.dtype = INTEGER.default
DEFAULT_REAL_DTYPE: np.dtype = REAL.default

ALL_DOMAINS = (INTEGER, REAL)


def domain_of(dtype: DTypeLike) -> ElementDomain | None:
    """Return the domain that admits dtype, or None."""
    for domain in ALL_DOMAINS:
        if domain.admits(dtype):
            return domain
    return None


def additive_identity(dtype: DTypeLike) -> Any:
    """Zero of the given dtype, as a numpy scalar."""
    return np.dtype(dtype).type(0)


def multiplicative_identity(dtype: DTypeLike) -> Any:
    """One of the given dtype, as a numpy scalar."""
    return np.dtype(dtype).type(1)


def can_widen(source: DTypeLike, target: DTypeLike) -> bool:
    """
    Check whether source -> target is a lossless widening.

    A widening stays inside one domain, strictly increases the item size,
    and is a numpy 'safe' cast (every source value is representable).
    Identity and narrowing conversions are not widenings.

    Args:
        source: dtype being converted from
        target: dtype being converted to

    Returns:
        True if every value of source survives the conversion exactly
    """
    src_domain = domain_of(source)
    if src_domain is None or not src_domain.admits(target):
        return False
    src = np.dtype(source)
    dst = np.dtype(target)
    return dst.itemsize > src.itemsize and bool(np.can_cast(src, dst, casting='safe'))


def widening_targets(dtype: DTypeLike) -> tuple[np.dtype, ...]:
    """All dtypes that dtype can be losslessly widened to, in domain order."""
    domain = domain_of(dtype)
    if domain is None:
        return ()
    return tuple(d for d in domain.dtypes if can_widen(dtype, d))
