"""
Tolerance tiers for floating-point comparison.

Defines precision expectations per real element dtype:
- FP64: double precision
- FP32: single precision (the default real dtype)
- FP16: half precision

Used by RealMatrix.allclose(), by the row-reduction pivot threshold, and by
the test suite.
"""

from dataclasses import dataclass
import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='single precision',
)

FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp16',
    description='half precision',
)

_TIERS = {
    np.dtype(np.float64): FP64,
    np.dtype(np.float32): FP32,
    np.dtype(np.float16): FP16,
}


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """
    Select the tolerance tier for a real dtype.

    Integer dtypes compare exactly; asking for their tier is an error.
    """
    resolved = np.dtype(dtype)
    try:
        return _TIERS[resolved]
    except KeyError:
        raise ValueError(f"No tolerance tier for dtype {resolved}") from None


def pivot_tolerance(
    dtype: DTypeLike,
    shape: tuple[int, int],
    scale: float,
) -> float:
    """
    Magnitude below which a row-reduction pivot counts as zero.

    Same rule LAPACK-based rank estimates use: max(rows, cols) * eps * scale,
    where scale is the largest absolute entry of the matrix.
    """
    return max(shape) * float(np.finfo(dtype).eps) * scale
