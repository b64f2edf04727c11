"""
Shared compute infrastructure for pygauss.

Numeric support shared by the matrix engine and the row-reduction
backends.

Submodules:
    timing: Execution timing utilities
    tolerances: Floating-point comparison tiers and pivot thresholds
"""

from pygauss.core.compute.timing import Timer
from pygauss.core.compute.tolerances import (
    ToleranceTier,
    FP16,
    FP32,
    FP64,
    select_tolerance,
    pivot_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "FP16",
    "FP32",
    "FP64",
    "select_tolerance",
    "pivot_tolerance",
]
