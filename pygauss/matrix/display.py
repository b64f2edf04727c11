"""
Human-readable rendering of matrices.

Each row is printed on its own line as ``[ v1 v2 ... vn ]``. Floating values
use fixed 4-decimal precision; integers print as plain decimals.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pygauss.core.protocols import ElementGrid


def format_element(value: Any, dtype: np.dtype) -> str:
    """Render one element according to its dtype kind."""
    if dtype.kind == 'f':
        return f"{float(value):>4.4f}"
    return f"{int(value)}"


def format_matrix(grid: ElementGrid) -> str:
    """
    Render a grid row by row.

    Only rows, cols, dtype and row-major iteration are used, so any
    ElementGrid can be displayed.
    """
    dtype = np.dtype(grid.dtype)
    cells = [format_element(value, dtype) for value in grid]
    lines = []
    for i in range(grid.rows):
        row = cells[i * grid.cols:(i + 1) * grid.cols]
        lines.append("[ " + "".join(f"{cell} " for cell in row) + "]")
    return "\n".join(lines)
