"""
Fixed-width text rendering of a matrix grid.

Every entry is printed with two decimals, right-aligned to a common width
derived from the widest integer part, and each row is bounded by bars:

    |  1.00 -2.50 |
    | 10.00  0.00 |
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyechelon.core.compute.tolerances import DEFAULT


def render(grid: NDArray[np.floating[Any]]) -> str:
    """Render a 2D grid, one newline-terminated line per row."""
    # Values within tolerance of zero print as 0.00, never -0.00
    display = np.where(np.abs(grid) <= DEFAULT.atol, 0.0, grid)
    cells = [[f"{value:.2f}" for value in row] for row in display]

    # +3 for the decimal point and two digits after it
    width = max(len(cell.split('.')[0]) for row in cells for cell in row) + 3

    lines = []
    for row in cells:
        body = "".join(f"{cell:>{width}} " for cell in row)
        lines.append(f"| {body}|\n")
    return "".join(lines)
