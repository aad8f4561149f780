"""
Row-reduction engine: echelon form and reduced row-echelon form.

Both functions copy their input and work only through the elementary
row operations on Matrix, plus stable reordering of rows. Pivots are the
first entries whose magnitude exceeds the global tolerance; there is no
partial pivoting by magnitude.
"""

from __future__ import annotations

from typing import Any, TypeVar
import numpy as np
from numpy.typing import NDArray

from pyechelon.core.compute.tolerances import DEFAULT
from pyechelon.matrix.matrix import Matrix

M = TypeVar('M', bound=Matrix)


def _leading_zero_counts(grid: NDArray[np.floating[Any]]) -> NDArray[np.intp]:
    """Per row, the number of near-zero entries before the first pivot."""
    nonzero = np.abs(grid) > DEFAULT.atol
    counts = np.argmax(nonzero, axis=1)
    # argmax is 0 for all-False rows; those have cols leading zeros
    counts[~nonzero.any(axis=1)] = grid.shape[1]
    return counts


def _sort_rows_by_leading_zeros(matrix: Matrix, start: int = 0) -> None:
    """Stable-sort rows start.. (0-based) by ascending leading-zero count."""
    tail = matrix._grid[start:]
    order = np.argsort(_leading_zero_counts(tail), kind='stable')
    matrix._grid[start:] = tail[order]


def _move_zero_rows_to_bottom(matrix: Matrix) -> None:
    """Push all-zero rows to the end, keeping non-zero rows in order."""
    grid = matrix._grid
    is_zero = np.all(np.abs(grid) <= DEFAULT.atol, axis=1)
    order = np.concatenate([np.flatnonzero(~is_zero), np.flatnonzero(is_zero)])
    matrix._grid = grid[order]


def echelon_form(matrix: M) -> M:
    """
    Return an echelon form of matrix without modifying it.

    Rows are stably ordered by their number of leading zeros, then every
    non-zero row in turn eliminates its pivot column from all rows below
    it. The rows below are re-sorted after each pass so that a row whose
    pivot moved right during elimination drops beneath rows with earlier
    pivots. Zero rows end at the bottom.

    The result has the same class as the input.
    """
    output = matrix.clone()
    _sort_rows_by_leading_zeros(output)

    for current in range(1, output.rows):
        if output.is_zero_row(current):
            continue

        pivot_col = output.leading_entry_column(current)
        pivot = output.leading_entry(current)
        for below in range(current + 1, output.rows + 1):
            factor = -output.get_element(below, pivot_col) / pivot
            output.add_row_multiple(current, below, factor)

        _sort_rows_by_leading_zeros(output, start=current)

    _move_zero_rows_to_bottom(output)
    return output


def rref(matrix: M) -> M:
    """
    Return the reduced row-echelon form of matrix without modifying it.

    Starting from echelon_form, every pivot is scaled to 1 and then,
    sweeping from the bottom row up, each pivot column is cleared in all
    rows above it.
    """
    output = echelon_form(matrix)

    # Leading 1 in each non-zero row
    for r in range(1, output.rows + 1):
        lead = output.leading_entry(r)
        if lead != 0:
            output.scale_row(r, 1 / lead)

    for current in range(output.rows, 0, -1):
        if output.is_zero_row(current):
            continue
        pivot_col = output.leading_entry_column(current)
        for above in range(current - 1, 0, -1):
            factor = -output.get_element(above, pivot_col)
            output.add_row_multiple(current, above, factor)

    _move_zero_rows_to_bottom(output)
    return output


def pivot_columns(reduced: Matrix) -> tuple[int, ...]:
    """1-based pivot columns of an already reduced matrix, top to bottom."""
    columns = []
    for r in range(1, reduced.rows + 1):
        c = reduced.leading_entry_column(r)
        if c == -1:
            break
        columns.append(c)
    return tuple(columns)
