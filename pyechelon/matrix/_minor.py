"""
Minor extraction shared by the determinant and by general matrix algebra.
"""

from __future__ import annotations

import numpy as np

from pyechelon.core.exceptions import DimensionError
from pyechelon.core.validation import check_index
from pyechelon.matrix.matrix import Matrix
from pyechelon.matrix.square import SquareMatrix


def minor(i: int, j: int, matrix: Matrix) -> Matrix:
    """
    The (i, j) minor: matrix without row i and column j.

    The result is (rows-1) x (cols-1) with the remaining rows and columns
    in their original order. It is a SquareMatrix when the input is square,
    a plain Matrix otherwise.

    Raises
    ------
    IndexOutOfRangeError
        If i or j is outside the matrix.
    DimensionError
        If the input has a single row or column, leaving nothing behind.
    """
    r = check_index(i, matrix.rows, 'row')
    c = check_index(j, matrix.cols, 'column')

    if matrix.rows == 1 or matrix.cols == 1:
        raise DimensionError(
            f"minor of a {matrix.rows}x{matrix.cols} matrix would be empty",
            shape=matrix.shape,
        )

    data = np.delete(np.delete(matrix._grid, r, axis=0), c, axis=1)
    cls = SquareMatrix if matrix.is_square else Matrix
    return cls._adopt(data)
