"""
SquareMatrix: a Matrix whose row and column counts are equal.

The shape invariant is checked on every construction path and on
set_grid, so holding a SquareMatrix is proof that rows == cols.
"""

from __future__ import annotations

import numpy as np

from pyechelon.core.validation import check_dimension, check_square
from pyechelon.matrix.matrix import Matrix


class SquareMatrix(Matrix):
    """
    Square matrix of dimension n.

    Adds determinant() and inverse(); every other operation behaves exactly
    as on Matrix.

    Construction:
        SquareMatrix(n)                 n x n zero matrix
        SquareMatrix.from_grid(grid)    copy of a square grid
        matrix.as_square()              checked conversion from Matrix
        identity(n)
    """

    def __init__(self, n: int):
        super().__init__(n, n)

    def _check_shape(self, shape: tuple[int, int]) -> None:
        check_square(shape, 'SquareMatrix')

    @property
    def n(self) -> int:
        """Number of rows (and columns)."""
        return self.rows

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        from pyechelon.matrix._determinant import determinant
        return determinant(self)

    def inverse(self) -> SquareMatrix:
        """
        Inverse via Gauss-Jordan reduction of [self | I].

        Raises
        ------
        SingularMatrixError
            If the determinant is within tolerance of zero.
        """
        from pyechelon.matrix._inverse import inverse
        return inverse(self)

    def as_square(self) -> SquareMatrix:
        return self.clone()

    def __repr__(self) -> str:
        return f"SquareMatrix(n={self.n})"


def identity(n: int) -> SquareMatrix:
    """n x n identity matrix."""
    n = check_dimension(n, 'n')
    return SquareMatrix._adopt(np.eye(n, dtype=np.float64))
