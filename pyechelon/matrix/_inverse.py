"""
Matrix inverse by Gauss-Jordan reduction of the augmented matrix [A | I].

The row operations that carry the left half to the identity apply the same
linear map to the right half, which starts as I and so ends as A^-1.
"""

from __future__ import annotations

import numpy as np

from pyechelon.core.compute.tolerances import DEFAULT
from pyechelon.core.exceptions import DimensionError, SingularMatrixError
from pyechelon.matrix._determinant import determinant
from pyechelon.matrix._reduce import rref
from pyechelon.matrix.matrix import Matrix
from pyechelon.matrix.square import SquareMatrix, identity


def augment(left: Matrix, right: Matrix) -> Matrix:
    """Side-by-side [left | right] as a new Matrix with rows of both."""
    if left.rows != right.rows:
        raise DimensionError(
            f"Cannot augment: left has {left.rows} rows, right has {right.rows}",
            shape=right.shape,
        )
    return Matrix._adopt(np.hstack([left._grid, right._grid]))


def inverse(matrix: SquareMatrix) -> SquareMatrix:
    """
    Inverse of a non-singular square matrix.

    Raises
    ------
    SingularMatrixError
        If |det(matrix)| <= EPSILON.
    """
    det = determinant(matrix)
    if DEFAULT.is_zero(det):
        raise SingularMatrixError(
            f"Matrix is not invertible (determinant {det:.3g} is within "
            f"{DEFAULT.atol:g} of zero)",
            matrix_name='matrix',
            determinant=det,
        )

    n = matrix.n
    reduced = rref(augment(matrix, identity(n)))
    return SquareMatrix._adopt(reduced._grid[:, n:].copy())
