"""
Determinant by recursive cofactor expansion along the first row.

Cost grows as n!, which is fine for the small hand-entered matrices this
package targets. A RuntimeWarning is issued above COFACTOR_WARN_DIMENSION.
"""

from __future__ import annotations

import warnings

from pyechelon.core.compute.tolerances import COFACTOR_WARN_DIMENSION
from pyechelon.matrix._minor import minor
from pyechelon.matrix.square import SquareMatrix


def _expand(matrix: SquareMatrix) -> float:
    n = matrix.n
    if n == 1:
        return matrix.get_element(1, 1)

    # |a b|
    # |c d|  ->  ad - bc
    if n == 2:
        return (matrix.get_element(1, 1) * matrix.get_element(2, 2)
                - matrix.get_element(2, 1) * matrix.get_element(1, 2))

    total = 0.0
    for c in range(1, n + 1):
        entry = matrix.get_element(1, c)
        if entry == 0:
            continue
        sign = 1.0 if c % 2 == 1 else -1.0
        total += sign * entry * _expand(minor(1, c, matrix))
    return total


def determinant(matrix: SquareMatrix) -> float:
    """
    Determinant of a square matrix.

    Parameters
    ----------
    matrix : SquareMatrix

    Returns
    -------
    float
        det(matrix), accumulated in double precision.
    """
    if matrix.n > COFACTOR_WARN_DIMENSION:
        warnings.warn(
            f"Cofactor expansion of a {matrix.n}x{matrix.n} matrix needs on the "
            f"order of {matrix.n}! operations and may be very slow",
            RuntimeWarning,
            stacklevel=2,
        )
    return _expand(matrix)
