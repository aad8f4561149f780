"""
Functional entry points for the matrix module.

Every function accepts either a Matrix or any array-like grid (nested
lists, 2D numpy array) and never modifies its input. Square grids are
promoted to SquareMatrix so results keep the most specific type.
"""

from __future__ import annotations

from typing import Union
from numpy.typing import ArrayLike

from pyechelon.core.compute.tolerances import DEFAULT
from pyechelon.core.compute.timing import Timer
from pyechelon.core.result import Result
from pyechelon.core.validation import check_same_shape, check_scalar
from pyechelon.matrix import _determinant, _inverse, _minor, _reduce
from pyechelon.matrix.matrix import Matrix
from pyechelon.matrix.solution import AnalysisParams, MatrixAnalysis
from pyechelon.matrix.square import SquareMatrix


MatrixLike = Union[Matrix, ArrayLike]


def _ensure_matrix(data: MatrixLike) -> Matrix:
    """Convert raw grid to Matrix (SquareMatrix when square) if needed."""
    if isinstance(data, Matrix):
        return data
    matrix = Matrix.from_grid(data)
    if matrix.is_square:
        return SquareMatrix._adopt(matrix._grid)
    return matrix


def _ensure_square(data: MatrixLike) -> SquareMatrix:
    """Convert to SquareMatrix, raising DimensionError if not square."""
    matrix = _ensure_matrix(data)
    if isinstance(matrix, SquareMatrix):
        return matrix
    return matrix.as_square()


def echelon_form(data: MatrixLike) -> Matrix:
    """
    Echelon form of a matrix.

    Parameters
    ----------
    data : Matrix or array-like
        Any rectangular matrix.

    Returns
    -------
    Matrix
        New matrix in which each non-zero row's pivot lies strictly right
        of the pivot above it and zero rows are at the bottom.
    """
    return _reduce.echelon_form(_ensure_matrix(data))


def rref(data: MatrixLike) -> Matrix:
    """
    Reduced row-echelon form of a matrix.

    Every pivot is 1 and is the only non-zero entry in its column.
    """
    return _reduce.rref(_ensure_matrix(data))


def determinant(data: MatrixLike) -> float:
    """
    Determinant of a square matrix by cofactor expansion.

    Raises
    ------
    DimensionError
        If the matrix is not square.
    """
    return _determinant.determinant(_ensure_square(data))


def inverse(data: MatrixLike) -> SquareMatrix:
    """
    Inverse of a square matrix.

    Raises
    ------
    DimensionError
        If the matrix is not square.
    SingularMatrixError
        If the determinant is within tolerance of zero.
    """
    return _inverse.inverse(_ensure_square(data))


def minor(i: int, j: int, data: MatrixLike) -> Matrix:
    """The (i, j) minor: data without row i and column j (1-based)."""
    return _minor.minor(i, j, _ensure_matrix(data))


def add(one: MatrixLike, two: MatrixLike) -> Matrix:
    """Elementwise sum of two matrices of the same shape, as a new matrix."""
    first = _ensure_matrix(one)
    second = _ensure_matrix(two)
    check_same_shape(first.shape, second.shape, ('one', 'two'))
    result = first.clone()
    result.add_in_place(second)
    return result


def scalar_multiply(data: MatrixLike, scalar: float) -> Matrix:
    """New matrix equal to data with every element multiplied by scalar."""
    scalar = check_scalar(scalar, 'scalar')
    result = _ensure_matrix(data).clone()
    result.multiply_by_scalar(scalar)
    return result


def analyze(data: MatrixLike) -> MatrixAnalysis:
    """
    Compute every supported quantity for a matrix at once.

    Always computes echelon form, RREF, rank and pivot columns. For square
    matrices also computes the determinant and, when it is not within
    tolerance of zero, the inverse. Skipped computations are explained in
    the result's warnings rather than raised.

    Parameters
    ----------
    data : Matrix or array-like

    Returns
    -------
    MatrixAnalysis
    """
    matrix = _ensure_matrix(data)
    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('echelon'):
        echelon = _reduce.echelon_form(matrix)

    with timer.section('rref'):
        reduced = _reduce.rref(matrix)

    pivots = _reduce.pivot_columns(reduced)

    det = None
    inv = None
    if matrix.is_square:
        square = matrix if isinstance(matrix, SquareMatrix) else matrix.as_square()
        with timer.section('determinant'):
            det = _determinant.determinant(square)

        if DEFAULT.is_zero(det):
            warnings_list.append(
                f"matrix is singular (determinant {det:.3g}); inverse not computed"
            )
        else:
            with timer.section('inverse'):
                inv = _inverse.inverse(square)
    else:
        warnings_list.append(
            f"matrix is {matrix.rows}x{matrix.cols}, not square; "
            f"determinant and inverse not computed"
        )

    timer.stop()

    result = Result(
        params=AnalysisParams(
            echelon=echelon,
            rref=reduced,
            determinant=det,
            inverse=inv,
        ),
        info={
            'shape': matrix.shape,
            'is_square': matrix.is_square,
            'rank': len(pivots),
            'pivot_columns': pivots,
            'tolerance': DEFAULT.atol,
        },
        timing=timer.result(),
        method='gauss_jordan',
        warnings=tuple(warnings_list),
    )
    return MatrixAnalysis(_result=result, _matrix=matrix.clone())
