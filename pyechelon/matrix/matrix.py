"""
Matrix: a mutable 2D container of real numbers with row primitives.

Rows and columns are addressed with 1-based indices in every public
method; the float64 backing array is private and exclusively owned.
Accessors hand out copies, so no two Matrix instances ever share storage.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.compute.tolerances import DEFAULT
from pyechelon.core.validation import (
    check_dimension,
    check_grid,
    check_index,
    check_nonzero,
    check_same_shape,
    check_scalar,
    check_square,
)
from pyechelon.matrix._format import render

if TYPE_CHECKING:
    from pyechelon.matrix.square import SquareMatrix


class Matrix:
    """
    Rectangular matrix of real numbers.

    Construction:
        Matrix(rows, cols)          zero matrix
        Matrix.from_grid(grid)      copy of a nested sequence or 2D array

    Mutators (scale_row, swap_rows, add_row_multiple, set_element, set_grid,
    add_in_place, multiply_by_scalar, reduce_to_echelon, reduce_to_rref)
    change this instance. Validation happens before any write, so a call
    that raises leaves the matrix untouched.
    """

    __hash__ = None  # mutable

    def __init__(self, rows: int, cols: int):
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        self._check_shape((rows, cols))
        self._grid: NDArray[np.float64] = np.zeros((rows, cols), dtype=np.float64)

    @classmethod
    def from_grid(cls, grid: ArrayLike) -> Matrix:
        """
        Build a matrix holding a copy of grid.

        Parameters
        ----------
        grid : array-like
            Nested sequence of equal-length rows, or a 2D numpy array.

        Raises
        ------
        DimensionError
            If grid is empty, ragged, or not two-dimensional.
        ValidationError
            If any entry is non-numeric or non-finite.
        """
        return cls._adopt(check_grid(grid, 'grid'))

    @classmethod
    def _adopt(cls, data: NDArray[np.float64]) -> Matrix:
        """Wrap an already validated array without copying it."""
        obj = cls.__new__(cls)
        obj._check_shape(data.shape)
        obj._grid = data
        return obj

    def _check_shape(self, shape: tuple[int, int]) -> None:
        """Hook for subclasses that constrain the shape."""

    # --- Dimensions ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._grid.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._grid.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    # --- Whole-grid access ---

    @property
    def grid(self) -> NDArray[np.float64]:
        """Copy of the full grid as a (rows, cols) array."""
        return self._grid.copy()

    def to_list(self) -> list[list[float]]:
        """Copy of the grid as nested Python lists."""
        return self._grid.tolist()

    def set_grid(self, grid: ArrayLike) -> None:
        """
        Replace the contents (and possibly the shape) of this matrix.

        The new grid is copied; later changes to it do not affect the matrix.
        """
        data = check_grid(grid, 'grid')
        self._check_shape(data.shape)
        self._grid = data

    # --- Element, row and column access ---

    def get_element(self, r: int, c: int) -> float:
        i = check_index(r, self.rows, 'row')
        j = check_index(c, self.cols, 'column')
        return float(self._grid[i, j])

    def set_element(self, r: int, c: int, value: float) -> None:
        i = check_index(r, self.rows, 'row')
        j = check_index(c, self.cols, 'column')
        value = check_scalar(value, 'value')
        self._grid[i, j] = value

    def get_row(self, r: int) -> NDArray[np.float64]:
        """Copy of row r, length cols."""
        i = check_index(r, self.rows, 'row')
        return self._grid[i].copy()

    def get_column(self, c: int) -> NDArray[np.float64]:
        """Copy of column c, length rows."""
        j = check_index(c, self.cols, 'column')
        return self._grid[:, j].copy()

    # --- Elementary row operations ---

    def scale_row(self, r: int, factor: float) -> None:
        """
        Multiply every element of row r by factor.

        Raises
        ------
        InvalidArgumentError
            If factor is zero; scaling by zero is not an elementary row
            operation and would silently destroy the row.
        """
        i = check_index(r, self.rows, 'row')
        factor = check_scalar(factor, 'factor')
        check_nonzero(factor, 'factor')
        self._grid[i] *= factor

    def swap_rows(self, r1: int, r2: int) -> None:
        """Exchange rows r1 and r2."""
        i = check_index(r1, self.rows, 'row')
        k = check_index(r2, self.rows, 'row')
        self._grid[[i, k]] = self._grid[[k, i]]

    def add_row_multiple(self, source: int, target: int, factor: float) -> None:
        """
        target += factor * source, elementwise.

        A factor of zero is allowed and leaves the matrix unchanged.
        """
        i = check_index(source, self.rows, 'row')
        k = check_index(target, self.rows, 'row')
        factor = check_scalar(factor, 'factor')
        self._grid[k] += factor * self._grid[i]

    # --- Row inspection under tolerance ---

    def is_zero_row(self, r: int) -> bool:
        """True if every element of row r is within tolerance of zero."""
        i = check_index(r, self.rows, 'row')
        return bool(np.all(np.abs(self._grid[i]) <= DEFAULT.atol))

    def leading_entry_column(self, r: int) -> int:
        """1-based column of the first entry exceeding tolerance, or -1."""
        i = check_index(r, self.rows, 'row')
        nonzero = np.flatnonzero(np.abs(self._grid[i]) > DEFAULT.atol)
        if nonzero.size == 0:
            return -1
        return int(nonzero[0]) + 1

    def leading_entry(self, r: int) -> float:
        """First entry of row r exceeding tolerance, or 0.0 for a zero row."""
        c = self.leading_entry_column(r)
        if c == -1:
            return 0.0
        return float(self._grid[r - 1, c - 1])

    # --- Whole-matrix arithmetic ---

    def add_in_place(self, other: Matrix) -> None:
        """Add other elementwise into this matrix."""
        check_same_shape(self.shape, other.shape, ('self', 'other'))
        self._grid += other._grid

    def multiply_by_scalar(self, scalar: float) -> None:
        """Scale every element by scalar (zero is allowed here)."""
        scalar = check_scalar(scalar, 'scalar')
        self._grid *= scalar

    # --- In-place reduction ---

    def reduce_to_echelon(self) -> None:
        """Replace this matrix by an echelon form of itself."""
        from pyechelon.matrix._reduce import echelon_form
        self._grid = echelon_form(self)._grid

    def reduce_to_rref(self) -> None:
        """Replace this matrix by its reduced row-echelon form."""
        from pyechelon.matrix._reduce import rref
        self._grid = rref(self)._grid

    # --- Conversion and copying ---

    def as_square(self) -> SquareMatrix:
        """
        Independent SquareMatrix copy of this matrix.

        Raises
        ------
        DimensionError
            If rows != cols.
        """
        from pyechelon.matrix.square import SquareMatrix
        check_square(self.shape, 'matrix')
        return SquareMatrix._adopt(self._grid.copy())

    def clone(self) -> Matrix:
        """Deep copy of the same class, sharing no storage with self."""
        return type(self)._adopt(self._grid.copy())

    def __copy__(self) -> Matrix:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        result = self.clone()
        memo[id(self)] = result
        return result

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        """Same shape and every element pair within tolerance."""
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(DEFAULT.is_close(self._grid, other._grid)))

    def __str__(self) -> str:
        return render(self._grid)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"

