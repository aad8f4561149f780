"""
Input validation utilities for PyEchelon.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every mutating Matrix method
validates all of its arguments before touching storage, so a failed call
never leaves a matrix partially modified.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyechelon.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    InvalidArgumentError,
)


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_rectangular(grid: Any, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.

    numpy arrays are rectangular by construction and pass straight through.

    Args:
        grid: Sequence of row sequences
        name: Parameter name for error messages

    Raises:
        ValidationError: If grid is not a sequence of sequences
        DimensionError: If grid has no rows or rows of differing length
    """
    if isinstance(grid, np.ndarray):
        return

    try:
        rows = list(grid)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(grid).__name__}"
        ) from e

    if not rows:
        raise DimensionError(f"{name}: grid has no rows", shape=(0, 0))

    lengths = []
    for i, row in enumerate(rows, start=1):
        if isinstance(row, (str, bytes)) or not hasattr(row, '__len__'):
            raise ValidationError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence of numbers"
            )
        lengths.append(len(row))

    if len(set(lengths)) > 1:
        raise DimensionError(
            f"{name}: rows must all have the same length, got lengths {lengths}"
        )


def check_grid(grid: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate a 2D grid and return an independent float64 copy of it.

    Args:
        grid: Nested sequence or 2D array of real numbers
        name: Parameter name for error messages

    Returns:
        Freshly allocated (rows, cols) float64 array, never a view of grid

    Raises:
        DimensionError: Ragged, empty, or not 2D
        ValidationError: Non-numeric or non-finite entries
    """
    check_rectangular(grid, name)
    array = check_array(grid, name)

    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D grid, got {array.ndim}D with shape {array.shape}",
            shape=array.shape,
        )

    rows, cols = array.shape
    if rows < 1 or cols < 1:
        raise DimensionError(
            f"{name}: need at least 1 row and 1 column, got {rows}x{cols}",
            shape=(rows, cols),
        )

    check_finite(array, name)
    return np.array(array, dtype=np.float64, copy=True)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row or column count is an integer >= 1.

    Raises:
        DimensionError: If value is not a positive integer
    """
    if not _is_integer(value):
        raise DimensionError(
            f"{name}: must be an integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise DimensionError(f"{name}: must be at least 1, got {value}")
    return int(value)


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify a 1-based index lies in [1, bound].

    Args:
        index: Requested index
        bound: Number of rows or columns on that axis
        axis: 'row' or 'column', used in the message

    Returns:
        The 0-based position for internal storage

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside [1, bound]
    """
    if not _is_integer(index):
        raise ValidationError(
            f"{axis} index must be an integer, got {type(index).__name__} {index!r}"
        )
    if index < 1 or index > bound:
        raise IndexOutOfRangeError(
            f"{axis} {index} not in matrix (valid: 1..{bound})",
            index=int(index),
            bound=bound,
            axis=axis,
        )
    return int(index) - 1


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a finite real number.

    Raises:
        InvalidArgumentError: If value is not a finite real number
    """
    if not isinstance(value, numbers.Real) or isinstance(value, (bool, np.bool_)):
        raise InvalidArgumentError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name}: must be finite, got {value}")
    return value


def check_nonzero(value: float, name: str) -> None:
    """
    Verify value is not exactly zero.

    Raises:
        InvalidArgumentError: If value == 0
    """
    if value == 0:
        raise InvalidArgumentError(f"{name}: must be non-zero")


def check_same_shape(
    first: tuple[int, int],
    second: tuple[int, int],
    names: tuple[str, str],
) -> None:
    """
    Verify two matrices share a shape.

    Raises:
        DimensionError: If the shapes differ
    """
    if first != second:
        raise DimensionError(
            f"Shape mismatch: {names[0]} is {first[0]}x{first[1]}, "
            f"{names[1]} is {second[0]}x{second[1]}",
            shape=second,
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify shape has rows == cols.

    Raises:
        DimensionError: If the matrix is not square
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(
            f"{name}: must be square, got {rows}x{cols}",
            shape=shape,
        )
