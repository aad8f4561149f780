"""
Exception hierarchy for PyEchelon.

All exceptions inherit from PyEchelonError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyEchelonError(Exception):
    """Base exception for all PyEchelon errors."""
    pass


class ValidationError(PyEchelonError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are invalid or inconsistent.

    Raised for non-positive row/column counts, ragged (non-rectangular)
    grids, a square-only operation applied to a non-square matrix, and
    shape mismatches between operands.

    Attributes:
        shape: The offending (rows, cols), if known
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class IndexOutOfRangeError(ValidationError):
    """
    A 1-based row or column index is outside the matrix.

    Attributes:
        index: The index that was requested
        bound: The largest valid index on that axis
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class InvalidArgumentError(ValidationError):
    """
    An argument has an acceptable type but an illegal value.

    Raised e.g. when asked to scale a row by zero, which is not an
    elementary row operation.
    """
    pass


class NumericalError(PyEchelonError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when inverting a matrix whose determinant lies within the
    global tolerance of zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that failed the check, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
