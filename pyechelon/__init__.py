"""
PyEchelon: row reduction, determinants and inverses for small real matrices.

Submodules:
    matrix: Matrix / SquareMatrix containers and the reduction algorithms
    core: Exceptions, validation, tolerance policy, result envelope
    cli: Interactive command-line front end
"""

__version__ = "0.1.0"

from pyechelon import matrix
from pyechelon.matrix import (
    Matrix,
    SquareMatrix,
    identity,
    echelon_form,
    rref,
    determinant,
    inverse,
    minor,
    analyze,
    MatrixAnalysis,
)
from pyechelon.core.exceptions import (
    PyEchelonError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "matrix",
    "Matrix",
    "SquareMatrix",
    "identity",
    "echelon_form",
    "rref",
    "determinant",
    "inverse",
    "minor",
    "analyze",
    "MatrixAnalysis",
    "PyEchelonError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "NumericalError",
    "SingularMatrixError",
]
