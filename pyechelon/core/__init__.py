"""
Core infrastructure for PyEchelon.

Shared abstractions used by the matrix module and the command-line front end.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance policy and timing
"""

from pyechelon.core.result import Result
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
    # Result
    "Result",
    # Exceptions
    "PyEchelonError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "NumericalError",
    "SingularMatrixError",
]
