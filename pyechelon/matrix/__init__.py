"""
Matrix module.

Rectangular and square matrices of real numbers with row reduction,
determinants and inverses.

Public API:
    Matrix, SquareMatrix, identity(n)  - containers and the identity
    echelon_form(m)                    - echelon form
    rref(m)                            - reduced row-echelon form
    determinant(m)                     - cofactor-expansion determinant
    inverse(m)                         - Gauss-Jordan inverse
    minor(i, j, m)                     - (i, j) minor
    add(a, b), scalar_multiply(m, k)   - elementwise arithmetic
    analyze(m)                         - all of the above at once
"""

from pyechelon.matrix.matrix import Matrix
from pyechelon.matrix.square import SquareMatrix, identity
from pyechelon.matrix.solution import AnalysisParams, MatrixAnalysis
from pyechelon.matrix.solvers import (
    echelon_form,
    rref,
    determinant,
    inverse,
    minor,
    add,
    scalar_multiply,
    analyze,
)

__all__ = [
    "Matrix",
    "SquareMatrix",
    "identity",
    "echelon_form",
    "rref",
    "determinant",
    "inverse",
    "minor",
    "add",
    "scalar_multiply",
    "analyze",
    "AnalysisParams",
    "MatrixAnalysis",
]
