"""
Tests for the functional API: array-like inputs, arithmetic and analyze().
"""

import numpy as np
import pytest

from pyechelon.core.exceptions import DimensionError, InvalidArgumentError, SingularMatrixError
from pyechelon.matrix import (
    Matrix,
    MatrixAnalysis,
    SquareMatrix,
    add,
    analyze,
    determinant,
    echelon_form,
    inverse,
    minor,
    rref,
    scalar_multiply,
)


# ═══════════════════════════════════════════════════════════════════════
# Array-like inputs
# ═══════════════════════════════════════════════════════════════════════


class TestArrayLikeInputs:

    def test_rref_accepts_lists(self, vandermonde_system):
        grid, expected = vandermonde_system
        assert rref(grid) == Matrix.from_grid(expected)

    def test_square_lists_become_square_matrices(self):
        assert isinstance(echelon_form([[1, 2], [3, 4]]), SquareMatrix)
        assert type(echelon_form([[1, 2, 3]])) is Matrix

    def test_determinant_of_lists(self):
        assert determinant([[1, 2], [3, 4]]) == -2.0

    def test_determinant_accepts_plain_square_matrix(self):
        assert determinant(Matrix.from_grid([[2, 0], [0, 3]])) == 6.0

    def test_determinant_rejects_rectangular(self):
        with pytest.raises(DimensionError):
            determinant([[1, 2, 3], [4, 5, 6]])

    def test_inverse_of_ndarray(self):
        grid = np.array([[2.0, 1.0], [1.0, 1.0]])
        assert inverse(grid) == Matrix.from_grid([[1, -1], [-1, 2]])

    def test_inverse_singular(self):
        with pytest.raises(SingularMatrixError):
            inverse([[1, 2], [2, 4]])

    def test_inverse_rejects_rectangular(self):
        with pytest.raises(DimensionError):
            inverse(Matrix(2, 3))

    def test_minor_of_lists(self):
        assert minor(1, 1, [[1, 2], [3, 4]]) == Matrix.from_grid([[4]])


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add(self):
        a = Matrix.from_grid([[1, 2], [3, 4]])
        result = add(a, [[1, 1], [1, 1]])
        assert result == Matrix.from_grid([[2, 3], [4, 5]])
        assert a == Matrix.from_grid([[1, 2], [3, 4]])

    def test_add_shape_mismatch(self):
        with pytest.raises(DimensionError, match="one is 2x2, two is 2x3"):
            add(Matrix(2, 2), Matrix(2, 3))

    def test_scalar_multiply(self):
        a = Matrix.from_grid([[1, -2]])
        assert scalar_multiply(a, 2.5) == Matrix.from_grid([[2.5, -5]])
        assert a == Matrix.from_grid([[1, -2]])

    def test_scalar_multiply_rejects_non_number(self):
        with pytest.raises(InvalidArgumentError):
            scalar_multiply([[1]], "2")


# ═══════════════════════════════════════════════════════════════════════
# analyze()
# ═══════════════════════════════════════════════════════════════════════


class TestAnalyze:

    def test_invertible_square(self):
        result = analyze([[4, 7], [2, 6]])
        assert isinstance(result, MatrixAnalysis)
        assert result.determinant == pytest.approx(10.0)
        assert result.inverse == Matrix.from_grid([[0.6, -0.7], [-0.2, 0.4]])
        assert result.is_invertible
        assert result.rank == 2
        assert result.pivot_columns == (1, 2)
        assert result.warnings == ()
        assert result.method == "gauss_jordan"

    def test_timing_sections(self):
        result = analyze([[4, 7], [2, 6]])
        assert {"total_seconds", "echelon", "rref", "determinant", "inverse"} <= set(result.timing)

    def test_singular_square(self):
        result = analyze([[1, 2], [2, 4]])
        assert result.determinant == 0.0
        assert result.inverse is None
        assert not result.is_invertible
        assert result.rank == 1
        assert result._result.has_warning("singular")

    def test_rectangular(self, vandermonde_system):
        grid, expected = vandermonde_system
        result = analyze(grid)
        assert result.determinant is None
        assert result.inverse is None
        assert result.rref == Matrix.from_grid(expected)
        assert result.pivot_columns == (1, 2, 3)
        assert result.info["shape"] == (3, 4)
        assert result._result.has_warning("not square")

    def test_matrix_is_private_copy(self):
        m = Matrix.from_grid([[1, 2], [3, 4]])
        result = analyze(m)
        m.set_element(1, 1, 100.0)
        assert result.matrix.get_element(1, 1) == 1.0

    def test_summary_text(self):
        text = analyze([[1, 2], [3, 4]]).summary()
        assert "Matrix (2x2)" in text
        assert "Rank: 2    Pivot columns: 1, 2" in text
        assert "Determinant: -2" in text
        assert "Inverse" in text

    def test_summary_reports_warnings(self):
        text = analyze([[0, 0], [0, 0]]).summary()
        assert "Pivot columns: none" in text
        assert "Warning: matrix is singular" in text

    def test_repr(self):
        assert repr(analyze([[1, 2, 3]])) == "MatrixAnalysis(shape=1x3, rank=1)"
