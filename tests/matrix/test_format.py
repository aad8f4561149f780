"""
Tests for the fixed-width text rendering of matrices.
"""

from pyechelon.matrix import Matrix, SquareMatrix


class TestRender:

    def test_simple(self):
        assert str(Matrix.from_grid([[1, 2], [3, 4]])) == "| 1.00 2.00 |\n| 3.00 4.00 |\n"

    def test_columns_align_on_widest_integer_part(self):
        text = str(Matrix.from_grid([[1, -2.5], [10, 0]]))
        assert text == "|  1.00 -2.50 |\n| 10.00  0.00 |\n"

    def test_near_zero_prints_as_zero(self):
        assert str(Matrix.from_grid([[-1e-12]])) == "| 0.00 |\n"

    def test_rounding_widens_column(self):
        text = str(Matrix.from_grid([[9.999, 1]]))
        assert text == "| 10.00  1.00 |\n"

    def test_square_renders_like_matrix(self):
        grid = [[1, 2], [3, 4]]
        assert str(SquareMatrix.from_grid(grid)) == str(Matrix.from_grid(grid))

    def test_one_line_per_row(self):
        text = str(Matrix(4, 2))
        assert text.count("\n") == 4
        assert all(line.startswith("| ") and line.endswith(" |")
                   for line in text.splitlines())
