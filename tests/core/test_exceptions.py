"""
Tests for PyEchelon exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyEchelonError)
    - Diagnostic attributes on DimensionError, IndexOutOfRangeError,
      SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyechelon.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    NumericalError,
    PyEchelonError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyEchelonError."""

    @pytest.mark.parametrize("exc_type", [
        DimensionError,
        IndexOutOfRangeError,
        InvalidArgumentError,
    ])
    def test_input_errors_are_validation_errors(self, exc_type):
        with pytest.raises(ValidationError):
            raise exc_type("bad input")

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        DimensionError,
        IndexOutOfRangeError,
        InvalidArgumentError,
        NumericalError,
        SingularMatrixError,
    ])
    def test_everything_is_pyechelon_error(self, exc_type):
        with pytest.raises(PyEchelonError):
            raise exc_type("failure")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_is_not_validation_error(self):
        """A singular matrix is valid input; it fails numerically."""
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:

    def test_shape_attribute(self):
        err = DimensionError("must be square, got 2x3", shape=(2, 3))
        assert str(err) == "must be square, got 2x3"
        assert err.shape == (2, 3)

    def test_shape_defaults_to_none(self):
        assert DimensionError("ragged").shape is None


class TestIndexOutOfRangeError:

    def test_all_attributes(self):
        err = IndexOutOfRangeError("row 4 not in matrix", index=4, bound=3, axis="row")
        assert "row 4" in str(err)
        assert err.index == 4
        assert err.bound == 3
        assert err.axis == "row"

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("out of range")
        assert err.index is None
        assert err.bound is None
        assert err.axis is None


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError("not invertible", matrix_name="A", determinant=0.0)
        assert str(err) == "not invertible"
        assert err.matrix_name == "A"
        assert err.determinant == 0.0

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", determinant=1e-12)
        assert exc_info.value.determinant == pytest.approx(1e-12)
