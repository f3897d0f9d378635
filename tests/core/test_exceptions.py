"""
Tests for matrixnum exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via MatrixnumError)
    - Diagnostic attributes on ShapeMismatchError, IndexOutOfBoundsError,
      BackendError
    - Default attribute values (None for optional attributes)
"""

import pytest

from matrixnum.core.exceptions import (
    BackendError,
    DegenerateShapeError,
    DimensionError,
    IndexOutOfBoundsError,
    MatrixnumError,
    ShapeMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via MatrixnumError."""

    def test_validation_error_is_matrixnum_error(self):
        with pytest.raises(MatrixnumError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_shape_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise ShapeMismatchError("2x3 by 2x3")

    def test_degenerate_shape_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise DegenerateShapeError("no rows")

    def test_index_out_of_bounds_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfBoundsError("row 5")

    def test_index_out_of_bounds_is_index_error(self):
        """Generic sequence code catching IndexError still works."""
        with pytest.raises(IndexError):
            raise IndexOutOfBoundsError("row 5")

    def test_backend_error_is_matrixnum_error(self):
        with pytest.raises(MatrixnumError):
            raise BackendError("unknown backend")

    def test_backend_error_is_not_validation_error(self):
        """BackendError is a configuration error, not bad matrix input."""
        err = BackendError("unknown backend")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestShapeMismatchError:
    """ShapeMismatchError carries both operand shapes."""

    def test_all_attributes(self):
        err = ShapeMismatchError(
            "cannot multiply",
            left_shape=(2, 3),
            right_shape=(2, 3),
        )
        assert str(err) == "cannot multiply"
        assert err.left_shape == (2, 3)
        assert err.right_shape == (2, 3)

    def test_defaults_are_none(self):
        err = ShapeMismatchError("cannot multiply")
        assert err.left_shape is None
        assert err.right_shape is None


class TestIndexOutOfBoundsError:
    """IndexOutOfBoundsError records axis, index and bound."""

    def test_all_attributes(self):
        err = IndexOutOfBoundsError("col index 4", axis='col', index=4, bound=2)
        assert err.axis == 'col'
        assert err.index == 4
        assert err.bound == 2

    def test_defaults_are_none(self):
        err = IndexOutOfBoundsError("bad index")
        assert err.axis is None
        assert err.index is None
        assert err.bound is None


class TestBackendError:
    """BackendError records the requested tag and the alternatives."""

    def test_all_attributes(self):
        err = BackendError("unknown", backend='sparse', available=('dense', 'ndarray'))
        assert err.backend == 'sparse'
        assert err.available == ('dense', 'ndarray')

    def test_default_available_is_empty(self):
        err = BackendError("unknown")
        assert err.backend is None
        assert err.available == ()
