"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object/complex rejection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_size: non-negative integer counts
    - check_index: in-range, no negative wrapping
    - check_rectangular: non-sequence rows, ragged row detection
    - check_real: real-number cells, no string or bool coercion
    - check_non_degenerate: zero-row detection
    - check_inner_dimensions: multiplication compatibility
"""

import numpy as np
import pytest

from matrixnum.core.exceptions import (
    DegenerateShapeError,
    DimensionError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
    ValidationError,
)
from matrixnum.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_index,
    check_inner_dimensions,
    check_ndim,
    check_non_degenerate,
    check_real,
    check_rectangular,
    check_size,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "v")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted_to_float64(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        assert check_array(arr, "v").dtype == np.float64

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "rows")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "v")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "v")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex dtype"):
            check_array([1 + 2j], "v")

    def test_empty_list(self):
        result = check_array([], "v")
        assert result.shape == (0,)
        assert result.dtype == np.float64


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "v")

    def test_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "v")

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "rows")

    def test_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_2d(np.zeros(3), "rows")

    def test_ndim_message_includes_name(self):
        with pytest.raises(DimensionError, match="^weights:"):
            check_ndim(np.zeros((1, 1, 1)), 2, "weights")


# ═══════════════════════════════════════════════════════════════════════
# check_size
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSize:

    @pytest.mark.parametrize("value", [0, 1, 7, np.int64(3)])
    def test_accepts_non_negative_integers(self, value):
        assert check_size(value, "m") == int(value)
        assert type(check_size(value, "m")) is int

    def test_rejects_negative(self):
        with pytest.raises(ValidationError, match="m: must be non-negative, got -1"):
            check_size(-1, "m")

    @pytest.mark.parametrize("value", [2.0, "2", None, True])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValidationError, match="expected a non-negative integer"):
            check_size(value, "n")


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_in_range(self):
        assert check_index(2, 3, "row") == 2

    def test_at_bound_rejected(self):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            check_index(3, 3, "row")
        assert exc_info.value.index == 3
        assert exc_info.value.bound == 3
        assert exc_info.value.axis == "row"

    def test_negative_not_wrapped(self):
        with pytest.raises(IndexOutOfBoundsError, match="col index -1 out of range"):
            check_index(-1, 3, "col")

    def test_non_integer_rejected(self):
        with pytest.raises(IndexOutOfBoundsError, match="must be an integer"):
            check_index(1.0, 3, "row")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRectangular:

    def test_rectangular_passes(self):
        check_rectangular([[1, 2], [3, 4], [5, 6]], "rows")

    def test_single_row_passes(self):
        check_rectangular([[1, 2, 3]], "rows")

    def test_ragged_rejected(self):
        with pytest.raises(DimensionError, match="row 1=1"):
            check_rectangular([[1, 2], [3], [5, 6]], "rows")

    def test_flat_list_rejected(self):
        with pytest.raises(DimensionError, match="rows: row 0 is float, expected a sequence"):
            check_rectangular([1.0, 2.0], "rows")

    def test_string_row_rejected(self):
        with pytest.raises(DimensionError, match="row 1 is str"):
            check_rectangular([[1.0, 2.0], "ab"], "rows")

    def test_ndarray_rows_pass(self):
        check_rectangular(np.zeros((3, 2)), "rows")


class TestCheckReal:

    @pytest.mark.parametrize("value", [3, 3.0, np.int32(3), np.float64(3.0)])
    def test_accepts_real_numbers(self, value):
        result = check_real(value, "cell (0, 0)")
        assert result == 3.0
        assert type(result) is float

    @pytest.mark.parametrize("value", ["3.0", b"3", True, np.bool_(False), None, 2j])
    def test_rejects_everything_else(self, value):
        with pytest.raises(ValidationError, match=r"^cell \(0, 0\): expected a real number"):
            check_real(value, "cell (0, 0)")


class TestCheckNonDegenerate:

    def test_rows_present(self):
        check_non_degenerate(1, "cols()")

    def test_zero_rows(self):
        with pytest.raises(DegenerateShapeError, match="no rows"):
            check_non_degenerate(0, "cols()")


class TestCheckInnerDimensions:

    def test_compatible(self):
        check_inner_dimensions((2, 3), (3, 4))

    def test_incompatible(self):
        with pytest.raises(ShapeMismatchError, match="inner dimensions 3 != 2") as exc_info:
            check_inner_dimensions((2, 3), (2, 3))
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (2, 3)
