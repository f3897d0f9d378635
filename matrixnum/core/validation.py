"""
Input validation utilities for matrixnum.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No clamping or wrapping of indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from matrixnum.core.exceptions import (
    DegenerateShapeError,
    DimensionError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

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

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    # Only 64-bit floats are stored
    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[np.float64], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_size(value: Any, name: str) -> int:
    """
    Verify a row or column count is a non-negative integer.

    Args:
        value: Count to check
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are rejected rather than wrapped.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        axis: 'row' or 'col', for the error message

    Returns:
        The index as a plain int

    Raises:
        IndexOutOfBoundsError: If index is not an integer in range
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IndexOutOfBoundsError(
            f"{axis} index must be an integer, got {type(index).__name__}",
            axis=axis,
            bound=bound,
        )
    if not 0 <= index < bound:
        raise IndexOutOfBoundsError(
            f"{axis} index {index} out of range for {bound} {axis}s",
            axis=axis,
            index=int(index),
            bound=bound,
        )
    return int(index)


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> None:
    """
    Verify rows is a sequence of row sequences of equal length.

    Args:
        rows: Nested row sequences
        name: Parameter name for error messages

    Raises:
        DimensionError: If an element is not a row sequence or row
            lengths differ
    """
    for i, r in enumerate(rows):
        if isinstance(r, (str, bytes)) or not isinstance(r, (Sequence, np.ndarray)):
            raise DimensionError(
                f"{name}: row {i} is {type(r).__name__}, expected a sequence of values"
            )

    if len(rows) < 2:
        return

    width = len(rows[0])
    ragged = [i for i, r in enumerate(rows) if len(r) != width]
    if ragged:
        details = ", ".join(f"row {i}={len(rows[i])}" for i in ragged)
        raise DimensionError(
            f"{name}: ragged rows, expected length {width}, got {details}"
        )


def check_real(value: Any, name: str) -> float:
    """
    Verify a single value is a real number and return it as a float.

    Strings, bytes and booleans are rejected even though float() would
    accept them.

    Args:
        value: Value to check
        name: Description for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (numbers.Real, np.floating, np.integer)
    ):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_non_degenerate(n_rows: int, name: str) -> None:
    """
    Verify a matrix has at least one row to measure columns from.

    Raises:
        DegenerateShapeError: If n_rows is zero
    """
    if n_rows == 0:
        raise DegenerateShapeError(
            f"{name}: column count is undefined for a matrix with no rows"
        )


def check_inner_dimensions(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
) -> None:
    """
    Verify two shapes can be multiplied.

    Args:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand

    Raises:
        ShapeMismatchError: If left cols != right rows
    """
    if left_shape[1] != right_shape[0]:
        raise ShapeMismatchError(
            f"cannot multiply {left_shape[0]}x{left_shape[1]} by "
            f"{right_shape[0]}x{right_shape[1]}: inner dimensions "
            f"{left_shape[1]} != {right_shape[0]}",
            left_shape=left_shape,
            right_shape=right_shape,
        )
