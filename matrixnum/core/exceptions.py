"""
Exception hierarchy for matrixnum.

All exceptions inherit from MatrixnumError to allow catching any
library-specific error. Every error here is a precondition failure raised
at the point of the call: no partial result is produced and nothing is
clamped or padded.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixnumError(Exception):
    """Base exception for all matrixnum errors."""
    pass


class ValidationError(MatrixnumError):
    """
    Input validation failed.

    Raised when caller-provided inputs fail validation checks
    (negative sizes, non-numeric vectors, ragged rows).
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when shapes don't match expected dimensions or when
    several inputs have inconsistent shapes.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Matrix multiplication with incompatible inner dimensions.

    Raised by dot() when the left operand's column count differs from
    the right operand's row count.

    Attributes:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class DegenerateShapeError(DimensionError):
    """
    Shape query on a matrix with no rows.

    The column count is measured from the first row, so it is undefined
    for a matrix that has none.
    """
    pass


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element or row index outside the matrix.

    Also an IndexError so generic sequence-handling code sees the
    usual exception type.

    Attributes:
        axis: 'row' or 'col'
        index: The offending index
        bound: The exclusive upper bound for that axis
    """

    def __init__(
        self,
        message: str,
        axis: str | None = None,
        index: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.axis = axis
        self.index = index
        self.bound = bound


class BackendError(MatrixnumError):
    """
    Requested matrix backend is unknown or unavailable.

    A configuration error: the selector never falls back to a default
    backend when the requested one cannot be provided.

    Attributes:
        backend: The requested backend tag
        available: Tags that would have been accepted
    """

    def __init__(
        self,
        message: str,
        backend: str | None = None,
        available: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.backend = backend
        self.available = available
