"""
Dense reference backend.

Row-major storage as a tuple of row tuples of Python floats. Every
operation is written out as explicit loops so the order of floating-point
operations is fixed and documented; this is the backend other backends
are validated against.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from matrixnum.core.capabilities import (
    CAPABILITY_ORDERED_ACCUMULATION,
    CAPABILITY_ROW_VIEWS,
)
from matrixnum.core.exceptions import ValidationError
from matrixnum.core.protocols import CellFunction, ElementFunction
from matrixnum.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_index,
    check_inner_dimensions,
    check_non_degenerate,
    check_real,
    check_rectangular,
    check_size,
)

Row = tuple[float, ...]

_CAPABILITIES = frozenset({
    CAPABILITY_ORDERED_ACCUMULATION,
    CAPABILITY_ROW_VIEWS,
})


@dataclass(frozen=True)
class DenseMatrix:
    """
    Immutable dense matrix with row-major tuple storage.

    Build instances through the classmethod constructors (generate, zero,
    random, from_vec, from_rows). Equality is exact: same shape and every
    cell compares equal, no tolerance. Use
    matrixnum.core.compute.tolerances.approx_equal for rounding-sensitive
    comparisons.

    A matrix with no rows has no column count, so every zero-row matrix
    compares equal regardless of the n it was generated with.

    Examples:
        >>> a = DenseMatrix.from_rows([[1, 2], [3, 4]])
        >>> b = DenseMatrix.from_rows([[2, 0], [1, 2]])
        >>> a.dot(b).to_rows()
        [[4.0, 4.0], [10.0, 8.0]]
    """
    _data: tuple[Row, ...]

    def __post_init__(self) -> None:
        data = self._data
        if not isinstance(data, tuple):
            raise ValidationError(
                f"data: expected a tuple of row tuples, got {type(data).__name__}"
            )
        check_rectangular(data, 'data')
        for i, row in enumerate(data):
            if not isinstance(row, tuple):
                raise ValidationError(
                    f"data: row {i} is {type(row).__name__}, expected tuple"
                )
            for j, value in enumerate(row):
                if type(value) is not float:
                    raise ValidationError(
                        f"data: cell ({i}, {j}) is {type(value).__name__}, expected float"
                    )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def generate(cls, m: int, n: int, f: CellFunction) -> DenseMatrix:
        """
        Build an m x n matrix whose cell (i, j) is f(i, j).

        f is called exactly once per cell, row by row, so a stateful f
        (e.g. one drawing from a seeded generator) sees a predictable
        call sequence.

        Args:
            m: Number of rows (>= 0)
            n: Number of columns (>= 0)
            f: Cell function of (row index, column index)

        Returns:
            New DenseMatrix. Empty when m or n is zero.

        Raises:
            ValidationError: If m or n is negative or not an integer, or
                f returns something that is not a real number
        """
        m = check_size(m, 'm')
        n = check_size(n, 'n')

        data = []
        for i in range(m):
            row = []
            for j in range(n):
                row.append(check_real(f(i, j), f"cell ({i}, {j})"))
            data.append(tuple(row))

        return cls(tuple(data))

    @classmethod
    def zero(cls, m: int, n: int) -> DenseMatrix:
        """Build an m x n matrix of zeros."""
        return cls.generate(m, n, lambda i, j: 0.0)

    @classmethod
    def random(
        cls,
        m: int,
        n: int,
        rng: np.random.Generator | None = None,
    ) -> DenseMatrix:
        """
        Build an m x n matrix of independent draws from U[-1.0, 1.0).

        Args:
            m: Number of rows
            n: Number of columns
            rng: Generator to draw from; a fresh default_rng() if None

        Returns:
            New DenseMatrix
        """
        if rng is None:
            rng = np.random.default_rng()
        return cls.generate(m, n, lambda i, j: rng.uniform(-1.0, 1.0))

    @classmethod
    def from_vec(cls, v: ArrayLike) -> DenseMatrix:
        """
        Build a single-row matrix from a vector.

        Raises:
            ValidationError: If v is not numeric
            DimensionError: If v is not 1D
        """
        arr = check_array(v, 'v')
        check_1d(arr, 'v')
        return cls.generate(1, arr.shape[0], lambda i, j: arr[j])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> DenseMatrix:
        """
        Build a matrix from nested row sequences.

        Raises:
            DimensionError: If rows have different lengths
            ValidationError: If any value is not numeric
        """
        if len(rows) == 0:
            return cls(())
        check_rectangular(rows, 'rows')
        arr = check_array(rows, 'rows')
        check_2d(arr, 'rows')
        return cls.generate(arr.shape[0], arr.shape[1], lambda i, j: arr[i, j])

    # ------------------------------------------------------------------
    # Shape and access
    # ------------------------------------------------------------------

    def row(self, n: int) -> Row:
        """Row n as the stored tuple (no copy)."""
        n = check_index(n, self.rows(), 'row')
        return self._data[n]

    def rows(self) -> int:
        return len(self._data)

    def cols(self) -> int:
        """
        Number of columns, measured from the first row.

        Raises:
            DegenerateShapeError: If the matrix has no rows
        """
        check_non_degenerate(self.rows(), 'cols()')
        return len(self._data[0])

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols). Raises DegenerateShapeError on a zero-row matrix."""
        return self.rows(), self.cols()

    def get(self, m: int, n: int) -> float:
        """
        Element at (m, n).

        Raises:
            IndexOutOfBoundsError: If m or n is outside the matrix
        """
        m = check_index(m, self.rows(), 'row')
        n = check_index(n, self.cols(), 'col')
        return self._data[m][n]

    def to_rows(self) -> list[list[float]]:
        """Independent nested-list copy of the elements."""
        return [list(r) for r in self._data]

    def supports(self, capability: str) -> bool:
        return capability in _CAPABILITIES

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def dot(self, other: DenseMatrix) -> DenseMatrix:
        """
        Matrix product self x other.

        Plain triple loop: for each row of self, for each column of
        other, sum over the shared index in increasing order. No blocking
        and no compensated summation, so the rounding of every cell is
        fully determined by this order.

        Args:
            other: Right operand, q x r where self is p x q

        Returns:
            New p x r DenseMatrix

        Raises:
            TypeError: If other is not a DenseMatrix
            ShapeMismatchError: If self.cols() != other.rows()
        """
        if not isinstance(other, DenseMatrix):
            raise TypeError(
                f"DenseMatrix.dot requires a DenseMatrix, got {type(other).__name__}"
            )
        check_inner_dimensions(self.shape, other.shape)

        n_cols = other.cols()
        result = [[0.0] * n_cols for _ in range(self.rows())]
        b = other._data

        for i, row in enumerate(self._data):
            for j in range(n_cols):
                cell = 0.0
                for k, value in enumerate(row):
                    cell += value * b[k][j]
                result[i][j] = cell

        return DenseMatrix(tuple(tuple(r) for r in result))

    def transpose(self) -> DenseMatrix:
        """Full-copy transpose: result (i, j) is self (j, i)."""
        data = self._data
        return DenseMatrix.generate(self.cols(), self.rows(), lambda i, j: data[j][i])

    def map(self, f: ElementFunction) -> DenseMatrix:
        """Apply f to every cell, returning a new matrix of the same shape."""
        data = self._data
        return DenseMatrix.generate(self.rows(), self.cols(), lambda i, j: f(data[i][j]))

    def __repr__(self) -> str:
        return f"DenseMatrix({self.to_rows()!r})"
