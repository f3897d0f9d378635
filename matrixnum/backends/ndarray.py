"""
numpy-backed matrix backend.

Stores a read-only 2D float64 ndarray and hands multiplication and
transpose to numpy. Products come from BLAS, which sums in its own
blocked order, so results can differ from the dense reference backend in
the last few bits; compare across backends with
matrixnum.core.compute.tolerances.approx_equal.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from matrixnum.core.capabilities import CAPABILITY_ROW_VIEWS, CAPABILITY_VECTORIZED
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

_CAPABILITIES = frozenset({
    CAPABILITY_VECTORIZED,
    CAPABILITY_ROW_VIEWS,
})


class NdarrayMatrix:
    """
    Immutable matrix over a read-only numpy float64 array.

    Satisfies the same MatrixLike contract as DenseMatrix. The wrapped
    array is copied on construction and marked non-writeable, so rows
    returned by row() are read-only views.
    """

    __slots__ = ('_array',)

    def __init__(self, array: NDArray[np.float64]):
        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        arr = np.array(arr, dtype=np.float64, copy=True)
        # No rows means no column count, same as the dense backend
        if arr.shape[0] == 0:
            arr = arr.reshape(0, 0)
        arr.setflags(write=False)
        self._array = arr

    @classmethod
    def generate(cls, m: int, n: int, f: CellFunction) -> NdarrayMatrix:
        """
        Build an m x n matrix whose cell (i, j) is f(i, j).

        f is called exactly once per cell in row-major order, same as
        the dense backend.
        """
        m = check_size(m, 'm')
        n = check_size(n, 'n')

        out = np.empty((m, n), dtype=np.float64)
        for i in range(m):
            for j in range(n):
                out[i, j] = check_real(f(i, j), f"cell ({i}, {j})")

        return cls(out)

    @classmethod
    def zero(cls, m: int, n: int) -> NdarrayMatrix:
        return cls(np.zeros((check_size(m, 'm'), check_size(n, 'n'))))

    @classmethod
    def random(
        cls,
        m: int,
        n: int,
        rng: np.random.Generator | None = None,
    ) -> NdarrayMatrix:
        """Build an m x n matrix of independent draws from U[-1.0, 1.0)."""
        if rng is None:
            rng = np.random.default_rng()
        size = (check_size(m, 'm'), check_size(n, 'n'))
        return cls(rng.uniform(-1.0, 1.0, size=size))

    @classmethod
    def from_vec(cls, v: ArrayLike) -> NdarrayMatrix:
        arr = check_array(v, 'v')
        check_1d(arr, 'v')
        return cls(arr.reshape(1, -1))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> NdarrayMatrix:
        """
        Build a matrix from nested row sequences.

        Raises:
            DimensionError: If rows have different lengths
            ValidationError: If any value is not numeric
        """
        if len(rows) == 0:
            return cls(np.empty((0, 0)))
        check_rectangular(rows, 'rows')
        return cls(check_array(rows, 'rows'))

    def row(self, n: int) -> NDArray[np.float64]:
        """Row n as a read-only view into storage."""
        n = check_index(n, self.rows(), 'row')
        return self._array[n]

    def rows(self) -> int:
        return self._array.shape[0]

    def cols(self) -> int:
        check_non_degenerate(self.rows(), 'cols()')
        return self._array.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows(), self.cols()

    def get(self, m: int, n: int) -> float:
        m = check_index(m, self.rows(), 'row')
        n = check_index(n, self.cols(), 'col')
        return float(self._array[m, n])

    def to_rows(self) -> list[list[float]]:
        return self._array.tolist()

    def supports(self, capability: str) -> bool:
        return capability in _CAPABILITIES

    def dot(self, other: NdarrayMatrix) -> NdarrayMatrix:
        """
        Matrix product self x other via numpy matmul.

        Raises:
            TypeError: If other is not an NdarrayMatrix
            ShapeMismatchError: If self.cols() != other.rows()
        """
        if not isinstance(other, NdarrayMatrix):
            raise TypeError(
                f"NdarrayMatrix.dot requires an NdarrayMatrix, got {type(other).__name__}"
            )
        check_inner_dimensions(self.shape, other.shape)
        return NdarrayMatrix(self._array @ other._array)

    def transpose(self) -> NdarrayMatrix:
        check_non_degenerate(self.rows(), 'transpose()')
        return NdarrayMatrix(self._array.T)

    def map(self, f: ElementFunction) -> NdarrayMatrix:
        # f is an arbitrary Python callable, so no vectorisation
        arr = self._array
        return NdarrayMatrix.generate(self.rows(), self.cols(), lambda i, j: f(float(arr[i, j])))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NdarrayMatrix):
            return NotImplemented
        return (
            self._array.shape == other._array.shape
            and bool(np.array_equal(self._array, other._array))
        )

    def __hash__(self) -> int:
        return hash((self._array.shape, tuple(self._array.ravel().tolist())))

    def __repr__(self) -> str:
        return f"NdarrayMatrix({self.to_rows()!r})"
