"""
Core protocols for matrixnum.

These define the structural interface every matrix backend must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
new backend only has to provide the operations, not inherit from anything.
Call sites written against MatrixLike keep working when the backend behind
them changes.

Design Principles:
    - Minimal contract: construction, shape, element access, dot,
      transpose, map
    - Capability-driven: use supports() for optional properties
    - Immutable values: every operation returns a new matrix
"""

from __future__ import annotations

from typing import Callable, Protocol, Sequence, TypeVar, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike

M = TypeVar('M', bound='MatrixLike')

# Cell generator: (row index, column index) -> value
CellFunction = Callable[[int, int], float]

# Elementwise transform: value -> value
ElementFunction = Callable[[float], float]


@runtime_checkable
class MatrixLike(Protocol):
    """
    Protocol for dense 64-bit floating point matrices.

    Implementations store a rectangular grid of floats and never mutate
    it after construction. All precondition violations raise at the
    point of the call (see matrixnum.core.exceptions).
    """

    @classmethod
    def generate(cls: type[M], m: int, n: int, f: CellFunction) -> M:
        """
        Build an m x n matrix whose cell (i, j) is f(i, j).

        f is called exactly once per cell, in row-major order. m == 0 or
        n == 0 yields an empty matrix.
        """
        ...

    @classmethod
    def zero(cls: type[M], m: int, n: int) -> M:
        """Build an m x n matrix of zeros."""
        ...

    @classmethod
    def random(
        cls: type[M],
        m: int,
        n: int,
        rng: np.random.Generator | None = None,
    ) -> M:
        """
        Build an m x n matrix of independent draws from U[-1.0, 1.0).

        Args:
            m: Number of rows
            n: Number of columns
            rng: Generator to draw from. A fresh default_rng() is used
                when omitted; pass a seeded one for reproducible tests.
        """
        ...

    @classmethod
    def from_vec(cls: type[M], v: ArrayLike) -> M:
        """Build a 1 x len(v) matrix whose columns are v in order."""
        ...

    def row(self, n: int) -> Sequence[float]:
        """Row n, by reference. The returned sequence is read-only."""
        ...

    def rows(self) -> int:
        """Number of rows."""
        ...

    def cols(self) -> int:
        """
        Number of columns, measured from the first row.

        Raises:
            DegenerateShapeError: If the matrix has no rows
        """
        ...

    def get(self, m: int, n: int) -> float:
        """
        Element at (m, n).

        Raises:
            IndexOutOfBoundsError: If m or n is outside the matrix
        """
        ...

    def dot(self: M, other: M) -> M:
        """
        Matrix product self x other.

        Raises:
            ShapeMismatchError: If self.cols() != other.rows()
        """
        ...

    def transpose(self: M) -> M:
        """New matrix with rows and columns swapped."""
        ...

    def map(self: M, f: ElementFunction) -> M:
        """New matrix of the same shape with f applied to every cell."""
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this backend supports a given capability.

        Standard capability strings live in matrixnum.core.capabilities.

        Note:
            Unknown capabilities MUST return False, never raise.
        """
        ...
