"""
Tolerance tiers for approximate matrix comparison.

Structural equality (==) on matrices is exact. Anything that depends on
floating-point rounding uses these tiers instead:
- EXACT: same backend with ordered accumulation, bit-for-bit
- DENSE_FP64: float64 arithmetic that may round differently
- CROSS_BACKEND_FP64: comparing results from different backends

Used by the test suite and by callers comparing backends.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from matrixnum.core.capabilities import CAPABILITY_ORDERED_ACCUMULATION
from matrixnum.core.protocols import MatrixLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bit-for-bit, same backend with ordered accumulation',
)

DENSE_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='dense_fp64',
    description='Double precision, rounding-order differences only',
)

# BLAS kernels sum in blocked order, so the last few bits can differ
CROSS_BACKEND_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cross_backend_fp64',
    description='Double precision, results from different backends',
)


def select_tolerance(left: MatrixLike, right: MatrixLike) -> ToleranceTier:
    """Select the tolerance tier for comparing two matrices."""
    if (
        type(left) is type(right)
        and left.supports(CAPABILITY_ORDERED_ACCUMULATION)
        and right.supports(CAPABILITY_ORDERED_ACCUMULATION)
    ):
        return EXACT
    return CROSS_BACKEND_FP64


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float = DENSE_FP64.rtol,
    atol: float = DENSE_FP64.atol,
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)


def _cells(matrix: MatrixLike) -> NDArray[np.float64]:
    if matrix.rows() == 0:
        return np.empty((0, 0), dtype=np.float64)
    return np.array(
        [[matrix.get(i, j) for j in range(matrix.cols())] for i in range(matrix.rows())],
        dtype=np.float64,
    ).reshape(matrix.rows(), matrix.cols())


def approx_equal(
    a: MatrixLike,
    b: MatrixLike,
    tolerance: ToleranceTier = DENSE_FP64,
) -> bool:
    """
    Shape-and-value comparison within a tolerance tier.

    Goes through the MatrixLike contract only, so the operands may come
    from different backends.

    Args:
        a: First matrix
        b: Second matrix (the reference in the |b| term)
        tolerance: Tier giving rtol and atol

    Returns:
        True if shapes match and every cell is close
    """
    left = _cells(a)
    right = _cells(b)
    if left.shape != right.shape:
        return False
    return bool(np.all(is_close(left, right, rtol=tolerance.rtol, atol=tolerance.atol)))
