"""
Shared numeric infrastructure for matrixnum.

IMPORTANT: This is NOT where backends live. Those go in
matrixnum/backends/. This module contains helpers shared by every backend
and by the test suite.

Submodules:
    tolerances: Tolerance tiers and approximate matrix comparison
"""

from matrixnum.core.compute.tolerances import (
    CROSS_BACKEND_FP64,
    DENSE_FP64,
    EXACT,
    ToleranceTier,
    approx_equal,
    is_close,
    select_tolerance,
)

__all__ = [
    "ToleranceTier",
    "EXACT",
    "DENSE_FP64",
    "CROSS_BACKEND_FP64",
    "select_tolerance",
    "is_close",
    "approx_equal",
]
