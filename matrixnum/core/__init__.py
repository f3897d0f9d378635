"""
Core infrastructure for matrixnum.

This module provides the matrix contract and the pieces every backend
shares.

Key components:
    protocols: MatrixLike protocol
    capabilities: Capability string constants
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance tiers for approximate comparison
"""

from matrixnum.core.protocols import MatrixLike
from matrixnum.core.exceptions import (
    MatrixnumError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    DegenerateShapeError,
    IndexOutOfBoundsError,
    BackendError,
)

__all__ = [
    # Protocols
    "MatrixLike",
    # Exceptions
    "MatrixnumError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "DegenerateShapeError",
    "IndexOutOfBoundsError",
    "BackendError",
]
