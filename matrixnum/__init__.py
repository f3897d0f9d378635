"""
matrixnum: swappable dense matrix backends for Python.

A small matrix contract (MatrixLike) with interchangeable backends behind
it, so numeric code can be written once and run on the reference
implementation or on numpy.

Submodules:
    core: Contract, exceptions, validation, tolerances
    backends: DenseMatrix (reference), NdarrayMatrix (numpy)
    solvers: Backend selection by tag
"""

__version__ = "0.1.0"

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
from matrixnum.backends import DenseMatrix, NdarrayMatrix
from matrixnum.solvers import BackendChoice, available_backends, select_backend

__all__ = [
    "__version__",
    # Contract
    "MatrixLike",
    # Backends
    "DenseMatrix",
    "NdarrayMatrix",
    "BackendChoice",
    "available_backends",
    "select_backend",
    # Exceptions
    "MatrixnumError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "DegenerateShapeError",
    "IndexOutOfBoundsError",
    "BackendError",
]
