"""
Matrix backends.

Available backends:
    DenseMatrix: Reference implementation, row-major tuple storage
    NdarrayMatrix: numpy-backed implementation
"""

from matrixnum.backends.dense import DenseMatrix
from matrixnum.backends.ndarray import NdarrayMatrix

__all__ = [
    "DenseMatrix",
    "NdarrayMatrix",
]
