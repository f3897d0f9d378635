"""
Backend dispatch for matrixnum.

This module provides select_backend() (public API): map a backend tag to
the matrix class implementing it. Callers then construct and operate on
matrices only through the MatrixLike contract, so switching backends is a
one-argument change.
"""

from __future__ import annotations

import logging
from typing import Literal

from matrixnum.backends.dense import DenseMatrix
from matrixnum.backends.ndarray import NdarrayMatrix
from matrixnum.core.exceptions import BackendError
from matrixnum.core.protocols import MatrixLike

logger = logging.getLogger(__name__)


# Type alias for backend selection
BackendChoice = Literal['dense', 'ndarray']

DEFAULT_BACKEND: BackendChoice = 'dense'

_BACKENDS: dict[str, type[MatrixLike]] = {
    'dense': DenseMatrix,
    'ndarray': NdarrayMatrix,
}


def available_backends() -> tuple[str, ...]:
    """Registered backend tags, sorted."""
    return tuple(sorted(_BACKENDS))


def select_backend(backend: BackendChoice = DEFAULT_BACKEND) -> type[MatrixLike]:
    """
    Select the matrix class for a backend tag.

    Args:
        backend: Backend to use:
            - 'dense': Reference implementation with ordered accumulation
            - 'ndarray': numpy-backed implementation

    Returns:
        Matrix class satisfying MatrixLike

    Raises:
        BackendError: If the tag is unknown. There is no fallback to the
            default backend.

    Example:
        >>> from matrixnum import select_backend
        >>> Matrix = select_backend('dense')
        >>> Matrix.zero(2, 3).cols()
        3
    """
    try:
        impl = _BACKENDS[backend]
    except (KeyError, TypeError):
        available = available_backends()
        raise BackendError(
            f"Unknown backend: {backend!r}. Available: {', '.join(available)}",
            backend=backend if isinstance(backend, str) else repr(backend),
            available=available,
        ) from None

    logger.debug("Selected backend %r -> %s", backend, impl.__name__)
    return impl
