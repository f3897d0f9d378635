"""
Capability string constants for matrixnum.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from matrixnum.core.capabilities import CAPABILITY_ORDERED_ACCUMULATION

    if a.supports(CAPABILITY_ORDERED_ACCUMULATION):
        assert a.dot(b) == expected
"""

# dot() accumulates row of A, column of B, inner index, in that order,
# so products are bit-reproducible across runs and platforms
CAPABILITY_ORDERED_ACCUMULATION = 'ordered_accumulation'

# Arithmetic is delegated to numpy kernels
CAPABILITY_VECTORIZED = 'vectorized'

# row() returns a read-only view into storage instead of a copy
CAPABILITY_ROW_VIEWS = 'row_views'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_ORDERED_ACCUMULATION,
    CAPABILITY_VECTORIZED,
    CAPABILITY_ROW_VIEWS,
})

__all__ = [
    'CAPABILITY_ORDERED_ACCUMULATION',
    'CAPABILITY_VECTORIZED',
    'CAPABILITY_ROW_VIEWS',
    'ALL_CAPABILITIES',
]
