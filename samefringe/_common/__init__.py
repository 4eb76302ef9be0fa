"""Shared, dependency-free components of samefringe.

This internal package holds configuration used by both the core traversal
code and the comparators. It must never import from ``core`` or
``algorithm`` to avoid circular imports.
"""

from .config import (
    ComparisonConfig,
    ComparisonStrategy,
    OwnershipMode,
)

__all__ = [
    'ComparisonConfig',
    'ComparisonStrategy',
    'OwnershipMode',
]
