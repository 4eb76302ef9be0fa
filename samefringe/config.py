"""Configuration re-export.

Public home of the configuration classes defined in the ``_common`` package.
"""

from ._common.config import (
    ComparisonConfig,
    ComparisonStrategy,
    OwnershipMode,
)

__all__ = [
    'ComparisonConfig',
    'ComparisonStrategy',
    'OwnershipMode',
]
