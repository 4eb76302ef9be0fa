"""samefringe - Same-fringe comparison of trees.

Two trees have the same fringe when their leaves, read left to right, form
the same sequence, whatever the shapes of the trees. samefringe answers
that question lazily, stopping at the first mismatch, in two ways:

Continuation passing (no iterator object, state on the call stack):
    from samefringe import same_fringe

Explicit-stack iterators in lockstep (safe for very large trees):
    from samefringe import same_fringe_iterative
"""

__version__ = "0.1.0"

from .core import (
    Tree,
    Leaf,
    Forest,
    Iter,
    IterMut,
    IntoIter,
    create_iterator,
    tree_map,
    tree_map_into,
    tree_fold,
    leaf_count,
    leaf_sum,
)
from .config import ComparisonConfig, ComparisonStrategy, OwnershipMode
from .planning import ComparisonPlan
from .exceptions import SameFringeError, ConfigurationError, FringeDepthError
from .algorithm import FringeDifference, MISSING
from .api import (
    same_fringe,
    same_fringe_iterative,
    compare_trees,
    first_difference,
)

__all__ = [
    "__version__",
    # Core
    "Tree",
    "Leaf",
    "Forest",
    "Iter",
    "IterMut",
    "IntoIter",
    "create_iterator",
    "tree_map",
    "tree_map_into",
    "tree_fold",
    "leaf_count",
    "leaf_sum",
    # Config
    "ComparisonConfig",
    "ComparisonStrategy",
    "OwnershipMode",
    "ComparisonPlan",
    # Errors
    "SameFringeError",
    "ConfigurationError",
    "FringeDepthError",
    # API
    "FringeDifference",
    "MISSING",
    "same_fringe",
    "same_fringe_iterative",
    "compare_trees",
    "first_difference",
]
