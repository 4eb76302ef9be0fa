"""Core abstractions for samefringe.

This package contains the tree type, its traversals and the structural
transforms built on it.
"""

from .tree import Tree, Leaf, Forest
from .traverser import (
    OwnershipPolicy,
    SharedBorrow,
    ExclusiveBorrow,
    Consume,
    FringeIterator,
    Iter,
    IterMut,
    IntoIter,
    create_iterator,
)
from .transforms import tree_map, tree_map_into, tree_fold, leaf_count, leaf_sum

__all__ = [
    "Tree",
    "Leaf",
    "Forest",
    "OwnershipPolicy",
    "SharedBorrow",
    "ExclusiveBorrow",
    "Consume",
    "FringeIterator",
    "Iter",
    "IterMut",
    "IntoIter",
    "create_iterator",
    "tree_map",
    "tree_map_into",
    "tree_fold",
    "leaf_count",
    "leaf_sum",
]
