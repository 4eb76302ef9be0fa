"""Same fringe by external iteration.

Two explicit-stack iterators are pulled in lockstep. This is the baseline the
continuation-passing comparator is checked against, and the safe choice for
large trees since it never recurses.
"""

import logging
from itertools import zip_longest
from typing import Any, NamedTuple, Optional

from ..core.tree import Tree

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for the side of a comparison whose fringe has ended."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class FringeDifference(NamedTuple):
    """First position at which two fringes disagree.

    ``left`` or ``right`` is ``MISSING`` when that fringe ended early.
    """
    position: int
    left: Any
    right: Any


def same_fringe(tree1: Tree, tree2: Tree) -> bool:
    """Determine whether tree1 and tree2 have the same fringe."""
    return first_difference(tree1, tree2) is None


def first_difference(tree1: Tree, tree2: Tree) -> Optional[FringeDifference]:
    """Find where the fringes of two trees first differ.

    Stops pulling from both iterators at the first difference.

    Returns:
        FringeDifference, or None if the fringes are equal
    """
    pairs = zip_longest(tree1.iter(), tree2.iter(), fillvalue=MISSING)
    for position, (left, right) in enumerate(pairs):
        if left is MISSING or right is MISSING or not left == right:
            logger.debug("Fringes differ at leaf %d: %r != %r", position, left, right)
            return FringeDifference(position, left, right)
    return None
