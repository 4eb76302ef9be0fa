"""Same-fringe comparators.

Two independent implementations that must agree on every input:

    from samefringe.algorithm import continuations, iterators
    continuations.same_fringe(tree1, tree2)
    iterators.same_fringe(tree1, tree2)
"""

from . import continuations
from . import iterators
from .iterators import FringeDifference, MISSING, first_difference

__all__ = [
    "continuations",
    "iterators",
    "FringeDifference",
    "MISSING",
    "first_difference",
]
