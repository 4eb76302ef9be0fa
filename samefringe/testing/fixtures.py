"""Test fixtures for samefringe consumers.

These helpers make it possible to observe how much of a tree a comparison
actually touched, without exposing comparator internals.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.tree import Tree, Leaf, Forest


@dataclass
class TrackedLeaf(Leaf):
    """Leaf that records itself in ``log`` every time it is visited.

    Both traversal styles call ``is_leaf()`` exactly once per node they
    reach, so the log shows which leaves a comparison got to.
    """

    log: Optional[List[Any]] = field(default=None, compare=False, repr=False)

    def is_leaf(self) -> bool:
        if self.log is not None:
            self.log.append(self.value)
        return True


class VisitRecorder:
    """Builds trees of TrackedLeaf sharing one visit log.

    Example:
        recorder = VisitRecorder()
        tree = recorder.build([1, [2, 3]])
        same_fringe(tree, other)
        assert recorder.visited == [1, 2]
    """

    def __init__(self):
        self.visited: List[Any] = []

    def build(self, nested: Any) -> Tree:
        """Build a tree from nested lists with tracked leaves."""
        if isinstance(nested, (list, tuple)):
            return Forest([self.build(child) for child in nested])
        return TrackedLeaf(nested, log=self.visited)

    def reset(self) -> None:
        self.visited.clear()


class CountingValue:
    """Leaf value that counts how often it is compared for equality."""

    comparisons = 0

    def __init__(self, value: Any):
        self.value = value

    def __eq__(self, other: object) -> bool:
        CountingValue.comparisons += 1
        if isinstance(other, CountingValue):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"CountingValue({self.value!r})"

    @classmethod
    def reset(cls) -> None:
        cls.comparisons = 0


def sample_trees() -> Dict[str, Tree]:
    """Named trees covering the shapes the comparators must handle.

    Fresh trees are built on every call, so tests may mutate or consume them.
    """
    nested = {
        'empty': [],
        'nested_empty': [[], [[]], []],
        'single': 7,
        'single_in_forest': [7],
        'right_heavy': [1, [2, [3, 4]]],
        'left_heavy': [[[1, 2], 3], 4],
        'mixed': [[1, 2], 3, [[4]]],
        'with_empties': [[], 1, [[], 2], [[3], []], [[[4]]], []],
        'last_differs': [[1, 2], 3, [[5]]],
        'prefix': [1, [2, 3]],
        'longer': [1, 2, [3, 4, 5]],
        'strings': ['a', ['b', ['c']]],
    }
    return {name: Tree.from_nested(shape) for name, shape in nested.items()}


def deep_tree(depth: int, value: Any = 0) -> Tree:
    """A single leaf wrapped in ``depth`` nested forests.

    Built iteratively so any depth can be constructed.
    """
    tree: Tree = Leaf(value)
    for _ in range(depth):
        tree = Forest([tree])
    return tree


def wide_tree(width: int) -> Tree:
    """One forest holding leaves 0 .. width-1."""
    return Forest([Leaf(i) for i in range(width)])
