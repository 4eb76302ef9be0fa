"""Leaf traversal for samefringe.

All three traversals share one explicit-stack algorithm. They differ only in
how they treat the tree they walk, which is captured by an OwnershipPolicy:

- SharedBorrow: read only, yields leaf values
- ExclusiveBorrow: yields the Leaf slots themselves so values can be replaced
- Consume: detaches subtrees from the source as it goes, yields values

The stack lives on the heap, so traversal depth is limited by memory rather
than by the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Sequence, TypeVar, Union

from .tree import Tree, Leaf, Forest
from .._common.config import OwnershipMode

T = TypeVar("T")


class OwnershipPolicy(ABC):
    """How a traversal reads forests and what it hands out for leaves."""

    @abstractmethod
    def expand(self, forest: Forest) -> Sequence[Tree]:
        """Return the children of a forest, in left-to-right order."""
        pass

    @abstractmethod
    def emit(self, leaf: Leaf) -> Any:
        """Return the item yielded for a leaf."""
        pass


class SharedBorrow(OwnershipPolicy):
    """Read-only access. The tree is left exactly as it was."""

    def expand(self, forest: Forest) -> Sequence[Tree]:
        return forest.children

    def emit(self, leaf: Leaf) -> Any:
        return leaf.value


class ExclusiveBorrow(OwnershipPolicy):
    """Mutable access through the ``Leaf`` objects.

    Each leaf is yielded once, so assigning ``slot.value`` touches exactly
    one position of the fringe. The shape must not be changed while the
    traversal is alive.
    """

    def expand(self, forest: Forest) -> Sequence[Tree]:
        return forest.children

    def emit(self, leaf: Leaf) -> Leaf:
        return leaf


class Consume(OwnershipPolicy):
    """Owning access. Expanded forests are emptied in the source tree."""

    def expand(self, forest: Forest) -> Sequence[Tree]:
        children, forest.children = forest.children, []
        return children

    def emit(self, leaf: Leaf) -> Any:
        return leaf.value


class FringeIterator(Iterator[T]):
    """Lazy left-to-right, depth-first walk over the leaves of a tree.

    Not restartable: once exhausted it stays exhausted. Call ``tree.iter()``
    again for a fresh pass.
    """

    policy: OwnershipPolicy = SharedBorrow()

    def __init__(self, root: Tree, policy: Optional[OwnershipPolicy] = None):
        """Initialize with the root of the walk.

        Args:
            root: Tree whose leaves are visited
            policy: Ownership policy (defaults to the class policy)
        """
        if policy is not None:
            self.policy = policy
        self._stack: List[Tree] = [root]

    def __iter__(self) -> "FringeIterator[T]":
        return self

    def __next__(self) -> T:
        stack = self._stack
        while stack:
            tree = stack.pop()
            if tree.is_leaf():
                return self.policy.emit(tree)
            # Push right to left so the leftmost child is popped next
            stack.extend(reversed(self.policy.expand(tree)))
        raise StopIteration

    @property
    def pending(self) -> int:
        """Number of subtrees still waiting on the stack."""
        return len(self._stack)


class Iter(FringeIterator[T]):
    """Read-only traversal yielding leaf values."""

    policy = SharedBorrow()


class IterMut(FringeIterator[Leaf]):
    """Traversal yielding ``Leaf`` slots for in-place mutation."""

    policy = ExclusiveBorrow()


class IntoIter(FringeIterator[T]):
    """Consuming traversal yielding leaf values."""

    policy = Consume()


def create_iterator(mode: Union[OwnershipMode, str], tree: Tree) -> FringeIterator:
    """Create a fringe iterator by ownership mode.

    Args:
        mode: OwnershipMode or its string value (shared, exclusive, consume)
        tree: Tree to traverse

    Returns:
        FringeIterator over the tree's leaves

    Raises:
        ValueError: If mode is not recognized
    """
    iterators = {
        OwnershipMode.SHARED: Iter,
        OwnershipMode.EXCLUSIVE: IterMut,
        OwnershipMode.CONSUME: IntoIter,
    }

    if not isinstance(mode, OwnershipMode):
        try:
            mode = OwnershipMode(mode.lower() if isinstance(mode, str) else mode)
        except ValueError:
            raise ValueError(
                f"Unknown ownership mode: {mode}. "
                f"Choose from: {', '.join(m.value for m in OwnershipMode)}"
            ) from None

    return iterators[mode](tree)
