"""Tree data type for samefringe.

A tree stores values only at its leaves. Interior nodes are forests: ordered
lists of subtrees, possibly empty. Trees are built once, usually as literal
nested constructions, and then traversed, mutated through ``iter_mut()`` or
consumed through ``into_iter()``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .traverser import Iter, IterMut, IntoIter

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")


class Tree(ABC, Generic[T]):
    """Abstract base for the two tree variants, ``Leaf`` and ``Forest``.

    Navigation and transforms live in their own modules; the methods here
    are thin entry points so client code can write ``tree.iter()`` or
    ``tree.map(f)``.
    """

    @abstractmethod
    def is_leaf(self) -> bool:
        """Return True for ``Leaf`` and False for ``Forest``."""
        pass

    @abstractmethod
    def to_nested(self) -> Any:
        """Convert back to the nested list form accepted by ``from_nested``."""
        pass

    @classmethod
    def from_nested(cls, obj: Any) -> "Tree":
        """Build a tree from nested lists.

        Lists and tuples become forests, everything else becomes a leaf::

            >>> Tree.from_nested([1, [2, [3, 4]]])
            Forest(children=[Leaf(value=1), Forest(children=[...])])

        A ``Tree`` instance found inside ``obj`` is used as is.
        """
        if isinstance(obj, Tree):
            return obj
        if isinstance(obj, (list, tuple)):
            return Forest([cls.from_nested(child) for child in obj])
        return Leaf(obj)

    # Traversal entry points

    def iter(self) -> "Iter[T]":
        """Lazy read-only traversal of leaf values, left to right."""
        from .traverser import Iter
        return Iter(self)

    def iter_mut(self) -> "IterMut[T]":
        """Lazy traversal yielding each ``Leaf`` slot for in-place updates."""
        from .traverser import IterMut
        return IterMut(self)

    def into_iter(self) -> "IntoIter[T]":
        """Owning traversal; empties every forest it expands."""
        from .traverser import IntoIter
        return IntoIter(self)

    def __iter__(self):
        return self.iter()

    def fringe(self) -> List[T]:
        """Materialize the whole fringe as a list."""
        return list(self.iter())

    # Structural transforms

    def map(self, f: Callable[[T], U]) -> "Tree[U]":
        from .transforms import tree_map
        return tree_map(self, f)

    def map_into(self, f: Callable[[T], U]) -> "Tree[U]":
        from .transforms import tree_map_into
        return tree_map_into(self, f)

    def fold(self, init: B, f: Callable[[B, T], B]) -> B:
        from .transforms import tree_fold
        return tree_fold(self, init, f)


@dataclass
class Leaf(Tree[T]):
    """A tree holding exactly one value."""

    value: T

    def is_leaf(self) -> bool:
        return True

    def to_nested(self) -> Any:
        return self.value


@dataclass
class Forest(Tree[T]):
    """An ordered sequence of subtrees. ``Forest()`` is the empty forest."""

    children: List[Tree[T]] = field(default_factory=list)

    def is_leaf(self) -> bool:
        return False

    def to_nested(self) -> Any:
        return [child.to_nested() for child in self.children]
