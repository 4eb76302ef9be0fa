"""Structural transforms over trees.

``tree_map`` and ``tree_map_into`` keep the shape and replace each leaf.
They cannot be written on top of a leaf iterator because the forest nesting
has to be rebuilt. ``tree_fold`` collapses the shape; it visits leaves in the
same order as ``Tree.iter()``.

All three recurse on the Python call stack, one frame per level of nesting.
"""

from typing import Any, Callable, TypeVar

from .tree import Tree, Leaf, Forest

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")


def tree_map(tree: Tree[T], f: Callable[[T], U]) -> Tree[U]:
    """Return a new tree of the same shape with ``f`` applied to every leaf.

    The source tree is not modified.

    Example:
        >>> tree_map(Tree.from_nested([1, [2]]), lambda n: n * 10).to_nested()
        [10, [20]]
    """
    if tree.is_leaf():
        return Leaf(f(tree.value))
    return Forest([tree_map(child, f) for child in tree.children])


def tree_map_into(tree: Tree[T], f: Callable[[T], U]) -> Tree[U]:
    """Like ``tree_map`` but consumes the source.

    Each source forest is emptied as it is rebuilt, so afterwards the source
    root is an empty forest (or an untouched leaf if the root was a leaf).
    """
    if tree.is_leaf():
        return Leaf(f(tree.value))
    children, tree.children = tree.children, []
    return Forest([tree_map_into(child, f) for child in children])


def tree_fold(tree: Tree[T], init: B, f: Callable[[B, T], B]) -> B:
    """Reduce all leaves left to right with ``f(accumulator, value)``."""
    if tree.is_leaf():
        return f(init, tree.value)
    acc = init
    for child in tree.children:
        acc = tree_fold(child, acc, f)
    return acc


def leaf_count(tree: Tree) -> int:
    """Number of leaves in the tree."""
    return tree_fold(tree, 0, lambda count, _: count + 1)


def leaf_sum(tree: Tree, start: Any = 0) -> Any:
    """Sum of all leaf values, starting from ``start``."""
    return tree_fold(tree, start, lambda total, value: total + value)
