"""High-level API for samefringe.

Simple functional interfaces for comparing fringes. They wrap the plan and
config objects for the common cases.
"""

from typing import Callable, Optional, Union

from .core.tree import Tree
from .core.transforms import tree_map, tree_map_into, tree_fold, leaf_count
from .config import ComparisonConfig, ComparisonStrategy
from .planning import ComparisonPlan
from .algorithm import continuations, iterators
from .algorithm.iterators import FringeDifference, first_difference


def same_fringe(tree1: Tree, tree2: Tree) -> bool:
    """Compare fringes with the continuation-passing comparator.

    Example:
        >>> t1 = Tree.from_nested([1, [2, [3, 4]]])
        >>> t2 = Tree.from_nested([[1, 2], 3, [[4]]])
        >>> same_fringe(t1, t2)
        True
    """
    return continuations.same_fringe(tree1, tree2)


def same_fringe_iterative(tree1: Tree, tree2: Tree) -> bool:
    """Compare fringes with two explicit-stack iterators in lockstep."""
    return iterators.same_fringe(tree1, tree2)


def compare_trees(
    tree1: Tree,
    tree2: Tree,
    strategy: Union[ComparisonStrategy, str] = ComparisonStrategy.ITERATOR,
    recursion_limit: Optional[int] = None,
    on_mismatch: Optional[Callable[[FringeDifference], None]] = None,
) -> bool:
    """Compare fringes through a validated ComparisonPlan.

    Args:
        tree1: First tree
        tree2: Second tree
        strategy: Comparison strategy (iterator, continuation)
        recursion_limit: Recursion limit for the continuation strategy
        on_mismatch: Called with the first FringeDifference if the trees differ

    Returns:
        True if both fringes are equal

    Raises:
        ConfigurationError: If the options are inconsistent
        ValueError: If the strategy name is not recognized

    Example:
        >>> compare_trees(t1, t2, strategy="continuation", recursion_limit=5000)
        True
    """
    config = ComparisonConfig(
        strategy=_parse_strategy(strategy),
        recursion_limit=recursion_limit,
        on_mismatch=on_mismatch,
    )
    return ComparisonPlan(config).execute(tree1, tree2)


def _parse_strategy(strategy: Union[ComparisonStrategy, str]) -> ComparisonStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        ComparisonStrategy enum value
    """
    if isinstance(strategy, ComparisonStrategy):
        return strategy

    # Map string names to enum values
    strategy_map = {
        'iterator': ComparisonStrategy.ITERATOR,
        'iterative': ComparisonStrategy.ITERATOR,
        'stack': ComparisonStrategy.ITERATOR,
        'continuation': ComparisonStrategy.CONTINUATION,
        'cps': ComparisonStrategy.CONTINUATION,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower not in strategy_map:
        raise ValueError(
            f"Unknown comparison strategy: {strategy}. "
            f"Choose from: {', '.join(strategy_map.keys())}"
        )

    return strategy_map[strategy_lower]


__all__ = [
    'same_fringe',
    'same_fringe_iterative',
    'compare_trees',
    'first_difference',
    'tree_map',
    'tree_map_into',
    'tree_fold',
    'leaf_count',
]
