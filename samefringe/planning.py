"""Comparison planning for samefringe.

The ComparisonPlan validates a ComparisonConfig and coordinates running the
chosen comparator, including the recursion limit the continuation strategy
may need.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

from .core.tree import Tree
from .config import ComparisonConfig, ComparisonStrategy
from .algorithm import continuations, iterators
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@contextmanager
def recursion_limit(limit: Optional[int]) -> Iterator[None]:
    """Temporarily raise the interpreter recursion limit.

    A limit of None, or one below the current limit, leaves it unchanged.
    The previous limit is restored on exit.
    """
    previous = sys.getrecursionlimit()
    if limit is None or limit <= previous:
        yield
        return

    logger.debug("Raising recursion limit from %d to %d", previous, limit)
    sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class ComparisonPlan:
    """Validated plan for comparing tree fringes.

    The plan is the bridge between user intent (ComparisonConfig) and
    execution. Configuration problems are reported before any tree is
    touched.
    """

    _comparators: Dict[ComparisonStrategy, Callable[[Tree, Tree], bool]] = {
        ComparisonStrategy.ITERATOR: iterators.same_fringe,
        ComparisonStrategy.CONTINUATION: continuations.same_fringe,
    }

    def __init__(self, config: Optional[ComparisonConfig] = None):
        """Create and validate a comparison plan.

        Args:
            config: Comparison configuration (defaults to the iterator strategy)

        Raises:
            ConfigurationError: If the config is invalid
        """
        self.config = config or ComparisonConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.comparator = self._comparators[self.config.strategy]

        # Track execution state
        self.comparisons_run = 0
        self.mismatches_found = 0

    def execute(self, tree1: Tree, tree2: Tree) -> bool:
        """Compare the fringes of two trees.

        Args:
            tree1: First tree
            tree2: Second tree

        Returns:
            True if both fringes are equal

        Raises:
            FringeDepthError: If the continuation strategy ran out of stack
        """
        if self.config.strategy == ComparisonStrategy.CONTINUATION:
            with recursion_limit(self.config.recursion_limit):
                result = self.comparator(tree1, tree2)
        else:
            result = self.comparator(tree1, tree2)

        self.comparisons_run += 1
        if not result:
            self.mismatches_found += 1
            if self.config.on_mismatch is not None:
                self.config.on_mismatch(iterators.first_difference(tree1, tree2))

        return result

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the plan.

        Useful for debugging and logging.

        Returns:
            Dictionary describing the plan and its counters
        """
        return {
            'strategy': self.config.strategy.value,
            'recursion_limit': self.config.recursion_limit,
            'has_mismatch_callback': self.config.on_mismatch is not None,
            'comparisons_run': self.comparisons_run,
            'mismatches_found': self.mismatches_found,
        }
