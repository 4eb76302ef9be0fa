"""Configuration system for samefringe.

This module defines how users choose a comparison strategy and the resource
limits that go with it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


class ComparisonStrategy(Enum):
    """Which same-fringe algorithm to run.

    Both give identical answers; they differ in how traversal state is kept.
    """
    ITERATOR = "iterator"           # Two explicit-stack iterators in lockstep
    CONTINUATION = "continuation"   # Producers and receivers, state on the call stack


class OwnershipMode(Enum):
    """How a traversal treats the tree it walks."""
    SHARED = "shared"         # Read-only, yields values
    EXCLUSIVE = "exclusive"   # Yields Leaf slots for mutation
    CONSUME = "consume"       # Empties the source as it goes


@dataclass
class ComparisonConfig:
    """Complete configuration for a fringe comparison.

    The ComparisonPlan validates this configuration and picks the
    comparator that runs it.
    """

    # Algorithm
    strategy: ComparisonStrategy = ComparisonStrategy.ITERATOR

    # Interpreter recursion limit while a continuation comparison runs.
    # None keeps the current limit. Never lowers an existing limit.
    recursion_limit: Optional[int] = None

    # Called with the first FringeDifference when the trees differ
    on_mismatch: Optional[Callable[[Any], None]] = None

    @classmethod
    def iterative(cls) -> 'ComparisonConfig':
        """Create config for the explicit-stack comparator.

        Returns:
            ComparisonConfig using the iterator strategy
        """
        return cls(strategy=ComparisonStrategy.ITERATOR)

    @classmethod
    def continuation(cls, recursion_limit: Optional[int] = None) -> 'ComparisonConfig':
        """Create config for the continuation-passing comparator.

        Args:
            recursion_limit: Recursion limit to apply during comparison

        Returns:
            ComparisonConfig using the continuation strategy
        """
        return cls(
            strategy=ComparisonStrategy.CONTINUATION,
            recursion_limit=recursion_limit,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, ComparisonStrategy):
            errors.append(f"strategy must be a ComparisonStrategy, got {self.strategy!r}")

        if self.recursion_limit is not None:
            if not isinstance(self.recursion_limit, int) or isinstance(self.recursion_limit, bool):
                errors.append("recursion_limit must be an integer")
            elif self.recursion_limit <= 0:
                errors.append("recursion_limit must be positive")
            if self.strategy == ComparisonStrategy.ITERATOR:
                errors.append("recursion_limit only applies to the continuation strategy")

        if self.on_mismatch is not None and not callable(self.on_mismatch):
            errors.append("on_mismatch must be callable")

        return errors
