"""Testing utilities for samefringe consumers."""

from .fixtures import TrackedLeaf, VisitRecorder, CountingValue, sample_trees, deep_tree, wide_tree

__all__ = ['TrackedLeaf', 'VisitRecorder', 'CountingValue', 'sample_trees', 'deep_tree', 'wide_tree']
