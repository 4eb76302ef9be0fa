"""Custom exceptions for samefringe.

A fringe mismatch is never an exception: ``same_fringe`` answers False.
These cover misuse and resource exhaustion only.
"""


class SameFringeError(Exception):
    """Base exception for samefringe operations."""


class ConfigurationError(SameFringeError):
    """Raised when a ComparisonConfig fails validation."""


class FringeDepthError(SameFringeError, RecursionError):
    """Continuation-passing comparison ran out of interpreter stack.

    The continuation comparator keeps its traversal state in nested calls,
    so its depth grows with the number of compared leaves plus the nesting
    of both trees. Raise the recursion limit or use the iterator strategy.
    """
