"""Same fringe without an iterator object.

Henry Baker's solution: each tree is walked by a *producer* that hands one
leaf to a *receiver* together with a new producer for the rest of the tree.
The comparator drives the two producers against each other one leaf at a
time, so traversal state lives in the chain of nested calls instead of an
explicit stack.

A Producer and a Receiver refer to each other's type, so both are
single-method abstract classes::

    producer.produce(receiver) -> bool
    receiver.receive(None) -> bool                  # end of data
    receiver.receive(Item(value, rest)) -> bool     # one leaf plus the remainder

The methods are called by name rather than through ``__call__`` so every
step stays a plain Python-to-Python call, bounded only by the recursion
limit. Depth grows with the number of leaves compared plus the nesting of
both trees, and a RecursionError is re-raised as FringeDepthError.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, NamedTuple, Optional, Sequence, TypeVar

from ..core.tree import Tree
from ..exceptions import FringeDepthError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Producer(ABC, Generic[T]):
    """Resumable traversal that yields at most one leaf per call."""

    @abstractmethod
    def produce(self, receiver: "Receiver[T]") -> bool:
        """Invoke ``receiver`` exactly once and return its result."""
        pass


class Item(NamedTuple):
    """A leaf value together with the producer for everything after it."""
    value: Any
    rest: "Producer[Any]"


class Receiver(ABC, Generic[T]):
    """One-shot callback for a producer's notification."""

    @abstractmethod
    def receive(self, item: Optional[Item]) -> bool:
        """Consume ``None`` (end of data) or an ``Item``."""
        pass


class CallbackReceiver(Receiver[T]):
    """Receiver backed by a plain function."""

    def __init__(self, callback: Callable[[Optional[Item]], bool]):
        self._callback = callback

    def receive(self, item: Optional[Item]) -> bool:
        return self._callback(item)


class EndOfData(Producer[T]):
    """Producer that always reports that no elements are left."""

    def produce(self, receiver: Receiver[T]) -> bool:
        return receiver.receive(None)

    def __repr__(self) -> str:
        return "END_OF_DATA"


END_OF_DATA = EndOfData()


class TreeProducer(Producer[T]):
    """Produce the leaves of ``tree``, then continue with ``continuation``."""

    def __init__(self, tree: Tree[T], continuation: Producer[T]):
        self.tree = tree
        self.continuation = continuation

    def produce(self, receiver: Receiver[T]) -> bool:
        tree = self.tree
        if tree.is_leaf():
            return receiver.receive(Item(tree.value, self.continuation))
        return ForestProducer(tree.children, 0, self.continuation).produce(receiver)


class ForestProducer(Producer[T]):
    """Produce the leaves of ``children[start:]``, then ``continuation``.

    Holds an index into the forest instead of slicing it.
    """

    def __init__(self, children: Sequence[Tree[T]], start: int, continuation: Producer[T]):
        self.children = children
        self.start = start
        self.continuation = continuation

    def produce(self, receiver: Receiver[T]) -> bool:
        if self.start >= len(self.children):
            return self.continuation.produce(receiver)
        rest = ForestProducer(self.children, self.start + 1, self.continuation)
        return TreeProducer(self.children[self.start], rest).produce(receiver)


def fringe_producer(tree: Tree[T]) -> Producer[T]:
    """Root producer for a tree, ending in ``END_OF_DATA``."""
    return TreeProducer(tree, END_OF_DATA)


def same_fringe(tree1: Tree, tree2: Tree) -> bool:
    """Determine whether tree1 and tree2 have the same fringe.

    Kicks off a leaf producer for each tree and compares them step by step.

    Raises:
        FringeDepthError: If the comparison exhausted the interpreter stack
    """
    try:
        return compare_producers(fringe_producer(tree1), fringe_producer(tree2))
    except FringeDepthError:
        raise
    except RecursionError as e:
        raise FringeDepthError(
            "Continuation-passing comparison exceeded the recursion limit; "
            "raise it via ComparisonConfig.recursion_limit or use the "
            "iterator strategy"
        ) from e


def compare_producers(xs: Producer, ys: Producer, position: int = 0) -> bool:
    """Run one step of each producer and decide whether to continue.

    Both ends reached is a match. One end reached is a length mismatch.
    Two leaves are compared, and only when they are equal does the
    comparison recurse on the two remaining producers.
    """
    def receive_x(x_next: Optional[Item]) -> bool:
        def receive_y(y_next: Optional[Item]) -> bool:
            if x_next is None and y_next is None:
                return True
            if x_next is None or y_next is None:
                logger.debug("Fringe lengths differ at leaf %d", position)
                return False
            if not x_next.value == y_next.value:
                logger.debug(
                    "Fringes differ at leaf %d: %r != %r",
                    position, x_next.value, y_next.value,
                )
                return False
            return compare_producers(x_next.rest, y_next.rest, position + 1)

        return ys.produce(CallbackReceiver(receive_y))

    return xs.produce(CallbackReceiver(receive_x))
