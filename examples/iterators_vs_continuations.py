#!/usr/bin/env python3
"""
Side-by-side comparison of the two same-fringe comparators.

This example demonstrates:
- Both comparators giving the same answers on differently shaped trees
- Early exit: a mismatch near the front is found without walking the rest
- The stack-depth bound of the continuation-passing comparator
"""

import sys
import time
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from samefringe import (
    Tree,
    FringeDepthError,
    compare_trees,
    first_difference,
    same_fringe,
    same_fringe_iterative,
)
from samefringe.testing import wide_tree


def timed(label, func, *args, **kwargs):
    """Run func and print its result with the elapsed time."""
    start_time = time.perf_counter()
    result = func(*args, **kwargs)
    elapsed = time.perf_counter() - start_time
    print(f"  {label:<28} {str(result):<6} {elapsed * 1000:8.3f} ms")
    return result


def main():
    tree1 = Tree.from_nested([1, [2, [3, 4]]])
    tree2 = Tree.from_nested([[1, 2], 3, [[4]]])
    tree3 = Tree.from_nested([[1, 2], 3, [[5]]])

    print("Small trees")
    print("-" * 60)
    for other in (tree2, tree3):
        print(f"{tree1.to_nested()} vs {other.to_nested()}")
        timed("continuation passing", same_fringe, tree1, other)
        timed("iterators", same_fringe_iterative, tree1, other)
        print(f"  first difference: {first_difference(tree1, other)}")

    print("\nEarly exit on 10,000 leaves (second leaf differs)")
    print("-" * 60)
    big = wide_tree(10000)
    other = Tree.from_nested([0, -1] + list(range(2, 10000)))
    timed("continuation passing", same_fringe, big, other)
    timed("iterators", same_fringe_iterative, big, other)

    print("\nFull walk of 500 equal leaves")
    print("-" * 60)
    medium = wide_tree(500)
    timed("iterators", same_fringe_iterative, medium, wide_tree(500))
    for limit in (None, 20000):
        label = f"continuation, limit {limit}"
        try:
            timed(label, compare_trees, medium, wide_tree(500),
                  strategy="continuation", recursion_limit=limit)
        except FringeDepthError as e:
            print(f"  {label:<28} {e}")


if __name__ == "__main__":
    main()
