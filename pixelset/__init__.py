"""
Sorted pixel sets.

**Sorting** (sorting.py)
    Radix sort and deduplication of pixels on their 32-bit key.

**Merging** (merge.py)
    Two-pointer merge kernels: union, intersection, difference and
    symmetric difference of strictly ascending pixel sequences.

**Container** (core.py)
    `PixelSet`, the sorted container with binary-search membership and
    merge-based set algebra.
"""

from .core import PixelSet
from .merge import (
    merge_difference,
    merge_intersection,
    merge_symmetric_difference,
    merge_union,
)
from .sorting import sort_unique

__all__ = [
    # Container
    "PixelSet",
    # Sorting
    "sort_unique",
    # Merging
    "merge_union",
    "merge_intersection",
    "merge_difference",
    "merge_symmetric_difference",
]
