"""
The sorted pixel set container.

A `PixelSet` stores pixels in a list kept strictly ascending in row-major
(y, x) order. This gives:

- cache-friendly scanline iteration
- O(log n) membership by binary search
- O(n + m) union, intersection and differences by linear merges
- little memory overhead compared to hash-based sets

Single-pixel edits (`add`, `discard`) shift the list and cost O(n); the
container is meant for whole-set algebra, not for many small edits.

Naming follows the builtin `set`: mutating methods (`add`, `discard`,
`difference_update`) return None, every other operation returns a new,
independently owned set.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, Iterator
from operator import attrgetter
from typing import Self

from localtypes import Pixel, Predicate

from .merge import (
    merge_difference,
    merge_intersection,
    merge_symmetric_difference,
    merge_union,
)
from .sorting import sort_unique

_key = attrgetter("key")


class PixelSet:
    """
    Ordered, duplicate-free collection of pixels.

    `PixelSet(pixels)` accepts pixels in any order and sorts them.
    `PixelSet.from_sorted_unchecked(pixels)` trusts its input instead.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels: Iterable[Pixel] = ()) -> None:
        self._pixels: list[Pixel] = sort_unique(pixels)

    # Constructors
    @classmethod
    def from_unsorted(cls, pixels: Iterable[Pixel]) -> Self:
        """Sort and deduplicate `pixels` (radix sort on the pixel key, O(n))."""
        return cls(pixels)

    @classmethod
    def from_sorted_unchecked(cls, pixels: Iterable[Pixel]) -> Self:
        """
        Build a set from pixels already in strictly ascending row-major order.

        No validation is performed. Passing unsorted or duplicated pixels
        does not raise: it silently breaks membership tests and every merge
        based operation on the resulting set.
        """
        instance = cls.__new__(cls)
        instance._pixels = list(pixels)
        return instance

    @classmethod
    def empty(cls) -> Self:
        return cls.from_sorted_unchecked(())

    def copy(self) -> Self:
        return type(self).from_sorted_unchecked(self._pixels)

    __copy__ = copy

    # Queries
    def __len__(self) -> int:
        return len(self._pixels)

    def __bool__(self) -> bool:
        return bool(self._pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self._pixels)

    def __getitem__(self, index: int) -> Pixel:
        return self._pixels[index]

    def __contains__(self, pixel: object) -> bool:
        """Binary search, O(log n)."""
        if not isinstance(pixel, Pixel):
            return False
        index = bisect_left(self._pixels, pixel.key, key=_key)
        return index < len(self._pixels) and self._pixels[index].key == pixel.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelSet):
            return NotImplemented
        return self._pixels == other._pixels

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pixels!r})"

    def is_empty(self) -> bool:
        return not self._pixels

    def issubset(self, other: PixelSet) -> bool:
        """True if every pixel of this set is in `other`. O(n log m)."""
        return all(pixel in other for pixel in self._pixels)

    def intersects(self, other: PixelSet) -> bool:
        """True if this set shares at least one pixel with `other`. O(n log m)."""
        return any(pixel in other for pixel in self._pixels)

    # In-place edits
    def add(self, pixel: Pixel) -> None:
        """Insert `pixel` at its sorted position, if absent."""
        index = bisect_left(self._pixels, pixel.key, key=_key)
        if index < len(self._pixels) and self._pixels[index].key == pixel.key:
            return
        self._pixels.insert(index, pixel)

    def discard(self, pixel: Pixel) -> None:
        """Remove `pixel`, if present."""
        index = bisect_left(self._pixels, pixel.key, key=_key)
        if index < len(self._pixels) and self._pixels[index].key == pixel.key:
            del self._pixels[index]

    def difference_update(self, other: PixelSet) -> None:
        """Remove every pixel of `other` from this set. O(n + m)."""
        if self._pixels and other._pixels:
            self._pixels = merge_difference(self._pixels, other._pixels)

    # Set algebra
    def union(self, other: PixelSet) -> Self:
        if not self._pixels:
            return type(self).from_sorted_unchecked(other._pixels)
        if not other._pixels:
            return self.copy()
        return type(self).from_sorted_unchecked(
            merge_union(self._pixels, other._pixels)
        )

    def intersection(self, other: PixelSet) -> Self:
        if not self._pixels or not other._pixels:
            return type(self).empty()
        return type(self).from_sorted_unchecked(
            merge_intersection(self._pixels, other._pixels)
        )

    def difference(self, other: PixelSet) -> Self:
        if not self._pixels:
            return type(self).empty()
        if not other._pixels:
            return self.copy()
        return type(self).from_sorted_unchecked(
            merge_difference(self._pixels, other._pixels)
        )

    def symmetric_difference(self, other: PixelSet) -> Self:
        if not self._pixels:
            return type(self).from_sorted_unchecked(other._pixels)
        if not other._pixels:
            return self.copy()
        return type(self).from_sorted_unchecked(
            merge_symmetric_difference(self._pixels, other._pixels)
        )

    def __or__(self, other: object) -> Self:
        if not isinstance(other, PixelSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> Self:
        if not isinstance(other, PixelSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, PixelSet):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: object) -> Self:
        if not isinstance(other, PixelSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PixelSet):
            return NotImplemented
        return self.issubset(other)

    # Derived sets
    def filter(self, predicate: Predicate[Pixel]) -> Self:
        """Keep the pixels satisfying `predicate`, preserving order."""
        return type(self).from_sorted_unchecked(
            pixel for pixel in self._pixels if predicate(pixel)
        )

    def apply(self, applier: Callable[[Self], None]) -> Self:
        """Run a mutating `applier` on a copy of this set and return the copy."""
        result = self.copy()
        applier(result)
        return result


__all__ = ["PixelSet"]
