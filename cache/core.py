"""
Pixel caches: a pixel set stored as disjoint rectangles.

A `PixelCache` compresses a region into a handful of rectangles, which are
fast to iterate and to turn back into a `PixelSet`. It is written once: to
change the region, rebuild the cache from the updated set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from itertools import chain

from pixelset import PixelSet
from shapes import Rectangle

from .grow import grow_pixel_into_rectangle
from .pick import RandomPick, uniform_pick

logger = logging.getLogger(__name__)


class PixelCache:
    """
    Ordered collection of pairwise disjoint rectangles.

    Build it with `PixelCache.from_set`; the constructor trusts that the
    rectangles it receives do not overlap.
    """

    __slots__ = ("_rectangles",)

    def __init__(self, rectangles: Iterable[Rectangle] = ()) -> None:
        self._rectangles: tuple[Rectangle, ...] = tuple(rectangles)

    @classmethod
    def empty(cls) -> PixelCache:
        return cls()

    @classmethod
    def from_set(
        cls, pixels: PixelSet, pick: RandomPick | None = None
    ) -> PixelCache:
        """
        Decompose a set into disjoint rectangles.

        Repeatedly picks a seed among the pixels not yet covered, grows it
        into a rectangle inside them, and removes that rectangle from the
        remaining pixels. Every round removes at least the seed, so the
        loop ends after at most len(pixels) rounds.

        Args:
            pixels: The set to decompose, left untouched.
            pick: Seed picker, `uniform_pick()` if not given.

        Returns:
            A cache whose rectangles cover exactly `pixels`.
        """
        if pick is None:
            pick = uniform_pick()

        remaining = pixels.copy()
        rectangles: list[Rectangle] = []

        while remaining:
            seed = pick(remaining)
            rectangle = grow_pixel_into_rectangle(seed, remaining)
            remaining.difference_update(rectangle.to_set())
            rectangles.append(rectangle)
            logger.debug(
                f"Seed {seed} grew into {rectangle}, {len(remaining)} pixels left"
            )

        logger.debug(
            f"Cached {len(pixels)} pixels into {len(rectangles)} rectangles"
        )
        return cls(rectangles)

    @property
    def rectangles(self) -> tuple[Rectangle, ...]:
        return self._rectangles

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(self._rectangles)

    def __len__(self) -> int:
        """Number of rectangles, see `total_size` for the number of pixels."""
        return len(self._rectangles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelCache):
            return NotImplemented
        return self._rectangles == other._rectangles

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelCache({list(self._rectangles)!r})"

    def flatten(self) -> PixelSet:
        """
        All cached pixels as one sorted set.

        Rectangles enumerate in row-major order one at a time, so the
        concatenation goes through the sorting constructor.
        """
        return PixelSet.from_unsorted(
            chain.from_iterable(rect.iter_pixels() for rect in self._rectangles)
        )

    def total_size(self) -> int:
        """Total number of pixels across all rectangles."""
        return sum(rect.size() for rect in self._rectangles)

    def is_empty(self) -> bool:
        return self.total_size() == 0
