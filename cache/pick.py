"""
Seed pickers for pixel cache construction.

A picker receives the non-empty set of pixels still to be covered and
returns one of them. `uniform_pick` is the production picker;
`indexed_pick` replays fixed positions for reproducible decompositions.
"""

from collections.abc import Callable, Iterable
from itertools import cycle
from typing import TypeAlias

import numpy as np

from localtypes import Pixel
from pixelset import PixelSet

RandomPick: TypeAlias = Callable[[PixelSet], Pixel]


def uniform_pick(rng: np.random.Generator | int | None = None) -> RandomPick:
    """
    Picker drawing a pixel uniformly at random.

    Args:
        rng: A numpy generator, or a seed for `numpy.random.default_rng`.
    """
    generator = np.random.default_rng(rng)

    def pick(pixels: PixelSet) -> Pixel:
        return pixels[int(generator.integers(len(pixels)))]

    return pick


def indexed_pick(indices: Iterable[int]) -> RandomPick:
    """
    Deterministic picker replaying `indices` cyclically.

    Each index is taken modulo the size of the set it is applied to, so
    any sequence of integers is a valid choice.

    Example:
        >>> pick = indexed_pick([0])  # always the first pixel in row-major order
    """
    positions = cycle(list(indices) or [0])

    def pick(pixels: PixelSet) -> Pixel:
        return pixels[next(positions) % len(pixels)]

    return pick
