"""
Rectangle decomposition of pixel sets.

**Growth** (grow.py)
    Greedy growth of a seed pixel into a maximal rectangle inside a set.

**Pickers** (pick.py)
    Seed pickers: uniform random (numpy) and deterministic replay.

**Cache** (core.py)
    `PixelCache`: repeated pick + grow + subtract until the set is covered.
"""

from .core import PixelCache
from .grow import (
    grow_pixel_into_rectangle,
    stretch_down,
    stretch_left,
    stretch_right,
    stretch_up,
)
from .pick import RandomPick, indexed_pick, uniform_pick

__all__ = [
    # Cache
    "PixelCache",
    # Growth
    "grow_pixel_into_rectangle",
    "stretch_right",
    "stretch_left",
    "stretch_down",
    "stretch_up",
    # Pickers
    "RandomPick",
    "uniform_pick",
    "indexed_pick",
]
