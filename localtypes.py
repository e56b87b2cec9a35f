"""
Type definitions for pixel set operations.

This module contains the coordinate type shared by every other module,
the errors raised on out-of-range coordinates, and the type aliases used
for rasters and predicates.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Callable, TypeAlias, TypeVar

import numpy as np
import numpy.typing as npt

from constants import COORD_MAX, COORD_MIN, KEY_MASK, KEY_SHIFT

# Raster representation: raster[y, x] -> (r, g, b, a)
Raster: TypeAlias = npt.NDArray[np.uint8]

# Type aliases for improving code readability
Key = int
Width = int
Height = int


class CoordinateRangeError(ValueError):
    """Raised when a coordinate falls outside the unsigned 16-bit range."""

    pass


def check_coordinate(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not COORD_MIN <= value <= COORD_MAX:
        raise CoordinateRangeError(
            f"{name}={value} is outside [{COORD_MIN}, {COORD_MAX}]"
        )
    return value


@dataclass(frozen=True, order=True, slots=True)
class Pixel:
    """
    A single 2D pixel coordinate.

    Pixels compare, hash and sort through their key, which packs y in the
    high 16 bits and x in the low 16 bits. Integer order on keys is
    therefore row-major order: (y, then x).
    """

    key: Key = field(init=False, repr=False)
    x: int = field(compare=False)
    y: int = field(compare=False)

    def __post_init__(self) -> None:
        check_coordinate("x", self.x)
        check_coordinate("y", self.y)
        object.__setattr__(self, "key", (self.y << KEY_SHIFT) | self.x)

    @classmethod
    def from_key(cls, key: Key) -> Pixel:
        return cls(key & KEY_MASK, key >> KEY_SHIFT)

    def __iter__(self) -> Iterator[int]:
        """Allow tuple unpacking: x, y = pixel"""
        return iter((self.x, self.y))


T = TypeVar("T")
Predicate: TypeAlias = Callable[[T], bool]


__all__ = [
    "Raster",
    "Key",
    "Width",
    "Height",
    "CoordinateRangeError",
    "check_coordinate",
    "Pixel",
    "Predicate",
]
