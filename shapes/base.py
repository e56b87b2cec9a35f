"""
Common interface of the geometric shapes.

A shape is a closed-form description of a region: it can answer membership
for a single pixel, enumerate its pixels lazily in row-major order, and
materialize them as a `PixelSet`.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from constants import COORD_MAX
from localtypes import Pixel, Predicate, check_coordinate
from pixelset import PixelSet


class Shape(ABC):
    """A region of the raster that can be converted to a `PixelSet`."""

    @abstractmethod
    def contains(self, pixel: Pixel) -> bool:
        """Returns True if `pixel` lies inside the shape."""
        pass

    @abstractmethod
    def iter_pixels(self) -> Iterator[Pixel]:
        """Enumerates the pixels of the shape in row-major order."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Returns the number of pixels in the shape."""
        pass

    def to_set(self) -> PixelSet:
        # Row-major enumeration is already sorted and duplicate-free
        return PixelSet.from_sorted_unchecked(self.iter_pixels())

    def __contains__(self, pixel: object) -> bool:
        return isinstance(pixel, Pixel) and self.contains(pixel)

    def __iter__(self) -> Iterator[Pixel]:
        return self.iter_pixels()


def check_extent(x: int, y: int, width: int, height: int) -> None:
    """
    Validate a top-left corner and its dimensions.

    Dimensions may be zero (empty extent) but never negative, and the last
    covered column and row must be representable.
    """
    check_coordinate("x", x)
    check_coordinate("y", y)
    if width < 0 or height < 0:
        raise ValueError(f"Negative dimensions: width={width}, height={height}")
    if width:
        check_coordinate("x + width - 1", x + width - 1)
    if height:
        check_coordinate("y + height - 1", y + height - 1)


def scan(
    col_min: int,
    row_min: int,
    col_max: int,
    row_max: int,
    predicate: Predicate[Pixel],
) -> Iterator[Pixel]:
    """
    Row-major scan of an inclusive window, yielding the pixels satisfying
    `predicate`. The window is clipped to the representable range.
    """
    col_min, row_min = max(col_min, 0), max(row_min, 0)
    col_max, row_max = min(col_max, COORD_MAX), min(row_max, COORD_MAX)
    for row in range(row_min, row_max + 1):
        for col in range(col_min, col_max + 1):
            pixel = Pixel(col, row)
            if predicate(pixel):
                yield pixel
