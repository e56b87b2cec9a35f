"""
Rectangles are the building blocks of pixel caches.

Rectangles are parametrized from their top-left corner (x, y) and their
dimensions (width, height). The pixels covered are the columns
x..x+width-1 and the rows y..y+height-1.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from localtypes import Pixel

from .base import Shape, check_extent, scan


@dataclass(frozen=True)
class Rectangle(Shape):
    """An axis-aligned box of pixels."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        check_extent(self.x, self.y, self.width, self.height)

    @classmethod
    def at_pixel(cls, pixel: Pixel) -> Rectangle:
        """Unit rectangle covering a single pixel."""
        return cls(pixel.x, pixel.y, 1, 1)

    @classmethod
    def bounding(cls, pixels: Iterable[Pixel]) -> Rectangle | None:
        """Smallest rectangle containing every pixel, `None` if there are none."""
        pixels = list(pixels)
        if not pixels:
            return None
        cols = [pixel.x for pixel in pixels]
        rows = [pixel.y for pixel in pixels]
        col_min, row_min = min(cols), min(rows)
        return cls(col_min, row_min, max(cols) - col_min + 1, max(rows) - row_min + 1)

    def corners(self) -> tuple[Pixel, Pixel] | None:
        """(top_left, bottom_right) inclusive corners, `None` when empty."""
        if not self.width or not self.height:
            return None
        return Pixel(self.x, self.y), Pixel(
            self.x + self.width - 1, self.y + self.height - 1
        )

    def contains(self, pixel: Pixel) -> bool:
        return (
            self.x <= pixel.x < self.x + self.width
            and self.y <= pixel.y < self.y + self.height
        )

    def includes(self, other: Rectangle) -> bool:
        """True if every pixel of `other` is inside this rectangle."""
        if not other.width or not other.height:
            return True
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.x + other.width <= self.x + self.width
            and other.y + other.height <= self.y + self.height
        )

    def iter_pixels(self) -> Iterator[Pixel]:
        return (
            Pixel(col, row)
            for row in range(self.y, self.y + self.height)
            for col in range(self.x, self.x + self.width)
        )

    def size(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class RectangleOutline(Shape):
    """The border of a rectangle, `stroke` pixels thick."""

    x: int
    y: int
    width: int
    height: int
    stroke: int

    def __post_init__(self) -> None:
        check_extent(self.x, self.y, self.width, self.height)
        if self.stroke < 0:
            raise ValueError(f"Negative stroke: {self.stroke}")

    def _inner(self) -> tuple[int, int, int, int]:
        # Inner dimensions saturate at 0 when the stroke swallows the shape
        inner_width = max(self.width - 2 * self.stroke, 0)
        inner_height = max(self.height - 2 * self.stroke, 0)
        return self.x + self.stroke, self.y + self.stroke, inner_width, inner_height

    def contains(self, pixel: Pixel) -> bool:
        x, y = pixel
        outer = self.x <= x < self.x + self.width and self.y <= y < self.y + self.height
        if not outer:
            return False

        inner_x, inner_y, inner_width, inner_height = self._inner()
        inner = (
            inner_width > 0
            and inner_height > 0
            and inner_x <= x < inner_x + inner_width
            and inner_y <= y < inner_y + inner_height
        )
        return not inner

    def iter_pixels(self) -> Iterator[Pixel]:
        return scan(
            self.x,
            self.y,
            self.x + self.width - 1,
            self.y + self.height - 1,
            self.contains,
        )

    def size(self) -> int:
        _, _, inner_width, inner_height = self._inner()
        return self.width * self.height - inner_width * inner_height
