"""
Ellipses inscribed in a bounding box.

A pixel belongs to the ellipse when its center (x + 0.5, y + 0.5) lies in
the ellipse inscribed in the box: centered on the middle of the box, with
radii width / 2 and height / 2.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from localtypes import Pixel

from .base import Shape, check_extent, scan


def inside_ellipse(
    pixel: Pixel, cx: float, cy: float, rx: float, ry: float
) -> bool:
    if rx <= 0.0 or ry <= 0.0:
        return False

    dx = pixel.x + 0.5 - cx
    dy = pixel.y + 0.5 - cy
    return (dx * dx) / (rx * rx) + (dy * dy) / (ry * ry) <= 1.0


@dataclass(frozen=True)
class Ellipse(Shape):
    """Filled ellipse inside the box (x, y, width, height)."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        check_extent(self.x, self.y, self.width, self.height)

    def contains(self, pixel: Pixel) -> bool:
        if not (
            self.x <= pixel.x < self.x + self.width
            and self.y <= pixel.y < self.y + self.height
        ):
            return False

        rx, ry = self.width / 2.0, self.height / 2.0
        return inside_ellipse(pixel, self.x + rx, self.y + ry, rx, ry)

    def iter_pixels(self) -> Iterator[Pixel]:
        return scan(
            self.x,
            self.y,
            self.x + self.width - 1,
            self.y + self.height - 1,
            self.contains,
        )

    def size(self) -> int:
        return sum(1 for _ in self.iter_pixels())


@dataclass(frozen=True)
class EllipseOutline(Shape):
    """
    Border of an ellipse, `stroke` pixels thick.

    The inner ellipse shares the center and has its box shrunk by `stroke`
    on each side. When that box collapses, the outline is the full ellipse.
    """

    x: int
    y: int
    width: int
    height: int
    stroke: int

    def __post_init__(self) -> None:
        check_extent(self.x, self.y, self.width, self.height)
        if self.stroke < 0:
            raise ValueError(f"Negative stroke: {self.stroke}")

    def contains(self, pixel: Pixel) -> bool:
        if not (
            self.x <= pixel.x < self.x + self.width
            and self.y <= pixel.y < self.y + self.height
        ):
            return False

        rx, ry = self.width / 2.0, self.height / 2.0
        cx, cy = self.x + rx, self.y + ry
        if not inside_ellipse(pixel, cx, cy, rx, ry):
            return False

        inner_width = max(self.width - 2 * self.stroke, 0)
        inner_height = max(self.height - 2 * self.stroke, 0)
        if inner_width == 0 or inner_height == 0:
            return True

        return not inside_ellipse(pixel, cx, cy, inner_width / 2.0, inner_height / 2.0)

    def iter_pixels(self) -> Iterator[Pixel]:
        return scan(
            self.x,
            self.y,
            self.x + self.width - 1,
            self.y + self.height - 1,
            self.contains,
        )

    def size(self) -> int:
        return sum(1 for _ in self.iter_pixels())
