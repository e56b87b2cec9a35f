"""
Circles and circle outlines, centered on a pixel.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from localtypes import Pixel, check_coordinate

from .base import Shape, scan


@dataclass(frozen=True)
class Circle(Shape):
    """Filled disc: pixels whose squared distance to the center is <= radius²."""

    cx: int
    cy: int
    radius: int

    def __post_init__(self) -> None:
        check_coordinate("cx", self.cx)
        check_coordinate("cy", self.cy)
        if self.radius < 0:
            raise ValueError(f"Negative radius: {self.radius}")

    def contains(self, pixel: Pixel) -> bool:
        dx = pixel.x - self.cx
        dy = pixel.y - self.cy
        return dx * dx + dy * dy <= self.radius * self.radius

    def iter_pixels(self) -> Iterator[Pixel]:
        r = self.radius
        return scan(
            self.cx - r, self.cy - r, self.cx + r, self.cy + r, self.contains
        )

    def size(self) -> int:
        return sum(1 for _ in self.iter_pixels())


@dataclass(frozen=True)
class CircleOutline(Shape):
    """Ring of a circle, `stroke` pixels thick, measured inwards from the radius."""

    cx: int
    cy: int
    radius: int
    stroke: int

    def __post_init__(self) -> None:
        check_coordinate("cx", self.cx)
        check_coordinate("cy", self.cy)
        if self.radius < 0 or self.stroke < 0:
            raise ValueError(
                f"Negative radius or stroke: radius={self.radius}, stroke={self.stroke}"
            )

    def contains(self, pixel: Pixel) -> bool:
        dx = pixel.x - self.cx
        dy = pixel.y - self.cy
        distance2 = dx * dx + dy * dy

        inner_radius = max(self.radius - self.stroke, 0)
        outer = distance2 <= self.radius * self.radius
        inner = distance2 < inner_radius * inner_radius
        return outer and not inner

    def iter_pixels(self) -> Iterator[Pixel]:
        r = self.radius
        return scan(
            self.cx - r, self.cy - r, self.cx + r, self.cy + r, self.contains
        )

    def size(self) -> int:
        return sum(1 for _ in self.iter_pixels())
