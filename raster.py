"""
Pixel sets over a raster image.

A raster is a numpy array of shape (height, width, 4) and dtype uint8,
indexed raster[y, x]. This module reads and writes pixel colors and
provides the raster-bound set operations: neighborhoods, adjacency,
color filtering, recoloring and mean color.
"""

from collections.abc import Callable, Iterator

import numpy as np

from color import BLACK, Color
from localtypes import Height, Pixel, Predicate, Raster, Width
from pixelset import PixelSet

# 8-connectivity, listed in row-major order so neighborhoods come out sorted
OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


# Raster access
def new_raster(width: Width, height: Height, color: Color = BLACK) -> Raster:
    raster = np.empty((height, width, 4), dtype=np.uint8)
    raster[:, :] = color.check()
    return raster


def dimensions(raster: Raster) -> tuple[Width, Height]:
    height, width = raster.shape[:2]
    return width, height


def in_bounds(raster: Raster, pixel: Pixel) -> bool:
    width, height = dimensions(raster)
    return pixel.x < width and pixel.y < height


def get_color(raster: Raster, pixel: Pixel) -> Color:
    if not in_bounds(raster, pixel):
        raise IndexError(f"{pixel} is outside a raster of size {dimensions(raster)}")
    return Color(*(int(channel) for channel in raster[pixel.y, pixel.x]))


def set_color(raster: Raster, pixel: Pixel, color: Color) -> None:
    if not in_bounds(raster, pixel):
        raise IndexError(f"{pixel} is outside a raster of size {dimensions(raster)}")
    raster[pixel.y, pixel.x] = color.check()


# Sets from rasters
def raster_to_set(raster: Raster) -> PixelSet:
    """Every pixel of the raster."""
    width, height = dimensions(raster)
    return PixelSet.from_sorted_unchecked(
        Pixel(x, y) for y in range(height) for x in range(width)
    )


def pixel_neighbors(pixel: Pixel, raster: Raster) -> PixelSet:
    """The up to 8 pixels adjacent to `pixel` inside the raster."""
    width, height = dimensions(raster)
    neighbors = []
    for dx, dy in OFFSETS:
        x, y = pixel.x + dx, pixel.y + dy
        if 0 <= x < width and 0 <= y < height:
            neighbors.append(Pixel(x, y))
    return PixelSet.from_sorted_unchecked(neighbors)


def set_neighbors(pixels: PixelSet, raster: Raster) -> PixelSet:
    """
    Union of the 8-neighborhoods of every pixel of the set.

    Pixels of the set adjacent to another pixel of the set are included.
    """
    return PixelSet.from_unsorted(
        neighbor for pixel in pixels for neighbor in pixel_neighbors(pixel, raster)
    )


def touching(pixels: PixelSet, other: PixelSet, raster: Raster) -> PixelSet:
    """The pixels of `pixels` adjacent to at least one pixel of `other`."""
    return pixels & set_neighbors(other, raster)


# Colors
def as_colors(pixels: PixelSet, raster: Raster) -> Iterator[Color]:
    return (get_color(raster, pixel) for pixel in pixels)


def filter_color(
    pixels: PixelSet, raster: Raster, predicate: Predicate[Color]
) -> PixelSet:
    return pixels.filter(lambda pixel: predicate(get_color(raster, pixel)))


def select(pixels: PixelSet, raster: Raster, query: Color) -> PixelSet:
    """The pixels whose color is exactly `query`."""
    return filter_color(pixels, raster, lambda color: color == query)


def recolor(
    pixels: PixelSet, raster: Raster, applier: Callable[[Pixel], Color | None]
) -> None:
    """
    Write `applier(pixel)` at each pixel; `None` leaves the pixel unchanged.
    """
    for pixel in pixels:
        color = applier(pixel)
        if color is not None:
            set_color(raster, pixel, color)


def fill(pixels: PixelSet, raster: Raster, color: Color) -> None:
    recolor(pixels, raster, lambda _: color)


def transform(
    pixels: PixelSet, raster: Raster, applier: Callable[[Color], Color | None]
) -> None:
    """Replace each pixel's color by `applier(color)`, unless it returns `None`."""
    for pixel in pixels:
        color = applier(get_color(raster, pixel))
        if color is not None:
            set_color(raster, pixel, color)


def mean_color(pixels: PixelSet, raster: Raster) -> Color | None:
    """Per channel floor average of the set's colors, `None` for an empty set."""
    if not pixels:
        return None

    totals = [0, 0, 0, 0]
    for color in as_colors(pixels, raster):
        for channel, value in enumerate(color):
            totals[channel] += value

    count = len(pixels)
    return Color(*(total // count for total in totals))
