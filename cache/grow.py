"""
Growing a pixel into a maximal rectangle.

Starting from a unit rectangle on a seed pixel, the rectangle is stretched
one row or column at a time in the four directions, as long as the new
strip lies entirely inside the availability set. Each direction is given
up for good the first time its strip fails.

The result is maximal in every direction taken independently: a greedy,
local maximum, not the largest rectangle of the region. Another seed or
another direction order can give a different rectangle.

Naming conventions:
    'stretch_xxxx' -> the one pixel thick strip that would extend a rectangle
    'can_go_xxxx' -> whether the direction is still open
"""

from constants import COORD_MAX
from localtypes import Pixel
from pixelset import PixelSet
from shapes import Rectangle


def stretch_right(rect: Rectangle) -> Rectangle | None:
    if rect.x + rect.width > COORD_MAX:
        return None
    return Rectangle(rect.x + rect.width, rect.y, 1, rect.height)


def stretch_left(rect: Rectangle) -> Rectangle | None:
    if rect.x == 0:
        return None
    return Rectangle(rect.x - 1, rect.y, 1, rect.height)


def stretch_down(rect: Rectangle) -> Rectangle | None:
    if rect.y + rect.height > COORD_MAX:
        return None
    return Rectangle(rect.x, rect.y + rect.height, rect.width, 1)


def stretch_up(rect: Rectangle) -> Rectangle | None:
    if rect.y == 0:
        return None
    return Rectangle(rect.x, rect.y - 1, rect.width, 1)


def strip_in_set(strip: Rectangle | None, available: PixelSet) -> bool:
    return strip is not None and all(
        pixel in available for pixel in strip.iter_pixels()
    )


def grow_pixel_into_rectangle(seed: Pixel, available: PixelSet) -> Rectangle:
    """
    Grow the largest rectangle the greedy policy reaches from `seed`.

    Rounds visit the open directions in the order right, left, down, up.
    `available` is only read.

    Args:
        seed: Starting pixel, must belong to `available`.
        available: Pixels the rectangle is allowed to cover.

    Returns:
        A rectangle containing `seed` and contained in `available`.

    Raises:
        ValueError: If `seed` is not in `available`.
    """
    if seed not in available:
        raise ValueError(f"Seed {seed} is not in the availability set")

    col, row = seed
    width = height = 1

    can_go_right = can_go_left = can_go_down = can_go_up = True

    while can_go_right or can_go_left or can_go_down or can_go_up:
        # Expand the rectangle to the right
        if can_go_right:
            if strip_in_set(stretch_right(Rectangle(col, row, width, height)), available):
                width += 1
            else:
                can_go_right = False

        # Expand the rectangle to the left
        if can_go_left:
            if strip_in_set(stretch_left(Rectangle(col, row, width, height)), available):
                col -= 1
                width += 1
            else:
                can_go_left = False

        # Expand the rectangle downwards
        if can_go_down:
            if strip_in_set(stretch_down(Rectangle(col, row, width, height)), available):
                height += 1
            else:
                can_go_down = False

        # Expand the rectangle upwards
        if can_go_up:
            if strip_in_set(stretch_up(Rectangle(col, row, width, height)), available):
                row -= 1
                height += 1
            else:
                can_go_up = False

    return Rectangle(col, row, width, height)
