"""
Terminal rendering of pixel sets and pixel caches.

Each pixel is drawn as two spaces on an ANSI 24-bit background color.
"""

from constants import BG_COLOR, MEMBER_COLOR, PALETTE, RESET
from cache import PixelCache
from localtypes import Height, Pixel, Width
from pixelset import PixelSet
from shapes import Rectangle


def _canvas(
    pixels: PixelSet, width: Width | None, height: Height | None
) -> tuple[Width, Height]:
    bounds = Rectangle.bounding(pixels)
    if bounds is None:
        return width or 0, height or 0
    return (
        width if width is not None else bounds.x + bounds.width,
        height if height is not None else bounds.y + bounds.height,
    )


def _render(colors: dict[Pixel, str], width: Width, height: Height) -> str:
    rows = []
    for y in range(height):
        cells = (colors.get(Pixel(x, y), BG_COLOR) + "  " for x in range(width))
        rows.append("".join(cells) + RESET)
    return "\n".join(rows)


def render_set(
    pixels: PixelSet, width: Width | None = None, height: Height | None = None
) -> str:
    """
    Render `pixels` on a width x height canvas anchored at (0, 0).

    The canvas defaults to the smallest one showing every pixel; pixels
    outside it are not drawn.
    """
    width, height = _canvas(pixels, width, height)
    return _render({pixel: MEMBER_COLOR for pixel in pixels}, width, height)


def render_cache(
    cache: PixelCache, width: Width | None = None, height: Height | None = None
) -> str:
    """Render each rectangle of the cache in its own palette color."""
    width, height = _canvas(cache.flatten(), width, height)
    colors = {
        pixel: PALETTE[i % len(PALETTE)]
        for i, rect in enumerate(cache)
        for pixel in rect.iter_pixels()
    }
    return _render(colors, width, height)


def print_set(
    pixels: PixelSet, width: Width | None = None, height: Height | None = None
) -> None:
    print(render_set(pixels, width, height))


def print_cache(
    cache: PixelCache, width: Width | None = None, height: Height | None = None
) -> None:
    print(render_cache(cache, width, height))
