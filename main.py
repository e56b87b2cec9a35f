"""
Compress a sample region into a pixel cache and report the result.

The region is built from shapes with set algebra, painted on a raster,
selected back by color, then decomposed into rectangles.
"""

import logging

from cache import PixelCache, uniform_pick
from color import BLACK, WHITE, Color
from display import print_cache, print_set
from raster import fill, new_raster, raster_to_set, select
from shapes import Circle, EllipseOutline, Rectangle

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


def sample_region(width: int, height: int):
    """A disc with a rectangular bite, ringed by an ellipse outline."""
    cx, cy = width // 2, height // 2
    radius = min(width, height) // 3

    disc = Circle(cx, cy, radius).to_set()
    bite = Rectangle(cx, cy - radius // 3, radius + 1, max(2 * radius // 3, 1)).to_set()
    ring = EllipseOutline(0, 0, width, height, 2).to_set()
    return (disc - bite) | ring


def run(width: int, height: int, seed: int | None, show_visuals: bool) -> PixelCache:
    raster = new_raster(width, height)
    region = sample_region(width, height)
    logger.info(f"Region of {len(region)} pixels on a {width}x{height} raster")

    color = Color.random(seed)
    if color == BLACK:
        color = WHITE
    fill(region, raster, color)
    selected = select(raster_to_set(raster), raster, color)
    logger.debug(f"Painted with {color.hex()}, selected {len(selected)} pixels back")

    cache = PixelCache.from_set(selected, uniform_pick(seed))
    logger.info(
        f"Cached into {len(cache)} rectangles "
        f"({len(selected) / max(len(cache), 1):.1f} pixels per rectangle)"
    )

    if cache.flatten() != region:
        raise RuntimeError("The cache does not reconstruct the region")

    if show_visuals:
        print_set(region, width, height)
        print()
        print_cache(cache, width, height)
    return cache


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Compress a region into rectangles")
    parser.add_argument("--width", type=int, default=32, help="Raster width")
    parser.add_argument("--height", type=int, default=24, help="Raster height")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--no-visuals", action="store_true", help="Disable visual output"
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    run(args.width, args.height, args.seed, show_visuals=not args.no_visuals)
