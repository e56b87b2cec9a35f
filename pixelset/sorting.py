"""
Linear-time sorting of pixels.

Pixels are sorted on their 32-bit key with a least-significant-digit radix
sort made of two stable passes over 16-bit digits: first on x (the low half
of the key), then on y (the high half). numpy's stable sort on 16-bit
integers is itself a radix sort, so both passes are O(n).
"""

from collections.abc import Iterable

import numpy as np

from constants import KEY_MASK, KEY_SHIFT
from localtypes import Pixel


def sort_keys(keys: np.ndarray) -> np.ndarray:
    """Sort an array of 32-bit pixel keys (row-major order)."""
    low = (keys & KEY_MASK).astype(np.uint16)
    order = np.argsort(low, kind="stable")
    high = (keys[order] >> KEY_SHIFT).astype(np.uint16)
    order = order[np.argsort(high, kind="stable")]
    return keys[order]


def unique_sorted_keys(keys: np.ndarray) -> np.ndarray:
    """Drop consecutive duplicates from a sorted key array."""
    if len(keys) < 2:
        return keys
    keep = np.empty(len(keys), dtype=bool)
    keep[0] = True
    np.not_equal(keys[1:], keys[:-1], out=keep[1:])
    return keys[keep]


def sort_unique(pixels: Iterable[Pixel]) -> list[Pixel]:
    """
    Sort pixels in row-major order and remove duplicates.

    Args:
        pixels: Pixels in any order, possibly repeated.

    Returns:
        A strictly ascending list of pixels.
    """
    pixels = list(pixels)
    if not pixels:
        return []

    keys = np.fromiter(
        (pixel.key for pixel in pixels), dtype=np.uint32, count=len(pixels)
    )
    keys = unique_sorted_keys(sort_keys(keys))
    return [Pixel.from_key(int(key)) for key in keys]
