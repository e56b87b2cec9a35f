"""
Tests for the cache package: pickers and PixelCache.
"""

from itertools import combinations

import numpy as np
import pytest

from cache import PixelCache, indexed_pick, uniform_pick
from localtypes import Pixel
from pixelset import PixelSet
from shapes import Circle, EllipseOutline, Rectangle


def pset(*coords: tuple[int, int]) -> PixelSet:
    return PixelSet(Pixel(x, y) for x, y in coords)


L_SHAPE = pset((0, 0), (1, 0), (0, 1))
REGIONS = [
    PixelSet.empty(),
    pset((5, 5)),
    L_SHAPE,
    Rectangle(0, 0, 3, 3).to_set(),
    Circle(8, 8, 6).to_set() - Rectangle(8, 4, 7, 3).to_set(),
    EllipseOutline(0, 0, 20, 12, 2).to_set(),
    pset((0, 0), (2, 2), (4, 4), (1, 3), (3, 1)),
]


def assert_disjoint(cache: PixelCache) -> None:
    for first, second in combinations(cache.rectangles, 2):
        assert not first.to_set().intersects(second.to_set()), (first, second)


class TestPickers:
    def test_indexed_pick_cycles(self):
        pick = indexed_pick([0, 2])
        pixels = pset((0, 0), (1, 0), (2, 0))
        assert [pick(pixels) for _ in range(3)] == [Pixel(0, 0), Pixel(2, 0), Pixel(0, 0)]

    def test_indexed_pick_wraps(self):
        pick = indexed_pick([7, -1])
        pixels = pset((0, 0), (1, 0), (2, 0))
        assert pick(pixels) == Pixel(1, 0)
        assert pick(pixels) == Pixel(2, 0)

    def test_uniform_pick_returns_members(self):
        pick = uniform_pick(0)
        pixels = Circle(10, 10, 4).to_set()
        assert all(pick(pixels) in pixels for _ in range(50))

    def test_uniform_pick_is_reproducible(self):
        pixels = Rectangle(0, 0, 10, 10).to_set()
        first, second = uniform_pick(42), uniform_pick(42)
        assert [first(pixels) for _ in range(10)] == [second(pixels) for _ in range(10)]

    def test_uniform_pick_accepts_generator(self):
        pick = uniform_pick(np.random.default_rng(3))
        assert pick(L_SHAPE) in L_SHAPE


class TestPixelCache:
    def test_empty(self):
        cache = PixelCache.empty()
        assert len(cache) == 0
        assert cache.is_empty()
        assert cache.total_size() == 0
        assert cache.flatten() == PixelSet.empty()

    def test_from_empty_set(self):
        assert PixelCache.from_set(PixelSet.empty(), indexed_pick([0])) == PixelCache()

    def test_single_pixel(self):
        cache = PixelCache.from_set(pset((5, 5)), indexed_pick([0]))
        assert cache.rectangles == (Rectangle(5, 5, 1, 1),)

    def test_block_is_one_rectangle(self):
        block = Rectangle(2, 2, 5, 4).to_set()
        for index in range(len(block)):
            cache = PixelCache.from_set(block, indexed_pick([index]))
            assert cache.rectangles == (Rectangle(2, 2, 5, 4),)

    @pytest.mark.parametrize("indices", [[0], [1], [2], [2, 0], [1, 1]])
    def test_l_shape(self, indices):
        cache = PixelCache.from_set(L_SHAPE, indexed_pick(indices))
        assert cache.flatten() == L_SHAPE
        assert cache.total_size() == 3
        assert len(cache) == 2
        assert_disjoint(cache)

    def test_l_shape_deterministic(self):
        cache = PixelCache.from_set(L_SHAPE, indexed_pick([0]))
        assert cache.rectangles == (Rectangle(0, 0, 2, 1), Rectangle(0, 1, 1, 1))

    @pytest.mark.parametrize("region", REGIONS)
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_roundtrip_random(self, region, seed):
        cache = PixelCache.from_set(region, uniform_pick(seed))
        assert cache.flatten() == region
        assert cache.total_size() == len(region)
        assert_disjoint(cache)

    @pytest.mark.parametrize("region", REGIONS)
    @pytest.mark.parametrize("indices", [[0], [-1], [3, 1, 4, 1, 5]])
    def test_roundtrip_deterministic(self, region, indices):
        cache = PixelCache.from_set(region, indexed_pick(indices))
        assert cache.flatten() == region
        assert_disjoint(cache)

    def test_input_left_untouched(self):
        region = Circle(5, 5, 3).to_set()
        before = region.copy()
        PixelCache.from_set(region, uniform_pick(1))
        assert region == before

    def test_default_picker(self):
        region = Circle(5, 5, 3).to_set()
        assert PixelCache.from_set(region).flatten() == region

    def test_flatten_is_repeatable(self):
        cache = PixelCache.from_set(REGIONS[4], uniform_pick(7))
        first = cache.flatten()
        first.add(Pixel(100, 100))
        assert cache.flatten() == REGIONS[4]

    def test_compresses_blocky_regions(self):
        region = Rectangle(0, 0, 40, 10).to_set() | Rectangle(0, 10, 10, 30).to_set()
        cache = PixelCache.from_set(region, uniform_pick(0))
        assert len(cache) <= 3

    def test_iteration(self):
        cache = PixelCache([Rectangle(0, 0, 1, 1), Rectangle(2, 0, 2, 2)])
        assert list(cache) == [Rectangle(0, 0, 1, 1), Rectangle(2, 0, 2, 2)]
        assert cache.total_size() == 5
        assert not cache.is_empty()

    def test_picker_returning_non_member(self):
        with pytest.raises(ValueError):
            PixelCache.from_set(L_SHAPE, lambda pixels: Pixel(9, 9))
