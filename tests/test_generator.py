"""Tests for BoxGenerator."""

import itertools

import pytest

from layout_boxes.core.box import Box
from layout_boxes.testing import BoxGenerator


class TestBoxGenerator:
    def test_reproducible(self):
        assert BoxGenerator(seed=7).take(50) == BoxGenerator(seed=7).take(50)

    def test_different_seeds_differ(self):
        assert BoxGenerator(seed=1).take(50) != BoxGenerator(seed=2).take(50)

    def test_within_limits(self):
        gen = BoxGenerator(seed=3, low=-10, high=10, max_size=5)
        for b in gen.take(200):
            assert isinstance(b, Box)
            assert -10 <= b.minimum_x <= 10
            assert -10 <= b.minimum_y <= 10
            assert 0 <= b.width <= 5
            assert 0 <= b.height <= 5

    def test_degenerate_boxes_appear(self):
        gen = BoxGenerator(seed=0)
        assert any(b.width == 0 or b.height == 0 for b in gen.take(200))

    def test_always_degenerate(self):
        gen = BoxGenerator(seed=0, zero_size_probability=1.0)
        assert all(b.width == 0 and b.height == 0 for b in gen.take(20))

    def test_iteration(self):
        gen = BoxGenerator(seed=5)
        assert len(list(itertools.islice(gen, 10))) == 10

    def test_integers_inclusive(self):
        gen = BoxGenerator(seed=0)
        values = {gen.integers(0, 2) for _ in range(200)}
        assert values == {0, 1, 2}

    def test_invalid_arguments(self):
        with pytest.raises(ValueError, match="low"):
            BoxGenerator(low=5, high=0)
        with pytest.raises(ValueError, match="max_size"):
            BoxGenerator(max_size=-1)
        with pytest.raises(ValueError, match="zero_size_probability"):
            BoxGenerator(zero_size_probability=2.0)
