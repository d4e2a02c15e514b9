"""Shared test fixtures for layout-boxes."""

import pytest

from layout_boxes.core.box import Box
from layout_boxes.testing import BoxGenerator

N_SAMPLES = 300


@pytest.fixture
def generator():
    """Seeded generator so property checks are reproducible."""
    return BoxGenerator(seed=42)


@pytest.fixture
def box_pairs(generator):
    """(outer, inner) pairs of arbitrary boxes."""
    return [(generator.next(), generator.next()) for _ in range(N_SAMPLES)]


@pytest.fixture
def sample_boxes(generator):
    return generator.take(N_SAMPLES)


@pytest.fixture
def square():
    """10x10 box at the origin."""
    return Box.of(0, 10, 0, 10)
