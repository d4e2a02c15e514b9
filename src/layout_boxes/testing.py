"""BoxGenerator: reproducible arbitrary boxes for property checks."""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .core.box import Box

DEFAULT_LOW = -400
DEFAULT_HIGH = 400
DEFAULT_MAX_SIZE = 400
DEFAULT_ZERO_SIZE_PROBABILITY = 0.1


class BoxGenerator:
    """Generates valid boxes from a seeded numpy random generator.

    Top-left corners are drawn from [low, high] and sizes from
    [0, max_size]. Each size is forced to zero with probability
    ``zero_size_probability`` so degenerate boxes show up regularly.
    """

    def __init__(
        self,
        seed: int | None = 0,
        low: int = DEFAULT_LOW,
        high: int = DEFAULT_HIGH,
        max_size: int = DEFAULT_MAX_SIZE,
        zero_size_probability: float = DEFAULT_ZERO_SIZE_PROBABILITY,
    ) -> None:
        if low > high:
            raise ValueError(f"low ({low}) must be <= high ({high}).")
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}.")
        if not 0.0 <= zero_size_probability <= 1.0:
            raise ValueError(
                f"zero_size_probability must be in [0, 1], got {zero_size_probability}."
            )
        self._rng = np.random.default_rng(seed)
        self._low = low
        self._high = high
        self._max_size = max_size
        self._zero_size_probability = zero_size_probability

    def integers(self, low: int, high: int) -> int:
        """Draw one integer from [low, high] inclusive."""
        return int(self._rng.integers(low, high, endpoint=True))

    def _size(self) -> int:
        if self._rng.random() < self._zero_size_probability:
            return 0
        return self.integers(0, self._max_size)

    def next(self) -> Box:
        x = self.integers(self._low, self._high)
        y = self.integers(self._low, self._high)
        width = self._size()
        height = self._size()
        return Box.of(x, x + width, y, y + height)

    def take(self, n: int) -> list[Box]:
        """Return the next n boxes."""
        return [self.next() for _ in range(n)]

    def __iter__(self) -> Iterator[Box]:
        while True:
            yield self.next()
