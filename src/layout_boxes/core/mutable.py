"""MutableBox: a box assembled bound-by-bound, validated on conversion."""

from __future__ import annotations

from typing import Generic

from .box import Box, BoxType, S, _read_bounds
from .checked import as_int, subtract_exact
from .errors import IllegalState
from .validation import validate_bounds

_BOUNDS = ("minimum_x", "maximum_x", "minimum_y", "maximum_y")


class MutableBox(Generic[S]):
    """A box whose bounds may be set, reset and overwritten in place.

    Each bound starts unset. Setters never check ``min <= max`` so a
    box may pass through inconsistent states while it is being filled
    in; the invariant is enforced by check_preconditions() and
    to_immutable().

    Not thread-safe. Concurrent mutation requires external locking.
    """

    __slots__ = ("_minimum_x", "_maximum_x", "_minimum_y", "_maximum_y")

    # Mutable, so instances are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._minimum_x: int | None = None
        self._maximum_x: int | None = None
        self._minimum_y: int | None = None
        self._maximum_y: int | None = None

    @classmethod
    def create(
        cls,
        minimum_x: int | None = None,
        maximum_x: int | None = None,
        minimum_y: int | None = None,
        maximum_y: int | None = None,
    ) -> MutableBox[S]:
        """Create a box with any subset of bounds already set."""
        box = cls()
        for name, value in zip(_BOUNDS, (minimum_x, maximum_x, minimum_y, maximum_y)):
            if value is not None:
                setattr(box, f"_{name}", as_int(value, name))
        return box

    def _get(self, name: str) -> int:
        value = getattr(self, f"_{name}")
        if value is None:
            raise IllegalState(f"Bound '{name}' has not been set.")
        return value

    @property
    def minimum_x(self) -> int:
        return self._get("minimum_x")

    @property
    def maximum_x(self) -> int:
        return self._get("maximum_x")

    @property
    def minimum_y(self) -> int:
        return self._get("minimum_y")

    @property
    def maximum_y(self) -> int:
        return self._get("maximum_y")

    @property
    def width(self) -> int:
        return subtract_exact(self.maximum_x, self.minimum_x)

    @property
    def height(self) -> int:
        return subtract_exact(self.maximum_y, self.minimum_y)

    def set_minimum_x(self, value: int) -> MutableBox[S]:
        self._minimum_x = as_int(value, "minimum_x")
        return self

    def set_maximum_x(self, value: int) -> MutableBox[S]:
        self._maximum_x = as_int(value, "maximum_x")
        return self

    def set_minimum_y(self, value: int) -> MutableBox[S]:
        self._minimum_y = as_int(value, "minimum_y")
        return self

    def set_maximum_y(self, value: int) -> MutableBox[S]:
        self._maximum_y = as_int(value, "maximum_y")
        return self

    def is_initialized(self) -> bool:
        """True when all four bounds have been set."""
        return all(getattr(self, f"_{name}") is not None for name in _BOUNDS)

    def clear(self) -> None:
        """Return every bound to the unset state."""
        for name in _BOUNDS:
            setattr(self, f"_{name}", None)

    def copy_from(self, other: BoxType[S]) -> MutableBox[S]:
        """Overwrite all four bounds with those of another box."""
        bounds = _read_bounds(other)
        (
            self._minimum_x, self._maximum_x, self._minimum_y, self._maximum_y
        ) = bounds
        return self

    def check_preconditions(self) -> None:
        """Raise unless every bound is set and min <= max on both axes."""
        validate_bounds(
            self.minimum_x, self.maximum_x, self.minimum_y, self.maximum_y
        )

    def to_immutable(self) -> Box[S]:
        self.check_preconditions()
        return Box(self.minimum_x, self.maximum_x, self.minimum_y, self.maximum_y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutableBox):
            return NotImplemented
        return all(
            getattr(self, f"_{name}") == getattr(other, f"_{name}")
            for name in _BOUNDS
        )

    def __repr__(self) -> str:
        parts = []
        for name in _BOUNDS:
            value = getattr(self, f"_{name}")
            parts.append(f"{name}={'<unset>' if value is None else value}")
        return f"MutableBox({', '.join(parts)})"
