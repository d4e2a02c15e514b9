"""Box: the immutable axis-aligned rectangle and its builder.

Boxes carry a coordinate-space type parameter ``S`` that exists only for
static type checkers. ``Box[ScreenSpace]`` and ``Box[WorldSpace]`` are the
same class at runtime and compare equal when their bounds are equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

from .checked import as_int, subtract_exact
from .errors import IllegalState
from .validation import validate_bounds, validate_ordered

S = TypeVar("S")
S_co = TypeVar("S_co", covariant=True)


@runtime_checkable
class BoxType(Protocol[S_co]):
    """Anything exposing the four bounds of a box.

    The layout algorithms accept any object implementing this protocol.
    """

    @property
    def minimum_x(self) -> int: ...

    @property
    def maximum_x(self) -> int: ...

    @property
    def minimum_y(self) -> int: ...

    @property
    def maximum_y(self) -> int: ...

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


@dataclass(frozen=True)
class Box(Generic[S]):
    """An immutable axis-aligned rectangle with integer bounds.

    Invariant: ``minimum_x <= maximum_x`` and ``minimum_y <= maximum_y``.
    Zero width or height is allowed.
    """

    minimum_x: int
    maximum_x: int
    minimum_y: int
    maximum_y: int

    def __post_init__(self) -> None:
        for name in ("minimum_x", "maximum_x", "minimum_y", "maximum_y"):
            object.__setattr__(self, name, as_int(getattr(self, name), name))
        validate_bounds(
            self.minimum_x, self.maximum_x, self.minimum_y, self.maximum_y
        )

    @classmethod
    def of(
        cls,
        minimum_x: int,
        maximum_x: int,
        minimum_y: int,
        maximum_y: int,
    ) -> Box[S]:
        """Create a box from its four bounds."""
        return cls(minimum_x, maximum_x, minimum_y, maximum_y)

    @classmethod
    def copy_of(cls, box: BoxType[S]) -> Box[S]:
        """Return an immutable copy of any box-like value."""
        if isinstance(box, Box):
            return box
        return cls(box.minimum_x, box.maximum_x, box.minimum_y, box.maximum_y)

    @staticmethod
    def builder() -> BoxBuilder[S]:
        return BoxBuilder()

    @property
    def width(self) -> int:
        return subtract_exact(self.maximum_x, self.minimum_x)

    @property
    def height(self) -> int:
        return subtract_exact(self.maximum_y, self.minimum_y)

    def with_minimum_x(self, value: int) -> Box[S]:
        value = as_int(value, "minimum_x")
        validate_ordered(value, self.maximum_x, "x")
        return Box(value, self.maximum_x, self.minimum_y, self.maximum_y)

    def with_maximum_x(self, value: int) -> Box[S]:
        value = as_int(value, "maximum_x")
        validate_ordered(self.minimum_x, value, "x")
        return Box(self.minimum_x, value, self.minimum_y, self.maximum_y)

    def with_minimum_y(self, value: int) -> Box[S]:
        value = as_int(value, "minimum_y")
        validate_ordered(value, self.maximum_y, "y")
        return Box(self.minimum_x, self.maximum_x, value, self.maximum_y)

    def with_maximum_y(self, value: int) -> Box[S]:
        value = as_int(value, "maximum_y")
        validate_ordered(self.minimum_y, value, "y")
        return Box(self.minimum_x, self.maximum_x, self.minimum_y, value)

    def to_dict(self) -> dict:
        return {
            "minimum_x": self.minimum_x,
            "maximum_x": self.maximum_x,
            "minimum_y": self.minimum_y,
            "maximum_y": self.maximum_y,
            "width": self.width,
            "height": self.height,
        }


def _read_bounds(box: BoxType[S]) -> tuple[int, int, int, int]:
    """Read all four bounds of box before anything is assigned from them."""
    return (
        as_int(box.minimum_x, "minimum_x"),
        as_int(box.maximum_x, "maximum_x"),
        as_int(box.minimum_y, "minimum_y"),
        as_int(box.maximum_y, "maximum_y"),
    )


class BoxBuilder(Generic[S]):
    """Staged construction of a Box; every bound must be set before build().

    Not safe for concurrent use: callers sharing a builder between threads
    must synchronize externally.
    """

    __slots__ = ("_minimum_x", "_maximum_x", "_minimum_y", "_maximum_y")

    # Order in which build() reports missing bounds
    _REQUIRED = ("minimum_x", "minimum_y", "maximum_x", "maximum_y")

    def __init__(self) -> None:
        self._minimum_x: int | None = None
        self._maximum_x: int | None = None
        self._minimum_y: int | None = None
        self._maximum_y: int | None = None

    def set_minimum_x(self, value: int) -> BoxBuilder[S]:
        self._minimum_x = as_int(value, "minimum_x")
        return self

    def set_maximum_x(self, value: int) -> BoxBuilder[S]:
        self._maximum_x = as_int(value, "maximum_x")
        return self

    def set_minimum_y(self, value: int) -> BoxBuilder[S]:
        self._minimum_y = as_int(value, "minimum_y")
        return self

    def set_maximum_y(self, value: int) -> BoxBuilder[S]:
        self._maximum_y = as_int(value, "maximum_y")
        return self

    def from_box(self, box: BoxType[S]) -> BoxBuilder[S]:
        """Set all four bounds from an existing box."""
        bounds = _read_bounds(box)
        (
            self._minimum_x, self._maximum_x, self._minimum_y, self._maximum_y
        ) = bounds
        return self

    def build(self) -> Box[S]:
        """Validate and return the box.

        Raises IllegalState naming the first unset bound, or
        InvariantViolation if the bounds are out of order.
        """
        for name in self._REQUIRED:
            if getattr(self, f"_{name}") is None:
                raise IllegalState(
                    f"Cannot build Box, required bound '{name}' is not set."
                )
        return Box(
            self._minimum_x, self._maximum_x, self._minimum_y, self._maximum_y
        )
