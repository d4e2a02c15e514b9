"""Box value types, validation and checked arithmetic."""

from .box import Box, BoxBuilder, BoxType
from .errors import ArithmeticOverflow, BoxError, IllegalState, InvariantViolation
from .mutable import MutableBox

__all__ = [
    "Box",
    "BoxBuilder",
    "BoxType",
    "MutableBox",
    "BoxError",
    "InvariantViolation",
    "ArithmeticOverflow",
    "IllegalState",
]
