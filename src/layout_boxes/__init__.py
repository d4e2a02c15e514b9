"""layout-boxes: exact, overflow-checked arithmetic on axis-aligned boxes."""

import logging

from ._version import __version__
from .core import (
    ArithmeticOverflow,
    Box,
    BoxBuilder,
    BoxError,
    BoxType,
    IllegalState,
    InvariantViolation,
    MutableBox,
)
from .layout import BoxHorizontalSplit, BoxVerticalSplit
from .layout import boxes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Box",
    "BoxBuilder",
    "BoxType",
    "MutableBox",
    "BoxHorizontalSplit",
    "BoxVerticalSplit",
    "BoxError",
    "InvariantViolation",
    "ArithmeticOverflow",
    "IllegalState",
    "boxes",
]
