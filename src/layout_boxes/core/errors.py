"""Error taxonomy for box construction and arithmetic."""

from __future__ import annotations


class BoxError(Exception):
    """Base class for every error raised by layout_boxes."""


class InvariantViolation(BoxError, ValueError):
    """A bound ordering or non-negativity precondition does not hold."""


class ArithmeticOverflow(BoxError, OverflowError):
    """A bound would fall outside the representable integer range."""


class IllegalState(BoxError, RuntimeError):
    """A staged box or builder was used before its bounds were set."""
