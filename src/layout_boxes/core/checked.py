"""Overflow-checked integer arithmetic over the representable bound range."""

from __future__ import annotations

import operator

import numpy as np

from .errors import ArithmeticOverflow, InvariantViolation


# Bounds are signed 32-bit integers
INT_MIN = int(np.iinfo(np.int32).min)
INT_MAX = int(np.iinfo(np.int32).max)


def as_int(value: object, name: str = "value") -> int:
    """Coerce an integral value (int, numpy integer) to a plain int.

    Raises TypeError for bools and anything without ``__index__``, and
    ArithmeticOverflow if the value lies outside [INT_MIN, INT_MAX].
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"{name} must be an integer, got bool.")
    try:
        result = operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}."
        ) from None
    return check_range(result, name)


def check_range(value: int, name: str = "value") -> int:
    if value < INT_MIN or value > INT_MAX:
        raise ArithmeticOverflow(
            f"{name} = {value} is outside the representable range "
            f"[{INT_MIN}, {INT_MAX}]."
        )
    return value


def add_exact(x: int, y: int) -> int:
    """Return x + y, raising ArithmeticOverflow instead of wrapping."""
    x, y = operator.index(x), operator.index(y)
    return check_range(x + y, f"{x} + {y}")


def subtract_exact(x: int, y: int) -> int:
    """Return x - y, raising ArithmeticOverflow instead of wrapping."""
    x, y = operator.index(x), operator.index(y)
    return check_range(x - y, f"{x} - {y}")


def clamp(x: int, minimum: int, maximum: int) -> int:
    if maximum < minimum:
        raise InvariantViolation(
            f"Clamp maximum ({maximum}) must be >= minimum ({minimum})."
        )
    return max(min(x, maximum), minimum)
