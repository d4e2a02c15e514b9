"""Precondition checks with clear error messages."""

from __future__ import annotations

from .errors import InvariantViolation


def validate_ordered(minimum: int, maximum: int, axis_name: str) -> None:
    """Require minimum <= maximum on one axis.

    Parameters
    ----------
    minimum, maximum : the two bounds of the axis
    axis_name : 'x' or 'y' for error messages
    """
    if minimum > maximum:
        raise InvariantViolation(
            f"minimum_{axis_name} ({minimum}) must be <= "
            f"maximum_{axis_name} ({maximum})."
        )


def validate_bounds(
    minimum_x: int,
    maximum_x: int,
    minimum_y: int,
    maximum_y: int,
) -> None:
    """Require min <= max on both axes."""
    validate_ordered(minimum_x, maximum_x, "x")
    validate_ordered(minimum_y, maximum_y, "y")


def validate_non_negative(value: int, name: str) -> int:
    """Require value >= 0. Returns the value unchanged."""
    if value < 0:
        raise InvariantViolation(f"{name} must be >= 0, got {value}.")
    return value
