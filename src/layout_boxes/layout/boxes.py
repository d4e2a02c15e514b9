"""Functions to arrange boxes: alignment, resizing, splitting and tests.

Every function is pure: boxes go in, new immutable boxes come out. All
bound arithmetic is overflow-checked and raises ArithmeticOverflow
rather than wrapping. Functions are generic over the coordinate space
``S``; inputs to one call are expected to share it.
"""

from __future__ import annotations

import io
import logging
from typing import Callable, Literal, Protocol, TypeVar

from ..core.box import Box, BoxType, S
from ..core.checked import add_exact, as_int, clamp, subtract_exact
from ..core.validation import validate_non_negative
from .split import BoxHorizontalSplit, BoxVerticalSplit

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Which part of the outer box an axis is aligned against
Anchor = Literal["min", "max", "center"]


class SupportsWrite(Protocol):
    """A text sink such as io.StringIO or an open text file."""

    def write(self, s: str) -> object: ...


def cast(box: BoxType[S]) -> BoxType[T]:
    """Brand a box as belonging to a different coordinate space.

    No computation is performed and the same object is returned. Mixing
    coordinate spaces this way is unchecked; the caller is responsible
    for the result making sense.
    """
    logger.debug("Casting box %r to a different coordinate space", box)
    return box  # type: ignore[return-value]


def create(x: int, y: int, width: int, height: int) -> Box[S]:
    """Create a box with top-left corner at (x, y) and the given size."""
    x = as_int(x, "x")
    y = as_int(y, "y")
    return Box.of(x, add_exact(x, width), y, add_exact(y, height))


def move_relative(box: BoxType[S], x: int, y: int) -> Box[S]:
    """Translate a box by (x, y), keeping its size."""
    return Box.of(
        add_exact(box.minimum_x, x),
        add_exact(box.maximum_x, x),
        add_exact(box.minimum_y, y),
        add_exact(box.maximum_y, y),
    )


def move_absolute(box: BoxType[S], x: int, y: int) -> Box[S]:
    """Move a box so its top-left corner is at (x, y), keeping its size."""
    return create(x, y, box.width, box.height)


def move_to_origin(box: BoxType[S]) -> Box[S]:
    return create(0, 0, box.width, box.height)


# -- Alignment --------------------------------------------------------------


def _align_axis(
    outer_min: int,
    outer_max: int,
    outer_size: int,
    inner_size: int,
    anchor: Anchor,
    offset: int,
) -> tuple[int, int]:
    """Place a span of inner_size against one part of [outer_min, outer_max].

    Returns the new (min, max) of the span.
    """
    if anchor == "min":
        lo = add_exact(outer_min, offset)
        return lo, add_exact(lo, inner_size)
    if anchor == "max":
        hi = subtract_exact(outer_max, offset)
        return subtract_exact(hi, inner_size), hi
    # Integer halving may leave the span one unit closer to one edge
    middle = add_exact(outer_min, outer_size // 2)
    lo = subtract_exact(middle, inner_size // 2)
    return lo, add_exact(lo, inner_size)


def _align(
    outer: BoxType[S],
    inner: BoxType[S],
    x_anchor: Anchor | None,
    y_anchor: Anchor | None,
    x_offset: int = 0,
    y_offset: int = 0,
) -> Box[S]:
    """Align inner against outer on the axes whose anchor is given.

    An axis with no anchor keeps inner's position on that axis.
    """
    validate_non_negative(x_offset, "Horizontal offset")
    validate_non_negative(y_offset, "Vertical offset")

    if x_anchor is None:
        x_min, x_max = inner.minimum_x, inner.maximum_x
    else:
        x_min, x_max = _align_axis(
            outer.minimum_x, outer.maximum_x, outer.width,
            inner.width, x_anchor, x_offset,
        )
    if y_anchor is None:
        y_min, y_max = inner.minimum_y, inner.maximum_y
    else:
        y_min, y_max = _align_axis(
            outer.minimum_y, outer.maximum_y, outer.height,
            inner.height, y_anchor, y_offset,
        )
    return Box.of(x_min, x_max, y_min, y_max)


def align_horizontally_left(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    return _align(outer, inner, "min", None)


def align_horizontally_left_offset(
    outer: BoxType[S], inner: BoxType[S], offset: int
) -> Box[S]:
    """Place inner ``offset`` units inside outer's left edge."""
    return _align(outer, inner, "min", None, x_offset=offset)


def align_horizontally_right(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    return _align(outer, inner, "max", None)


def align_horizontally_right_offset(
    outer: BoxType[S], inner: BoxType[S], offset: int
) -> Box[S]:
    """Place inner ``offset`` units inside outer's right edge."""
    return _align(outer, inner, "max", None, x_offset=offset)


def align_horizontally_center(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    """Center inner horizontally within outer.

    When the sizes do not halve evenly the distances to the left and
    right edges of outer differ by at most one.
    """
    return _align(outer, inner, "center", None)


def align_vertically_top(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    return _align(outer, inner, None, "min")


def align_vertically_top_offset(
    outer: BoxType[S], inner: BoxType[S], offset: int
) -> Box[S]:
    """Place inner ``offset`` units inside outer's top edge."""
    return _align(outer, inner, None, "min", y_offset=offset)


def align_vertically_bottom(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    return _align(outer, inner, None, "max")


def align_vertically_bottom_offset(
    outer: BoxType[S], inner: BoxType[S], offset: int
) -> Box[S]:
    """Place inner ``offset`` units inside outer's bottom edge."""
    return _align(outer, inner, None, "max", y_offset=offset)


def align_vertically_center(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    """Center inner vertically within outer (±1 for odd sizes)."""
    return _align(outer, inner, None, "center")


def align_top_left(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    return _align(outer, inner, "min", "min")


def align_top_left_offset(
    outer: BoxType[S], inner: BoxType[S], offset_left: int, offset_top: int
) -> Box[S]:
    return _align(outer, inner, "min", "min", offset_left, offset_top)


def align_top_right(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    return _align(outer, inner, "max", "min")


def align_top_right_offset(
    outer: BoxType[S], inner: BoxType[S], offset_right: int, offset_top: int
) -> Box[S]:
    return _align(outer, inner, "max", "min", offset_right, offset_top)


def align_bottom_left(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    return _align(outer, inner, "min", "max")


def align_bottom_left_offset(
    outer: BoxType[S], inner: BoxType[S], offset_left: int, offset_bottom: int
) -> Box[S]:
    return _align(outer, inner, "min", "max", offset_left, offset_bottom)


def align_bottom_right(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    return _align(outer, inner, "max", "max")


def align_bottom_right_offset(
    outer: BoxType[S], inner: BoxType[S], offset_right: int, offset_bottom: int
) -> Box[S]:
    return _align(outer, inner, "max", "max", offset_right, offset_bottom)


def align_center(outer: BoxType[S], inner: BoxType[S]) -> Box[S]:
    """Center inner within outer on both axes."""
    return align_vertically_center(outer, align_horizontally_center(outer, inner))


# -- Insetting --------------------------------------------------------------


def hollow_out(
    outer: BoxType[S],
    left_offset: int,
    right_offset: int,
    top_offset: int,
    bottom_offset: int,
) -> Box[S]:
    """Shrink outer by moving each edge inwards by its offset.

    Each inset edge is clamped to outer's extent. Offsets that together
    exceed outer's size yield a zero-width (or zero-height) box rather
    than an inverted one.
    """
    validate_non_negative(left_offset, "Left offset")
    validate_non_negative(right_offset, "Right offset")
    validate_non_negative(top_offset, "Top offset")
    validate_non_negative(bottom_offset, "Bottom offset")

    x_min = clamp(
        add_exact(outer.minimum_x, left_offset), outer.minimum_x, outer.maximum_x
    )
    x_max = clamp(
        subtract_exact(outer.maximum_x, right_offset), outer.minimum_x, outer.maximum_x
    )
    y_min = clamp(
        add_exact(outer.minimum_y, top_offset), outer.minimum_y, outer.maximum_y
    )
    y_max = clamp(
        subtract_exact(outer.maximum_y, bottom_offset), outer.minimum_y, outer.maximum_y
    )
    return Box.of(x_min, max(x_min, x_max), y_min, max(y_min, y_max))


def hollow_out_evenly(outer: BoxType[S], offset: int) -> Box[S]:
    return hollow_out(outer, offset, offset, offset, offset)


# -- Resizing ---------------------------------------------------------------


def _set_size(
    box: BoxType[S],
    width: int,
    height: int,
    align: Callable[[BoxType[S], BoxType[S]], Box[S]],
) -> Box[S]:
    """Build a same-origin box of the new size and align it against box."""
    validate_non_negative(width, "Width")
    validate_non_negative(height, "Height")
    sized = Box.of(
        box.minimum_x,
        add_exact(box.minimum_x, width),
        box.minimum_y,
        add_exact(box.minimum_y, height),
    )
    return align(box, sized)


def set_size_from_center(box: BoxType[S], width: int, height: int) -> Box[S]:
    """Resize a box keeping its center (±1 for odd sizes)."""
    return _set_size(box, width, height, align_center)


def set_size_from_top_left(box: BoxType[S], width: int, height: int) -> Box[S]:
    """Resize a box by moving its top-left corner.

    The bottom-right corner stays where it is.
    """
    return _set_size(box, width, height, align_bottom_right)


def set_size_from_top_right(box: BoxType[S], width: int, height: int) -> Box[S]:
    """Resize a box by moving its top-right corner.

    The bottom-left corner stays where it is.
    """
    return _set_size(box, width, height, align_bottom_left)


def set_size_from_bottom_left(box: BoxType[S], width: int, height: int) -> Box[S]:
    """Resize a box by moving its bottom-left corner.

    The top-right corner stays where it is.
    """
    return _set_size(box, width, height, align_top_right)


def set_size_from_bottom_right(box: BoxType[S], width: int, height: int) -> Box[S]:
    """Resize a box by moving its bottom-right corner.

    The top-left corner stays where it is.
    """
    return _set_size(box, width, height, align_top_left)


def _scaled_size(box: BoxType[S], x_diff: int, y_diff: int) -> tuple[int, int]:
    width = max(0, add_exact(box.width, x_diff))
    height = max(0, add_exact(box.height, y_diff))
    return width, height


def scale_from_center(box: BoxType[S], x_diff: int, y_diff: int) -> Box[S]:
    """Grow (or shrink) a box around its center; sizes stop at zero."""
    return set_size_from_center(box, *_scaled_size(box, x_diff, y_diff))


def scale_from_top_left(box: BoxType[S], x_diff: int, y_diff: int) -> Box[S]:
    return set_size_from_top_left(box, *_scaled_size(box, x_diff, y_diff))


def scale_from_top_right(box: BoxType[S], x_diff: int, y_diff: int) -> Box[S]:
    return set_size_from_top_right(box, *_scaled_size(box, x_diff, y_diff))


def scale_from_bottom_left(box: BoxType[S], x_diff: int, y_diff: int) -> Box[S]:
    return set_size_from_bottom_left(box, *_scaled_size(box, x_diff, y_diff))


def scale_from_bottom_right(box: BoxType[S], x_diff: int, y_diff: int) -> Box[S]:
    return set_size_from_bottom_right(box, *_scaled_size(box, x_diff, y_diff))


# -- Predicates -------------------------------------------------------------


def overlaps(a: BoxType[S], b: BoxType[S]) -> bool:
    """True if the half-open extents of a and b intersect on both axes.

    A box with zero width or height overlaps nothing, not even itself.
    """
    overlap_x = max(a.minimum_x, b.minimum_x) < min(a.maximum_x, b.maximum_x)
    overlap_y = max(a.minimum_y, b.minimum_y) < min(a.maximum_y, b.maximum_y)
    return overlap_x and overlap_y


def could_fit_inside(a: BoxType[S], b: BoxType[S]) -> bool:
    """True if a is no larger than b on either axis, ignoring position."""
    return a.width <= b.width and a.height <= b.height


def contains(a: BoxType[S], b: BoxType[S]) -> bool:
    """True if b lies within a, edges included."""
    contain_x = b.minimum_x >= a.minimum_x and b.maximum_x <= a.maximum_x
    contain_y = b.minimum_y >= a.minimum_y and b.maximum_y <= a.maximum_y
    return contain_x and contain_y


def contains_point(box: BoxType[S], x: int, y: int) -> bool:
    """True if (x, y) lies in the half-open area of box."""
    contain_x = box.minimum_x <= x < box.maximum_x
    contain_y = box.minimum_y <= y < box.maximum_y
    return contain_x and contain_y


def containing(a: BoxType[S], b: BoxType[S]) -> Box[S]:
    """Return the smallest box containing both a and b."""
    return Box.of(
        min(a.minimum_x, b.minimum_x),
        max(a.maximum_x, b.maximum_x),
        min(a.minimum_y, b.minimum_y),
        max(a.maximum_y, b.maximum_y),
    )


# -- Fitting and splitting --------------------------------------------------


def fit_between_horizontal(
    fit: BoxType[S], a: BoxType[S], b: BoxType[S]
) -> Box[S]:
    """Span the horizontal gap between a and b, keeping fit's vertical extent."""
    x0 = min(a.maximum_x, b.maximum_x)
    x1 = max(a.minimum_x, b.minimum_x)
    return Box.of(min(x0, x1), max(x0, x1), fit.minimum_y, fit.maximum_y)


def fit_between_vertical(
    fit: BoxType[S], a: BoxType[S], b: BoxType[S]
) -> Box[S]:
    """Span the vertical gap between a and b, keeping fit's horizontal extent."""
    y0 = min(a.maximum_y, b.maximum_y)
    y1 = max(a.minimum_y, b.minimum_y)
    return Box.of(fit.minimum_x, fit.maximum_x, min(y0, y1), max(y0, y1))


def split_along_horizontal(box: BoxType[S], height: int) -> BoxHorizontalSplit[S]:
    """Cut box with a horizontal line ``height`` units below its top.

    The cut is clamped to the box, so one half may have zero height.
    """
    height = clamp(as_int(height, "height"), 0, box.height)
    cut_y = add_exact(box.minimum_y, height)
    upper = Box.of(box.minimum_x, box.maximum_x, box.minimum_y, cut_y)
    lower = Box.of(box.minimum_x, box.maximum_x, cut_y, box.maximum_y)
    return BoxHorizontalSplit.of(upper, lower)


def split_along_vertical(box: BoxType[S], width: int) -> BoxVerticalSplit[S]:
    """Cut box with a vertical line ``width`` units right of its left edge.

    The cut is clamped to the box, so one half may have zero width.
    """
    width = clamp(as_int(width, "width"), 0, box.width)
    cut_x = add_exact(box.minimum_x, width)
    left = Box.of(box.minimum_x, cut_x, box.minimum_y, box.maximum_y)
    right = Box.of(cut_x, box.maximum_x, box.minimum_y, box.maximum_y)
    return BoxVerticalSplit.of(left, right)


# -- Display ----------------------------------------------------------------


def show(box: BoxType[S]) -> str:
    """Render a box as ``"{width}x{height} {minimum_x}+{minimum_y}"``."""
    return show_to_builder(box, io.StringIO())


def show_to_builder(box: BoxType[S], sink: SupportsWrite) -> str:
    """Append the rendering of box to sink.

    Returns the sink's full contents when it exposes ``getvalue()``,
    otherwise just the text written.
    """
    text = f"{box.width}x{box.height} {box.minimum_x}+{box.minimum_y}"
    sink.write(text)
    getvalue = getattr(sink, "getvalue", None)
    return getvalue() if getvalue is not None else text
