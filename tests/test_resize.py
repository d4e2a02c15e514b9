"""Tests for hollowing out, resizing and scaling."""

import pytest

from layout_boxes.core.box import Box
from layout_boxes.core.errors import InvariantViolation
from layout_boxes.layout import boxes


class TestHollowOut:
    def test_specific(self):
        inner = boxes.hollow_out(Box.of(0, 99, 0, 99), 10, 20, 30, 40)
        assert inner == Box.of(10, 99 - 20, 30, 99 - 40)

    def test_too_large_left(self):
        inner = boxes.hollow_out(Box.of(0, 100, 0, 100), 120, 20, 30, 40)
        assert inner == Box.of(100, 100, 30, 60)

    def test_too_large_right(self):
        inner = boxes.hollow_out(Box.of(0, 100, 0, 100), 10, 120, 30, 40)
        assert inner == Box.of(10, 10, 30, 60)

    def test_too_large_top(self):
        inner = boxes.hollow_out(Box.of(0, 100, 0, 100), 10, 20, 130, 40)
        assert inner == Box.of(10, 80, 100, 100)

    def test_too_large_bottom(self):
        inner = boxes.hollow_out(Box.of(0, 100, 0, 100), 10, 20, 30, 140)
        assert inner == Box.of(10, 80, 30, 30)

    def test_zero_offsets_is_identity(self, sample_boxes):
        for outer in sample_boxes:
            assert boxes.hollow_out(outer, 0, 0, 0, 0) == outer

    def test_evenly(self, sample_boxes, generator):
        for outer in sample_boxes:
            k = generator.integers(0, 100)
            assert boxes.hollow_out(outer, k, k, k, k) == boxes.hollow_out_evenly(outer, k)

    def test_contained(self, sample_boxes, generator):
        for outer in sample_boxes:
            if outer.width == 0 or outer.height == 0:
                continue
            offsets = [generator.integers(0, 50) for _ in range(4)]
            inner = boxes.hollow_out(outer, *offsets)
            assert boxes.contains(outer, inner)
            if any(offsets):
                assert not boxes.contains(inner, outer)
            else:
                assert inner == outer

    @pytest.mark.parametrize("position", range(4))
    def test_negative_offset_rejected(self, position):
        offsets = [0, 0, 0, 0]
        offsets[position] = -1
        with pytest.raises(InvariantViolation, match="offset"):
            boxes.hollow_out(Box.of(0, 10, 0, 10), *offsets)


class TestSetSize:
    def test_from_top_left_keeps_bottom_right(self, sample_boxes, generator):
        for outer in sample_boxes:
            w, h = generator.integers(0, 400), generator.integers(0, 400)
            resized = boxes.set_size_from_top_left(outer, w, h)
            assert (resized.width, resized.height) == (w, h)
            assert resized.maximum_x == outer.maximum_x
            assert resized.maximum_y == outer.maximum_y

    def test_from_top_right_keeps_bottom_left(self, sample_boxes, generator):
        for outer in sample_boxes:
            w, h = generator.integers(0, 400), generator.integers(0, 400)
            resized = boxes.set_size_from_top_right(outer, w, h)
            assert (resized.width, resized.height) == (w, h)
            assert resized.minimum_x == outer.minimum_x
            assert resized.maximum_y == outer.maximum_y

    def test_from_bottom_left_keeps_top_right(self, sample_boxes, generator):
        for outer in sample_boxes:
            w, h = generator.integers(0, 400), generator.integers(0, 400)
            resized = boxes.set_size_from_bottom_left(outer, w, h)
            assert (resized.width, resized.height) == (w, h)
            assert resized.maximum_x == outer.maximum_x
            assert resized.minimum_y == outer.minimum_y

    def test_from_bottom_right_keeps_top_left(self, sample_boxes, generator):
        for outer in sample_boxes:
            w, h = generator.integers(0, 400), generator.integers(0, 400)
            resized = boxes.set_size_from_bottom_right(outer, w, h)
            assert (resized.width, resized.height) == (w, h)
            assert resized.minimum_x == outer.minimum_x
            assert resized.minimum_y == outer.minimum_y

    def test_from_center(self, sample_boxes, generator):
        for outer in sample_boxes:
            w, h = generator.integers(0, 400), generator.integers(0, 400)
            resized = boxes.set_size_from_center(outer, w, h)
            assert (resized.width, resized.height) == (w, h)
            diff_left = abs(outer.minimum_x - resized.minimum_x)
            diff_right = abs(outer.maximum_x - resized.maximum_x)
            diff_top = abs(outer.minimum_y - resized.minimum_y)
            diff_bottom = abs(outer.maximum_y - resized.maximum_y)
            assert abs(diff_left - diff_right) <= 1
            assert abs(diff_top - diff_bottom) <= 1

    def test_from_center_specific(self):
        assert boxes.set_size_from_center(Box.of(0, 100, 0, 100), 10, 20) == Box.of(
            45, 55, 40, 60
        )

    @pytest.mark.parametrize(
        "resize",
        [
            boxes.set_size_from_top_left,
            boxes.set_size_from_top_right,
            boxes.set_size_from_bottom_left,
            boxes.set_size_from_bottom_right,
            boxes.set_size_from_center,
        ],
    )
    def test_negative_size_rejected(self, resize):
        with pytest.raises(InvariantViolation, match="Width"):
            resize(Box.of(0, 10, 0, 10), -1, 5)
        with pytest.raises(InvariantViolation, match="Height"):
            resize(Box.of(0, 10, 0, 10), 5, -1)


class TestScale:
    @pytest.mark.parametrize(
        "scale,fixed",
        [
            (boxes.scale_from_top_left, ("maximum_x", "maximum_y")),
            (boxes.scale_from_top_right, ("minimum_x", "maximum_y")),
            (boxes.scale_from_bottom_left, ("maximum_x", "minimum_y")),
            (boxes.scale_from_bottom_right, ("minimum_x", "minimum_y")),
        ],
    )
    def test_corners(self, scale, fixed, sample_boxes, generator):
        for outer in sample_boxes:
            x_diff = generator.integers(-400, 400)
            y_diff = generator.integers(-400, 400)
            resized = scale(outer, x_diff, y_diff)
            assert resized.width == max(0, outer.width + x_diff)
            assert resized.height == max(0, outer.height + y_diff)
            for bound in fixed:
                assert getattr(resized, bound) == getattr(outer, bound)

    def test_center(self, sample_boxes, generator):
        for outer in sample_boxes:
            x_diff = generator.integers(-400, 400)
            y_diff = generator.integers(-400, 400)
            resized = boxes.scale_from_center(outer, x_diff, y_diff)
            assert resized.width == max(0, outer.width + x_diff)
            assert resized.height == max(0, outer.height + y_diff)

    def test_shrink_clamps_to_zero(self):
        resized = boxes.scale_from_bottom_right(Box.of(0, 10, 0, 10), -50, -50)
        assert resized == Box.of(0, 0, 0, 0)
