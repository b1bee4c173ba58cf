"""Tests for geometry.shapes: build_shape."""

from __future__ import annotations

import pytest

from mediaviz.geometry.shapes import build_shape, scale_outline
from mediaviz.schemas.layout import Point
from mediaviz.schemas.media import Shape


class TestRectangularShapes:
    def test_square_rectangle_uses_corner_radius(self):
        s = build_shape(Shape.SQUARE_RECTANGLE, 168.0, 360.0, 12.0)
        assert (s.x, s.y, s.width, s.height) == (0.0, 0.0, 168.0, 360.0)
        assert s.corner_radius == 12.0
        assert s.outline == ()
        assert s.inset is None
        assert not s.is_polygon

    def test_other_keeps_its_own_tag(self):
        s = build_shape(Shape.OTHER, 100.0, 50.0, 8.0)
        assert s.shape is Shape.OTHER
        assert s.corner_radius == 8.0

    def test_other_matches_square_geometry(self):
        other = build_shape(Shape.OTHER, 100.0, 50.0, 8.0)
        square = build_shape(Shape.SQUARE_RECTANGLE, 100.0, 50.0, 8.0)
        assert (other.width, other.height, other.corner_radius) == (
            square.width,
            square.height,
            square.corner_radius,
        )
        assert other.shape is not square.shape

    def test_circular_oval_radius_is_half_smaller_side(self):
        s = build_shape(Shape.CIRCULAR_OVAL, 100.0, 50.0, 12.0)
        assert s.corner_radius == 25.0

    def test_circle(self):
        s = build_shape(Shape.CIRCULAR_OVAL, 80.0, 80.0, 0.0)
        assert s.corner_radius == 40.0

    def test_negative_sizes_propagate(self):
        s = build_shape(Shape.SQUARE_RECTANGLE, -4.8, 10.0, 12.0)
        assert s.width == -4.8


class TestJewelryRatTail:
    @pytest.fixture(scope="class")
    def jewelry(self):
        return build_shape(Shape.JEWELRY_RAT_TAIL, 100.0, 50.0, 12.0)

    def test_outline_has_ten_points(self, jewelry):
        assert len(jewelry.outline) == 10
        assert jewelry.is_polygon

    def test_outline_proportional_to_label(self, jewelry):
        assert jewelry.outline[0] == Point(0.0, 0.0)
        assert jewelry.outline[2] == Point(50.0, 12.5)
        assert jewelry.outline[5] == Point(100.0, 50.0)
        assert jewelry.outline[7] == Point(50.0, 37.5)

    def test_corner_radius_ignored(self, jewelry):
        assert jewelry.corner_radius == 0.0

    def test_inset_is_six_pixels_smaller(self, jewelry):
        inset = jewelry.inset
        assert inset is not None
        assert (inset.width, inset.height) == (94.0, 44.0)

    def test_inset_offset_three_pixels(self, jewelry):
        inset = jewelry.inset
        assert (inset.x, inset.y) == (3.0, 3.0)
        assert inset.outline[0] == Point(3.0, 3.0)
        assert inset.outline[5] == Point(97.0, 47.0)

    def test_inset_outline_same_proportions(self, jewelry):
        inset = jewelry.inset
        assert inset.outline[2] == Point(3.0 + 0.5 * 94.0, 3.0 + 0.25 * 44.0)
        assert inset.inset is None

    def test_translated_moves_outline_and_inset(self, jewelry):
        moved = jewelry.translated(10.0, 20.0)
        assert moved.outline[0] == Point(10.0, 20.0)
        assert moved.inset.outline[0] == Point(13.0, 23.0)
        assert (moved.inset.x, moved.inset.y) == (13.0, 23.0)


class TestScaleOutline:
    def test_maps_unit_square(self):
        pts = scale_outline(((0.0, 0.0), (1.0, 0.5)), 2.0, 4.0, 10.0, 20.0)
        assert pts == (Point(2.0, 4.0), Point(12.0, 14.0))
