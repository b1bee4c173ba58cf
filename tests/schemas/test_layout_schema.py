"""Tests for schemas.layout: primitive value types."""

from __future__ import annotations

import pytest

from mediaviz.schemas.layout import Point, Rect, Silhouette
from mediaviz.schemas.media import Shape


class TestRect:
    def test_edges(self):
        r = Rect(10.0, 20.0, 30.0, 40.0)
        assert r.right == 40.0
        assert r.bottom == 60.0

    def test_translated_keeps_size_and_radius(self):
        r = Rect(0.0, 0.0, 5.0, 6.0, corner_radius=2.0).translated(1.0, 2.0)
        assert r == Rect(1.0, 2.0, 5.0, 6.0, corner_radius=2.0)

    def test_frozen(self):
        with pytest.raises((AttributeError, TypeError)):
            Rect(0.0, 0.0, 1.0, 1.0).x = 5.0  # type: ignore[misc]


class TestSilhouette:
    def test_rounded_rect_is_not_polygon(self):
        s = Silhouette(shape=Shape.SQUARE_RECTANGLE, x=0.0, y=0.0, width=1.0, height=1.0)
        assert not s.is_polygon
        assert s.translated(2.0, 3.0).inset is None

    def test_translated_polygon(self):
        s = Silhouette(
            shape=Shape.JEWELRY_RAT_TAIL,
            x=0.0,
            y=0.0,
            width=1.0,
            height=1.0,
            outline=(Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0)),
        )
        moved = s.translated(5.0, 5.0)
        assert moved.outline == (Point(5.0, 5.0), Point(6.0, 5.0), Point(6.0, 6.0))
        assert (moved.x, moved.y) == (5.0, 5.0)
        assert s.outline[0] == Point(0.0, 0.0)
