"""Tests for Rect geometry and tile-unit snapping."""

from __future__ import annotations

import math

import pytest

from delve.util.coordinates import Rect, floor_to_unit, snap_to_unit


class TestUnitSnapping:
    def test_snap_rounds_half_up(self) -> None:
        """Halfway values go up, not to the nearest even multiple."""
        assert snap_to_unit(32, 64) == 64
        assert snap_to_unit(96, 64) == 128
        assert snap_to_unit(31.9, 64) == 0

    def test_snap_keeps_exact_multiples(self) -> None:
        assert snap_to_unit(192, 64) == 192

    def test_floor_to_unit(self) -> None:
        assert floor_to_unit(127.9, 64) == 64
        assert floor_to_unit(128, 64) == 128
        assert floor_to_unit(-1, 64) == -64


class TestRectProperties:
    def test_edges_and_center(self) -> None:
        rect = Rect(10, 20, 30, 40)
        assert (rect.left, rect.top, rect.right, rect.bottom) == (10, 20, 40, 60)
        assert rect.center() == (25, 40)
        assert rect.area == 1200
        assert rect.aspect_ratio == pytest.approx(0.75)

    def test_from_bounds(self) -> None:
        assert Rect.from_bounds(0, 64, 128, 256) == Rect(0, 64, 128, 192)

    def test_is_large_enough_is_inclusive(self) -> None:
        rect = Rect(0, 0, 128, 64)
        assert rect.is_large_enough(128, 64)
        assert not rect.is_large_enough(129, 64)
        assert not rect.is_large_enough(128, 65)

    def test_is_finite(self) -> None:
        assert Rect(0, 0, 1, 1).is_finite()
        assert not Rect(0, 0, math.inf, 1).is_finite()
        assert not Rect(math.nan, 0, 1, 1).is_finite()

    def test_repr_is_compact(self) -> None:
        assert repr(Rect(0.0, 64.0, 128.0, 256.0)) == (
            "Rect(x=0, y=64, width=128, height=256)"
        )


class TestRectQuantization:
    def test_quantized_rounds_every_field(self) -> None:
        assert Rect(10, 100, 130, 96).quantized(64) == Rect(0, 128, 128, 128)

    def test_quantized_never_collapses_below_one_unit(self) -> None:
        """Tiny sizes still yield a one-tile rectangle."""
        rect = Rect(0, 0, 5, 30).quantized(64)
        assert rect.width == 64
        assert rect.height == 64

    def test_quantized_is_idempotent(self) -> None:
        rect = Rect(13, 77, 300, 501).quantized(64)
        assert rect.quantized(64) == rect


class TestRectRelations:
    def test_union_is_bounding_box(self) -> None:
        a = Rect(0, 0, 64, 64)
        b = Rect(128, 192, 64, 64)
        assert a.union(b) == Rect(0, 0, 192, 256)

    def test_contains_point_is_half_open(self) -> None:
        rect = Rect(0, 0, 64, 64)
        assert rect.contains_point(0, 0)
        assert rect.contains_point(63.9, 63.9)
        assert not rect.contains_point(64, 0)
        assert not rect.contains_point(0, 64)

    def test_contains_rect(self) -> None:
        outer = Rect(0, 0, 256, 256)
        assert outer.contains_rect(Rect(0, 128, 256, 128))
        assert outer.contains_rect(outer)
        assert not outer.contains_rect(Rect(192, 0, 128, 64))

    def test_touching_rects_do_not_intersect(self) -> None:
        a = Rect(0, 0, 128, 128)
        assert not a.intersects(Rect(128, 0, 128, 128))
        assert a.intersects(Rect(64, 64, 128, 128))

    def test_is_adjacent_requires_full_shared_edge(self) -> None:
        a = Rect(0, 0, 64, 128)
        assert a.is_adjacent(Rect(64, 0, 64, 128))
        assert Rect(64, 0, 64, 128).is_adjacent(a)
        assert a.is_adjacent(Rect(0, 128, 64, 64))
        # Same height but offset vertically: only a partial edge
        assert not a.is_adjacent(Rect(64, 64, 64, 128))
        # Full edge but not touching
        assert not a.is_adjacent(Rect(128, 0, 64, 128))
