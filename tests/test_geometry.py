"""Tests for rectangles and the proportional split primitive."""

import math

import pytest

from bellavista.geometry import SPLIT_ASPECT_THRESHOLD, Rect, divide_rect


class TestRect:
    def test_derived_dimensions(self):
        r = Rect(1.0, 2.0, 4.0, 8.0)
        assert r.width == 3.0
        assert r.height == 6.0
        assert r.area == 18.0

    def test_aspect_ratio_is_long_over_short(self):
        assert Rect(0, 0, 10, 5).aspect_ratio == 2.0
        assert Rect(0, 0, 5, 10).aspect_ratio == 2.0
        assert Rect(0, 0, 7, 7).aspect_ratio == 1.0

    def test_degenerate_aspect_ratios(self):
        """Zero-size sides never raise."""
        assert Rect(0, 0, 0, 0).aspect_ratio == 1.0
        assert math.isinf(Rect(0, 0, 5, 0).aspect_ratio)
        assert Rect(3, 3, 3, 9).area == 0.0

    def test_rejects_inverted_corners(self):
        with pytest.raises(ValueError):
            Rect(5, 0, 1, 1)
        with pytest.raises(ValueError):
            Rect(0, 5, 1, 1)

    def test_contains_is_half_open(self):
        r = Rect(0, 0, 10, 10)
        assert r.contains(0, 0)
        assert r.contains(9.999, 5)
        assert not r.contains(10, 5)
        assert not r.contains(5, 10)
        assert not r.contains(-0.1, 5)

    def test_contains_rect(self):
        outer = Rect(0, 0, 10, 10)
        assert outer.contains_rect(Rect(2, 2, 10, 10))
        assert not outer.contains_rect(Rect(2, 2, 11, 10))

    def test_intersection_area(self):
        a = Rect(0, 0, 4, 4)
        assert a.intersection_area(Rect(2, 2, 6, 6)) == 4.0
        assert a.intersection_area(Rect(4, 0, 8, 4)) == 0.0  # touching edge only
        assert a.intersection_area(Rect(10, 10, 12, 12)) == 0.0

    def test_from_size(self):
        assert Rect.from_size(600, 400) == Rect(0.0, 0.0, 600.0, 400.0)

    def test_is_hashable_value(self):
        assert Rect(0, 0, 1, 1) == Rect(0.0, 0.0, 1.0, 1.0)
        assert len({Rect(0, 0, 1, 1), Rect(0, 0, 1, 1)}) == 1


class TestDivideRect:
    def test_square_is_cut_left_right(self):
        first, second = divide_rect(Rect(0.0, 0.0, 100.0, 100.0), 0.3)
        assert first == Rect(0.0, 0.0, 30.0, 100.0)
        assert second == Rect(30.0, 0.0, 100.0, 100.0)

    def test_tall_rect_is_cut_top_bottom(self):
        first, second = divide_rect(Rect(0.0, 0.0, 100.0, 200.0), 0.3)
        assert first == Rect(0.0, 0.0, 100.0, 60.0)
        assert second == Rect(0.0, 60.0, 100.0, 200.0)

    def test_threshold_itself_cuts_top_bottom(self):
        height = 100.0 * SPLIT_ASPECT_THRESHOLD
        first, _ = divide_rect(Rect(0.0, 0.0, 100.0, height), 0.5)
        assert first.width == 100.0
        assert first.height == pytest.approx(height / 2)

    def test_wide_rect_is_cut_left_right(self):
        first, second = divide_rect(Rect(0.0, 0.0, 300.0, 100.0), 0.5)
        assert first == Rect(0.0, 0.0, 150.0, 100.0)
        assert second == Rect(150.0, 0.0, 300.0, 100.0)

    @pytest.mark.parametrize("ratio", [0.0, 0.25, 0.5, 1.0])
    def test_parts_cover_source(self, ratio):
        source = Rect(3.0, 7.0, 50.0, 20.0)
        first, second = divide_rect(source, ratio)
        assert first.area + second.area == pytest.approx(source.area)
        assert first.intersection_area(second) == 0.0
        assert first.area == pytest.approx(source.area * ratio)

    def test_zero_width_source(self):
        first, second = divide_rect(Rect(5.0, 0.0, 5.0, 10.0), 0.5)
        assert first == Rect(5.0, 0.0, 5.0, 5.0)
        assert second == Rect(5.0, 5.0, 5.0, 10.0)

    @pytest.mark.parametrize("ratio", [-0.01, 1.01, float("nan")])
    def test_ratio_out_of_bounds_fails_fast(self, ratio):
        with pytest.raises(ValueError, match="out of bounds"):
            divide_rect(Rect(0, 0, 10, 10), ratio)
