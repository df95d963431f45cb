"""Tests for layout quality measures."""

import math

import pytest

from bellavista.geometry import Rect
from bellavista.layout import FileBox, aspect_ratio_summary, coverage_error, squarify


def _box(rect):
    return FileBox("p", 1, rect)


class TestAspectRatioSummary:
    def test_summary_values(self):
        boxes = [
            _box(Rect(0, 0, 1, 1)),
            _box(Rect(0, 0, 2, 1)),
            _box(Rect(0, 0, 1, 3)),
            _box(Rect(0, 0, 4, 1)),
        ]
        summary = aspect_ratio_summary(boxes)
        assert summary["count"] == 4
        assert summary["mean"] == pytest.approx(2.5)
        assert summary["median"] == pytest.approx(2.5)
        assert summary["max"] == pytest.approx(4.0)
        assert 3.0 <= summary["p90"] <= 4.0

    def test_zero_area_boxes_are_ignored(self):
        summary = aspect_ratio_summary([_box(Rect(0, 0, 0, 5)), _box(Rect(0, 0, 2, 2))])
        assert summary["count"] == 1
        assert summary["max"] == 1.0

    def test_no_boxes(self):
        assert aspect_ratio_summary([]) == {
            "count": 0,
            "mean": 0.0,
            "median": 0.0,
            "p90": 0.0,
            "max": 0.0,
        }

    def test_values_are_plain_floats(self, nested_tree):
        summary = aspect_ratio_summary(squarify(nested_tree, Rect(0, 0, 100, 100)))
        assert all(type(v) in (int, float) for v in summary.values())


class TestCoverageError:
    def test_exact_cover(self, nested_tree):
        bounds = Rect(0.0, 0.0, 800.0, 600.0)
        assert coverage_error(squarify(nested_tree, bounds), bounds) < 1e-9

    def test_partial_cover(self):
        bounds = Rect(0.0, 0.0, 10.0, 10.0)
        assert coverage_error([_box(Rect(0, 0, 5, 10))], bounds) == pytest.approx(0.5)

    def test_zero_area_bounds(self):
        bounds = Rect(0.0, 0.0, 0.0, 10.0)
        assert coverage_error([_box(Rect(0, 0, 0, 10))], bounds) == 0.0
        assert math.isinf(coverage_error([_box(Rect(0, 0, 1, 1))], bounds))
