"""Tests for point lookups over a layout."""

from bellavista.geometry import Rect
from bellavista.layout import compute_boxes, hit_test


class TestHitTest:
    def test_finds_box_under_point(self, make_flat_tree, squarify_sizes, paper_bounds):
        boxes = compute_boxes(make_flat_tree(squarify_sizes), paper_bounds)

        assert hit_test(boxes, 1.0, 1.0).path == "root/f0"
        assert hit_test(boxes, 1.0, 3.0).path == "root/f1"

    def test_shared_edge_belongs_to_one_box(self, make_flat_tree, squarify_sizes, paper_bounds):
        boxes = compute_boxes(make_flat_tree(squarify_sizes), paper_bounds)
        hits = [b for b in boxes if b.rect.contains(1.0, 2.0)]
        assert len(hits) == 1
        assert hit_test(boxes, 1.0, 2.0).path == "root/f1"

    def test_every_interior_point_hits(self, nested_tree):
        bounds = Rect(0.0, 0.0, 200.0, 100.0)
        boxes = compute_boxes(nested_tree, bounds)
        for x in range(0, 200, 7):
            for y in range(0, 100, 7):
                assert hit_test(boxes, x + 0.5, y + 0.5) is not None

    def test_outside_bounds(self, nested_tree):
        boxes = compute_boxes(nested_tree, Rect(0.0, 0.0, 10.0, 10.0))
        assert hit_test(boxes, 10.0, 5.0) is None
        assert hit_test(boxes, -1.0, -1.0) is None
        assert hit_test([], 0.0, 0.0) is None
