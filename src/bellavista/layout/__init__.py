"""Treemap layout engines.

``layout`` is the entry point used by renderers: it returns one
``(rect, box)`` pair per leaf, in depth-first order.
"""

from collections.abc import Callable

from ..geometry import Rect
from ..scanning.models import Node
from .models import FileBox
from .quality import aspect_ratio_summary, coverage_error
from .query import hit_test
from .split import split_layout
from .squarify import squarify, squarify_rects, worst_ratio

LAYOUT_MODES: dict[str, Callable[[Node, Rect], list[FileBox]]] = {
    "squarify": squarify,
    "split": split_layout,
}


def compute_boxes(root: Node, bounds: Rect, mode: str = "squarify") -> list[FileBox]:
    """Run the named layout engine.

    Raises:
        ValueError: If ``mode`` is not one of ``LAYOUT_MODES``.
    """
    try:
        engine = LAYOUT_MODES[mode]
    except KeyError:
        raise ValueError(
            f"Unknown layout mode '{mode}' (expected one of: {', '.join(LAYOUT_MODES)})"
        ) from None
    return engine(root, bounds)


def layout(root: Node, bounds: Rect, mode: str = "squarify") -> list[tuple[Rect, FileBox]]:
    """Lay out ``root`` in ``bounds`` and pair each leaf box with its rectangle."""
    return [(box.rect, box) for box in compute_boxes(root, bounds, mode)]


__all__ = [
    "FileBox",
    "LAYOUT_MODES",
    "aspect_ratio_summary",
    "compute_boxes",
    "coverage_error",
    "hit_test",
    "layout",
    "split_layout",
    "squarify",
    "squarify_rects",
    "worst_ratio",
]
