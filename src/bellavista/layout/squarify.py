"""Squarified treemap layout.

Children of each directory are packed into rows. A row keeps growing while
adding the next (smaller) child does not make its worst aspect ratio any
worse; then it is closed, placed as a strip along the long side of the
remaining rectangle, and the next row starts in what is left. Directory
rectangles are filled recursively the same way.

Reference: Bruls, Huizing, van Wijk, "Squarified Treemaps" (2000).
"""

import math
from collections.abc import Sequence
from typing import Optional

from ..geometry import Rect
from ..scanning.models import Node
from .models import FileBox


def worst_ratio(areas: Sequence[float], length: float) -> float:
    """Worst aspect ratio of a row of ``areas`` laid along a side of ``length``.

    Lower is squarer. Never NaN or infinite: a non-finite term falls back to
    the other one, and ``0.0`` is returned when neither is finite.
    """
    if not areas:
        return 0.0
    return _worst(math.fsum(areas), max(areas), min(areas), length)


def _worst(total: float, largest: float, smallest: float, length: float) -> float:
    side_sq = length * length
    terms = (
        side_sq * largest / (total * total) if total > 0 else math.inf,
        (total * total) / (side_sq * smallest) if side_sq * smallest > 0 else math.inf,
    )
    finite = [t for t in terms if math.isfinite(t)]
    return max(finite) if finite else 0.0


def squarify(root: Node, bounds: Rect) -> list[FileBox]:
    """Lay out every leaf under ``root`` inside ``bounds``.

    Boxes come out in depth-first order, children in size order. Directories
    with no children contribute nothing.
    """
    boxes: list[FileBox] = []
    # (node, rect, region its siblings share, depth); popped in pre-order
    pending: list[tuple[Node, Rect, Optional[Rect], int]] = [(root, bounds, None, 0)]
    while pending:
        node, rect, parent, depth = pending.pop()
        if node.is_leaf:
            boxes.append(FileBox(node.path, node.size, rect, parent=parent, depth=depth))
        elif node.children:
            placed = squarify_rects(node.children, rect)
            pending.extend((child, r, rect, depth + 1) for child, r in reversed(placed))
    return boxes


def squarify_rects(children: Sequence[Node], bounds: Rect) -> list[tuple[Node, Rect]]:
    """Assign one rectangle per sibling, jointly covering ``bounds``.

    ``children`` must be sorted non-increasing by size.
    """
    placed: list[tuple[Node, Rect]] = []
    remaining = bounds
    remaining_total = sum(c.size for c in children)
    start = 0
    count = len(children)

    while start < count:
        wide = remaining.width > remaining.height
        length = remaining.height if wide else remaining.width
        # Rows are scored on areas: sizes scaled to the remaining rect, not raw bytes
        scale = remaining.area / remaining_total if remaining_total > 0 else 0.0

        first = children[start].size * scale
        row_total, largest, smallest = first, first, first
        best = _worst(row_total, largest, smallest, length)
        end = start + 1

        while end < count:
            area = children[end].size * scale
            candidate = _worst(row_total + area, max(largest, area), min(smallest, area), length)
            if candidate > best:
                break
            row_total += area
            largest = max(largest, area)
            smallest = min(smallest, area)
            best = candidate
            end += 1

        row = children[start:end]
        row_size = sum(c.size for c in row)
        strip, remaining = _cut_strip(remaining, row_size, remaining_total, wide)
        placed.extend(zip(row, _stack_row(strip, row, row_size, wide)))

        remaining_total -= row_size
        start = end

    return placed


def _cut_strip(rect: Rect, row_size: int, total: int, wide: bool) -> tuple[Rect, Rect]:
    """Split ``rect`` into the row's strip and the remainder.

    Wide rects lose a strip on the left, others a strip on top.
    """
    lo, hi = (rect.x0, rect.x1) if wide else (rect.y0, rect.y1)

    if total <= 0:
        edge = lo
    elif row_size >= total:
        edge = hi
    else:
        edge = min(lo + (hi - lo) * row_size / total, hi)

    if wide:
        return Rect(rect.x0, rect.y0, edge, rect.y1), Rect(edge, rect.y0, rect.x1, rect.y1)
    return Rect(rect.x0, rect.y0, rect.x1, edge), Rect(rect.x0, edge, rect.x1, rect.y1)


def _stack_row(strip: Rect, row: Sequence[Node], row_size: int, wide: bool) -> list[Rect]:
    """Subdivide a strip across its short axis in proportion to size.

    Edges come from running size totals, so neighbours share them exactly and
    the item that completes the row ends on the strip's far edge.
    """
    lo, hi = (strip.y0, strip.y1) if wide else (strip.x0, strip.x1)
    span = hi - lo

    rects: list[Rect] = []
    offset = 0
    begin = lo
    for child in row:
        offset += child.size
        if row_size <= 0:
            finish = lo
        elif offset >= row_size:
            finish = hi
        else:
            finish = min(lo + span * offset / row_size, hi)

        if wide:
            rects.append(Rect(strip.x0, begin, strip.x1, finish))
        else:
            rects.append(Rect(begin, strip.y0, finish, strip.y1))
        begin = finish
    return rects
