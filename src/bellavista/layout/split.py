"""Simple proportional-split layout.

Each child takes its share of whatever region its earlier siblings left over,
cut off with ``divide_rect``. Cheaper than squarify but prone to thin slivers;
kept as an alternate mode.
"""

from typing import Optional

from ..geometry import Rect, divide_rect
from ..scanning.models import Node
from .models import FileBox


def split_layout(root: Node, bounds: Rect) -> list[FileBox]:
    boxes: list[FileBox] = []
    pending: list[tuple[Node, Rect, Optional[Rect], int]] = [(root, bounds, None, 0)]
    while pending:
        node, rect, parent, depth = pending.pop()
        if node.is_leaf:
            boxes.append(FileBox(node.path, node.size, rect, parent=parent, depth=depth))
        elif node.children:
            regions = _split_children(node, rect)
            pending.extend(
                (child, region, rect, depth + 1)
                for child, region in reversed(list(zip(node.children, regions)))
            )
    return boxes


def _split_children(node: Node, bounds: Rect) -> list[Rect]:
    regions = []
    remaining_size = node.size
    area = bounds
    for child in node.children or ():
        ratio = child.size / remaining_size if remaining_size > 0 else 0.0
        region, area = divide_rect(area, ratio)
        regions.append(region)
        remaining_size -= child.size
    return regions
