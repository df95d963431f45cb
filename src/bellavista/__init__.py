"""
Bellavista - disk usage treemaps

Scans a directory into a size-weighted tree and lays it out as nested
rectangles whose areas are proportional to bytes on disk.
"""

__version__ = "0.2.0"

from .coloring import Color, color
from .geometry import Rect, divide_rect
from .layout import FileBox, compute_boxes, hit_test, layout
from .scanning import Node, TreeScanner, scan

__all__ = [
    "scan",  # Directory -> Node tree
    "layout",  # Node tree + bounds -> (Rect, FileBox) pairs
    "compute_boxes",
    "color",
    "hit_test",
    "divide_rect",
    "Color",
    "FileBox",
    "Node",
    "Rect",
    "TreeScanner",
]
