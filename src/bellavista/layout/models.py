"""Layout output records."""

from dataclasses import dataclass
from typing import Optional

from ..geometry import Rect


@dataclass(frozen=True)
class FileBox:
    """Rectangle assigned to one leaf of the size tree.

    ``parent`` is the region the leaf and its siblings were laid out in, kept
    by value so a renderer can outline the enclosing directory. It is None
    only when the laid-out root is itself a leaf.
    """

    path: str
    size: int
    rect: Rect
    parent: Optional[Rect] = None
    depth: int = 0
