"""Point lookups over a computed layout."""

from collections.abc import Iterable
from typing import Optional

from .models import FileBox


def hit_test(boxes: Iterable[FileBox], x: float, y: float) -> Optional[FileBox]:
    """Return the first box containing ``(x, y)``, or None."""
    for box in boxes:
        if box.rect.contains(x, y):
            return box
    return None
