"""Layout quality measures: how square the boxes are, how well they cover."""

import math
from collections.abc import Sequence

import numpy as np

from ..geometry import Rect
from .models import FileBox


def aspect_ratio_summary(boxes: Sequence[FileBox]) -> dict[str, float]:
    """
    Summarize aspect ratios (long/short side) of the positive-area boxes.

    Returns:
        Dict with ``count``, ``mean``, ``median``, ``p90`` and ``max``.
        All zeros when no box has positive area.
    """
    ratios = np.array([b.rect.aspect_ratio for b in boxes if b.rect.area > 0], dtype=float)
    if ratios.size == 0:
        return {"count": 0, "mean": 0.0, "median": 0.0, "p90": 0.0, "max": 0.0}

    return {
        "count": int(ratios.size),
        "mean": float(np.mean(ratios)),
        "median": float(np.median(ratios)),
        "p90": float(np.percentile(ratios, 90)),
        "max": float(np.max(ratios)),
    }


def coverage_error(boxes: Sequence[FileBox], bounds: Rect) -> float:
    """Relative difference between the boxes' total area and ``bounds``."""
    total = math.fsum(b.rect.area for b in boxes)
    if bounds.area == 0:
        return 0.0 if total == 0 else math.inf
    return abs(total - bounds.area) / bounds.area
