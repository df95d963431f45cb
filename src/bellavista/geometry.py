"""Axis-aligned rectangles and the proportional split primitive.

Coordinates follow screen conventions: ``x`` grows to the right, ``y`` grows
downwards, ``(x0, y0)`` is the top-left corner.
"""

import math
from dataclasses import dataclass

# Height/width ratio at which ``divide_rect`` switches from a vertical cut to
# a horizontal one.
SPLIT_ASPECT_THRESHOLD = 1.2


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle ``(x0, y0)-(x1, y1)`` with ``x1 >= x0``, ``y1 >= y0``.

    Zero-width and zero-height rectangles are legal.
    """

    x0: float
    y0: float
    x1: float
    y1: float

    def __post_init__(self) -> None:
        if self.x1 < self.x0 or self.y1 < self.y0:
            raise ValueError(
                f"Rect corners out of order: ({self.x0}, {self.y0})-({self.x1}, {self.y1})"
            )

    @classmethod
    def from_size(cls, width: float, height: float) -> "Rect":
        """Rectangle anchored at the origin."""
        return cls(0.0, 0.0, width, height)

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        """Long side over short side.

        ``1.0`` for a point-like rect, ``inf`` when exactly one side is zero.
        """
        long_side = max(self.width, self.height)
        short_side = min(self.width, self.height)
        if short_side == 0:
            return 1.0 if long_side == 0 else math.inf
        return long_side / short_side

    def contains(self, x: float, y: float) -> bool:
        """Half-open point test, so adjacent rects never both claim a point."""
        return self.x0 <= x < self.x1 and self.y0 <= y < self.y1

    def contains_rect(self, other: "Rect", tol: float = 1e-9) -> bool:
        return (
            other.x0 >= self.x0 - tol
            and other.y0 >= self.y0 - tol
            and other.x1 <= self.x1 + tol
            and other.y1 <= self.y1 + tol
        )

    def intersection_area(self, other: "Rect") -> float:
        dx = min(self.x1, other.x1) - max(self.x0, other.x0)
        dy = min(self.y1, other.y1) - max(self.y0, other.y0)
        if dx <= 0 or dy <= 0:
            return 0.0
        return dx * dy

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x0, self.y0, self.x1, self.y1)


def divide_rect(source: Rect, ratio: float) -> tuple[Rect, Rect]:
    """Split ``source`` in two, the first part holding ``ratio`` of it.

    Rects whose height/width ratio is below ``SPLIT_ASPECT_THRESHOLD`` are cut
    by a vertical line (left, right); taller ones by a horizontal line
    (top, bottom). A zero-width source counts as tall.

    Raises:
        ValueError: If ``ratio`` is outside ``[0, 1]``.
    """
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"Ratio was out of bounds: {ratio}")

    tall = source.width == 0 or source.height / source.width >= SPLIT_ASPECT_THRESHOLD

    if not tall:
        cut = min(source.x0 + source.width * ratio, source.x1)
        return (
            Rect(source.x0, source.y0, cut, source.y1),
            Rect(cut, source.y0, source.x1, source.y1),
        )

    cut = min(source.y0 + source.height * ratio, source.y1)
    return (
        Rect(source.x0, source.y0, source.x1, cut),
        Rect(source.x0, cut, source.x1, source.y1),
    )
