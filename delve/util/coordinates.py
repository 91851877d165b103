from __future__ import annotations

import math
from dataclasses import dataclass

from delve.types import LayoutCoord, LayoutPos

"""Rectangle geometry and tile-unit quantization for layout coordinates."""


def snap_to_unit(value: LayoutCoord, unit: int) -> float:
    """Round ``value`` to the nearest multiple of ``unit``.

    Halfway values round up, so the result never depends on banker's rounding.
    """
    return math.floor(value / unit + 0.5) * unit


def floor_to_unit(value: LayoutCoord, unit: int) -> float:
    """Round ``value`` down to a multiple of ``unit``."""
    return math.floor(value / unit) * unit


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in layout coordinates.

    ``x``/``y`` are the top-left corner. Instances are immutable; every
    transformation returns a new Rect.
    """

    x: LayoutCoord
    y: LayoutCoord
    width: LayoutCoord
    height: LayoutCoord

    @classmethod
    def from_bounds(
        cls, left: LayoutCoord, top: LayoutCoord, right: LayoutCoord, bottom: LayoutCoord
    ) -> Rect:
        """Create a Rect from edge coordinates (left, top, right, bottom)."""
        return cls(left, top, right - left, bottom - top)

    @property
    def left(self) -> LayoutCoord:
        return self.x

    @property
    def right(self) -> LayoutCoord:
        return self.x + self.width

    @property
    def top(self) -> LayoutCoord:
        return self.y

    @property
    def bottom(self) -> LayoutCoord:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def center(self) -> LayoutPos:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def is_large_enough(self, min_width: float, min_height: float) -> bool:
        return self.width >= min_width and self.height >= min_height

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.width, self.height))

    def quantized(self, unit: int) -> Rect:
        """Snap position and size to the nearest multiple of ``unit``.

        Width and height never collapse below a single unit.
        """
        return Rect(
            snap_to_unit(self.x, unit),
            snap_to_unit(self.y, unit),
            max(float(unit), snap_to_unit(self.width, unit)),
            max(float(unit), snap_to_unit(self.height, unit)),
        )

    def union(self, other: Rect) -> Rect:
        """Return the bounding box covering both rectangles."""
        return Rect.from_bounds(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def contains_point(self, x: LayoutCoord, y: LayoutCoord) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def contains_rect(self, other: Rect) -> bool:
        return (
            self.left <= other.left
            and other.right <= self.right
            and self.top <= other.top
            and other.bottom <= self.bottom
        )

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap with positive area.

        Rectangles that only touch along an edge do not intersect.
        """
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def is_adjacent(self, other: Rect) -> bool:
        """True if the two rectangles share one full edge."""
        if self.y == other.y and self.height == other.height:
            return self.right == other.left or other.right == self.left
        if self.x == other.x and self.width == other.width:
            return self.bottom == other.top or other.bottom == self.top
        return False

    def __repr__(self) -> str:
        return (
            f"Rect(x={self.x:g}, y={self.y:g}, "
            f"width={self.width:g}, height={self.height:g})"
        )
