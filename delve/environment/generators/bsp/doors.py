"""Door placement between sibling rooms."""

from __future__ import annotations

from delve.types import LayoutPos
from delve.util.coordinates import Rect, floor_to_unit
from delve.util.rng import RNG

from .errors import InvalidLayoutError


def place_door(first: Rect, second: Rect, rng: RNG, unit: int) -> LayoutPos:
    """Pick a door position for the split that produced ``first`` and ``second``.

    The door is a uniformly random point inside the bounding box of both
    rooms, with each coordinate rounded down to the tile unit. Consumes two
    random draws (x, then y).

    Raises:
        InvalidLayoutError: If the bounding box has no area.
    """
    bounds = first.union(second)
    if not bounds.is_finite() or bounds.width <= 0 or bounds.height <= 0:
        raise InvalidLayoutError(
            f"Cannot place a door between {first} and {second}: "
            f"bounding box {bounds} is degenerate"
        )

    x = bounds.left + rng.random() * bounds.width
    y = bounds.top + rng.random() * bounds.height
    return (floor_to_unit(x, unit), floor_to_unit(y, unit))
