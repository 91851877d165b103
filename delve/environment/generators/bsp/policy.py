"""Split decision policy for the partition engine.

The policy shapes the dungeon:
- The outermost regions always split (depth below ``forced_split_depth``)
- Deeper regions split at random, with a chance that decays with depth
- Middling room areas are less likely to split than tiny or huge ones
- Regions with extreme aspect ratios are never split at random depths
- Split lines keep both halves at least the minimum room size and land on
  tile-unit boundaries
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from delve.types import SplitAxis
from delve.util.coordinates import Rect, snap_to_unit
from delve.util.rng import RNG

from .settings import PartitionSettings


@dataclass(frozen=True)
class SplitPlan:
    """A chosen split of one region into two.

    Attributes:
        axis: Split axis.
        split_at: Absolute coordinate of the split line.
        first: Top (horizontal) or left (vertical) sub-region.
        second: Bottom (horizontal) or right (vertical) sub-region.
    """

    axis: SplitAxis
    split_at: float
    first: Rect
    second: Rect


def is_valid_aspect_ratio(space: Rect, settings: PartitionSettings) -> bool:
    if space.height <= 0:
        return False
    return settings.min_aspect_ratio <= space.aspect_ratio <= settings.max_aspect_ratio


def split_chance(space: Rect, split_depth: int, settings: PartitionSettings) -> float:
    """Probability in [0, 1] that a region at ``split_depth`` splits.

    The product of a size factor and a depth decay factor. The size factor is
    1.0 at or below the minimum area and at or above the maximum area, and
    falls off linearly in between.
    """
    area = space.area
    min_area = settings.min_split_area
    max_area = settings.max_split_area

    if area <= min_area or area >= max_area:
        size_factor = 1.0
    else:
        size_factor = min(1.0, max(0.0, (max_area - area) / (max_area - min_area)))

    decay_factor = max(settings.depth_decay_floor, settings.depth_decay_base**split_depth)
    return size_factor * decay_factor


def should_split(
    split_depth: int, space: Rect, rng: RNG, settings: PartitionSettings
) -> bool:
    """Decide whether a region that is large enough should split.

    Consumes one random draw at depths at or beyond the forced split depth,
    none below it.
    """
    if split_depth < settings.forced_split_depth:
        return True
    # Draw first so the random sequence does not depend on the region's shape.
    roll = rng.random()
    return roll < split_chance(space, split_depth, settings) and is_valid_aspect_ratio(
        space, settings
    )


def split_offset_range(
    dimension: float, min_dimension: float, unit: int
) -> tuple[float, float] | None:
    """Tile-aligned offsets of a split line from the region's near edge.

    Every offset in the returned range lies on a tile boundary strictly inside
    the region and leaves both halves at least ``min_dimension`` long. Returns
    None if no such line exists.
    """
    low = max(float(unit), math.ceil(min_dimension / unit) * unit)
    high = min(dimension - unit, math.floor((dimension - min_dimension) / unit) * unit)
    if low > high:
        return None
    return (low, high)


def choose_split(
    space: Rect,
    min_width: float,
    min_height: float,
    rng: RNG,
    settings: PartitionSettings,
) -> SplitPlan | None:
    """Pick a split axis and line for ``space``, or None if it cannot split.

    The axis is drawn 50/50. If the drawn axis has no admissible split line
    the other axis is tried before giving up. The line is drawn uniformly
    from the admissible range and snapped to the nearest tile boundary
    within it, so both halves meet the minimum room size.
    """
    unit = settings.tile_unit
    first_axis: SplitAxis = "horizontal" if rng.random() < 0.5 else "vertical"
    second_axis: SplitAxis = "vertical" if first_axis == "horizontal" else "horizontal"

    for axis in (first_axis, second_axis):
        if axis == "horizontal":
            dimension, min_dimension = space.height, min_height
        else:
            dimension, min_dimension = space.width, min_width

        offsets = split_offset_range(dimension, min_dimension, unit)
        if offsets is None:
            continue

        low, high = offsets
        offset = min(max(snap_to_unit(rng.uniform(low, high), unit), low), high)
        return _make_plan(space, axis, offset)

    return None


def _make_plan(space: Rect, axis: SplitAxis, offset: float) -> SplitPlan:
    if axis == "horizontal":
        split_at = space.y + offset
        first = Rect(space.x, space.y, space.width, offset)
        second = Rect(space.x, split_at, space.width, space.height - offset)
    else:
        split_at = space.x + offset
        first = Rect(space.x, space.y, offset, space.height)
        second = Rect(split_at, space.y, space.width - offset, space.height)
    return SplitPlan(axis=axis, split_at=split_at, first=first, second=second)
