"""Small-room merge pass.

Runs once over a finished tree, bottom-up. Two sibling leaves below the merge
depth threshold are folded back into their parent when both are smaller than
the minimum room size, they share a full edge, and a coin flip agrees. This is
a best-effort cleanup of over-fragmented corners; undersized rooms may remain.
"""

from __future__ import annotations

import logging

from delve.events import EventBus, RoomsMergedEvent, get_event_bus
from delve.util.rng import RNG

from .node import PartitionNode
from .raster import allocate_tile_grid
from .settings import PartitionSettings

logger = logging.getLogger(__name__)


def can_merge_children(
    node: PartitionNode,
    min_width: float,
    min_height: float,
    settings: PartitionSettings,
) -> bool:
    """Check the deterministic merge conditions for ``node``'s children."""
    left, right = node.left, node.right
    if left is None or right is None:
        return False
    if not (left.is_leaf and right.is_leaf):
        return False
    if min(left.depth, right.depth) <= settings.merge_depth_threshold:
        return False
    if left.rect.is_large_enough(min_width, min_height):
        return False
    if right.rect.is_large_enough(min_width, min_height):
        return False
    return left.rect.is_adjacent(right.rect)


def merge_small_rooms(
    root: PartitionNode,
    min_width: float,
    min_height: float,
    rng: RNG,
    settings: PartitionSettings | None = None,
    event_bus: EventBus | None = None,
) -> int:
    """Merge undersized sibling leaves throughout the tree.

    Draws one random number per sibling pair that passes the deterministic
    conditions, so the draw sequence depends only on the tree.

    Returns:
        The number of merges performed.
    """
    settings = settings if settings is not None else PartitionSettings()
    bus = event_bus if event_bus is not None else get_event_bus()
    return _merge_subtree(root, min_width, min_height, rng, settings, bus)


def _merge_subtree(
    node: PartitionNode,
    min_width: float,
    min_height: float,
    rng: RNG,
    settings: PartitionSettings,
    bus: EventBus,
) -> int:
    merged = 0
    for child in node.children():
        merged += _merge_subtree(child, min_width, min_height, rng, settings, bus)

    if not can_merge_children(node, min_width, min_height, settings):
        return merged
    if rng.random() >= settings.merge_probability:
        return merged

    assert node.left is not None and node.right is not None
    node.rect = node.left.rect.union(node.right.rect)
    node.left = None
    node.right = None
    node.split = None
    node.doors.clear()
    node.tiles = allocate_tile_grid(node.rect, settings.tile_unit)

    logger.debug(f"Merged undersized rooms into {node.rect} at depth {node.depth}")
    bus.publish(RoomsMergedEvent(rect=node.rect, depth=node.depth))
    return merged + 1
