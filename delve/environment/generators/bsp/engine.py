"""Recursive binary space partition engine.

``build_tree`` turns one rectangle into a tree of rooms:

1. The region is quantized to the tile unit and given a floor-filled grid.
2. Regions smaller than the minimum room size become leaves.
3. The split policy decides whether the region splits (always near the root,
   at random further down).
4. A split picks an axis and a tile-aligned split line, builds both children
   one level deeper, stamps the wall seam on this node's grid and places one
   door somewhere in the split region.

``BSPGenerator`` wraps a full build: it seeds a fresh random stream, builds
the tree, runs the small-room merge pass once, and collects the rooms.

All randomness flows through the ``rng`` argument. Given the same random
sequence and inputs, two builds produce identical trees.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from delve import config
from delve.environment.generators.base import BaseLayoutGenerator, GeneratedLayout
from delve.events import (
    DepthLimitReachedEvent,
    DoorPlacedEvent,
    EventBus,
    LeafCreatedEvent,
    NodeSplitEvent,
    get_event_bus,
)
from delve.types import RandomSeed
from delve.util.coordinates import Rect
from delve.util.rng import RNG, RNGProvider

from .collector import collect_leaves, collect_rooms_with_doors
from .doors import place_door
from .errors import InvalidParametersError
from .merge import merge_small_rooms
from .node import PartitionNode, SplitRecord
from .policy import choose_split, should_split
from .raster import allocate_tile_grid, mark_seam, rasterize_layout, stamp_door
from .settings import PartitionSettings
from .stats import GenerationStats

logger = logging.getLogger(__name__)


def validate_parameters(space: Rect, min_width: float, min_height: float) -> None:
    """Reject inputs the engine cannot partition.

    Raises:
        InvalidParametersError: If any dimension is non-finite or not positive.
    """
    if not space.is_finite():
        raise InvalidParametersError(f"Initial space must be finite, got {space}")
    if space.width <= 0 or space.height <= 0:
        raise InvalidParametersError(
            f"Initial space must have positive width and height, got {space}"
        )
    for name, value in (("min_width", min_width), ("min_height", min_height)):
        if not math.isfinite(value) or value <= 0:
            raise InvalidParametersError(f"{name} must be a positive number, got {value}")

    if min_width > space.width or min_height > space.height:
        logger.info(
            f"Minimum room size {min_width}x{min_height} exceeds {space}; "
            "the layout will be a single room"
        )


def build_tree(
    space: Rect,
    min_width: float,
    min_height: float,
    rng: RNG,
    settings: PartitionSettings | None = None,
    event_bus: EventBus | None = None,
) -> PartitionNode:
    """Partition ``space`` into a tree of rooms.

    Args:
        space: The initial region. Quantized to the tile unit before use.
        min_width: Minimum room width. Narrower regions are never split.
        min_height: Minimum room height. Shorter regions are never split.
        rng: Random source for every decision of this build.
        settings: Tunables; defaults to ``PartitionSettings()``.
        event_bus: Receives trace events; defaults to the global bus.

    Returns:
        The root node. The merge pass has not run on it.

    Raises:
        InvalidParametersError: If the inputs are unusable.
        InvalidLayoutError: If a door could not be placed.
    """
    validate_parameters(space, min_width, min_height)
    settings = settings if settings is not None else PartitionSettings()
    bus = event_bus if event_bus is not None else get_event_bus()
    return _build_node(space, min_width, min_height, 0, rng, settings, bus)


def _build_node(
    space: Rect,
    min_width: float,
    min_height: float,
    split_depth: int,
    rng: RNG,
    settings: PartitionSettings,
    bus: EventBus,
) -> PartitionNode:
    unit = settings.tile_unit
    rect = space.quantized(unit)
    tiles = allocate_tile_grid(rect, unit)

    if not rect.is_large_enough(min_width, min_height):
        return _make_leaf(rect, tiles, split_depth, "too_small", bus)

    if split_depth >= settings.max_split_depth:
        logger.warning(
            f"Split depth cap {settings.max_split_depth} reached at {rect}; "
            "check the minimum room size"
        )
        bus.publish(DepthLimitReachedEvent(rect=rect, depth=split_depth))
        return _make_leaf(rect, tiles, split_depth, "depth_limit", bus)

    if not should_split(split_depth, rect, rng, settings):
        return _make_leaf(rect, tiles, split_depth, "no_split", bus)

    plan = choose_split(rect, min_width, min_height, rng, settings)
    if plan is None:
        return _make_leaf(rect, tiles, split_depth, "no_split_line", bus)

    logger.debug(
        f"Split {rect} {plan.axis}ly at {plan.split_at:g} (depth {split_depth})"
    )
    bus.publish(
        NodeSplitEvent(
            rect=rect, depth=split_depth, axis=plan.axis, split_at=plan.split_at
        )
    )

    args = (min_width, min_height, split_depth + 1, rng, settings, bus)
    left = _build_node(plan.first, *args)
    right = _build_node(plan.second, *args)

    node = PartitionNode(
        rect=rect,
        tiles=tiles,
        depth=split_depth,
        split=SplitRecord(axis=plan.axis, split_at=plan.split_at),
        left=left,
        right=right,
    )
    mark_seam(node, unit, bus)

    door = place_door(left.rect, right.rect, rng, unit)
    node.doors.append(door)
    stamp_door(node, door, unit)
    bus.publish(DoorPlacedEvent(position=door, depth=split_depth))
    return node


def _make_leaf(
    rect: Rect,
    tiles: np.ndarray,
    split_depth: int,
    reason: str,
    bus: EventBus,
) -> PartitionNode:
    bus.publish(LeafCreatedEvent(rect=rect, depth=split_depth, reason=reason))
    return PartitionNode(rect=rect, tiles=tiles, depth=split_depth)


class BSPGenerator(BaseLayoutGenerator):
    """Generates a dungeon layout by binary space partitioning.

    Every call to ``generate()`` builds an independent tree from a freshly
    seeded random stream, so the same seed always yields the same layout.

    Example:
        generator = BSPGenerator(Rect(0, 0, 1024, 1024), 128, 128, seed=42)
        layout = generator.generate()
        for room in layout.rooms:
            print(room.to_dict())
    """

    RNG_DOMAIN = "map.bsp"

    def __init__(
        self,
        space: Rect,
        min_room_width: float,
        min_room_height: float,
        seed: RandomSeed = config.RANDOM_SEED,
        settings: PartitionSettings | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            space: The region to partition.
            min_room_width: Minimum room width.
            min_room_height: Minimum room height.
            seed: Master seed. None draws from system entropy.
            settings: Tunables; defaults to ``PartitionSettings()``.
            event_bus: Receives trace events; defaults to the global bus.

        Raises:
            InvalidParametersError: If the inputs are unusable.
        """
        validate_parameters(space, min_room_width, min_room_height)
        super().__init__(space)
        self.min_room_width = min_room_width
        self.min_room_height = min_room_height
        self.seed = seed
        self.settings = settings if settings is not None else PartitionSettings()
        self.event_bus = event_bus

    def build(self, rng: RNG | None = None) -> tuple[PartitionNode, GenerationStats]:
        """Build and merge a partition tree.

        Args:
            rng: Random source. Defaults to a fresh stream seeded from ``seed``.

        Returns:
            The root node and the build's counters.
        """
        if rng is None:
            rng = RNGProvider(self.seed).get(self.RNG_DOMAIN)
        bus = self.event_bus if self.event_bus is not None else get_event_bus()

        stats = GenerationStats()
        stats.attach(bus)
        try:
            root = build_tree(
                self.space,
                self.min_room_width,
                self.min_room_height,
                rng,
                self.settings,
                bus,
            )
            merge_small_rooms(
                root,
                self.min_room_width,
                self.min_room_height,
                rng,
                self.settings,
                bus,
            )
        finally:
            stats.detach(bus)
        return root, stats

    def generate(self) -> GeneratedLayout:
        """Build a layout and collect its rooms.

        Returns:
            GeneratedLayout with the tree, the pre-order room list and the
            composed tile grid.
        """
        root, stats = self.build()
        rooms = collect_rooms_with_doors(root)
        leaves = [node.rect for node in collect_leaves(root)]

        logger.info(
            f"Generated BSP layout over {root.rect}: {len(leaves)} rooms, "
            f"{stats.doors} doors, {stats.merges} merges, depth {stats.max_depth}"
        )
        return GeneratedLayout(
            root=root,
            rooms=rooms,
            tiles=rasterize_layout(root, self.settings.tile_unit),
            stats=stats,
            leaves=leaves,
        )
