"""Tile rasterization for partition nodes.

Every node carries a tile grid sized from its rectangle and the tile unit.
Grids are NumPy arrays of TileTypeID values indexed ``[x, y]`` and stored in
Fortran order, matching the layout of full map arrays.

This module handles:
- Allocating floor-filled grids for new nodes
- Stamping the wall seam between two siblings onto their parent's grid
- Stamping doors
- Composing all node grids into one layout-sized grid
- Plain-text glyph dumps and their legend for debugging
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from delve.environment import tile_types
from delve.environment.tile_types import TileTypeID
from delve.events import EventBus, WallTileSkippedEvent, get_event_bus
from delve.types import LayoutCoord, LayoutPos, TilePos
from delve.util.coordinates import Rect

from .collector import iter_nodes

if TYPE_CHECKING:
    from .node import PartitionNode

logger = logging.getLogger(__name__)


def grid_shape(rect: Rect, unit: int) -> tuple[int, int]:
    """Return (tiles_x, tiles_y) for a rectangle, each at least 1."""
    return (
        max(1, math.ceil(rect.width / unit)),
        max(1, math.ceil(rect.height / unit)),
    )


def allocate_tile_grid(
    rect: Rect, unit: int, fill_tile: TileTypeID = TileTypeID.FLOOR
) -> np.ndarray:
    """Create a tile grid covering ``rect``, filled with ``fill_tile``."""
    return np.full(grid_shape(rect, unit), fill_value=fill_tile, dtype=np.uint8, order="F")


def tile_index(rect: Rect, x: LayoutCoord, y: LayoutCoord, unit: int) -> TilePos:
    """Convert an absolute position to an index into ``rect``'s grid.

    The result may lie outside the grid; callers check with ``in_grid``.
    """
    return (math.floor((x - rect.x) / unit), math.floor((y - rect.y) / unit))


def in_grid(tiles: np.ndarray, tx: int, ty: int) -> bool:
    return 0 <= tx < tiles.shape[0] and 0 <= ty < tiles.shape[1]


def mark_seam(
    node: PartitionNode, unit: int, event_bus: EventBus | None = None
) -> int:
    """Stamp the wall between ``node``'s two children onto ``node``'s grid.

    For a horizontal split the walls run along the row immediately above the
    split line, across the full width. For a vertical split they run down the
    column immediately left of the split line, across the full height.

    Tiles whose index falls outside the grid are skipped.

    Returns:
        The number of wall tiles stamped.
    """
    if node.split is None:
        raise ValueError(f"Cannot mark a seam on unsplit node {node!r}")

    bus = event_bus if event_bus is not None else get_event_bus()
    rect = node.rect
    tiles_x, tiles_y = grid_shape(rect, unit)
    seam_line = node.split.split_at - unit

    if node.split.axis == "horizontal":
        positions = [(rect.x + i * unit, seam_line) for i in range(tiles_x)]
    else:
        positions = [(seam_line, rect.y + i * unit) for i in range(tiles_y)]

    marked = 0
    for x, y in positions:
        tx, ty = tile_index(rect, x, y, unit)
        if not in_grid(node.tiles, tx, ty):
            logger.debug(f"Seam tile ({tx}, {ty}) outside grid of {rect}; skipped")
            bus.publish(WallTileSkippedEvent(rect=rect, tile=(tx, ty)))
            continue
        node.tiles[tx, ty] = TileTypeID.WALL
        marked += 1
    return marked


def stamp_door(node: PartitionNode, door: LayoutPos, unit: int) -> bool:
    """Mark the tile under ``door`` as a door. Returns False if off-grid."""
    tx, ty = tile_index(node.rect, door[0], door[1], unit)
    if not in_grid(node.tiles, tx, ty):
        logger.debug(f"Door {door} outside grid of {node.rect}; not stamped")
        return False
    node.tiles[tx, ty] = TileTypeID.DOOR
    return True


def rasterize_layout(root: PartitionNode, unit: int) -> np.ndarray:
    """Compose every node's grid into one grid covering ``root.rect``.

    Cells outside any room stay EMPTY. Leaf grids are pasted first, then the
    seam walls of every interior node, then every door, so doors always win
    over the walls they sit on.
    """
    layout = allocate_tile_grid(root.rect, unit, fill_tile=TileTypeID.EMPTY)
    nodes = list(iter_nodes(root))

    for node in nodes:
        if node.is_leaf:
            _paste(layout, root.rect, node, unit, mask=None)

    for tile in (TileTypeID.WALL, TileTypeID.DOOR):
        for node in nodes:
            if node.is_interior:
                _paste(layout, root.rect, node, unit, mask=node.tiles == tile)

    return layout


def _paste(
    layout: np.ndarray,
    origin: Rect,
    node: PartitionNode,
    unit: int,
    mask: np.ndarray | None,
) -> None:
    ox, oy = tile_index(origin, node.rect.x, node.rect.y, unit)
    w, h = node.tiles.shape
    # Clip against the layout in case a node pokes past the root.
    x0, y0 = max(ox, 0), max(oy, 0)
    x1, y1 = min(ox + w, layout.shape[0]), min(oy + h, layout.shape[1])
    if x0 >= x1 or y0 >= y1:
        return
    src = node.tiles[x0 - ox : x1 - ox, y0 - oy : y1 - oy]
    dst = layout[x0:x1, y0:y1]
    if mask is None:
        dst[...] = src
    else:
        sub_mask = mask[x0 - ox : x1 - ox, y0 - oy : y1 - oy]
        dst[sub_mask] = src[sub_mask]


def to_glyph_lines(tiles: np.ndarray) -> list[str]:
    """Render a tile grid as text, one string per row."""
    glyphs = tile_types.get_glyph_map(tiles)
    return ["".join(glyphs[:, y]) for y in range(tiles.shape[1])]


def glyph_legend(tiles: np.ndarray) -> str:
    """Describe the glyphs that appear in ``tiles``, in TileTypeID order."""
    entries = []
    for tile_id in np.unique(tiles):
        glyph = tile_types.get_tile_type_data_by_id(int(tile_id))["glyph"]
        entries.append(f"'{glyph}' {tile_types.get_tile_type_name_by_id(int(tile_id))}")
    return "  ".join(entries)
