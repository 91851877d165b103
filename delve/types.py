from __future__ import annotations

from typing import Literal, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

# Layout coordinates are continuous; after quantization they are always
# multiples of the tile unit.
LayoutCoord: TypeAlias = float  # Example: x=128.0
LayoutPos: TypeAlias = tuple[LayoutCoord, LayoutCoord]  # Example: (128.0, 64.0)

# Tile coordinates index into a node's tile grid.
TileCoord: TypeAlias = int  # Always integer tile position
TilePos: TypeAlias = tuple[TileCoord, TileCoord]  # Example: (2, 0) = third column, top row

# Split axis. A horizontal split divides a region along a Y line,
# a vertical split along an X line.
SplitAxis: TypeAlias = Literal["horizontal", "vertical"]

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "burrito1".
RandomSeed = int | str | None
