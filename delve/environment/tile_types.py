"""
Tile type system for layout tile grids using the flyweight pattern.

This module defines:
- `TileTypeID`: The integer ID of each tile type. Tile grids are NumPy arrays
  of these IDs, never of full tile records.
- `TileTypeData`: The intrinsic properties of a *type* of tile (display
  name, debug glyph). These are the flyweight objects.
- A registration system for `TileTypeData` instances. Registration order
  must match the `TileTypeID` values, which is checked at import time.
- Helper functions to get maps of specific properties (e.g., a glyph map for
  text dumps) from a `TileTypeID` map with vectorized lookups.
"""

from enum import IntEnum

import numpy as np


class TileTypeID(IntEnum):
    """Cell classification stored in every tile grid."""

    EMPTY = 0  # Outside any room
    FLOOR = 1
    WALL = 2
    DOOR = 3


# Defines the intrinsic data for a *type* of tile (flyweight).
TileTypeData = np.dtype(
    [
        ("display_name", "U32"),  # Human-readable name (Unicode string, max 32 chars)
        ("glyph", "U1"),  # Single character used by text dumps
    ]
)

# --- Tile Type Registration ---

# The index of a tile type in this list is its TileTypeID.
_registered_tile_type_data_list: list[np.ndarray] = []


def register_tile_type(tile_type_id: TileTypeID, tile_type_data: np.ndarray) -> None:
    """
    Registers the TileTypeData for a TileTypeID.

    Tile types must be registered in ID order so that a plain list index lookup
    maps an ID to its data.

    Raises:
        ValueError: If the ID is not the next one expected.
    """
    expected = len(_registered_tile_type_data_list)
    if tile_type_id != expected:
        raise ValueError(
            f"Tile type {tile_type_id.name} registered out of order: "
            f"expected ID {expected}, got {int(tile_type_id)}."
        )
    _registered_tile_type_data_list.append(tile_type_data)


def make_tile_type_data(
    *,  # Forces keyword arguments - prevents bugs from wrong parameter order
    display_name: str,
    glyph: str,
) -> np.ndarray:  # Returns an instance of TileTypeData
    """
    Helper function to create a TileTypeData instance.

    Args:
        display_name: Human-readable name (e.g., "Wall", "Door")
        glyph: Single character shown for this tile in text dumps.
    """
    return np.array((display_name, glyph), dtype=TileTypeData)


register_tile_type(
    TileTypeID.EMPTY,
    make_tile_type_data(display_name="Empty", glyph=" "),
)
register_tile_type(
    TileTypeID.FLOOR,
    make_tile_type_data(display_name="Floor", glyph="."),
)
register_tile_type(
    TileTypeID.WALL,
    make_tile_type_data(display_name="Wall", glyph="#"),
)
register_tile_type(
    TileTypeID.DOOR,
    make_tile_type_data(display_name="Door", glyph="+"),
)

# --- Pre-calculated Property Arrays for Efficient Lookups ---
# Built after all tile types have been registered. They allow fast, vectorized
# conversion from a map of TileTypeIDs to a map of a single property.

_tile_type_properties_display_name = np.array(
    [t["display_name"] for t in _registered_tile_type_data_list], dtype="U32"
)
_tile_type_properties_glyph = np.array(
    [t["glyph"] for t in _registered_tile_type_data_list], dtype="U1"
)


def get_glyph_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """Converts a map of TileTypeIDs into a map of single-character glyphs."""
    return _tile_type_properties_glyph[tile_type_ids_map]


def get_tile_type_data_by_id(tile_type_id: int) -> np.ndarray:  # Returns TileTypeData
    """
    Retrieves the full TileTypeData instance for a given TileTypeID.
    """
    if 0 <= tile_type_id < len(_registered_tile_type_data_list):
        return _registered_tile_type_data_list[tile_type_id]
    raise IndexError(
        f"Invalid TileTypeID: {tile_type_id}. "
        f"Registered IDs are 0 to {len(_registered_tile_type_data_list) - 1}."
    )


def get_tile_type_name_by_id(tile_type_id: int) -> str:
    """
    Get the human-readable name of a tile type by its ID.

    Args:
        tile_type_id: The ID of the tile type

    Returns:
        The name of the tile type in a human-readable format (e.g., "Wall", "Floor")
    """
    if 0 <= tile_type_id < len(_tile_type_properties_display_name):
        return str(_tile_type_properties_display_name[tile_type_id])
    return f"Unknown Tile (ID: {tile_type_id})"
