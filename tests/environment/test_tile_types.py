import numpy as np
import pytest

from delve.environment import tile_types
from delve.environment.tile_types import TileTypeID


def test_get_glyph_map():
    ids = np.array([[TileTypeID.EMPTY, TileTypeID.FLOOR, TileTypeID.WALL, TileTypeID.DOOR]])
    assert tile_types.get_glyph_map(ids).tolist() == [[" ", ".", "#", "+"]]


def test_get_tile_type_data_by_id():
    floor = tile_types.get_tile_type_data_by_id(TileTypeID.FLOOR)
    assert floor["glyph"] == "."
    with pytest.raises(IndexError):
        tile_types.get_tile_type_data_by_id(99)


def test_all_tile_types_have_registered_data() -> None:
    """Ensure every TileTypeID enum value has corresponding data registered."""
    for tile_id in TileTypeID:
        data = tile_types.get_tile_type_data_by_id(tile_id)
        assert data is not None, f"No data registered for {tile_id.name}"


def test_tile_type_id_works_as_numpy_index() -> None:
    """Ensure IntEnum values work directly with numpy arrays."""
    tiles = np.zeros((3, 3), dtype=np.uint8)
    tiles[1, 1] = TileTypeID.WALL  # Should work without casting
    assert tiles[1, 1] == TileTypeID.WALL


def test_get_tile_type_name_by_id() -> None:
    assert tile_types.get_tile_type_name_by_id(TileTypeID.DOOR) == "Door"
    assert tile_types.get_tile_type_name_by_id(42) == "Unknown Tile (ID: 42)"


def test_register_out_of_order_is_rejected() -> None:
    data = tile_types.make_tile_type_data(display_name="Dup", glyph="?")
    with pytest.raises(ValueError, match="out of order"):
        tile_types.register_tile_type(TileTypeID.FLOOR, data)
