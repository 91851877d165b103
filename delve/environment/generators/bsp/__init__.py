"""Binary space partition layout generation.

Example usage:
    from delve.environment.generators.bsp import BSPGenerator
    from delve.util.coordinates import Rect

    generator = BSPGenerator(Rect(0, 0, 1024, 1024), 128, 128, seed=42)
    layout = generator.generate()

A build can also be driven step by step with an explicit random source:
    rng = random.Random(7)
    root = build_tree(Rect(0, 0, 512, 512), 64, 64, rng)
    merge_small_rooms(root, 64, 64, rng)
    rooms = collect_rooms_with_doors(root)
"""

from .collector import (
    RoomWithDoors,
    collect_leaves,
    collect_rooms,
    collect_rooms_with_doors,
    iter_nodes,
)
from .doors import place_door
from .engine import BSPGenerator, build_tree, validate_parameters
from .errors import InvalidLayoutError, InvalidParametersError, LayoutGenerationError
from .merge import merge_small_rooms
from .node import PartitionNode, SplitRecord
from .policy import SplitPlan, choose_split, should_split, split_chance
from .raster import glyph_legend, mark_seam, rasterize_layout, to_glyph_lines
from .settings import PartitionSettings
from .stats import GenerationStats

__all__ = [
    "BSPGenerator",
    "GenerationStats",
    "InvalidLayoutError",
    "InvalidParametersError",
    "LayoutGenerationError",
    "PartitionNode",
    "PartitionSettings",
    "RoomWithDoors",
    "SplitPlan",
    "SplitRecord",
    "build_tree",
    "choose_split",
    "collect_leaves",
    "collect_rooms",
    "collect_rooms_with_doors",
    "glyph_legend",
    "iter_nodes",
    "mark_seam",
    "merge_small_rooms",
    "place_door",
    "rasterize_layout",
    "should_split",
    "split_chance",
    "to_glyph_lines",
    "validate_parameters",
]
