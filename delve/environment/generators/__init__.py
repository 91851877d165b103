"""Layout generation algorithms for Delve.

This package provides:
- BSPGenerator: Recursive binary space partitioning into rooms joined by doors

Lower-level building blocks (the tree builder, merge pass and collectors) live
in the ``bsp`` subpackage for callers that want to drive a build step by step.
"""

from .base import BaseLayoutGenerator, GeneratedLayout
from .bsp import (
    BSPGenerator,
    InvalidLayoutError,
    InvalidParametersError,
    LayoutGenerationError,
    PartitionNode,
    PartitionSettings,
    RoomWithDoors,
    build_tree,
    collect_rooms,
    collect_rooms_with_doors,
)

__all__ = [
    "BSPGenerator",
    "BaseLayoutGenerator",
    "GeneratedLayout",
    "InvalidLayoutError",
    "InvalidParametersError",
    "LayoutGenerationError",
    "PartitionNode",
    "PartitionSettings",
    "RoomWithDoors",
    "build_tree",
    "collect_rooms",
    "collect_rooms_with_doors",
]
