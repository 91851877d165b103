"""Base classes for layout generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from delve.environment.generators.bsp.collector import RoomWithDoors
    from delve.environment.generators.bsp.node import PartitionNode
    from delve.environment.generators.bsp.stats import GenerationStats
    from delve.util.coordinates import Rect


@dataclass
class GeneratedLayout:
    """A container for all data produced by a layout generator.

    Attributes:
        root: Root of the partition tree.
        rooms: Every node's room and doors, in pre-order.
        tiles: 2D numpy array of TileTypeIDs covering the root region.
        stats: Counters gathered while building.
        leaves: Rectangles of the terminal rooms, in pre-order.
    """

    root: PartitionNode
    rooms: list[RoomWithDoors]
    tiles: np.ndarray
    stats: GenerationStats
    leaves: list[Rect] = field(default_factory=list)


class BaseLayoutGenerator(abc.ABC):
    """Abstract base class for layout generation algorithms."""

    def __init__(self, space: Rect) -> None:
        self.space = space

    @abc.abstractmethod
    def generate(self) -> GeneratedLayout:
        """Generate the layout and its structural data."""
        raise NotImplementedError
