"""Partition tree node."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from delve.types import LayoutPos, SplitAxis
from delve.util.coordinates import Rect


@dataclass(frozen=True)
class SplitRecord:
    """How an interior node was divided.

    Attributes:
        axis: "horizontal" (split along a Y line) or "vertical" (along an X line).
        split_at: Absolute coordinate of the split line.
    """

    axis: SplitAxis
    split_at: float


@dataclass
class PartitionNode:
    """A region of the layout and, once split, its two sub-regions.

    A node with both children is an interior node; its rectangle is the union
    region its children were split from. A node with neither child is a leaf,
    i.e. a terminal room. Each node exclusively owns its children and its tile
    grid.

    Attributes:
        rect: The node's region, quantized to the tile unit.
        tiles: Tile grid of TileTypeID values. Shape: (tiles_x, tiles_y).
        depth: Number of ancestor splits above this node (0 at the root).
        doors: Absolute door positions introduced by this node's split.
        split: The split that produced the children, None for leaves.
        left: First child (top or left sub-region).
        right: Second child (bottom or right sub-region).
    """

    rect: Rect
    tiles: np.ndarray
    depth: int = 0
    doors: list[LayoutPos] = field(default_factory=list)
    split: SplitRecord | None = None
    left: PartitionNode | None = None
    right: PartitionNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def is_interior(self) -> bool:
        return self.left is not None and self.right is not None

    def children(self) -> tuple[PartitionNode, ...]:
        return tuple(c for c in (self.left, self.right) if c is not None)

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf else "interior"
        return f"PartitionNode({kind}, depth={self.depth}, rect={self.rect!r})"
