from __future__ import annotations

from collections.abc import Iterable

from delve import config
from delve.environment.generators.bsp.node import PartitionNode, SplitRecord
from delve.environment.generators.bsp.raster import allocate_tile_grid
from delve.types import SplitAxis
from delve.util.coordinates import Rect


class SequenceRNG:
    """Random source that replays a fixed list of ``random()`` values.

    ``uniform(a, b)`` consumes one value as the fraction of the way from a to
    b. Running out of values fails the test.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self.calls = 0

    @property
    def remaining(self) -> int:
        return len(self._values)

    def random(self) -> float:
        if not self._values:
            raise AssertionError("SequenceRNG ran out of values")
        self.calls += 1
        return self._values.pop(0)

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.random()


def make_leaf(rect: Rect, depth: int = 0) -> PartitionNode:
    return PartitionNode(
        rect=rect, tiles=allocate_tile_grid(rect, config.TILE_UNIT), depth=depth
    )


def make_interior(
    rect: Rect,
    left: PartitionNode,
    right: PartitionNode,
    depth: int = 0,
    axis: SplitAxis = "vertical",
    split_at: float | None = None,
) -> PartitionNode:
    """Build an interior node without stamping seams or doors."""
    if split_at is None:
        split_at = right.rect.x if axis == "vertical" else right.rect.y
    return PartitionNode(
        rect=rect,
        tiles=allocate_tile_grid(rect, config.TILE_UNIT),
        depth=depth,
        split=SplitRecord(axis=axis, split_at=split_at),
        left=left,
        right=right,
    )
