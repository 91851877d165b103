"""Read-only traversals of a finished partition tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from delve.types import LayoutPos
from delve.util.coordinates import Rect

if TYPE_CHECKING:
    from .node import PartitionNode


@dataclass(frozen=True)
class RoomWithDoors:
    """A room rectangle paired with the doors its node introduced.

    Attributes:
        rect: The room's region.
        doors: Absolute door positions. Empty for leaves.
    """

    rect: Rect
    doors: tuple[LayoutPos, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "room": {
                "x": self.rect.x,
                "y": self.rect.y,
                "width": self.rect.width,
                "height": self.rect.height,
            },
            "doors": [{"x": x, "y": y} for x, y in self.doors],
        }


def iter_nodes(root: PartitionNode | None) -> Iterator[PartitionNode]:
    """Yield every node in pre-order: node, left subtree, right subtree."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        # Right goes on the stack first so left is visited first.
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def collect_rooms(root: PartitionNode | None) -> list[Rect]:
    """Every node's rectangle in pre-order, interior nodes included."""
    return [node.rect for node in iter_nodes(root)]


def collect_rooms_with_doors(root: PartitionNode | None) -> list[RoomWithDoors]:
    """Every node's rectangle and its own doors, in pre-order."""
    return [
        RoomWithDoors(rect=node.rect, doors=tuple(node.doors))
        for node in iter_nodes(root)
    ]


def collect_leaves(root: PartitionNode | None) -> list[PartitionNode]:
    """The terminal rooms of the tree, in pre-order."""
    return [node for node in iter_nodes(root) if node.is_leaf]
