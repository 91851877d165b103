"""Counters for one layout build, fed by generation events."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import asdict, dataclass

from delve.events import (
    DepthLimitReachedEvent,
    DoorPlacedEvent,
    EventBus,
    LeafCreatedEvent,
    NodeSplitEvent,
    RoomsMergedEvent,
    WallTileSkippedEvent,
)


@dataclass
class GenerationStats:
    """Tally of what the engine did during a build.

    Attach to the event bus the engine publishes on; detach once the build is
    over. Leaves counts leaf creations during construction only; merges turn
    interior nodes into leaves afterwards.
    """

    splits: int = 0
    leaves: int = 0
    doors: int = 0
    walls_skipped: int = 0
    merges: int = 0
    depth_limited: int = 0
    max_depth: int = 0

    def attach(self, bus: EventBus) -> None:
        for event_type, handler in self._handlers():
            bus.subscribe(event_type, handler)

    def detach(self, bus: EventBus) -> None:
        for event_type, handler in self._handlers():
            bus.unsubscribe(event_type, handler)

    def as_dict(self) -> dict[str, int]:
        return asdict(self)

    def _handlers(self) -> list[tuple[type, Callable]]:
        return [
            (NodeSplitEvent, self._on_split),
            (LeafCreatedEvent, self._on_leaf),
            (DoorPlacedEvent, self._on_door),
            (WallTileSkippedEvent, self._on_wall_skipped),
            (RoomsMergedEvent, self._on_merge),
            (DepthLimitReachedEvent, self._on_depth_limit),
        ]

    def _on_split(self, event: NodeSplitEvent) -> None:
        self.splits += 1
        self.max_depth = max(self.max_depth, event.depth)

    def _on_leaf(self, event: LeafCreatedEvent) -> None:
        self.leaves += 1
        self.max_depth = max(self.max_depth, event.depth)

    def _on_door(self, event: DoorPlacedEvent) -> None:
        self.doors += 1

    def _on_wall_skipped(self, event: WallTileSkippedEvent) -> None:
        self.walls_skipped += 1

    def _on_merge(self, event: RoomsMergedEvent) -> None:
        self.merges += 1

    def _on_depth_limit(self, event: DepthLimitReachedEvent) -> None:
        self.depth_limited += 1
