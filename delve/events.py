"""Global event system for observing layout generation.

This event bus is the observability hook of the generator. The engine publishes
trace events describing its decisions; subscribers (statistics counters,
debug tooling, tests) react to them.

USE FOR:
- Tracing split, leaf, door and merge decisions
- Counting rasterization edge cases (skipped wall tiles)
- Reporting the recursion depth cap

DO NOT USE FOR:
- Influencing generation (handlers cannot change any decision)
- Operations that need immediate return values or synchronous confirmation
- Error handling or exception propagation

The event bus is fire-and-forget: publish an event without expecting return
values or confirmations. All handlers execute immediately (synchronously). A
handler that raises is logged and skipped; generation carries on.
"""

import logging
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass

from delve.types import LayoutPos, SplitAxis, TilePos
from delve.util.coordinates import Rect

logger = logging.getLogger(__name__)


@dataclass
class GenerationEvent:
    """Base class for all generation events."""

    pass


@dataclass
class NodeSplitEvent(GenerationEvent):
    """A region was split into two children.

    Attributes:
        rect: The region that was split.
        depth: Split depth of the region.
        axis: "horizontal" (split along a Y line) or "vertical" (along an X line).
        split_at: The absolute coordinate of the split line.
    """

    rect: Rect
    depth: int
    axis: SplitAxis
    split_at: float


@dataclass
class LeafCreatedEvent(GenerationEvent):
    """A region became a terminal room.

    Attributes:
        rect: The leaf's region.
        depth: Split depth of the leaf.
        reason: "too_small", "no_split", "no_split_line" or "depth_limit".
    """

    rect: Rect
    depth: int
    reason: str


@dataclass
class DoorPlacedEvent(GenerationEvent):
    """A door was placed for a split."""

    position: LayoutPos
    depth: int


@dataclass
class WallTileSkippedEvent(GenerationEvent):
    """A seam wall tile fell outside its grid and was not stamped."""

    rect: Rect
    tile: TilePos


@dataclass
class RoomsMergedEvent(GenerationEvent):
    """Two undersized sibling leaves were merged into their parent."""

    rect: Rect
    depth: int


@dataclass
class DepthLimitReachedEvent(GenerationEvent):
    """Recursion stopped at the hard depth cap."""

    rect: Rect
    depth: int


class EventBus:
    """Simple event bus for publish/subscribe pattern."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable]] = {}

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Subscribe a handler to an event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Unsubscribe a handler from an event type."""
        if event_type in self._handlers:
            with suppress(ValueError):
                self._handlers[event_type].remove(handler)

    def publish(self, event: GenerationEvent) -> None:
        """Publish an event to all subscribed handlers."""
        event_type = type(event)
        if event_type in self._handlers:
            # Copy the handler list to allow safe subscribe/unsubscribe during dispatch
            for handler in list(self._handlers[event_type]):
                try:
                    handler(event)
                except Exception:
                    logger.exception(f"Error handling event {event_type.__name__}")


# Global event bus instance
_global_event_bus = EventBus()


# Public API functions


def get_event_bus() -> EventBus:
    """Return the global event bus."""
    return _global_event_bus


def subscribe_to_event(event_type: type, handler: Callable) -> None:
    """Subscribe to an event type globally."""
    _global_event_bus.subscribe(event_type, handler)


def unsubscribe_from_event(event_type: type, handler: Callable) -> None:
    """Unsubscribe from an event type globally."""
    _global_event_bus.unsubscribe(event_type, handler)


def publish_event(event: GenerationEvent) -> None:
    """Publish an event globally."""
    _global_event_bus.publish(event)


def reset_event_bus_for_testing() -> None:
    """Reset the global event bus. Use only in tests."""
    global _global_event_bus
    _global_event_bus = EventBus()
