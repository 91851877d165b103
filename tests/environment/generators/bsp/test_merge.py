"""Tests for the small-room merge pass."""

from __future__ import annotations

import numpy as np

from delve.environment.generators.bsp.merge import can_merge_children, merge_small_rooms
from delve.environment.generators.bsp.node import PartitionNode
from delve.environment.generators.bsp.settings import PartitionSettings
from delve.environment.tile_types import TileTypeID
from delve.events import EventBus, RoomsMergedEvent
from delve.util.coordinates import Rect
from tests.helpers import SequenceRNG, make_interior, make_leaf

SETTINGS = PartitionSettings()


def _small_pair(parent_depth: int = 2) -> PartitionNode:
    """A parent whose two 64x64 leaves sit side by side."""
    child_depth = parent_depth + 1
    node = make_interior(
        Rect(0, 0, 128, 64),
        make_leaf(Rect(0, 0, 64, 64), child_depth),
        make_leaf(Rect(64, 0, 64, 64), child_depth),
        depth=parent_depth,
    )
    node.doors.append((64, 0))
    return node


class TestCanMergeChildren:
    def test_small_adjacent_deep_leaves_qualify(self) -> None:
        assert can_merge_children(_small_pair(), 128, 128, SETTINGS)

    def test_shallow_leaves_do_not_qualify(self) -> None:
        assert not can_merge_children(_small_pair(parent_depth=1), 128, 128, SETTINGS)

    def test_large_enough_leaves_do_not_qualify(self) -> None:
        assert not can_merge_children(_small_pair(), 64, 64, SETTINGS)

    def test_leaves_must_share_an_edge(self) -> None:
        node = make_interior(
            Rect(0, 0, 192, 64),
            make_leaf(Rect(0, 0, 64, 64), 3),
            make_leaf(Rect(128, 0, 64, 64), 3),
            depth=2,
        )
        assert not can_merge_children(node, 128, 128, SETTINGS)

    def test_interior_children_do_not_qualify(self) -> None:
        node = make_interior(
            Rect(0, 0, 192, 64),
            _small_pair(parent_depth=3),
            make_leaf(Rect(128, 0, 64, 64), 3),
            depth=2,
        )
        assert not can_merge_children(node, 128, 128, SETTINGS)

    def test_leaf_has_nothing_to_merge(self) -> None:
        assert not can_merge_children(make_leaf(Rect(0, 0, 64, 64), 3), 128, 128, SETTINGS)


class TestMergeSmallRooms:
    def test_merge_turns_parent_into_leaf(self) -> None:
        node = _small_pair()
        bus = EventBus()
        merged_events: list[RoomsMergedEvent] = []
        bus.subscribe(RoomsMergedEvent, merged_events.append)

        merges = merge_small_rooms(node, 128, 128, SequenceRNG([0.3]), event_bus=bus)

        assert merges == 1
        assert node.is_leaf
        assert node.rect == Rect(0, 0, 128, 64)
        assert node.split is None
        assert node.doors == []
        assert node.tiles.shape == (2, 1)
        assert np.all(node.tiles == TileTypeID.FLOOR)
        assert len(merged_events) == 1
        assert merged_events[0].rect == Rect(0, 0, 128, 64)
        assert merged_events[0].depth == 2

    def test_failed_coin_flip_keeps_children(self) -> None:
        node = _small_pair()

        assert merge_small_rooms(node, 128, 128, SequenceRNG([0.7])) == 0
        assert node.is_interior
        assert node.doors == [(64, 0)]

    def test_ineligible_pairs_draw_nothing(self) -> None:
        rng = SequenceRNG([])
        assert merge_small_rooms(_small_pair(parent_depth=1), 128, 128, rng) == 0
        assert rng.calls == 0

    def test_merges_cascade_bottom_up(self) -> None:
        """A merged pair becomes a leaf its own parent can merge."""
        inner = _small_pair(parent_depth=3)
        root = make_interior(
            Rect(0, 0, 256, 64),
            inner,
            make_leaf(Rect(128, 0, 128, 64), 3),
            depth=2,
        )

        assert merge_small_rooms(root, 256, 256, SequenceRNG([0.1, 0.1])) == 2
        assert root.is_leaf
        assert root.rect == Rect(0, 0, 256, 64)

    def test_merge_probability_setting(self) -> None:
        settings = PartitionSettings(merge_probability=0.0)
        node = _small_pair()

        assert merge_small_rooms(node, 128, 128, SequenceRNG([0.0]), settings) == 0
        assert node.is_interior
