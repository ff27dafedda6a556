import os
import sys
import logging

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from salvage.anchors import (
    Anchor,
    AnchorState,
    InvalidTileError,
    ShipwreckTracker,
    UnknownShipwreckError,
    classify_anchor,
)
from salvage.tiles import WorldTile


def test_classify_anchor():
    tile = WorldTile(0, 0, 0)
    assert classify_anchor(Anchor(tile)) is AnchorState.ACTIVE
    assert classify_anchor(Anchor(tile, depleted=True)) is AnchorState.DEPLETED
    assert classify_anchor(Anchor(tile, enabled=False)) is AnchorState.HIDDEN
    assert classify_anchor(Anchor(tile, enabled=False, depleted=True)) is AnchorState.HIDDEN


def test_tracker_snapshot_in_spawn_order():
    tracker = ShipwreckTracker()
    tracker.spawn(7, WorldTile(5, 5, 0))
    tracker.spawn(3, WorldTile(1, 1, 0), depleted=True)
    anchors = tracker.snapshot()
    assert [a.object_id for a in anchors] == [7, 3]
    assert anchors[1].depleted
    assert tracker.snapshot() is not anchors
    assert len(tracker) == 2 and 7 in tracker


def test_respawn_replaces_state_but_keeps_enabled_flag():
    tracker = ShipwreckTracker()
    tracker.spawn("a", WorldTile(5, 5, 0))
    tracker.set_enabled("a", False)
    tracker.spawn("a", WorldTile(6, 6, 0), depleted=True)
    (anchor,) = tracker.snapshot()
    assert anchor.position == WorldTile(6, 6, 0)
    assert anchor.depleted and not anchor.enabled


def test_despawn_and_clear(caplog):
    tracker = ShipwreckTracker()
    tracker.spawn("a", WorldTile(5, 5, 0))
    tracker.spawn("b", WorldTile(9, 9, 0))
    tracker.despawn("a")
    assert [a.object_id for a in tracker.snapshot()] == ["b"]
    with caplog.at_level(logging.WARNING):
        tracker.despawn("missing")
    assert "untracked shipwreck missing" in caplog.text
    tracker.clear()
    assert tracker.snapshot() == []


def test_updates_on_unknown_id_raise():
    tracker = ShipwreckTracker()
    with pytest.raises(UnknownShipwreckError):
        tracker.set_depleted("nope")
    with pytest.raises(KeyError):
        tracker.set_enabled("nope", False)


def test_spawn_rejects_non_tile_position():
    with pytest.raises(InvalidTileError):
        ShipwreckTracker().spawn("a", (1, 2, 0))


def test_toggle_depleted():
    tracker = ShipwreckTracker()
    tracker.spawn("a", WorldTile(0, 0, 0))
    assert tracker.toggle_depleted("a") is True
    assert tracker.snapshot()[0].depleted
    assert tracker.toggle_depleted("a") is False


def test_wreck_at_covers_footprint_only():
    tracker = ShipwreckTracker()
    tracker.spawn("a", WorldTile(10, 10, 0))
    assert tracker.wreck_at(WorldTile(10, 10, 0)) == "a"
    assert tracker.wreck_at(WorldTile(11, 11, 0)) == "a"
    assert tracker.wreck_at(WorldTile(12, 10, 0)) is None
    assert tracker.wreck_at(WorldTile(10, 10, 1)) is None


def test_listed_anchors_are_frozen_per_frame():
    tracker = ShipwreckTracker()
    tracker.spawn("a", WorldTile(0, 0, 0))
    (anchor,) = tracker.list_active_anchors()
    tracker.set_depleted("a")
    tracker.set_enabled("a", False)
    assert anchor.enabled and not anchor.depleted
    (later,) = tracker.list_active_anchors()
    assert later.depleted and not later.enabled
    assert later.qualifies is False
