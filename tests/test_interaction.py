import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from salvage import ShipwreckTracker, WorldTile
from ui.interaction import LEFT, PANEL_POS, PANEL_SIZE, RIGHT, apply_map_click, over_panel


def test_over_panel_covers_the_options_window():
    x, y = PANEL_POS
    w, h = PANEL_SIZE
    assert over_panel((x + 5, y + 5))
    assert over_panel((x + w, y + h))
    assert not over_panel((x + w + 1, y + 5))
    assert not over_panel((400, 300))


def test_left_click_on_empty_tile_spawns():
    tracker = ShipwreckTracker()
    assert apply_map_click(tracker, WorldTile(5, 5, 0), LEFT, "w1") == "spawned"
    (anchor,) = tracker.snapshot()
    assert anchor.object_id == "w1" and anchor.position == WorldTile(5, 5, 0)


def test_left_click_on_wreck_toggles_depleted():
    tracker = ShipwreckTracker()
    tracker.spawn("w1", WorldTile(5, 5, 0))
    assert apply_map_click(tracker, WorldTile(6, 6, 0), LEFT, "w2") == "toggled"
    assert len(tracker) == 1
    assert tracker.snapshot()[0].depleted


def test_right_click_despawns_only_existing_wrecks():
    tracker = ShipwreckTracker()
    assert apply_map_click(tracker, WorldTile(5, 5, 0), RIGHT, "w1") is None
    assert len(tracker) == 0
    tracker.spawn("w1", WorldTile(5, 5, 0))
    assert apply_map_click(tracker, WorldTile(5, 5, 0), RIGHT, "w2") == "despawned"
    assert len(tracker) == 0


def test_other_buttons_change_nothing():
    tracker = ShipwreckTracker()
    assert apply_map_click(tracker, WorldTile(5, 5, 0), "middle", "w1") is None
    assert len(tracker) == 0
