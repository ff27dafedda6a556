"""Map click handling, kept free of dearpygui so it can be tested directly."""

from typing import Optional, Tuple

from salvage import ShipwreckTracker, WorldTile

LEFT = "left"
RIGHT = "right"

# Options panel placement in viewport pixels.
PANEL_POS = (10, 10)
PANEL_SIZE = (190, 150)


def over_panel(pos: Tuple[float, float], panel_pos=PANEL_POS, panel_size=PANEL_SIZE) -> bool:
    x, y = pos
    px, py = panel_pos
    w, h = panel_size
    return px <= x <= px + w and py <= y <= py + h


def apply_map_click(tracker: ShipwreckTracker, tile: WorldTile, button: str, new_id) -> Optional[str]:
    """
    Left click spawns a wreck on an empty tile or toggles the one already
    there; right click removes it.

    Returns:
        "spawned", "toggled", "despawned", or None when nothing changed.
    """
    wreck = tracker.wreck_at(tile)
    if button == LEFT:
        if wreck is None:
            tracker.spawn(new_id, tile)
            return "spawned"
        tracker.toggle_depleted(wreck)
        return "toggled"
    if button == RIGHT and wreck is not None:
        tracker.despawn(wreck)
        return "despawned"
    return None


__all__ = ["LEFT", "RIGHT", "PANEL_POS", "PANEL_SIZE", "apply_map_click", "over_panel"]
