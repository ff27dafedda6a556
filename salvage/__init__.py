"""Shipwreck salvage range overlay: coverage counting and tile rendering."""

from .anchors import (
    Anchor,
    AnchorState,
    InvalidTileError,
    ShipwreckTracker,
    UnknownShipwreckError,
    classify_anchor,
)
from .config import Color, OverlayConfig, adjust_config, with_alpha
from .coverage import CoverageMap, compute_coverage
from .overlay import (
    OverlayStats,
    SalvageOverlay,
    render_highlight,
    render_range,
    render_tile,
)
from .tiles import RangeSquare, TileEdges, WorldTile

__all__ = [
    "Anchor",
    "AnchorState",
    "Color",
    "CoverageMap",
    "InvalidTileError",
    "OverlayConfig",
    "OverlayStats",
    "RangeSquare",
    "SalvageOverlay",
    "ShipwreckTracker",
    "TileEdges",
    "UnknownShipwreckError",
    "WorldTile",
    "adjust_config",
    "classify_anchor",
    "compute_coverage",
    "render_highlight",
    "render_range",
    "render_tile",
    "with_alpha",
]
