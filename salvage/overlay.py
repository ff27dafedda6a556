from __future__ import annotations

"""
Salvage overlay renderer.

Drawing goes through two narrow collaborators so nothing here depends on a
GUI library:

- a :class:`Projector` turning world tiles into screen polygons, returning
  ``None`` for anything it cannot place on screen;
- a :class:`Canvas` that fills polygons and strokes lines.

Tile polygons are four corners in the order south-west, south-east,
north-east, north-west.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Protocol, Sequence, Tuple

from . import settings
from .anchors import Anchor, AnchorState, classify_anchor
from .config import Color, OverlayConfig, with_alpha
from .coverage import CoverageMap
from .tiles import RangeSquare, TileEdges, WorldTile

Point = Tuple[float, float]
Polygon = Sequence[Point]

# Corner index pairs for each side of a tile polygon, in drawing order.
EDGE_CORNERS = (
    ("south", 0, 1),
    ("east", 1, 2),
    ("north", 2, 3),
    ("west", 3, 0),
)


class Projector(Protocol):
    def project_tile(self, tile: WorldTile) -> Optional[Polygon]:
        ...

    def project_area(self, tile: WorldTile, size: int) -> Optional[Polygon]:
        ...


class Canvas(Protocol):
    def fill_polygon(self, polygon: Polygon, color: Color) -> None:
        ...

    def draw_polygon(self, polygon: Polygon, color: Color, width: int) -> None:
        ...

    def draw_line(self, p0: Point, p1: Point, color: Color, width: int) -> None:
        ...


def render_tile(
    canvas: Canvas,
    projector: Projector,
    tile: WorldTile,
    fill: Color,
    border: Color,
    width: int,
    edges: TileEdges,
) -> bool:
    """Fill one tile and stroke only its flagged sides. Returns False if off screen."""
    poly = projector.project_tile(tile)
    if poly is None:
        return False

    canvas.fill_polygon(poly, fill)
    for side, a, b in EDGE_CORNERS:
        if getattr(edges, side):
            canvas.draw_line(poly[a], poly[b], border, width)
    return True


def render_range(
    canvas: Canvas,
    projector: Projector,
    anchor_pos: WorldTile,
    coverage: CoverageMap,
    config: OverlayConfig,
    radius: int = settings.SALVAGE_RANGE,
    footprint: int = settings.SHIPWRECK_SIZE,
) -> Tuple[int, int]:
    """
    Draw every tile of one shipwreck's salvage range.

    Borders follow this range's own perimeter even where it overlaps
    another range, so overlapping ranges each draw their full outline.

    Returns:
        (drawn, skipped) tile counts.
    """
    square = RangeSquare.around(anchor_pos, radius, footprint)
    base = (config.tile_fill, config.tile_border_color)
    overlap = (config.overlap_fill, config.overlap_border_color)

    drawn = skipped = 0
    for tile in square.tiles():
        is_overlap = config.show_overlap and coverage.is_overlap(tile)
        fill, border = overlap if is_overlap else base
        if render_tile(canvas, projector, tile, fill, border, config.border_width, square.edges_for(tile)):
            drawn += 1
        else:
            skipped += 1
    return drawn, skipped


def render_highlight(
    canvas: Canvas,
    projector: Projector,
    anchor_pos: WorldTile,
    color: Color,
    footprint: int = settings.SHIPWRECK_SIZE,
) -> bool:
    poly = projector.project_area(anchor_pos, footprint)
    if poly is None:
        return False
    canvas.fill_polygon(poly, with_alpha(color, settings.HIGHLIGHT_FILL_ALPHA))
    canvas.draw_polygon(poly, with_alpha(color, settings.OPAQUE), settings.HIGHLIGHT_BORDER_WIDTH)
    return True


@dataclass
class OverlayStats:
    """What a single frame ended up drawing."""

    anchors: Dict[AnchorState, int] = field(
        default_factory=lambda: {state: 0 for state in AnchorState}
    )
    highlights: int = 0
    tiles_drawn: int = 0
    tiles_skipped: int = 0
    overlap_tiles: int = 0


class SalvageOverlay:
    """Draws shipwreck highlights and salvage ranges, one frame per call."""

    def __init__(self, projector: Projector, canvas: Canvas, config: OverlayConfig | None = None):
        self.projector = projector
        self.canvas = canvas
        self.config = config or OverlayConfig()

    def render(self, anchors: Iterable[Anchor]) -> OverlayStats:
        anchors = list(anchors)
        config = self.config
        coverage = CoverageMap.build(anchors, config)
        stats = OverlayStats(overlap_tiles=sum(1 for _ in coverage.overlap_tiles()))

        for anchor in anchors:
            state = classify_anchor(anchor)
            stats.anchors[state] += 1
            if state is AnchorState.HIDDEN:
                continue

            if state is AnchorState.DEPLETED:
                if config.highlight_depleted:
                    stats.highlights += render_highlight(
                        self.canvas, self.projector, anchor.position, config.depleted_color
                    )
                continue

            if config.highlight_active:
                stats.highlights += render_highlight(
                    self.canvas, self.projector, anchor.position, config.active_color
                )
            if config.show_salvage_range:
                drawn, skipped = render_range(
                    self.canvas,
                    self.projector,
                    anchor.position,
                    coverage,
                    config,
                )
                stats.tiles_drawn += drawn
                stats.tiles_skipped += skipped

        logging.debug(
            f"Salvage overlay: {stats.anchors[AnchorState.ACTIVE]} active, "
            f"{stats.anchors[AnchorState.DEPLETED]} depleted, {stats.tiles_drawn} tiles drawn, "
            f"{stats.tiles_skipped} off screen, {stats.overlap_tiles} overlapping"
        )
        return stats


__all__ = [
    "Canvas",
    "EDGE_CORNERS",
    "OverlayStats",
    "Polygon",
    "Projector",
    "SalvageOverlay",
    "render_highlight",
    "render_range",
    "render_tile",
]
