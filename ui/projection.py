from __future__ import annotations

"""Screen projection for the square tile grid. No GUI imports here."""

import math
from typing import List, Optional, Tuple

from salvage.tiles import WorldTile

TILE_SIZE = 24

Point = Tuple[float, float]


def tile_to_pixel(x: float, y: float, size: int = TILE_SIZE) -> Point:
    # World y grows northwards, screen y grows downwards.
    return x * size, -y * size


def pixel_to_tile(px: float, py: float, size: int = TILE_SIZE) -> Tuple[int, int]:
    return math.floor(px / size), math.floor(-py / size)


class Camera:
    """Simple camera handling panning and zoom."""

    def __init__(self, width, height):
        self.offset_x = width // 2
        self.offset_y = height // 2
        self.zoom = 1.0

    def apply(self, pos):
        x, y = pos
        return (
            x * self.zoom + self.offset_x,
            y * self.zoom + self.offset_y,
        )

    def reverse(self, pos):
        x, y = pos
        return (
            (x - self.offset_x) / self.zoom,
            (y - self.offset_y) / self.zoom,
        )

    def pan(self, dx, dy):
        self.offset_x += dx
        self.offset_y += dy

    def change_zoom(self, delta, pivot):
        old = self.zoom
        self.zoom = max(0.2, min(4.0, self.zoom + delta))
        scale = self.zoom / old
        px, py = pivot
        self.offset_x = px - scale * (px - self.offset_x)
        self.offset_y = py - scale * (py - self.offset_y)

    def center_on(self, tile: WorldTile, viewport, size: int = TILE_SIZE):
        px, py = tile_to_pixel(tile.x + 0.5, tile.y + 0.5, size)
        self.offset_x = viewport[0] / 2 - px * self.zoom
        self.offset_y = viewport[1] / 2 - py * self.zoom


class TileProjector:
    """
    Maps world tiles on one plane to screen quadrilaterals.

    Corners come back as south-west, south-east, north-east, north-west.
    Tiles on another plane, or entirely outside the viewport, give None.
    """

    def __init__(self, camera: Camera, viewport: Tuple[int, int], plane: int = 0, tile_size: int = TILE_SIZE):
        self.camera = camera
        self.viewport = viewport
        self.plane = plane
        self.tile_size = tile_size

    def _corners(self, x: int, y: int, size: int) -> List[Point]:
        world = [(x, y), (x + size, y), (x + size, y + size), (x, y + size)]
        return [self.camera.apply(tile_to_pixel(wx, wy, self.tile_size)) for wx, wy in world]

    def _visible(self, corners: List[Point]) -> bool:
        xs = [p[0] for p in corners]
        ys = [p[1] for p in corners]
        width, height = self.viewport
        return max(xs) >= 0 and min(xs) <= width and max(ys) >= 0 and min(ys) <= height

    def project_area(self, tile: WorldTile, size: int) -> Optional[List[Point]]:
        if tile.plane != self.plane:
            return None
        corners = self._corners(tile.x, tile.y, size)
        return corners if self._visible(corners) else None

    def project_tile(self, tile: WorldTile) -> Optional[List[Point]]:
        return self.project_area(tile, 1)

    def tile_at(self, pos: Point) -> WorldTile:
        x, y = pixel_to_tile(*self.camera.reverse(pos), self.tile_size)
        return WorldTile(x, y, self.plane)


__all__ = ["Camera", "TileProjector", "TILE_SIZE", "pixel_to_tile", "tile_to_pixel"]
