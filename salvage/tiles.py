from __future__ import annotations

"""
World tile coordinates and the square salvage range around a shipwreck.

A range covers the shipwreck footprint plus ``radius`` tiles on every side,
so its side length is ``2 * radius + footprint``.
"""

from dataclasses import dataclass
from typing import Iterator, NamedTuple

from . import settings


@dataclass(frozen=True)
class WorldTile:
    """A single tile in world space. Hashable, used as a mapping key."""

    x: int
    y: int
    plane: int = 0

    def translate(self, dx: int, dy: int) -> "WorldTile":
        return WorldTile(self.x + dx, self.y + dy, self.plane)


class TileEdges(NamedTuple):
    west: bool = False
    east: bool = False
    south: bool = False
    north: bool = False

    def flagged(self) -> int:
        return sum(1 for flag in self if flag)


@dataclass(frozen=True)
class RangeSquare:
    """Inclusive tile bounds of a salvage range on a single plane."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int
    plane: int = 0

    @classmethod
    def around(
        cls,
        anchor: WorldTile,
        radius: int = settings.SALVAGE_RANGE,
        footprint: int = settings.SHIPWRECK_SIZE,
    ) -> "RangeSquare":
        """Build the range for an anchor whose south-west corner is ``anchor``."""
        return cls(
            min_x=anchor.x - radius,
            max_x=anchor.x + footprint - 1 + radius,
            min_y=anchor.y - radius,
            max_y=anchor.y + footprint - 1 + radius,
            plane=anchor.plane,
        )

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def __len__(self) -> int:
        return self.width * self.height

    def __contains__(self, tile: object) -> bool:
        return isinstance(tile, WorldTile) and self.contains(tile)

    def contains(self, tile: WorldTile) -> bool:
        return (
            tile.plane == self.plane
            and self.min_x <= tile.x <= self.max_x
            and self.min_y <= tile.y <= self.max_y
        )

    def tiles(self) -> Iterator[WorldTile]:
        # Column by column, south to north within a column.
        for x in range(self.min_x, self.max_x + 1):
            for y in range(self.min_y, self.max_y + 1):
                yield WorldTile(x, y, self.plane)

    def edges_for(self, tile: WorldTile) -> TileEdges:
        """
        Which sides of ``tile`` lie on the outer boundary of this range.

        Only this range's own bounds are considered; a neighbouring range
        never suppresses an edge.
        """
        return TileEdges(
            west=tile.x == self.min_x,
            east=tile.x == self.max_x,
            south=tile.y == self.min_y,
            north=tile.y == self.max_y,
        )


__all__ = ["WorldTile", "TileEdges", "RangeSquare"]
