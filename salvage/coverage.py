from __future__ import annotations

"""Per-tile count of how many salvage ranges cover each tile."""

from typing import Dict, Iterable, Iterator

from . import settings
from .anchors import Anchor
from .config import OverlayConfig
from .tiles import RangeSquare, WorldTile

CoverageCount = Dict[WorldTile, int]


def compute_coverage(
    anchors: Iterable[Anchor],
    radius: int = settings.SALVAGE_RANGE,
    footprint: int = settings.SHIPWRECK_SIZE,
    range_enabled: bool = True,
) -> CoverageCount:
    """
    Count, for every tile, the enabled and non-depleted anchors whose range
    contains it. Returns an empty mapping when ranges are not shown.
    """
    counts: CoverageCount = {}
    if not range_enabled:
        return counts
    for anchor in anchors:
        if not anchor.qualifies:
            continue
        for tile in RangeSquare.around(anchor.position, radius, footprint).tiles():
            counts[tile] = counts.get(tile, 0) + 1
    return counts


class CoverageMap:
    """Coverage counts for one frame."""

    def __init__(self, counts: CoverageCount | None = None):
        self.counts: CoverageCount = counts if counts is not None else {}

    @classmethod
    def build(
        cls,
        anchors: Iterable[Anchor],
        config: OverlayConfig,
        radius: int = settings.SALVAGE_RANGE,
        footprint: int = settings.SHIPWRECK_SIZE,
    ) -> "CoverageMap":
        return cls(compute_coverage(anchors, radius, footprint, config.show_salvage_range))

    def __len__(self) -> int:
        return len(self.counts)

    def count(self, tile: WorldTile) -> int:
        return self.counts.get(tile, 0)

    def is_overlap(self, tile: WorldTile) -> bool:
        return self.count(tile) > 1

    def overlap_tiles(self) -> Iterator[WorldTile]:
        return (tile for tile, n in self.counts.items() if n > 1)


__all__ = ["CoverageCount", "CoverageMap", "compute_coverage"]
