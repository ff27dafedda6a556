from __future__ import annotations

"""
Shipwreck anchors and the tracker that owns them between frames.

Render code only ever sees :class:`Anchor` snapshots. The tracker is the
long-lived side: it follows spawn/despawn events and hands out fresh
snapshots each frame.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Hashable, List, Optional

from . import settings
from .tiles import WorldTile


class InvalidTileError(ValueError):
    """Raised when a shipwreck position is not a WorldTile."""


class UnknownShipwreckError(KeyError):
    """Raised when updating a shipwreck the tracker has never seen."""


class AnchorState(Enum):
    HIDDEN = "hidden"
    DEPLETED = "depleted"
    ACTIVE = "active"


@dataclass(frozen=True)
class Anchor:
    """Read-only view of one shipwreck for a single frame."""

    position: WorldTile
    enabled: bool = True
    depleted: bool = False
    object_id: Optional[Hashable] = None

    @property
    def qualifies(self) -> bool:
        """True if this anchor contributes a salvage range."""
        return self.enabled and not self.depleted


def classify_anchor(anchor: Anchor) -> AnchorState:
    if not anchor.enabled:
        return AnchorState.HIDDEN
    if anchor.depleted:
        return AnchorState.DEPLETED
    return AnchorState.ACTIVE


@dataclass
class _TrackedWreck:
    position: WorldTile
    depleted: bool = False
    enabled: bool = True


class ShipwreckTracker:
    """Shipwrecks currently present in the world, keyed by host object id."""

    def __init__(self) -> None:
        self._wrecks: Dict[Hashable, _TrackedWreck] = OrderedDict()

    def __len__(self) -> int:
        return len(self._wrecks)

    def __contains__(self, object_id: Hashable) -> bool:
        return object_id in self._wrecks

    def spawn(self, object_id: Hashable, position: WorldTile, depleted: bool = False) -> None:
        """
        Record a shipwreck appearing in the world.

        Spawning an id that is already tracked replaces its position and
        depleted state but keeps its enabled flag.

        Raises:
            InvalidTileError: If ``position`` is not a WorldTile.
        """
        if not isinstance(position, WorldTile):
            raise InvalidTileError(f"Shipwreck position must be a WorldTile, got {position!r}")
        existing = self._wrecks.get(object_id)
        enabled = existing.enabled if existing else True
        self._wrecks[object_id] = _TrackedWreck(position, depleted, enabled)
        logging.debug(f"Shipwreck {object_id} spawned at {position} (depleted={depleted})")

    def despawn(self, object_id: Hashable) -> None:
        if self._wrecks.pop(object_id, None) is None:
            logging.warning(f"Despawn for untracked shipwreck {object_id}; ignoring")
            return
        logging.debug(f"Shipwreck {object_id} despawned")

    def clear(self) -> None:
        self._wrecks.clear()

    def _get(self, object_id: Hashable) -> _TrackedWreck:
        try:
            return self._wrecks[object_id]
        except KeyError as e:
            raise UnknownShipwreckError(object_id) from e

    def set_depleted(self, object_id: Hashable, depleted: bool = True) -> None:
        self._get(object_id).depleted = depleted

    def toggle_depleted(self, object_id: Hashable) -> bool:
        wreck = self._get(object_id)
        wreck.depleted = not wreck.depleted
        return wreck.depleted

    def set_enabled(self, object_id: Hashable, enabled: bool = True) -> None:
        self._get(object_id).enabled = enabled

    def wreck_at(self, tile: WorldTile) -> Optional[Hashable]:
        """Id of the shipwreck whose footprint covers ``tile``, if any."""
        size = settings.SHIPWRECK_SIZE
        for object_id, wreck in self._wrecks.items():
            pos = wreck.position
            if (
                pos.plane == tile.plane
                and pos.x <= tile.x < pos.x + size
                and pos.y <= tile.y < pos.y + size
            ):
                return object_id
        return None

    def snapshot(self) -> List[Anchor]:
        """Fresh anchors in spawn order; safe to hold for the rest of the frame."""
        return [
            Anchor(w.position, enabled=w.enabled, depleted=w.depleted, object_id=oid)
            for oid, w in self._wrecks.items()
        ]

    def list_active_anchors(self) -> List[Anchor]:
        """
        Anchors for the frame about to be drawn.

        Each snapshot carries the enabled and depleted flags as they stand
        now, so render code reads them from the anchor and never calls back
        into the tracker.
        """
        return self.snapshot()


__all__ = [
    "Anchor",
    "AnchorState",
    "InvalidTileError",
    "ShipwreckTracker",
    "UnknownShipwreckError",
    "classify_anchor",
]
