from __future__ import annotations

"""Immutable per-frame options for the salvage overlay."""

from dataclasses import dataclass, fields, replace
from typing import Any, Tuple

Color = Tuple[int, int, int, int]

_COLOR_FIELDS = (
    "active_color",
    "depleted_color",
    "tile_fill_color",
    "tile_border_color",
    "overlap_fill_color",
    "overlap_border_color",
)


def with_alpha(color: Color, alpha: int) -> Color:
    """Return ``color`` with its alpha channel replaced."""
    r, g, b, _ = color
    return (r, g, b, alpha)


def _check_color(name: str, color: Any) -> None:
    if not (isinstance(color, tuple) and len(color) == 4):
        raise TypeError(f"{name} must be an (r, g, b, a) tuple, got {color!r}")
    for channel in color:
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise TypeError(f"{name} channels must be ints, got {color!r}")
        if not 0 <= channel <= 255:
            raise ValueError(f"{name} channels must be within 0-255, got {color!r}")


def _check_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {value!r}")


@dataclass(frozen=True)
class OverlayConfig:
    """
    Display options read once per frame.

    Attributes:
      show_salvage_range: Draw the tile range around salvageable shipwrecks.
      show_overlap: Recolor tiles covered by more than one range.
      highlight_active: Outline salvageable shipwrecks.
      highlight_depleted: Outline depleted shipwrecks.
      fill_opacity: Alpha for the base tile fill, replacing the fill color's own alpha.
      border_width: Stroke width of range borders.
      overlap_fill_color: Used as-is, including its alpha channel.
    """

    show_salvage_range: bool = True
    show_overlap: bool = True
    highlight_active: bool = True
    highlight_depleted: bool = True
    active_color: Color = (0, 255, 0, 255)
    depleted_color: Color = (255, 0, 0, 255)
    tile_fill_color: Color = (0, 255, 255, 255)
    tile_border_color: Color = (0, 255, 255, 255)
    overlap_fill_color: Color = (255, 0, 255, 80)
    overlap_border_color: Color = (255, 0, 255, 255)
    fill_opacity: int = 50
    border_width: int = 1

    def __post_init__(self):
        for name in _COLOR_FIELDS:
            _check_color(name, getattr(self, name))
        _check_int("fill_opacity", self.fill_opacity)
        _check_int("border_width", self.border_width)
        if not 0 <= self.fill_opacity <= 255:
            raise ValueError(f"fill_opacity must be within 0-255, got {self.fill_opacity}")
        if self.border_width < 0:
            raise ValueError("border_width cannot be negative.")

    @property
    def tile_fill(self) -> Color:
        return with_alpha(self.tile_fill_color, self.fill_opacity)

    @property
    def overlap_fill(self) -> Color:
        return self.overlap_fill_color


def adjust_config(config: OverlayConfig, **kwargs: Any) -> OverlayConfig:
    """
    Return a copy of ``config`` with the given fields changed.

    Unknown keys are ignored. A value whose type does not match the field's
    current value raises TypeError; range checks are left to OverlayConfig.
    """
    known = {f.name for f in fields(config)}
    changes = {}
    for key, val in kwargs.items():
        if key not in known:
            continue
        current = getattr(config, key)
        if isinstance(current, bool):
            ok = isinstance(val, bool)
        elif isinstance(current, int):
            ok = isinstance(val, int) and not isinstance(val, bool)
        else:
            ok = isinstance(val, tuple)
        if not ok:
            raise TypeError(f"Cannot assign value of type {type(val)} to setting '{key}'.")
        changes[key] = val
    return replace(config, **changes)


__all__ = ["Color", "OverlayConfig", "adjust_config", "with_alpha"]
