import argparse
import logging

from salvage import OverlayConfig, ShipwreckTracker, WorldTile

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_tile(text: str) -> WorldTile:
    """Parse ``X,Y`` or ``X,Y,PLANE`` into a WorldTile."""
    parts = text.split(",")
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"Expected X,Y[,PLANE], got '{text}'")
    try:
        return WorldTile(*(int(p) for p in parts))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Tile coordinates must be integers: '{text}'") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show shipwreck salvage ranges on an interactive tile map."
    )
    parser.add_argument("--wreck", type=parse_tile, action="append", default=[], metavar="X,Y[,PLANE]",
                        help="Place a salvageable shipwreck (repeatable)")
    parser.add_argument("--depleted", type=parse_tile, action="append", default=[], metavar="X,Y[,PLANE]",
                        help="Place a depleted shipwreck (repeatable)")
    parser.add_argument("--no-range", action="store_true", help="Hide salvage ranges")
    parser.add_argument("--no-overlap", action="store_true", help="Do not recolor overlapping tiles")
    parser.add_argument("--no-active-highlight", action="store_true", help="Do not outline salvageable wrecks")
    parser.add_argument("--no-depleted-highlight", action="store_true", help="Do not outline depleted wrecks")
    parser.add_argument("--border-width", type=int, default=1, help="Range border width in pixels")
    parser.add_argument("--fill-opacity", type=int, default=50, help="Range fill alpha (0-255)")
    parser.add_argument("--log-level", type=str.upper, default="WARNING", choices=LOG_LEVELS,
                        help="Logging level")
    return parser


def config_from_args(args: argparse.Namespace) -> OverlayConfig:
    return OverlayConfig(
        show_salvage_range=not args.no_range,
        show_overlap=not args.no_overlap,
        highlight_active=not args.no_active_highlight,
        highlight_depleted=not args.no_depleted_highlight,
        border_width=args.border_width,
        fill_opacity=args.fill_opacity,
    )


def tracker_from_args(args: argparse.Namespace) -> ShipwreckTracker:
    tracker = ShipwreckTracker()
    for i, tile in enumerate(args.wreck):
        tracker.spawn(f"wreck-{i}", tile)
    for i, tile in enumerate(args.depleted):
        tracker.spawn(f"depleted-{i}", tile, depleted=True)
    return tracker


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level)

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    tracker = tracker_from_args(args)
    if not len(tracker):
        tracker.spawn("wreck-0", WorldTile(100, 100, 0))
        tracker.spawn("wreck-1", WorldTile(110, 100, 0))

    from ui.map_view import MapView

    first = tracker.snapshot()[0].position
    view = MapView(tracker, config, plane=first.plane)
    view.focus(first)
    view.run()


if __name__ == "__main__":
    main()
