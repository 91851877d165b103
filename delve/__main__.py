"""Command-line entry point: generate a BSP layout and print it.

Usage:
    python -m delve --width 1024 --height 1024 --min-room-width 128 \
        --min-room-height 128 --seed 42
    python -m delve --ascii --seed dungeon1
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from . import config
from .environment.generators.bsp import BSPGenerator, LayoutGenerationError
from .environment.generators.bsp.raster import glyph_legend, to_glyph_lines
from .util.coordinates import Rect

logger = logging.getLogger(__name__)


def _parse_seed(value: str) -> int | str:
    """Numeric seeds stay ints so they match seeds passed from Python."""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="delve", description="Generate a dungeon layout by binary space partitioning"
    )
    parser.add_argument("--x", type=float, default=0.0, help="Left edge (default: 0)")
    parser.add_argument("--y", type=float, default=0.0, help="Top edge (default: 0)")
    parser.add_argument(
        "--width",
        type=float,
        default=config.DEFAULT_LAYOUT_WIDTH,
        help=f"Layout width (default: {config.DEFAULT_LAYOUT_WIDTH:g})",
    )
    parser.add_argument(
        "--height",
        type=float,
        default=config.DEFAULT_LAYOUT_HEIGHT,
        help=f"Layout height (default: {config.DEFAULT_LAYOUT_HEIGHT:g})",
    )
    parser.add_argument(
        "--min-room-width",
        type=float,
        default=config.DEFAULT_MIN_ROOM_WIDTH,
        help=f"Minimum room width (default: {config.DEFAULT_MIN_ROOM_WIDTH:g})",
    )
    parser.add_argument(
        "--min-room-height",
        type=float,
        default=config.DEFAULT_MIN_ROOM_HEIGHT,
        help=f"Minimum room height (default: {config.DEFAULT_MIN_ROOM_HEIGHT:g})",
    )
    parser.add_argument(
        "--seed", type=_parse_seed, default=None, help="Master seed (int or string)"
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Print the tile grid and its legend instead of JSON",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    space = Rect(args.x, args.y, args.width, args.height)
    try:
        generator = BSPGenerator(
            space, args.min_room_width, args.min_room_height, seed=args.seed
        )
        layout = generator.generate()
    except LayoutGenerationError as e:
        logger.error(f"Layout generation failed: {e}")
        return 2

    if args.ascii:
        print("\n".join(to_glyph_lines(layout.tiles)))
        print()
        print(glyph_legend(layout.tiles))
    else:
        print(json.dumps([room.to_dict() for room in layout.rooms], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
