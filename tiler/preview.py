"""
Layout Preview

Prints the placement commands a layout produces for a number of windows.

Usage:
    python -m tiler LAYOUT COUNT [--screen WIDTHxHEIGHT] [--no-absorb]
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .commands import Hide, Move, Resize
from .config import LayoutConfig
from .errors import LayoutError
from .geometry import ScreenRect
from .layouts import LayoutManager


def parse_screen(value: str) -> ScreenRect:
    """Parse a WIDTHxHEIGHT string into a ScreenRect."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid screen: {value}. Use WIDTHxHEIGHT, e.g. 1920x1080"
        ) from None
    return ScreenRect(width, height)


def format_command(command) -> str:
    """Render one command as a line of text."""
    if isinstance(command, Move):
        return f"move   {command.window} {command.x} {command.y}"
    if isinstance(command, Resize):
        return f"resize {command.window} {command.width} {command.height}"
    if isinstance(command, Hide):
        return f"hide   {command.window}"
    raise TypeError(f"Unknown command: {command!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiler", description="Preview tiling layout placements"
    )
    parser.add_argument("layout", help="Layout name (tile, monocle, wide, grid)")
    parser.add_argument("count", type=int, help="Number of windows")
    parser.add_argument(
        "--screen",
        type=parse_screen,
        default=ScreenRect(1920, 1080),
        help="Screen size as WIDTHxHEIGHT (default: 1920x1080)",
    )
    parser.add_argument(
        "--no-absorb",
        action="store_true",
        help="Leave stack remainder pixels unassigned in tile/wide",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    from pubsub import pub

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.count < 0:
        parser.error("count must not be negative")

    config = LayoutConfig(absorb_remainder=not args.no_absorb)
    manager = LayoutManager(bus=pub, config=config)
    windows = [f"w{i}" for i in range(args.count)]

    try:
        manager.set_layout(args.layout)
        commands = manager.calculate(windows, args.screen)
    except LayoutError as e:
        print(f"tiler: error: {e}", file=sys.stderr)
        return 2

    for command in commands:
        print(format_command(command))
    return 0
