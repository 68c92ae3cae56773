"""
Placement Commands

Move, Resize and Hide are the whole contract between a layout and its host.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Optional, Union, TYPE_CHECKING

from .geometry import Rect

if TYPE_CHECKING:
    from .host import LayoutHost


@dataclass(frozen=True)
class Move:
    """Move a window so its top-left corner is at (x, y)."""

    window: Hashable
    x: int
    y: int

    def apply(self, host: "LayoutHost"):
        host.move(self.window, self.x, self.y)


@dataclass(frozen=True)
class Resize:
    """Resize a window."""

    window: Hashable
    width: int
    height: int

    def apply(self, host: "LayoutHost"):
        host.resize(self.window, self.width, self.height)


@dataclass(frozen=True)
class Hide:
    """Hide a window."""

    window: Hashable

    def apply(self, host: "LayoutHost"):
        host.hide(self.window)


PlacementCommand = Union[Move, Resize, Hide]


def place(window: Hashable, rect: Rect) -> List[PlacementCommand]:
    """Build the Move/Resize pair that puts a window at rect."""
    return [
        Move(window, rect.x, rect.y),
        Resize(window, rect.width, rect.height),
    ]


def apply_commands(commands: Iterable[PlacementCommand], host: "LayoutHost"):
    """Apply commands to the host in order."""
    for command in commands:
        command.apply(host)


def geometries(commands: Iterable[PlacementCommand]) -> Dict[Hashable, Optional[Rect]]:
    """
    Fold a command sequence into the final geometry of each window.

    Returns:
        Dictionary mapping windows to their rectangle, or None when hidden
    """
    positions: Dict[Hashable, tuple] = {}
    sizes: Dict[Hashable, tuple] = {}
    result: Dict[Hashable, Optional[Rect]] = {}

    for command in commands:
        if isinstance(command, Hide):
            positions.pop(command.window, None)
            sizes.pop(command.window, None)
            result[command.window] = None
            continue

        if isinstance(command, Move):
            positions[command.window] = (command.x, command.y)
        else:
            sizes[command.window] = (command.width, command.height)

        window = command.window
        if window in positions and window in sizes:
            x, y = positions[window]
            width, height = sizes[window]
            result[window] = Rect(x, y, width, height)

    return result
