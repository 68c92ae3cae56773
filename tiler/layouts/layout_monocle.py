"""
Monocle Layout

The master window fills the screen, every other window is hidden.
"""

from __future__ import annotations
from typing import Hashable, List, Sequence

from .layout_base import Layout
from ..commands import Hide, PlacementCommand, place
from ..geometry import Rect, ScreenRect


class MonocleLayout(Layout):
    """
    Monocle layout - one window full size.

    Only the first window is shown.
    """

    @property
    def name(self) -> str:
        return "monocle"

    def calculate(
        self, windows: Sequence[Hashable], screen: ScreenRect
    ) -> List[PlacementCommand]:
        if not windows:
            return []

        commands = place(windows[0], Rect(0, 0, screen.width, screen.height))
        commands += [Hide(win) for win in windows[1:]]
        return commands
