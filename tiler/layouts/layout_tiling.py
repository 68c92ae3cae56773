"""
Tiling Layout

Master-stack tiling with the stack to the right ("tile") or along the
bottom ("wide").

    tile, 4 windows           wide, 4 windows
    +----------+----------+   +---------------------+
    |          |          |   |                     |
    |          +----------+   |                     |
    |          |          |   +------+-------+------+
    |          +----------+   |      |       |      |
    |          |          |   |      |       |      |
    +----------+----------+   +------+-------+------+
"""

from __future__ import annotations
from typing import Hashable, List, Sequence

from .layout_base import Layout, LayoutDirection
from ..commands import PlacementCommand, place
from ..geometry import Rect, ScreenRect, divide_floor, split_span


class MasterStackLayout(Layout):
    """
    Master-stack tiling layout.

    The first window takes half the screen, the remaining windows split the
    other half into equal slices.
    """

    def __init__(
        self,
        direction: LayoutDirection = LayoutDirection.HORIZONTAL,
        absorb_remainder: bool = True,
    ):
        self.direction = direction
        # When False the last slice keeps the floored size and up to
        # (stack count - 1) pixels at the end of the stack stay unassigned.
        self.absorb_remainder = absorb_remainder

    @property
    def name(self) -> str:
        if self.direction == LayoutDirection.HORIZONTAL:
            return "tile"
        return "wide"

    def calculate(
        self, windows: Sequence[Hashable], screen: ScreenRect
    ) -> List[PlacementCommand]:
        if not windows:
            return []

        master, stack = windows[0], windows[1:]

        if not stack:
            # Single window takes all space
            return place(master, Rect(0, 0, screen.width, screen.height))

        commands = []

        if self.direction == LayoutDirection.HORIZONTAL:
            half_width = divide_floor(screen.width, 2)
            stack_width = screen.width - half_width
            commands += place(master, Rect(0, 0, half_width, screen.height))

            slices = split_span(screen.height, len(stack), self.absorb_remainder)
            for win, (y, height) in zip(stack, slices):
                commands += place(win, Rect(half_width, y, stack_width, height))

        else:  # VERTICAL
            half_height = divide_floor(screen.height, 2)
            stack_height = screen.height - half_height
            commands += place(master, Rect(0, 0, screen.width, half_height))

            slices = split_span(screen.width, len(stack), self.absorb_remainder)
            for win, (x, width) in zip(stack, slices):
                commands += place(win, Rect(x, half_height, width, stack_height))

        return commands
