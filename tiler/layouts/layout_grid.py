"""
Grid Layout

Windows packed into a near-square grid. A partial last row is stretched to
fill the screen width.

    3 windows                 5 windows
    +----------+----------+   +------+-------+------+
    |          |          |   |      |       |      |
    |          |          |   |      |       |      |
    +----------+----------+   +------+---+---+------+
    |                     |   |          |          |
    |                     |   |          |          |
    +---------------------+   +----------+----------+
"""

from __future__ import annotations
from typing import Hashable, List, Sequence, Tuple

from .layout_base import Layout
from ..commands import PlacementCommand, place
from ..geometry import Rect, ScreenRect, split_span


def grid_shape(count: int) -> Tuple[int, int]:
    """
    Pick the grid dimensions for a number of windows.

    Columns are the smallest square that fits every window. One row fewer
    is used when it still fits, so the grid never ends in an empty row.

    Returns:
        (rows, cols), both 0 when there are no windows
    """
    cols = 0
    while cols * cols < count:
        cols += 1
    rows = cols - 1 if cols and (cols - 1) * cols >= count else cols
    return rows, cols


class GridLayout(Layout):
    """
    Grid layout - windows arranged row-major in a balanced grid.

    Integer division leftovers go to the last column of each row and to the
    last row, so the cells cover the screen exactly.
    """

    @property
    def name(self) -> str:
        return "grid"

    def calculate(
        self, windows: Sequence[Hashable], screen: ScreenRect
    ) -> List[PlacementCommand]:
        if not windows:
            return []

        n = len(windows)
        rows, cols = grid_shape(n)
        rows, cols = max(rows, 1), max(cols, 1)

        row_spans = split_span(screen.height, rows)
        col_spans = split_span(screen.width, cols)

        # The last row may hold fewer than cols windows; those share the
        # full width between them.
        last_row_start = cols * (rows - 1)
        last_row_spans = split_span(screen.width, n - last_row_start)

        commands = []
        for i, win in enumerate(windows):
            row, col = divmod(i, cols)
            y, height = row_spans[row]
            if i >= last_row_start:
                x, width = last_row_spans[col]
            else:
                x, width = col_spans[col]
            commands += place(win, Rect(x, y, width, height))

        return commands
