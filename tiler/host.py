"""
Layout Host

The surface a window manager exposes to the layout engine.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Hashable, Sequence

from .geometry import ScreenRect


class LayoutHost(ABC):
    """
    Abstract window-management surface.

    The host owns the window set and the screen. Layouts read a snapshot of
    both and push placement commands back through move, resize and hide.
    """

    @abstractmethod
    def visible_windows(self) -> Sequence[Hashable]:
        """
        Get the visible, non-floating windows in stacking order.

        The first window is the master.
        """
        pass

    @abstractmethod
    def screen_dimensions(self) -> ScreenRect:
        """Get the current screen size in pixels."""
        pass

    @abstractmethod
    def move(self, window: Hashable, x: int, y: int):
        """Move a window to a position."""
        pass

    @abstractmethod
    def resize(self, window: Hashable, width: int, height: int):
        """Resize a window."""
        pass

    @abstractmethod
    def hide(self, window: Hashable):
        """Hide a window."""
        pass
