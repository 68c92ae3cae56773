"""
tiler

Layout engine for tiling window managers.

Given the visible windows in stacking order and the screen size, a layout
produces Move/Resize/Hide commands for the host to apply. Built-in layouts:
tile (master-stack), monocle (fullscreen), wide (bottom stack) and grid.

Example usage:
    from tiler import build_registry, ScreenRect

    registry = build_registry()
    commands = registry["grid"].calculate(["a", "b", "c"], ScreenRect(1000, 800))

Or preview a layout from the shell:
    python -m tiler grid 5 --screen 1000x800
"""

__version__ = "0.1.0"

from .geometry import ScreenRect, Rect, divide_floor, split_span

from .commands import (
    Move,
    Resize,
    Hide,
    PlacementCommand,
    apply_commands,
    geometries,
)

from .errors import LayoutError, UnknownLayoutError, InvalidScreenError

from .host import LayoutHost

from .layouts import (
    Layout,
    LayoutDirection,
    LayoutRegistry,
    LayoutManager,
    MasterStackLayout,
    MonocleLayout,
    GridLayout,
    grid_shape,
)

from .config import LayoutConfig, build_registry

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "ScreenRect",
    "Rect",
    "divide_floor",
    "split_span",
    # Commands
    "Move",
    "Resize",
    "Hide",
    "PlacementCommand",
    "apply_commands",
    "geometries",
    # Errors
    "LayoutError",
    "UnknownLayoutError",
    "InvalidScreenError",
    # Host
    "LayoutHost",
    # Layouts
    "Layout",
    "LayoutDirection",
    "LayoutRegistry",
    "LayoutManager",
    "MasterStackLayout",
    "MonocleLayout",
    "GridLayout",
    "grid_shape",
    # Configuration
    "LayoutConfig",
    "build_registry",
    # Event topics
    "topics",
]
