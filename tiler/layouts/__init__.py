"""
Layout System

Provides window layout algorithms and management.
"""

from .layout_base import (
    Layout,
    LayoutDirection,
    LayoutRegistry,
    LayoutManager,
)
from .layout_tiling import MasterStackLayout
from .layout_monocle import MonocleLayout
from .layout_grid import GridLayout, grid_shape

__all__ = [
    # Base classes
    "Layout",
    "LayoutDirection",
    "LayoutRegistry",
    "LayoutManager",
    # Layout implementations
    "MasterStackLayout",
    "MonocleLayout",
    "GridLayout",
    "grid_shape",
]
