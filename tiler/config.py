"""
Layout Configuration
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .layouts import (
    GridLayout,
    LayoutDirection,
    LayoutRegistry,
    MasterStackLayout,
    MonocleLayout,
)

DEFAULT_LAYOUT_ORDER = ["tile", "monocle", "wide", "grid"]


def build_registry(absorb_remainder: bool = True) -> LayoutRegistry:
    """Build the registry of built-in layouts."""
    return LayoutRegistry(
        [
            MasterStackLayout(LayoutDirection.HORIZONTAL, absorb_remainder),
            MonocleLayout(),
            MasterStackLayout(LayoutDirection.VERTICAL, absorb_remainder),
            GridLayout(),
        ]
    )


@dataclass
class LayoutConfig:
    """Layout engine configuration."""

    # Layout active when the manager starts
    default_layout: str = "tile"

    # Cycle order for CMD_CYCLE_LAYOUT (defaults to all built-in layouts)
    layouts: Optional[List[str]] = None

    # Let the last stack slice absorb integer division leftovers
    absorb_remainder: bool = True

    # Print every bus event (also enabled by TILER_DEBUG)
    debug: bool = False

    def __post_init__(self):
        """Validate layout names."""
        order = self.layout_order()
        if not order:
            raise ValueError("Layout order must not be empty")

        unknown = [name for name in order if name not in DEFAULT_LAYOUT_ORDER]
        if unknown:
            raise ValueError(
                f"Unknown layouts: {', '.join(unknown)}. "
                f"Use one of {', '.join(DEFAULT_LAYOUT_ORDER)}"
            )

        if self.default_layout not in order:
            raise ValueError(
                f"Default layout {self.default_layout!r} is not in the layout order"
            )

    def layout_order(self) -> List[str]:
        """Get configured cycle order or the default order."""
        if self.layouts is not None:
            return list(self.layouts)
        return list(DEFAULT_LAYOUT_ORDER)

    def get_layouts(self) -> LayoutRegistry:
        """Build the layout registry for this configuration."""
        return build_registry(absorb_remainder=self.absorb_remainder)
