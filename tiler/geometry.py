"""
Geometry Primitives

Screen and window rectangles plus the integer division helpers shared by
every layout. All pixel math goes through divide_floor so the layouts agree
on rounding.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class ScreenRect:
    """Screen dimensions in pixels."""

    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    """Position and size of a placed window."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def overlaps(self, other: "Rect") -> bool:
        """Check if two rectangles share at least one pixel."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


def divide_floor(total: int, parts: int) -> int:
    """Integer-floor division, treating zero parts as one."""
    return total // max(parts, 1)


def split_span(
    total: int, parts: int, absorb_remainder: bool = True
) -> List[Tuple[int, int]]:
    """
    Split a span into equal slices.

    Args:
        total: Length of the span in pixels
        parts: Number of slices
        absorb_remainder: Give the pixels lost to flooring to the last slice

    Returns:
        List of (offset, size) pairs, one per slice
    """
    size = divide_floor(total, parts)
    slices = [(i * size, size) for i in range(parts)]
    if absorb_remainder and slices:
        offset, last = slices[-1]
        slices[-1] = (offset, last + total - size * parts)
    return slices
