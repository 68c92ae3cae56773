"""
Layout Errors

Exceptions raised at the host boundary. The layout algorithms themselves
never raise for empty input.
"""


class LayoutError(Exception):
    """Base class for layout engine errors."""


class UnknownLayoutError(LayoutError, KeyError):
    """Raised when a layout name is not registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown layout: {self.name!r}"


class InvalidScreenError(LayoutError, ValueError):
    """Raised when the host reports a screen without positive dimensions."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Invalid screen dimensions: {width}x{height}")
        self.width = width
        self.height = height
