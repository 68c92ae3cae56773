"""
Window Layout Base Classes

Provides the Layout interface, the layout registry and the layout manager
that dispatches to the active layout on behalf of a host.
"""

from __future__ import annotations
import os
import time
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum, auto
from typing import Dict, Hashable, Iterator, List, Optional, Sequence, TYPE_CHECKING

from pubsub import pub

from ..commands import PlacementCommand, apply_commands
from ..errors import InvalidScreenError, UnknownLayoutError
from ..geometry import ScreenRect

if TYPE_CHECKING:
    from ..config import LayoutConfig
    from ..host import LayoutHost


class LayoutDirection(Enum):
    """Split direction for master-stack layouts."""

    HORIZONTAL = auto()  # Master on the left, stack on the right
    VERTICAL = auto()  # Master on top, stack along the bottom


class Layout(ABC):
    """Abstract base class for window layouts."""

    @abstractmethod
    def calculate(
        self, windows: Sequence[Hashable], screen: ScreenRect
    ) -> List[PlacementCommand]:
        """
        Calculate placement commands for the windows.

        Args:
            windows: Visible windows in stacking order, master first
            screen: Screen dimensions

        Returns:
            List of Move/Resize/Hide commands, empty when there are no windows
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout name used for registry lookup."""
        pass

    def arrange(self, host: "LayoutHost") -> List[PlacementCommand]:
        """Lay out the host's visible windows and apply the result."""
        commands = self.calculate(
            list(host.visible_windows()), host.screen_dimensions()
        )
        apply_commands(commands, host)
        return commands


class LayoutRegistry(Mapping):
    """
    Read-only mapping of layout names to layouts.

    Built once and handed to whoever dispatches layouts. Iteration follows
    registration order.
    """

    def __init__(self, layouts: Sequence[Layout]):
        self._layouts: Dict[str, Layout] = {}
        for layout in layouts:
            if layout.name in self._layouts:
                raise ValueError(f"Duplicate layout name: {layout.name}")
            self._layouts[layout.name] = layout

    def __getitem__(self, name: str) -> Layout:
        try:
            return self._layouts[name]
        except KeyError:
            raise UnknownLayoutError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._layouts)

    def __len__(self) -> int:
        return len(self._layouts)

    def names(self) -> List[str]:
        """Layout names in registration order."""
        return list(self._layouts)

    def __repr__(self):
        return f"LayoutRegistry({self.names()!r})"


def _layout_changed_proto(layout_name):
    pass


def _layout_applied_proto(layout_name, commands):
    pass


class LayoutManager:
    """
    Dispatches layout calculations to the active layout.

    This component subscribes to layout command events and publishes
    LAYOUT_CHANGED and LAYOUT_APPLIED events.

    Responsibilities:
    - Track the active layout
    - CMD_CYCLE_LAYOUT: Cycle through configured layouts
    - CMD_CYCLE_LAYOUT_REVERSE: Cycle layouts in reverse
    - CMD_SET_LAYOUT: Switch to a named layout
    - Reject screens without positive dimensions before any layout runs
    """

    def __init__(
        self,
        bus,
        registry: Optional[LayoutRegistry] = None,
        config: Optional["LayoutConfig"] = None,
    ):
        from ..config import LayoutConfig

        self.bus = bus
        self.config = config or LayoutConfig()
        self.registry = registry if registry is not None else self.config.get_layouts()

        self.order: List[str] = self.config.layout_order()
        for name in self.order:
            if name not in self.registry:
                raise UnknownLayoutError(name)
        self.current: str = self.registry[self.config.default_layout].name

        # Setup debug event logging if enabled
        if self.config.debug or os.getenv("TILER_DEBUG"):
            self.bus.subscribe(self.debug_event_logger, self.bus.ALL_TOPICS)

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Declare published topics and subscribe to layout command events."""
        from .. import topics

        # Fix the message data of published topics before anyone listens
        topic_mgr = self.bus.getDefaultTopicMgr()
        topic_mgr.getOrCreateTopic(topics.LAYOUT_CHANGED, _layout_changed_proto)
        topic_mgr.getOrCreateTopic(topics.LAYOUT_APPLIED, _layout_applied_proto)

        self.bus.subscribe(self._on_cycle_layout, topics.CMD_CYCLE_LAYOUT)
        self.bus.subscribe(
            self._on_cycle_layout_reverse, topics.CMD_CYCLE_LAYOUT_REVERSE
        )
        self.bus.subscribe(self._on_set_layout, topics.CMD_SET_LAYOUT)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")

    @property
    def layout(self) -> Layout:
        """The active layout."""
        return self.registry[self.current]

    def set_layout(self, name: str):
        """Switch to a layout by name."""
        from .. import topics

        layout = self.registry[name]
        if layout.name == self.current:
            return
        self.current = layout.name
        self.bus.sendMessage(topics.LAYOUT_CHANGED, layout_name=self.current)

    def cycle_layout(self, direction: int = 1):
        """Cycle through the configured layouts."""
        if self.current not in self.order:
            # Active layout was picked by name outside the cycle
            self.set_layout(self.order[0] if direction > 0 else self.order[-1])
            return

        current_idx = self.order.index(self.current)
        new_idx = (current_idx + direction) % len(self.order)
        self.set_layout(self.order[new_idx])

    def calculate(
        self, windows: Sequence[Hashable], screen: ScreenRect
    ) -> List[PlacementCommand]:
        """Calculate placement commands with the active layout."""
        if screen.width <= 0 or screen.height <= 0:
            raise InvalidScreenError(screen.width, screen.height)
        return self.layout.calculate(list(windows), screen)

    def arrange(self, host: "LayoutHost") -> List[PlacementCommand]:
        """Lay out the host's visible windows and apply the result."""
        from .. import topics

        commands = self.calculate(host.visible_windows(), host.screen_dimensions())
        apply_commands(commands, host)
        self.bus.sendMessage(
            topics.LAYOUT_APPLIED, layout_name=self.current, commands=commands
        )
        return commands

    # Command event handlers
    def _on_cycle_layout(self):
        """Handle CMD_CYCLE_LAYOUT command."""
        self.cycle_layout(direction=1)

    def _on_cycle_layout_reverse(self):
        """Handle CMD_CYCLE_LAYOUT_REVERSE command."""
        self.cycle_layout(direction=-1)

    def _on_set_layout(self, layout_name):
        """Handle CMD_SET_LAYOUT command."""
        self.set_layout(layout_name)
