"""
Event Topics for the tiler layout engine

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Layout commands (imperative - tell the layout manager to do something)
CMD_CYCLE_LAYOUT = "cmd.cycle_layout"
"""Command: Cycle to next layout."""

CMD_CYCLE_LAYOUT_REVERSE = "cmd.cycle_layout_reverse"
"""Command: Cycle to previous layout."""

CMD_SET_LAYOUT = "cmd.set_layout"
"""Command: Switch to a named layout. Requires layout_name parameter."""

# Layout notifications
LAYOUT_CHANGED = "layout.changed"
"""Published when the active layout changes (e.g., tile → grid → monocle).
Params: layout_name"""

LAYOUT_APPLIED = "layout.applied"
"""Published after a layout was calculated and applied to a host.
Params: layout_name, commands"""
