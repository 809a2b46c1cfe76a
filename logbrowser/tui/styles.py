"""Style configuration for the log group list.

Styles are plain Rich style strings bundled in an immutable value that is
handed to the renderer when it is constructed.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ListStyles:
    """Rich styles used when rendering the list view."""

    title: str = "bold"
    item: str = ""
    selected_item: str = "color(170)"
    filter_prompt: str = "color(205)"
    filter_text: str = "bold"
    pagination: str = "dim"
    help: str = "color(241)"
    status: str = "dim italic"
    error: str = "color(9)"

    # Left padding, in columns, of non-highlighted rows. The highlighted row
    # replaces part of it with the cursor marker.
    item_indent: int = 4
    selected_indent: int = 2
    cursor_marker: str = "> "


DEFAULT_STYLES = ListStyles()
