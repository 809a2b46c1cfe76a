"""Full-screen TUI for browsing log groups.

A prompt_toolkit Application drives a pure reducer over BrowserState;
the list is rendered with Rich.
"""

from .browser_state import (
    BrowserMode,
    BrowserState,
    Effect,
    KeyPress,
    Paste,
    Resize,
    reduce,
    filter_indices,
)
from .items import LogGroupItem, Renderable, log_group_items
from .styles import ListStyles, DEFAULT_STYLES
from .list_panel import ListPanel
from .pt_display import PTDisplay

__all__ = [
    "BrowserMode",
    "BrowserState",
    "Effect",
    "KeyPress",
    "Paste",
    "Resize",
    "reduce",
    "filter_indices",
    "LogGroupItem",
    "Renderable",
    "log_group_items",
    "ListStyles",
    "DEFAULT_STYLES",
    "ListPanel",
    "PTDisplay",
]
