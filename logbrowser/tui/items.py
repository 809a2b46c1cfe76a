"""List item types for the browser.

The browser only depends on the Renderable protocol; LogGroupItem is the
concrete variant used for CloudWatch log group names.
"""

from dataclasses import dataclass
from typing import Iterable, Protocol, Tuple, runtime_checkable

from rich.text import Text

from .styles import ListStyles


@runtime_checkable
class Renderable(Protocol):
    """An item the browser can filter and draw on a single line."""

    def filter_value(self) -> str:
        """Text matched against the filter."""
        ...

    def render(self, ordinal: int, highlighted: bool, styles: ListStyles) -> Text:
        """Render the item as one row.

        Args:
            ordinal: 1-based position of the item in the visible list.
            highlighted: Whether the item is under the cursor.
            styles: Styles to render with.
        """
        ...


@dataclass(frozen=True)
class LogGroupItem:
    """A log group name shown as ``N. name``."""

    name: str

    def filter_value(self) -> str:
        return self.name

    def render(self, ordinal: int, highlighted: bool, styles: ListStyles) -> Text:
        label = f"{ordinal}. {self.name}"
        if highlighted:
            return Text(
                " " * styles.selected_indent + styles.cursor_marker + label,
                style=styles.selected_item,
            )
        return Text(" " * styles.item_indent + label, style=styles.item)

    def __str__(self) -> str:
        return self.name


def log_group_items(names: Iterable[str]) -> Tuple[LogGroupItem, ...]:
    """Wrap fetched names as list items, keeping order and duplicates."""
    return tuple(LogGroupItem(name) for name in names)
