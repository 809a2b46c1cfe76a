"""List panel rendering for the log group browser.

Renders a BrowserState as a Rich Group of single-line Text rows: title,
filter line, the current page of items, pagination status and key help.
"""

from typing import List

from rich.console import Group
from rich.text import Text

from .browser_state import BrowserMode, BrowserState
from .styles import DEFAULT_STYLES, ListStyles


class ListPanel:
    """Renders the browser state as Rich renderables."""

    HELP = {
        BrowserMode.BROWSING: "↑/k up • ↓/j down • ←/→ page • / filter • q quit",
        BrowserMode.FILTERING: "type to filter • ↑/↓ move • enter/esc done • ctrl+u clear",
    }
    FILTERED_HELP = "↑/k up • ↓/j down • / edit filter • esc clear filter • q quit"

    def __init__(self, title: str, styles: ListStyles = DEFAULT_STYLES):
        self._title = title
        self._styles = styles

    def _filter_line(self, state: BrowserState) -> Text:
        styles = self._styles
        if state.mode == BrowserMode.FILTERING:
            line = Text("Filter: ", style=styles.filter_prompt)
            line.append(state.filter_text, style=styles.filter_text)
            line.append("█", style=styles.filter_prompt)
            return line
        if state.filter_applied:
            line = Text("Filter: ", style=styles.filter_prompt)
            line.append(state.filter_text, style=styles.filter_text)
            return line
        return Text("")

    def _item_rows(self, state: BrowserState) -> List[Text]:
        if not state.visible:
            message = "No matches" if state.filter_applied else "No log groups"
            return [Text(" " * self._styles.item_indent + message, style=self._styles.status)]

        start, end, _, _ = state.page_bounds()
        rows = []
        for position in range(start, end):
            item = state.items[state.visible[position]]
            rows.append(item.render(position + 1, position == state.cursor, self._styles))
        return rows

    def _pagination_line(self, state: BrowserState) -> Text:
        _, _, page, total_pages = state.page_bounds()
        total = len(state.items)
        shown = len(state.visible)
        if state.filter_applied:
            count = f"{shown} of {total} items"
        else:
            count = f"{total} item" if total == 1 else f"{total} items"
        if total_pages > 1:
            status = f"page {page}/{total_pages} · {count}"
        else:
            status = count
        return Text(" " * self._styles.item_indent + status, style=self._styles.pagination)

    def _help_line(self, state: BrowserState) -> Text:
        if state.mode == BrowserMode.BROWSING and state.filter_applied:
            text = self.FILTERED_HELP
        else:
            text = self.HELP.get(state.mode, "")
        return Text(" " * self._styles.item_indent + text, style=self._styles.help)

    def render_lines(self, state: BrowserState) -> List[Text]:
        """Build the screen as a list of lines cropped to the terminal width."""
        lines = [
            Text("  " + self._title, style=self._styles.title),
            self._filter_line(state),
            *self._item_rows(state),
            Text(""),
            self._pagination_line(state),
            self._help_line(state),
        ]
        for line in lines:
            line.no_wrap = True
            line.truncate(state.width, overflow="ellipsis")
        return lines

    def render(self, state: BrowserState) -> Group:
        """Render the full list view for the given state."""
        return Group(*self.render_lines(state))
