"""Tests for list item and list panel rendering."""

from io import StringIO

from rich.console import Console

from logbrowser.tui.browser_state import CHROME_LINES, BrowserState, KeyPress, reduce
from logbrowser.tui.items import LogGroupItem, Renderable, log_group_items
from logbrowser.tui.list_panel import ListPanel
from logbrowser.tui.styles import DEFAULT_STYLES, ListStyles


SAMPLE = ["/aws/lambda/a", "/aws/lambda/b", "/ecs/service/c"]


def make_state(names=SAMPLE, width=80, height=24) -> BrowserState:
    return BrowserState.initial(log_group_items(names), width=width, height=height)


def plain_lines(panel: ListPanel, state: BrowserState):
    return [line.plain for line in panel.render_lines(state)]


def press(state: BrowserState, *keys: str) -> BrowserState:
    for key in keys:
        state, _ = reduce(state, KeyPress(key))
    return state


class TestLogGroupItem:
    """Tests for LogGroupItem."""

    def test_implements_renderable(self):
        assert isinstance(LogGroupItem("/a"), Renderable)

    def test_filter_value_is_name(self):
        assert LogGroupItem("/aws/lambda/a").filter_value() == "/aws/lambda/a"

    def test_render_plain_row(self):
        row = LogGroupItem("/aws/lambda/a").render(1, False, DEFAULT_STYLES)

        assert row.plain == "    1. /aws/lambda/a"

    def test_render_highlighted_row(self):
        row = LogGroupItem("/aws/lambda/a").render(3, True, DEFAULT_STYLES)

        assert row.plain == "  > 3. /aws/lambda/a"
        assert row.style == DEFAULT_STYLES.selected_item

    def test_render_uses_given_styles(self):
        styles = ListStyles(selected_item="bold red", cursor_marker="* ")

        row = LogGroupItem("/x").render(1, True, styles)

        assert row.plain == "  * 1. /x"
        assert row.style == "bold red"


class TestListPanel:
    """Tests for ListPanel.render_lines()."""

    def test_rows_have_ordinals_and_highlight(self):
        lines = plain_lines(ListPanel("Log Groups"), make_state())

        assert lines[0] == "  Log Groups"
        assert lines[1] == ""
        assert lines[2:5] == [
            "  > 1. /aws/lambda/a",
            "    2. /aws/lambda/b",
            "    3. /ecs/service/c",
        ]
        assert lines[6] == "    3 items"

    def test_highlight_follows_cursor(self):
        lines = plain_lines(ListPanel("t"), press(make_state(), "down"))

        assert lines[2] == "    1. /aws/lambda/a"
        assert lines[3] == "  > 2. /aws/lambda/b"

    def test_ordinals_are_positions_in_filtered_list(self):
        state = press(make_state(), "/", "e", "c", "s")

        lines = plain_lines(ListPanel("t"), state)

        assert lines[1] == "Filter: ecs█"
        assert lines[2] == "  > 1. /ecs/service/c"
        assert lines[4] == "    1 of 3 items"

    def test_applied_filter_is_shown_in_browse_mode(self):
        state = press(make_state(), "/", "l", "a", "enter")

        lines = plain_lines(ListPanel("t"), state)

        assert lines[1] == "Filter: la"
        assert "esc clear filter" in lines[-1]

    def test_empty_collection(self):
        lines = plain_lines(ListPanel("t"), make_state([]))

        assert lines[2] == "    No log groups"
        assert not any(">" in line for line in lines)
        assert lines[4] == "    0 items"

    def test_no_matches(self):
        state = press(make_state(), "/", "z", "z")

        lines = plain_lines(ListPanel("t"), state)

        assert lines[2] == "    No matches"
        assert lines[4] == "    0 of 3 items"

    def test_long_list_is_paginated(self):
        names = [f"/group/{i:02d}" for i in range(25)]
        state = make_state(names, height=CHROME_LINES + 10)

        lines = plain_lines(ListPanel("t"), state)
        assert len(lines) == CHROME_LINES + 10
        assert lines[2] == "  > 1. /group/00"
        assert lines[11] == "    10. /group/09"
        assert lines[-2] == "    page 1/3 · 25 items"

        lines = plain_lines(ListPanel("t"), press(state, "end"))
        assert lines[2] == "    21. /group/20"
        assert lines[6] == "  > 25. /group/24"
        assert lines[-2] == "    page 3/3 · 25 items"

    def test_rows_are_cropped_to_width(self):
        state = make_state(["/aws/lambda/" + "x" * 100], width=30)

        for line in ListPanel("t").render_lines(state):
            assert len(line.plain) <= 30

    def test_render_group_prints(self):
        console = Console(file=StringIO(), width=60, color_system=None)

        with console.capture() as capture:
            console.print(ListPanel("Log Groups").render(make_state()))

        output = capture.get()
        assert "> 1. /aws/lambda/a" in output
        assert "3. /ecs/service/c" in output
