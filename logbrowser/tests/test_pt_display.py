"""Tests for the prompt_toolkit display."""

import os
from unittest.mock import patch

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.key_binding.key_processor import KeyPress as PTKeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import DummyOutput
from rich.text import Text

from logbrowser.errors import TerminalSessionError
from logbrowser.tui.browser_state import BrowserMode, BrowserState, Effect, KeyPress, Paste
from logbrowser.tui.items import log_group_items
from logbrowser.tui.list_panel import ListPanel
from logbrowser.tui.pt_display import PTDisplay, RichRenderer, normalize_key, to_event


SAMPLE = ["/aws/lambda/a", "/aws/lambda/b", "/ecs/service/c"]


def make_state(names=SAMPLE) -> BrowserState:
    return BrowserState.initial(log_group_items(names), width=80, height=24)


def run_with_keys(text: str, names=SAMPLE) -> BrowserState:
    """Run the display against piped key input until it exits."""
    with create_pipe_input() as pipe_input:
        pipe_input.send_text(text)
        display = PTDisplay(
            make_state(names),
            ListPanel("Log Groups"),
            input=pipe_input,
            output=DummyOutput(),
        )
        return display.run()


class TestNormalizeKey:
    """Tests for normalize_key()."""

    @pytest.mark.parametrize("key_press, expected", [
        (PTKeyPress("q", "q"), "q"),
        (PTKeyPress("/", "/"), "/"),
        (PTKeyPress(Keys.Up, "\x1b[A"), "up"),
        (PTKeyPress(Keys.PageDown, "\x1b[6~"), "pagedown"),
        (PTKeyPress(Keys.Escape, "\x1b"), "escape"),
        (PTKeyPress(Keys.ControlM, "\r"), "enter"),
        (PTKeyPress(Keys.ControlJ, "\n"), "enter"),
        (PTKeyPress(Keys.ControlH, "\x7f"), "backspace"),
        (PTKeyPress(Keys.ControlC, "\x03"), "c-c"),
        (PTKeyPress(Keys.ControlU, "\x15"), "c-u"),
    ])
    def test_key_names(self, key_press, expected):
        assert normalize_key(key_press) == expected


class TestToEvent:
    """Tests for to_event()."""

    def test_key_press(self):
        assert to_event(PTKeyPress(Keys.Down, "\x1b[B")) == KeyPress("down")

    def test_bracketed_paste_carries_text(self):
        assert to_event(PTKeyPress(Keys.BracketedPaste, "lambda")) == Paste("lambda")


class TestRichRenderer:
    """Tests for RichRenderer."""

    def test_render_to_ansi(self):
        renderer = RichRenderer(width=40)

        output = renderer.render(Text("hello", style="bold"))

        assert "hello" in output
        assert "\x1b[" in output

    def test_set_width(self):
        renderer = RichRenderer()
        renderer.set_width(120)

        assert renderer.width == 120


class TestPTDisplay:
    """Tests for PTDisplay."""

    def test_quit_key_exits(self):
        state = run_with_keys("q")

        assert state.mode == BrowserMode.EXITED

    def test_quit_with_empty_collection(self):
        state = run_with_keys("q", names=[])

        assert state.mode == BrowserMode.EXITED
        assert state.cursor is None

    def test_movement_then_quit(self):
        state = run_with_keys("jjkq")

        assert state.mode == BrowserMode.EXITED
        assert state.cursor == 1

    def test_filter_then_quit(self):
        state = run_with_keys("/lambda\rq")

        assert state.mode == BrowserMode.EXITED
        assert state.filter_text == "lambda"
        assert [item.name for item in state.visible_items] == ["/aws/lambda/a", "/aws/lambda/b"]

    def test_pasted_text_filters(self):
        state = run_with_keys("/\x1b[200~lambda\x1b[201~\rq")

        assert state.mode == BrowserMode.EXITED
        assert state.filter_text == "lambda"
        assert [item.name for item in state.visible_items] == ["/aws/lambda/a", "/aws/lambda/b"]

    def test_ctrl_c_exits_while_filtering(self):
        state = run_with_keys("/ec\x03")

        assert state.mode == BrowserMode.EXITED
        assert state.filter_text == "ec"

    def test_dispatch_updates_state(self):
        with create_pipe_input() as pipe_input:
            display = PTDisplay(make_state(), ListPanel("t"), input=pipe_input, output=DummyOutput())
            effect = display.dispatch(KeyPress("down"))

        assert effect == Effect.REDRAW
        assert display.state.cursor == 1

    def test_resize_is_detected_on_redraw(self):
        with create_pipe_input() as pipe_input:
            display = PTDisplay(make_state(), ListPanel("t"), input=pipe_input, output=DummyOutput())
            display.dispatch(KeyPress("down"))

        with patch(
            "logbrowser.tui.pt_display.shutil.get_terminal_size",
            return_value=os.terminal_size((100, 30)),
        ):
            display._get_list_content()

        assert (display.state.width, display.state.height) == (100, 30)
        assert display.state.cursor == 1

    def test_start_requires_terminal(self):
        with patch("logbrowser.tui.pt_display.Application"):
            display = PTDisplay(make_state(), ListPanel("t"))

        with patch("logbrowser.tui.pt_display.sys.stdout") as stdout:
            stdout.isatty.return_value = False
            with pytest.raises(TerminalSessionError):
                display.start()
