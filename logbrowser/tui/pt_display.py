"""Full-screen display for the log group browser.

Uses a prompt_toolkit Application for the alternate screen, the event loop
and key decoding. The list itself is rendered with Rich to an ANSI string
and shown in a FormattedTextControl via prompt_toolkit's ANSI() wrapper.

Every key press is turned into a KeyPress event (a bracketed paste into a
single Paste event) and passed through the browser reducer; a terminal
size change seen at redraw time becomes a Resize event.
"""

import logging
import shutil
import sys
from io import StringIO
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI, to_formatted_text
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPress as PTKeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout.containers import HSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.layout import Layout

from rich.console import Console

from ..errors import TerminalSessionError
from .browser_state import BrowserState, Effect, Event, KeyPress, Paste, Resize, reduce
from .list_panel import ListPanel

logger = logging.getLogger(__name__)

# Named keys bound explicitly, along with bracketed paste; everything else
# arrives through Keys.Any.
BOUND_KEYS = (
    "up", "down", "left", "right", "pageup", "pagedown", "home", "end",
    "escape", "enter", "c-j", "backspace", "c-c", "c-u",
)

KEY_ALIASES = {
    Keys.ControlM: "enter",
    Keys.ControlJ: "enter",
    Keys.ControlH: "backspace",
}


def normalize_key(key_press: PTKeyPress) -> str:
    """Map a prompt_toolkit key press to the reducer's key name."""
    key = key_press.key
    if isinstance(key, Keys):
        return KEY_ALIASES.get(key, key.value)
    return key_press.data or key


def to_event(key_press: PTKeyPress) -> Event:
    """Turn a prompt_toolkit key press into a reducer event."""
    if key_press.key == Keys.BracketedPaste:
        return Paste(key_press.data)
    return KeyPress(normalize_key(key_press))


class RichRenderer:
    """Renders Rich content to ANSI strings for prompt_toolkit."""

    def __init__(self, width: int = 80):
        self._width = width

    def set_width(self, width: int) -> None:
        self._width = width

    @property
    def width(self) -> int:
        return self._width

    def render(self, renderable) -> str:
        """Render a Rich object to ANSI string."""
        buffer = StringIO()
        console = Console(
            file=buffer,
            width=self._width,
            force_terminal=True,
            color_system="truecolor",
        )
        console.print(renderable, end="")
        return buffer.getvalue()


class PTDisplay:
    """Full-screen list browser built on a prompt_toolkit Application.

    The display owns the current BrowserState and replaces it on every
    event. ``run()`` blocks until the reducer asks to quit and returns the
    final state.
    """

    def __init__(self, state: BrowserState, panel: ListPanel, input=None, output=None):
        """Initialize the display.

        Args:
            state: Initial browser state.
            panel: Renderer for the list view.
            input: Optional prompt_toolkit input (tests use a pipe input).
            output: Optional prompt_toolkit output (tests use DummyOutput).
        """
        self._state = state
        self._panel = panel
        self._renderer = RichRenderer(state.width)
        self._input = input
        self._output = output

        self._app: Optional[Application] = None
        self._build_app()

    @property
    def state(self) -> BrowserState:
        return self._state

    def dispatch(self, event: Event) -> Effect:
        """Reduce one event into the current state."""
        self._state, effect = reduce(self._state, event)
        return effect

    def _update_dimensions(self) -> bool:
        """Check if terminal size changed and feed a Resize event if so.

        Returns:
            True if dimensions changed, False otherwise.
        """
        width, height = shutil.get_terminal_size()
        if width != self._state.width or height != self._state.height:
            self.dispatch(Resize(width, height))
            self._renderer.set_width(self._state.width)
            logger.debug("Terminal resized to %dx%d", width, height)
            return True
        return False

    def _get_list_content(self):
        """Get rendered list content as ANSI for prompt_toolkit."""
        self._update_dimensions()
        rendered = self._panel.render(self._state)
        return to_formatted_text(ANSI(self._renderer.render(rendered)))

    def _handle_key(self, event) -> None:
        effect = self.dispatch(to_event(event.key_sequence[0]))
        if effect == Effect.QUIT:
            event.app.exit(result=self._state)

    def _build_app(self) -> None:
        """Build the prompt_toolkit application."""
        kb = KeyBindings()

        for name in BOUND_KEYS:
            kb.add(name)(self._handle_key)
        kb.add(Keys.BracketedPaste)(self._handle_key)

        @kb.add(Keys.Any)
        def handle_any(event):
            """Handle printable characters and any unbound key."""
            self._handle_key(event)

        list_window = Window(
            FormattedTextControl(self._get_list_content, focusable=True),
            wrap_lines=False,
        )

        self._app = Application(
            layout=Layout(HSplit([list_window])),
            key_bindings=kb,
            full_screen=True,
            mouse_support=False,
            input=self._input,
            output=self._output,
        )
        # Escape is a prefix of meta sequences; don't wait long to resolve it.
        self._app.ttimeoutlen = 0.05

    def start(self) -> None:
        """Validate that an interactive terminal is available."""
        if self._output is None and not sys.stdout.isatty():
            raise TerminalSessionError(
                "the interactive browser requires a terminal; use --plain for piped output"
            )

    def run(self) -> BrowserState:
        """Run the event loop until the user quits.

        Returns:
            The final browser state.

        Raises:
            TerminalSessionError: If the terminal session fails.
        """
        try:
            result = self._app.run()
        except (EOFError, KeyboardInterrupt):
            return self._state
        except Exception as e:
            raise TerminalSessionError(f"failed to start program, {e}") from e
        logger.debug("Browser exited (mode=%s)", self._state.mode.value)
        return result if result is not None else self._state
