"""Browser view state and the reducer that drives it.

The interactive list is modeled as an immutable BrowserState plus a pure
``reduce(state, event) -> (state, effect)`` function. The display layer
translates terminal input into KeyPress/Paste/Resize events, feeds them
through the reducer and acts on the returned Effect; nothing here touches the
terminal.

Filtering is a case-insensitive substring match. Leaving filter mode with
Escape or Enter keeps the filter text; Escape in browse mode clears it.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

from .items import Renderable

# Lines used by the title, filter line, pagination and help rows.
CHROME_LINES = 5

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24


class BrowserMode(str, Enum):
    """Input mode of the browser."""

    BROWSING = "browsing"
    FILTERING = "filtering"
    EXITED = "exited"


class Effect(str, Enum):
    """What the display should do after an event was reduced."""

    NONE = "none"
    REDRAW = "redraw"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyPress:
    """A key press: a printable character or a key name such as 'up'."""

    key: str


@dataclass(frozen=True)
class Paste:
    """Text pasted into the terminal in one piece."""

    text: str


@dataclass(frozen=True)
class Resize:
    """The terminal was resized."""

    width: int
    height: int


Event = Union[KeyPress, Paste, Resize]


# Browse-mode movement keys.
MOVE_UP = ("up", "k")
MOVE_DOWN = ("down", "j")
PAGE_UP = ("pageup", "left", "h")
PAGE_DOWN = ("pagedown", "right", "l")
GO_TOP = ("home", "g")
GO_BOTTOM = ("end", "G")

# Filter mode only accepts named keys for movement, letters are filter text.
FILTER_MOVE_KEYS = ("up", "down", "pageup", "pagedown", "home", "end")


def filter_indices(items: Sequence[Renderable], text: str) -> Tuple[int, ...]:
    """Return indices of items whose filter value contains ``text``.

    Matching is case-insensitive. An empty filter matches every item. The
    result keeps collection order.
    """
    needle = text.casefold()
    if not needle:
        return tuple(range(len(items)))
    return tuple(
        i for i, item in enumerate(items)
        if needle in item.filter_value().casefold()
    )


@dataclass(frozen=True)
class BrowserState:
    """Immutable view state of the log group browser.

    Attributes:
        items: The full collection, in arrival order.
        mode: Current input mode.
        filter_text: Current filter (possibly empty).
        visible: Indices into ``items`` matching the filter, in order.
        cursor: Highlighted position within ``visible``; None when empty.
        width: Terminal width in columns.
        height: Terminal height in rows.
    """

    items: Tuple[Renderable, ...] = ()
    mode: BrowserMode = BrowserMode.BROWSING
    filter_text: str = ""
    visible: Tuple[int, ...] = ()
    cursor: Optional[int] = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    @classmethod
    def initial(
        cls,
        items: Sequence[Renderable],
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> "BrowserState":
        """Create the starting state: browsing, everything visible."""
        items = tuple(items)
        return cls(
            items=items,
            visible=tuple(range(len(items))),
            cursor=0 if items else None,
            width=max(1, width),
            height=max(1, height),
        )

    @property
    def visible_items(self) -> Tuple[Renderable, ...]:
        return tuple(self.items[i] for i in self.visible)

    @property
    def highlighted(self) -> Optional[Renderable]:
        """The item under the cursor, if any."""
        if self.cursor is None:
            return None
        return self.items[self.visible[self.cursor]]

    @property
    def filter_applied(self) -> bool:
        return bool(self.filter_text)

    @property
    def page_size(self) -> int:
        """Number of rows available for items."""
        return max(1, self.height - CHROME_LINES)

    def page_bounds(self) -> Tuple[int, int, int, int]:
        """Compute the page containing the cursor.

        Returns:
            Tuple of (start, end, page_number, total_pages) where start/end
            slice ``visible`` and page numbers are 1-based.
        """
        per_page = self.page_size
        total = len(self.visible)
        total_pages = max(1, -(-total // per_page))
        page = (self.cursor or 0) // per_page
        start = page * per_page
        end = min(start + per_page, total)
        return start, end, page + 1, total_pages


def _refilter(state: BrowserState, text: str) -> BrowserState:
    """Apply a new filter, keeping the highlighted item when it still matches."""
    visible = filter_indices(state.items, text)

    if not visible:
        cursor = None
    elif state.cursor is None:
        cursor = 0
    else:
        current = state.visible[state.cursor]
        if current in visible:
            cursor = visible.index(current)
        else:
            cursor = min(state.cursor, len(visible) - 1)

    return replace(state, filter_text=text, visible=visible, cursor=cursor)


def _move_to(state: BrowserState, position: int) -> Tuple[BrowserState, Effect]:
    if state.cursor is None:
        return state, Effect.NONE
    position = max(0, min(position, len(state.visible) - 1))
    if position == state.cursor:
        return state, Effect.NONE
    return replace(state, cursor=position), Effect.REDRAW


def _navigate(state: BrowserState, key: str) -> Optional[Tuple[BrowserState, Effect]]:
    """Handle a browse-mode movement key, or return None if it is not one."""
    cursor = state.cursor or 0
    if key in MOVE_UP:
        return _move_to(state, cursor - 1)
    if key in MOVE_DOWN:
        return _move_to(state, cursor + 1)
    if key in PAGE_UP:
        return _move_to(state, cursor - state.page_size)
    if key in PAGE_DOWN:
        return _move_to(state, cursor + state.page_size)
    if key in GO_TOP:
        return _move_to(state, 0)
    if key in GO_BOTTOM:
        return _move_to(state, len(state.visible) - 1)
    return None


def _reduce_browsing(state: BrowserState, key: str) -> Tuple[BrowserState, Effect]:
    if key == "q":
        return replace(state, mode=BrowserMode.EXITED), Effect.QUIT
    if key == "/":
        return replace(state, mode=BrowserMode.FILTERING), Effect.REDRAW
    if key == "escape":
        if state.filter_applied:
            return _refilter(state, ""), Effect.REDRAW
        return state, Effect.NONE

    moved = _navigate(state, key)
    if moved is not None:
        return moved
    return state, Effect.NONE


def _reduce_filtering(state: BrowserState, key: str) -> Tuple[BrowserState, Effect]:
    if key in ("escape", "enter"):
        return replace(state, mode=BrowserMode.BROWSING), Effect.REDRAW
    if key == "backspace":
        if not state.filter_text:
            return state, Effect.NONE
        return _refilter(state, state.filter_text[:-1]), Effect.REDRAW
    if key == "c-u":
        return _refilter(state, ""), Effect.REDRAW
    if key in FILTER_MOVE_KEYS:
        return _navigate(state, key)
    if len(key) == 1 and key.isprintable():
        return _refilter(state, state.filter_text + key), Effect.REDRAW
    return state, Effect.NONE


def reduce(state: BrowserState, event: Event) -> Tuple[BrowserState, Effect]:
    """Apply one event to the browser state.

    Args:
        state: Current state.
        event: A KeyPress, Paste or Resize.

    Returns:
        Tuple of (new_state, effect).
    """
    if state.mode == BrowserMode.EXITED:
        return state, Effect.NONE

    if isinstance(event, Resize):
        resized = replace(state, width=max(1, event.width), height=max(1, event.height))
        return resized, Effect.REDRAW

    if isinstance(event, Paste):
        if state.mode != BrowserMode.FILTERING:
            return state, Effect.NONE
        text = "".join(ch for ch in event.text if ch.isprintable())
        if not text:
            return state, Effect.NONE
        return _refilter(state, state.filter_text + text), Effect.REDRAW

    if event.key == "c-c":
        return replace(state, mode=BrowserMode.EXITED), Effect.QUIT

    if state.mode == BrowserMode.FILTERING:
        return _reduce_filtering(state, event.key)
    return _reduce_browsing(state, event.key)
