"""Navigator transitions: ``(state, event) -> (state, command)``.

Every function here is pure. Directory scans leave as ``ReadDirectory``
commands and come back as ``DirectoryRead`` events; results are applied in
arrival order, so the latest arrival wins.
"""

from __future__ import annotations

from dataclasses import replace
from functools import partial
from pathlib import Path

from ..formatting import FormatCode, format_code_for_key
from ..input.key_registry import KeyComboBinding, KeyComboRegistry
from ..listing import DirectoryChild, build_listing, is_parent_marker
from .events import QUIT, DirectoryRead, Export, ReadDirectory, Transition
from .state import BROWSING, Filtering, NavigatorState, visible_indices

MOVE_UP_KEYS = ("UP", "k")
MOVE_DOWN_KEYS = ("DOWN", "j")
FIRST_KEYS = ("g", "HOME")
LAST_KEYS = ("G", "END")
PAGE_UP_KEYS = ("PAGE_UP", "b", "u")
PAGE_DOWN_KEYS = ("PAGE_DOWN",)
FILTER_PAGE_UP_KEYS = ("PAGE_UP",)
FILTER_PAGE_DOWN_KEYS = ("PAGE_DOWN",)
DEFAULT_PAGE_ROWS = 10
DESCEND_KEYS = ("ENTER", " ", "l", "RIGHT")
PARENT_KEYS = ("BACKSPACE", "h", "LEFT")
FILTER_KEYS = ("/",)
QUIT_KEYS = ("q", "CTRL_C")


def initial_state(path: Path, children: list[DirectoryChild] | tuple[DirectoryChild, ...]) -> NavigatorState:
    """Build the startup state for an already-scanned directory."""
    return NavigatorState(current_path=path, listing=build_listing(children))


def parent_of(path: Path) -> Path:
    """Parent directory; the filesystem root is its own parent."""
    return path.parent


def _unchanged(state: NavigatorState) -> Transition:
    return Transition(state)


def move_cursor(state: NavigatorState, delta: int) -> Transition:
    """Move the cursor by ``delta`` clamped to the visible sequence."""
    count = len(state.visible_indices)
    if count == 0 or state.cursor is None:
        return Transition(state)
    target = max(0, min(count - 1, state.cursor + delta))
    if target == state.cursor:
        return Transition(state)
    return Transition(replace(state, cursor=target))


def jump_to_edge(state: NavigatorState, last: bool) -> Transition:
    count = len(state.visible_indices)
    if count == 0:
        return Transition(state)
    target = count - 1 if last else 0
    if target == state.cursor:
        return Transition(state)
    return Transition(replace(state, cursor=target))


def descend(state: NavigatorState) -> Transition:
    """Request a scan of the highlighted directory; files are a no-op."""
    entry = state.selected_entry
    if entry is None or not entry.is_dir:
        return Transition(state)
    if is_parent_marker(entry):
        return go_to_parent(state)
    return Transition(state, ReadDirectory(state.current_path / entry.name))


def go_to_parent(state: NavigatorState) -> Transition:
    return Transition(state, ReadDirectory(parent_of(state.current_path)))


def open_filter(state: NavigatorState) -> Transition:
    """Enter filter mode with empty text; every entry stays visible."""
    return Transition(replace(state, mode=Filtering("")))


def set_filter_text(state: NavigatorState, text: str) -> Transition:
    """Recompute the visible subset, keeping the highlighted entry when it still matches."""
    previous = state.selected_listing_index
    indices = visible_indices(state.listing, Filtering(text))
    if previous is not None and previous in indices:
        cursor: int | None = indices.index(previous)
    elif indices:
        cursor = 0
    else:
        cursor = None
    return Transition(replace(state, mode=Filtering(text), cursor=cursor))


def close_filter(state: NavigatorState) -> Transition:
    """Return to browsing, mapping the cursor back onto the full listing."""
    previous = state.selected_listing_index
    cursor = previous if previous is not None else 0
    return Transition(replace(state, mode=BROWSING, cursor=cursor))


def quit_navigator(state: NavigatorState) -> Transition:
    return Transition(state, QUIT)


def export_selection(state: NavigatorState, code: FormatCode) -> Transition:
    """Record the export format and capture the highlighted path."""
    selected_path = state.selected_path
    return Transition(
        replace(state, pending_export_format=code),
        Export(code=code, selected_path=selected_path),
    )


BROWSING_BINDINGS: KeyComboRegistry[NavigatorState, Transition] = KeyComboRegistry().register_bindings(
    KeyComboBinding(MOVE_UP_KEYS, partial(move_cursor, delta=-1)),
    KeyComboBinding(MOVE_DOWN_KEYS, partial(move_cursor, delta=1)),
    KeyComboBinding(FIRST_KEYS, partial(jump_to_edge, last=False)),
    KeyComboBinding(LAST_KEYS, partial(jump_to_edge, last=True)),
    KeyComboBinding(DESCEND_KEYS, descend),
    KeyComboBinding(PARENT_KEYS, go_to_parent),
    KeyComboBinding(FILTER_KEYS, open_filter),
    KeyComboBinding(QUIT_KEYS, quit_navigator),
)

FILTERING_BINDINGS: KeyComboRegistry[NavigatorState, Transition] = KeyComboRegistry().register_bindings(
    KeyComboBinding(("UP",), partial(move_cursor, delta=-1)),
    KeyComboBinding(("DOWN",), partial(move_cursor, delta=1)),
    KeyComboBinding(("HOME",), partial(jump_to_edge, last=False)),
    KeyComboBinding(("END",), partial(jump_to_edge, last=True)),
    KeyComboBinding(("ENTER",), descend),
    KeyComboBinding(("ESC",), close_filter),
    KeyComboBinding(("CTRL_C",), quit_navigator),
    KeyComboBinding(("BACKSPACE",), lambda state: set_filter_text(state, state.filter_text[:-1])),
    KeyComboBinding(("CTRL_U",), lambda state: set_filter_text(state, "")),
)


def _is_text_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def _page_direction(state: NavigatorState, key: str) -> int:
    if state.filtering:
        up_keys, down_keys = FILTER_PAGE_UP_KEYS, FILTER_PAGE_DOWN_KEYS
    else:
        up_keys, down_keys = PAGE_UP_KEYS, PAGE_DOWN_KEYS
    if key in up_keys:
        return -1
    if key in down_keys:
        return 1
    return 0


def handle_key(state: NavigatorState, key: str, page_rows: int = DEFAULT_PAGE_ROWS) -> Transition:
    """Apply one decoded key token.

    ``page_rows`` is how far the page keys move the cursor; the loop passes
    the number of listing rows on screen.
    """
    direction = _page_direction(state, key)
    if direction:
        return move_cursor(state, direction * max(1, page_rows))

    if state.filtering:
        transition = FILTERING_BINDINGS.dispatch(key, state)
        if transition is not None:
            return transition
        if _is_text_key(key):
            return set_filter_text(state, state.filter_text + key)
        return _unchanged(state)

    transition = BROWSING_BINDINGS.dispatch(key, state)
    if transition is not None:
        return transition
    code = format_code_for_key(key)
    if code is not None:
        return export_selection(state, code)
    return _unchanged(state)


def handle_read_result(state: NavigatorState, result: DirectoryRead) -> Transition:
    """Apply a finished scan.

    Success replaces path and listing and forces browsing mode. Failure only
    records ``last_error``.
    """
    if result.failure is not None:
        return Transition(replace(state, last_error=result.failure))
    return Transition(
        NavigatorState(
            current_path=result.path,
            listing=build_listing(result.children),
            cursor=0,
            mode=BROWSING,
            last_error=None,
        )
    )


def handle_event(state: NavigatorState, event: str | DirectoryRead) -> Transition:
    """Dispatch either a key token or a scan result."""
    if isinstance(event, DirectoryRead):
        return handle_read_result(state, event)
    return handle_key(state, event)


__all__ = [
    "MOVE_UP_KEYS",
    "MOVE_DOWN_KEYS",
    "DESCEND_KEYS",
    "PARENT_KEYS",
    "FILTER_KEYS",
    "QUIT_KEYS",
    "PAGE_UP_KEYS",
    "PAGE_DOWN_KEYS",
    "BROWSING_BINDINGS",
    "FILTERING_BINDINGS",
    "initial_state",
    "parent_of",
    "move_cursor",
    "jump_to_edge",
    "descend",
    "go_to_parent",
    "open_filter",
    "set_filter_text",
    "close_filter",
    "quit_navigator",
    "export_selection",
    "handle_key",
    "handle_read_result",
    "handle_event",
]
