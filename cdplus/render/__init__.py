"""Rendering surface for the navigator.

Builds frame rows from a ``NavigatorState`` snapshot and writes them as one
ANSI frame. Frame construction is side-effect free; only ``render_frame``
touches the terminal.
"""

from __future__ import annotations

import os
import sys
import unicodedata
from dataclasses import dataclass

from ..listing import Entry, is_parent_marker
from ..navigator import NavigatorState
from ..ui_theme import PLAIN_THEME, UITheme
from .help import help_lines

ICON_PARENT = "⬆️ "
ICON_DIRECTORY = "📁"
ICON_FILE = "📄"
ICON_CURRENT = "> "
TITLE_PREFIX = "📁 "
FILTER_PROMPT = "Filter: "
ENTRY_INDENT = "  "
EMPTY_FILTER_TEXT = "No matches."


@dataclass(frozen=True)
class RenderContext:
    state: NavigatorState
    width: int
    height: int
    list_start: int = 0
    theme: UITheme = PLAIN_THEME


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch) or ch == "\ufe0f":
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def clip_text(text: str, max_cols: int) -> str:
    """Trim plain text to at most ``max_cols`` display columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        width = char_display_width(ch)
        if col + width > max_cols:
            break
        out.append(ch)
        col += width
    return "".join(out)


def entry_icon(entry: Entry) -> str:
    if is_parent_marker(entry):
        return ICON_PARENT
    return ICON_DIRECTORY if entry.is_dir else ICON_FILE


def entry_label(entry: Entry) -> str:
    return f"{entry_icon(entry)} {entry.name}"


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def chrome_rows(state: NavigatorState) -> int:
    """Rows used by everything except the entry list."""
    rows = 1 + len(help_lines(state.filtering))
    if state.filtering:
        rows += 1
    if state.last_error is not None:
        rows += 1
    return rows


def list_rows(state: NavigatorState, height: int) -> int:
    return max(1, height - chrome_rows(state))


def scroll_start(cursor: int | None, list_start: int, rows: int, count: int) -> int:
    """Return the first visible row index keeping ``cursor`` on screen."""
    rows = max(1, rows)
    start = list_start
    if cursor is not None:
        if cursor < start:
            start = cursor
        elif cursor >= start + rows:
            start = cursor - rows + 1
    return max(0, min(start, max(0, count - rows)))


def _entry_row(entry: Entry, selected: bool, width: int, theme: UITheme) -> str:
    if selected:
        return _styled(clip_text(ICON_CURRENT + entry_label(entry), width), theme.selected, theme)
    if is_parent_marker(entry):
        style = theme.entry_parent
    elif entry.is_dir:
        style = theme.entry_dir
    else:
        style = theme.entry_file
    return _styled(clip_text(ENTRY_INDENT + entry_label(entry), width), style, theme)


def build_frame_lines(context: RenderContext) -> list[str]:
    """Compose all rows of one frame, top to bottom."""
    state = context.state
    theme = context.theme
    width = max(1, context.width - 1)
    lines: list[str] = [_styled(clip_text(TITLE_PREFIX + str(state.current_path), width), theme.title, theme)]

    if state.filtering:
        prompt = clip_text(FILTER_PROMPT + state.filter_text, width)
        lines.append(_styled(prompt, theme.filter_query, theme))

    entries = state.visible_entries
    rows = list_rows(state, context.height)
    start = scroll_start(state.cursor, context.list_start, rows, len(entries))
    window = entries[start : start + rows]
    if not entries:
        lines.append(_styled(clip_text(ENTRY_INDENT + EMPTY_FILTER_TEXT, width), theme.filter_hint, theme))
    for offset, entry in enumerate(window):
        lines.append(_entry_row(entry, state.cursor == start + offset, width, theme))
    list_used = max(1, len(window))
    lines.extend("" for _ in range(rows - list_used))

    if state.last_error is not None:
        lines.append(_styled(clip_text(f"Error: {state.last_error.describe()}", width), theme.error, theme))
    for text in help_lines(state.filtering):
        lines.append(_styled(clip_text(text, width), theme.help, theme))
    return lines


def render_frame(context: RenderContext, fd: int | None = None) -> None:
    """Write one full frame to ``fd`` (stdout by default)."""
    out = ["\033[H\033[J"]
    out.append("\r\n".join(build_frame_lines(context)))
    os.write(sys.stdout.fileno() if fd is None else fd, "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "ICON_PARENT",
    "ICON_DIRECTORY",
    "ICON_FILE",
    "ICON_CURRENT",
    "TITLE_PREFIX",
    "RenderContext",
    "char_display_width",
    "clip_text",
    "entry_icon",
    "entry_label",
    "chrome_rows",
    "list_rows",
    "scroll_start",
    "build_frame_lines",
    "render_frame",
]
