"""Main interactive event loop for the navigator.

Single-threaded: scan results and key tokens are applied to the state in the
order they are observed. This loop is wiring-only; transitions live in
``cdplus.navigator``.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..input import normalize_enter
from ..navigator import (
    Command,
    DirectoryRead,
    NavigatorState,
    ReadDirectory,
    handle_key,
    handle_read_result,
)
from ..render import RenderContext, list_rows, scroll_start
from ..ui_theme import PLAIN_THEME, UITheme


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 50


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``.

    All terminal and reader-thread access goes through these callbacks.
    """

    read_key: Callable[[int], str]
    terminal_size: Callable[[], os.terminal_size]
    render: Callable[[RenderContext], None]
    schedule_read: Callable[[Path], object]
    drain_results: Callable[[], list[DirectoryRead]]


@dataclass(frozen=True)
class LoopOutcome:
    """Final state plus the terminating ``Quit`` or ``Export`` command."""

    state: NavigatorState
    command: Command


def run_main_loop(
    state: NavigatorState,
    terminal,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
    theme: UITheme = PLAIN_THEME,
) -> LoopOutcome:
    """Run the navigator until a quit or export key arrives."""
    list_start = 0
    last_size: os.terminal_size | None = None
    skip_next_lf = False
    dirty = True

    with terminal.raw_mode():
        while True:
            for result in callbacks.drain_results():
                state = handle_read_result(state, result).state
                if result.ok:
                    list_start = 0
                dirty = True

            term = callbacks.terminal_size()
            if term != last_size:
                last_size = term
                dirty = True

            if dirty:
                rows = list_rows(state, term.lines)
                list_start = scroll_start(state.cursor, list_start, rows, len(state.visible_indices))
                callbacks.render(
                    RenderContext(
                        state=state,
                        width=term.columns,
                        height=term.lines,
                        list_start=list_start,
                        theme=theme,
                    )
                )
                dirty = False

            try:
                key = callbacks.read_key(timing.key_poll_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            token, skip_next_lf = normalize_enter(key, skip_next_lf)
            if token is None:
                continue

            transition = handle_key(state, token, page_rows=list_rows(state, term.lines))
            if transition.state is not state:
                dirty = True
            state = transition.state
            command = transition.command
            if isinstance(command, ReadDirectory):
                callbacks.schedule_read(command.path)
            elif command is not None:
                return LoopOutcome(state=state, command=command)
