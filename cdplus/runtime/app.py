"""Runtime composition layer for cdplus.

Builds the initial state, wires terminal, reader and renderer callbacks into
the loop, and turns the loop outcome into an export.
"""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import sys
from collections.abc import Callable, Iterator
from functools import partial
from pathlib import Path

from ..errors import FormatError
from ..export import ExportGateway
from ..formatting import format_path, user_home_directory
from ..input import read_key
from ..navigator import Export, NavigatorState, initial_state
from ..render import render_frame
from ..ui_theme import UITheme
from .directory_reader import DirectoryReadScheduler
from .loop import LoopOutcome, RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)

TTY_DEVICE = "/dev/tty"


def build_initial_state(start_path: Path, scheduler: DirectoryReadScheduler) -> NavigatorState:
    """Synchronously scan the startup directory.

    Raises ``SystemExit`` when it cannot be read; the navigator needs one
    successfully read directory to exist.
    """
    result = scheduler.read_now(start_path)
    if result.failure is not None:
        raise SystemExit(f"Error: cannot read {result.failure.describe()}")
    return initial_state(start_path, result.children)


@contextlib.contextmanager
def _output_fd() -> Iterator[int]:
    """Yield a terminal fd for drawing.

    When stdout is redirected (``cd "$(cdplus)"``) frames go to the
    controlling tty so only the exported path reaches stdout.
    """
    stdout_fd = sys.stdout.fileno()
    if os.isatty(stdout_fd):
        yield stdout_fd
        return
    fd = os.open(TTY_DEVICE, os.O_WRONLY)
    try:
        yield fd
    finally:
        os.close(fd)


def run_navigator(
    start_path: Path,
    theme: UITheme,
    show_hidden: bool = True,
    timing: RuntimeLoopTiming | None = None,
) -> LoopOutcome:
    """Run the interactive navigator rooted at ``start_path``."""
    stdin_fd = sys.stdin.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("Error: cdplus needs an interactive terminal on stdin.")

    scheduler = DirectoryReadScheduler(show_hidden=show_hidden)
    state = build_initial_state(start_path, scheduler)

    with _output_fd() as out_fd:
        terminal = TerminalController(stdin_fd, out_fd)
        callbacks = RuntimeLoopCallbacks(
            read_key=lambda timeout_ms: read_key(stdin_fd, timeout_ms=timeout_ms),
            terminal_size=partial(shutil.get_terminal_size, (80, 24)),
            render=partial(render_frame, fd=out_fd),
            schedule_read=scheduler.schedule,
            drain_results=scheduler.drain_results,
        )
        outcome = run_main_loop(
            state,
            terminal,
            timing if timing is not None else RuntimeLoopTiming(),
            callbacks,
            theme,
        )
    logger.debug("navigator finished with %s", outcome.command)
    return outcome


def export_outcome(
    outcome: LoopOutcome,
    initial_cwd: Path,
    gateway: ExportGateway,
    home_dir: Callable[[], Path | None] = user_home_directory,
    stderr=None,
) -> int:
    """Format and deliver the selection of an export outcome.

    Returns the process exit status: ``1`` when formatting fails, else ``0``.
    Quit outcomes export nothing.
    """
    command = outcome.command
    if not isinstance(command, Export):
        return 0
    err = stderr if stderr is not None else sys.stderr
    try:
        text = format_path(command.selected_path, command.code, initial_cwd, home_dir=home_dir)
    except FormatError as exc:
        logger.error("export aborted: %s", exc)
        err.write(f"Error: failed to format path: {exc}\n")
        return 1

    delivered = gateway.deliver(text)
    if gateway.use_clipboard and not delivered.copied:
        err.write("Warning: could not copy to clipboard.\n")
    return 0


__all__ = [
    "build_initial_state",
    "run_navigator",
    "export_outcome",
]
