"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and the window title.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

WINDOW_TITLE = "cdplus - Interactive Directory Navigator"


class TerminalController:
    """Manage terminal mode transitions for one navigator session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show cursor, restore the main screen buffer and saved tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def set_window_title(self, title: str = WINDOW_TITLE) -> None:
        os.write(self.stdout_fd, f"\x1b]0;{title}\x07".encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            self.set_window_title()
            yield
        finally:
            self.disable_tui_mode()
