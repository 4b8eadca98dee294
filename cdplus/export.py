"""Export gateway: hands the formatted path to the clipboard and stdout."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

logger = logging.getLogger(__name__)


def clipboard_commands() -> list[list[str]]:
    """Return clipboard writer commands for the current platform, in preference order."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def copy_text_to_clipboard(text: str) -> bool:
    """Best-effort clipboard copy across macOS, Windows, and common Linux tools."""
    if not text:
        return False

    for command in clipboard_commands():
        if shutil.which(command[0]) is None:
            continue
        try:
            proc = subprocess.run(
                command,
                input=text,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("clipboard command %s failed: %s", command[0], exc)
            continue
        if proc.returncode == 0:
            logger.debug("copied %d characters with %s", len(text), command[0])
            return True
    return False


@dataclass(frozen=True)
class ExportOutcome:
    text: str
    copied: bool


class ExportGateway:
    """Deliver one exported string per run to the clipboard and an output stream."""

    def __init__(
        self,
        stdout: TextIO | None = None,
        use_clipboard: bool = True,
        copy_to_clipboard: Callable[[str], bool] = copy_text_to_clipboard,
    ) -> None:
        self._stdout = stdout
        self._use_clipboard = use_clipboard
        self._copy_to_clipboard = copy_to_clipboard
        self._delivered = False

    @property
    def use_clipboard(self) -> bool:
        return self._use_clipboard

    @property
    def delivered(self) -> bool:
        return self._delivered

    def deliver(self, text: str) -> ExportOutcome:
        """Copy ``text`` (when enabled) and print it with a trailing newline.

        A clipboard failure is reported through ``ExportOutcome.copied`` and
        never prevents printing.
        """
        if self._delivered:
            raise RuntimeError("export already delivered for this run")
        self._delivered = True

        copied = False
        if self._use_clipboard:
            copied = self._copy_to_clipboard(text)
            if not copied:
                logger.warning("clipboard unavailable; printing path only")
        stream = self._stdout if self._stdout is not None else sys.stdout
        stream.write(text + "\n")
        stream.flush()
        return ExportOutcome(text=text, copied=copied)


__all__ = [
    "clipboard_commands",
    "copy_text_to_clipboard",
    "ExportOutcome",
    "ExportGateway",
]
