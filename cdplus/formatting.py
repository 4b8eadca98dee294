"""Path formatter for the export keys.

Each ``FormatCode`` derives one textual form of the selected path. Only the
relative form can fail; stat and home lookups degrade silently.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from .errors import FormatError

HOME_TOKEN = "$HOME"


class FormatCode(Enum):
    """Single-letter export selectors."""

    BASE_NAME = "f"
    RELATIVE = "r"
    ABSOLUTE = "a"
    DIRECTORY = "d"
    HOME_RELATIVE = "p"

    @property
    def key(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[FormatCode, str] = {
    FormatCode.BASE_NAME: "file",
    FormatCode.RELATIVE: "relative",
    FormatCode.ABSOLUTE: "absolute",
    FormatCode.DIRECTORY: "directory path",
    FormatCode.HOME_RELATIVE: f"`{HOME_TOKEN}` format",
}


def format_code_for_key(key: str) -> FormatCode | None:
    """Return the format bound to ``key`` or ``None``."""
    try:
        return FormatCode(key)
    except ValueError:
        return None


def user_home_directory() -> Path | None:
    """Return the user's home directory, or ``None`` when it cannot be determined.

    A set but empty ``HOME`` counts as undeterminable; the password database
    is only consulted when ``HOME`` is absent.
    """
    home = os.environ.get("HOME")
    if home is not None:
        return Path(home) if home else None
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def _absolute(path: Path) -> str:
    return os.path.abspath(path)


def _directory_of(path: Path) -> str:
    """Absolute path, with non-directories replaced by their parent.

    A failed stat counts as a directory.
    """
    absolute = _absolute(path)
    try:
        st = os.stat(absolute)
    except OSError:
        return absolute
    if not stat.S_ISDIR(st.st_mode):
        return os.path.dirname(absolute)
    return absolute


def _home_relative(path: Path, home_dir: Callable[[], Path | None]) -> str:
    directory = _directory_of(path)
    home = home_dir()
    if home is None:
        return directory
    try:
        relative = Path(directory).relative_to(os.path.abspath(home))
    except ValueError:
        return directory
    # The home directory itself has no useful relative form.
    if relative == Path("."):
        return directory
    return os.path.join(HOME_TOKEN, str(relative))


def format_path(
    selected_path: Path,
    code: FormatCode | None,
    initial_cwd: Path,
    home_dir: Callable[[], Path | None] = user_home_directory,
) -> str:
    """Derive the exported string for ``selected_path``.

    ``code=None`` returns the selected path unchanged. Raises ``FormatError``
    when a relative path cannot be computed (no common root).
    """
    if code is None:
        return str(selected_path)
    if code is FormatCode.BASE_NAME:
        return selected_path.name or str(selected_path)
    if code is FormatCode.RELATIVE:
        try:
            return os.path.relpath(selected_path, initial_cwd)
        except ValueError as exc:
            raise FormatError(
                f"failed to get relative path from {initial_cwd} to {selected_path}: {exc}"
            ) from exc
    if code is FormatCode.ABSOLUTE:
        return _absolute(selected_path)
    if code is FormatCode.DIRECTORY:
        return _directory_of(selected_path)
    if code is FormatCode.HOME_RELATIVE:
        return _home_relative(selected_path, home_dir)
    raise FormatError(f"unknown format code: {code!r}")


__all__ = [
    "HOME_TOKEN",
    "FormatCode",
    "format_code_for_key",
    "user_home_directory",
    "format_path",
]
