"""Error taxonomy for directory reads and path formatting."""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ReadFailureKind(Enum):
    PERMISSION_DENIED = "permission denied"
    NOT_FOUND = "not found"
    NOT_A_DIRECTORY = "not a directory"
    OTHER = "read error"


@dataclass(frozen=True)
class ReadFailure:
    """Recoverable directory-read failure kept in navigator state."""

    path: Path
    kind: ReadFailureKind
    detail: str = ""

    @classmethod
    def from_os_error(cls, path: Path, exc: OSError) -> ReadFailure:
        """Classify an ``OSError`` raised while scanning ``path``."""
        if isinstance(exc, PermissionError):
            kind = ReadFailureKind.PERMISSION_DENIED
        elif isinstance(exc, FileNotFoundError):
            kind = ReadFailureKind.NOT_FOUND
        elif isinstance(exc, NotADirectoryError) or exc.errno == errno.ENOTDIR:
            kind = ReadFailureKind.NOT_A_DIRECTORY
        else:
            kind = ReadFailureKind.OTHER
        detail = exc.strerror or str(exc)
        return cls(path=path, kind=kind, detail=detail)

    def describe(self) -> str:
        """Return a one-line, user-facing message."""
        if self.kind is ReadFailureKind.OTHER and self.detail:
            return f"{self.path}: {self.detail}"
        return f"{self.path}: {self.kind.value}"


class FormatError(ValueError):
    """Selected path cannot be expressed in the requested format."""


__all__ = [
    "ReadFailureKind",
    "ReadFailure",
    "FormatError",
]
