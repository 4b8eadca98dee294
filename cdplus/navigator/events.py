"""Event and command values exchanged with the navigator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

from ..errors import ReadFailure
from ..formatting import FormatCode
from ..listing import DirectoryChild
from .state import NavigatorState


@dataclass(frozen=True)
class ReadDirectory:
    """Request an asynchronous scan of ``path``."""

    path: Path


@dataclass(frozen=True)
class Quit:
    """Leave the event loop without exporting."""


@dataclass(frozen=True)
class Export:
    """Leave the event loop and export ``selected_path`` formatted with ``code``."""

    code: FormatCode
    selected_path: Path


Command = ReadDirectory | Quit | Export

QUIT = Quit()


@dataclass(frozen=True)
class DirectoryRead:
    """Outcome of one ``ReadDirectory`` command."""

    path: Path
    children: tuple[DirectoryChild, ...] = ()
    failure: ReadFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class Transition(NamedTuple):
    state: NavigatorState
    command: Command | None = None

    @property
    def terminates(self) -> bool:
        return isinstance(self.command, (Quit, Export))


__all__ = [
    "ReadDirectory",
    "Quit",
    "Export",
    "Command",
    "QUIT",
    "DirectoryRead",
    "Transition",
]
