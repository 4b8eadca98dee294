"""Navigator state machine: immutable state, events/commands, and transitions."""

from __future__ import annotations

from .state import BROWSING, Browsing, Filtering, Mode, NavigatorState, visible_indices
from .events import QUIT, Command, DirectoryRead, Export, Quit, ReadDirectory, Transition
from .machine import handle_event, handle_key, handle_read_result, initial_state

__all__ = [
    "BROWSING",
    "Browsing",
    "Filtering",
    "Mode",
    "NavigatorState",
    "visible_indices",
    "QUIT",
    "Command",
    "DirectoryRead",
    "Export",
    "Quit",
    "ReadDirectory",
    "Transition",
    "handle_event",
    "handle_key",
    "handle_read_result",
    "initial_state",
]
