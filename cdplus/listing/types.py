"""Domain datatypes for directory listing entries."""

from __future__ import annotations

from dataclasses import dataclass, field

PARENT_MARKER_NAME = ".."


@dataclass(frozen=True, order=True)
class DirectoryChild:
    """One real child observed in a directory scan.

    Equality and ordering use ``name`` only; ``is_dir`` is plain data.
    """

    name: str
    is_dir: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class ParentMarker:
    """Synthetic "go up" row prepended to every listing.

    It has no filesystem backing and must never be stat-ed.
    """

    name: str = field(default=PARENT_MARKER_NAME, init=False)
    is_dir: bool = field(default=True, init=False)


PARENT_MARKER = ParentMarker()

Entry = DirectoryChild | ParentMarker
Listing = tuple[Entry, ...]


def is_parent_marker(entry: Entry) -> bool:
    """Return whether ``entry`` is the synthetic parent row."""
    return isinstance(entry, ParentMarker)


__all__ = [
    "PARENT_MARKER_NAME",
    "PARENT_MARKER",
    "DirectoryChild",
    "ParentMarker",
    "Entry",
    "Listing",
    "is_parent_marker",
]
