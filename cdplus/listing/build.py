"""Canonical listing order: parent marker, directories, then files."""

from __future__ import annotations

from collections.abc import Iterable

from .types import PARENT_MARKER, DirectoryChild, Entry, Listing, ParentMarker


def _ordinal_key(entry: DirectoryChild) -> bytes:
    # Byte-wise ordering, independent of locale and case folding.
    return entry.name.encode("utf-8", errors="surrogateescape")


def partition_entries(entries: Iterable[Entry]) -> tuple[list[DirectoryChild], list[DirectoryChild]]:
    """Split real entries into ``(directories, files)``, dropping parent markers."""
    dirs: list[DirectoryChild] = []
    files: list[DirectoryChild] = []
    for entry in entries:
        if isinstance(entry, ParentMarker):
            continue
        if entry.is_dir:
            dirs.append(entry)
        else:
            files.append(entry)
    return dirs, files


def build_listing(raw_entries: Iterable[Entry]) -> Listing:
    """Return the navigable listing for one directory scan.

    Each group is sorted independently with a stable sort, so duplicate names
    are all kept in their input order.
    """
    dirs, files = partition_entries(raw_entries)
    dirs.sort(key=_ordinal_key)
    files.sort(key=_ordinal_key)
    return (PARENT_MARKER, *dirs, *files)


__all__ = [
    "partition_entries",
    "build_listing",
]
