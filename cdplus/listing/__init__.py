"""Directory listing model.

This package contains non-UI listing primitives:
- entry datatypes (real children and the synthetic parent marker)
- the canonical listing order builder
- a one-level filesystem scanner
"""

from __future__ import annotations

from .types import (
    PARENT_MARKER,
    PARENT_MARKER_NAME,
    DirectoryChild,
    Entry,
    Listing,
    ParentMarker,
    is_parent_marker,
)
from .build import build_listing, partition_entries
from .fs import read_directory

__all__ = [
    "PARENT_MARKER",
    "PARENT_MARKER_NAME",
    "DirectoryChild",
    "ParentMarker",
    "Entry",
    "Listing",
    "is_parent_marker",
    "build_listing",
    "partition_entries",
    "read_directory",
]
