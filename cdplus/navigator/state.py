"""Immutable navigator state and its derived views."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..errors import ReadFailure
from ..formatting import FormatCode
from ..listing import Entry, Listing, is_parent_marker


@dataclass(frozen=True)
class Browsing:
    """Full listing is visible."""


@dataclass(frozen=True)
class Filtering:
    """Only entries whose name contains ``text`` are visible."""

    text: str = ""


Mode = Browsing | Filtering

BROWSING = Browsing()


def visible_indices(listing: Listing, mode: Mode) -> tuple[int, ...]:
    """Return listing indices visible in ``mode`` (case-sensitive substring match)."""
    if isinstance(mode, Filtering):
        return tuple(idx for idx, entry in enumerate(listing) if mode.text in entry.name)
    return tuple(range(len(listing)))


@dataclass(frozen=True)
class NavigatorState:
    """One snapshot of the navigator.

    ``cursor`` indexes the visible sequence and is ``None`` only when that
    sequence is empty (a filter with no matches).
    """

    current_path: Path
    listing: Listing
    cursor: int | None = 0
    mode: Mode = BROWSING
    last_error: ReadFailure | None = None
    pending_export_format: FormatCode | None = None

    @property
    def filtering(self) -> bool:
        return isinstance(self.mode, Filtering)

    @property
    def filter_text(self) -> str:
        return self.mode.text if isinstance(self.mode, Filtering) else ""

    @property
    def visible_indices(self) -> tuple[int, ...]:
        return visible_indices(self.listing, self.mode)

    @property
    def visible_entries(self) -> tuple[Entry, ...]:
        return tuple(self.listing[idx] for idx in self.visible_indices)

    @property
    def selected_listing_index(self) -> int | None:
        """Return the listing index of the highlighted entry, if any."""
        if self.cursor is None:
            return None
        indices = self.visible_indices
        if not 0 <= self.cursor < len(indices):
            return None
        return indices[self.cursor]

    @property
    def selected_entry(self) -> Entry | None:
        idx = self.selected_listing_index
        return None if idx is None else self.listing[idx]

    @property
    def selected_path(self) -> Path:
        """Path exported for the highlighted entry.

        The parent marker and "no selection" both stand for ``current_path``.
        """
        entry = self.selected_entry
        if entry is None or is_parent_marker(entry):
            return self.current_path
        return self.current_path / entry.name


__all__ = [
    "Browsing",
    "Filtering",
    "Mode",
    "BROWSING",
    "visible_indices",
    "NavigatorState",
]
