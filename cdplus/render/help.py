"""Help-row text for browsing and filtering modes."""

from __future__ import annotations

from ..formatting import FormatCode


def copy_help_text() -> str:
    """Return the one-line list of export keys."""
    parts = [f"{code.key} ({code.label})" for code in FormatCode]
    return "Copy: " + " • ".join(parts)


BROWSING_HELP_TEXT = "↑/k ↓/j move • pgup/pgdn page • enter/l open • h/backspace up • / filter • q quit"
FILTERING_HELP_TEXT = "type to filter • ↑/↓ move • enter open • esc clear filter • ctrl+c quit"


def help_lines(filtering: bool) -> tuple[str, ...]:
    """Return help rows for the current mode."""
    if filtering:
        return (FILTERING_HELP_TEXT,)
    return (BROWSING_HELP_TEXT, copy_help_text())
