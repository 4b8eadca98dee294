"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the title, listing rows, filter prompt, error
and help rows.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    title: str
    selected: str
    entry_dir: str
    entry_file: str
    entry_parent: str
    filter_query: str
    filter_hint: str
    error: str
    help: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;38;5;62m",
    selected="\033[38;5;170m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    entry_parent="\033[38;5;244m",
    filter_query="\033[1;38;5;81m",
    filter_hint="\033[2;38;5;250m",
    error="\033[1;38;5;203m",
    help="\033[38;5;241m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    selected="\033[38;5;153m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_parent="\033[38;5;73m",
    filter_query="\033[1;38;5;45m",
    filter_hint="\033[2;38;5;110m",
    error="\033[1;38;5;209m",
    help="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    selected="",
    entry_dir="",
    entry_file="",
    entry_parent="",
    filter_query="",
    filter_hint="",
    error="",
    help="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
