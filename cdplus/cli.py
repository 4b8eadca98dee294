"""Command-line front door for cdplus.

Parses CLI options, merges them with persisted preferences, and launches the
interactive navigator. The exported path is printed after the TUI closes.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .export import ExportGateway
from .listing import read_directory
from .navigator import initial_state
from .render import RenderContext, build_frame_lines, chrome_rows
from .runtime import export_outcome, run_navigator
from .runtime.config import load_copy_to_clipboard, load_show_hidden, load_theme_name, save_theme_name
from .ui_theme import PLAIN_THEME, available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    """Resolve default render width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def configure_logging(log_file: str | None) -> None:
    """Attach a DEBUG file handler to the package logger when requested."""
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("cdplus")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def render_listing_view(path: Path, max_cols: int, show_hidden: bool = True) -> str:
    """Render the uncolored navigator frame for ``path`` with every entry shown."""
    children, failure = read_directory(path, show_hidden)
    if failure is not None:
        raise SystemExit(f"Error: cannot read {failure.describe()}")
    state = initial_state(path, children)
    context = RenderContext(
        state=state,
        width=max_cols + 1,
        height=chrome_rows(state) + len(state.listing),
        theme=PLAIN_THEME,
    )
    return "".join(line + "\n" for line in build_frame_lines(context))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cdplus",
        description=(
            "Browse directories interactively and print the selected path "
            "(also copied to the clipboard)."
        ),
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); saved as the new default.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    parser.add_argument("--no-clipboard", action="store_true", help="Print the path without copying it.")
    parser.add_argument("--hide-hidden", action="store_true", help="Do not list entries starting with '.'.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    parser.add_argument("--render", metavar="PATH", help="Print the listing for PATH and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run the navigator.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used as both the starting directory and the base for
    relative exports.
    """
    args = build_parser().parse_args()
    configure_logging(args.log_file)

    show_hidden = False if args.hide_hidden else load_show_hidden()

    if args.render is not None:
        render_path = Path(args.render).absolute()
        if not render_path.exists():
            raise SystemExit(f"Path not found: {render_path}")
        max_cols = args.max_cols if args.max_cols is not None else _default_render_width()
        sys.stdout.write(render_listing_view(render_path, max_cols, show_hidden))
        return

    if args.theme is not None:
        save_theme_name(args.theme)
    theme = resolve_theme(args.theme if args.theme is not None else load_theme_name(), no_color=args.no_color)

    if default_path is None:
        try:
            default_path = Path.cwd()
        except OSError as exc:
            raise SystemExit(f"Error: cannot determine working directory: {exc}") from exc
    start_path = default_path.absolute()

    outcome = run_navigator(start_path, theme, show_hidden=show_hidden)
    gateway = ExportGateway(use_clipboard=not args.no_clipboard and load_copy_to_clipboard())
    status = export_outcome(outcome, start_path, gateway)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
