"""Public runtime orchestration entry points.

This package groups the interactive navigator bootstrap (``run_navigator``),
the export step, and the lower-level event loop contracts used by tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import LoopOutcome, RuntimeLoopCallbacks, RuntimeLoopTiming


def run_navigator(*args, **kwargs):
    """Lazily import navigator entrypoint to avoid terminal imports on package import."""
    from .app import run_navigator as _run_navigator

    return _run_navigator(*args, **kwargs)


def export_outcome(*args, **kwargs):
    from .app import export_outcome as _export_outcome

    return _export_outcome(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name in {"LoopOutcome", "RuntimeLoopCallbacks", "RuntimeLoopTiming"}:
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_navigator",
    "export_outcome",
    "LoopOutcome",
    "RuntimeLoopCallbacks",
    "RuntimeLoopTiming",
    "run_main_loop",
]
