"""Filesystem scanning for one directory level."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import ReadFailure
from .types import DirectoryChild

logger = logging.getLogger(__name__)


def read_directory(
    directory: Path,
    show_hidden: bool = True,
) -> tuple[list[DirectoryChild], ReadFailure | None]:
    """Scan ``directory`` and return ``(children, failure)``.

    Children come back in scan order; ordering is the listing builder's job.
    ``failure`` is set, and ``children`` empty, when the directory cannot be
    scanned. Symlinks are not followed, so a link to a directory lists as a file.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=name, is_dir=is_dir))
    except OSError as exc:
        failure = ReadFailure.from_os_error(directory, exc)
        logger.debug("directory read failed: %s", failure.describe())
        return [], failure

    logger.debug("read %d entries from %s", len(children), directory)
    return children, None


__all__ = [
    "read_directory",
]
