"""Background directory reads for the navigator loop."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path
from queue import Empty, Queue

from ..errors import ReadFailure
from ..listing import DirectoryChild, read_directory
from ..navigator import DirectoryRead

logger = logging.getLogger(__name__)

ReadDirectoryFn = Callable[[Path, bool], tuple[list[DirectoryChild], ReadFailure | None]]


class DirectoryReadScheduler:
    """Fire-and-forget directory scans, one daemon thread per request.

    Results are queued in completion order and drained by the loop thread.
    Outstanding reads are never cancelled or collapsed.
    """

    def __init__(
        self,
        show_hidden: bool = True,
        read_directory_fn: ReadDirectoryFn = read_directory,
    ) -> None:
        self._show_hidden = show_hidden
        self._read_directory = read_directory_fn
        self._results: Queue[DirectoryRead] = Queue()
        self._next_request_id = 1

    def read_now(self, path: Path) -> DirectoryRead:
        """Scan ``path`` on the calling thread."""
        try:
            children, failure = self._read_directory(path, self._show_hidden)
        except OSError as exc:
            failure = ReadFailure.from_os_error(path, exc)
            children = []
        if failure is not None:
            return DirectoryRead(path=path, failure=failure)
        return DirectoryRead(path=path, children=tuple(children))

    def _worker(self, path: Path) -> None:
        self._results.put(self.read_now(path))

    def schedule(self, path: Path) -> int:
        """Start a background scan of ``path`` and return its request id."""
        request_id = self._next_request_id
        self._next_request_id += 1
        logger.debug("scheduling read #%d for %s", request_id, path)
        worker = threading.Thread(
            target=self._worker,
            args=(path,),
            name=f"cdplus-read-directory-{request_id}",
            daemon=True,
        )
        worker.start()
        return request_id

    def drain_results(self) -> list[DirectoryRead]:
        """Drain all completed reads in arrival order."""
        out: list[DirectoryRead] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out


__all__ = [
    "ReadDirectoryFn",
    "DirectoryReadScheduler",
]
