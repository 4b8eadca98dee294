"""Tests for read failure classification and messages."""

from __future__ import annotations

import errno
import unittest
from pathlib import Path

from cdplus.errors import ReadFailure, ReadFailureKind


class ReadFailureTests(unittest.TestCase):
    def test_os_errors_are_classified_by_type(self) -> None:
        path = Path("/var/empty/x")
        cases = [
            (PermissionError(errno.EACCES, "Permission denied"), ReadFailureKind.PERMISSION_DENIED),
            (FileNotFoundError(errno.ENOENT, "No such file or directory"), ReadFailureKind.NOT_FOUND),
            (NotADirectoryError(errno.ENOTDIR, "Not a directory"), ReadFailureKind.NOT_A_DIRECTORY),
            (OSError(errno.EIO, "Input/output error"), ReadFailureKind.OTHER),
        ]
        for exc, kind in cases:
            with self.subTest(kind=kind):
                failure = ReadFailure.from_os_error(path, exc)
                self.assertIs(failure.kind, kind)
                self.assertEqual(failure.path, path)
                self.assertEqual(failure.detail, exc.strerror)

    def test_describe_uses_kind_for_known_failures(self) -> None:
        failure = ReadFailure(Path("/root/secret"), ReadFailureKind.PERMISSION_DENIED, "Permission denied")
        self.assertEqual(failure.describe(), "/root/secret: permission denied")

    def test_describe_uses_detail_for_other_failures(self) -> None:
        failure = ReadFailure(Path("/mnt/nfs"), ReadFailureKind.OTHER, "Stale file handle")
        self.assertEqual(failure.describe(), "/mnt/nfs: Stale file handle")
        self.assertEqual(ReadFailure(Path("/mnt/nfs"), ReadFailureKind.OTHER).describe(), "/mnt/nfs: read error")


if __name__ == "__main__":
    unittest.main()
