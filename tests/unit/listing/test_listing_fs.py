"""Tests for one-level directory scanning and failure classification."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from cdplus.errors import ReadFailureKind
from cdplus.listing import read_directory


class ReadDirectoryTests(unittest.TestCase):
    def test_reads_names_and_directory_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "pkg").mkdir()
            (root / "notes.txt").write_text("x\n", encoding="utf-8")
            (root / ".env").write_text("A=1\n", encoding="utf-8")

            children, failure = read_directory(root)

        self.assertIsNone(failure)
        by_name = {child.name: child.is_dir for child in children}
        self.assertEqual(by_name, {"pkg": True, "notes.txt": False, ".env": False})

    def test_hidden_entries_can_be_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".git").mkdir()
            (root / "main.py").write_text("", encoding="utf-8")

            children, failure = read_directory(root, show_hidden=False)

        self.assertIsNone(failure)
        self.assertEqual([child.name for child in children], ["main.py"])

    @unittest.skipIf(os.name == "nt", "symlink creation needs privileges on Windows")
    def test_symlink_to_directory_lists_as_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real").mkdir()
            (root / "link").symlink_to(root / "real", target_is_directory=True)

            children, failure = read_directory(root)

        self.assertIsNone(failure)
        by_name = {child.name: child.is_dir for child in children}
        self.assertTrue(by_name["real"])
        self.assertFalse(by_name["link"])

    def test_missing_directory_reports_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "gone"

            children, failure = read_directory(missing)

        self.assertEqual(children, [])
        self.assertIsNotNone(failure)
        self.assertIs(failure.kind, ReadFailureKind.NOT_FOUND)
        self.assertEqual(failure.path, missing)
        self.assertIn("gone", failure.describe())

    def test_regular_file_reports_not_a_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")

            children, failure = read_directory(target)

        self.assertEqual(children, [])
        self.assertIsNotNone(failure)
        self.assertIs(failure.kind, ReadFailureKind.NOT_A_DIRECTORY)

    @unittest.skipIf(os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0), "needs POSIX permissions as non-root")
    def test_unreadable_directory_reports_permission_denied(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            locked = Path(tmp) / "locked"
            locked.mkdir()
            locked.chmod(0)
            try:
                children, failure = read_directory(locked)
            finally:
                locked.chmod(0o755)

        self.assertEqual(children, [])
        self.assertIsNotNone(failure)
        self.assertIs(failure.kind, ReadFailureKind.PERMISSION_DENIED)


if __name__ == "__main__":
    unittest.main()
