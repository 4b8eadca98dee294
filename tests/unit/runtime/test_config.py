from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from cdplus.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name) / "nested" / "config.json"
        patcher = mock.patch("cdplus.runtime.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _write(self, text: str) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(text, encoding="utf-8")

    def test_missing_config_uses_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertTrue(config.load_show_hidden())
        self.assertTrue(config.load_copy_to_clipboard())
        self.assertIsNone(config.load_theme_name())

    def test_malformed_or_non_object_config_is_ignored(self) -> None:
        for text in ("{not json", "[1, 2]", '"theme"'):
            with self.subTest(text=text):
                self._write(text)
                self.assertEqual(config.load_config(), {})
                self.assertTrue(config.load_show_hidden())

    def test_boolean_preferences_require_real_booleans(self) -> None:
        self._write(json.dumps({"show_hidden": False, "copy_to_clipboard": "no"}))
        self.assertFalse(config.load_show_hidden())
        self.assertTrue(config.load_copy_to_clipboard())

    def test_theme_name_round_trips_and_preserves_other_keys(self) -> None:
        self._write(json.dumps({"show_hidden": False}))

        config.save_theme_name("  ocean ")

        saved = json.loads(self.config_path.read_text(encoding="utf-8"))
        self.assertEqual(saved, {"show_hidden": False, "theme": "ocean"})
        self.assertEqual(config.load_theme_name(), "ocean")

    def test_blank_theme_name_is_not_saved(self) -> None:
        config.save_theme_name("   ")
        self.assertFalse(self.config_path.exists())

    def test_blank_or_non_string_theme_loads_as_unset(self) -> None:
        for value in ("  ", 3, None):
            with self.subTest(value=value):
                self._write(json.dumps({"theme": value}))
                self.assertIsNone(config.load_theme_name())

    def test_save_failure_is_swallowed(self) -> None:
        with mock.patch.object(Path, "write_text", side_effect=OSError("read-only")):
            config.save_config({"theme": "plain"})
        self.assertFalse(self.config_path.exists())


if __name__ == "__main__":
    unittest.main()
