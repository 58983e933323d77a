"""Persistent config loading and saving tests.

Malformed files, wrong value types and out-of-range values must fall back to
defaults instead of raising.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tfm.runtime import config


class ConfigTests(unittest.TestCase):
    def _write(self, config_path: Path, payload: object) -> None:
        config_path.write_text(json.dumps(payload), encoding="utf-8")

    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("tfm.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertFalse(config.load_show_hidden())
                self.assertEqual(config.load_chord_window_ms(), 500)
                self.assertEqual(config.load_jump_command(), ("zoxide", "query"))
                self.assertIsNone(config.load_theme_name())
                self.assertEqual(config.load_preview_style(), "monokai")

    def test_malformed_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("tfm.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_non_object_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            self._write(config_path, [1, 2, 3])
            with mock.patch("tfm.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_save_show_hidden_round_trips_and_keeps_other_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("tfm.runtime.config.CONFIG_PATH", config_path):
                config.save_config({"theme": "ocean"})
                config.save_show_hidden(True)
                self.assertTrue(config.load_show_hidden())
                self.assertEqual(config.load_theme_name(), "ocean")
            stored = json.loads(config_path.read_text(encoding="utf-8"))
            self.assertEqual(stored, {"theme": "ocean", "show_hidden": True})

    def test_chord_window_is_clamped_and_rejects_non_integers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("tfm.runtime.config.CONFIG_PATH", config_path):
                for raw, expected in ((10, 50), (99999, 5000), (750, 750), (True, 500), ("300", 500)):
                    self._write(config_path, {"chord_window_ms": raw})
                    self.assertEqual(config.load_chord_window_ms(), expected)

    def test_jump_command_requires_list_of_non_empty_strings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("tfm.runtime.config.CONFIG_PATH", config_path):
                self._write(config_path, {"jump_command": ["autojump"]})
                self.assertEqual(config.load_jump_command(), ("autojump",))
                self._write(config_path, {"jump_command": ["ok", ""]})
                self.assertEqual(config.load_jump_command(), ("zoxide", "query"))
                self._write(config_path, {"jump_command": "zoxide query"})
                self.assertEqual(config.load_jump_command(), ("zoxide", "query"))

    def test_blank_strings_fall_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("tfm.runtime.config.CONFIG_PATH", config_path):
                self._write(config_path, {"theme": "  ", "preview_style": " native "})
                self.assertIsNone(config.load_theme_name())
                self.assertEqual(config.load_preview_style(), "native")


if __name__ == "__main__":
    unittest.main()
