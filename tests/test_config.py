from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazypick.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def _patched(self, tmp: str):
        return mock.patch("lazypick.runtime.config.CONFIG_PATH", Path(tmp) / "nested" / "config.json")

    def test_theme_round_trips_through_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            self.assertIsNone(config.load_theme_name())
            config.save_theme_name("  ocean ")
            self.assertEqual(config.load_theme_name(), "ocean")
            self.assertEqual(config.load_config(), {"theme": "ocean"})

    def test_blank_theme_is_not_saved(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            config.save_theme_name("   ")
            self.assertEqual(config.load_config(), {})

    def test_malformed_config_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            with mock.patch("lazypick.runtime.config.CONFIG_PATH", path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_scroll_margin(), 3)
                self.assertIsNone(config.load_log_level())

            path.write_text(json.dumps(["theme"]), encoding="utf-8")
            with mock.patch("lazypick.runtime.config.CONFIG_PATH", path):
                self.assertEqual(config.load_config(), {})

    def test_scroll_margin_validation(self) -> None:
        cases = [(5, 5), (0, 0), (-1, 3), (True, 3), ("4", 3), (2.5, 3), (99, config.MAX_SCROLL_MARGIN)]
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            for stored, expected in cases:
                config.save_config({"scroll_margin": stored})
                self.assertEqual(config.load_scroll_margin(), expected, stored)

    def test_log_level_is_uppercased(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            config.save_config({"log_level": " debug "})
            self.assertEqual(config.load_log_level(), "DEBUG")

    def test_unknown_log_level_falls_back_to_unset(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            config.save_config({"log_level": "verbose"})
            with self.assertLogs("lazypick.runtime.config", level="WARNING"):
                self.assertIsNone(config.load_log_level())

    def test_write_failure_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("lazypick.runtime.config.CONFIG_PATH", blocker / "config.json"):
                with self.assertLogs("lazypick.runtime.config", level="WARNING"):
                    config.save_theme_name("ocean")


if __name__ == "__main__":
    unittest.main()
