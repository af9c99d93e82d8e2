"""Tests for config persistence and input sanitization.

Validates theme and session round-tripping.
Ensures malformed config data is safely normalized on load.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from layerview import config
from layerview.navigation import Session


class ConfigBehaviorTests(unittest.TestCase):
    def test_session_round_trip_preserves_other_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("layerview.config.CONFIG_PATH", config_path):
                config.save_theme_name("ocean")
                config.save_session(Session(depth=4))

                self.assertEqual(config.load_session(), Session(depth=4))
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertEqual(config.load_config()["session"], {"depth": 4})

    def test_missing_or_malformed_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("layerview.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_session())

                config_path.write_text("{broken", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_load_session_rejects_invalid_depths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("layerview.config.CONFIG_PATH", config_path):
                for raw in ({"depth": -1}, {"depth": True}, {"depth": 1.5}, {"depth": "2"}, "bad", {}):
                    config.save_config({"session": raw})
                    with self.subTest(raw=raw):
                        self.assertIsNone(config.load_session())

    def test_blank_theme_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("layerview.config.CONFIG_PATH", config_path):
                config.save_theme_name("   ")
                self.assertIsNone(config.load_theme_name())
                config.save_config({"theme": 3})
                self.assertIsNone(config.load_theme_name())

    def test_save_failure_is_not_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("layerview.config.CONFIG_PATH", blocker / "config.json"):
                config.save_session(Session(depth=2))
                self.assertIsNone(config.load_session())


if __name__ == "__main__":
    unittest.main()
