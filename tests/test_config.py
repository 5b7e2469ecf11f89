"""Tests for config loading and input sanitization.

Validates icon/separator overrides and theme name normalization.
Ensures malformed config data is safely normalized on load, and that the
configured theme reaches separator lookups made without an explicit theme.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazystatus import config, icons, theme
from lazystatus.components import Component, surround


def _write_config(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data) + "\n", encoding="utf-8")


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_loads_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazystatus.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]\n", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_theme_name_is_trimmed_and_lowercased(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("lazystatus.config.CONFIG_PATH", config_path):
                self.assertIsNone(config.load_theme_name())
                _write_config(config_path, {"theme": "  PowerLine "})
                self.assertEqual(config.load_theme_name(), "powerline")
                _write_config(config_path, {"theme": "   "})
                self.assertIsNone(config.load_theme_name())
                _write_config(config_path, {"theme": 3})
                self.assertIsNone(config.load_theme_name())

    def test_icons_enabled_accepts_only_booleans(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazystatus.config.CONFIG_PATH", config_path):
                _write_config(config_path, {"icons_enabled": "no"})
                self.assertTrue(config.load_icons_enabled())
                _write_config(config_path, {"icons_enabled": False})
                self.assertFalse(config.load_icons_enabled())

    def test_overrides_drop_invalid_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazystatus.config.CONFIG_PATH", config_path):
                _write_config(
                    config_path,
                    {
                        "icons": {"GitBranch": "G", "Bad": 3, "": "x"},
                        "separators": {
                            "left": ["(", ")"],
                            "short": ["("],
                            "typed": [1, ")"],
                            "shape": "()",
                        },
                    },
                )
                self.assertEqual(config.load_icon_overrides(), {"GitBranch": "G"})
                self.assertEqual(config.load_separator_overrides(), {"left": ("(", ")")})

    def test_loaded_theme_and_icons_apply_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazystatus.config.CONFIG_PATH", config_path):
                _write_config(
                    config_path,
                    {
                        "theme": "powerline",
                        "icons_enabled": False,
                        "icons": {"GitBranch": "G"},
                        "separators": {"left": ["(", ")"]},
                    },
                )
                loaded_theme = theme.load_theme()
                icon_set = icons.load_icon_set()

            self.assertEqual(loaded_theme.name, "powerline")
            self.assertEqual(loaded_theme.separators["left"], ("(", ")"))
            self.assertEqual(loaded_theme.separators["none"], ("", ""))
            self.assertFalse(icon_set.enabled)
            self.assertEqual(icon_set.icons["GitBranch"], "G")
            self.assertEqual(icon_set.get_icon("GitBranch"), icons.TEXT_ICONS["GitBranch"])


class ConfiguredSeparatorTests(unittest.TestCase):
    def setUp(self) -> None:
        theme.reset_default_theme()
        self.addCleanup(theme.reset_default_theme)

    def test_surround_uses_configured_separator_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            _write_config(config_path, {"separators": {"left": ["(", ")"]}})
            with mock.patch("lazystatus.config.CONFIG_PATH", config_path):
                surrounded = surround("left", "Red", Component(provider="body"))

        self.assertEqual([child.provider for child in surrounded.children], ["(", "body", ")"])

    def test_configured_theme_name_selects_separator_table(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            _write_config(config_path, {"theme": "powerline"})
            with mock.patch("lazystatus.config.CONFIG_PATH", config_path):
                pair = theme.resolve_separator("left")

        self.assertEqual(pair, theme.POWERLINE_THEME.separators["left"])

    def test_configured_theme_is_loaded_once(self) -> None:
        with mock.patch("lazystatus.theme.load_theme", return_value=theme.ASCII_THEME) as load:
            self.assertEqual(theme.resolve_separator("right"), (" ", ""))
            self.assertEqual(theme.resolve_separator("center"), (" ", " "))
        self.assertEqual(load.call_count, 1)


if __name__ == "__main__":
    unittest.main()
