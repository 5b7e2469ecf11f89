"""Persistent JSON config helpers.

Reads the icon preference, icon and separator overrides, and the theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazystatus"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def load_icons_enabled() -> bool:
    """Return whether glyph icons are enabled.

    Only explicit booleans are honoured; anything else means ``True``.
    """
    value = load_config().get("icons_enabled")
    return value if isinstance(value, bool) else True


def load_icon_overrides() -> dict[str, str]:
    """Load per-kind icon overrides, dropping non-string keys and values."""
    value = load_config().get("icons")
    if not isinstance(value, dict):
        return {}
    return {
        kind: glyph
        for kind, glyph in value.items()
        if isinstance(kind, str) and kind and isinstance(glyph, str)
    }


def load_separator_overrides() -> dict[str, tuple[str, str]]:
    """Load named separator overrides.

    Each entry must be a two-element list of strings; other shapes are
    dropped.
    """
    value = load_config().get("separators")
    if not isinstance(value, dict):
        return {}

    separators: dict[str, tuple[str, str]] = {}
    for name, pair in value.items():
        if not isinstance(name, str) or not name:
            continue
        if not isinstance(pair, list) or len(pair) != 2:
            continue
        left, right = pair
        if not isinstance(left, str) or not isinstance(right, str):
            continue
        separators[name] = (left, right)
    return separators


def load_theme_name() -> str | None:
    """Return the configured status theme name, lowercased.

    Blank or non-string values read as unset.
    """
    value = load_config().get("theme")
    if isinstance(value, str) and value.strip():
        return value.strip().lower()
    return None
