"""Icon lookup for status components.

Glyph icons assume a Nerd Font; ``TEXT_ICONS`` holds plain fallbacks used
when glyphs are disabled in config. The ``NONE`` kind always resolves to an
empty string.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from . import config

NO_ICON = "NONE"

DEFAULT_ICONS: dict[str, str] = {
    "ActiveLSP": "",
    "ActiveTS": "",
    "ArrowLeft": "",
    "ArrowRight": "",
    "BufferClose": "\U000f0156",
    "DiagnosticError": "",
    "DiagnosticHint": "\U000f0335",
    "DiagnosticInfo": "\U000f02fd",
    "DiagnosticWarn": "",
    "Ellipsis": "…",
    "FileModified": "",
    "FileReadOnly": "",
    "FoldClosed": "",
    "FoldOpened": "",
    "FoldSeparator": " ",
    "GitAdd": "",
    "GitBranch": "",
    "GitChange": "",
    "GitDelete": "",
    "Macro": "",
    "Paste": "\U000f0192",
    "Search": "",
    "Selected": "❱",
    "Spellcheck": "\U000f04c6",
    "Tab": "\U000f0513",
}

TEXT_ICONS: dict[str, str] = {
    "ActiveLSP": "LSP:",
    "ArrowLeft": "<",
    "ArrowRight": ">",
    "BufferClose": "x",
    "DiagnosticError": "X",
    "DiagnosticHint": "?",
    "DiagnosticInfo": "i",
    "DiagnosticWarn": "!",
    "Ellipsis": "...",
    "FileModified": "*",
    "FileReadOnly": "[lock]",
    "FoldClosed": "+",
    "FoldOpened": "-",
    "FoldSeparator": " ",
    "GitAdd": "[+]",
    "GitBranch": "[git]",
    "GitChange": "[/]",
    "GitDelete": "[-]",
    "Macro": "Recording:",
    "Paste": "[PASTE]",
    "Search": "?",
    "Selected": ">",
    "Spellcheck": "[SPELL]",
    "Tab": "[TAB]",
}


@dataclass(frozen=True)
class IconSet:
    """Glyph and text icon tables plus the active mode."""

    icons: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_ICONS))
    text_icons: Mapping[str, str] = field(default_factory=lambda: dict(TEXT_ICONS))
    enabled: bool = True

    def get_icon(self, kind: str, padding: int = 0, no_fallback: bool = False) -> str:
        """Return the icon for ``kind`` followed by ``padding`` spaces.

        With glyphs disabled only text icons are consulted. With glyphs
        enabled a missing glyph falls back to the text icon unless
        ``no_fallback`` is set. Unknown kinds and ``NONE`` give ``""``.
        """
        if not kind or kind == NO_ICON:
            return ""
        if self.enabled:
            icon = self.icons.get(kind)
            if icon is None and not no_fallback:
                icon = self.text_icons.get(kind)
        else:
            icon = self.text_icons.get(kind)
        if not icon:
            return ""
        return icon + " " * max(0, padding)


def load_icon_set() -> IconSet:
    """Build an icon set from built-in tables and config overrides."""
    icons = dict(DEFAULT_ICONS)
    icons.update(config.load_icon_overrides())
    return IconSet(icons=icons, text_icons=dict(TEXT_ICONS), enabled=config.load_icons_enabled())


_DEFAULT_ICON_SET: IconSet | None = None


def default_icon_set() -> IconSet:
    """Return the process-wide icon set, loading it on first use."""
    global _DEFAULT_ICON_SET
    if _DEFAULT_ICON_SET is None:
        _DEFAULT_ICON_SET = load_icon_set()
    return _DEFAULT_ICON_SET


def reset_default_icon_set() -> None:
    """Forget the cached icon set so the next lookup reloads config."""
    global _DEFAULT_ICON_SET
    _DEFAULT_ICON_SET = None


def get_icon(kind: str, padding: int = 0, no_fallback: bool = False) -> str:
    """Look up ``kind`` in the configured icon set."""
    return default_icon_set().get_icon(kind, padding=padding, no_fallback=no_fallback)


__all__ = [
    "NO_ICON",
    "DEFAULT_ICONS",
    "TEXT_ICONS",
    "IconSet",
    "load_icon_set",
    "default_icon_set",
    "reset_default_icon_set",
    "get_icon",
]
