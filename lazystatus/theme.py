"""Status theme definitions and separator lookup.

A theme carries the table of named separator pairs that ``surround`` resolves
string keys against. Without an explicit theme, lookups use the configured
theme, loaded once on first use.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace

from . import config

SeparatorPair = tuple[str, str]
EMPTY_SEPARATOR: SeparatorPair = ("", "")


@dataclass(frozen=True)
class StatusTheme:
    """Named separator glyphs used by status components."""

    name: str
    separators: Mapping[str, SeparatorPair] = field(default_factory=dict)


DEFAULT_THEME = StatusTheme(
    name="default",
    separators={
        "none": ("", ""),
        "left": ("", "  "),
        "right": ("  ", ""),
        "center": ("  ", "  "),
        "tab": ("", " "),
    },
)

POWERLINE_THEME = StatusTheme(
    name="powerline",
    separators={
        "none": ("", ""),
        "left": ("", ""),
        "right": ("", ""),
        "center": ("", ""),
        "tab": ("", ""),
    },
)

ASCII_THEME = StatusTheme(
    name="ascii",
    separators={
        "none": ("", ""),
        "left": ("", " "),
        "right": (" ", ""),
        "center": (" ", " "),
        "tab": ("", " "),
    },
)

_THEMES: dict[str, StatusTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    POWERLINE_THEME.name: POWERLINE_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-ascii theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, ascii_only: bool = False) -> StatusTheme:
    """Return concrete theme for requested name and glyph support."""
    if ascii_only:
        return ASCII_THEME
    return _THEMES[normalize_theme_name(name)]


def with_separator_overrides(theme: StatusTheme, overrides: Mapping[str, SeparatorPair]) -> StatusTheme:
    """Return ``theme`` with ``overrides`` layered over its separator table."""
    if not overrides:
        return theme
    separators = dict(theme.separators)
    separators.update(overrides)
    return replace(theme, separators=separators)


def load_theme(*, ascii_only: bool = False) -> StatusTheme:
    """Resolve the configured theme and apply configured separator overrides."""
    theme = resolve_theme(config.load_theme_name(), ascii_only=ascii_only)
    return with_separator_overrides(theme, config.load_separator_overrides())


_DEFAULT_THEME: StatusTheme | None = None


def default_theme() -> StatusTheme:
    """Return the configured theme, loading it on first use."""
    global _DEFAULT_THEME
    if _DEFAULT_THEME is None:
        _DEFAULT_THEME = load_theme()
    return _DEFAULT_THEME


def reset_default_theme() -> None:
    """Forget the cached theme so the next lookup reloads config."""
    global _DEFAULT_THEME
    _DEFAULT_THEME = None


def resolve_separator(spec: str | Sequence[str], theme: StatusTheme | None = None) -> SeparatorPair:
    """Return the ``(left, right)`` glyph pair for a separator spec.

    A string is looked up in the separator table of ``theme``, or of the
    configured theme when none is given; unknown names give an empty
    pair. A sequence is taken literally, missing sides as ``""``.
    """
    if isinstance(spec, str):
        theme = theme or default_theme()
        return theme.separators.get(spec, EMPTY_SEPARATOR)
    left = spec[0] if len(spec) > 0 else ""
    right = spec[1] if len(spec) > 1 else ""
    return left, right


__all__ = [
    "SeparatorPair",
    "StatusTheme",
    "DEFAULT_THEME",
    "POWERLINE_THEME",
    "ASCII_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "with_separator_overrides",
    "load_theme",
    "default_theme",
    "reset_default_theme",
    "resolve_separator",
]
