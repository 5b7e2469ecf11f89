"""String padding and decoration for status segments.

``stylize`` composes an optional icon, the (escaped) text, outer padding and
separator literals into a single segment string.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .icons import NO_ICON, IconSet, default_icon_set


@dataclass(frozen=True)
class Padding:
    left: int = 0
    right: int = 0

    @classmethod
    def from_mapping(cls, value: Padding | Mapping[str, object] | None, base: Padding | None = None) -> Padding:
        """Merge ``value`` over ``base`` key by key; non-int entries are ignored."""
        base = base or cls()
        if isinstance(value, Padding):
            return value
        if not isinstance(value, Mapping):
            return base
        left = value.get("left", base.left)
        right = value.get("right", base.right)
        return cls(
            left=left if isinstance(left, int) and not isinstance(left, bool) else base.left,
            right=right if isinstance(right, int) and not isinstance(right, bool) else base.right,
        )


@dataclass(frozen=True)
class Separator:
    left: str = ""
    right: str = ""

    @classmethod
    def from_mapping(cls, value: Separator | Mapping[str, object] | None, base: Separator | None = None) -> Separator:
        base = base or cls()
        if isinstance(value, Separator):
            return value
        if not isinstance(value, Mapping):
            return base
        left = value.get("left", base.left)
        right = value.get("right", base.right)
        return cls(
            left=left if isinstance(left, str) else base.left,
            right=right if isinstance(right, str) else base.right,
        )


@dataclass(frozen=True)
class IconSpec:
    kind: str = NO_ICON
    padding: Padding = field(default_factory=Padding)

    @classmethod
    def from_mapping(cls, value: IconSpec | Mapping[str, object] | None, base: IconSpec | None = None) -> IconSpec:
        base = base or cls()
        if isinstance(value, IconSpec):
            return value
        if not isinstance(value, Mapping):
            return base
        kind = value.get("kind", base.kind)
        return cls(
            kind=kind if isinstance(kind, str) else base.kind,
            padding=Padding.from_mapping(value.get("padding"), base.padding),
        )


@dataclass(frozen=True)
class StylizeOptions:
    """Options accepted by :func:`stylize`, each independently defaulted."""

    padding: Padding = field(default_factory=Padding)
    separator: Separator = field(default_factory=Separator)
    escape: bool = True
    show_empty: bool = False
    icon: IconSpec = field(default_factory=IconSpec)

    @classmethod
    def from_mapping(cls, value: StylizeOptions | Mapping[str, object] | None) -> StylizeOptions:
        """Build options from a partial mapping merged over the defaults.

        Nested ``padding``/``separator``/``icon`` mappings merge key by key.
        Unknown keys and wrongly typed values are ignored.
        """
        if isinstance(value, StylizeOptions):
            return value
        if not isinstance(value, Mapping):
            return cls()
        escape_value = value.get("escape", True)
        show_empty = value.get("show_empty", False)
        return cls(
            padding=Padding.from_mapping(value.get("padding")),
            separator=Separator.from_mapping(value.get("separator")),
            escape=escape_value if isinstance(escape_value, bool) else True,
            show_empty=show_empty if isinstance(show_empty, bool) else False,
            icon=IconSpec.from_mapping(value.get("icon")),
        )


def pad_string(text: str | None, padding: Padding | Mapping[str, object] | None = None) -> str:
    """Add ``padding.left``/``padding.right`` spaces around ``text``.

    Empty or missing text stays empty instead of becoming spaces only.
    """
    if not text:
        return ""
    pad = Padding.from_mapping(padding)
    return " " * pad.left + text + " " * pad.right


def escape(text: str) -> str:
    """Double every ``%`` so the result is a literal in statusline format strings."""
    return text.replace("%", "%%")


def stylize(
    text: str | None,
    opts: StylizeOptions | Mapping[str, object] | None = None,
    *,
    icons: IconSet | None = None,
) -> str:
    """Decorate ``text`` with an icon, padding and separators.

    Returns ``""`` when ``text`` is empty or missing, unless ``show_empty`` is
    set, in which case the decorations are still emitted.
    """
    options = StylizeOptions.from_mapping(opts)
    icon_set = icons if icons is not None else default_icon_set()
    icon = pad_string(icon_set.get_icon(options.icon.kind), options.icon.padding)
    if not text and not options.show_empty:
        return ""
    body = text or ""
    if options.escape:
        body = escape(body)
    return options.separator.left + pad_string(icon + body, options.padding) + options.separator.right


__all__ = [
    "Padding",
    "Separator",
    "IconSpec",
    "StylizeOptions",
    "pad_string",
    "escape",
    "stylize",
]
