"""Host editor capabilities consumed by status helpers.

The editor is never imported directly. Callers bind its APIs into a
``HostCallbacks`` bundle, which keeps click decoding deterministic under test.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

GLOBAL_STATUSLINE = 3


@dataclass(frozen=True)
class MousePos:
    """Mouse position as reported by the host (1-based rows/columns)."""

    screenrow: int
    screencol: int
    winid: int
    line: int
    column: int = 0


@dataclass(frozen=True)
class SignMark:
    """A sign-type extmark placed on one buffer row."""

    ns_id: int | None
    sign_text: str | None
    sign_name: str | None = None
    sign_hl_group: str | None = None


@dataclass(frozen=True)
class SignDefinition:
    """A globally defined sign, as listed by hosts without per-mark definitions."""

    name: str
    text: str | None = None
    texthl: str | None = None


@dataclass(frozen=True)
class HostCallbacks:
    get_mouse_pos: Callable[[], MousePos]
    screen_string: Callable[[int, int], str]
    current_buffer: Callable[[], int]
    buffer_sign_marks: Callable[[int, int], Sequence[SignMark]]
    namespaces: Callable[[], Mapping[str, int]]
    set_current_window: Callable[[int], None]
    set_cursor: Callable[[int, int], None]
    has_mark_sign_definitions: Callable[[], bool] = lambda: True
    defined_signs: Callable[[], Sequence[SignDefinition]] = lambda: ()
    laststatus: Callable[[], int] = lambda: 2
    columns: Callable[[], int] = lambda: 80
    window_width: Callable[[int], int] = lambda _winid: 80


def width(host: HostCallbacks, is_winbar: bool = False) -> int:
    """Return the width of the status line, or of the winbar when ``is_winbar``.

    A global status line spans every column; otherwise bars are as wide as
    the current window.
    """
    if host.laststatus() == GLOBAL_STATUSLINE and not is_winbar:
        return host.columns()
    return host.window_width(0)


__all__ = [
    "MousePos",
    "SignMark",
    "SignDefinition",
    "HostCallbacks",
    "width",
]
