"""Status-column click decoding.

Maps a mouse click on the sign column to the sign rendered under the pointer
and jumps the cursor to the clicked line. Sign metadata is gathered lazily
from the host on the first click that misses the cache.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .host import HostCallbacks, MousePos

DEFAULT_SIGN_HL = "NoTexthl"


def _strip_whitespace(text: str) -> str:
    return "".join(text.split())


@dataclass(frozen=True)
class Sign:
    name: str | None
    text: str | None
    texthl: str = DEFAULT_SIGN_HL
    namespace: str | None = None


@dataclass
class SignCache:
    """Glyph-to-sign and namespace-id-to-name lookups for one click handler.

    Entries are added on cache misses and never refreshed, so signs redefined
    after they were first seen keep their old metadata until ``clear``.
    """

    signs: dict[str, Sign] = field(default_factory=dict)
    namespaces: dict[int, str] | None = None

    def lookup(self, char: str) -> Sign | None:
        return self.signs.get(char)

    def add(self, text: str, sign: Sign) -> None:
        self.signs[_strip_whitespace(text)] = sign

    def namespace_name(self, host: HostCallbacks, ns_id: int | None) -> str | None:
        """Return the name of ``ns_id``, reloading the namespace map when it is unknown."""
        if ns_id is None:
            return None
        if self.namespaces is None or ns_id not in self.namespaces:
            self.namespaces = {ns: name for name, ns in host.namespaces().items()}
        return self.namespaces.get(ns_id)

    def clear(self) -> None:
        self.signs.clear()
        self.namespaces = None


@dataclass(frozen=True)
class ClickArgs:
    """Decoded click information handed to status-column click callbacks."""

    minwid: object
    clicks: int
    button: str
    mods: str
    mousepos: MousePos
    char: str
    sign: Sign | None = None


class StatusColumnClickHandler:
    """Decode status-column clicks against a host, caching sign metadata."""

    def __init__(self, host: HostCallbacks, cache: SignCache | None = None) -> None:
        self._host = host
        self.cache = cache if cache is not None else SignCache()
        self.bufnr: int | None = None

    def _char_at(self, mousepos: MousePos) -> str:
        char = self._host.screen_string(mousepos.screenrow, mousepos.screencol)
        if char == " ":
            # sign glyphs are right-padded to the column width
            char = self._host.screen_string(mousepos.screenrow, mousepos.screencol - 1)
        return char

    def _seed_defined_signs(self) -> None:
        for sign_def in self._host.defined_signs():
            if sign_def.text:
                self.cache.add(
                    sign_def.text,
                    Sign(
                        name=sign_def.name,
                        text=sign_def.text,
                        texthl=sign_def.texthl or DEFAULT_SIGN_HL,
                    ),
                )

    def _seed_row_signs(self, row: int) -> None:
        if self.bufnr is None:
            self.bufnr = self._host.current_buffer()
        for mark in self._host.buffer_sign_marks(self.bufnr, row):
            namespace = self.cache.namespace_name(self._host, mark.ns_id)
            if not mark.sign_text:
                continue
            self.cache.add(
                mark.sign_text,
                Sign(
                    name=mark.sign_name,
                    text=mark.sign_text,
                    texthl=mark.sign_hl_group or DEFAULT_SIGN_HL,
                    namespace=namespace,
                ),
            )

    def resolve_click(self, minwid: object, clicks: int, button: str, mods: str) -> ClickArgs:
        """Decode a click and move the cursor to the clicked line.

        The cursor jump happens whether or not a sign was found; a click
        outside any sign yields ``sign=None``.
        """
        mousepos = self._host.get_mouse_pos()
        char = self._char_at(mousepos)

        sign = self.cache.lookup(char)
        if sign is None:
            if not self._host.has_mark_sign_definitions():
                self._seed_defined_signs()
            self._seed_row_signs(mousepos.line - 1)
            sign = self.cache.lookup(char)

        self._host.set_current_window(mousepos.winid)
        self._host.set_cursor(mousepos.line, 0)
        return ClickArgs(
            minwid=minwid,
            clicks=clicks,
            button=button,
            mods=mods,
            mousepos=mousepos,
            char=char,
            sign=sign,
        )


def statuscolumn_clickargs(
    handler: StatusColumnClickHandler,
    minwid: object,
    clicks: int,
    button: str,
    mods: str,
) -> ClickArgs:
    """Callback-shaped wrapper around :meth:`StatusColumnClickHandler.resolve_click`."""
    return handler.resolve_click(minwid, clicks, button, mods)


__all__ = [
    "DEFAULT_SIGN_HL",
    "Sign",
    "SignCache",
    "ClickArgs",
    "StatusColumnClickHandler",
    "statuscolumn_clickargs",
]
