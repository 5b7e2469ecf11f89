"""Public package surface for lazystatus.

Status line helpers: provider/component assembly, string stylizing, position
encoding, diagnostics-source lookup and status-column click decoding.
Implementation lives in submodules; this module re-exports the stable API.
"""

from __future__ import annotations

from .clicks import ClickArgs, Sign, SignCache, StatusColumnClickHandler, statuscolumn_clickargs
from .components import (
    DISABLED,
    ColorSet,
    Component,
    ComputedColor,
    LiteralColor,
    ProviderOptions,
    UpdatePolicy,
    build_provider,
    setup_providers,
    surround,
    update_events,
)
from .diagnostics import diagnostic_providers, diagnostic_sources
from .host import HostCallbacks, MousePos, SignDefinition, SignMark, width
from .icons import get_icon
from .position import decode_pos, encode_pos
from .styling import IconSpec, Padding, Separator, StylizeOptions, escape, pad_string, stylize

__all__ = [
    "ClickArgs",
    "Sign",
    "SignCache",
    "StatusColumnClickHandler",
    "statuscolumn_clickargs",
    "DISABLED",
    "ColorSet",
    "Component",
    "ComputedColor",
    "LiteralColor",
    "ProviderOptions",
    "UpdatePolicy",
    "build_provider",
    "setup_providers",
    "surround",
    "update_events",
    "diagnostic_providers",
    "diagnostic_sources",
    "HostCallbacks",
    "MousePos",
    "SignDefinition",
    "SignMark",
    "width",
    "get_icon",
    "decode_pos",
    "encode_pos",
    "IconSpec",
    "Padding",
    "Separator",
    "StylizeOptions",
    "escape",
    "pad_string",
    "stylize",
]
