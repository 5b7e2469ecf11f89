"""Lookup of diagnostics/formatting sources registered for a filetype.

The source registry is an optional collaborator loaded by module name. When it
is not installed every lookup returns empty results.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from types import ModuleType

SOURCES_MODULE = "null_ls.sources"
METHODS_MODULE = "null_ls.methods"


def _load_module(name: str) -> ModuleType | None:
    try:
        return importlib.import_module(name)
    except ImportError:
        return None


def _field(source: object, name: str) -> object:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def diagnostic_providers(filetype: str, registry: object | None = None) -> dict[str, list[str]]:
    """Return source names keyed by registry method for ``filetype``.

    ``registry`` defaults to the module named by ``SOURCES_MODULE`` and must
    expose ``get_available(filetype)`` returning sources with ``name`` and
    ``methods``.
    """
    if registry is None:
        registry = _load_module(SOURCES_MODULE)
        if registry is None:
            return {}

    registered: dict[str, list[str]] = {}
    for source in registry.get_available(filetype):
        name = _field(source, "name")
        for method in _field(source, "methods") or ():
            registered.setdefault(method, []).append(name)
    return registered


def diagnostic_sources(
    filetype: str,
    method: str,
    registry: object | None = None,
    methods: object | None = None,
) -> list[str]:
    """Return the sources for ``filetype`` that provide ``method``.

    ``method`` is a public method name translated through the registry's
    ``internal`` table (``METHODS_MODULE`` by default). Unknown methods or a
    missing registry give an empty list.
    """
    if methods is None:
        methods = _load_module(METHODS_MODULE)
        if methods is None:
            return []
    internal = _field(methods, "internal") or {}
    internal_method = internal.get(method)
    if internal_method is None:
        return []
    return diagnostic_providers(filetype, registry).get(internal_method, [])


__all__ = [
    "SOURCES_MODULE",
    "METHODS_MODULE",
    "diagnostic_providers",
    "diagnostic_sources",
]
