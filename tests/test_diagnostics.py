"""Diagnostics-source registry lookup tests.

Uses in-memory registries and fake modules installed in ``sys.modules`` to
cover both the injected and the import-by-name paths.
"""

from __future__ import annotations

import sys
import unittest
from types import ModuleType, SimpleNamespace
from unittest import mock

from lazystatus import diagnostics


def _sources_module() -> ModuleType:
    module = ModuleType("null_ls.sources")
    available = {
        "python": [
            SimpleNamespace(name="ruff", methods={"NULL_LS_DIAGNOSTICS": True}),
            {"name": "black", "methods": {"NULL_LS_FORMATTING": True}},
            SimpleNamespace(name="ruff_format", methods={"NULL_LS_FORMATTING": True}),
        ]
    }
    module.get_available = lambda filetype: available.get(filetype, [])
    return module


def _methods_module() -> ModuleType:
    module = ModuleType("null_ls.methods")
    module.internal = {"DIAGNOSTICS": "NULL_LS_DIAGNOSTICS", "FORMATTING": "NULL_LS_FORMATTING"}
    return module


class DiagnosticProvidersTests(unittest.TestCase):
    def test_sources_grouped_by_method(self) -> None:
        registered = diagnostics.diagnostic_providers("python", _sources_module())
        self.assertEqual(
            registered,
            {"NULL_LS_DIAGNOSTICS": ["ruff"], "NULL_LS_FORMATTING": ["black", "ruff_format"]},
        )
        self.assertEqual(diagnostics.diagnostic_providers("lua", _sources_module()), {})

    def test_sources_for_public_method_name(self) -> None:
        sources = diagnostics.diagnostic_sources("python", "FORMATTING", _sources_module(), _methods_module())
        self.assertEqual(sources, ["black", "ruff_format"])
        self.assertEqual(
            diagnostics.diagnostic_sources("python", "HOVER", _sources_module(), _methods_module()),
            [],
        )

    def test_registry_loaded_by_module_name(self) -> None:
        modules = {
            "null_ls": ModuleType("null_ls"),
            "null_ls.sources": _sources_module(),
            "null_ls.methods": _methods_module(),
        }
        with mock.patch.dict(sys.modules, modules):
            self.assertEqual(diagnostics.diagnostic_sources("python", "DIAGNOSTICS"), ["ruff"])

    def test_missing_registry_degrades_to_empty(self) -> None:
        with mock.patch.object(diagnostics, "SOURCES_MODULE", "lazystatus_missing_registry.sources"), mock.patch.object(
            diagnostics, "METHODS_MODULE", "lazystatus_missing_registry.methods"
        ):
            self.assertEqual(diagnostics.diagnostic_providers("python"), {})
            self.assertEqual(diagnostics.diagnostic_sources("python", "DIAGNOSTICS"), [])
            self.assertEqual(
                diagnostics.diagnostic_sources("python", "DIAGNOSTICS", methods=_methods_module()),
                [],
            )


if __name__ == "__main__":
    unittest.main()
