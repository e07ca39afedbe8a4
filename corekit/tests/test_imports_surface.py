"""Smoke tests for the re-export surfaces.

Ensures every name listed in ``__all__`` of the public modules is importable,
so facade modules never drift from their ``*_parts`` implementations.
"""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "corekit",
        "corekit.cancellation",
        "corekit.deferred",
        "corekit.logging",
        "corekit.log_support",
        "corekit.utils",
        "corekit.config",
    ],
)
def test_public_exports_present(module_name: str) -> None:
    module = importlib.import_module(module_name)
    if not hasattr(module, "__all__"):
        raise AssertionError(f"{module_name} must define __all__")
    missing = [name for name in module.__all__ if not hasattr(module, name)]
    if missing:
        raise AssertionError(f"Missing re-exports in {module_name}: {missing}")


def test_stdlib_logging_is_not_shadowed() -> None:
    """``corekit.logging`` must not replace the standard library module."""
    import logging

    import corekit.logging as corekit_logging

    assert logging is not corekit_logging  # nosec B101 - asserts are fine in tests
    assert hasattr(logging, "getLogger")  # nosec B101 - asserts are fine in tests
