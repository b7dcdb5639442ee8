"""Smoke tests to verify the project setup works correctly."""

from __future__ import annotations

import distributions
import permutations
from core import types


def test_import_core_types() -> None:
    """Verify that core.types can be imported successfully."""
    assert types is not None


def test_public_api_exports() -> None:
    for name in distributions.__all__:
        assert hasattr(distributions, name)
    for name in permutations.__all__:
        assert hasattr(permutations, name)
