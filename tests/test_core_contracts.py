"""Tests for the source protocols.

This module contains:
- Minimal implementations of each protocol to verify they are accepted
- Checks that objects missing the protocol methods are not
- An end-to-end run driving every operation from one user-defined source
"""

from __future__ import annotations

import random

from core.protocols import IndexSource, UniformSource
from distributions import (
    sample_exponential,
    sample_exponential_list,
    sample_normal,
    sample_normal_list,
)
from permutations import shuffle

# =============================================================================
# Dummy implementations for protocol verification
# =============================================================================


class LcgSource:
    """A tiny linear congruential source implementing both protocols."""

    def __init__(self, seed: int) -> None:
        self._state = seed

    def _next(self) -> int:
        self._state = (1103515245 * self._state + 12345) % 2**31
        return self._state

    def random(self) -> float:
        return self._next() / 2**31

    def randrange(self, stop: int) -> int:
        return self._next() % stop


class NotASource:
    def next_double(self) -> float:
        return 0.5


def test_dummy_satisfies_protocols() -> None:
    source = LcgSource(1)
    assert isinstance(source, UniformSource)
    assert isinstance(source, IndexSource)


def test_missing_methods_fail_protocol_checks() -> None:
    assert not isinstance(NotASource(), UniformSource)
    assert not isinstance(NotASource(), IndexSource)


def test_all_operations_with_custom_source() -> None:
    source = LcgSource(2024)

    assert isinstance(sample_normal(source, 1.0, 2.0), float)
    assert 0.0 <= sample_exponential(source, 0.0, 3.0) < 3.0
    assert len(sample_normal_list(source, 7, decimals=1)) == 7
    assert len(sample_exponential_list(source, 4, 1.0, 2.0)) == 4

    items = list(range(20))
    shuffle(items, source)
    assert sorted(items) == list(range(20))


def test_stdlib_random_matches_itself() -> None:
    a = sample_normal_list(random.Random(9), 5)
    b = sample_normal_list(random.Random(9), 5)
    assert a == b
