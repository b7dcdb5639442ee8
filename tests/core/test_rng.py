"""Tests for uniform sources and the per-thread registry.

This module tests:
- NumpyUniformSource ranges, determinism and protocol conformance
- The tick/thread seed formula
- ThreadLocalSources caching, reset and creation logging
"""

from __future__ import annotations

import random
import threading

import numpy as np
import pytest
from structlog.testing import capture_logs

from core.protocols import IndexSource, UniformSource
from core.rng import (
    NumpyUniformSource,
    ThreadLocalSources,
    default_sources,
    make_uniform_source,
    thread_source,
    tick_thread_seed,
)


class TestNumpyUniformSource:
    """Tests for NumpyUniformSource and make_uniform_source."""

    def test_ranges(self) -> None:
        source = make_uniform_source(0)
        floats = [source.random() for _ in range(1000)]
        ints = [source.randrange(4) for _ in range(1000)]

        assert all(isinstance(v, float) and 0.0 <= v < 1.0 for v in floats)
        assert set(ints) == {0, 1, 2, 3}
        assert all(isinstance(v, int) for v in ints)

    def test_seed_deterministic(self) -> None:
        a = make_uniform_source(17)
        b = NumpyUniformSource(np.random.default_rng(17))
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

    def test_randrange_rejects_empty_range(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            make_uniform_source(0).randrange(0)

    def test_sources_satisfy_protocols(self) -> None:
        assert isinstance(make_uniform_source(1), UniformSource)
        assert isinstance(make_uniform_source(1), IndexSource)
        assert isinstance(random.Random(1), UniformSource)
        assert isinstance(random.Random(1), IndexSource)


class TestTickThreadSeed:
    def test_formula(self) -> None:
        assert tick_thread_seed(tick_ms=10, thread_id=5) == 315
        assert tick_thread_seed(tick_ms=2**32, thread_id=1) == (2**32 * 31 + 1) % 2**32

    def test_defaults_in_range(self) -> None:
        assert 0 <= tick_thread_seed() < 2**32


class TestThreadLocalSources:
    """Tests for the per-thread registry."""

    def test_caches_per_thread(self) -> None:
        seeds: list[int] = []

        def factory(seed: int) -> NumpyUniformSource:
            seeds.append(seed)
            return make_uniform_source(seed)

        sources = ThreadLocalSources(factory)
        first = sources.get()
        assert sources.get() is first
        assert len(seeds) == 1

        other: list[object] = []
        thread = threading.Thread(target=lambda: other.append(sources.get()))
        thread.start()
        thread.join()

        assert other[0] is not first
        assert len(seeds) == 2

    def test_reset(self) -> None:
        sources = ThreadLocalSources()
        first = sources.get()
        sources.reset()
        assert sources.get() is not first
        sources.reset()
        sources.reset()

    def test_logs_creation(self) -> None:
        sources = ThreadLocalSources()
        with capture_logs() as logs:
            sources.get()
            sources.get()

        created = [entry for entry in logs if entry["event"] == "thread_source_created"]
        assert len(created) == 1
        assert created[0]["thread_id"] == threading.get_ident()
        assert 0 <= created[0]["seed"] < 2**32

    def test_thread_source_uses_default_registry(self) -> None:
        assert thread_source() is default_sources().get()
