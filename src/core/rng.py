"""Random number generation utilities.

This module contains:
- NumpyUniformSource: adapter exposing a numpy Generator as a uniform
  float source and a uniform index source
- tick_thread_seed: the coarse tick/thread-identity seed used for
  per-thread generators
- ThreadLocalSources: an explicit registry holding one source per thread
- thread_source: convenience access to a process-wide default registry

The per-thread seed is not cryptographic. Two registries created in the same
millisecond on the same thread produce the same sequence.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

import numpy as np

from core.logging import get_logger
from core.protocols import IndexSource

__all__ = [
    "NumpyUniformSource",
    "make_uniform_source",
    "tick_thread_seed",
    "ThreadLocalSources",
    "default_sources",
    "thread_source",
]

logger = get_logger(__name__)

_SEED_MASK = 0xFFFFFFFF


class NumpyUniformSource:
    """Uniform float and index source backed by ``numpy.random.Generator``.

    Satisfies both UniformSource and IndexSource.

    Attributes:
        generator: The wrapped numpy generator.
    """

    def __init__(self, generator: np.random.Generator) -> None:
        self.generator = generator

    def random(self) -> float:
        """Return a uniform float in [0, 1)."""
        return float(self.generator.random())

    def randrange(self, stop: int) -> int:
        """Return a uniform integer in [0, stop).

        Raises:
            ValueError: If stop < 1.
        """
        if stop < 1:
            raise ValueError(f"randrange stop must be positive, got {stop}")
        return int(self.generator.integers(0, stop))


def make_uniform_source(seed: int | None = None) -> NumpyUniformSource:
    """Create a NumpyUniformSource.

    Args:
        seed: Seed for ``numpy.random.default_rng``. None uses OS entropy.
    """
    return NumpyUniformSource(np.random.default_rng(seed))


def tick_thread_seed(tick_ms: int | None = None, thread_id: int | None = None) -> int:
    """Derive a 32-bit seed from a millisecond tick and a thread identity.

    Computes ``(tick_ms * 31 + thread_id) mod 2**32``.

    Args:
        tick_ms: Millisecond tick. Defaults to the monotonic clock.
        thread_id: Thread identity. Defaults to the calling thread's ident.

    Returns:
        A seed in [0, 2**32).
    """
    if tick_ms is None:
        tick_ms = time.monotonic_ns() // 1_000_000
    if thread_id is None:
        thread_id = threading.get_ident()
    return (tick_ms * 31 + thread_id) & _SEED_MASK


class ThreadLocalSources:
    """Registry holding one lazily created source per thread.

    A thread's source is created on its first get() and kept for the life of
    the thread. Sources are never shared between threads, so get() needs no
    locking.

    Example:
        >>> sources = ThreadLocalSources()
        >>> sources.get() is sources.get()
        True
    """

    def __init__(self, factory: Callable[[int], IndexSource] | None = None) -> None:
        """Initialize the registry.

        Args:
            factory: Callable building a source from an int seed.
                Defaults to make_uniform_source.
        """
        self._factory = factory if factory is not None else make_uniform_source
        self._local = threading.local()

    def get(self) -> IndexSource:
        """Return the calling thread's source, creating it on first use."""
        source = getattr(self._local, "source", None)
        if source is None:
            seed = tick_thread_seed()
            source = self._factory(seed)
            self._local.source = source
            logger.debug("thread_source_created", thread_id=threading.get_ident(), seed=seed)
        return source

    def reset(self) -> None:
        """Drop the calling thread's source; the next get() creates a new one."""
        self._local.__dict__.pop("source", None)


_default_sources = ThreadLocalSources()


def default_sources() -> ThreadLocalSources:
    """Return the process-wide default registry."""
    return _default_sources


def thread_source() -> IndexSource:
    """Return the calling thread's source from the default registry."""
    return _default_sources.get()
