"""Protocol definitions for random sources.

This module contains Protocol classes defining interfaces for:
- UniformSource: generators of uniform floats in [0, 1)
- IndexSource: generators of uniform integers in [0, stop)

Both are satisfied by ``random.Random`` and by ``core.rng.NumpyUniformSource``.
A ``numpy.random.Generator`` satisfies ``UniformSource`` directly.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = [
    "UniformSource",
    "IndexSource",
]


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for uniform random sources.

    Successive calls must return independent samples uniformly distributed
    over the half-open interval [0, 1). Zero may be returned; samplers that
    take a logarithm of the draw handle that case themselves.

    Implementations are not expected to be thread-safe. Callers sharing one
    source across threads must lock around it.
    """

    def random(self) -> float:
        """Return the next uniform sample in [0, 1)."""
        ...


@runtime_checkable
class IndexSource(Protocol):
    """Protocol for uniform integer sources used by shuffling.

    Contract:
    - randrange(stop) returns an int k with 0 <= k < stop
    - every value in that range is equally likely
    """

    def randrange(self, stop: int) -> int:
        """Return a uniform integer in [0, stop).

        Args:
            stop: Exclusive upper bound. Must be >= 1.

        Returns:
            An integer in [0, stop).
        """
        ...
