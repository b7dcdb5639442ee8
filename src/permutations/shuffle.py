"""In-place Fisher-Yates shuffling.

This module provides:
- fisher_yates: the shuffle over an explicit index-drawing callable
- shuffle: the shuffle over an IndexSource, defaulting to the calling
  thread's source from core.rng
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

from core.protocols import IndexSource
from core.rng import thread_source

__all__ = ["fisher_yates", "shuffle"]


def fisher_yates(sequence: MutableSequence[Any], draw_index: Callable[[int], int]) -> None:
    """Shuffle ``sequence`` in place.

    For n from len(sequence) - 1 down to 1, draws k = draw_index(n) with
    0 <= k <= n and swaps positions k and n. Sequences of length 0 or 1 are
    left untouched and draw_index is never called.

    All indices are drawn and checked before the first swap, so a failed
    draw leaves the sequence unchanged.

    Args:
        sequence: Mutable sequence to permute.
        draw_index: Callable returning a uniform int in [0, upper], given
            the inclusive upper bound.

    Raises:
        ValueError: If draw_index returns an index outside [0, upper].
    """
    swaps: list[tuple[int, int]] = []
    for n in range(len(sequence) - 1, 0, -1):
        k = draw_index(n)
        if not 0 <= k <= n:
            raise ValueError(f"Drawn index {k} outside [0, {n}]")
        swaps.append((k, n))

    for k, n in swaps:
        sequence[k], sequence[n] = sequence[n], sequence[k]


def shuffle(sequence: MutableSequence[Any], source: IndexSource | None = None) -> None:
    """Shuffle ``sequence`` in place with a uniform index source.

    Args:
        sequence: Mutable sequence to permute.
        source: Index source. Defaults to the calling thread's source, which
            is seeded from a tick count and the thread identity and must not
            be used where unpredictability matters.
    """
    if source is None:
        source = thread_source()
    fisher_yates(sequence, lambda upper: source.randrange(upper + 1))
