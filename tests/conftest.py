from __future__ import annotations

from collections.abc import Iterable

import pytest


class ScriptedSource:
    """Deterministic source replaying fixed draws.

    random() cycles through ``floats``; randrange() pops from ``indices``
    and records the stop argument it was called with.
    """

    def __init__(self, floats: Iterable[float] = (0.5,), indices: Iterable[int] = ()) -> None:
        self._floats = list(floats)
        self._indices = list(indices)
        self._pos = 0
        self.float_calls = 0
        self.randrange_stops: list[int] = []

    def random(self) -> float:
        value = self._floats[self._pos % len(self._floats)]
        self._pos += 1
        self.float_calls += 1
        return value

    def randrange(self, stop: int) -> int:
        self.randrange_stops.append(stop)
        return self._indices.pop(0)


@pytest.fixture
def scripted_source() -> type[ScriptedSource]:
    return ScriptedSource
