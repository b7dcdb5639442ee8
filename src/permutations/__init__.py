"""Permutation helpers."""

from __future__ import annotations

from permutations.shuffle import fisher_yates, shuffle

__all__ = ["fisher_yates", "shuffle"]
