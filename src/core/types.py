"""Core type definitions for the sampling helpers.

This module contains:
- Type aliases for samples and sample lists
- The Rounding sum type used by the list generators
- SamplerConfig, the configuration dataclass
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from core.rng import NumpyUniformSource, make_uniform_source

__all__ = [
    "Sample",
    "SampleList",
    "DEFAULT_MAX_ATTEMPTS",
    "NoRounding",
    "RoundTo",
    "Rounding",
    "NO_ROUNDING",
    "as_rounding",
    "SamplerConfig",
]

# A single drawn value
Sample = float

# Ordered samples in draw order
SampleList = list[Sample]

# Rejected draws tolerated before a sampler gives up
DEFAULT_MAX_ATTEMPTS = 10_000


@dataclass(frozen=True, slots=True)
class NoRounding:
    """Keep samples at full floating-point precision."""

    def apply(self, value: float) -> float:
        return value


@dataclass(frozen=True, slots=True)
class RoundTo:
    """Round samples to a fixed number of fractional digits.

    Rounding uses the built-in ``round``, which rounds halves to even.

    Attributes:
        digits: Number of fractional digits to keep. Must be >= 0.
    """

    digits: int

    def __post_init__(self) -> None:
        """Validate that digits is a non-negative int."""
        if isinstance(self.digits, bool) or not isinstance(self.digits, int):
            raise TypeError(f"digits must be an int, got {type(self.digits).__name__}")
        if self.digits < 0:
            raise ValueError(f"digits must be non-negative, got {self.digits}")

    def apply(self, value: float) -> float:
        return round(value, self.digits)


Rounding = NoRounding | RoundTo

NO_ROUNDING = NoRounding()


def as_rounding(decimals: int | Rounding | None) -> Rounding:
    """Normalize a ``decimals`` argument to a Rounding value.

    Args:
        decimals: None for no rounding, an int digit count, or a Rounding.

    Returns:
        The matching Rounding instance.

    Raises:
        TypeError: If decimals has an unsupported type.
        ValueError: If decimals is a negative int.
    """
    if decimals is None:
        return NO_ROUNDING
    if isinstance(decimals, (NoRounding, RoundTo)):
        return decimals
    if isinstance(decimals, int) and not isinstance(decimals, bool):
        return RoundTo(decimals)
    raise TypeError(f"decimals must be None, an int or a Rounding, got {type(decimals).__name__}")


@dataclass(frozen=True, slots=True)
class SamplerConfig:
    """Configuration for a sampling session.

    Attributes:
        seed: Seed for the uniform source. None draws entropy from the OS.
        max_attempts: Rejected draws tolerated before a sampler raises.

    Example:
        >>> config = SamplerConfig.from_mapping({"seed": 7})
        >>> config.max_attempts
        10000
    """

    seed: int | None = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SamplerConfig:
        """Build a config from a mapping, rejecting unknown keys.

        Raises:
            ValueError: If the mapping has keys that are not config fields.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown sampler config keys: {unknown}")
        return cls(**dict(data))

    def make_source(self) -> NumpyUniformSource:
        """Create a uniform source seeded from this config."""
        return make_uniform_source(self.seed)
