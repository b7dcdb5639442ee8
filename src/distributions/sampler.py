"""Config-driven sampling session.

Sampler binds one uniform source and one attempt budget, both taken from a
SamplerConfig, and forwards them to every sampling and shuffling operation.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from pathlib import Path
from typing import Any

from core.config import load_config
from core.protocols import IndexSource, UniformSource
from core.types import Rounding, SamplerConfig, SampleList
from distributions.exponential import sample_exponential
from distributions.lists import sample_exponential_list, sample_normal_list
from distributions.normal import sample_normal
from permutations.shuffle import shuffle

__all__ = ["Sampler"]


class Sampler:
    """Sampling session bound to a config.

    Attributes:
        config: The session configuration.
        source: Uniform source shared by all operations of the session.

    Example:
        >>> sampler = Sampler(SamplerConfig(seed=3))
        >>> 0.0 <= sampler.exponential(0.0, 1.0) < 1.0
        True
    """

    def __init__(
        self,
        config: SamplerConfig | None = None,
        source: UniformSource | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            config: Session configuration. Defaults to SamplerConfig().
            source: Uniform source to use instead of one built from
                ``config.seed``. Must also provide randrange() for shuffle().
        """
        self.config = config if config is not None else SamplerConfig()
        self.source = source if source is not None else self.config.make_source()

    @classmethod
    def from_path(cls, path: Path) -> Sampler:
        """Create a session from a JSON config file."""
        return cls(load_config(path))

    @property
    def max_attempts(self) -> int:
        return self.config.max_attempts

    def normal(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return sample_normal(self.source, mu, sigma, max_attempts=self.max_attempts)

    def exponential(
        self,
        min_value: float,
        max_value: float,
        mu: float = 0.0,
        sigma: float = 1.0,
        lambda_: float = 1.0,
    ) -> float:
        return sample_exponential(
            self.source, min_value, max_value, mu, sigma, lambda_, max_attempts=self.max_attempts
        )

    def normal_list(
        self,
        count: int,
        mu: float = 0.0,
        sigma: float = 1.0,
        decimals: int | Rounding | None = None,
    ) -> SampleList:
        return sample_normal_list(
            self.source, count, mu, sigma, decimals, max_attempts=self.max_attempts
        )

    def exponential_list(
        self,
        count: int,
        min_value: float,
        max_value: float,
        mu: float = 0.0,
        sigma: float = 1.0,
        lambda_: float = 1.0,
        decimals: int | Rounding | None = None,
    ) -> SampleList:
        return sample_exponential_list(
            self.source,
            count,
            min_value,
            max_value,
            mu,
            sigma,
            lambda_,
            decimals,
            max_attempts=self.max_attempts,
        )

    def shuffle(self, sequence: MutableSequence[Any]) -> None:
        """Shuffle ``sequence`` in place with the session source.

        Raises:
            TypeError: If the session source has no randrange().
        """
        if not isinstance(self.source, IndexSource):
            raise TypeError(f"{type(self.source).__name__} does not provide randrange()")
        shuffle(sequence, self.source)
