"""List generators built on the single-sample samplers.

Each generator validates all arguments before drawing, then calls its
sampler ``count`` times and keeps the results in draw order. Optional
rounding uses the built-in ``round`` (half to even).
"""

from __future__ import annotations

from core.protocols import UniformSource
from core.types import DEFAULT_MAX_ATTEMPTS, Rounding, SampleList, as_rounding
from distributions.exponential import check_exponential_args, sample_exponential
from distributions.normal import sample_normal

__all__ = ["sample_normal_list", "sample_exponential_list"]


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an int, got {type(count).__name__}")
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")


def sample_normal_list(
    uniform_source: UniformSource,
    count: int,
    mu: float = 0.0,
    sigma: float = 1.0,
    decimals: int | Rounding | None = None,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> SampleList:
    """Draw ``count`` samples from N(mu, sigma^2).

    Args:
        uniform_source: Source of uniform floats in [0, 1).
        count: Number of samples. Must be >= 0.
        mu: Mean of the distribution.
        sigma: Standard deviation of the distribution.
        decimals: None, a digit count, or a Rounding value.
        max_attempts: Forwarded to sample_normal.

    Returns:
        List of ``count`` samples in draw order.

    Raises:
        TypeError: If count or decimals has the wrong type.
        ValueError: If count or decimals is negative, or max_attempts < 1.
    """
    _check_count(count)
    rounding = as_rounding(decimals)
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")

    return [
        rounding.apply(sample_normal(uniform_source, mu, sigma, max_attempts=max_attempts))
        for _ in range(count)
    ]


def sample_exponential_list(
    uniform_source: UniformSource,
    count: int,
    min_value: float,
    max_value: float,
    mu: float = 0.0,
    sigma: float = 1.0,
    lambda_: float = 1.0,
    decimals: int | Rounding | None = None,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> SampleList:
    """Draw ``count`` range-bounded exponential samples.

    ``mu`` and ``sigma`` are inert, as in sample_exponential. Rounding is
    applied after the range check, so a rounded value can equal max_value
    when the raw draw lies within half a unit of the last digit below it.

    Returns:
        List of ``count`` samples in draw order.

    Raises:
        TypeError: If count or decimals has the wrong type.
        ValueError: If count or decimals is negative or the sampler
            arguments are invalid.
    """
    _check_count(count)
    rounding = as_rounding(decimals)
    check_exponential_args(min_value, max_value, lambda_, max_attempts)

    return [
        rounding.apply(
            sample_exponential(
                uniform_source,
                min_value,
                max_value,
                mu,
                sigma,
                lambda_,
                max_attempts=max_attempts,
            )
        )
        for _ in range(count)
    ]
