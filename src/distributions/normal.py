"""Normal (Gaussian) sampling via the Box-Muller transform.

This module provides:
- standard_normal: the basic (sine branch) Box-Muller transform of two uniforms
- sample_normal: one N(mu, sigma^2) sample drawn from a uniform source
"""

from __future__ import annotations

import math

from core.errors import RejectionLimitError
from core.logging import get_logger
from core.protocols import UniformSource
from core.types import DEFAULT_MAX_ATTEMPTS

__all__ = ["standard_normal", "sample_normal"]

logger = get_logger(__name__)


def standard_normal(u1: float, u2: float) -> float:
    """Map two uniforms to one standard normal sample.

    Computes ``sqrt(-2 ln u1) * sin(2 pi u2)``.

    Args:
        u1: Uniform sample in (0, 1).
        u2: Uniform sample in [0, 1).

    Raises:
        ValueError: If u1 <= 0, where the logarithm is undefined.
    """
    if u1 <= 0.0:
        raise ValueError(f"u1 must be positive, got {u1}")
    return math.sqrt(-2.0 * math.log(u1)) * math.sin(2.0 * math.pi * u2)


def sample_normal(
    uniform_source: UniformSource,
    mu: float = 0.0,
    sigma: float = 1.0,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> float:
    """Draw one sample from N(mu, sigma^2).

    Draws u1 then u2 from the source. A u1 of exactly zero is discarded and
    redrawn before u2 is taken.

    Args:
        uniform_source: Source of uniform floats in [0, 1).
        mu: Mean of the distribution.
        sigma: Standard deviation of the distribution.
        max_attempts: Zero draws of u1 tolerated before giving up.

    Returns:
        ``mu + sigma * z`` where z is standard normal.

    Raises:
        ValueError: If max_attempts < 1.
        RejectionLimitError: If every u1 draw in the budget was zero.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")

    for _ in range(max_attempts):
        u1 = uniform_source.random()
        if u1 > 0.0:
            break
    else:
        logger.warning("rejection_limit_exceeded", sampler="sample_normal", attempts=max_attempts)
        raise RejectionLimitError("sample_normal", max_attempts)

    u2 = uniform_source.random()
    return mu + sigma * standard_normal(u1, u2)
