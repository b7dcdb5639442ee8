"""Range-bounded exponential sampling.

Samples come from inverse-CDF draws of Exp(lambda), rescaled so that six
units of the raw draw span the requested range, with any draw landing at or
beyond ``max_value`` rejected and redrawn. The result is always in
``[min_value, max_value)``. The rejection step truncates the tail, so the
output is a truncated, rescaled exponential rather than Exp(lambda) itself.
"""

from __future__ import annotations

import math

from core.errors import RejectionLimitError
from core.logging import get_logger
from core.protocols import UniformSource
from core.types import DEFAULT_MAX_ATTEMPTS

__all__ = [
    "EXPONENTIAL_SCALE_DIVISOR",
    "check_exponential_args",
    "sample_exponential",
]

logger = get_logger(__name__)

# Raw draws are scaled by (max_value - min_value) / 6
EXPONENTIAL_SCALE_DIVISOR = 6.0


def check_exponential_args(
    min_value: float,
    max_value: float,
    lambda_: float,
    max_attempts: int,
) -> None:
    """Validate exponential sampler arguments.

    Raises:
        ValueError: If the range is empty or not finite, lambda_ is not a
            positive finite number, or max_attempts < 1.
    """
    if not (math.isfinite(min_value) and math.isfinite(max_value)):
        raise ValueError(f"Range bounds must be finite, got [{min_value}, {max_value})")
    if min_value >= max_value:
        raise ValueError(f"min_value must be less than max_value, got [{min_value}, {max_value})")
    if not math.isfinite(max_value - min_value):
        raise ValueError(f"Range width overflows, got [{min_value}, {max_value})")
    if not math.isfinite(lambda_) or lambda_ <= 0:
        raise ValueError(f"lambda_ must be positive and finite, got {lambda_}")
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")


def sample_exponential(
    uniform_source: UniformSource,
    min_value: float,
    max_value: float,
    mu: float = 0.0,
    sigma: float = 1.0,
    lambda_: float = 1.0,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> float:
    """Draw one range-bounded exponential sample.

    Each attempt computes::

        t = -ln(u) / lambda_
        result = min_value + t * (max_value - min_value) / 6

    and returns the first result below ``max_value``.

    Args:
        uniform_source: Source of uniform floats in [0, 1).
        min_value: Inclusive lower bound; the density peaks here.
        max_value: Exclusive upper bound.
        mu: Inert. Accepted for signature symmetry with sample_normal.
        sigma: Inert. Accepted for signature symmetry with sample_normal.
        lambda_: Rate parameter. Larger values concentrate mass near min_value.
        max_attempts: Rejected draws tolerated before giving up.

    Returns:
        A float in [min_value, max_value).

    Raises:
        ValueError: On invalid arguments (see check_exponential_args).
        RejectionLimitError: If max_attempts consecutive draws overshoot.
    """
    check_exponential_args(min_value, max_value, lambda_, max_attempts)
    increment = (max_value - min_value) / EXPONENTIAL_SCALE_DIVISOR

    for _ in range(max_attempts):
        u = uniform_source.random()
        # u == 0 gives t == inf, which is rejected below
        t = -math.log(u) / lambda_ if u > 0.0 else math.inf
        result = min_value + t * increment
        if result < max_value:
            return result

    logger.warning("rejection_limit_exceeded", sampler="sample_exponential", attempts=max_attempts)
    raise RejectionLimitError("sample_exponential", max_attempts)
