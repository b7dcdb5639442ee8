"""Distribution samplers.

This package contains:
- Normal sampling (Box-Muller)
- Range-bounded exponential sampling (inverse CDF with rejection)
- List generators with optional rounding
- Sampler, a session bound to a SamplerConfig
"""

from __future__ import annotations

from distributions.exponential import (
    EXPONENTIAL_SCALE_DIVISOR,
    check_exponential_args,
    sample_exponential,
)
from distributions.lists import sample_exponential_list, sample_normal_list
from distributions.normal import sample_normal, standard_normal
from distributions.sampler import Sampler

__all__ = [
    # Normal
    "standard_normal",
    "sample_normal",
    # Exponential
    "EXPONENTIAL_SCALE_DIVISOR",
    "check_exponential_args",
    "sample_exponential",
    # Lists
    "sample_normal_list",
    "sample_exponential_list",
    # Sessions
    "Sampler",
]
