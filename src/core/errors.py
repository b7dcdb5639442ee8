"""Error types raised by the samplers."""

from __future__ import annotations

__all__ = ["RejectionLimitError"]


class RejectionLimitError(RuntimeError):
    """Raised when a rejection loop exhausts its attempt budget.

    Attributes:
        sampler: Name of the sampler that gave up.
        attempts: Number of draws that were rejected.
    """

    def __init__(self, sampler: str, attempts: int) -> None:
        self.sampler = sampler
        self.attempts = attempts
        super().__init__(
            f"{sampler} rejected {attempts} consecutive draws; "
            "check the distribution parameters or raise max_attempts"
        )
