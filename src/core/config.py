"""Config loading for sampler sessions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.types import SamplerConfig

__all__ = ["load_json", "load_config"]


def load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_config(path: Path) -> SamplerConfig:
    """Load a SamplerConfig from a JSON object file.

    Raises:
        ValueError: If the file does not hold a JSON object or has unknown keys.
    """
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Sampler config must be a JSON object, got {type(data).__name__}")
    return SamplerConfig.from_mapping(data)
