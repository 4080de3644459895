from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import os

import numpy as np

LOGGER = logging.getLogger(__name__)

FLT_EPSILON = float(np.finfo(np.float32).eps)
DBL_EPSILON = float(np.finfo(np.float64).eps)

DEFAULT_MAX_COUNT = 10


@dataclass(frozen=True)
class TicsConfig:
    padding_epsilon: float = FLT_EPSILON
    default_max_count: int = DEFAULT_MAX_COUNT
    clamp_ceiling: bool = True

    def __post_init__(self) -> None:
        if not math.isfinite(self.padding_epsilon) or self.padding_epsilon <= 0:
            raise ValueError("padding_epsilon must be a finite value > 0")
        if self.default_max_count < 2:
            raise ValueError("default_max_count must be >= 2")

    @classmethod
    def from_env(
        cls,
        *,
        epsilon_env_var: str = "MOSAIC_TICS_PADDING_EPSILON",
        max_count_env_var: str = "MOSAIC_TICS_DEFAULT_MAX_COUNT",
        clamp_env_var: str = "MOSAIC_TICS_CLAMP_CEILING",
        clamp_default: str = "1",
    ) -> "TicsConfig":
        epsilon = _parse_positive_float(epsilon_env_var, FLT_EPSILON)
        max_count = _parse_max_count(max_count_env_var, DEFAULT_MAX_COUNT)
        clamp = os.getenv(clamp_env_var, clamp_default).strip() == "1"
        return cls(padding_epsilon=epsilon, default_max_count=max_count, clamp_ceiling=clamp)


def _parse_positive_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var, "").strip()
    if raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        LOGGER.warning("ignoring %s=%r: not a number", env_var, raw)
        return default
    if not math.isfinite(value) or value <= 0:
        LOGGER.warning("ignoring %s=%r: must be a finite value > 0", env_var, raw)
        return default
    return value


def _parse_max_count(env_var: str, default: int) -> int:
    raw = os.getenv(env_var, "").strip()
    if raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        LOGGER.warning("ignoring %s=%r: not an integer", env_var, raw)
        return default
    if value < 2:
        LOGGER.warning("ignoring %s=%r: must be >= 2", env_var, raw)
        return default
    return value
