from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from mosaic_plot.config import TicsConfig
from mosaic_plot.tics import AxisTics, axis_tics_for_count, axis_tics_for_interval


@dataclass(frozen=True)
class Sampling:
    """Uniform sampling: ``count`` values ``first + i*delta``."""

    count: int
    delta: float = 1.0
    first: float = 0.0

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("count must be >= 1")
        if self.delta == 0:
            raise ValueError("delta must be non-zero")

    @property
    def last(self) -> float:
        return self.first + float(self.count - 1) * self.delta

    def value(self, index: int) -> float:
        return self.first + float(index) * self.delta

    def values(self) -> np.ndarray:
        return self.first + np.arange(self.count, dtype=np.float64) * self.delta

    def range(self) -> tuple[float, float]:
        a, b = self.first, self.last
        return (min(a, b), max(a, b))

    def tics(
        self,
        *,
        dtic: float | None = None,
        ntic: int | None = None,
        config: TicsConfig | None = None,
    ) -> AxisTics:
        if dtic is not None and ntic is not None:
            raise ValueError("pass at most one of dtic and ntic")
        cfg = config or TicsConfig()
        if dtic is not None:
            return axis_tics_for_interval(self.first, self.last, dtic, padding_epsilon=cfg.padding_epsilon)
        return axis_tics_for_count(
            self.first,
            self.last,
            cfg.default_max_count if ntic is None else ntic,
            padding_epsilon=cfg.padding_epsilon,
            clamp_ceiling=cfg.clamp_ceiling,
        )
