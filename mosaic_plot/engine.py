from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from mosaic_plot.config import TicsConfig
from mosaic_plot.custom_tics import CustomSlot, CustomTics
from mosaic_plot.tics import AxisTics, axis_tics_for_count, axis_tics_for_interval


@dataclass
class AxisTicsEngine:
    """Holds the tic layout of one axis together with its custom tics.

    Both parts are immutable values; updates swap them, so a range update
    never touches custom tics and setting custom tics never touches the layout.
    """

    tics: AxisTics
    custom: CustomTics = field(default_factory=CustomTics)
    config: TicsConfig = field(default_factory=TicsConfig)

    @classmethod
    def for_interval(
        cls, x1: float, x2: float, dtic: float, *, config: TicsConfig | None = None
    ) -> "AxisTicsEngine":
        cfg = config or TicsConfig()
        tics = axis_tics_for_interval(x1, x2, dtic, padding_epsilon=cfg.padding_epsilon)
        return cls(tics=tics, config=cfg)

    @classmethod
    def for_count(
        cls, x1: float, x2: float, ntic: int | None = None, *, config: TicsConfig | None = None
    ) -> "AxisTicsEngine":
        cfg = config or TicsConfig()
        tics = axis_tics_for_count(
            x1,
            x2,
            cfg.default_max_count if ntic is None else ntic,
            padding_epsilon=cfg.padding_epsilon,
            clamp_ceiling=cfg.clamp_ceiling,
        )
        return cls(tics=tics, config=cfg)

    def update_tics(self, x1: float, x2: float, dtic: float) -> None:
        self.tics = axis_tics_for_interval(x1, x2, dtic, padding_epsilon=self.config.padding_epsilon)

    @property
    def count_major(self) -> int:
        return self.tics.count_major

    @property
    def delta_major(self) -> float:
        return self.tics.delta_major

    @property
    def first_major(self) -> float:
        return self.tics.first_major

    @property
    def count_minor(self) -> int:
        return self.tics.count_minor

    @property
    def delta_minor(self) -> float:
        return self.tics.delta_minor

    @property
    def first_minor(self) -> float:
        return self.tics.first_minor

    @property
    def multiple(self) -> int:
        return self.tics.multiple

    @property
    def custom_tics_primary(self) -> tuple[float, ...] | None:
        return None if self.custom.primary is None else self.custom.primary.values

    @property
    def custom_tics_secondary(self) -> tuple[float, ...] | None:
        return None if self.custom.secondary is None else self.custom.secondary.values

    @property
    def custom_label_primary(self) -> str | None:
        return None if self.custom.primary is None else self.custom.primary.label

    @property
    def custom_label_secondary(self) -> str | None:
        return None if self.custom.secondary is None else self.custom.secondary.label

    @property
    def has_custom_tics_primary(self) -> bool:
        return self.custom.has_primary

    @property
    def has_custom_tics_secondary(self) -> bool:
        return self.custom.has_secondary

    def set_custom_tics_primary(self, tics: Iterable[float], label: str) -> None:
        self.custom = self.custom.with_primary(tics, label)

    def set_custom_tics_secondary(self, tics: Iterable[float], label: str) -> None:
        self.custom = self.custom.with_secondary(tics, label)

    def clear_custom_tics_primary(self) -> None:
        self.custom = self.custom.without_primary()

    def clear_custom_tics_secondary(self) -> None:
        self.custom = self.custom.without_secondary()

    def major_values(self) -> np.ndarray:
        # Primary custom tics replace the computed major tics when present.
        if self.custom.primary is not None:
            return self.custom.primary.as_array()
        return self.tics.major_values()

    def minor_values(self) -> np.ndarray:
        if self.custom.primary is not None:
            return np.empty(0, dtype=np.float64)
        return self.tics.minor_values()

    def visible_custom_tics(self, which: CustomSlot) -> np.ndarray:
        tic_set = self.custom.slot(which)
        if tic_set is None:
            return np.empty(0, dtype=np.float64)
        return tic_set.within(self.tics.xmin, self.tics.xmax)

    def as_dict(self) -> dict[str, object]:
        out = self.tics.as_dict()
        out["custom_label_primary"] = self.custom_label_primary
        out["custom_tics_primary"] = _listed(self.custom_tics_primary)
        out["custom_label_secondary"] = self.custom_label_secondary
        out["custom_tics_secondary"] = _listed(self.custom_tics_secondary)
        return out

    def debug_dump(self) -> str:
        return "".join(f"{key}: {value}\n" for key, value in self.as_dict().items())


def _listed(values: tuple[float, ...] | None) -> list[float] | None:
    return None if values is None else list(values)
