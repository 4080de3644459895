from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Literal

import numpy as np

CustomSlot = Literal["primary", "secondary"]


@dataclass(frozen=True)
class CustomTicSet:
    values: tuple[float, ...]
    label: str = ""

    @classmethod
    def of(cls, values: Iterable[float], label: str = "") -> "CustomTicSet":
        return cls(values=tuple(float(v) for v in values), label=str(label))

    def as_array(self) -> np.ndarray:
        return np.asarray(self.values, dtype=np.float64)

    def within(self, vmin: float, vmax: float) -> np.ndarray:
        arr = self.as_array()
        lo, hi = min(vmin, vmax), max(vmin, vmax)
        return arr[(arr >= lo) & (arr <= hi)]


@dataclass(frozen=True)
class CustomTics:
    """Caller-supplied tic overlay, kept apart from the computed layout.

    A slot holding an empty set is still present; ``None`` means not set.
    """

    primary: CustomTicSet | None = None
    secondary: CustomTicSet | None = None

    @property
    def has_primary(self) -> bool:
        return self.primary is not None

    @property
    def has_secondary(self) -> bool:
        return self.secondary is not None

    def with_primary(self, values: Iterable[float], label: str = "") -> "CustomTics":
        return replace(self, primary=CustomTicSet.of(values, label))

    def with_secondary(self, values: Iterable[float], label: str = "") -> "CustomTics":
        return replace(self, secondary=CustomTicSet.of(values, label))

    def without_primary(self) -> "CustomTics":
        return replace(self, primary=None)

    def without_secondary(self) -> "CustomTics":
        return replace(self, secondary=None)

    def slot(self, which: CustomSlot) -> CustomTicSet | None:
        if which == "primary":
            return self.primary
        if which == "secondary":
            return self.secondary
        raise ValueError(f"unknown custom tic slot: {which!r}")
