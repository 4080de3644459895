from __future__ import annotations

import math
from typing import Sequence

from mosaic_plot.tics import AxisTics

MAX_DECIMALS = 12


def tic_decimals(delta: float | None) -> int:
    """Fewest fractional digits that write every multiple of delta exactly."""
    if delta is None or not math.isfinite(delta) or delta <= 0:
        return 6
    for decimals in range(MAX_DECIMALS + 1):
        scaled = delta * 10.0**decimals
        if abs(scaled - round(scaled)) <= 1e-9 * max(1.0, abs(scaled)):
            return decimals
    return MAX_DECIMALS


def format_tic(value: float, delta: float | None = None) -> str:
    if not math.isfinite(value):
        return str(value)
    if delta is not None and math.isfinite(delta) and delta > 0 and abs(value) <= delta * 1e-9:
        # Stepping through zero leaves values like -5.55e-17.
        value = 0.0
    magnitude = abs(value)
    if magnitude != 0 and (magnitude >= 1e6 or magnitude < 1e-6):
        return f"{value:.4e}"
    text = f"{value:.{tic_decimals(delta)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_tics(values: Sequence[float], delta: float | None = None) -> list[str]:
    if delta is None and len(values) > 1:
        delta = abs(float(values[1]) - float(values[0]))
    return [format_tic(float(v), delta) for v in values]


def major_labels(tics: AxisTics) -> list[str]:
    return format_tics(tics.major_values().tolist(), tics.delta_major)


def minor_labels(tics: AxisTics) -> list[str]:
    return format_tics(tics.minor_values().tolist(), tics.delta_minor)
