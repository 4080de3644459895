from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import sys

import numpy as np

from mosaic_plot.config import DBL_EPSILON, FLT_EPSILON
from mosaic_plot.errors import (
    DegenerateRangeError,
    InvalidRangeError,
    InvalidSpacingError,
    InvalidTicCeilingError,
)

LOGGER = logging.getLogger(__name__)

CANDIDATE_MULTIPLES = (2, 5, 10)
MIN_TIC_CEILING = 2


@dataclass(frozen=True)
class MajorTicLayout:
    count: int
    delta: float
    first: float
    multiple: int

    @property
    def last(self) -> float | None:
        if self.count <= 0:
            return None
        return self.first + (self.count - 1) * self.delta

    def values(self) -> np.ndarray:
        return self.first + np.arange(self.count, dtype=np.float64) * self.delta


@dataclass(frozen=True)
class MinorTicLayout:
    count: int
    delta: float
    first: float

    def values(self) -> np.ndarray:
        return self.first + np.arange(self.count, dtype=np.float64) * self.delta


@dataclass(frozen=True)
class AxisTics:
    """Major and minor tic layout for one linear axis.

    ``xmin`` and ``xmax`` are the padded axis bounds the layout was placed in.
    Major tics are a subset of minor tics, except where floating-point
    stepping makes them differ in the last bits.
    """

    xmin: float
    xmax: float
    major: MajorTicLayout
    minor: MinorTicLayout

    @classmethod
    def from_interval(cls, x1: float, x2: float, dtic: float, *, padding_epsilon: float = FLT_EPSILON) -> "AxisTics":
        return axis_tics_for_interval(x1, x2, dtic, padding_epsilon=padding_epsilon)

    @classmethod
    def from_count(
        cls,
        x1: float,
        x2: float,
        ntic: int,
        *,
        padding_epsilon: float = FLT_EPSILON,
        clamp_ceiling: bool = True,
    ) -> "AxisTics":
        return axis_tics_for_count(
            x1, x2, ntic, padding_epsilon=padding_epsilon, clamp_ceiling=clamp_ceiling
        )

    @property
    def count_major(self) -> int:
        return self.major.count

    @property
    def delta_major(self) -> float:
        return self.major.delta

    @property
    def first_major(self) -> float:
        return self.major.first

    @property
    def last_major(self) -> float | None:
        return self.major.last

    @property
    def count_minor(self) -> int:
        return self.minor.count

    @property
    def delta_minor(self) -> float:
        return self.minor.delta

    @property
    def first_minor(self) -> float:
        return self.minor.first

    @property
    def multiple(self) -> int:
        return self.major.multiple

    def major_values(self) -> np.ndarray:
        return self.major.values()

    def minor_values(self) -> np.ndarray:
        return self.minor.values()

    def as_dict(self) -> dict[str, object]:
        return {
            "count_major": self.count_major,
            "count_minor": self.count_minor,
            "delta_major": self.delta_major,
            "delta_minor": self.delta_minor,
            "first_major": self.first_major,
            "first_minor": self.first_minor,
            "multiple": self.multiple,
        }

    def debug_dump(self) -> str:
        return "".join(f"{key}: {value}\n" for key, value in self.as_dict().items())


def almost_equal(x1: float, x2: float) -> bool:
    return abs(x1 - x2) <= max(abs(x1), abs(x2)) * 100.0 * DBL_EPSILON


def compute_multiple(delta: float) -> int:
    """Return 10, 5 or 2 when delta is that number times a power of ten, else 1.

    Larger multiples are checked first, so a spacing of 10 gives 10 (not 2).
    """
    if not math.isfinite(delta) or delta <= 0:
        raise InvalidSpacingError(f"tic interval must be a finite value > 0, got {delta!r}")
    for m in (10, 5, 2):
        scaled = delta / m
        if scaled == 0.0:
            # Subnormal spacing underflows.
            continue
        exponent = math.log10(scaled)
        if almost_equal(round(exponent), exponent):
            return m
    return 1


def clamp_tic_ceiling(ntic: int, *, clamp: bool = True) -> int:
    n = int(ntic)
    if n >= MIN_TIC_CEILING:
        return n
    if not clamp:
        raise InvalidTicCeilingError(f"maximum tic count must be >= {MIN_TIC_CEILING}, got {ntic!r}")
    LOGGER.debug("clamping maximum tic count %d to %d", n, MIN_TIC_CEILING)
    return MIN_TIC_CEILING


def validate_range(x1: float, x2: float) -> tuple[float, float]:
    """Return (xmin, xmax), rejecting non-finite and zero-width ranges."""
    xmin, xmax = _normalize(x1, x2)
    if xmin == xmax:
        raise DegenerateRangeError(f"axis range has zero width at {xmin!r}")
    return xmin, xmax


def pad_range(x1: float, x2: float, *, epsilon: float = FLT_EPSILON) -> tuple[float, float]:
    xmin, xmax = _normalize(x1, x2)
    pad = (xmax - xmin) * epsilon
    return xmin - pad, xmax + pad


def axis_tics_for_interval(
    x1: float,
    x2: float,
    dtic: float,
    *,
    padding_epsilon: float = FLT_EPSILON,
) -> AxisTics:
    delta = float(dtic)
    if not math.isfinite(delta) or delta <= 0:
        raise InvalidSpacingError(f"major tic interval must be a finite value > 0, got {dtic!r}")
    lo, hi = _normalize(x1, x2)
    if lo == hi:
        return _single_tic(lo, delta)
    xmin, xmax = pad_range(lo, hi, epsilon=padding_epsilon)
    first, count = _place(xmin, xmax, delta)
    major = MajorTicLayout(count=count, delta=delta, first=first, multiple=compute_multiple(delta))
    return AxisTics(xmin=xmin, xmax=xmax, major=major, minor=_minor_layout(major, xmin, xmax))


def axis_tics_for_count(
    x1: float,
    x2: float,
    ntic: int,
    *,
    padding_epsilon: float = FLT_EPSILON,
    clamp_ceiling: bool = True,
) -> AxisTics:
    nmax = clamp_tic_ceiling(ntic, clamp=clamp_ceiling)
    lo, hi = _normalize(x1, x2)
    if lo == hi:
        return _single_tic(lo, _magnitude_spacing(lo))
    xmin, xmax = pad_range(lo, hi, epsilon=padding_epsilon)
    dmax = (xmax - xmin) / (nmax - 1)

    nbest = 0
    best: tuple[int, float, float] | None = None
    # Below the normal float range log10 and the candidate spacings lose meaning.
    candidates = CANDIDATE_MULTIPLES if dmax >= sys.float_info.min else ()
    for m in candidates:
        d = m * 10.0 ** math.floor(math.log10(dmax / m))
        f, n = _place(xmin, xmax, d)
        if n > nmax:
            # One coarsening step is enough since d <= dmax < 10*d.
            d *= 10.0
            f, n = _place(xmin, xmax, d)
        if nbest < n <= nmax:
            nbest = n
            best = (m, d, f)

    if best is not None:
        mbest, dbest, fbest = best
        nbest = _count(fbest, xmax, dbest)
    if best is None or nbest < 2:
        delta = xmax - xmin
        LOGGER.debug("no spacing fits [%r, %r] with %d tics; using its two ends", lo, hi, nmax)
        major = MajorTicLayout(count=2, delta=delta, first=xmin, multiple=compute_multiple(delta))
    else:
        major = MajorTicLayout(count=nbest, delta=dbest, first=fbest, multiple=mbest)
    return AxisTics(xmin=xmin, xmax=xmax, major=major, minor=_minor_layout(major, xmin, xmax))


def _normalize(x1: float, x2: float) -> tuple[float, float]:
    a = float(x1)
    b = float(x2)
    if not (math.isfinite(a) and math.isfinite(b)):
        raise InvalidRangeError(f"axis end points must be finite, got ({x1!r}, {x2!r})")
    xmin, xmax = min(a, b), max(a, b)
    if not math.isfinite(xmax - xmin):
        raise InvalidRangeError(f"axis range ({x1!r}, {x2!r}) is too wide")
    return xmin, xmax


def _count(first: float, xmax: float, delta: float) -> int:
    return 1 + math.floor((xmax - first) / delta)


def _place(xmin: float, xmax: float, delta: float) -> tuple[float, int]:
    ratio = xmin / delta
    if not math.isfinite(ratio) or not math.isfinite((xmax - xmin) / delta):
        raise InvalidSpacingError(f"tic interval {delta!r} is too small for range [{xmin!r}, {xmax!r}]")
    first = math.ceil(ratio) * delta
    return first, _count(first, xmax, delta)


def _minor_layout(major: MajorTicLayout, xmin: float, xmax: float) -> MinorTicLayout:
    dm = major.delta / major.multiple
    # first major tic lies less than one major step above xmin, so at most
    # multiple-1 minor tics precede it.
    k = min(major.multiple - 1, max(0, math.floor((major.first - xmin) / dm)))
    fm = major.first - k * dm
    if k > 0 and fm < xmin:
        k -= 1
        fm = major.first - k * dm
    return MinorTicLayout(count=_count(fm, xmax, dm), delta=dm, first=fm)


def _magnitude_spacing(value: float) -> float:
    if value == 0.0:
        return 1.0
    # 1e-307 is the smallest power of ten that is a normal float.
    return 10.0 ** max(-307, math.floor(math.log10(abs(value))))


def _single_tic(value: float, delta: float) -> AxisTics:
    LOGGER.debug("zero-width axis at %r; placing a single tic", value)
    multiple = compute_multiple(delta)
    major = MajorTicLayout(count=1, delta=delta, first=value, multiple=multiple)
    minor = MinorTicLayout(count=1, delta=delta / multiple, first=value)
    return AxisTics(xmin=value, xmax=value, major=major, minor=minor)
